"""
Static Controller

Renders a single view, optionally with data produced by a ``get_data``
hook defined on the subclass.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from .base import AbstractController, resolve

logger = logging.getLogger("controllerkit.static")


class StaticController(AbstractController):
    """
    Single-page controller.

    Define ``get_data(req, res)`` (sync or async) on a subclass to feed the
    template; without it the view is rendered with empty data.
    """

    actions = ("index",)
    get_data: Optional[Callable[[Any, Any], Any]] = None

    def make_routes(self, router: Any, mount_path: str = "") -> None:
        if mount_path:
            self.make_full_root(mount_path)

        router.get(self.url_root, self.middleware, self.index)
        logger.debug("%s route registered under %s", type(self).__name__, self.url_root_full)

    async def index(self, req: Any, res: Any) -> Any:
        """The single action: renders the page at ``view_root``."""
        data = {}
        if self.get_data is not None:
            data = await resolve(self.get_data(req, res))

        return await resolve(res.render(self.view_root, data))
