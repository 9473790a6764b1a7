"""
Controller Base Class

Provides AbstractController and the path helpers shared by every
controller.
"""

from __future__ import annotations

import inspect
import logging
import posixpath
from typing import Any, Dict, Optional, Sequence, Tuple, TYPE_CHECKING

from ..faults import PureVirtualCallFault, UnknownActionFault

if TYPE_CHECKING:
    from ..config import ControllerConfig
    from .protocols import Middleware, Router

logger = logging.getLogger("controllerkit.controller")


def normalize_path(path: str) -> str:
    """
    Normalize a URL or view path.

    Collapses duplicate separators and resolves ``.``/``..`` segments while
    keeping a trailing separator, so ``url_root_full + id`` stays a valid
    URL.
    """
    if not path:
        return "."
    normalized = posixpath.normpath(path)
    # POSIX keeps a leading "//"; URLs must not
    if normalized.startswith("//"):
        normalized = "/" + normalized.lstrip("/")
    if path.endswith("/") and not normalized.endswith("/"):
        normalized += "/"
    return normalized


def join_paths(*parts: Optional[str]) -> str:
    """Join path fragments and normalize; absolute fragments do not reset the join."""
    joined = "/".join(part for part in parts if part)
    return normalize_path(joined)


async def resolve(result: Any) -> Any:
    """Await collaborator results that are awaitable, pass the rest through."""
    if inspect.isawaitable(result):
        return await result
    return result


class AbstractController:
    """
    Base class for all controllers.

    A controller is bound to a URL prefix (``url_root``) and a view
    namespace (``view_root``). Subclasses declare the actions they serve in
    ``actions`` and register them with a router in ``make_routes``.

    Args:
        view_root: Template path the controller renders into
        url_root: Route prefix (default ``/``)
        human_name: Display label used in navigation menus
        mount_path: Prefix under which ``url_root`` is nested
        middleware: Single hook or ordered list of hooks run before actions
        router: When given, routes are registered immediately

    Example:
        class AboutController(StaticController):
            async def get_data(self, req, res):
                return {"version": "1.2"}

        AboutController(view_root="pages/about", url_root="/about/",
                        human_name="About", router=router)
    """

    actions: Tuple[str, ...] = ()

    def __init__(
        self,
        view_root: Optional[str] = None,
        url_root: Optional[str] = "/",
        human_name: Optional[str] = None,
        *,
        mount_path: str = "",
        middleware: Any = None,
        router: Optional["Router"] = None,
    ):
        self.view_root = view_root
        self.url_root = url_root or "/"
        self.human_name = human_name
        self.middleware: Tuple["Middleware", ...] = ()
        self.url_root_full = self.url_root

        self.set_middleware(middleware)
        self.make_full_root(mount_path)

        if router:
            self.make_routes(router, mount_path)

    @classmethod
    def from_config(cls, config: "ControllerConfig", **kwargs: Any) -> "AbstractController":
        """
        Build a controller from a loaded ``ControllerConfig``.

        Collaborators (router, model, middleware) are passed as keyword
        arguments since they are code, not configuration.
        """
        return cls(
            view_root=config.view_root,
            url_root=config.url_root,
            human_name=config.human_name,
            mount_path=config.mount_path,
            **kwargs,
        )

    @classmethod
    def extend(
        cls,
        members: Optional[Dict[str, Any]] = None,
        static: Optional[Dict[str, Any]] = None,
        name: Optional[str] = None,
    ) -> type:
        """
        Create a subclass from plain dictionaries.

        ``members`` become regular attributes/methods of the subclass;
        callables in ``static`` become static methods.
        """
        namespace: Dict[str, Any] = dict(members or {})
        for key, value in (static or {}).items():
            if inspect.isfunction(value):
                value = staticmethod(value)
            namespace[key] = value

        return type(name or f"Extended{cls.__name__}", (cls,), namespace)

    def get_link(self) -> Tuple[str, Optional[str]]:
        """Navigation entry: url root without its leading separator, and the human name."""
        url = self.url_root[1:] if self.url_root.startswith("/") else self.url_root
        return url, self.human_name

    def make_full_root(self, mount_path: Optional[str] = "") -> str:
        """Recompute ``url_root_full`` as ``mount_path`` joined with ``url_root``."""
        self.url_root_full = join_paths(mount_path or "", self.url_root)
        return self.url_root_full

    def set_middleware(self, middleware: Any = None) -> Tuple["Middleware", ...]:
        """Append a hook or an ordered list of hooks to the controller middleware."""
        if middleware is None:
            added: Sequence["Middleware"] = ()
        elif isinstance(middleware, (list, tuple)):
            added = tuple(middleware)
        else:
            added = (middleware,)

        self.middleware = self.middleware + tuple(added)
        return self.middleware

    def make_routes(self, router: "Router", mount_path: str = "") -> None:
        raise PureVirtualCallFault(f"{type(self).__name__}.make_routes")

    def register_routes(self, router: "Router", mount_path: str = "") -> None:
        """Register every action of this controller with ``router``."""
        self.make_routes(router, mount_path)

    async def handle(self, action: str, req: Any, res: Any) -> Any:
        """Run ``action`` directly, without going through a router."""
        if action not in self.actions:
            raise UnknownActionFault(type(self).__name__, action)
        return await getattr(self, action)(req, res)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(url_root={self.url_root_full!r}, view_root={self.view_root!r})"
