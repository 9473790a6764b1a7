"""
CRUD Controller

Wires the five HTTP routes of a resource to list/create/read/update/destroy
calls against an injected model, designed mainly for back-offices and
admin interfaces.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable, Dict, Optional

from ..faults import (
    Fault,
    FormError,
    ItemNotFoundFault,
    ItemSavedIncorrectlyFault,
    ModelMissingFault,
    RenderDataFault,
    Severity,
)
from .base import AbstractController, normalize_path, resolve
from .identity import raw_id

logger = logging.getLogger("controllerkit.crud")

LOG_LEVELS = {
    Severity.INFO: logging.INFO,
    Severity.WARN: logging.WARNING,
    Severity.ERROR: logging.ERROR,
    Severity.FATAL: logging.CRITICAL,
}


def item_id(item: Any) -> Any:
    """Identifier of a record, whether it is a mapping or an object."""
    if isinstance(item, Mapping):
        return item.get("id")
    return getattr(item, "id", None)


class CrudController(AbstractController):
    """
    Generic CRUD controller over a model collaborator.

    Override points:
        list_query(req, res): filter used by ``list`` (default: no filter)
        list_fields: field selection used by ``list`` (default: all fields)
        parse_form(form_data): validation/sanitation of submitted forms;
            raise ``FormError`` to send the user back to the item view

    Args:
        model: Persistence collaborator (required)
        id_strategy: Coerces the raw request identifier (default: opaque)
        **kwargs: See ``AbstractController``
    """

    actions = ("list", "create", "read", "update", "destroy")
    form_actions = ("create", "update")
    list_fields: str = ""

    def __init__(
        self,
        view_root: Optional[str] = None,
        url_root: Optional[str] = "/",
        human_name: Optional[str] = None,
        *,
        model: Any = None,
        id_strategy: Callable[[Any], Any] = raw_id,
        **kwargs: Any,
    ):
        if not model:
            raise ModelMissingFault(type(self).__name__)

        self.model = model
        self.id_strategy = id_strategy

        super().__init__(view_root, url_root, human_name, **kwargs)

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------

    def parse_form(self, form_data: Any) -> Any:
        """
        Override this method to provide validation, sanitation, transformation and so on.

        May be a coroutine. Raise ``FormError`` when the form is invalid.
        """
        return form_data

    async def parse_form_middleware(self, req: Any, res: Any, call_next: Callable[[], Any]) -> Any:
        """Run ``parse_form`` on the request body and annotate the request."""
        try:
            req.parsed = await resolve(self.parse_form(req.body))
            req.parse_error = None
        except FormError as error:
            logger.debug("Form rejected by %s: %s", type(self).__name__, error.errors)
            req.parsed = error.parsed if error.parsed is not None else req.body
            req.parse_error = error

        return await call_next()

    def list_query(self, req: Any, res: Any) -> Dict[str, Any]:
        return {}

    # ------------------------------------------------------------------
    # Protected helpers
    # ------------------------------------------------------------------

    def _get_id(self, req: Any) -> Any:
        """Extracts id from request, route parameter first."""
        params = getattr(req, "params", None) or {}
        query = getattr(req, "query", None) or {}
        return self.id_strategy(params.get("id") or query.get("id"))

    async def _render_item(self, res: Any, data: Dict[str, Any]) -> Any:
        if "item" not in data:
            raise RenderDataFault("item", "_render_item")
        return await resolve(res.render(normalize_path(f"{self.view_root}/item"), data))

    async def _render_list(self, res: Any, items: Any) -> Any:
        return await resolve(res.render(normalize_path(f"{self.view_root}/list"), {"list": items}))

    async def _error(self, res: Any, error: Any, status: Optional[int] = None) -> Any:
        """Sets error status (500 unless given) and sends the error."""
        code = status or 500
        if isinstance(error, Fault):
            level = LOG_LEVELS.get(error.severity, logging.WARNING)
            logger.log(level, "%s responded %d: %s", type(self).__name__, code, error.code)
        else:
            logger.warning("%s responded %d: %r", type(self).__name__, code, error)
        return await resolve(res.status(code).send(error))

    def _list_request(self, req: Any, res: Any) -> Any:
        return self.model.find(self.list_query(req, res), self.list_fields or "")

    def _create_request(self, req: Any, res: Any) -> Any:
        return self.model.create(getattr(req, "parsed", None))

    def _read_request(self, req: Any, res: Any) -> Any:
        return self.model.find_by_id(self._get_id(req))

    def _update_request(self, req: Any, res: Any) -> Any:
        return self.model.update_by_id(self._get_id(req), getattr(req, "parsed", None))

    def _destroy_request(self, req: Any, res: Any) -> Any:
        return self.model.remove_by_id(self._get_id(req))

    async def _render_form_error(self, req: Any, res: Any) -> Any:
        return await self._render_item(res, {"item": getattr(req, "parsed", None), "error": req.parse_error})

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    async def list(self, req: Any, res: Any) -> Any:
        """Renders list of all records matching ``list_query``."""
        try:
            items = await resolve(self._list_request(req, res))
        except Exception as error:
            return await self._error(res, error)

        return await self._render_list(res, items)

    async def create(self, req: Any, res: Any) -> Any:
        if getattr(req, "parse_error", None):
            return await self._render_form_error(req, res)

        try:
            created = await resolve(self._create_request(req, res))
        except Exception as error:
            return await self._error(res, error)

        created_id = item_id(created) if created is not None else None
        if not created_id:
            return await self._error(res, ItemSavedIncorrectlyFault())

        return await resolve(res.redirect(302, f"{self.url_root_full}{created_id}"))

    async def read(self, req: Any, res: Any) -> Any:
        try:
            item = await resolve(self._read_request(req, res))
        except Exception as error:
            return await self._error(res, error)

        if not item:
            return await self._error(res, ItemNotFoundFault(self._get_id(req)))

        return await self._render_item(res, {"item": item})

    async def update(self, req: Any, res: Any) -> Any:
        if getattr(req, "parse_error", None):
            return await self._render_form_error(req, res)

        try:
            item = await resolve(self._update_request(req, res))
        except Exception as error:
            return await self._error(res, error)

        return await self._render_item(res, {"item": item})

    async def destroy(self, req: Any, res: Any) -> Any:
        try:
            await resolve(self._destroy_request(req, res))
        except Exception as error:
            return await self._error(res, error)

        return await resolve(res.redirect(302, self.url_root_full))

    # ------------------------------------------------------------------
    # Routing
    # ------------------------------------------------------------------

    async def handle(self, action: str, req: Any, res: Any) -> Any:
        """Run ``action`` directly; form actions parse ``req.body`` first."""
        if action in self.form_actions and action in self.actions:
            handler = getattr(self, action)
            return await self.parse_form_middleware(req, res, lambda: handler(req, res))
        return await super().handle(action, req, res)

    def make_routes(self, router: Any, mount_path: str = "") -> None:
        if mount_path:
            self.make_full_root(mount_path)

        with_form = self.middleware + (self.parse_form_middleware,)
        item_url = f"{self.url_root}:id"

        router.get(self.url_root, self.middleware, self.list)
        router.post(self.url_root, with_form, self.create)
        router.get(item_url, self.middleware, self.read)
        router.post(item_url, with_form, self.update)
        router.delete(item_url, self.middleware, self.destroy)

        logger.debug("%s routes registered under %s", type(self).__name__, self.url_root_full)
