"""
Collaborator protocols.

Controllers never import a router, a template engine or an ORM. They talk
to whatever the hosting application injects, as long as it looks like the
protocols below.
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Mapping, Optional, Protocol, Sequence, runtime_checkable

Next = Callable[[], Awaitable[Any]]
Middleware = Callable[[Any, Any, Next], Awaitable[Any]]
Handler = Callable[[Any, Any], Awaitable[Any]]


@runtime_checkable
class Request(Protocol):
    """Incoming request as seen by a controller."""

    params: Mapping[str, Any]
    query: Mapping[str, Any]
    body: Any


@runtime_checkable
class Response(Protocol):
    """
    Outgoing response.

    Each method may return an awaitable; controllers await it when it does.
    """

    def render(self, view: str, data: Mapping[str, Any]) -> Any: ...

    def status(self, code: int) -> "Response": ...

    def send(self, body: Any) -> Any: ...

    def redirect(self, code: int, url: str) -> Any: ...


@runtime_checkable
class Router(Protocol):
    """Route registration surface (path, middleware list, handler)."""

    def get(self, path: str, middleware: Sequence[Middleware], handler: Handler) -> Any: ...

    def post(self, path: str, middleware: Sequence[Middleware], handler: Handler) -> Any: ...

    def delete(self, path: str, middleware: Sequence[Middleware], handler: Handler) -> Any: ...


@runtime_checkable
class Model(Protocol):
    """Persistence collaborator used by CRUD controllers."""

    def find(self, query: Mapping[str, Any], fields: str) -> Awaitable[Sequence[Any]]: ...

    def create(self, data: Any) -> Awaitable[Any]: ...

    def find_by_id(self, item_id: Any) -> Awaitable[Optional[Any]]: ...

    def update_by_id(self, item_id: Any, data: Any) -> Awaitable[Any]: ...

    def remove_by_id(self, item_id: Any) -> Awaitable[Any]: ...


@runtime_checkable
class Controller(Protocol):
    """Capability interface implemented by every concrete controller."""

    def register_routes(self, router: Router, mount_path: str = "") -> None: ...

    async def handle(self, action: str, req: Any, res: Any) -> Any: ...
