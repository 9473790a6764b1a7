"""
Testing helpers for controllers.

Usage:
    from controllerkit.testing import MemoryModel, RecordingResponse, make_request

    async def test_read():
        model = MemoryModel([{"id": "1", "title": "Hello"}])
        controller = ArticlesController(view_root="articles", model=model)
        res = RecordingResponse()

        await controller.read(make_request(params={"id": "1"}), res)
        assert res.data == {"item": {"id": "1", "title": "Hello"}}
"""

from .fakes import (
    MemoryModel,
    RecordingResponse,
    RecordingRouter,
    RegisteredRoute,
    make_request,
)

__all__ = [
    "MemoryModel",
    "RecordingResponse",
    "RecordingRouter",
    "RegisteredRoute",
    "make_request",
]
