"""
Controller System

Base controllers meant to be subclassed by applications:

- AbstractController: url/view roots, middleware, routing contract
- CrudController: list/create/read/update/destroy over a model
- StaticController: a single rendered page

Example:
    from controllerkit import CrudController, int_id

    class ArticlesController(CrudController):
        list_fields = "id title"

        def list_query(self, req, res):
            return {"is_active": True}

    ArticlesController(
        view_root="admin/articles",
        url_root="/articles/",
        human_name="Articles",
        model=RelationalModelAdapter(Article),
        id_strategy=int_id,
        router=router,
    )
"""

from .base import AbstractController, normalize_path, join_paths, resolve
from .crud import CrudController, item_id
from .static import StaticController
from .identity import raw_id, int_id
from .protocols import (
    Controller,
    Handler,
    Middleware,
    Model,
    Next,
    Request,
    Response,
    Router,
)

__all__ = [
    # Controllers
    "AbstractController",
    "CrudController",
    "StaticController",

    # Helpers
    "normalize_path",
    "join_paths",
    "resolve",
    "item_id",
    "raw_id",
    "int_id",

    # Protocols
    "Controller",
    "Handler",
    "Middleware",
    "Model",
    "Next",
    "Request",
    "Response",
    "Router",
]
