"""
controllerkit - base controllers for server-rendered web applications.

Subclass a controller, inject a model and a router, and the five CRUD
routes (or a single static page) are wired to your templates:

    from controllerkit import CrudController, FormError, StaticController

    class ArticlesController(CrudController):
        def parse_form(self, form):
            if not form.get("title"):
                raise FormError({"title": "required"}, parsed=form)
            return form

    articles = ArticlesController(
        view_root="admin/articles",
        url_root="/articles/",
        human_name="Articles",
        model=Article,
        router=router,
    )

Routing, template rendering and persistence stay with the hosting
application; controllers only dispatch between them.
"""

__version__ = "0.3.0"

from .controller import (
    AbstractController,
    CrudController,
    StaticController,
    Controller,
    Model,
    Router,
    Request,
    Response,
    Middleware,
    raw_id,
    int_id,
    normalize_path,
    join_paths,
)
from .config import ConfigLoader, ControllerConfig
from .faults import (
    Fault,
    FaultDomain,
    Severity,
    ConfigFault,
    ConfigInvalidFault,
    ModelMissingFault,
    RenderDataFault,
    PureVirtualCallFault,
    UnknownActionFault,
    FormError,
    ItemNotFoundFault,
    ItemSavedIncorrectlyFault,
)
from .models import RelationalModelAdapter

__all__ = [
    "__version__",

    # Controllers
    "AbstractController",
    "CrudController",
    "StaticController",

    # Protocols
    "Controller",
    "Model",
    "Router",
    "Request",
    "Response",
    "Middleware",

    # Identifiers & paths
    "raw_id",
    "int_id",
    "normalize_path",
    "join_paths",

    # Config
    "ConfigLoader",
    "ControllerConfig",

    # Faults
    "Fault",
    "FaultDomain",
    "Severity",
    "ConfigFault",
    "ConfigInvalidFault",
    "ModelMissingFault",
    "RenderDataFault",
    "PureVirtualCallFault",
    "UnknownActionFault",
    "FormError",
    "ItemNotFoundFault",
    "ItemSavedIncorrectlyFault",

    # Models
    "RelationalModelAdapter",
]
