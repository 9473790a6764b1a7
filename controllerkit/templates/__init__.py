"""
Templates - Jinja2 rendering for controller views.

Example:
    from controllerkit.templates import TemplateEngine, TemplateResponse

    engine = TemplateEngine(["templates"])

    async def dispatch(controller, action, req):
        res = TemplateResponse(engine)
        await controller.handle(action, req, res)
        return res.status_code, res.headers, res.body
"""

from .engine import TemplateEngine
from .response import TemplateResponse

__all__ = [
    "TemplateEngine",
    "TemplateResponse",
]
