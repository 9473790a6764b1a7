"""
Template Engine - async Jinja2 rendering for controller views.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from jinja2 import Environment, FileSystemLoader, Template, select_autoescape


class TemplateEngine:
    """
    Async-capable Jinja2 template engine.

    Args:
        search_paths: Template directories
        autoescape: Enable HTML autoescaping
        globals: Custom global variables/functions
        filters: Custom filters

    Example:
        engine = TemplateEngine(["templates"])
        html = await engine.render("articles/item.html", {"item": article})
    """

    def __init__(
        self,
        search_paths: Optional[List[Union[str, Path]]] = None,
        *,
        autoescape: bool = True,
        globals: Optional[Dict[str, Any]] = None,
        filters: Optional[Dict[str, Callable]] = None,
    ):
        self.search_paths = [Path(p) for p in (search_paths or [])]

        self.env = Environment(
            loader=FileSystemLoader([str(p) for p in self.search_paths]),
            autoescape=select_autoescape(
                enabled_extensions=["html", "htm", "xml"],
                default_for_string=True,
            ) if autoescape else False,
            enable_async=True,
        )

        if filters:
            self.env.filters.update(filters)

        if globals:
            self.env.globals.update(globals)

    async def render(self, template_name: str, context: Optional[Mapping[str, Any]] = None) -> str:
        """
        Render template asynchronously.

        Raises:
            TemplateNotFound: If template doesn't exist
            TemplateSyntaxError: If template has syntax errors
        """
        template = self.get_template(template_name)
        return await template.render_async(**dict(context or {}))

    def get_template(self, name: str) -> Template:
        return self.env.get_template(name)

    def list_templates(self) -> list[str]:
        return self.env.list_templates()
