"""
Template-backed response collaborator.

``TemplateResponse`` is what a hosting application hands to controller
actions: it records status, headers and body, rendering views through a
``TemplateEngine``. The application then turns it into its own HTTP
response object.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Dict, Optional

from ..faults import Fault
from .engine import TemplateEngine

logger = logging.getLogger("controllerkit.templates")


class TemplateResponse:
    """
    Response collaborator rendering views with Jinja2.

    Args:
        engine: Template engine used by ``render``
        suffix: Appended to view paths to get template names
    """

    def __init__(self, engine: TemplateEngine, *, suffix: str = ".html"):
        self.engine = engine
        self.suffix = suffix
        self.status_code = 200
        self.headers: Dict[str, str] = {}
        self.body: Optional[str] = None
        self.media_type = "text/html; charset=utf-8"

    async def render(self, view: str, data: Mapping[str, Any]) -> "TemplateResponse":
        template_name = f"{view}{self.suffix}"
        logger.debug("Rendering %s", template_name)
        self.body = await self.engine.render(template_name, data)
        self.media_type = "text/html; charset=utf-8"
        return self

    def status(self, code: int) -> "TemplateResponse":
        self.status_code = code
        return self

    def send(self, body: Any) -> "TemplateResponse":
        if isinstance(body, Fault):
            self.body = json.dumps(body.to_dict(), default=str)
            self.media_type = "application/json"
        elif isinstance(body, BaseException):
            self.body = str(body)
            self.media_type = "text/plain; charset=utf-8"
        elif isinstance(body, (Mapping, list, tuple)):
            self.body = json.dumps(body, default=str)
            self.media_type = "application/json"
        elif isinstance(body, bytes):
            self.body = body.decode("utf-8")
        else:
            self.body = "" if body is None else str(body)
        return self

    def redirect(self, code: int, url: str) -> "TemplateResponse":
        self.status_code = code
        self.headers["location"] = url
        self.body = ""
        return self

    def __repr__(self) -> str:
        return f"TemplateResponse(status={self.status_code}, media_type={self.media_type!r})"
