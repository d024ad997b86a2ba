"""HTML rendering for note pages."""

import logging
from pathlib import Path
from typing import Any

from fastapi.templating import Jinja2Templates
from jinja2 import Template, TemplateError

from quicknotes.core.errors import RenderError

logger = logging.getLogger(__name__)

TEMPLATE_NAMES = ("list", "add", "view", "edit")


class PageRenderer:
    """Renders named templates to bytes.

    All templates are loaded and parsed up front; a missing or broken
    template fails construction instead of the first request.
    """

    def __init__(self, directory: Path, app_title: str = "QuickNotes"):
        self.directory = Path(directory)
        self.app_title = app_title
        self.templates = Jinja2Templates(directory=str(self.directory))
        self._loaded: dict[str, Template] = {}
        for name in TEMPLATE_NAMES:
            try:
                self._loaded[name] = self.templates.get_template(f"{name}.html")
            except TemplateError as exc:
                raise RenderError(
                    name, f"failed to load template {name}.html from {self.directory}"
                ) from exc
        logger.info("Loaded %d templates from %s", len(self._loaded), self.directory)

    def render(self, name: str, data: Any = None) -> bytes:
        """Render template ``name`` with ``data`` as its payload."""
        template = self._loaded.get(name)
        if template is None:
            raise RenderError(name, f"unknown template {name!r}")
        try:
            html = template.render(app_title=self.app_title, data=data)
        except TemplateError as exc:
            raise RenderError(name, f"failed to render template {name}.html") from exc
        return html.encode("utf-8")
