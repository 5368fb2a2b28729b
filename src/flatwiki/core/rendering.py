"""Template rendering for the edit and view pages."""

import logging
from pathlib import Path

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from flatwiki.core.errors import RenderError, StartupError
from flatwiki.core.models import Page

logger = logging.getLogger(__name__)

VIEWS = ("edit", "view")


class TemplateRenderer:
    """Renders pages with templates compiled once at construction.

    Every template is autoescaped, so page titles and bodies are always
    embedded as text. Templates are not reloaded when their files change.
    """

    def __init__(self, directory: Path, app_title: str = "FlatWiki"):
        self.directory = directory
        self.app_title = app_title
        env = Environment(
            loader=FileSystemLoader(str(directory)),
            autoescape=True,
            auto_reload=False,
            undefined=StrictUndefined,
        )
        self.templates = Jinja2Templates(env=env)
        try:
            for view in VIEWS:
                self.templates.get_template(f"{view}.html")
        except TemplateError as exc:
            raise StartupError(
                f"Cannot load templates from {directory}: {exc}"
            ) from exc
        logger.info("Loaded templates %s from %s", ", ".join(VIEWS), directory)

    def render(self, request: Request, view: str, page: Page) -> HTMLResponse:
        """Render ``view`` for ``page``.

        Raises:
            RenderError: If the view is unknown or the template fails.
        """
        if view not in VIEWS:
            raise RenderError(view, f"Unknown view {view!r}")
        try:
            return self.templates.TemplateResponse(
                request,
                f"{view}.html",
                {"page": page, "app_title": self.app_title},
            )
        except TemplateError as exc:
            logger.exception("Failed to render %s for page %r", view, page.title)
            raise RenderError(view, str(exc)) from exc
