"""FlatWiki FastAPI application."""

import logging

import uvicorn
from fastapi import Depends, FastAPI, Form, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse

from flatwiki.config import settings
from flatwiki.core.errors import (
    InvalidTitleError,
    PageNotFoundError,
    PersistenceError,
    RenderError,
)
from flatwiki.core.models import Page
from flatwiki.core.rendering import TemplateRenderer
from flatwiki.core.storage import FileStorage
from flatwiki.core.validation import page_title

logger = logging.getLogger(__name__)

# Initialize app
app = FastAPI(
    title=settings.app_title,
    debug=settings.debug,
    redirect_slashes=False,
)

# Templates are compiled here; a broken template aborts the import.
renderer = TemplateRenderer(settings.templates_dir, app_title=settings.app_title)

# Initialize storage
storage = FileStorage(settings.data_dir)


@app.exception_handler(InvalidTitleError)
async def invalid_title_handler(request: Request, exc: InvalidTitleError):
    return PlainTextResponse("404 page not found", status_code=404)


@app.exception_handler(PersistenceError)
@app.exception_handler(RenderError)
async def internal_error_handler(request: Request, exc: PersistenceError | RenderError):
    return PlainTextResponse(exc.message, status_code=500)


# Handlers are plain functions: FastAPI runs each request in its own
# worker thread, so blocking file I/O only stalls that request.


@app.get("/view/{rest:path}", response_class=HTMLResponse)
def view_page(request: Request, title: str = Depends(page_title)):
    """View a wiki page."""
    try:
        page = storage.load_page(title)
    except PageNotFoundError:
        # Page doesn't exist - redirect to edit to create it
        return RedirectResponse(url=f"/edit/{title}", status_code=302)
    return renderer.render(request, "view", page)


@app.get("/edit/{rest:path}", response_class=HTMLResponse)
def edit_page(request: Request, title: str = Depends(page_title)):
    """Edit page form."""
    try:
        page = storage.load_page(title)
    except PageNotFoundError:
        # New page
        page = Page(title=title)
    return renderer.render(request, "edit", page)


@app.post("/save/{rest:path}")
def save_page(title: str = Depends(page_title), body: str = Form("")):
    """Save page content."""
    storage.save_page(Page(title=title, body=body.encode("utf-8")))
    return RedirectResponse(url=f"/view/{title}", status_code=302)


def run() -> None:
    """Serve the app until the process is killed."""
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level="debug" if settings.debug else "info",
    )
