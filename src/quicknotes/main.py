"""QuickNotes FastAPI application."""

import logging
from collections.abc import Callable

from fastapi import APIRouter, Depends, FastAPI, Form, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse

from quicknotes.config import Settings, settings as default_settings
from quicknotes.core.errors import (
    PageNotFoundError,
    PageStorageError,
    RenderError,
    ValidationError,
)
from quicknotes.core.models import ListPageInfo, Page
from quicknotes.core.render import PageRenderer
from quicknotes.core.storage import FileStorage, Storage
from quicknotes.core.titles import match_path, validate_title

logger = logging.getLogger(__name__)

# Prefixes owned by the title-addressed routes
ADDRESSED_PREFIXES = ("/view/", "/edit/", "/save/")

router = APIRouter()


# ========== Dependencies ==========


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_storage(request: Request) -> Storage:
    return request.app.state.storage


def get_renderer(request: Request) -> PageRenderer:
    return request.app.state.renderer


def addressed_title(action: str) -> Callable[[Request], str]:
    """Build a dependency that extracts a validated title for ``action``.

    The whole request path is checked, not the extracted path parameter.
    Paths that don't match ``/<action>/<title>`` raise PageNotFoundError
    before any storage access.
    """

    def dependency(request: Request) -> str:
        path = request.url.path
        matched = match_path(path)
        if matched is None or matched[0] != action:
            raise PageNotFoundError(path)
        return matched[1]

    return dependency


def render_page(renderer: PageRenderer, name: str, data=None) -> HTMLResponse:
    return HTMLResponse(renderer.render(name, data))


def redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url=url, status_code=302)


# ========== Routes ==========


@router.get("/add", response_class=HTMLResponse)
def add_form(renderer: PageRenderer = Depends(get_renderer)):
    """Empty creation form."""
    return render_page(renderer, "add")


@router.post("/add")
def add_page(
    title: str = Form(""),
    body: str = Form(""),
    storage: Storage = Depends(get_storage),
):
    """Create or overwrite a page from the add form."""
    title = validate_title(title)
    storage.save_page(Page(title=title, body=body.encode("utf-8")))
    return redirect(f"/view/{title}")


@router.get("/view/{title:path}", response_class=HTMLResponse)
def view_page(
    title: str = Depends(addressed_title("view")),
    storage: Storage = Depends(get_storage),
    renderer: PageRenderer = Depends(get_renderer),
):
    """View a page, or send the client to create it."""
    try:
        page = storage.get_page(title)
    except PageNotFoundError as exc:
        logger.warning("Failed to load page %s: %s", title, exc.__cause__)
        return redirect(f"/edit/{title}")
    return render_page(renderer, "view", page)


@router.get("/edit/{title:path}", response_class=HTMLResponse)
def edit_page(
    title: str = Depends(addressed_title("edit")),
    storage: Storage = Depends(get_storage),
    renderer: PageRenderer = Depends(get_renderer),
):
    """Edit form, pre-filled when the page exists."""
    try:
        page = storage.get_page(title)
    except PageNotFoundError:
        page = Page(title=title)
    return render_page(renderer, "edit", page)


@router.post("/save/{title:path}")
def save_page(
    title: str = Depends(addressed_title("save")),
    body: str = Form(""),
    storage: Storage = Depends(get_storage),
):
    """Overwrite a page from the edit form. POST only; GET here is a 404."""
    storage.save_page(Page(title=title, body=body.encode("utf-8")))
    return redirect(f"/view/{title}")


@router.get("/{rest:path}", response_class=HTMLResponse)
def list_pages(
    request: Request,
    storage: Storage = Depends(get_storage),
    renderer: PageRenderer = Depends(get_renderer),
    settings: Settings = Depends(get_settings),
):
    """List all pages. Also serves every GET path no other route claims."""
    if request.url.path.startswith(ADDRESSED_PREFIXES):
        raise PageNotFoundError(request.url.path)
    info = ListPageInfo(page_title=settings.list_title, pages=storage.list_pages())
    return render_page(renderer, "list", info)


# ========== Error handlers ==========


async def not_found_handler(request: Request, exc: PageNotFoundError):
    return PlainTextResponse("404 page not found", status_code=404)


async def validation_handler(request: Request, exc: ValidationError):
    return PlainTextResponse(str(exc), status_code=400)


async def storage_error_handler(request: Request, exc: PageStorageError):
    logger.error("Failed to save page %s: %s", exc.title, exc, exc_info=exc)
    return PlainTextResponse("Internal Server Error", status_code=500)


async def render_error_handler(request: Request, exc: RenderError):
    logger.error("Failed to render template %s: %s", exc.name, exc, exc_info=exc)
    return PlainTextResponse("Internal Server Error", status_code=500)


# ========== Application factory ==========


def create_app(
    settings: Settings | None = None,
    storage: Storage | None = None,
    renderer: PageRenderer | None = None,
) -> FastAPI:
    """Build the application.

    Templates are loaded here, so a broken template directory fails
    startup with RenderError.
    """
    settings = settings or default_settings
    app = FastAPI(title=settings.app_title, debug=settings.debug)

    app.state.settings = settings
    app.state.storage = storage or FileStorage(settings.notes_dir)
    app.state.renderer = renderer or PageRenderer(
        settings.templates_dir, app_title=settings.app_title
    )
    logger.info(
        "Serving notes from %s with templates from %s",
        settings.notes_dir,
        settings.templates_dir,
    )

    app.add_exception_handler(PageNotFoundError, not_found_handler)
    app.add_exception_handler(ValidationError, validation_handler)
    app.add_exception_handler(PageStorageError, storage_error_handler)
    app.add_exception_handler(RenderError, render_error_handler)

    app.include_router(router)
    return app


app = create_app()
