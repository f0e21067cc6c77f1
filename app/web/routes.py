from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from app.resources.registry import Registry
from app.session.store import SessionStore, session_id_from

FORM_FIELDS = ("title", "author", "year", "size", "pages")

router = APIRouter()
templates = Jinja2Templates(directory=Path(__file__).parent / "templates")


@router.get("/", response_class=HTMLResponse)
async def show_resources(request: Request) -> HTMLResponse:
    store: SessionStore = request.app.state.session_store
    log = store.log_for(session_id_from(request.session))
    return _render(request, log.entries)


@router.post("/", response_class=HTMLResponse)
async def add_resource(request: Request) -> HTMLResponse:
    form = await request.form()
    raw = {name: form[name] for name in FORM_FIELDS if name in form}
    registry: Registry = request.app.state.registry
    store: SessionStore = request.app.state.session_store
    with store.exclusive(session_id_from(request.session)) as log:
        registry.submit(str(form.get("itemType", "")), raw, log)
        entries = log.entries
    return _render(request, entries)


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


def _render(request: Request, entries: tuple[str, ...]) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "index.html",
        {"resources": entries},
    )
