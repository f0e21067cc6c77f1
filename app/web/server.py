from fastapi import FastAPI
from starlette.middleware.sessions import SessionMiddleware

from app.config.settings import Settings
from app.resources.factory import RecordFactory
from app.resources.registry import Registry
from app.resources.rules import RecordRules
from app.session.store import SessionStore
from app.web.routes import router


def create_app(settings: Settings) -> FastAPI:
    """Build the web application with session support and a configured registry."""
    app = FastAPI(title="Resource Management System")
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.session_secret_key,
        session_cookie=settings.session_cookie_name,
        max_age=settings.session_max_age_seconds,
    )
    app.state.registry = Registry(RecordFactory(RecordRules.from_settings(settings)))
    app.state.session_store = SessionStore()
    app.include_router(router)
    return app
