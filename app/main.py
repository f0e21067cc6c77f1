import uvicorn

from app.config.settings import Settings
from app.logging.logger import Log
from app.web.server import create_app


def main() -> None:
    """Entry point: load settings -> configure logging -> serve the web app."""
    settings = Settings()
    Log.configure(settings.log_level, settings.app_env)
    app = create_app(settings)
    Log.info("Starting resource registry", host=settings.host, port=settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
