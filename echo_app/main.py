"""
Identity Echo Service
Backend that reports the name it was started with
"""

from typing import Optional

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from echo_app.config import EchoSettings, get_echo_settings
from shared.utils.logger import get_logger, init_logging

init_logging()

logger = get_logger(__name__)


def create_app(settings: Optional[EchoSettings] = None) -> FastAPI:
    """Build an echo app bound to one identity"""
    settings = settings or get_echo_settings()

    app = FastAPI(
        title="Identity Echo Service",
        description="Reports its configured application name",
        version="1.0.0"
    )
    app.state.settings = settings

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        """Echo the configured identity"""
        return settings.greeting

    return app


app = create_app()


def run():
    """Serve the echo service with uvicorn"""
    import uvicorn

    settings = app.state.settings
    logger.info("Starting echo server", name=settings.name, listen=f"{settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
