"""
Virtual Host Gateway - Main Application
Maps the request's Host header to a configured route identifier
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from gateway.routes import health, hosts
from gateway.utils.config import GatewaySettings, get_gateway_settings
from shared.utils.logger import get_logger, init_logging


# Configure structured logging
init_logging()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan events"""
    logger.info(
        "Starting gateway",
        service=app.state.settings.service_name,
        routes=len(app.state.route_table)
    )

    yield

    logger.info("Gateway shutdown complete")


async def log_requests(request: Request, call_next):
    """Log all incoming requests"""
    logger.info(
        "Request received",
        method=request.method,
        path=request.url.path,
        host=request.headers.get("host", ""),
        client_ip=request.client.host if request.client else "unknown"
    )

    response = await call_next(request)

    logger.info(
        "Request completed",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code
    )

    return response


async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler"""
    logger.error(
        "Unhandled exception",
        error=str(exc),
        method=request.method,
        url=str(request.url),
        exc_info=True
    )

    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "message": "An unexpected error occurred"
        }
    )


def create_app(settings: Optional[GatewaySettings] = None) -> FastAPI:
    """Build the gateway application with its route table fixed at startup"""
    settings = settings or get_gateway_settings()

    app = FastAPI(
        title="Virtual Host Gateway",
        description="Resolves the request host to a configured route",
        version=settings.service_version,
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.route_table = settings.build_route_table()

    app.middleware("http")(log_requests)
    app.add_exception_handler(Exception, global_exception_handler)

    # Register routes
    app.include_router(health.router, tags=["Health"])
    app.include_router(hosts.router, tags=["Routing"])

    return app


app = create_app()


def run():
    """Serve the gateway with uvicorn"""
    import uvicorn

    settings = get_gateway_settings()
    settings.log_config()
    logger.info("Listening", url=f"http://{settings.host}:{settings.port}")
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        timeout_keep_alive=settings.keep_alive_timeout,
        log_config=None
    )


if __name__ == "__main__":
    run()
