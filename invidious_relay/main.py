import logging
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from invidious_relay import __version__
from invidious_relay.api import health, videos
from invidious_relay.core.config import Settings, settings as default_settings
from invidious_relay.core.logging import configure_logging
from invidious_relay.services.upstream import InvidiousClient

logger = logging.getLogger(__name__)


# -------------------------
# Error bodies: always {"error": "..."}
# -------------------------
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    return JSONResponse(status_code=400, content={"error": message})


def create_app(settings: Settings | None = None, client: InvidiousClient | None = None) -> FastAPI:
    """
    Builds the relay application.

    `settings` and `client` are explicit so tests (or embedding code) can point
    the relay at any upstream without touching the environment.
    """
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(title="Invidious Relay", version=__version__)
    app.state.settings = settings
    app.state.client = client or InvidiousClient(settings)

    # -------------------------
    # CORS
    # -------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials="*" not in settings.CORS_ORIGINS,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    # -------------------------
    # Routers
    # -------------------------
    app.include_router(videos.router)
    app.include_router(health.router)

    @app.on_event("startup")
    def startup():
        logger.info(f"🌐 Using Invidious instance: {settings.INVIDIOUS_INSTANCE}")
        logger.info(f"🔎 Search source: {settings.SEARCH_SOURCE}")

    return app


app = create_app()


def run():
    """Console entry point: serve the relay with uvicorn."""
    logger.info(f"🚀 Server is running on http://localhost:{default_settings.PORT}")
    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT)
