import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from caesarlab.api.v1.router import api_router
from caesarlab.core.config import get_settings
from caesarlab.core.logging import configure_logging

settings = get_settings()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown."""
    configure_logging(settings.log_level)
    logger.info("%s started (%s)", settings.app_name, settings.app_env)
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        description=(
            "Caesar cipher over the English and Russian alphabets, "
            "with brute force and frequency-analysis key recovery."
        ),
        version="0.1.0",
        openapi_url=f"{settings.api_v1_prefix}/openapi.json",
        docs_url=f"{settings.api_v1_prefix}/docs",
        redoc_url=f"{settings.api_v1_prefix}/redoc",
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.is_development else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include API router
    app.include_router(api_router, prefix=settings.api_v1_prefix)

    return app


app = create_app()


def run(host: str = "0.0.0.0", port: int = 8000) -> None:
    """Run the application with uvicorn."""
    import uvicorn

    uvicorn.run(
        "caesarlab.main:app",
        host=host,
        port=port,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    run()
