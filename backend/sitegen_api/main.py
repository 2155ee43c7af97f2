"""FastAPI application entry point"""

import sys
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, PlainTextResponse

from sitegen_api.api import generate, intent, site
from sitegen_api.core.archive_builder import ArchiveBuilder
from sitegen_api.core.artifact_store import ArtifactStore
from sitegen_api.core.completion_client import CompletionClient
from sitegen_api.core.config import Settings, settings as default_settings
from sitegen_api.core.pipeline import SitePipeline
from sitegen_api.models.errors import ApplicationError

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


def configure_logging(level: str = "INFO") -> None:
    """Console logging for the service and uvicorn"""
    logging.basicConfig(
        level=level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True,
        handlers=[logging.StreamHandler(sys.stdout)]
    )


def create_app(
    settings: Optional[Settings] = None,
    completion_client: Optional[CompletionClient] = None,
    artifact_store: Optional[ArtifactStore] = None,
    archive_builder: Optional[ArchiveBuilder] = None,
) -> FastAPI:
    """
    Build the application with its collaborators.

    Anything not passed in is constructed from ``settings``.
    """
    settings = settings or default_settings
    completion_client = completion_client or CompletionClient.from_settings(settings)
    artifact_store = artifact_store or ArtifactStore(settings.artifact_dir)
    archive_builder = archive_builder or ArchiveBuilder(settings.archive_staging_dir)
    landing_page = settings.landing_page or STATIC_DIR / "index.html"

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("=" * 60)
        logger.info("SITE GENERATOR STARTING")
        logger.info(f"Artifacts: {artifact_store.directory}")
        logger.info(f"Models: intent={settings.intent_model}, codegen={settings.codegen_model}")
        logger.info("=" * 60)
        yield
        logger.info("Shutting down...")
        try:
            await completion_client.aclose()
        except Exception as e:
            logger.warning(f"Error closing completion client: {e}")

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.pipeline = SitePipeline(
        completion_client=completion_client,
        artifact_store=artifact_store,
        archive_builder=archive_builder,
        settings=settings,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        """Plain-text status responses for the GET endpoints"""
        if exc.http_status >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.model_dump()}")
        else:
            logger.info(f"{request.method} {request.url.path} -> {exc.http_status}: {exc.message}")
        message = exc.message if exc.http_status < 500 else "Internal server error"
        return PlainTextResponse(message, status_code=exc.http_status)

    @app.get("/", include_in_schema=False)
    async def landing():
        """Serve the landing page"""
        return FileResponse(str(landing_page), media_type="text/html")

    @app.get("/health")
    async def health():
        """Health check for monitoring"""
        return {"status": "healthy", "version": settings.api_version}

    app.include_router(intent.router, tags=["intent"])
    app.include_router(generate.router, tags=["generate"])
    app.include_router(site.router, tags=["site"])

    return app


def run() -> None:
    """Console entry point"""
    logger.info(f"Server running on http://localhost:{default_settings.port}")
    uvicorn.run(
        app,
        host=default_settings.host,
        port=default_settings.port,
        log_config=None,
    )


configure_logging(default_settings.log_level)
app = create_app()


if __name__ == "__main__":
    run()
