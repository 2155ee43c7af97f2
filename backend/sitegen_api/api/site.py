"""GET /preview/index.html and GET /download endpoints"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, StreamingResponse
from starlette.background import BackgroundTask

from sitegen_api.api.deps import get_pipeline
from sitegen_api.core.pipeline import SitePipeline

router = APIRouter()
logger = logging.getLogger(__name__)

DOWNLOAD_FILENAME = "generated-site.zip"


@router.get("/preview/index.html", response_class=HTMLResponse)
async def preview(pipeline: SitePipeline = Depends(get_pipeline)) -> HTMLResponse:
    """
    Serve the generated site as-is.

    NotFoundError becomes a plain-text 404 via the app's error handler.
    """
    html = await pipeline.preview()
    return HTMLResponse(
        content=html,
        headers={
            "Cache-Control": "no-store",
            "X-Content-Type-Options": "nosniff"
        }
    )


@router.get("/download")
async def download(pipeline: SitePipeline = Depends(get_pipeline)) -> StreamingResponse:
    """Stream the generated site as a zip attachment"""
    archive_path = await pipeline.package()
    builder = pipeline.archive_builder
    size = archive_path.stat().st_size
    logger.info(f"Sending {DOWNLOAD_FILENAME} ({size} bytes)")

    # Removed by the iterator once streaming stops, or by the background task
    # if streaming never starts
    return StreamingResponse(
        builder.iter_file(archive_path),
        media_type="application/zip",
        headers={
            "Content-Disposition": f'attachment; filename="{DOWNLOAD_FILENAME}"',
            "Content-Length": str(size),
            "Cache-Control": "no-store",
        },
        background=BackgroundTask(builder.discard, archive_path),
    )
