# =============================================================================
# app/routers/uploads.py - Image Upload Endpoints
# =============================================================================
# Images are checked here (type and size) before being forwarded to the
# backend as multipart.
# =============================================================================

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, File, UploadFile
from starlette.concurrency import run_in_threadpool

from app.dependencies import check_image, service
from core.models.uploads import MultipleUploadResult, UploadResult
from core.services.upload_service import UploadService

logger = logging.getLogger(__name__)

router = APIRouter()

UploadServiceDep = Annotated[UploadService, Depends(service(UploadService))]


async def _read_image(upload: UploadFile) -> tuple[str, bytes, str]:
    content = await upload.read()
    check_image(upload, content)
    return upload.filename or "upload", content, upload.content_type


@router.post("/image", response_model=UploadResult, status_code=201)
async def upload_image(
    uploads: UploadServiceDep,
    image: Annotated[UploadFile, File(description="JPEG, PNG, WebP or GIF image")],
):
    """
    Upload a single image.

    Raises:
        400: If the file type is not allowed
        413: If the file exceeds MAX_UPLOAD_SIZE_MB
    """
    filename, content, content_type = await _read_image(image)
    logger.info(f"Uploading {filename} ({len(content)} bytes)")
    return await run_in_threadpool(uploads.upload_image, filename, content, content_type)


@router.post("/images", response_model=MultipleUploadResult, status_code=201)
async def upload_images(
    uploads: UploadServiceDep,
    images: Annotated[list[UploadFile], File(description="One or more images")],
):
    files = [await _read_image(image) for image in images]
    return await run_in_threadpool(uploads.upload_images, files)


@router.delete("/{image_id}")
def delete_image(image_id: str, uploads: UploadServiceDep) -> Any:
    return uploads.delete_image(image_id)
