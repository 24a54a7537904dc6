# =============================================================================
# core/services/upload_service.py - Image Upload Endpoints
# =============================================================================
# Images are sent as multipart: field "image" for a single file, "images"
# (repeated) for several.
# =============================================================================

from __future__ import annotations

from typing import Any, Iterable

from core.models.uploads import MultipleUploadResult, UploadResult
from core.services.base import ApiService, logs_failure
from lib.api_client import MultipartPayload
from lib.envelope import parse_model

# (filename, content, content_type)
ImageFile = tuple[str, bytes, str]


class UploadService(ApiService):

    @logs_failure("upload image")
    def upload_image(self, filename: str, content: bytes, content_type: str) -> UploadResult:
        payload = MultipartPayload().add_file("image", filename, content, content_type)
        result = parse_model(self.client.post("/upload/single", payload), UploadResult)
        self.logger.info(f"Uploaded image {filename} -> {result.image_id}")
        return result

    @logs_failure("upload images")
    def upload_images(self, files: Iterable[ImageFile]) -> MultipleUploadResult:
        payload = MultipartPayload()
        for filename, content, content_type in files:
            payload.add_file("images", filename, content, content_type)
        return parse_model(self.client.post("/upload/multiple", payload), MultipleUploadResult)

    @logs_failure("delete image")
    def delete_image(self, image_id: str) -> dict[str, Any] | None:
        """Delete an uploaded image; returns the backend's {success, message}."""
        return self.client.request("DELETE", f"/upload/{image_id}")
