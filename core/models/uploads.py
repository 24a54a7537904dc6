# =============================================================================
# core/models/uploads.py - Image Upload Schemas
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field


class UploadResult(BaseModel):
    """Response of POST /upload/single."""
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str | None = None
    image_url: str = Field(..., alias="imageUrl")
    image_id: str = Field(..., alias="imageId")


class MultipleUploadResult(BaseModel):
    """Response of POST /upload/multiple."""
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str | None = None
    image_urls: list[str] = Field(default_factory=list, alias="imageUrls")
