# =============================================================================
# app/routers/gallery.py - Gallery Endpoints
# =============================================================================

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Query

from app.dependencies import service
from core.models.gallery import GalleryAlbum, GalleryVideo
from core.services.gallery_service import GalleryService
from lib.envelope import Page

router = APIRouter()

GalleryServiceDep = Annotated[GalleryService, Depends(service(GalleryService))]
PageNumber = Annotated[int, Query(ge=1)]
PageSize = Annotated[int, Query(ge=1, le=100)]


# =============================================================================
# Albums
# =============================================================================

@router.get("/albums", response_model=Page[GalleryAlbum])
def list_albums(
    gallery: GalleryServiceDep,
    category: str | None = None,
    published: bool | None = None,
    page: PageNumber = 1,
    limit: PageSize = 12,
):
    return gallery.list_albums(category, published, page, limit)


@router.get("/albums/{album_id}", response_model=GalleryAlbum)
def get_album(album_id: str, gallery: GalleryServiceDep):
    return gallery.get_album(album_id)


@router.post("/albums", response_model=GalleryAlbum, status_code=201)
def create_album(album: GalleryAlbum, gallery: GalleryServiceDep):
    return gallery.create_album(album)


@router.put("/albums/{album_id}", response_model=GalleryAlbum)
def update_album(
    album_id: str,
    gallery: GalleryServiceDep,
    changes: Annotated[dict[str, Any], Body()],
):
    return gallery.update_album(album_id, changes)


@router.delete("/albums/{album_id}", status_code=204)
def delete_album(album_id: str, gallery: GalleryServiceDep) -> None:
    gallery.delete_album(album_id)


# =============================================================================
# Videos
# =============================================================================

@router.get("/videos", response_model=Page[GalleryVideo])
def list_videos(
    gallery: GalleryServiceDep,
    category: str | None = None,
    published: bool | None = None,
    page: PageNumber = 1,
    limit: PageSize = 12,
):
    return gallery.list_videos(category, published, page, limit)


@router.get("/videos/{video_id}", response_model=GalleryVideo)
def get_video(video_id: str, gallery: GalleryServiceDep):
    return gallery.get_video(video_id)


@router.post("/videos", response_model=GalleryVideo, status_code=201)
def create_video(video: GalleryVideo, gallery: GalleryServiceDep):
    return gallery.create_video(video)


@router.put("/videos/{video_id}", response_model=GalleryVideo)
def update_video(
    video_id: str,
    gallery: GalleryServiceDep,
    changes: Annotated[dict[str, Any], Body()],
):
    return gallery.update_video(video_id, changes)


@router.patch("/videos/{video_id}/views", response_model=GalleryVideo)
def count_video_view(video_id: str, gallery: GalleryServiceDep):
    return gallery.increment_video_views(video_id)


@router.delete("/videos/{video_id}", status_code=204)
def delete_video(video_id: str, gallery: GalleryServiceDep) -> None:
    gallery.delete_video(video_id)
