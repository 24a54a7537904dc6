# =============================================================================
# core/services/gallery_service.py - Gallery Endpoints
# =============================================================================

from __future__ import annotations

from typing import Any, Mapping

from core.models.gallery import GalleryAlbum, GalleryVideo
from core.services.base import ApiService, logs_failure, request_body
from lib.envelope import Page, unwrap_data, unwrap_page


def _listing_query(
    category: str | None,
    published: bool | None,
    page: int | None,
    limit: int | None,
) -> dict[str, Any]:
    return {
        "category": category,
        "published": None if published is None else str(published).lower(),
        "page": page,
        "limit": limit,
    }


class GalleryService(ApiService):
    """Albums and videos under /gallery."""

    # -------------------------------------------------------------------------
    # Albums
    # -------------------------------------------------------------------------

    @logs_failure("load albums")
    def list_albums(
        self,
        category: str | None = None,
        published: bool | None = None,
        page: int | None = None,
        limit: int | None = None,
    ) -> Page[GalleryAlbum]:
        query = _listing_query(category, published, page, limit)
        return unwrap_page(self.client.get("/gallery/albums", query), GalleryAlbum)

    @logs_failure("load album")
    def get_album(self, album_id: str) -> GalleryAlbum:
        return unwrap_data(self.client.get(f"/gallery/albums/{album_id}"), GalleryAlbum)

    @logs_failure("create album")
    def create_album(self, data: GalleryAlbum | Mapping[str, Any]) -> GalleryAlbum:
        return unwrap_data(self.client.post("/gallery/albums", request_body(data)), GalleryAlbum)

    @logs_failure("update album")
    def update_album(self, album_id: str, data: GalleryAlbum | Mapping[str, Any]) -> GalleryAlbum:
        return unwrap_data(
            self.client.put(f"/gallery/albums/{album_id}", request_body(data)), GalleryAlbum
        )

    @logs_failure("delete album")
    def delete_album(self, album_id: str) -> None:
        self.client.remove(f"/gallery/albums/{album_id}")
        self.logger.info(f"Deleted album: {album_id}")

    # -------------------------------------------------------------------------
    # Videos
    # -------------------------------------------------------------------------

    @logs_failure("load videos")
    def list_videos(
        self,
        category: str | None = None,
        published: bool | None = None,
        page: int | None = None,
        limit: int | None = None,
    ) -> Page[GalleryVideo]:
        query = _listing_query(category, published, page, limit)
        return unwrap_page(self.client.get("/gallery/videos", query), GalleryVideo)

    @logs_failure("load video")
    def get_video(self, video_id: str) -> GalleryVideo:
        return unwrap_data(self.client.get(f"/gallery/videos/{video_id}"), GalleryVideo)

    @logs_failure("create video")
    def create_video(self, data: GalleryVideo | Mapping[str, Any]) -> GalleryVideo:
        return unwrap_data(self.client.post("/gallery/videos", request_body(data)), GalleryVideo)

    @logs_failure("update video")
    def update_video(self, video_id: str, data: GalleryVideo | Mapping[str, Any]) -> GalleryVideo:
        return unwrap_data(
            self.client.put(f"/gallery/videos/{video_id}", request_body(data)), GalleryVideo
        )

    @logs_failure("delete video")
    def delete_video(self, video_id: str) -> None:
        self.client.remove(f"/gallery/videos/{video_id}")
        self.logger.info(f"Deleted video: {video_id}")

    @logs_failure("increment video views")
    def increment_video_views(self, video_id: str) -> GalleryVideo:
        return unwrap_data(self.client.patch(f"/gallery/videos/{video_id}/views"), GalleryVideo)
