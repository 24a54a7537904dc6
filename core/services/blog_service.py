# =============================================================================
# core/services/blog_service.py - Blog Post Endpoints
# =============================================================================

from __future__ import annotations

from typing import Any, Mapping

from core.models.blog import BlogPost
from core.services.base import ApiService, logs_failure, request_body
from lib.envelope import Page, unwrap_data, unwrap_flag, unwrap_page
from lib.utils import join_tags

POSTS_PATH = "/blogs/blog/posts"


def _post_body(data: BlogPost | Mapping[str, Any]) -> dict[str, Any]:
    # The backend expects tags as a single comma-separated string
    body = request_body(data)
    if "tags" in body:
        body["tags"] = join_tags(body["tags"])
    return body


class BlogPostService(ApiService):
    """CRUD over blog posts, plus published listing and slug checks."""

    @logs_failure("load blog posts")
    def list_posts(
        self,
        status: str | None = None,
        author: str | None = None,
        tag: str | None = None,
        page: int | None = None,
        limit: int | None = None,
        sort: str | None = None,
    ) -> Page[BlogPost]:
        query = {
            "status": status,
            "author": author,
            "tag": tag,
            "page": page,
            "limit": limit,
            "sort": sort,
        }
        return unwrap_page(self.client.get(POSTS_PATH, query), BlogPost)

    @logs_failure("load blog post")
    def get_post(self, post_id: str) -> BlogPost:
        return unwrap_data(self.client.get(f"{POSTS_PATH}/{post_id}"), BlogPost)

    @logs_failure("load blog post by slug")
    def get_post_by_slug(self, slug: str) -> BlogPost:
        return unwrap_data(self.client.get(f"{POSTS_PATH}/slug/{slug}"), BlogPost)

    @logs_failure("create blog post")
    def create_post(self, data: BlogPost | Mapping[str, Any]) -> BlogPost:
        return unwrap_data(self.client.post(POSTS_PATH, _post_body(data)), BlogPost)

    @logs_failure("update blog post")
    def update_post(self, post_id: str, data: BlogPost | Mapping[str, Any]) -> BlogPost:
        return unwrap_data(self.client.put(f"{POSTS_PATH}/{post_id}", _post_body(data)), BlogPost)

    @logs_failure("delete blog post")
    def delete_post(self, post_id: str) -> None:
        self.client.remove(f"{POSTS_PATH}/{post_id}")
        self.logger.info(f"Deleted blog post: {post_id}")

    @logs_failure("load published blog posts")
    def list_published(
        self,
        tag: str | None = None,
        page: int | None = None,
        limit: int | None = None,
        sort: str | None = None,
    ) -> Page[BlogPost]:
        query = {"tag": tag, "page": page, "limit": limit, "sort": sort}
        return unwrap_page(self.client.get(f"{POSTS_PATH}/published", query), BlogPost)

    @logs_failure("check slug availability")
    def check_slug_availability(self, slug: str, exclude_id: str | None = None) -> bool:
        """True if no other post uses `slug` (the post being edited is excluded)."""
        query = {"slug": slug, "excludeId": exclude_id}
        return unwrap_flag(self.client.get(f"{POSTS_PATH}/check-slug", query), "available")
