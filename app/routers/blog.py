# =============================================================================
# app/routers/blog.py - Blog Post Endpoints
# =============================================================================

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Path, Query

from app.dependencies import service
from core.models.blog import BlogPost
from core.services.blog_service import BlogPostService
from lib.envelope import Page
from lib.utils import slugify

router = APIRouter()

BlogServiceDep = Annotated[BlogPostService, Depends(service(BlogPostService))]
PostId = Annotated[str, Path(description="Blog post id")]


@router.get("", response_model=Page[BlogPost])
def list_posts(
    posts: BlogServiceDep,
    status: str | None = None,
    author: str | None = None,
    tag: str | None = None,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=100)] = 10,
    sort: str | None = None,
):
    return posts.list_posts(status, author, tag, page, limit, sort)


@router.get("/published", response_model=Page[BlogPost])
def list_published_posts(
    posts: BlogServiceDep,
    tag: str | None = None,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=100)] = 10,
    sort: str | None = None,
):
    return posts.list_published(tag, page, limit, sort)


@router.get("/check-slug")
def check_slug(
    posts: BlogServiceDep,
    slug: str,
    exclude_id: Annotated[str | None, Query(alias="excludeId")] = None,
) -> dict:
    """Tell the editor whether `slug` is free (ignoring the post being edited)."""
    return {"slug": slug, "available": posts.check_slug_availability(slug, exclude_id)}


@router.get("/slug/{slug}", response_model=BlogPost)
def get_post_by_slug(slug: str, posts: BlogServiceDep):
    return posts.get_post_by_slug(slug)


@router.get("/{post_id}", response_model=BlogPost)
def get_post(post_id: PostId, posts: BlogServiceDep):
    return posts.get_post(post_id)


@router.post("", response_model=BlogPost, status_code=201)
def create_post(posts: BlogServiceDep, data: Annotated[dict[str, Any], Body()]):
    """
    Create a post.

    When no slug is given it is derived from the title.
    """
    if not data.get("slug") and data.get("title"):
        data["slug"] = slugify(data["title"])
    return posts.create_post(data)


@router.put("/{post_id}", response_model=BlogPost)
def update_post(
    post_id: PostId,
    posts: BlogServiceDep,
    changes: Annotated[dict[str, Any], Body()],
):
    return posts.update_post(post_id, changes)


@router.delete("/{post_id}", status_code=204)
def delete_post(post_id: PostId, posts: BlogServiceDep) -> None:
    posts.delete_post(post_id)
