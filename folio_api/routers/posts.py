from fastapi import APIRouter, Path, Query, Depends
from fastapi.responses import HTMLResponse
from folio_api.schemas.api_schemas import PostSchema
from folio_api.dependencies import get_content_gateway
from folio_api.application.content_gateway import ContentGateway
from folio_api.domain.errors import NotFoundError
from folio_api.domain.specifications import (
    PostHasTeam,
    PostWithTag,
    Specification,
    filter_by_specification,
)
from folio_api.text import inject_heading_ids
from typing import List, Optional

router = APIRouter()

@router.get("/posts", response_model=List[PostSchema])
def list_posts(
    tag: Optional[str] = Query(None, description="Only posts carrying this tag"),
    with_team: bool = Query(False, alias="withTeam", description="Only posts crediting a team"),
    gateway: ContentGateway = Depends(get_content_gateway)
):
    """
    Retrieve all published posts. Empty when WordPress is unavailable.
    """
    posts = gateway.list_posts()
    spec: Optional[Specification] = None
    if tag:
        spec = PostWithTag(tag)
    if with_team:
        spec = spec.and_(PostHasTeam()) if spec else PostHasTeam()
    if spec is not None:
        posts = filter_by_specification(posts, spec)
    return [PostSchema.from_entity(post) for post in posts]

@router.get("/posts/{slug}", response_model=PostSchema)
def get_post(
    slug: str = Path(..., title="The slug of the post to retrieve"),
    gateway: ContentGateway = Depends(get_content_gateway)
):
    """
    Get a specific post by slug.
    """
    post = gateway.get_post_by_slug(slug)
    if not post:
        raise NotFoundError(f"Post not found: {slug}")
    return PostSchema.from_entity(post)

@router.get("/posts/{slug}/html", response_class=HTMLResponse)
def get_post_html(
    slug: str = Path(..., title="The slug of the post to render"),
    gateway: ContentGateway = Depends(get_content_gateway)
):
    """
    Post content with anchor ids on its headings, ready for in-page navigation.
    """
    post = gateway.get_post_by_slug(slug)
    if not post:
        raise NotFoundError(f"Post not found: {slug}")
    return HTMLResponse(content=inject_heading_ids(post.content))
