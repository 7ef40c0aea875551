from fastapi import APIRouter, Path, Query, Depends
from folio_api.schemas.api_schemas import (
    CommentCreate,
    CommentCreateResponse,
    CommentListResponse,
    CommentSchema,
)
from folio_api.dependencies import get_comment_service
from folio_api.application.comment_service import CommentService
from folio_api.domain.entities import CommentSubmission
from folio_api.domain.specifications import CommentIsReply, filter_by_specification

router = APIRouter()

@router.get("/comments/{post_id}", response_model=CommentListResponse)
def list_comments(
    post_id: int = Path(..., title="WordPress id of the post (REST or GraphQL)"),
    top_level: bool = Query(False, alias="topLevel", description="Leave out replies to other comments"),
    service: CommentService = Depends(get_comment_service)
):
    """
    Approved comments of a post, oldest first.
    """
    comments = service.list_comments(post_id)
    if top_level:
        comments = filter_by_specification(comments, CommentIsReply().not_())
    return CommentListResponse(comments=[CommentSchema.from_entity(comment) for comment in comments])

@router.post("/comments", response_model=CommentCreateResponse)
def create_comment(
    comment_data: CommentCreate,
    service: CommentService = Depends(get_comment_service)
):
    """
    Submit a comment. It is stored in WordPress and held for moderation.
    """
    receipt = service.create_comment(CommentSubmission(
        post_id=comment_data.post_id,
        post_slug=comment_data.post_slug,
        parent_id=comment_data.parent_id,
        author_name=comment_data.author_name,
        author_email=comment_data.author_email,
        author_url=comment_data.author_url,
        content=comment_data.content,
    ))
    return CommentCreateResponse.from_receipt(receipt)
