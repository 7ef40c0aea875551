"""Comment listing and submission against WordPress native comments."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from folio_api.application.comment_validation_service import CommentValidationService
from folio_api.domain.entities import Comment, CommentReceipt, CommentSubmission
from folio_api.domain.errors import (
    ContentSourceError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from folio_api.domain.events import event_publisher, CommentSubmitted
from folio_api.domain.specifications import CommentApproved, filter_by_specification
from folio_api.infrastructure.rest_client import WordPressRestClient
from folio_api.transforms import comment_from_rest

logger = logging.getLogger(__name__)


class CommentService:
    """Reads and creates comments through the WordPress REST API.

    Post ids handed to this service may come from GraphQL (``databaseId``) and
    are verified against REST before comments are queried.
    """

    def __init__(
        self,
        rest: WordPressRestClient,
        validator: CommentValidationService,
        custom_endpoint_path: str = "/wp-json/custom/v1/comments",
        per_page: int = 100,
    ) -> None:
        self._rest = rest
        self._validator = validator
        self._custom_endpoint_path = custom_endpoint_path
        self._per_page = per_page

    def list_comments(self, post_id: int) -> List[Comment]:
        if not post_id or post_id <= 0:
            raise ValidationError(f"Invalid post id: {post_id}")
        self._rest.require_base()

        verified_id = self._verify_post_id(post_id)
        payload = self._fetch_comment_payload(verified_id, post_id)
        if not isinstance(payload, list):
            raise ContentSourceError("Comments response is not a list")

        comments = [comment_from_rest(item) for item in payload]
        approved = filter_by_specification(comments, CommentApproved())
        logger.info(
            f"[Comments] {len(comments)} comment(s) for post {verified_id} "
            f"(requested {post_id}), {len(approved)} approved"
        )
        return approved if approved else comments

    def create_comment(self, submission: CommentSubmission) -> CommentReceipt:
        submission = self._validator.validate(submission)
        self._rest.require_base()

        receipt = self._submit_custom(submission)
        if receipt is None:
            receipt = self._submit_standard(submission)

        logger.info(
            f"[Comments] Comment {receipt.comment_id} from {submission.author_email} "
            f"stored via {receipt.endpoint} endpoint ({receipt.status})"
        )
        event_publisher.publish(CommentSubmitted(
            event_id="",
            timestamp=None,
            aggregate_id=str(receipt.comment_id or ""),
            post_id=submission.post_id,
            endpoint=receipt.endpoint,
            status=receipt.status,
        ))
        return receipt

    def _verify_post_id(self, post_id: int) -> int:
        try:
            post = self._rest.get_json(
                self._rest.endpoint(f"posts/{post_id}"),
                params={"_fields": "id,slug"},
            )
        except ContentSourceError as e:
            logger.warning(f"[Comments] Post {post_id} not found directly, keeping requested id: {e}")
            return post_id
        if isinstance(post, dict) and post.get("id"):
            return int(post["id"])
        return post_id

    def _fetch_comment_payload(self, verified_id: int, requested_id: int) -> Any:
        base_params = {"orderby": "date", "order": "asc", "per_page": self._per_page}
        attempts: List[Dict[str, Any]] = [
            {"post": verified_id, "status": "approved", **base_params},
            {"post": verified_id, **base_params},
        ]
        if verified_id != requested_id:
            attempts.append({"post": requested_id, **base_params})

        last_error: Optional[ContentSourceError] = None
        for number, params in enumerate(attempts, start=1):
            try:
                return self._rest.get_json(self._rest.endpoint("comments"), params=params)
            except ContentSourceError as e:
                logger.warning(f"[Comments] Attempt {number} failed for post {params['post']}: {e}")
                last_error = e

        raise ContentSourceError(
            f"Unable to fetch comments: {last_error}",
            status_code=last_error.status_code if last_error else None,
        )

    def _submit_custom(self, submission: CommentSubmission) -> Optional[CommentReceipt]:
        """Moderation-free endpoint from the companion WordPress plugin."""
        try:
            result = self._rest.post_json(
                self._rest.site_url(self._custom_endpoint_path),
                {
                    "postId": submission.post_id,
                    "postSlug": submission.post_slug,
                    "parentId": submission.parent_id,
                    "authorName": submission.author_name,
                    "authorEmail": submission.author_email,
                    "authorUrl": submission.author_url,
                    "content": submission.content,
                },
            )
        except ContentSourceError as e:
            logger.warning(f"[Comments] Custom endpoint unavailable, falling back to REST API: {e}")
            return None

        result = result if isinstance(result, dict) else {}
        return CommentReceipt(
            comment_id=result.get("id"),
            status=result.get("status") or "hold",
            endpoint="custom",
        )

    def _submit_standard(self, submission: CommentSubmission) -> CommentReceipt:
        post_id = submission.post_id or self._resolve_post_id(submission.post_slug)
        if not post_id:
            raise NotFoundError("Post not found")

        try:
            created = self._rest.post_json(
                self._rest.endpoint("comments"),
                {
                    "post": post_id,
                    "author_name": submission.author_name,
                    "author_email": submission.author_email,
                    "author_url": submission.author_url,
                    "content": submission.content,
                    "parent": submission.parent_id,
                    "status": "hold",
                },
            )
        except ContentSourceError as e:
            if e.status_code == 403:
                raise ForbiddenError("Comments are closed for this post") from e
            logger.error(f"[Comments] WordPress REST API refused the comment: {e}")
            raise ContentSourceError(
                "Unable to send the comment, please try again later",
                status_code=e.status_code,
            ) from e

        created = created if isinstance(created, dict) else {}
        return CommentReceipt(
            comment_id=created.get("id"),
            status=created.get("status") or "hold",
            endpoint="standard",
        )

    def _resolve_post_id(self, slug: str) -> Optional[int]:
        if not slug:
            return None
        try:
            posts = self._rest.get_json(
                self._rest.endpoint("posts"),
                params={"slug": slug, "_fields": "id"},
            )
        except ContentSourceError as e:
            logger.warning(f"[Comments] Could not resolve post id for slug '{slug}': {e}")
            return None
        if isinstance(posts, list) and posts and isinstance(posts[0], dict):
            return posts[0].get("id")
        return None
