"""Service for comment submission validation logic."""
from __future__ import annotations

import re
from dataclasses import replace

from folio_api.domain.entities import CommentSubmission
from folio_api.domain.errors import ValidationError

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class CommentValidationService:
    """Validates comment submissions before they reach WordPress."""

    def __init__(self, min_length: int = 10) -> None:
        self._min_length = min_length

    def validate(self, submission: CommentSubmission) -> CommentSubmission:
        """Validate and normalize (trim) a submission."""
        author_name = (submission.author_name or "").strip()
        author_email = (submission.author_email or "").strip()
        content = (submission.content or "").strip()

        if not author_name or not author_email or not content:
            raise ValidationError("Name, email and comment are required")
        if not EMAIL_PATTERN.match(author_email):
            raise ValidationError("Invalid email address")
        if len(content) < self._min_length:
            raise ValidationError(f"Comment must be at least {self._min_length} characters long")

        return replace(
            submission,
            author_name=author_name,
            author_email=author_email,
            author_url=(submission.author_url or "").strip(),
            content=content,
            post_slug=(submission.post_slug or "").strip(),
            parent_id=submission.parent_id or 0,
        )
