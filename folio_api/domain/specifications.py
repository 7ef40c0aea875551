"""Specification pattern for reusable filtering logic."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List, TypeVar

T = TypeVar("T")

APPROVED_COMMENT_STATUSES = ("approved", "approve")


class Specification(ABC):
    """Abstract base for specifications (collection filters)."""
    
    @abstractmethod
    def is_satisfied_by(self, candidate: Any) -> bool:
        """Check if candidate satisfies this specification."""
        pass
    
    def and_(self, other: Specification) -> Specification:
        """Combine with AND logic."""
        return AndSpecification(self, other)
    
    def not_(self) -> Specification:
        """Negate this specification."""
        return NotSpecification(self)


class AndSpecification(Specification):
    """AND composite specification."""
    
    def __init__(self, left: Specification, right: Specification):
        self.left = left
        self.right = right
    
    def is_satisfied_by(self, candidate: Any) -> bool:
        return self.left.is_satisfied_by(candidate) and self.right.is_satisfied_by(candidate)


class NotSpecification(Specification):
    """NOT specification."""
    
    def __init__(self, spec: Specification):
        self.spec = spec
    
    def is_satisfied_by(self, candidate: Any) -> bool:
        return not self.spec.is_satisfied_by(candidate)


# Post Specifications

class PostWithTag(Specification):
    """Posts carrying a tag (case-insensitive exact match)."""
    
    def __init__(self, tag: str):
        self.tag = tag.strip().lower()
    
    def is_satisfied_by(self, post: Any) -> bool:
        return (post.metadata.tag or "").strip().lower() == self.tag


class PostHasTeam(Specification):
    """Posts crediting at least one team member."""
    
    def is_satisfied_by(self, post: Any) -> bool:
        return len(post.metadata.team) > 0


# Project Specifications

class ProjectForClient(Specification):
    """Projects delivered for a client (case-insensitive contains)."""
    
    def __init__(self, client_pattern: str):
        self.pattern = client_pattern.lower()
    
    def is_satisfied_by(self, project: Any) -> bool:
        return self.pattern in (project.metadata.client or "").lower()


# Comment Specifications

class CommentApproved(Specification):
    """Comments WordPress reports as approved."""
    
    def is_satisfied_by(self, comment: Any) -> bool:
        return comment.status in APPROVED_COMMENT_STATUSES


class CommentIsReply(Specification):
    """Comments answering another comment."""
    
    def is_satisfied_by(self, comment: Any) -> bool:
        return comment.parent != 0


# Helper function to filter collections

def filter_by_specification(items: List[T], spec: Specification) -> List[T]:
    """Filter a collection using a specification."""
    return [item for item in items if spec.is_satisfied_by(item)]
