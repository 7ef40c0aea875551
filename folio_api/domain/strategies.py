"""Strategy pattern for content transports."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Protocol, Sequence, Union

from folio_api.domain.entities import Post, Project

Record = Union[Post, Project]


class EntityKind(str, Enum):
    """Content types the gateway knows how to fetch."""
    POST = "post"
    PROJECT = "project"


@dataclass(frozen=True)
class Selector:
    """Which records to fetch: everything published, or one slug."""
    slug: Optional[str] = None

    @classmethod
    def all(cls) -> Selector:
        return cls()

    @classmethod
    def by_slug(cls, slug: str) -> Selector:
        return cls(slug=slug)

    @property
    def is_single(self) -> bool:
        return self.slug is not None


class ContentStrategy(Protocol):
    """Protocol for content transport strategies."""

    name: str

    def fetch(self, kind: EntityKind, selector: Selector) -> List[Record]:
        """Fetch canonical records.

        Single-slug selectors return zero or one record. Any failure is
        raised; the caller decides whether to fall back.
        """
        ...


@dataclass
class StrategyFailure:
    strategy: str
    error: Exception


@dataclass
class FetchOutcome:
    """Result of walking the strategy chain.

    ``source`` is the name of the strategy that answered, or ``None`` when
    every strategy failed (``records`` is then empty).
    """
    records: List[Record] = field(default_factory=list)
    source: Optional[str] = None
    failures: List[StrategyFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.source is not None

    def first(self) -> Optional[Record]:
        return self.records[0] if self.records else None


class StrategyChainFactory:
    """Factory to order transport strategies from the feature flag."""

    @classmethod
    def build(
        cls,
        use_graphql: bool,
        graphql: ContentStrategy,
        rest: ContentStrategy,
    ) -> Sequence[ContentStrategy]:
        """GraphQL first with REST as fallback, or REST alone."""
        if use_graphql:
            return (graphql, rest)
        return (rest,)
