"""Content gateway: canonical posts and projects with transport fallback."""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from folio_api.domain.entities import Post, Project
from folio_api.domain.events import (
    event_publisher,
    ContentFetched,
    ContentUnavailable,
    StrategyFailed,
)
from folio_api.domain.strategies import (
    ContentStrategy,
    EntityKind,
    FetchOutcome,
    Selector,
    StrategyFailure,
)

logger = logging.getLogger(__name__)


class ContentGateway:
    """Walks an ordered chain of transport strategies.

    The first strategy that answers wins, including an answer of "no such
    slug". A failing strategy is logged and the next one is tried. When every
    strategy fails the outcome is empty: list accessors return ``[]`` and slug
    accessors return ``None``. Nothing is raised to callers.
    """

    def __init__(self, strategies: Sequence[ContentStrategy]) -> None:
        self._strategies = list(strategies)

    @property
    def strategy_names(self) -> List[str]:
        return [strategy.name for strategy in self._strategies]

    def fetch(self, kind: EntityKind, selector: Selector) -> FetchOutcome:
        outcome = FetchOutcome()
        target = f"{kind.value} '{selector.slug}'" if selector.is_single else f"{kind.value} list"

        for strategy in self._strategies:
            try:
                records = strategy.fetch(kind, selector)
            except Exception as e:
                logger.warning(f"[Gateway] {strategy.name} failed for {target}, trying next transport: {e}")
                outcome.failures.append(StrategyFailure(strategy=strategy.name, error=e))
                event_publisher.publish(StrategyFailed(
                    event_id="",
                    timestamp=None,
                    aggregate_id=selector.slug or kind.value,
                    kind=kind.value,
                    strategy=strategy.name,
                    error=str(e),
                ))
                continue

            outcome.records = list(records)
            outcome.source = strategy.name
            event_publisher.publish(ContentFetched(
                event_id="",
                timestamp=None,
                aggregate_id=selector.slug or kind.value,
                kind=kind.value,
                strategy=strategy.name,
                count=len(outcome.records),
            ))
            return outcome

        logger.error(f"[Gateway] All transports failed for {target}")
        event_publisher.publish(ContentUnavailable(
            event_id="",
            timestamp=None,
            aggregate_id=selector.slug or kind.value,
            kind=kind.value,
            attempts=len(outcome.failures),
        ))
        return outcome

    def list_posts(self) -> List[Post]:
        return self.fetch(EntityKind.POST, Selector.all()).records

    def get_post_by_slug(self, slug: str) -> Optional[Post]:
        if not slug:
            return None
        return self.fetch(EntityKind.POST, Selector.by_slug(slug)).first()

    def list_projects(self) -> List[Project]:
        return self.fetch(EntityKind.PROJECT, Selector.all()).records

    def get_project_by_slug(self, slug: str) -> Optional[Project]:
        if not slug:
            return None
        return self.fetch(EntityKind.PROJECT, Selector.by_slug(slug)).first()
