"""Event handlers for domain events."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from folio_api.domain.events import (
        ContentFetched,
        StrategyFailed,
        ContentUnavailable,
        CommentSubmitted,
    )

logger = logging.getLogger(__name__)


class AuditLogHandler:
    """Logs gateway and comment events for audit trail."""
    
    def handle_content_fetched(self, event: ContentFetched) -> None:
        logger.info(f"[AUDIT] {event.count} {event.kind}(s) served by {event.strategy} for {event.aggregate_id}")
    
    def handle_strategy_failed(self, event: StrategyFailed) -> None:
        logger.info(f"[AUDIT] {event.strategy} failed for {event.kind} {event.aggregate_id}: {event.error}")
    
    def handle_comment_submitted(self, event: CommentSubmitted) -> None:
        logger.info(f"[AUDIT] Comment {event.aggregate_id} on post {event.post_id} via {event.endpoint} ({event.status})")


class AvailabilityAlertHandler:
    """Flags requests the site could not serve from any transport."""
    
    def handle_content_unavailable(self, event: ContentUnavailable) -> None:
        logger.warning(
            f"[ALERT] No transport could serve {event.kind} {event.aggregate_id} "
            f"after {event.attempts} attempt(s); pages will render without it"
        )


class ModerationNotificationHandler:
    """Notes comments waiting for moderation."""
    
    def handle_comment_submitted(self, event: CommentSubmitted) -> None:
        if event.status == "hold":
            logger.info(f"[NOTIFICATION] Comment {event.aggregate_id} awaits moderation")


def register_event_handlers():
    """Register all event handlers with the publisher."""
    from folio_api.domain.events import (
        event_publisher,
        ContentFetched,
        StrategyFailed,
        ContentUnavailable,
        CommentSubmitted,
    )
    
    audit = AuditLogHandler()
    alerts = AvailabilityAlertHandler()
    moderation = ModerationNotificationHandler()
    
    # Audit handlers
    event_publisher.subscribe(ContentFetched, audit.handle_content_fetched)
    event_publisher.subscribe(StrategyFailed, audit.handle_strategy_failed)
    event_publisher.subscribe(CommentSubmitted, audit.handle_comment_submitted)
    
    # Alerts
    event_publisher.subscribe(ContentUnavailable, alerts.handle_content_unavailable)
    
    # Notifications
    event_publisher.subscribe(CommentSubmitted, moderation.handle_comment_submitted)
