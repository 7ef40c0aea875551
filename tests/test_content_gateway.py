"""Tests for the content gateway and its transport fallback."""
import logging
from unittest.mock import Mock

import pytest

from folio_api.application.content_gateway import ContentGateway
from folio_api.config import settings
from folio_api.dependencies import build_content_gateway
from folio_api.domain.entities import Post, PostMetadata
from folio_api.domain.errors import ContentSourceError
from folio_api.domain.events import (
    event_publisher,
    ContentFetched,
    ContentUnavailable,
    StrategyFailed,
)
from folio_api.domain.strategies import EntityKind, Selector, StrategyChainFactory


def make_post(slug: str) -> Post:
    return Post(slug=slug, metadata=PostMetadata(title=slug, published_at="2024-01-01"))


def strategy(name: str, result=None, error: Exception = None) -> Mock:
    mock = Mock()
    mock.name = name
    if error is not None:
        mock.fetch.side_effect = error
    else:
        mock.fetch.return_value = result if result is not None else []
    return mock


@pytest.fixture
def gateway(http):
    """Gateway built from settings, wired to the fake site."""
    return build_content_gateway(http)


class TestStrategyChainFactory:
    """Test transport ordering."""

    def test_graphql_first(self):
        graphql, rest = strategy("graphql"), strategy("rest")
        assert StrategyChainFactory.build(True, graphql, rest) == (graphql, rest)

    def test_rest_only(self):
        graphql, rest = strategy("graphql"), strategy("rest")
        assert StrategyChainFactory.build(False, graphql, rest) == (rest,)


class TestGatewayFallback:
    """Test the gateway against strategy doubles."""

    def test_first_success_short_circuits(self):
        primary = strategy("graphql", [make_post("a")])
        secondary = strategy("rest", [make_post("b")])

        outcome = ContentGateway([primary, secondary]).fetch(EntityKind.POST, Selector.all())

        assert outcome.ok
        assert outcome.source == "graphql"
        assert [post.slug for post in outcome.records] == ["a"]
        secondary.fetch.assert_not_called()

    def test_empty_answer_is_authoritative(self):
        primary = strategy("graphql", [])
        secondary = strategy("rest", [make_post("hello")])

        gateway = ContentGateway([primary, secondary])

        assert gateway.get_post_by_slug("hello") is None
        secondary.fetch.assert_not_called()

    def test_failure_moves_to_next_strategy(self, caplog):
        primary = strategy("graphql", error=ContentSourceError("boom"))
        secondary = strategy("rest", [make_post("b")])

        with caplog.at_level(logging.WARNING):
            outcome = ContentGateway([primary, secondary]).fetch(EntityKind.POST, Selector.all())

        assert outcome.source == "rest"
        assert [failure.strategy for failure in outcome.failures] == ["graphql"]
        assert "graphql failed for post list" in caplog.text

    def test_unexpected_exception_is_contained(self):
        primary = strategy("graphql", error=KeyError("nodes"))
        secondary = strategy("rest", [make_post("b")])

        posts = ContentGateway([primary, secondary]).list_posts()

        assert [post.slug for post in posts] == ["b"]

    def test_all_failed(self, caplog):
        gateway = ContentGateway([
            strategy("graphql", error=ContentSourceError("down")),
            strategy("rest", error=ContentSourceError("down too")),
        ])

        with caplog.at_level(logging.ERROR):
            outcome = gateway.fetch(EntityKind.PROJECT, Selector.by_slug("x"))

        assert outcome.ok is False
        assert outcome.records == []
        assert outcome.first() is None
        assert len(outcome.failures) == 2
        assert "All transports failed for project 'x'" in caplog.text

    def test_empty_slug_skips_transports(self):
        primary = strategy("graphql", [make_post("a")])

        gateway = ContentGateway([primary])

        assert gateway.get_post_by_slug("") is None
        assert gateway.get_project_by_slug("") is None
        primary.fetch.assert_not_called()

    def test_events_published(self):
        fetched, failed, unavailable = [], [], []
        event_publisher.subscribe(ContentFetched, fetched.append)
        event_publisher.subscribe(StrategyFailed, failed.append)
        event_publisher.subscribe(ContentUnavailable, unavailable.append)

        ContentGateway([
            strategy("graphql", error=ContentSourceError("down")),
            strategy("rest", [make_post("a"), make_post("b")]),
        ]).list_posts()
        ContentGateway([strategy("rest", error=ContentSourceError("down"))]).list_projects()

        assert [(event.strategy, event.count) for event in fetched] == [("rest", 2)]
        assert [(event.strategy, event.kind) for event in failed] == [("graphql", "post"), ("rest", "project")]
        assert [(event.kind, event.attempts) for event in unavailable] == [("project", 1)]
        assert fetched[0].event_id
        assert fetched[0].timestamp is not None


class TestGatewayOverWordPress:
    """Test the gateway end to end against the fake site."""

    def test_graphql_down_rest_serves_every_post(self, gateway, wordpress):
        wordpress.graphql_down = True
        for number in range(3):
            wordpress.add_rest_post(f"post-{number}", post_id=number + 1)

        posts = gateway.list_posts()

        assert len(posts) == 3
        assert {post.slug for post in posts} == {"post-0", "post-1", "post-2"}

    def test_graphql_preferred_when_up(self, gateway, wordpress):
        wordpress.add_graphql_post("from-graphql")
        wordpress.add_rest_post("from-rest")

        assert [post.slug for post in gateway.list_posts()] == ["from-graphql"]
        assert wordpress.requests_to("/wp-json/wp/v2/posts") == []

    def test_one_malformed_rest_item_keeps_the_rest(self, gateway, wordpress):
        wordpress.graphql_down = True
        wordpress.add_rest_post("good-one", post_id=1)
        wordpress.add_rest_post("", post_id=2)
        wordpress.add_rest_post("good-two", post_id=3)

        assert [post.slug for post in gateway.list_posts()] == ["good-one", "good-two"]

    def test_slug_lookup_returns_matching_record(self, gateway, wordpress):
        wordpress.graphql_down = True
        wordpress.add_rest_post("first", post_id=1)
        wordpress.add_rest_post("second", post_id=2)

        post = gateway.get_post_by_slug("second")

        assert post is not None
        assert post.slug == "second"

    def test_unknown_slug(self, gateway, wordpress):
        wordpress.add_graphql_project("known")

        assert gateway.get_project_by_slug("unknown") is None

    def test_everything_down(self, gateway, wordpress):
        wordpress.graphql_down = True
        wordpress.rest_down = True

        assert gateway.list_posts() == []
        assert gateway.list_projects() == []
        assert gateway.get_post_by_slug("anything") is None

    def test_missing_base_url_degrades_to_empty(self, http, test_settings, monkeypatch):
        monkeypatch.setattr(settings, "WORDPRESS_URL", "")
        gateway = build_content_gateway(http)

        assert gateway.list_posts() == []
        assert gateway.get_project_by_slug("x") is None

    def test_rest_only_when_graphql_disabled(self, http, wordpress, monkeypatch):
        monkeypatch.setattr(settings, "USE_WORDPRESS_GRAPHQL", False)
        wordpress.add_graphql_post("from-graphql")
        wordpress.add_rest_post("from-rest")
        gateway = build_content_gateway(http)

        assert gateway.strategy_names == ["rest"]
        assert [post.slug for post in gateway.list_posts()] == ["from-rest"]
        assert wordpress.requests_to("/graphql") == []
