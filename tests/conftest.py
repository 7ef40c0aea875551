"""
Test configuration and fixtures for folio-api tests.

``FakeWordPress`` answers both WPGraphQL and REST calls through
``httpx.MockTransport``, so every transport runs its real code path.
"""
import json
from typing import Any, Callable, Dict, List, Optional, Tuple

import httpx
import pytest
from fastapi.testclient import TestClient

from folio_api.main import app
from folio_api.config import settings
from folio_api.dependencies import get_http_client
from folio_api.domain.events import event_publisher

WORDPRESS_URL = "https://cms.test"


class FakeWordPress:
    """In-memory WordPress site."""

    def __init__(self) -> None:
        self.graphql_posts: List[Dict[str, Any]] = []
        self.graphql_projects: List[Dict[str, Any]] = []
        self.rest_posts: List[Dict[str, Any]] = []
        self.rest_projects: List[Dict[str, Any]] = []
        self.comments: List[Dict[str, Any]] = []
        self.graphql_down = False
        self.graphql_without_page_info = False
        self.rest_down = False
        self.custom_comments_enabled = False
        self.routes: Dict[Tuple[str, str], Callable[[httpx.Request], httpx.Response]] = {}
        self.requests: List[httpx.Request] = []
        self.posted: List[Tuple[str, Dict[str, Any]]] = []

    # Builders

    def add_rest_post(self, slug: str, post_id: int = 1, title: str = "", **extra: Any) -> Dict[str, Any]:
        payload = {
            "id": post_id,
            "date": "2024-05-01T10:00:00",
            "slug": slug,
            "status": "publish",
            "type": "post",
            "link": f"{WORDPRESS_URL}/{slug}/",
            "title": {"rendered": title or slug.replace("-", " ").title()},
            "content": {"rendered": f"<p>Body of {slug}</p>", "protected": False},
            "excerpt": {"rendered": f"<p>Excerpt of {slug}</p>", "protected": False},
            "featured_media": 0,
            "acf": [],
        }
        payload.update(extra)
        self.rest_posts.append(payload)
        return payload

    def add_rest_project(self, slug: str, project_id: int = 1, **extra: Any) -> Dict[str, Any]:
        payload = {
            "id": project_id,
            "date": "2024-03-01T09:00:00",
            "slug": slug,
            "status": "publish",
            "type": "projet",
            "link": f"{WORDPRESS_URL}/projet/{slug}/",
            "title": {"rendered": slug.replace("-", " ").title()},
            "content": {"rendered": f"<p>Project {slug}</p>", "protected": False},
            "featured_media": 0,
            "acf": {},
        }
        payload.update(extra)
        self.rest_projects.append(payload)
        return payload

    def add_graphql_post(self, slug: str, database_id: int = 101, **extra: Any) -> Dict[str, Any]:
        node = {
            "id": f"cG9zdDo{database_id}",
            "databaseId": database_id,
            "slug": slug,
            "date": "2024-05-01T10:00:00",
            "title": slug.replace("-", " ").title(),
            "content": f"<p>Body of {slug}</p>",
            "excerpt": f"<p>Excerpt of {slug}</p>",
            "link": f"{WORDPRESS_URL}/{slug}/",
            "featuredImage": None,
        }
        node.update(extra)
        self.graphql_posts.append(node)
        return node

    def add_graphql_project(self, slug: str, **extra: Any) -> Dict[str, Any]:
        node = {
            "id": f"cHJvamV0:{slug}",
            "slug": slug,
            "date": "2024-03-01T09:00:00",
            "title": slug.replace("-", " ").title(),
            "link": f"{WORDPRESS_URL}/projet/{slug}/",
            "extrait": f"<p>Summary of {slug}</p>",
            "description": f"<p>Description of {slug}</p>",
            "client": "",
            "lienDuSiteLiveSite": None,
            "images": {"nodes": []},
        }
        node.update(extra)
        self.graphql_projects.append(node)
        return node

    # Transport

    def http_client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handler))

    def requests_to(self, path: str) -> List[httpx.Request]:
        return [request for request in self.requests if request.url.path == path]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        override = self.routes.get((request.method, path))
        if override:
            return override(request)
        if path == "/graphql":
            return self._graphql(request)
        if path == "/wp-json/custom/v1/comments":
            return self._custom_comments(request)
        if path.startswith("/wp-json/wp/v2/"):
            return self._rest(request, path[len("/wp-json/wp/v2/"):])
        return httpx.Response(404, json={"code": "rest_no_route"})

    def _graphql(self, request: httpx.Request) -> httpx.Response:
        if self.graphql_down:
            return httpx.Response(503, text="Service Unavailable")
        body = json.loads(request.content)
        query = body["query"]
        variables = body.get("variables") or {}

        if "postBy(" in query:
            return self._graphql_single("postBy", self.graphql_posts, variables["slug"])
        if "projetBy(" in query:
            return self._graphql_single("projetBy", self.graphql_projects, variables["slug"])
        if "posts(" in query:
            return self._graphql_connection("posts", self.graphql_posts, query, variables)
        if "projets(" in query:
            return self._graphql_connection("projets", self.graphql_projects, query, variables)
        return httpx.Response(200, json={"errors": [{"message": "Unknown query"}]})

    @staticmethod
    def _graphql_single(key: str, nodes: List[Dict[str, Any]], slug: str) -> httpx.Response:
        node = next((node for node in nodes if node["slug"] == slug), None)
        return httpx.Response(200, json={"data": {key: node}})

    def _graphql_connection(
        self, key: str, nodes: List[Dict[str, Any]], query: str, variables: Dict[str, Any]
    ) -> httpx.Response:
        first = variables.get("first", 10)
        if "pageInfo" not in query:
            return httpx.Response(200, json={"data": {key: {"nodes": nodes[:first]}}})
        if self.graphql_without_page_info:
            return httpx.Response(
                200,
                json={"errors": [{"message": f'Cannot query field "pageInfo" on type "{key}"'}]},
            )
        start = int(variables.get("after") or 0)
        page = nodes[start:start + first]
        end = start + len(page)
        return httpx.Response(200, json={"data": {key: {
            "nodes": page,
            "pageInfo": {"hasNextPage": end < len(nodes), "endCursor": str(end) if page else None},
        }}})

    def _rest(self, request: httpx.Request, resource: str) -> httpx.Response:
        if self.rest_down:
            return httpx.Response(500, json={"code": "internal_server_error"})
        params = request.url.params

        if resource in ("posts", "projet"):
            items = self.rest_posts if resource == "posts" else self.rest_projects
            if "slug" in params:
                items = [item for item in items if item["slug"] == params["slug"]]
            return httpx.Response(200, json=items[:int(params.get("per_page", 10))])

        if resource.startswith("posts/"):
            post_id = int(resource.split("/", 1)[1])
            post = next((post for post in self.rest_posts if post["id"] == post_id), None)
            if post is None:
                return httpx.Response(404, json={"code": "rest_post_invalid_id"})
            return httpx.Response(200, json={"id": post["id"], "slug": post["slug"]})

        if resource == "comments" and request.method == "GET":
            post_id = int(params["post"])
            return httpx.Response(200, json=[c for c in self.comments if c["post"] == post_id])

        if resource == "comments" and request.method == "POST":
            payload = json.loads(request.content)
            self.posted.append(("standard", payload))
            return httpx.Response(201, json={"id": 501, "status": "hold", "post": payload["post"]})

        return httpx.Response(404, json={"code": "rest_no_route"})

    def _custom_comments(self, request: httpx.Request) -> httpx.Response:
        if not self.custom_comments_enabled:
            return httpx.Response(404, json={"code": "rest_no_route"})
        payload = json.loads(request.content)
        self.posted.append(("custom", payload))
        return httpx.Response(200, json={"success": True, "id": 77, "status": "hold"})


def rest_comment(comment_id: int, post: int, status: str = "approved", parent: int = 0) -> Dict[str, Any]:
    return {
        "id": comment_id,
        "post": post,
        "parent": parent,
        "author_name": f"Reader {comment_id}",
        "author_email": f"reader{comment_id}@example.com",
        "author_url": "",
        "date": "2024-05-02T08:00:00",
        "date_gmt": "2024-05-02T06:00:00",
        "content": {"rendered": f"<p>Comment {comment_id}</p>"},
        "status": status,
    }


@pytest.fixture(autouse=True)
def test_settings(monkeypatch):
    """Point settings at the fake WordPress site."""
    monkeypatch.setattr(settings, "WORDPRESS_URL", WORDPRESS_URL)
    monkeypatch.setattr(settings, "USE_WORDPRESS_GRAPHQL", True)
    monkeypatch.setattr(settings, "SITE_BASE_URL", "https://www.example.com")
    monkeypatch.setattr(settings, "SITE_ROUTES", ["/", "/blog"])
    yield settings


@pytest.fixture(autouse=True)
def clean_event_subscribers():
    """Keep the singleton publisher free of handlers between tests."""
    event_publisher.clear_subscribers()
    yield
    event_publisher.clear_subscribers()


@pytest.fixture
def wordpress():
    """Create an empty fake WordPress site."""
    return FakeWordPress()


@pytest.fixture
def http(wordpress):
    """httpx client bound to the fake site."""
    client = wordpress.http_client()
    yield client
    client.close()


@pytest.fixture
def client(http):
    """Create test client wired to the fake site."""
    app.dependency_overrides[get_http_client] = lambda: http
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def comment_factory():
    """Build REST comment payloads."""
    return rest_comment
