"""Blog post transforms (REST ``/wp/v2/posts`` and WPGraphQL ``posts``)."""
from __future__ import annotations

from typing import Any, Dict, Optional

from folio_api.domain.entities import Post, PostMetadata
from folio_api.text import decode_html_entities, plain_excerpt
from folio_api.transforms.common import (
    acf_fields,
    graphql_media_url,
    parse_images,
    parse_team,
    rendered,
    require_slug,
    rest_featured_image,
)


def _as_int(value: Any) -> Optional[int]:
    try:
        return int(value) if value is not None else None
    except (TypeError, ValueError):
        return None


def pods_field(node: Dict[str, Any], name: str) -> Any:
    """Pods field exposed on the node itself, or under a nested ``pods`` object."""
    value = node.get(name)
    if value:
        return value
    pods = node.get("pods")
    if isinstance(pods, dict):
        return pods.get(name)
    return None


def post_from_rest(payload: Dict[str, Any]) -> Post:
    slug = require_slug(payload, "post")
    acf = acf_fields(payload)

    featured = rest_featured_image(payload)
    images = parse_images(acf.get("images"))
    if not images and featured:
        images = [featured]

    return Post(
        slug=slug,
        id=_as_int(payload.get("id")),
        content=rendered(payload.get("content")),
        metadata=PostMetadata(
            title=decode_html_entities(rendered(payload.get("title"))),
            published_at=payload.get("date") or "",
            summary=acf.get("summary") or plain_excerpt(rendered(payload.get("excerpt"))),
            image=featured,
            images=images,
            tag=acf.get("tag") or "",
            team=parse_team(acf.get("team"), context=f"post {slug}"),
            link=payload.get("link") or "",
        ),
    )


def post_from_graphql(node: Dict[str, Any]) -> Post:
    slug = require_slug(node, "post")

    featured_node = (node.get("featuredImage") or {}).get("node")
    featured = graphql_media_url(featured_node) or pods_field(node, "image") or ""
    images = parse_images(pods_field(node, "images"))
    if not images and featured:
        images = [featured]

    return Post(
        slug=slug,
        id=_as_int(node.get("databaseId")),
        content=node.get("content") or "",
        metadata=PostMetadata(
            title=decode_html_entities(node.get("title") or ""),
            published_at=node.get("date") or "",
            summary=pods_field(node, "summary") or plain_excerpt(node.get("excerpt") or ""),
            image=featured,
            images=images,
            tag=pods_field(node, "tag") or "",
            team=parse_team(pods_field(node, "team"), context=f"post {slug}"),
            link=node.get("link") or "",
        ),
    )
