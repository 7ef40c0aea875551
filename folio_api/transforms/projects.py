"""Project transforms (REST ``/wp/v2/projet`` and the Pods ``projets`` type)."""
from __future__ import annotations

from typing import Any, Dict

from folio_api.domain.entities import Project, ProjectMetadata
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


def project_from_rest(payload: Dict[str, Any]) -> Project:
    slug = require_slug(payload, "project")
    acf = acf_fields(payload)

    featured = rest_featured_image(payload)
    images = parse_images(acf.get("images"))
    if not images and featured:
        images = [featured]

    # Long description (WYSIWYG field) replaces the generic body when filled
    content = acf.get("description") or rendered(payload.get("content"))

    return Project(
        slug=slug,
        content=content,
        metadata=ProjectMetadata(
            title=decode_html_entities(rendered(payload.get("title"))),
            published_at=payload.get("date") or "",
            summary=plain_excerpt(acf.get("summary") or ""),
            image=featured or (images[0] if images else ""),
            images=images,
            team=parse_team(acf.get("team"), context=f"project {slug}"),
            link=acf.get("link") or payload.get("link") or "",
            client=acf.get("client") or "",
        ),
    )


def project_from_graphql(node: Dict[str, Any]) -> Project:
    slug = require_slug(node, "project")

    connection = node.get("images")
    gallery = (connection.get("nodes") if isinstance(connection, dict) else None) or []
    images = [url for url in (graphql_media_url(item) for item in gallery if isinstance(item, dict)) if url]

    return Project(
        slug=slug,
        # No generic content on this type; the description field is the body
        content=node.get("description") or "",
        metadata=ProjectMetadata(
            title=decode_html_entities(node.get("title") or ""),
            published_at=node.get("date") or "",
            summary=plain_excerpt(node.get("extrait") or ""),
            image=images[0] if images else "",
            images=images,
            team=[],
            link=node.get("lienDuSiteLiveSite") or node.get("link") or "",
            client=node.get("client") or "",
        ),
    )
