"""Field parsers shared by the post and project transforms."""
from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional

from folio_api.domain.entities import TeamMember
from folio_api.domain.errors import SchemaMismatchError

logger = logging.getLogger(__name__)

# Renditions tried before the original upload, best first
PREFERRED_SIZES = ("large", "medium_large")


def require_slug(payload: Any, entity: str) -> str:
    """Return the payload slug, rejecting payloads that cannot be keyed."""
    if not isinstance(payload, dict):
        raise SchemaMismatchError(f"Expected a {entity} object, got {type(payload).__name__}")
    slug = payload.get("slug")
    if not isinstance(slug, str) or not slug.strip():
        raise SchemaMismatchError(f"{entity.capitalize()} payload has no slug")
    return slug


def rendered(value: Any) -> str:
    """Text of a REST ``{"rendered": ...}`` field (or a plain string)."""
    if isinstance(value, dict):
        return value.get("rendered") or ""
    if isinstance(value, str):
        return value
    return ""


def acf_fields(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Custom fields of a REST payload.

    WordPress returns ``"acf": []`` when no field group is exposed.
    """
    acf = payload.get("acf")
    return acf if isinstance(acf, dict) else {}


def rest_media_url(media: Dict[str, Any]) -> str:
    """Best URL of an embedded REST media item (sizes keyed by name)."""
    sizes = (media.get("media_details") or {}).get("sizes") or {}
    for size in PREFERRED_SIZES:
        url = (sizes.get(size) or {}).get("source_url")
        if url:
            return url
    return media.get("source_url") or ""


def rest_featured_image(payload: Dict[str, Any]) -> str:
    """Featured image URL from ``_embedded["wp:featuredmedia"][0]``."""
    embedded = payload.get("_embedded") or {}
    media_items = embedded.get("wp:featuredmedia") or []
    if not media_items or not isinstance(media_items[0], dict):
        return ""
    return rest_media_url(media_items[0])


def graphql_media_url(media: Optional[Dict[str, Any]]) -> str:
    """Best URL of a GraphQL media item (sizes listed as ``{name, sourceUrl}``)."""
    if not media:
        return ""
    sizes = (media.get("mediaDetails") or {}).get("sizes") or []
    by_name = {size.get("name"): size.get("sourceUrl") for size in sizes if isinstance(size, dict)}
    for size in PREFERRED_SIZES:
        if by_name.get(size):
            return by_name[size]
    return media.get("sourceUrl") or ""


def parse_images(value: Any) -> List[str]:
    """
    Image URLs from a custom field.
    
    Accepts a textarea string (one URL per line, blank lines dropped) or an
    already-structured list. Order is preserved; duplicates are kept.
    """
    if not value:
        return []
    if isinstance(value, str):
        return [line.strip() for line in value.split("\n") if line.strip()]
    if isinstance(value, list):
        return [str(url).strip() for url in value if isinstance(url, str) and url.strip()]
    return []


def team_member(item: Dict[str, Any]) -> TeamMember:
    return TeamMember(
        name=str(item.get("name") or ""),
        role=str(item.get("role") or ""),
        avatar=str(item.get("avatar") or ""),
        linked_in=str(item.get("linkedIn") or item.get("linkedin") or ""),
    )


def parse_team(value: Any, context: str = "") -> List[TeamMember]:
    """
    Team members from a custom field holding a JSON string or a list.
    
    Malformed JSON yields an empty team; the error is logged, never raised.
    """
    if not value:
        return []
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except ValueError as e:
            logger.warning(f"Invalid team JSON for {context or 'content'}: {e}")
            return []
    if not isinstance(value, list):
        return []
    return [team_member(item) for item in value if isinstance(item, dict)]
