from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional

from folio_api.domain.errors import SchemaMismatchError
from folio_api.domain.strategies import EntityKind, Record, Selector
from folio_api.infrastructure.rest_client import WordPressRestClient
from folio_api.infrastructure.revalidate import RevalidatePolicy
from folio_api.transforms import post_from_rest, project_from_rest

logger = logging.getLogger(__name__)

# The project custom post type is registered as "projet"
RESOURCES = {
    EntityKind.POST: "posts",
    EntityKind.PROJECT: "projet",
}

TRANSFORMS: Dict[EntityKind, Callable[[Dict[str, Any]], Record]] = {
    EntityKind.POST: post_from_rest,
    EntityKind.PROJECT: project_from_rest,
}


class RestContentStrategy:
    """Fallback transport: WordPress REST API with embedded media."""

    name = "rest"

    def __init__(
        self,
        client: WordPressRestClient,
        per_page: int = 100,
        policy: Optional[RevalidatePolicy] = None,
    ) -> None:
        self._client = client
        self._per_page = per_page
        self._policy = policy or RevalidatePolicy()

    def fetch(self, kind: EntityKind, selector: Selector) -> List[Record]:
        params: Dict[str, Any] = {"_embed": "true", "status": "publish"}
        if selector.is_single:
            params["slug"] = selector.slug
        else:
            params["per_page"] = self._per_page

        items = self._client.get_json(
            self._client.endpoint(RESOURCES[kind]),
            params=params,
            headers=self._policy.headers_for(selector),
        )
        if not isinstance(items, list):
            raise SchemaMismatchError(f"REST '{RESOURCES[kind]}' response is not a list")

        transform = TRANSFORMS[kind]
        if selector.is_single:
            if not items:
                logger.info(f"[REST] No {kind.value} found for slug '{selector.slug}'")
                return []
            return [transform(items[0])]

        records: List[Record] = []
        for item in items:
            try:
                records.append(transform(item))
            except SchemaMismatchError as e:
                logger.warning(f"[REST] Skipping malformed {kind.value} in listing: {e}")
        logger.info(f"[REST] {len(records)} {kind.value}(s) fetched")
        return records
