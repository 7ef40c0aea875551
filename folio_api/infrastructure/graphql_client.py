from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from folio_api.domain.errors import ConfigurationError, ContentSourceError, SchemaMismatchError
from folio_api.infrastructure.rest_client import normalize_base_url

logger = logging.getLogger(__name__)


class GraphQLClient:
    """Minimal GraphQL-over-HTTP client for WPGraphQL."""

    def __init__(self, http: httpx.Client, endpoint: str) -> None:
        self._http = http
        self.endpoint = endpoint

    @classmethod
    def for_site(cls, http: httpx.Client, base_url: str, path: str = "/graphql") -> GraphQLClient:
        """Build the client for ``<base_url><path>``; fails fast without a base URL."""
        base = normalize_base_url(base_url)
        if not base:
            raise ConfigurationError("WORDPRESS_URL is not set")
        return cls(http, f"{base}/{path.strip('/')}")

    def request(
        self,
        query: str,
        variables: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        """Run a query and return its ``data`` object.

        Raises:
            ContentSourceError: network failure, non-2xx status or a GraphQL ``errors`` list
            SchemaMismatchError: body is not a JSON object with a ``data`` object
        """
        body: Dict[str, Any] = {"query": query}
        if variables:
            body["variables"] = variables

        try:
            response = self._http.post(self.endpoint, json=body, headers=headers)
        except httpx.HTTPError as e:
            raise ContentSourceError(f"GraphQL endpoint unreachable ({self.endpoint}): {e}") from e

        if not response.is_success:
            raise ContentSourceError(
                f"GraphQL error: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise SchemaMismatchError("GraphQL endpoint returned non-JSON body") from e

        if not isinstance(payload, dict):
            raise SchemaMismatchError("GraphQL response is not an object")

        errors = payload.get("errors")
        if errors:
            first = errors[0] if isinstance(errors, list) and errors else errors
            message = first.get("message") if isinstance(first, dict) else str(first)
            raise ContentSourceError(f"GraphQL query failed: {message}")

        data = payload.get("data")
        if not isinstance(data, dict):
            raise SchemaMismatchError("GraphQL response has no data")
        return data
