from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from folio_api.domain.errors import ConfigurationError, ContentSourceError, SchemaMismatchError

logger = logging.getLogger(__name__)


def normalize_base_url(base_url: str) -> str:
    """Strip trailing slashes and default to https when no scheme is given."""
    base = (base_url or "").strip().rstrip("/")
    if base and not base.startswith(("http://", "https://")):
        base = f"https://{base}"
    return base


class WordPressRestClient:
    """Thin JSON wrapper around the WordPress REST API.

    Every failure surfaces as a domain error: ``ConfigurationError`` when no
    base URL is set, ``ContentSourceError`` for network errors and non-2xx
    answers, ``SchemaMismatchError`` for bodies that are not JSON.
    """

    def __init__(self, http: httpx.Client, base_url: str, rest_path: str = "/wp-json/wp/v2") -> None:
        self._http = http
        self._base_url = normalize_base_url(base_url)
        self._rest_path = "/" + rest_path.strip("/")

    @property
    def configured(self) -> bool:
        return bool(self._base_url)

    def require_base(self) -> str:
        if not self._base_url:
            raise ConfigurationError("WORDPRESS_URL is not set")
        return self._base_url

    def site_url(self, path: str) -> str:
        return f"{self.require_base()}/{path.lstrip('/')}"

    def endpoint(self, resource: str) -> str:
        return self.site_url(f"{self._rest_path}/{resource.lstrip('/')}")

    def get_json(
        self,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        return self._send("GET", url, params=params, headers=headers)

    def post_json(self, url: str, payload: Dict[str, Any]) -> Any:
        return self._send("POST", url, json=payload)

    def _send(self, method: str, url: str, **kwargs: Any) -> Any:
        try:
            response = self._http.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            raise ContentSourceError(f"WordPress API unreachable ({method} {url}): {e}") from e

        if not response.is_success:
            raise ContentSourceError(
                f"WordPress API error: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise SchemaMismatchError(f"WordPress API returned non-JSON body for {url}") from e
