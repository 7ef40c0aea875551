from __future__ import annotations

from typing import Dict

from folio_api.domain.strategies import Selector


class RevalidatePolicy:
    """Advisory freshness hints attached to outgoing content requests.

    Listings change more often than a single published item, so they get the
    shorter window. The hints are plain ``Cache-Control`` headers; nothing is
    cached by this service itself.
    """

    def __init__(self, listing_seconds: int = 60, item_seconds: int = 3600) -> None:
        self._listing_seconds = listing_seconds
        self._item_seconds = item_seconds

    def max_age(self, selector: Selector) -> int:
        return self._item_seconds if selector.is_single else self._listing_seconds

    def headers_for(self, selector: Selector) -> Dict[str, str]:
        return {"Cache-Control": f"max-age={self.max_age(selector)}"}
