"""Comment transform (REST ``/wp/v2/comments``)."""
from __future__ import annotations

from typing import Any, Dict

from folio_api.domain.entities import Comment
from folio_api.domain.errors import SchemaMismatchError
from folio_api.transforms.common import rendered


def comment_from_rest(payload: Dict[str, Any]) -> Comment:
    if not isinstance(payload, dict) or payload.get("id") is None:
        raise SchemaMismatchError("Comment payload has no id")
    return Comment(
        id=int(payload["id"]),
        author_name=payload.get("author_name") or "",
        author_email=payload.get("author_email") or "",
        author_url=payload.get("author_url") or "",
        content=rendered(payload.get("content")),
        date=payload.get("date") or "",
        date_gmt=payload.get("date_gmt") or "",
        parent=int(payload.get("parent") or 0),
        status=payload.get("status") or "",
    )
