"""
Heading anchors for WordPress HTML.

Adds an ``id`` to every ``<h2>``..``<h6>`` so the "On this page" navigation
can link to sections of a rendered post.
"""
import re
from typing import Dict

from .sanitize import decode_html_entities, strip_tags, slugify

HEADING_PATTERN = re.compile(r'<(h[2-6])([^>]*?)>([\s\S]*?)</h[2-6]>', re.IGNORECASE)
ID_ATTRIBUTE_PATTERN = re.compile(r'(?:^|\s)id\s*=\s*["\']([^"\']+)["\']', re.IGNORECASE)


def heading_text(html: str) -> str:
    """Plain text of a heading's inner HTML."""
    return strip_tags(decode_html_entities(html)).strip()


def inject_heading_ids(html: str) -> str:
    """
    Give every heading without an ``id`` one derived from its text.
    
    Duplicate slugs within the document get ``-1``, ``-2``... suffixes.
    Headings that already carry an ``id`` or have no text are left as is.
    """
    if not html:
        return html
    
    seen: Dict[str, int] = {}
    
    def _add_id(match: re.Match) -> str:
        tag, attributes, inner = match.groups()
        if ID_ATTRIBUTE_PATTERN.search(attributes):
            return match.group(0)
        
        text = heading_text(inner)
        if not text:
            return match.group(0)
        
        slug = slugify(text)
        if not slug:
            return match.group(0)
        
        if slug in seen:
            seen[slug] += 1
            slug = f"{slug}-{seen[slug]}"
        else:
            seen[slug] = 0
        
        attributes = attributes.strip()
        new_attributes = f'{attributes} id="{slug}"' if attributes else f'id="{slug}"'
        return f'<{tag} {new_attributes}>{inner}</{tag}>'
    
    return HEADING_PATTERN.sub(_add_id, html)
