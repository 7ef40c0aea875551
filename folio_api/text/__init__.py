# Text helpers for WordPress-rendered HTML
from .sanitize import decode_html_entities, strip_tags, plain_excerpt, slugify
from .headings import inject_heading_ids

__all__ = ['decode_html_entities', 'strip_tags', 'plain_excerpt', 'slugify', 'inject_heading_ids']
