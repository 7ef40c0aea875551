"""
Sanitization helpers for text coming out of WordPress.

WordPress renders titles and excerpts as HTML fragments, with typographic
entities (``&rsquo;``, ``&#8217;``...) that must become plain characters
before they reach a page title or a meta description.
"""
import re

from unidecode import unidecode

# Named entities WordPress emits in titles and excerpts
NAMED_ENTITIES = {
    'rsquo': "'",
    'lsquo': "'",
    'rdquo': '"',
    'ldquo': '"',
    'apos': "'",
    'quot': '"',
    'amp': '&',
    'lt': '<',
    'gt': '>',
    'nbsp': ' ',
    'mdash': '—',
    'ndash': '–',
}

# Numeric code points folded to plain ASCII rather than their typographic form
SPECIAL_CODE_POINTS = {
    0x2019: "'",
    0x2018: "'",
    0x27: "'",
    0x201C: '"',
    0x201D: '"',
    0xA0: ' ',
}

ENTITY_PATTERN = re.compile(r'&(?:#(\d+)|#[xX]([0-9a-fA-F]+)|([a-zA-Z]+));')
TAG_PATTERN = re.compile(r'<[^>]*>')
ANY_ENTITY_PATTERN = re.compile(r'&[^;]+;')


def _decode_code_point(code_point: int, original: str) -> str:
    if code_point in SPECIAL_CODE_POINTS:
        return SPECIAL_CODE_POINTS[code_point]
    try:
        return chr(code_point)
    except (ValueError, OverflowError):
        return original


def _replace_entity(match: re.Match) -> str:
    decimal, hexadecimal, name = match.groups()
    if decimal is not None:
        return _decode_code_point(int(decimal, 10), match.group(0))
    if hexadecimal is not None:
        return _decode_code_point(int(hexadecimal, 16), match.group(0))
    return NAMED_ENTITIES.get(name.lower(), match.group(0))


def decode_html_entities(text: str) -> str:
    """
    Decode named, decimal and hexadecimal HTML entities.
    
    Unknown named entities are left untouched. The text is scanned once, so
    an escaped entity such as ``&amp;rsquo;`` decodes to ``&rsquo;`` and not
    further. Decoding text that holds no entities changes nothing.
    """
    if not text:
        return text
    return ENTITY_PATTERN.sub(_replace_entity, text)


def strip_tags(text: str) -> str:
    """Remove every ``<...>`` span. Best effort, malformed markup is not repaired."""
    if not text:
        return ""
    return TAG_PATTERN.sub("", text)


def plain_excerpt(html: str) -> str:
    """Plain text for summaries: tags dropped, entities blanked, whitespace trimmed."""
    if not html:
        return ""
    return ANY_ENTITY_PATTERN.sub(" ", strip_tags(html)).strip()


def slugify(text: str) -> str:
    """
    URL-safe anchor slug.
    
    ``&`` reads as "and". Any script is transliterated to ASCII (accents
    dropped, Cyrillic and Greek romanized), words are joined with single hyphens.
    
    >>> slugify("Café & Croissants")
    'cafe-and-croissants'
    """
    if not text:
        return ""
    with_and = text.replace("&", " and ")
    ascii_text = unidecode(with_and)
    slug = re.sub(r"[^a-z0-9]+", "-", ascii_text.lower())
    slug = re.sub(r"-{2,}", "-", slug)
    return slug.strip("-")
