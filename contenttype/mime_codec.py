"""
MIME codec.
Converts between ContentType members and MIME strings in both directions.
"""
from contenttype.base import ContentType


# Canonical strings, built from the enum so the two can't drift apart.
_CANONICAL = {member.value: member for member in ContentType if member is not ContentType.UNKNOWN}

# Non-canonical spellings emitted by libmagic and by older clients.
_ALIASES = {
    "application/x-rar": ContentType.RAR,
    "application/x-rar-compressed": ContentType.RAR,
    "application/vnd.comicbook+rar": ContentType.COMIC_RAR,
    "application/x-cbr": ContentType.COMIC_RAR,
    "application/x-cbz": ContentType.COMIC_ZIP,
    "text/xml": ContentType.XML,
    "image/jpg": ContentType.JPEG,
}


def to_mime(content_type: ContentType) -> str:
    """Return the canonical MIME string for *content_type*."""
    return content_type.value


def from_mime(mime: str) -> ContentType:
    """
    Return the ContentType for a MIME string.

    Matching is case-insensitive and ignores parameters such as
    ``; charset=utf-8``. Unrecognised input yields UNKNOWN.

    Args:
        mime: MIME string, e.g. ``image/png``

    Returns:
        Matching ContentType, or ContentType.UNKNOWN
    """
    if not mime:
        return ContentType.UNKNOWN

    key = mime.split(";", 1)[0].strip().lower()
    if key in _CANONICAL:
        return _CANONICAL[key]
    return _ALIASES.get(key, ContentType.UNKNOWN)
