"""
Extension resolver.
Pure lookup from a file extension to a ContentType; never touches disk.
"""
from contenttype.base import ContentType


EXTENSION_TABLE = {
    'xhtml': ContentType.XHTML,
    'xml': ContentType.XML,
    'html': ContentType.HTML,
    'pdf': ContentType.PDF,
    'epub': ContentType.EPUB_ZIP,
    'zip': ContentType.ZIP,
    'cbz': ContentType.COMIC_ZIP,
    'rar': ContentType.RAR,
    'cbr': ContentType.COMIC_RAR,
    'png': ContentType.PNG,
    'jpg': ContentType.JPEG,
    'jpeg': ContentType.JPEG,
    'webp': ContentType.WEBP,
    'avif': ContentType.AVIF,
    'gif': ContentType.GIF,
    'txt': ContentType.TXT,
}

# EPUB package and navigation documents are XML but not served as such.
WORKAROUND_TABLE = {
    'opf': ContentType.XML,
    'ncx': ContentType.XML,
}


def _workaround(extension: str) -> ContentType:
    return WORKAROUND_TABLE.get(extension, ContentType.UNKNOWN)


def from_extension(extension: str) -> ContentType:
    """
    Resolve a file extension to a ContentType.

    Lookup is case-insensitive. A single leading dot is tolerated so
    that ``Path.suffix`` can be passed straight through.

    Args:
        extension: Extension such as ``png`` or ``CBZ``

    Returns:
        Matching ContentType, or ContentType.UNKNOWN
    """
    if not extension:
        return ContentType.UNKNOWN

    ext = extension.lower()
    if ext.startswith('.'):
        ext = ext[1:]

    if ext in EXTENSION_TABLE:
        return EXTENSION_TABLE[ext]
    return _workaround(ext)
