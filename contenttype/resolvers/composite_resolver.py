"""
Composite resolver, the single entry point for content-type detection.

Combines byte sniffing with extension fallback:
  * from_extension           → extension table only
  * from_bytes               → sniffing only; no match is UNKNOWN
  * from_bytes_with_fallback → sniffing, then the caller's extension
  * from_path                → sniffing a file prefix, then the path's suffix

None of these raise. The worst outcome is ContentType.UNKNOWN, and
callers are expected to handle it explicitly.
"""
import logging
from os import PathLike, fspath
from pathlib import Path
from typing import Optional, Union

from contenttype.base import AbstractSniffer, ContentType
from contenttype.config import get_config
from contenttype.mime_codec import from_mime
from contenttype.resolvers import extension_resolver

logger = logging.getLogger(__name__)


class ContentTypeResolver:
    """Wires a byte sniffer to the extension table."""

    def __init__(self, sniffer: Optional[AbstractSniffer] = None):
        self.config = get_config()
        if sniffer is None:
            from contenttype.sniffers.magic_sniffer import MagicByteSniffer
            sniffer = MagicByteSniffer()
        self.sniffer = sniffer

    # ---------------------------------------------------------- entry points

    def from_extension(self, extension: str) -> ContentType:
        """Resolve *extension* without looking at any bytes."""
        return extension_resolver.from_extension(extension)

    def from_bytes(self, data: bytes) -> ContentType:
        """
        Sniff *data*. There is no extension to fall back on, so an
        unrecognised buffer is UNKNOWN.
        """
        mime = self.sniffer.sniff_bytes(data)
        if mime is None:
            return ContentType.UNKNOWN
        return from_mime(mime)

    def from_bytes_with_fallback(self, data: bytes, extension: str) -> ContentType:
        """
        Sniff *data*, falling back to *extension* when nothing matched.

        A fallback is logged at WARNING with the extension and a bounded
        preview of the buffer.

        Args:
            data: Raw bytes of the payload
            extension: Extension the caller believes the payload has

        Returns:
            Detected ContentType, or ContentType.UNKNOWN
        """
        mime = self.sniffer.sniff_bytes(data)
        if mime is not None:
            return from_mime(mime)

        preview = bytes(data[:self.config.log_bytes_preview])
        logger.warning(
            "failed to infer content type, falling back to extension "
            "(extension=%r, bytes=%r, length=%d)",
            extension, preview, len(data),
            extra={"extension": extension, "bytes_preview": preview},
        )
        return extension_resolver.from_extension(extension)

    def from_path(self, path: Union[str, PathLike]) -> ContentType:
        """
        Sniff the file at *path*, falling back to its extension.

        Read errors are not reported: they behave like an unrecognised
        signature and the suffix decides.
        """
        mime = self.sniffer.sniff_path(path)
        if mime is not None:
            return from_mime(mime)
        return extension_resolver.from_extension(Path(fspath(path)).suffix)

    def from_file(self, file_path: str) -> ContentType:
        """Same as from_path, for plain string paths."""
        return self.from_path(file_path)


# Shared resolver instance
_resolver: Optional[ContentTypeResolver] = None


def get_resolver() -> ContentTypeResolver:
    """Get or create the shared resolver (singleton)."""
    global _resolver
    if _resolver is None:
        _resolver = ContentTypeResolver()
    return _resolver


def reset_resolver():
    """Reset the shared resolver (useful for testing)."""
    global _resolver
    _resolver = None


def from_extension(extension: str) -> ContentType:
    return get_resolver().from_extension(extension)


def from_bytes(data: bytes) -> ContentType:
    return get_resolver().from_bytes(data)


def from_bytes_with_fallback(data: bytes, extension: str) -> ContentType:
    return get_resolver().from_bytes_with_fallback(data, extension)


def from_path(path: Union[str, PathLike]) -> ContentType:
    return get_resolver().from_path(path)


def from_file(file_path: str) -> ContentType:
    return get_resolver().from_file(file_path)
