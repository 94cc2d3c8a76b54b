"""
Byte-signature sniffer.
Uses python-magic (libmagic) in MIME mode to guess a content type from
the leading bytes of a buffer or file. Only a bounded prefix is read.
"""
import logging
from os import PathLike
from typing import Optional, Union

import magic

from contenttype.base import AbstractSniffer, ContentType
from contenttype.config import get_config
from contenttype.mime_codec import from_mime

logger = logging.getLogger(__name__)


class MagicByteSniffer(AbstractSniffer):
    """Sniffs MIME types from magic bytes via libmagic."""

    # libmagic answers these when no signature matched.
    INCONCLUSIVE = frozenset({
        'application/octet-stream',
        'application/x-empty',
        'inode/x-empty',
        'text/plain',
    })

    # Content heuristics rather than signatures; inconclusive unless
    # they map into the vocabulary (text/html, text/xml).
    TEXT_HEURISTICS = frozenset({
        'application/json',
        'application/x-ndjson',
    })

    def __init__(self, sniff_length: Optional[int] = None):
        """
        Create the libmagic instance (MIME mode).

        Args:
            sniff_length: Bytes to inspect; defaults to SNIFF_LENGTH.
                Values below 1 are raised to 1.
        """
        if sniff_length is None:
            sniff_length = get_config().sniff_length
        self.sniff_length = max(1, sniff_length)
        self._magic = magic.Magic(mime=True)

    def _is_heuristic(self, mime: str) -> bool:
        if not (mime.startswith('text/') or mime in self.TEXT_HEURISTICS):
            return False
        return from_mime(mime) is ContentType.UNKNOWN

    def sniff_bytes(self, data: bytes) -> Optional[str]:
        """
        Return the MIME string for *data*, or None if nothing matched.

        libmagic errors and text heuristics outside the vocabulary
        (text/csv, text/x-c, application/json, ...) are treated as
        "no match".
        """
        if not data:
            return None

        try:
            mime = self._magic.from_buffer(bytes(data[:self.sniff_length]))
        except magic.MagicException as e:
            logger.debug("libmagic failed on buffer: %s", e)
            return None

        if not mime:
            return None
        mime = mime.lower()
        if mime in self.INCONCLUSIVE or self._is_heuristic(mime):
            return None
        return mime

    def sniff_path(self, path: Union[str, PathLike]) -> Optional[str]:
        """
        Read a bounded prefix of *path* and sniff it.

        I/O failures (missing file, permissions, directories) are logged
        at DEBUG and reported as None, indistinguishable from no match.
        """
        try:
            with open(path, 'rb') as f:
                head = f.read(self.sniff_length)
        except OSError as e:
            logger.debug("could not read %s: %s", path, e)
            return None

        mime = self.sniff_bytes(head)
        logger.debug("inferred mime for %s: %s", path, mime)
        return mime

    # ---------------------------------------------------------- vocabulary

    def sniff_content_type(self, data: bytes) -> Optional[ContentType]:
        """Sniff *data* and map the result into the vocabulary."""
        mime = self.sniff_bytes(data)
        return from_mime(mime) if mime is not None else None

    def sniff_path_content_type(self, path: Union[str, PathLike]) -> Optional[ContentType]:
        """Sniff the file at *path* and map the result into the vocabulary."""
        mime = self.sniff_path(path)
        return from_mime(mime) if mime is not None else None
