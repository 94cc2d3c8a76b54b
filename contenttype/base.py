"""
Base types for the content-type detection system.
Defines the closed vocabulary of supported content types and the
interface every byte sniffer implements.
"""
from abc import ABC, abstractmethod
from enum import Enum
from os import PathLike
from typing import Optional, Union


class ContentType(Enum):
    """
    Enumeration of supported content types.

    Each member's value is its canonical MIME string, so ``str(member)``
    is suitable for a Content-Type header. UNKNOWN is the default.
    """
    XHTML = "application/xhtml+xml"
    XML = "application/xml"
    HTML = "text/html"
    PDF = "application/pdf"
    EPUB_ZIP = "application/epub+zip"
    ZIP = "application/zip"
    COMIC_ZIP = "application/vnd.comicbook+zip"
    RAR = "application/vnd.rar"
    COMIC_RAR = "application/vnd.comicbook-rar"
    PNG = "image/png"
    JPEG = "image/jpeg"
    WEBP = "image/webp"
    AVIF = "image/avif"
    GIF = "image/gif"
    TXT = "text/plain"
    UNKNOWN = "unknown"

    @classmethod
    def _missing_(cls, value):
        # Parsing never fails: anything outside the table is UNKNOWN.
        from contenttype.mime_codec import from_mime

        if not isinstance(value, str):
            return cls.UNKNOWN
        return from_mime(value)

    @classmethod
    def default(cls) -> "ContentType":
        """Return the zero value, UNKNOWN."""
        return cls.UNKNOWN

    def __str__(self) -> str:
        return self.value

    # ---------------------------------------------------------- derived facts

    @property
    def mime_type(self) -> str:
        """Canonical MIME string."""
        return self.value

    @property
    def extension(self) -> str:
        """
        Canonical file extension, without a leading dot.

        JPEG maps to ``jpg``; UNKNOWN maps to an empty string.
        """
        return _EXTENSIONS[self]

    # ---------------------------------------------------------- predicates

    @property
    def is_image(self) -> bool:
        return self.value.startswith("image/")

    @property
    def is_opds_legacy_image(self) -> bool:
        """True for the OPDS 1.2 image subset: PNG, JPEG and GIF."""
        return self in _OPDS_LEGACY_IMAGES

    @property
    def is_zip(self) -> bool:
        return self in (ContentType.ZIP, ContentType.COMIC_ZIP)

    @property
    def is_rar(self) -> bool:
        return self in (ContentType.RAR, ContentType.COMIC_RAR)

    @property
    def is_epub(self) -> bool:
        return self is ContentType.EPUB_ZIP


_EXTENSIONS = {
    ContentType.XHTML: "xhtml",
    ContentType.XML: "xml",
    ContentType.HTML: "html",
    ContentType.PDF: "pdf",
    ContentType.EPUB_ZIP: "epub",
    ContentType.ZIP: "zip",
    ContentType.COMIC_ZIP: "cbz",
    ContentType.RAR: "rar",
    ContentType.COMIC_RAR: "cbr",
    ContentType.PNG: "png",
    ContentType.JPEG: "jpg",
    ContentType.WEBP: "webp",
    ContentType.AVIF: "avif",
    ContentType.GIF: "gif",
    ContentType.TXT: "txt",
    ContentType.UNKNOWN: "",
}

_OPDS_LEGACY_IMAGES = frozenset({ContentType.PNG, ContentType.JPEG, ContentType.GIF})


class AbstractSniffer(ABC):
    """Abstract base class for byte-signature sniffers."""

    @abstractmethod
    def sniff_bytes(self, data: bytes) -> Optional[str]:
        """
        Guess the MIME type of an in-memory buffer.

        Args:
            data: Raw bytes; only a bounded prefix is inspected

        Returns:
            MIME string if a signature matched, otherwise None
        """
        pass

    @abstractmethod
    def sniff_path(self, path: Union[str, PathLike]) -> Optional[str]:
        """
        Guess the MIME type of the file at *path*.

        Args:
            path: File to read a bounded prefix from

        Returns:
            MIME string if a signature matched, otherwise None
        """
        pass
