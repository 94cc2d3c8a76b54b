"""Exceptions raised by the content-type package."""


class ContentTypeError(Exception):
    """Base class for content-type errors."""


class UnsupportedConversionError(ContentTypeError):
    """A content type has no counterpart in the target classification."""

    def __init__(self, source_type: str, target: str):
        self.source_type = source_type
        self.target = target
        super().__init__(f"Cannot convert {source_type} into {target}, not supported.")
