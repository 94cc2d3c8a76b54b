"""
Image-format interop.

Translates between ContentType and the format identifiers used by Pillow,
the image library downstream handlers decode and encode with. Nothing else
in the package imports Pillow.
"""
from enum import Enum

from PIL import Image

from contenttype.base import ContentType
from contenttype.errors import UnsupportedConversionError


class ImageFormat(Enum):
    """Image formats supported by the image pipeline, valued by Pillow name."""
    JPEG = "JPEG"
    PNG = "PNG"
    WEBP = "WEBP"
    AVIF = "AVIF"
    GIF = "GIF"


_TO_IMAGE_FORMAT = {
    ContentType.PNG: ImageFormat.PNG,
    ContentType.JPEG: ImageFormat.JPEG,
    ContentType.WEBP: ImageFormat.WEBP,
    ContentType.AVIF: ImageFormat.AVIF,
    ContentType.GIF: ImageFormat.GIF,
}

_FROM_IMAGE_FORMAT = {fmt: ct for ct, fmt in _TO_IMAGE_FORMAT.items()}


def to_image_format(content_type: ContentType) -> ImageFormat:
    """
    Convert *content_type* into an ImageFormat.

    Args:
        content_type: Member to convert

    Returns:
        Matching ImageFormat

    Raises:
        UnsupportedConversionError: for archives, documents and UNKNOWN
    """
    try:
        return _TO_IMAGE_FORMAT[content_type]
    except KeyError:
        raise UnsupportedConversionError(
            f"ContentType.{content_type.name}", "ImageFormat"
        ) from None


def from_image_format(image_format: ImageFormat) -> ContentType:
    """Convert *image_format* into its ContentType. Always succeeds."""
    return _FROM_IMAGE_FORMAT[image_format]


def to_pil_format(content_type: ContentType) -> str:
    """
    Return the format name to pass to ``Image.save(format=...)``.

    Saving AVIF needs Pillow 11.2 or later built with libavif.

    Raises:
        UnsupportedConversionError: if *content_type* is not an image
    """
    return to_image_format(content_type).value


# Pillow format names that are variants of a supported format.
# MPO is a JPEG carrying multi-picture (MPF) data, as written by cameras.
_PIL_FORMAT_ALIASES = {
    "MPO": ImageFormat.JPEG,
}


def from_pil_image(image: Image.Image) -> ContentType:
    """
    Classify an image opened with Pillow by its detected format.

    Images created in memory have no format; those, and formats outside
    the supported set, are UNKNOWN.
    """
    name = (image.format or "").upper()
    if name in _PIL_FORMAT_ALIASES:
        return from_image_format(_PIL_FORMAT_ALIASES[name])
    try:
        return from_image_format(ImageFormat(name))
    except ValueError:
        return ContentType.UNKNOWN
