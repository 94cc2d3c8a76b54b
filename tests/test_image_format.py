"""
Tests for the Pillow image-format interop.
"""
import io

import pytest
from PIL import Image, features

from contenttype.base import ContentType
from contenttype.errors import ContentTypeError, UnsupportedConversionError
from contenttype.interop.image_format import (
    ImageFormat,
    from_image_format,
    from_pil_image,
    to_image_format,
    to_pil_format,
)

from conftest import image_bytes


CONVERTIBLE = {
    ContentType.PNG: ImageFormat.PNG,
    ContentType.JPEG: ImageFormat.JPEG,
    ContentType.WEBP: ImageFormat.WEBP,
    ContentType.AVIF: ImageFormat.AVIF,
    ContentType.GIF: ImageFormat.GIF,
}


@pytest.mark.parametrize("content_type,expected", CONVERTIBLE.items(), ids=lambda v: getattr(v, "name", v))
def test_images_convert(content_type, expected):
    assert to_image_format(content_type) is expected


@pytest.mark.parametrize(
    "content_type",
    [ct for ct in ContentType if ct not in CONVERTIBLE],
    ids=lambda ct: ct.name,
)
def test_non_images_are_rejected_by_name(content_type):
    with pytest.raises(UnsupportedConversionError) as excinfo:
        to_image_format(content_type)

    assert excinfo.value.source_type == f"ContentType.{content_type.name}"
    assert f"ContentType.{content_type.name}" in str(excinfo.value)
    assert isinstance(excinfo.value, ContentTypeError)


@pytest.mark.parametrize("image_format", list(ImageFormat), ids=lambda f: f.name)
def test_reverse_is_total(image_format):
    content_type = from_image_format(image_format)
    assert content_type.is_image
    assert to_image_format(content_type) is image_format


def test_to_pil_format():
    assert to_pil_format(ContentType.JPEG) == "JPEG"
    with pytest.raises(UnsupportedConversionError):
        to_pil_format(ContentType.PDF)


def test_from_pil_image_round_trip():
    for fmt, expected in (("PNG", ContentType.PNG), ("JPEG", ContentType.JPEG), ("GIF", ContentType.GIF)):
        with Image.open(io.BytesIO(image_bytes(fmt))) as image:
            assert from_pil_image(image) is expected


def test_save_with_converted_format():
    buf = io.BytesIO()
    Image.new("RGB", (2, 2)).save(buf, format=to_pil_format(ContentType.PNG))
    with Image.open(io.BytesIO(buf.getvalue())) as image:
        assert from_pil_image(image) is ContentType.PNG


def test_in_memory_image_is_unknown():
    assert from_pil_image(Image.new("RGB", (2, 2))) is ContentType.UNKNOWN


def test_unsupported_pil_format_is_unknown():
    buf = io.BytesIO()
    Image.new("RGB", (2, 2)).save(buf, format="BMP")
    with Image.open(io.BytesIO(buf.getvalue())) as image:
        assert from_pil_image(image) is ContentType.UNKNOWN


def test_mpo_is_jpeg():
    with Image.open(io.BytesIO(image_bytes("JPEG"))) as image:
        image.format = "MPO"
        assert from_pil_image(image) is ContentType.JPEG


def test_avif_save_round_trip():
    if not features.check("avif"):
        pytest.skip("Pillow built without AVIF support")
    buf = io.BytesIO()
    Image.new("RGB", (8, 8), (10, 120, 200)).save(buf, format=to_pil_format(ContentType.AVIF))
    with Image.open(io.BytesIO(buf.getvalue())) as image:
        assert from_pil_image(image) is ContentType.AVIF
