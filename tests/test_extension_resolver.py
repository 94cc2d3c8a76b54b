"""
Tests for the extension resolver.
"""
import pytest

from contenttype.base import ContentType
from contenttype.resolvers.extension_resolver import EXTENSION_TABLE, from_extension


@pytest.mark.parametrize("extension,expected", sorted(EXTENSION_TABLE.items()))
def test_known_extensions(extension, expected):
    assert from_extension(extension) is expected
    assert from_extension(extension.upper()) is expected
    assert from_extension(extension.capitalize()) is expected


def test_jpg_and_jpeg_alias():
    assert from_extension("jpg") is ContentType.JPEG
    assert from_extension("JPEG") is ContentType.JPEG


@pytest.mark.parametrize("extension", ["opf", "ncx", "OPF", "Ncx"])
def test_workarounds_resolve_to_xml(extension):
    assert from_extension(extension) is ContentType.XML


@pytest.mark.parametrize("extension", ["foobar", "", "bmp", "tar.gz", "."])
def test_unrecognised_is_unknown(extension):
    assert from_extension(extension) is ContentType.UNKNOWN


def test_leading_dot_is_tolerated():
    assert from_extension(".cbz") is ContentType.COMIC_ZIP
