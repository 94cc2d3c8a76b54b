import io
import shutil
import tempfile
import zipfile
from pathlib import Path

import pytest
from PIL import Image

from contenttype.config import reset_config
from contenttype.resolvers.composite_resolver import reset_resolver


def image_bytes(fmt: str) -> bytes:
    """Encode a tiny RGB image with Pillow."""
    buf = io.BytesIO()
    Image.new("RGB", (4, 4), (200, 30, 30)).save(buf, format=fmt)
    return buf.getvalue()


def zip_bytes() -> bytes:
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w") as zf:
        zf.writestr("page-001.txt", "hello")
    return buf.getvalue()


# Nothing in libmagic's database matches a run of zero bytes.
UNRECOGNISED = b"\x00" * 64


@pytest.fixture
def temp_dir():
    path = Path(tempfile.mkdtemp())
    yield path
    shutil.rmtree(path, ignore_errors=True)


@pytest.fixture(autouse=True)
def fresh_singletons():
    reset_config()
    reset_resolver()
    yield
    reset_config()
    reset_resolver()
