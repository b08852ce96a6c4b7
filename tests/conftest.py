"""Pytest configuration and fixtures."""

import struct
import tempfile
from pathlib import Path

import pytest
from PIL import Image


def make_exif() -> Image.Exif:
    """Build an EXIF block with camera and GPS tags."""
    exif = Image.Exif()
    exif[0x010F] = "Canon"  # Make
    exif[0x0110] = "EOS 5D"  # Model
    exif[0x0131] = "exif-test"  # Software
    exif[0x8825] = {1: "N", 3: "E"}  # GPSInfo: GPSLatitudeRef, GPSLongitudeRef
    return exif


XMP_PAYLOAD = b"http://ns.adobe.com/xap/1.0/\x00<x:xmpmeta>secret-xmp</x:xmpmeta>"


def iptc_payload() -> bytes:
    """Build a Photoshop APP13 block holding one IPTC caption record."""
    record = b"\x1c\x02\x78" + struct.pack(">H", 11) + b"secret-iptc"
    return b"Photoshop 3.0\x00" + b"8BIM\x04\x04\x00\x00" + struct.pack(">I", len(record)) + record


def jpeg_segment(marker: int, payload: bytes) -> bytes:
    return bytes([0xFF, marker]) + struct.pack(">H", len(payload) + 2) + payload


def with_segments(jpeg: bytes, *segments: bytes) -> bytes:
    """Insert segments right after the SOI marker."""
    return jpeg[:2] + b"".join(segments) + jpeg[2:]


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_image(temp_dir: Path) -> Path:
    """Create a sample JPEG without EXIF."""
    img = Image.new("RGB", (100, 100), color="red")
    path = temp_dir / "sample.jpg"
    img.save(path, quality=95)
    return path


@pytest.fixture
def exif_image(temp_dir: Path) -> Path:
    """Create a JPEG carrying EXIF data."""
    img = Image.new("RGB", (120, 80), color="blue")
    path = temp_dir / "camera.jpg"
    img.save(path, quality=95, exif=make_exif())
    return path


@pytest.fixture
def exif_png(temp_dir: Path) -> Path:
    """Create a PNG with transparency and an eXIf chunk."""
    img = Image.new("RGBA", (64, 48), color=(255, 0, 0, 128))
    path = temp_dir / "camera.png"
    img.save(path, exif=make_exif())
    return path


@pytest.fixture
def corrupt_image(temp_dir: Path) -> Path:
    """Create a file with an image extension but no image data."""
    path = temp_dir / "broken.jpg"
    path.write_bytes(b"this is not an image")
    return path


@pytest.fixture
def sample_directory(temp_dir: Path) -> Path:
    """Create a directory with EXIF images and two subdirectories."""
    directory = temp_dir / "photos"
    directory.mkdir()
    for i in range(5):
        img = Image.new("RGB", (100, 100), color=(i * 50, 0, 0))
        img.save(directory / f"image_{i}.jpg", quality=95, exif=make_exif())
    (directory / "thumbs").mkdir()
    (directory / "raw").mkdir()
    Image.new("RGB", (10, 10)).save(directory / "thumbs" / "nested.jpg")
    return directory
