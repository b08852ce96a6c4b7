"""Tests for EXIF extraction utilities."""

from pathlib import Path

from PIL import Image, TiffImagePlugin

from exifremover.utils.metadata import extract_exif, format_value


class TestFormatValue:
    """Tests for format_value()."""

    def test_bytes_are_summarised(self):
        assert format_value(b"\x00\x01\x02") == "<3 bytes>"

    def test_strings_lose_padding(self):
        assert format_value("Canon\x00\x00 ") == "Canon"

    def test_tuples_are_joined(self):
        assert format_value((1, 2, 3)) == "1, 2, 3"

    def test_rationals(self):
        assert format_value(TiffImagePlugin.IFDRational(72, 1)) == "72.0"


class TestExtractExif:
    """Tests for extract_exif()."""

    def test_top_level_and_gps_tags(self, exif_image: Path):
        with Image.open(exif_image) as img:
            tags = extract_exif(img)

        assert tags["Make"] == "Canon"
        assert tags["Software"] == "exif-test"
        assert tags["GPSLongitudeRef"] == "E"
        # IFD pointers are resolved, not listed as raw offsets
        assert "GPSInfo" not in tags

    def test_exif_sub_ifd(self, temp_dir: Path):
        exif = Image.Exif()
        exif[0x8769] = {0x9003: "2024:01:02 03:04:05"}  # DateTimeOriginal
        path = temp_dir / "dated.jpg"
        Image.new("RGB", (10, 10)).save(path, exif=exif)

        with Image.open(path) as img:
            tags = extract_exif(img)

        assert tags["DateTimeOriginal"] == "2024:01:02 03:04:05"
        assert "ExifOffset" not in tags

    def test_no_exif(self, sample_image: Path):
        with Image.open(sample_image) as img:
            assert extract_exif(img) == {}
