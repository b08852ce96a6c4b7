"""Metadata reading and stripping engine."""

from pathlib import Path

from PIL import ExifTags, ImageOps, JpegImagePlugin

from exifremover.cli.dashboard import MetadataReport, StripResult, StripStatus
from exifremover.config.settings import Settings, get_settings
from exifremover.errors import ImageReadError, ImageWriteError
from exifremover.utils.image_io import (
    STRUCTURAL_INFO_KEYS,
    clean_copy,
    encode_image,
    get_file_size,
    open_image,
    write_atomic,
)
from exifremover.utils.metadata import extract_exif
from exifremover.utils.segments import is_lossless_webp, strip_jpeg, strip_webp

# Formats whose metadata is cut out of the file without decoding the pixels
SEGMENT_STRIPPERS = {
    "JPEG": strip_jpeg,
    "MPO": strip_jpeg,
    "WEBP": strip_webp,
}


class MetadataStripper:
    """Read or remove EXIF, IPTC, XMP and comment metadata.

    JPEG (and MPO) and WebP files keep their compressed image data: only the
    metadata segments are dropped. Other formats are re-encoded losslessly
    from a pixel-only copy, carrying over structural information (palette,
    transparency, DPI, TIFF compression and, optionally, the ICC profile).
    Baking the EXIF orientation into the pixels always re-encodes.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()

    def read_metadata(self, path: Path) -> MetadataReport:
        """Read the EXIF tags of an image.

        An image without EXIF gives a report with no tags rather than an error.

        Raises:
            ImageReadError: If the file is unreadable or not an image.
        """
        with open_image(path) as img:
            return MetadataReport(
                path=path,
                format=img.format or "Unknown",
                mode=img.mode,
                width=img.width,
                height=img.height,
                size_bytes=get_file_size(path),
                tags=extract_exif(img),
            )

    def strip(self, path: Path) -> bytes:
        """Return the image at ``path`` without metadata.

        Raises:
            ImageReadError: If the file is unreadable or not an image.
            ImageWriteError: If the image cannot be re-encoded.
        """
        with open_image(path) as img:
            format = img.format or ""
            if getattr(img, "n_frames", 1) > 1 and format != "MPO":
                raise ImageWriteError(
                    f"Unable to remove EXIF data from {path}: multi-frame images are not supported"
                )

            orientation = img.getexif().get(ExifTags.Base.Orientation, 1)
            rotate = self.settings.apply_orientation and orientation != 1
            if format in SEGMENT_STRIPPERS and not rotate:
                return self._strip_segments(path, format)

            save_kwargs = {
                key: img.info[key] for key in STRUCTURAL_INFO_KEYS if key in img.info
            }
            if self.settings.keep_icc_profile and img.info.get("icc_profile"):
                save_kwargs["icc_profile"] = img.info["icc_profile"]
            if format == "TIFF" and "compression" in img.info:
                save_kwargs["compression"] = img.info["compression"]
            if format in ("JPEG", "MPO"):
                subsampling = JpegImagePlugin.get_sampling(img)
                if subsampling != -1:
                    save_kwargs["subsampling"] = subsampling
            if format == "WEBP" and is_lossless_webp(self._read_bytes(path)):
                save_kwargs["lossless"] = True

            source = ImageOps.exif_transpose(img) if rotate else img
            clean = clean_copy(source)

        try:
            return encode_image(clean, format, quality=self.settings.jpeg_quality, **save_kwargs)
        except ImageWriteError as e:
            raise ImageWriteError(f"Unable to remove EXIF data from {path}: {e}") from e

    def _strip_segments(self, path: Path, format: str) -> bytes:
        """Cut metadata segments out of a JPEG or WebP file."""
        data = self._read_bytes(path)
        try:
            return SEGMENT_STRIPPERS[format](data, self.settings.keep_icc_profile)
        except ValueError as e:
            raise ImageWriteError(f"Unable to remove EXIF data from {path}: {e}") from e

    @staticmethod
    def _read_bytes(path: Path) -> bytes:
        try:
            return path.read_bytes()
        except OSError as e:
            raise ImageReadError(f"Can not read file {path}: {e}") from e

    def strip_and_save(self, source: Path, dest: Path) -> StripResult:
        """Strip metadata from ``source`` and write the result to ``dest``.

        ``dest`` may equal ``source``; the original is only replaced once the
        stripped image has been fully built.

        Raises:
            ImageReadError: If the source is unreadable or not an image.
            ImageWriteError: If the output cannot be encoded or written.
        """
        data = self.strip(source)
        output_size = write_atomic(data, dest, mode_from=source)

        return StripResult(
            input_path=source,
            output_path=dest,
            status=StripStatus.SUCCESS,
            message="Metadata stripped successfully",
            output_size=output_size,
        )
