"""Image I/O utilities with Pillow."""

import io
import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Generator

from PIL import Image

from exifremover.errors import ImageReadError, ImageWriteError


# Exceptions Pillow raises for missing, truncated or unrecognised files
READ_ERRORS = (OSError, SyntaxError, ValueError, Image.DecompressionBombError)

# Info keys describing image structure rather than metadata
STRUCTURAL_INFO_KEYS = ("dpi", "transparency")

# Formats Pillow reads as multi-frame but that are written back as a single frame
FIRST_FRAME_FORMATS = {"MPO": "JPEG"}


@contextmanager
def open_image(path: Path) -> Generator[Image.Image, None, None]:
    """Open and fully load an image, closing the file handle on exit.

    Raises:
        ImageReadError: If the file is missing, unreadable or not an image.
    """
    try:
        img = Image.open(path)
    except READ_ERRORS as e:
        raise ImageReadError(f"Can not read file {path}: {e}") from e

    with img:
        try:
            # Load image data into memory so decoding errors surface here
            img.load()
        except READ_ERRORS as e:
            raise ImageReadError(f"Can not read file {path}: {e}") from e
        yield img


def clean_copy(img: Image.Image) -> Image.Image:
    """Copy pixel data (and palette) into a new image with an empty info dict."""
    clean = Image.frombytes(img.mode, img.size, img.tobytes())
    if img.mode in {"P", "PA"} and img.palette is not None:
        rawmode = img.palette.mode
        clean.putpalette(img.getpalette(rawmode), rawmode)
    return clean


def encode_image(
    img: Image.Image,
    format: str,
    quality: int = 95,
    **kwargs: Any,
) -> bytes:
    """Encode an image to bytes with format-specific settings.

    Args:
        img: PIL Image to encode.
        format: Pillow format name (JPEG, PNG, WEBP, ...).
        quality: Quality for lossy formats (1-100).
        **kwargs: Additional format-specific options.

    Returns:
        The encoded image.

    Raises:
        ImageWriteError: If Pillow cannot write the format or the encoder fails.
    """
    format = FIRST_FRAME_FORMATS.get(format, format)
    save_kwargs: dict[str, Any] = dict(kwargs)

    # Format-specific settings
    if format == "JPEG":
        save_kwargs["quality"] = quality
        save_kwargs["optimize"] = True
    elif format == "WEBP":
        save_kwargs["quality"] = quality
    elif format == "PNG":
        save_kwargs["optimize"] = True

    buffer = io.BytesIO()
    try:
        img.save(buffer, format=format, **save_kwargs)
    except KeyError as e:
        raise ImageWriteError(f"Writing {format} images is not supported") from e
    except (OSError, ValueError, TypeError) as e:
        raise ImageWriteError(f"Can not encode {format} image: {e}") from e
    return buffer.getvalue()


def write_atomic(data: bytes, path: Path, mode_from: Path | None = None) -> int:
    """Write bytes to ``path`` via a temporary file in the same directory.

    The destination is only replaced once the whole buffer is on disk, so a
    failed write never leaves a partial file behind.

    Args:
        data: File contents.
        path: Output path.
        mode_from: Copy permission bits from this file.

    Returns:
        File size in bytes.
    """
    tmp_path: Path | None = None
    try:
        # Create output directory if needed
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", delete=False
        ) as tmp:
            tmp_path = Path(tmp.name)
            tmp.write(data)
    except OSError as e:
        # Flushing on close can fail too
        if tmp_path is not None:
            tmp_path.unlink(missing_ok=True)
        raise ImageWriteError(f"Can not write file {path}: {e}") from e

    try:
        if mode_from is not None:
            shutil.copymode(mode_from, tmp_path)
        tmp_path.replace(path)
    except OSError as e:
        tmp_path.unlink(missing_ok=True)
        raise ImageWriteError(f"Can not write file {path}: {e}") from e
    return get_file_size(path)


def get_file_size(path: Path) -> int:
    """Get file size in bytes."""
    return path.stat().st_size


def list_files(directory: Path) -> list[Path]:
    """List the regular files directly inside a directory.

    Subdirectories are skipped; nothing is recursed into.
    """
    if not directory.is_dir():
        raise ValueError(f"Not a directory: {directory}")

    return sorted(path for path in directory.iterdir() if path.is_file())
