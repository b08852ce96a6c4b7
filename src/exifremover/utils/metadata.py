"""EXIF extraction utilities."""

from typing import Any

from PIL import ExifTags, Image


# Pointer tags whose values are IFD offsets rather than data
IFD_POINTERS = {
    ExifTags.IFD.Exif: ExifTags.TAGS,
    ExifTags.IFD.GPSInfo: ExifTags.GPSTAGS,
}


def format_value(value: Any) -> str:
    """Render an EXIF value as a single display line."""
    if isinstance(value, bytes):
        return f"<{len(value)} bytes>"
    if isinstance(value, str):
        return value.strip(" \x00")
    if isinstance(value, tuple):
        return ", ".join(format_value(v) for v in value)
    return str(value)


def extract_exif(img: Image.Image) -> dict[str, str]:
    """Collect EXIF tags of a loaded image, including the Exif and GPS IFDs.

    Args:
        img: PIL Image to inspect.

    Returns:
        Tag name to display value, in file order. Empty if the image has no EXIF.
    """
    exif = img.getexif()
    tags: dict[str, str] = {}

    for tag_id, value in exif.items():
        if tag_id in IFD_POINTERS:
            continue
        tags[ExifTags.TAGS.get(tag_id, f"Tag 0x{tag_id:04X}")] = format_value(value)

    for ifd_id, names in IFD_POINTERS.items():
        for tag_id, value in exif.get_ifd(ifd_id).items():
            name = names.get(tag_id, f"Tag 0x{tag_id:04X}")
            if ifd_id == ExifTags.IFD.GPSInfo and not name.startswith("GPS"):
                name = f"GPS{name}"
            tags[name] = format_value(value)

    return tags
