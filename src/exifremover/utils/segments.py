"""Lossless metadata removal for JPEG and WebP containers.

The compressed image data is copied byte for byte; only the segments or
chunks carrying metadata are dropped, so the decoded pixels never change.
"""

import struct

JPEG_SOI = b"\xff\xd8"
JPEG_EOI = b"\xff\xd9"

# APPn segments that describe the image rather than annotate it
ICC_PROFILE_HEADER = b"ICC_PROFILE\x00"
APP0 = 0xE0  # JFIF / JFXX
APP2 = 0xE2  # ICC profile (also MPF index of MPO files)
APP14 = 0xEE  # Adobe colour transform

SOS = 0xDA
COM = 0xFE

# VP8X feature flags
WEBP_ICC_FLAG = 0x20
WEBP_EXIF_FLAG = 0x08
WEBP_XMP_FLAG = 0x04


def _keep_jpeg_segment(marker: int, payload: bytes, keep_icc_profile: bool) -> bool:
    if marker == COM:
        return False
    if not 0xE0 <= marker <= 0xEF:
        return True
    if marker in (APP0, APP14):
        return True
    if marker == APP2:
        return keep_icc_profile and payload.startswith(ICC_PROFILE_HEADER)
    # APP1 (EXIF, XMP), APP13 (IPTC) and vendor blocks
    return False


def strip_jpeg(data: bytes, keep_icc_profile: bool = True) -> bytes:
    """Remove EXIF, XMP, IPTC, comment and vendor segments from a JPEG.

    JFIF, Adobe and (optionally) ICC segments are kept. Anything after the
    first end-of-image marker is dropped, which turns an MPO into the plain
    JPEG of its first frame.

    Raises:
        ValueError: If the data is not a well-formed JPEG.
    """
    if not data.startswith(JPEG_SOI):
        raise ValueError("Not a JPEG file")

    output = bytearray(JPEG_SOI)
    pos = 2
    while pos + 4 <= len(data):
        if data[pos] != 0xFF:
            raise ValueError(f"Invalid JPEG marker at offset {pos}")

        marker = data[pos + 1]
        if marker == 0xFF:
            # Fill byte before a marker
            pos += 1
            continue

        if marker == SOS:
            # Scan data, including later progressive scans, runs up to EOI
            end = data.find(JPEG_EOI, pos)
            output += data[pos:] if end == -1 else data[pos:end + 2]
            return bytes(output)

        (length,) = struct.unpack(">H", data[pos + 2:pos + 4])
        segment = data[pos:pos + 2 + length]
        if _keep_jpeg_segment(marker, segment[4:], keep_icc_profile):
            output += segment
        pos += 2 + length

    raise ValueError("JPEG data ends before the first scan")


def _webp_chunks(data: bytes) -> list[tuple[bytes, bytes]]:
    if data[:4] != b"RIFF" or data[8:12] != b"WEBP":
        raise ValueError("Not a WebP file")

    chunks = []
    pos = 12
    while pos + 8 <= len(data):
        fourcc = data[pos:pos + 4]
        (size,) = struct.unpack("<I", data[pos + 4:pos + 8])
        # Chunks are padded to an even size
        end = pos + 8 + size + (size & 1)
        chunks.append((fourcc, data[pos:end]))
        pos = end
    return chunks


def is_lossless_webp(data: bytes) -> bool:
    """Whether a WebP file holds a VP8L (lossless) bitstream."""
    return any(fourcc == b"VP8L" for fourcc, _ in _webp_chunks(data))


def strip_webp(data: bytes, keep_icc_profile: bool = True) -> bytes:
    """Remove EXIF and XMP chunks (and optionally ICCP) from a WebP file.

    The VP8X feature flags and the RIFF size are updated to match.

    Raises:
        ValueError: If the data is not a WebP file.
    """
    dropped = {b"EXIF", b"XMP "}
    cleared = WEBP_EXIF_FLAG | WEBP_XMP_FLAG
    if not keep_icc_profile:
        dropped.add(b"ICCP")
        cleared |= WEBP_ICC_FLAG

    chunks = [chunk for fourcc, chunk in _webp_chunks(data) if fourcc not in dropped]
    if chunks and chunks[0][:4] == b"VP8X":
        vp8x = bytearray(chunks[0])
        vp8x[8] &= ~cleared & 0xFF
        chunks[0] = bytes(vp8x)

    body = b"WEBP" + b"".join(chunks)
    return b"RIFF" + struct.pack("<I", len(body)) + body
