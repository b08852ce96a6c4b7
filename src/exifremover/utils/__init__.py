"""Utility module for exifremover."""

from exifremover.utils.image_io import open_image, encode_image, write_atomic
from exifremover.utils.logging import get_console, get_error_console

__all__ = ["open_image", "encode_image", "write_atomic", "get_console", "get_error_console"]
