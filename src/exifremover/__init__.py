"""exifremover - strip EXIF metadata from images."""

__app_name__ = "exifremover"
__version__ = "0.1.0"
