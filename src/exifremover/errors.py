"""Exception taxonomy for exifremover.

Every error carries a single-line, user-facing message; the CLI prints
``str(error)`` and nothing else.
"""


class ExifRemoverError(Exception):
    """Base class for all exifremover errors."""


class SourceNotFoundError(ExifRemoverError):
    """The source file or directory does not exist."""


class InvalidDestinationError(ExifRemoverError):
    """The destination conflicts with the source (e.g. a file for a folder)."""


class ImageReadError(ExifRemoverError):
    """The input could not be read or parsed as an image."""


class ImageWriteError(ExifRemoverError):
    """The stripped image could not be encoded or written."""
