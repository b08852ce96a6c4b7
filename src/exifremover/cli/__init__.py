"""Command line interface for exifremover."""
