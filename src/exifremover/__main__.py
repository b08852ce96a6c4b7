"""Allow running as ``python -m exifremover``."""

from exifremover.cli.app import app

app(prog_name="exifremover")
