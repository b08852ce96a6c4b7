"""Core processing module for exifremover."""

from exifremover.core.paths import (
    DestinationTarget,
    SourceTarget,
    TargetKind,
    classify,
    resolve_destination,
)
from exifremover.core.stripper import MetadataStripper
from exifremover.core.batch import BatchRunner

__all__ = [
    "DestinationTarget",
    "SourceTarget",
    "TargetKind",
    "classify",
    "resolve_destination",
    "MetadataStripper",
    "BatchRunner",
]
