"""Source classification and destination resolution."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from exifremover.errors import InvalidDestinationError, SourceNotFoundError


class TargetKind(str, Enum):
    """What a source path points at."""

    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class SourceTarget:
    """A classified source path."""

    path: Path
    kind: TargetKind

    @property
    def is_dir(self) -> bool:
        return self.kind == TargetKind.DIRECTORY


@dataclass(frozen=True)
class DestinationTarget:
    """Where stripped output goes.

    ``redirected`` is set when a directory source had no distinct destination
    and writes were moved into the reserved temp subdirectory.
    """

    path: Path
    redirected: bool = False


def classify(path: Path) -> SourceTarget:
    """Classify a path as a single file or a directory.

    Raises:
        SourceNotFoundError: If the path does not exist.
    """
    if path.is_dir():
        return SourceTarget(path, TargetKind.DIRECTORY)
    if path.exists():
        return SourceTarget(path, TargetKind.FILE)
    raise SourceNotFoundError(f"File or folder not found: {path}")


def resolve_destination(
    source: SourceTarget,
    dest: Path | None = None,
    temp_dir_name: str = "temp",
) -> DestinationTarget:
    """Resolve and prepare the destination for a strip operation.

    A missing ``dest`` means "same as source": a single file is overwritten in
    place, while a directory is redirected into ``<source>/<temp_dir_name>`` so
    a folder of originals is never overwritten by accident.

    Args:
        source: Classified source.
        dest: Destination given on the command line, if any.
        temp_dir_name: Name of the reserved redirect subdirectory.

    Returns:
        The resolved destination. For directory sources the destination
        directory exists on return.

    Raises:
        InvalidDestinationError: If a directory source points at an existing
            non-directory destination.
    """
    target = dest if dest is not None else source.path

    if not source.is_dir:
        # Writing into an existing folder keeps the source file name
        if target.is_dir():
            target = target / source.path.name
        return DestinationTarget(target)

    if target.exists() and not target.is_dir():
        raise InvalidDestinationError(f"Destination is not a directory: {target}")

    redirected = target.resolve() == source.path.resolve()
    if redirected:
        target = target / temp_dir_name
        if target.exists() and not target.is_dir():
            raise InvalidDestinationError(f"Destination is not a directory: {target}")

    try:
        target.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise InvalidDestinationError(f"Can not create destination folder {target}: {e}") from e

    return DestinationTarget(target, redirected=redirected)
