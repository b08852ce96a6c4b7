"""Sequential batch runner for whole directories."""

from pathlib import Path

from rich.console import Console

from exifremover.cli.dashboard import BatchResult, Dashboard, StripResult, StripStatus
from exifremover.core.stripper import MetadataStripper
from exifremover.errors import ImageReadError, ImageWriteError
from exifremover.utils.image_io import list_files


class BatchRunner:
    """Strip metadata from every regular file directly inside a directory.

    Files are processed one after another. Subdirectories are skipped
    without being reported, and a failure on one file is recorded and
    reported without stopping the rest of the run.
    """

    def __init__(
        self,
        console: Console | None = None,
        stripper: MetadataStripper | None = None,
        error_console: Console | None = None,
    ) -> None:
        """Initialize batch runner.

        Args:
            console: Rich console for per-file lines and the summary.
            stripper: Stripper used for each file.
            error_console: Rich console for failure lines (stderr by default).
        """
        self.console = console or Console()
        self.stripper = stripper or MetadataStripper()
        self.dashboard = Dashboard(self.console, error_console)

    def run(self, source_dir: Path, dest_dir: Path) -> BatchResult:
        """Process all files in a directory.

        Args:
            source_dir: Directory holding the original images.
            dest_dir: Directory receiving the stripped copies, created if absent.

        Returns:
            BatchResult with one outcome per regular file, in listing order.
        """
        dest_dir.mkdir(parents=True, exist_ok=True)
        batch = BatchResult(source_dir=source_dir, dest_dir=dest_dir)

        for path in list_files(source_dir):
            result = self._process_single(path, dest_dir / path.name)
            batch.results.append(result)
            self.dashboard.show_batch_entry(result)

        self.dashboard.show_batch_summary(batch)
        return batch

    def _process_single(self, input_path: Path, output_path: Path) -> StripResult:
        """Process a single image."""
        try:
            return self.stripper.strip_and_save(input_path, output_path)
        except ImageReadError as e:
            return StripResult(
                input_path=input_path,
                output_path=output_path,
                status=StripStatus.READ_ERROR,
                message=str(e),
            )
        except ImageWriteError as e:
            return StripResult(
                input_path=input_path,
                output_path=output_path,
                status=StripStatus.WRITE_ERROR,
                message=str(e),
            )
