"""Rich console rendering for reports and results."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from exifremover.utils.logging import get_error_console


BANNER = r"""
 _____  _____ ___ ___
| __\ \/ /_ _| __| _ \___ _ __  _____ _____ _ _
| _| >  < | || _||   / -_) '  \/ _ \ V / -_) '_|
|___/_/\_\___|_| |_|_\___|_|_|_\___/\_/\___|_|        by Deque at
_  _ ____ ____ _  _ ____ ____ _  _ _  _ _  _ _  _ _ ___ _   _  ____ ____ _  _
|__| |__| |    |_/  |    |  | |\/| |\/| |  | |\ | |  |   \_/   |    |  | |\/|
|  | |  | |___ | \_ |___ |__| |  | |  | |__| | \| |  |    |   .|___ |__| |  |
"""


class StripStatus(str, Enum):
    """Outcome of stripping a single file."""

    SUCCESS = "success"
    READ_ERROR = "read_error"
    WRITE_ERROR = "write_error"


@dataclass
class StripResult:
    """Result of stripping metadata from one image."""

    input_path: Path
    output_path: Path
    status: StripStatus
    message: str = ""
    output_size: int = 0

    @property
    def success(self) -> bool:
        return self.status == StripStatus.SUCCESS


@dataclass
class BatchResult:
    """Ordered per-file outcomes of one directory run."""

    source_dir: Path
    dest_dir: Path
    results: list[StripResult] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.results)

    @property
    def succeeded(self) -> list[StripResult]:
        return [r for r in self.results if r.success]

    @property
    def failed(self) -> list[StripResult]:
        return [r for r in self.results if not r.success]


@dataclass
class MetadataReport:
    """EXIF tags found in an image, flattened to display strings."""

    path: Path
    format: str
    mode: str
    width: int
    height: int
    size_bytes: int
    tags: dict[str, str] = field(default_factory=dict)

    @property
    def has_exif(self) -> bool:
        return bool(self.tags)


class Dashboard:
    """Line-oriented Rich output for the CLI."""

    def __init__(self, console: Console, error_console: Console | None = None) -> None:
        self.console = console
        self.error_console = error_console or get_error_console()

    def show_banner(self) -> None:
        """Print the ASCII banner."""
        self.console.print(Text(BANNER, style="bold cyan"))

    def show_metadata(self, report: MetadataReport) -> None:
        """Display image information and every EXIF tag found."""
        table = Table(show_header=False, box=None, padding=(0, 2))
        table.add_column("Property", style="cyan")
        table.add_column("Value")

        table.add_row("File", escape(str(report.path)))
        table.add_row("Format", report.format)
        table.add_row("Mode", report.mode)
        table.add_row("Dimensions", f"{report.width} × {report.height} px")
        table.add_row("File size", self._format_size(report.size_bytes))
        table.add_row("Has EXIF", "[green]Yes[/]" if report.has_exif else "[dim]No[/]")
        self.console.print(
            Panel(table, title="[bold]📷 Image Info[/]", border_style="blue"), soft_wrap=False
        )

        if not report.has_exif:
            self.console.print(f"No EXIF data found in {escape(str(report.path))}")
            return

        exif_table = Table(show_header=True, box=None, padding=(0, 2))
        exif_table.add_column("Tag", style="cyan")
        exif_table.add_column("Value")
        for tag, value in report.tags.items():
            exif_table.add_row(escape(tag), escape(value))

        self.console.print(
            Panel(exif_table, title="[bold]🏷️ EXIF Data[/]", border_style="dim"), soft_wrap=False
        )

    def show_strip_result(self, result: StripResult) -> None:
        """Two-line summary for a single stripped file."""
        self.console.print(
            f"[bold green]✓[/] All EXIF data successfully removed from "
            f"{escape(str(result.input_path.absolute()))}"
        )
        self.console.print(f"  Result saved in {escape(str(result.output_path.absolute()))}")

    def show_batch_entry(self, result: StripResult) -> None:
        """One line per processed file in a batch."""
        if result.success:
            self.console.print(
                f"[green]created file[/] {escape(str(result.output_path.absolute()))}"
            )
        else:
            self.error_console.print(f"[bold red]✗[/] {escape(result.message)}")

    def show_batch_summary(self, batch: BatchResult) -> None:
        """Display one summary line for a directory run."""
        failed = len(batch.failed)
        line = f"[bold]{len(batch.succeeded)}[/] file(s) stripped"
        if failed:
            line += f", [red]{failed} failed[/]"
        written = sum(r.output_size for r in batch.succeeded)
        line += f" ({self._format_size(written)} written)"
        self.console.print(line)

    @staticmethod
    def _format_size(size_bytes: float) -> str:
        """Format file size in human-readable format."""
        for unit in ["B", "KB", "MB", "GB"]:
            if size_bytes < 1024:
                return f"{size_bytes:.1f} {unit}"
            size_bytes /= 1024
        return f"{size_bytes:.1f} TB"
