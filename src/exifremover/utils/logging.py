"""Rich logging utilities for exifremover."""

from rich.console import Console
from rich.markup import escape


# Global console instances
_console: Console | None = None
_error_console: Console | None = None


def get_console() -> Console:
    """Get or create the global Rich console (stdout)."""
    global _console
    if _console is None:
        _console = Console(soft_wrap=True, highlight=False)
    return _console


def get_error_console() -> Console:
    """Get or create the global Rich console for errors (stderr)."""
    global _error_console
    if _error_console is None:
        _error_console = Console(stderr=True, soft_wrap=True, highlight=False)
    return _error_console


def log_error(message: str) -> None:
    """Log an error message on stderr."""
    get_error_console().print(f"[bold red]✗[/] {escape(message)}")


def log_warning(message: str) -> None:
    """Log a warning message on stderr."""
    get_error_console().print(f"[bold yellow]⚠[/] {escape(message)}")
