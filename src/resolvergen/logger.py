"""Logging for resolvergen with rich console output for the CLI."""

import logging

from rich.console import Console
from rich.logging import RichHandler


class ResolvergenLogger(logging.Logger):
    """
    Logger that writes through a rich console and offers a few CLI output helpers.

    Standard levels (debug, info, warning, error) go through a RichHandler. The helpers
    (success, hint, key_value) print straight to the console and bypass levels.
    """

    def __init__(self, name: str, level: int = logging.INFO) -> None:
        super().__init__(name, level)
        self.console = Console(stderr=True)

        handler = RichHandler(
            console=self.console,
            rich_tracebacks=True,
            show_time=True,
            show_path=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        self.addHandler(handler)

    def print(self, message: str) -> None:
        """Print a plain message (with Rich markup support)."""
        self.console.print(message)

    def success(self, message: str) -> None:
        """Print a success message in green with a checkmark."""
        self.print(f"[green]✓[/green] {message}")

    def hint(self, message: str) -> None:
        """Print a dimmed secondary message."""
        self.print(f"[dim]{message}[/dim]")

    def key_value(self, key: str, value: object, key_style: str = "dim") -> None:
        """
        Print a formatted key-value pair such as "Types: 12".

        Args:
            key: The key/label to display
            value: The value to display
            key_style: Style for the key (default: "dim")
        """
        self.print(f"[{key_style}]{key}:[/{key_style}] {value}")


def get_logger(name: str = "resolvergen") -> ResolvergenLogger:
    """
    Get or create a resolvergen logger instance.

    Args:
        name: Logger name (default: "resolvergen")

    Returns:
        ResolvergenLogger instance
    """
    previous_class = logging.getLoggerClass()
    logging.setLoggerClass(ResolvergenLogger)
    try:
        logger = logging.getLogger(name)
    finally:
        logging.setLoggerClass(previous_class)

    return logger  # type: ignore[return-value]
