"""
Console output wrapper used by the CLI, swappable in tests.
"""
import sys


class ConsoleIO:
    """wrapper around print for stdout/stderr"""

    def print(self, *args, **kwargs) -> None:
        """
        Print values to stdout.

        Args:
            *args: Values to print.
            **kwargs: Keyword arguments passed to print().
        """
        print(*args, **kwargs)

    def error(self, *args, **kwargs) -> None:
        """Print values to stderr."""
        print(*args, file=sys.stderr, **kwargs)
