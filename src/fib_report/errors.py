"""Exception types raised by fib_report."""


class FibReportError(Exception):
    """Base class for fib_report errors."""


class InvalidIndexError(FibReportError, ValueError):
    """Raised when a Fibonacci index is negative or not an integer."""

    def __init__(self, index):
        self.index = index
        super().__init__(f"Fibonacci index must be a non-negative int, got {index!r}")


class ConfigError(FibReportError):
    """Raised when a config file exists but cannot be used."""
