from .errors import ConfigError, FibReportError, InvalidIndexError
from .fibonacci import fibonacci, fibonacci_iterative
from .report import REPORT_COUNT, print_report, report_lines

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "FibReportError",
    "InvalidIndexError",
    "REPORT_COUNT",
    "fibonacci",
    "fibonacci_iterative",
    "print_report",
    "report_lines",
]
