"""Prints the first ten Fibonacci numbers."""

import logging
import sys
from typing import Iterator, Optional, TextIO

from .fibonacci import fibonacci

logger = logging.getLogger(__name__)

REPORT_COUNT = 10

LINE_FORMAT = "Fibonacci({index}) = {value}"


def header(count: int = REPORT_COUNT) -> str:
    return f"First {count} Fibonacci numbers:"


def format_line(index: int, value: int) -> str:
    return LINE_FORMAT.format(index=index, value=value)


def report_lines(count: int = REPORT_COUNT) -> Iterator[str]:
    """Yield the header followed by one line per index, ascending from 0."""
    yield header(count)
    for i in range(count):
        value = fibonacci(i)
        logger.debug({"event": "computed", "index": i, "value": value})
        yield format_line(i, value)


def print_report(stream: Optional[TextIO] = None) -> int:
    """Write the report to *stream* (stdout by default).

    Returns the number of data lines written, not counting the header.
    """
    if stream is None:
        stream = sys.stdout
    lines = report_lines()
    print(next(lines), file=stream)
    written = 0
    for line in lines:
        print(line, file=stream)
        written += 1
    stream.flush()
    logger.info({"event": "report_written", "lines": written})
    return written
