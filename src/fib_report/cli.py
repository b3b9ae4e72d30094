import argparse
import json
import logging
import sys
from logging import StreamHandler, Formatter

from fib_report import __version__
from fib_report.config import load_config, CONFIG_ENV_VAR
from fib_report.errors import ConfigError
from fib_report.report import print_report
from fib_report.timing import timed

TEXT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FORMATS = ('json', 'text')


class JsonFormatter(Formatter):
    """One JSON object per record. Dict messages become top-level keys."""

    def format(self, record):
        entry = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
        }
        if isinstance(record.msg, dict):
            entry.update(record.msg)
        else:
            entry["message"] = record.getMessage()
        if record.exc_info:
            # json.dumps escapes the newlines, keeping the record on one line
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def setup_logging(level=logging.WARNING, fmt='json'):
    """Configures the root logger to write to stderr."""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates if run multiple times
    if logger.hasHandlers():
        logger.handlers.clear()

    handler = StreamHandler(sys.stderr)
    if fmt == 'json':
        handler.setFormatter(JsonFormatter(datefmt='%Y-%m-%dT%H:%M:%S%z'))
    else:
        handler.setFormatter(Formatter(TEXT_FORMAT))
    logger.addHandler(handler)
    logging.getLogger("fib_report").setLevel(level)


def resolve_level(name):
    """Map a level name such as ``"info"`` to its logging constant."""
    level = logging.getLevelName(str(name).upper())
    if not isinstance(level, int):
        raise ConfigError(f"Unknown logging level: {name!r}")
    return level


def resolve_format(name):
    fmt = str(name).lower()
    if fmt not in LOG_FORMATS:
        raise ConfigError(f"Unknown logging format: {name!r} (expected one of {', '.join(LOG_FORMATS)})")
    return fmt


def build_parser():
    parser = argparse.ArgumentParser(
        prog="fib-report",
        description="Print the first ten Fibonacci numbers, computed by naive recursion.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument(
        "--config", "-c",
        metavar="CONFIG_FILE",
        default=None,
        help=f"YAML file with logging settings. Overrides the {CONFIG_ENV_VAR} environment variable."
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable DEBUG level logging."
    )
    parser.add_argument(
        "--timing", "-t",
        action="store_true",
        help="Log how long the report took to compute."
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    return parser


def main(argv=None):
    """
    Command-line entry point. Returns the process exit status.
    """
    args = build_parser().parse_args(argv)

    # JSON at WARNING until the config says otherwise, so records emitted
    # while loading it are formatted too
    setup_logging()
    try:
        config = load_config(args.config)
        level = logging.DEBUG if args.debug else resolve_level(config.get('logging.level', 'WARNING'))
        setup_logging(level=level, fmt=resolve_format(config.get('logging.format', 'json')))
    except ConfigError as e:
        logging.getLogger(__name__).error({"event": "config", "status": "failed", "error": str(e)})
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    logger = logging.getLogger(__name__)
    logger.info({"event": "cli_start", "args": vars(args)})

    run = print_report
    if args.timing or config.get('report.timing', False):
        run = timed(print_report)
    lines = run()

    logger.info({"event": "cli_end", "status": "success", "lines": lines})
    return 0


if __name__ == "__main__":
    sys.exit(main())
