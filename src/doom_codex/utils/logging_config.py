"""
Log handlers and formatters for Doom Codex.

Console output is human-oriented; the optional file output is one CSV row
per record so logs of fetch threads can be filtered in a spreadsheet.
"""

import csv
import io
import logging
import logging.handlers
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..settings import AppSettings

CONSOLE_FORMAT = "%(asctime)s : %(levelname)-8s : %(threadName)s : %(message)s"


class ColoredFormatter(logging.Formatter):
    """Wraps the level name in an ANSI color."""

    LEVEL_COLORS = {
        logging.DEBUG: 36,
        logging.INFO: 32,
        logging.WARNING: 33,
        logging.ERROR: 31,
        logging.CRITICAL: 35,
    }

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        code = self.LEVEL_COLORS.get(record.levelno)
        if code is None:
            return text
        return text.replace(record.levelname, f"\033[{code}m{record.levelname}\033[0m", 1)


class CSVFormatter(logging.Formatter):
    """Semicolon-separated, fully quoted rows:

    time; level; thread; logger; line; message (with traceback, if any)
    """

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"

        buffer = io.StringIO()
        writer = csv.writer(buffer, delimiter=";", quoting=csv.QUOTE_ALL, lineterminator="")
        writer.writerow(
            [
                self.formatTime(record, self.datefmt),
                record.levelname,
                record.threadName,
                record.name,
                record.lineno,
                message,
            ]
        )
        return buffer.getvalue()


def setup_logging(settings: "AppSettings") -> None:
    """Install the console (and optional CSV file) handler on the root logger.

    Existing root handlers are replaced. Per-group thresholds from the
    settings are applied to their loggers.
    """
    config = settings.logging

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.handlers.clear()

    formatter_class = ColoredFormatter if config.console_colors else logging.Formatter
    console = logging.StreamHandler()
    console.setLevel(config.console_level)
    console.setFormatter(formatter_class(fmt=CONSOLE_FORMAT, datefmt="%H:%M:%S"))
    root.addHandler(console)

    log_file = config.log_file
    if log_file is not None:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                log_file, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8"
            )
        except OSError as e:
            root.warning(f"File logging disabled, cannot open {log_file}: {e}")
            log_file = None
        else:
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(CSVFormatter(datefmt="%Y-%m-%d %H:%M:%S"))
            root.addHandler(file_handler)

    logging.getLogger("doom_codex").setLevel(logging.DEBUG)
    for name, level in config.logger_levels().items():
        logging.getLogger(name).setLevel(level)

    logger = logging.getLogger(__name__)
    logger.info(
        f"Logging to console at {logging.getLevelName(config.console_level)}"
        + (f" and to {Path(log_file).absolute()}" if log_file else "")
    )
