"""
Logging configuration for the application.
"""
import logging
import os
import sys


class ColoredFormatter(logging.Formatter):
    """Custom formatter with log levels."""

    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
    }
    RESET = '\033[0m'

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record with colors."""
        color = self.COLORS.get(record.levelname, self.RESET)
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


def setup_logger(name: str, level: int | str | None = None) -> logging.Logger:
    """
    Set up a logger.

    Args:
        name: Logger name
        level: Logging level, falls back to the LOG_LEVEL environment variable

    Returns:
        Configured logger instance
    """
    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO").upper()

    logger = logging.getLogger(name)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)

    formatter = ColoredFormatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    handler.setFormatter(formatter)

    logger.addHandler(handler)
    return logger


class DiagnosticLogger:
    """
    Wraps an injected diagnostic sink so its failures never reach the caller.

    The sink only needs debug/info/warning/error methods; a failing call is
    reported on stderr and otherwise ignored, the way logging.Handler.handleError does.
    """

    def __init__(self, sink):
        self.sink = sink

    @classmethod
    def wrap(cls, sink) -> "DiagnosticLogger":
        return sink if isinstance(sink, cls) else cls(sink)

    def _emit(self, level: str, message: str) -> None:
        try:
            getattr(self.sink, level)(message)
        except Exception as e:
            sys.stderr.write(f"--- Diagnostic sink error ({level}): {e!r}\n")

    def debug(self, message: str) -> None:
        self._emit("debug", message)

    def info(self, message: str) -> None:
        self._emit("info", message)

    def warning(self, message: str) -> None:
        self._emit("warning", message)

    warn = warning

    def error(self, message: str) -> None:
        self._emit("error", message)


app_logger = setup_logger("chat_proxy")
