"""
ScriptVol Logger Module

Logging for the archive volume, built on the standard library:
- Structured logging with contextual information
- Per-subsystem loggers under the ``scriptvol`` namespace
- Optional file output
- In-memory log buffer for later inspection

Author: YSNRFD
Version: 1.0.0
"""

import logging
import sys
import threading
from datetime import datetime
from enum import IntEnum
from pathlib import Path
from typing import Optional, Any, List


class LogLevel(IntEnum):
    """Log level enumeration with numeric values for comparison."""
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50


class LogFormatter(logging.Formatter):
    """
    Log formatter for ScriptVol.

    Formats records as::

        [2026-10-19 12:00:00.000] INFO     [archive] Saving file {name=boot}
    """

    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
    }
    RESET = '\033[0m'

    def __init__(self, use_colors: bool = True):
        super().__init__()
        self.use_colors = use_colors and self._supports_color()

    @staticmethod
    def _supports_color() -> bool:
        """Check if the terminal supports ANSI colors."""
        if not hasattr(sys.stdout, 'isatty'):
            return False
        return sys.stdout.isatty()

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record."""
        timestamp = datetime.fromtimestamp(record.created).strftime(
            '%Y-%m-%d %H:%M:%S.%f'
        )[:-3]

        level = record.levelname
        if self.use_colors and level in self.COLORS:
            level_display = f"{self.COLORS[level]}{level:8s}{self.RESET}"
        else:
            level_display = f"{level:8s}"

        components = [f"[{timestamp}]", level_display]

        if hasattr(record, 'subsystem'):
            components.append(f"[{record.subsystem}]")

        components.append(str(record.getMessage()))

        if hasattr(record, 'context') and record.context:
            context_str = " ".join(f"{k}={v}" for k, v in record.context.items())
            components.append(f"{{{context_str}}}")

        message = " ".join(components)

        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)

        return message


class LogBufferHandler(logging.Handler):
    """
    Keeps recent log records in memory.

    Records are stored as plain dicts so callers (and tests) can check
    what a volume reported without parsing console output.
    """

    def __init__(self, max_entries: int = 10000):
        super().__init__()
        self.max_entries = max_entries
        self._log_buffer: List[dict[str, Any]] = []
        self._lock = threading.Lock()

    def emit(self, record: logging.LogRecord) -> None:
        """Store log record in buffer."""
        log_entry = {
            'timestamp': record.created,
            'level': record.levelname,
            'message': record.getMessage(),
            'subsystem': getattr(record, 'subsystem', None),
            'context': getattr(record, 'context', {}),
            'exc_type': record.exc_info[0].__name__ if record.exc_info else None,
        }

        with self._lock:
            self._log_buffer.append(log_entry)
            if len(self._log_buffer) > self.max_entries:
                self._log_buffer = self._log_buffer[-self.max_entries:]

    def get_logs(
        self,
        level: Optional[str] = None,
        subsystem: Optional[str] = None,
        limit: int = 100
    ) -> List[dict[str, Any]]:
        """Retrieve logs with optional filtering."""
        with self._lock:
            logs = self._log_buffer.copy()

        if level:
            logs = [l for l in logs if l['level'] == level]

        if subsystem:
            logs = [l for l in logs if l['subsystem'] == subsystem]

        return logs[-limit:]

    def clear(self) -> None:
        """Clear the log buffer."""
        with self._lock:
            self._log_buffer.clear()


class Logger:
    """
    Main logging class for ScriptVol.

    One instance per subsystem name; asking for the same subsystem twice
    returns the same object.

    Example:
        >>> log = Logger('archive')
        >>> log.info("Saving file", context={'name': 'boot'})
    """

    _instances: dict[str, 'Logger'] = {}
    _lock = threading.Lock()
    _initialized = False
    _buffer_handler: Optional[LogBufferHandler] = None
    _global_level: int = LogLevel.INFO

    def __new__(cls, subsystem: str = 'volume') -> 'Logger':
        """Get or create a logger for a subsystem."""
        with cls._lock:
            if subsystem not in cls._instances:
                instance = super().__new__(cls)
                instance._subsystem = subsystem
                instance._logger = logging.getLogger(f'scriptvol.{subsystem}')
                cls._instances[subsystem] = instance
            return cls._instances[subsystem]

    def __init__(self, subsystem: str = 'volume'):
        if hasattr(self, '_subsystem') and self._logger.handlers:
            return

        self._logger.setLevel(self._global_level)

    @property
    def subsystem(self) -> str:
        return self._subsystem

    @classmethod
    def initialize(
        cls,
        level: int = LogLevel.INFO,
        log_file: Optional[str] = None,
        use_colors: bool = True,
        console_output: bool = True
    ) -> None:
        """
        Initialize the logging system.

        Only the first call has any effect.

        Args:
            level: Minimum log level to capture
            log_file: Optional file path for log output
            use_colors: Whether to use ANSI colors in console output
            console_output: Whether to log to stdout at all
        """
        with cls._lock:
            if cls._initialized:
                return

            cls._global_level = level

            cls._buffer_handler = LogBufferHandler()
            cls._buffer_handler.setLevel(level)

            root_logger = logging.getLogger('scriptvol')
            root_logger.setLevel(level)
            root_logger.addHandler(cls._buffer_handler)

            if console_output:
                console_handler = logging.StreamHandler(sys.stdout)
                console_handler.setLevel(level)
                console_handler.setFormatter(LogFormatter(use_colors=use_colors))
                root_logger.addHandler(console_handler)

            if log_file:
                file_path = Path(log_file)
                file_path.parent.mkdir(parents=True, exist_ok=True)
                file_handler = logging.FileHandler(log_file)
                file_handler.setLevel(level)
                file_handler.setFormatter(LogFormatter(use_colors=False))
                root_logger.addHandler(file_handler)

            for instance in cls._instances.values():
                instance._logger.setLevel(level)

            cls._initialized = True

    @classmethod
    def get_buffered_logs(
        cls,
        level: Optional[str] = None,
        subsystem: Optional[str] = None,
        limit: int = 100
    ) -> List[dict[str, Any]]:
        """Get logs from the in-memory buffer."""
        if cls._buffer_handler is None:
            return []
        return cls._buffer_handler.get_logs(level=level, subsystem=subsystem, limit=limit)

    @classmethod
    def clear_buffer(cls) -> None:
        if cls._buffer_handler is not None:
            cls._buffer_handler.clear()

    def _log(
        self,
        level: int,
        message: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        extra = {
            'subsystem': self._subsystem,
            'context': context or {},
        }
        self._logger.log(level, message, extra=extra)

    def debug(self, message: str, context: Optional[dict[str, Any]] = None) -> None:
        """Log a debug message."""
        self._log(LogLevel.DEBUG, message, context)

    def info(self, message: str, context: Optional[dict[str, Any]] = None) -> None:
        """Log an info message."""
        self._log(LogLevel.INFO, message, context)

    def warning(self, message: str, context: Optional[dict[str, Any]] = None) -> None:
        """Log a warning message."""
        self._log(LogLevel.WARNING, message, context)

    def error(self, message: str, context: Optional[dict[str, Any]] = None) -> None:
        """Log an error message."""
        self._log(LogLevel.ERROR, message, context)

    def critical(self, message: str, context: Optional[dict[str, Any]] = None) -> None:
        """Log a critical message."""
        self._log(LogLevel.CRITICAL, message, context)

    def exception(
        self,
        message: str,
        exc: Optional[BaseException] = None,
        level: int = LogLevel.ERROR,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        """Log a message together with an exception's stack trace."""
        self._logger.log(
            level,
            message,
            exc_info=exc if exc is not None else True,
            extra={
                'subsystem': self._subsystem,
                'context': context or {},
            }
        )


def get_logger(subsystem: str) -> Logger:
    """
    Get a logger for the specified subsystem.

    Args:
        subsystem: Name of the subsystem (e.g., 'archive', 'config')

    Returns:
        Logger instance for the subsystem
    """
    return Logger(subsystem)
