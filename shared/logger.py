"""
Hardpass Structured Logger
===========================

:class:`HardpassLogger` binds a component name and an optional operation
to every record it emits. Records go to a Rich handler on stderr and,
when a log file is configured, to a rotating file as plain text or JSON
lines.

Callers pass rule names, counts and timings as keyword context. Password
material is never logged.

References:
    - Python logging HOWTO. https://docs.python.org/3/howto/logging.html
    - Rich library. https://github.com/Textualize/rich
"""

from __future__ import annotations

import json
import logging
import time
from contextlib import contextmanager
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Iterator, TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

if TYPE_CHECKING:
    from shared.config import HardpassConfig

_LOG_THEME = Theme(
    {
        "log.level.debug": "dim cyan",
        "log.level.info": "bold bright_blue",
        "log.level.warning": "bold yellow",
        "log.level.error": "bold red",
        "log.level.critical": "bold white on red",
    }
)

_TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_STANDARD_KWARGS = frozenset({"exc_info", "stack_info", "stacklevel"})


class _JSONFormatter(logging.Formatter):
    """One JSON object per line.

    Keys: ``timestamp``, ``level``, ``logger``, ``message``, then
    ``component``, ``operation`` and ``context`` when set, and
    ``exc_info`` when a traceback is attached.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in ("component", "operation", "context"):
            value = getattr(record, f"hardpass_{key}", None)
            if value is not None:
                entry[key] = value
        if record.exc_info and record.exc_info[1] is not None:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def _console_handler(level: int) -> logging.Handler:
    return RichHandler(
        level=level,
        console=Console(theme=_LOG_THEME, stderr=True),
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )


def _file_handler(
    path: Path, level: int, json_lines: bool, max_bytes: int, backup_count: int
) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
    )
    handler.setLevel(level)
    handler.setFormatter(
        _JSONFormatter() if json_lines
        else logging.Formatter(_TEXT_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z")
    )
    return handler


class HardpassLogger:
    """Component-scoped logger with keyword context.

    Usage::

        log = HardpassLogger("engine", log_file="hardpass.log", json_logs=True)
        with log.operation("check_password"):
            log.debug("Rule failed", rule="length_min")

    Args:
        component: Name of the emitting component; the stdlib logger is
            ``hardpass.<component>``.
        log_level: Minimum level name (DEBUG, INFO, WARNING, ERROR).
        log_file: Rotating log file, or ``None`` for no file output.
        json_logs: Write JSON lines instead of plain text to *log_file*.
        max_bytes: Size at which the log file rotates.
        backup_count: Rotated files to keep.
        console_output: Attach the Rich handler on stderr.
    """

    def __init__(
        self,
        component: str,
        *,
        log_level: str = "INFO",
        log_file: str | Path | None = None,
        json_logs: bool = False,
        max_bytes: int = 10_485_760,
        backup_count: int = 5,
        console_output: bool = True,
    ) -> None:
        self._component = component
        self._operation: str | None = None

        level = getattr(logging, log_level.upper(), logging.INFO)
        self._logger = logging.getLogger(f"hardpass.{component}")
        self._logger.setLevel(level)
        self._logger.propagate = False
        # Rebuilding a logger for the same component replaces its handlers
        self._logger.handlers.clear()

        if console_output:
            self._logger.addHandler(_console_handler(level))
        if log_file is not None:
            self._logger.addHandler(
                _file_handler(Path(log_file), level, json_logs, max_bytes, backup_count)
            )

    @classmethod
    def from_config(
        cls,
        component: str,
        config: HardpassConfig,
        *,
        console_output: bool = True,
    ) -> HardpassLogger:
        """Build a logger from the ``[global]`` section; ``debug`` forces DEBUG."""
        settings = config.global_settings
        return cls(
            component,
            log_level="DEBUG" if settings.debug else settings.log_level,
            log_file=settings.log_file,
            json_logs=settings.log_json,
            console_output=console_output,
        )

    @contextmanager
    def operation(self, name: str) -> Iterator[HardpassLogger]:
        """Tag records emitted inside the block with operation *name*."""
        previous, self._operation = self._operation, name
        try:
            yield self
        finally:
            self._operation = previous

    @contextmanager
    def timed(self, label: str) -> Iterator[None]:
        """Log the start and the elapsed time of the block at DEBUG."""
        start = time.perf_counter()
        self.debug("Started: %s", label)
        try:
            yield
        finally:
            self.debug("Completed: %s (%.3f sec)", label, time.perf_counter() - start)

    def _log(self, level: int, msg: str, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        options = {k: kwargs.pop(k) for k in list(kwargs) if k in _STANDARD_KWARGS}
        extra = {
            "hardpass_component": self._component,
            "hardpass_operation": self._operation,
        }
        if kwargs:
            extra["hardpass_context"] = kwargs
        self._logger.log(level, msg, *args, extra=extra, **options)

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.DEBUG, msg, args, kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.INFO, msg, args, kwargs)

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.WARNING, msg, args, kwargs)

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.ERROR, msg, args, kwargs)

    @property
    def underlying(self) -> logging.Logger:
        return self._logger
