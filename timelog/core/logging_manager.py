#!/usr/bin/env python3
"""
logging_manager.py
--------------------
Logging for the Timelog store and CLI.

A TimelogLogger writes two rotating files into its log directory:

    <component>.log   every record of the component, DEBUG and up
    errors.log        errors of all components, with context and traceback

Each record is a tag and a message, followed by the details dict as JSON:

    OPERATION - create_label_completed: {"operation_id": "...", "success": true}

Loggers are registered as ``timelog.<component>`` and
``timelog.<component>.errors`` and are therefore process-wide. Building a
second TimelogLogger for the same component closes and replaces the
handlers of the first, so two stores logging as "database" in one process
both write to the directory configured last.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
import logging
import sys
import traceback
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, List, Optional

# --- Third party imports ---
import click

_RECORD_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _render(tag: str, message: str, details: Optional[Dict[str, Any]] = None) -> str:
    if details:
        return f"{tag} - {message}: {json.dumps(details, default=str)}"
    return f"{tag} - {message}"


def _cli_message(error: Exception) -> str:
    return f"❌ {type(error).__name__}: {error}"


class TimelogLogger:
    """
    Rotating-file logger for one component ("database" or "cli").

    Attributes:
        log_dir: Directory holding the log files
        component_name: Component name, used for the logger and file names
        main_logger: Operations, debug lines and warnings
        error_logger: Errors only, shared errors.log file
    """

    def __init__(
        self,
        log_dir: Path,
        component_name: str = "timelog",
        max_bytes: int = 5 * 1024 * 1024,
        backup_count: int = 3,
    ) -> None:
        self.log_dir = Path(log_dir)
        self.component_name = component_name
        self.log_dir.mkdir(parents=True, exist_ok=True)

        def rotating(filename: str, level: int) -> logging.Handler:
            handler = RotatingFileHandler(
                self.log_dir / filename,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            )
            handler.setLevel(level)
            return handler

        # Warnings also reach the terminal; errors are reported by the CLI itself
        console = logging.StreamHandler()
        console.setLevel(logging.WARNING)

        self.main_logger = self._bind(
            f"timelog.{component_name}",
            logging.DEBUG,
            [rotating(f"{component_name}.log", logging.DEBUG), console],
        )
        self.error_logger = self._bind(
            f"timelog.{component_name}.errors",
            logging.ERROR,
            [rotating("errors.log", logging.ERROR)],
        )

    @staticmethod
    def _bind(name: str, level: int, handlers: List[logging.Handler]) -> logging.Logger:
        """Attach ``handlers`` to the named logger, closing any it had before."""
        logger = logging.getLogger(name)
        _detach(logger)
        logger.setLevel(level)
        logger.propagate = False

        formatter = logging.Formatter(_RECORD_FORMAT, datefmt=_DATE_FORMAT)
        for handler in handlers:
            handler.setFormatter(formatter)
            logger.addHandler(handler)
        return logger

    def close(self) -> None:
        """Flush and release the log files."""
        _detach(self.main_logger)
        _detach(self.error_logger)

    # ---- Records ----
    def log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.main_logger.info(_render("OPERATION", operation, details))

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.main_logger.debug(_render("DEBUG", message, details))

    def log_warning(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.main_logger.warning(_render("WARNING", message, details))

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        """
        Write an error, its context and its traceback to errors.log.

        Context is rendered as ``key=value`` pairs so that the operation
        name can be grepped for (``operation=label_add``).
        """
        lines = [f"ERROR - {type(error).__name__}: {error}"]
        if context:
            lines.append("Context: " + ", ".join(f"{k}={v}" for k, v in context.items()))
        self.error_logger.error(
            "\n".join(lines),
            exc_info=error if error.__traceback__ is not None else None,
        )

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        """
        Log an error raised under a CLI command and return the terminal line.

        Examples:
            >>> logger.log_cli_error(DatabaseError("Cannot insert new label 'foo'"))
            "❌ DatabaseError: Cannot insert new label 'foo'"
        """
        self.log_error(error, context or {"source": "cli"})
        message = _cli_message(error)
        if show_traceback:
            trace = "".join(
                traceback.format_exception(type(error), error, error.__traceback__)
            )
            return f"{message}\n\n{trace}"
        return message


def _detach(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def handle_cli_error(
    ctx: "click.Context",
    error: Exception,
    operation: str,
    additional_context: Optional[Dict[str, Any]] = None,
    exit_code: int = 1,
) -> None:
    """
    Report a failed CLI command and exit.

    The error is logged through ``ctx.obj["logger"]``; stderr gets the
    short message, plus the traceback when ``--verbose`` was given.
    """
    context = {"operation": operation, **(additional_context or {})}
    message = safe_logger(ctx.obj.get("logger")).log_cli_error(
        error, context, show_traceback=ctx.obj.get("verbose", False)
    )
    click.echo(message, err=True)
    sys.exit(exit_code)


class NullLogger:
    """No-op stand-in for TimelogLogger, so callers never check ``if logger:``."""

    def log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_warning(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        return _cli_message(error)

    def close(self) -> None:
        pass


_null_logger = NullLogger()


def safe_logger(logger: Optional[TimelogLogger]) -> TimelogLogger:
    """Return ``logger``, or the shared NullLogger when it is None."""
    return logger if logger is not None else _null_logger  # type: ignore[return-value]
