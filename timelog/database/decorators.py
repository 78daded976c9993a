#!/usr/bin/env python3
"""
decorators.py
--------------------
Shared decorators for store operations.

Both decorators accept plain functions and coroutine functions; the
wrapper keeps the calling convention of the wrapped callable.
"""
import inspect
from datetime import datetime
from functools import wraps
from typing import Callable

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from timelog.core.exceptions import DatabaseError, SqlError
from timelog.core.logging_manager import safe_logger


def log_database_operation(operation_name: str):
    """
    Decorator to log store operations with timing and context.

    Expects the decorated method's ``self`` to carry an optional
    ``logger`` attribute.

    Args:
        operation_name: Name of the operation being logged

    Returns:
        Decorator function
    """

    def decorator(function: Callable) -> Callable:
        def _start(self, args, kwargs):
            start_time = datetime.now()
            operation_id = f"{operation_name}_{start_time.strftime('%Y%m%d_%H%M%S_%f')}"
            safe_logger(getattr(self, "logger", None)).log_debug(
                f"Starting {operation_name}",
                {
                    "operation_id": operation_id,
                    "args_count": len(args),
                    "kwargs_keys": list(kwargs.keys()),
                },
            )
            return start_time, operation_id

        def _success(self, start_time, operation_id):
            duration = (datetime.now() - start_time).total_seconds()
            safe_logger(getattr(self, "logger", None)).log_operation(
                f"{operation_name}_completed",
                {
                    "operation_id": operation_id,
                    "duration_seconds": duration,
                    "success": True,
                },
            )

        def _failure(self, error, start_time, operation_id):
            duration = (datetime.now() - start_time).total_seconds()
            safe_logger(getattr(self, "logger", None)).log_error(
                error,
                {
                    "operation": operation_name,
                    "operation_id": operation_id,
                    "duration_seconds": duration,
                },
            )

        if inspect.iscoroutinefunction(function):

            @wraps(function)
            async def async_wrapper(self, *args, **kwargs):
                start_time, operation_id = _start(self, args, kwargs)
                try:
                    result = await function(self, *args, **kwargs)
                except Exception as e:
                    _failure(self, e, start_time, operation_id)
                    raise
                _success(self, start_time, operation_id)
                return result

            return async_wrapper

        @wraps(function)
        def wrapper(self, *args, **kwargs):
            start_time, operation_id = _start(self, args, kwargs)
            try:
                result = function(self, *args, **kwargs)
            except Exception as e:
                _failure(self, e, start_time, operation_id)
                raise
            _success(self, start_time, operation_id)
            return result

        return wrapper

    return decorator


def _translate(error: SQLAlchemyError) -> DatabaseError:
    if isinstance(error, IntegrityError):
        return DatabaseError(f"Data integrity violation: {error.orig}")
    return SqlError(error)


def handle_db_errors(function: Callable) -> Callable:
    """
    Decorator translating SQLAlchemy exceptions into the store taxonomy.

    - IntegrityError -> DatabaseError
    - any other SQLAlchemyError -> SqlError
    - everything else propagates unchanged

    Args:
        function: Function or coroutine function to wrap

    Returns:
        Wrapped callable with error translation
    """
    if inspect.iscoroutinefunction(function):

        @wraps(function)
        async def async_wrapper(*args, **kwargs):
            try:
                return await function(*args, **kwargs)
            except SQLAlchemyError as e:
                raise _translate(e) from e

        return async_wrapper

    @wraps(function)
    def wrapper(*args, **kwargs):
        try:
            return function(*args, **kwargs)
        except SQLAlchemyError as e:
            raise _translate(e) from e

    return wrapper
