"""Observability helpers for Lane Diff.

This module configures structured logging and provides the debug_wrapper
decorator used to trace the scoring entry points.
"""

import functools
import json
import logging
import sys
import time
import traceback
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any, TypeVar, cast

import structlog
from pydantic import BaseModel, ConfigDict, Field
from structlog.contextvars import bind_contextvars, unbind_contextvars

# Configure structured logging
structlog.configure(
    processors=[
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            ],
        ),
        structlog.processors.dict_tracebacks,
        structlog.dev.ConsoleRenderer() if sys.stderr.isatty() else structlog.processors.JSONRenderer(),  # type: ignore[list-item]
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

# Get logger instance
logger = structlog.get_logger()

# Type variable for generic decorator
F = TypeVar("F", bound=Callable[..., Any])


def configure_logging(level: str = "INFO") -> None:
    """Route stdlib logging (used by the scoring core) through a plain handler.

    structlog renders its own events; records emitted with ``logging.getLogger``
    keep their message format but share the level threshold.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(message)s",
        stream=sys.stderr,
        force=True,
    )


class FunctionTrace(BaseModel):
    """Model for function execution trace data."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    function_name: str = Field(description="Fully qualified function name")
    module: str = Field(description="Module where function is defined")
    execution_id: str = Field(description="Unique execution ID")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    duration_ms: float | None = Field(default=None, description="Execution duration in milliseconds")

    # Input/Output
    args: list[Any] = Field(default_factory=list, description="Positional arguments")
    kwargs: dict[str, Any] = Field(default_factory=dict, description="Keyword arguments")
    result: Any | None = Field(default=None, description="Function return value")

    # Error handling
    is_success: bool = Field(default=True, description="Whether execution succeeded")
    error_type: str | None = Field(default=None, description="Exception class name if failed")
    error_message: str | None = Field(default=None, description="Exception message if failed")
    error_traceback: str | None = Field(default=None, description="Full traceback if failed")


def _serialize_value(value: Any, max_length: int = 1000) -> Any:
    """Safely serialize a value for logging.

    Args:
        value: Value to serialize
        max_length: Maximum string length for truncation

    Returns:
        Serializable representation of the value
    """
    try:
        # Handle Pydantic models
        if isinstance(value, BaseModel):
            value = value.model_dump(mode="json", by_alias=True)

        json_str = json.dumps(value, default=str)
        if len(json_str) > max_length:
            return json_str[:max_length] + "..."
        return json.loads(json_str)  # Parse back to keep consistent types

    except (TypeError, ValueError):
        # Fallback to string representation
        str_repr = str(value)
        if len(str_repr) > max_length:
            return str_repr[:max_length] + "..."
        return str_repr


def debug_wrapper(
    *,
    capture_result: bool = True,
    capture_args: bool = True,
    max_arg_length: int = 1000,
    log_level: str = "INFO",
) -> Callable[[F], F]:
    """Decorator for function tracing and debugging.

    Logs entry (optionally with arguments), exit with duration (optionally with
    the return value) and any exception with its traceback before re-raising it.

    Args:
        capture_result: Whether to capture and log the return value
        capture_args: Whether to capture and log input arguments
        max_arg_length: Maximum length for serialized arguments
        log_level: Log level for successful executions

    Example:
        >>> @debug_wrapper(capture_result=False)
        ... def score_match(timeline: dict) -> dict:
        ...     return {"chartData": []}
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            execution_id = f"{func.__module__}.{func.__name__}_{int(time.time() * 1000000)}"

            trace = FunctionTrace(
                function_name=f"{func.__module__}.{func.__name__}",
                module=func.__module__,
                execution_id=execution_id,
            )

            if capture_args:
                trace.args = [_serialize_value(arg, max_arg_length) for arg in args]
                trace.kwargs = {k: _serialize_value(v, max_arg_length) for k, v in kwargs.items()}

            # Bind context variables for correlation
            bind_contextvars(execution_id=execution_id)

            logger.log(
                getattr(logging, log_level.upper(), logging.INFO),
                f"Executing function: {trace.function_name}",
                execution_id=execution_id,
                args=trace.args if capture_args else None,
                kwargs=trace.kwargs if capture_args else None,
            )

            start_time = time.perf_counter()

            try:
                result = func(*args, **kwargs)

                trace.duration_ms = (time.perf_counter() - start_time) * 1000
                trace.is_success = True

                if capture_result:
                    trace.result = _serialize_value(result, max_arg_length)

                logger.log(
                    getattr(logging, log_level.upper(), logging.INFO),
                    f"Successfully executed: {trace.function_name}",
                    execution_id=execution_id,
                    duration_ms=trace.duration_ms,
                    result=trace.result if capture_result else None,
                )

                return result

            except Exception as e:
                trace.duration_ms = (time.perf_counter() - start_time) * 1000
                trace.is_success = False
                trace.error_type = type(e).__name__
                trace.error_message = str(e)
                trace.error_traceback = traceback.format_exc()

                logger.error(
                    f"Error in function: {trace.function_name}",
                    execution_id=execution_id,
                    duration_ms=trace.duration_ms,
                    error_type=trace.error_type,
                    error_message=trace.error_message,
                    traceback=trace.error_traceback,
                    args=trace.args if capture_args else None,
                    kwargs=trace.kwargs if capture_args else None,
                )

                raise

            finally:
                unbind_contextvars("execution_id")

        return cast(F, wrapper)

    return decorator


# Convenience decorator for the scoring entry points
def trace_performance(func: F) -> F:
    """Decorator focused on performance monitoring."""
    return debug_wrapper(
        capture_result=False,
        capture_args=False,
        log_level="DEBUG",
    )(func)
