"""
Call Tracing
============

Entry/exit hooks around public filesystem operations.

Tracing is injected rather than inherited: any object with a ``tracer``
attribute can decorate its methods with :func:`traced`. When the attribute
is ``None`` the wrapped call runs untouched.

Usage:
    from filecorr.core.tracing import LoggingTracer

    fs = Filesystem(tracer=LoggingTracer())
    fs.list_files("/data")   # logs "-> list_files" and "<- list_files"
"""

import functools
import logging
from typing import Any, Callable, Dict, Optional, Protocol, Tuple, TypeVar, Union

from filecorr.core.logger import get_logger, resolve_level

F = TypeVar("F", bound=Callable[..., Any])

logger = logging.getLogger(__name__)


class Tracer(Protocol):
    """Observer notified at the boundary of every traced call."""

    def on_enter(self, operation: str, args: Tuple[Any, ...], kwargs: Dict[str, Any]) -> None:
        """Called before the operation runs."""
        ...

    def on_exit(
        self, operation: str, result: Any, error: Optional[BaseException] = None
    ) -> None:
        """Called after the operation returns or raises."""
        ...


class LoggingTracer:
    """Tracer that writes entry and exit events to a logger."""

    def __init__(
        self,
        level: Union[int, str] = logging.DEBUG,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.level = resolve_level(level)
        self.logger = logger or get_logger("filecorr.trace")

    def on_enter(self, operation: str, args: Tuple[Any, ...], kwargs: Dict[str, Any]) -> None:
        rendered = ", ".join([repr(a) for a in args] + [f"{k}={v!r}" for k, v in kwargs.items()])
        self.logger.log(self.level, f"-> {operation}({rendered})")

    def on_exit(
        self, operation: str, result: Any, error: Optional[BaseException] = None
    ) -> None:
        if error is not None:
            self.logger.log(self.level, f"<- {operation} raised {type(error).__name__}: {error}")
        else:
            self.logger.log(self.level, f"<- {operation} = {result!r}")


def _notify(hook: Callable[..., None], *args: Any) -> None:
    try:
        hook(*args)
    except Exception as e:
        # A broken tracer must not change what the operation returns
        logger.warning(f"Tracer hook {getattr(hook, '__name__', hook)} failed: {e}")


def traced(func: F) -> F:
    """
    Wrap a method so the owner's ``tracer`` sees its entry and exit.

    The decorated method's return value and exceptions pass through
    unchanged.
    """

    @functools.wraps(func)
    def wrapper(self, *args, **kwargs):
        tracer = getattr(self, "tracer", None)
        if tracer is None:
            return func(self, *args, **kwargs)

        operation = func.__name__
        _notify(tracer.on_enter, operation, args, kwargs)
        try:
            result = func(self, *args, **kwargs)
        except Exception as e:
            _notify(tracer.on_exit, operation, None, e)
            raise
        _notify(tracer.on_exit, operation, result, None)
        return result

    return wrapper  # type: ignore[return-value]
