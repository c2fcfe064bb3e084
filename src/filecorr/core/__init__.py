"""Logging and tracing infrastructure."""

from filecorr.core.logger import get_logger, set_level
from filecorr.core.tracing import LoggingTracer, Tracer, traced

__all__ = [
    "get_logger",
    "set_level",
    "Tracer",
    "LoggingTracer",
    "traced",
]
