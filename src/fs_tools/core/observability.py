"""Observability setup for fs-tools."""

import logging
from typing import Any

import structlog
from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

from .config import Settings, settings

LOGGER_NAME = "fs_tools"

_SHARED_PROCESSORS = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
]


def setup_tracing(config: Settings = settings) -> None:
    """Install a console-exporting tracer provider when tracing is enabled.

    With tracing disabled the global no-op provider stays in place, so spans
    opened by the filesystem operations cost nothing.
    """
    if not config.otel_enabled:
        return

    resource = Resource.create({"service.name": config.otel_service_name})
    provider = TracerProvider(resource=resource)
    provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(provider)


def setup_logging(config: Settings = settings) -> None:
    """Set up structured logging with structlog.

    Only the ``fs_tools`` logger is touched: its level comes from settings
    and a ``NullHandler`` keeps the library silent until the application
    configures handlers of its own.
    """
    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(getattr(logging, config.log_level.upper()))
    if not any(isinstance(h, logging.NullHandler) for h in package_logger.handlers):
        package_logger.addHandler(logging.NullHandler())

    if config.log_format == "console":
        renderer: Any = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[*_SHARED_PROCESSORS, renderer],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> Any:
    """Get a logger instance."""
    return structlog.get_logger(name)


def get_tracer(name: str) -> trace.Tracer:
    """Get a tracer for wrapping filesystem operations in spans."""
    return trace.get_tracer(name)


# Initialize on import
setup_logging()
setup_tracing()
