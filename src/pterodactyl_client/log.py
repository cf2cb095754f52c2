"""Opt-in structlog setup for scripts and services using the client.

The library itself only calls ``structlog.get_logger`` and never changes the
global configuration. Applications that have no logging setup of their own
can call :func:`configure_logging` once at startup.
"""

import logging

import structlog

RENDERERS = ("logfmt", "json")


def configure_logging(log_level_name: str = "INFO", renderer: str = "logfmt") -> None:
    """Configure structlog to print client events to stdout.

    Args:
        log_level_name: Minimum level name (e.g., "DEBUG" to see every request).
        renderer: "logfmt" for key=value lines or "json" for one JSON object
            per line.

    Raises:
        ValueError: If renderer is not one of :data:`RENDERERS`.
    """
    if renderer not in RENDERERS:
        msg = f"renderer must be one of {RENDERERS}, got {renderer!r}"
        raise ValueError(msg)

    log_level = getattr(logging, log_level_name.upper(), logging.INFO)
    if renderer == "json":
        final_processor = structlog.processors.JSONRenderer()
    else:
        final_processor = structlog.processors.LogfmtRenderer(
            key_order=("timestamp", "level", "msg", "method", "path"),
        )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.EventRenamer("msg"),
            structlog.processors.format_exc_info,
            final_processor,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(),
    )
