from __future__ import annotations

import logging

import structlog


def setup_logging(level: str = "INFO", fmt: str = "structured") -> structlog.stdlib.BoundLogger:
    """Configure structlog; ``structured`` renders JSON lines, anything else the console renderer."""
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        raise ValueError(f"Unknown log level: {level}")

    renderer = (
        structlog.processors.JSONRenderer()
        if fmt == "structured"
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        cache_logger_on_first_use=False,
    )
    return structlog.get_logger("n2k_decoder")
