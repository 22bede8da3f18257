"""Structlog-based logging configuration with a stdlib bridge.

Provides:
- configure_logging(): one-shot structlog + stdlib setup
- get_logger(): returns a lazily bound structlog logger

Everything is written to stderr: stdout carries the MCP stdio protocol.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from gitingest_mcp.infrastructure.observability.redaction_service import redaction_processor

_CONFIGURED = False


def configure_logging(level: str = "INFO", log_format: str = "console") -> None:
    """One-shot structlog + stdlib bridge configuration.

    Safe to call multiple times; only the first invocation takes effect.
    Renderer is selected by ``log_format`` (json|console).
    """
    global _CONFIGURED  # noqa: PLW0603
    if _CONFIGURED:
        return
    _CONFIGURED = True

    renderer = _select_renderer(log_format)
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        redaction_processor,
    ]
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    # Stdlib bridge: route httpx/mcp logging through the same pipeline
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *shared_processors,
            renderer,
        ],
    )
    root = logging.getLogger()
    root.handlers.clear()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    root.addHandler(handler)
    root.setLevel(numeric_level)


def get_logger(component: str) -> Any:
    """Return a lazy structlog logger pre-bound with context_component.

    Nothing is resolved until the first log call, so module-level loggers
    pick up the configuration applied later by configure_logging().
    """
    return structlog.get_logger(context_component=component)


def _select_renderer(log_format: str) -> Any:
    if log_format.lower() == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)
