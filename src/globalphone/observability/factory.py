"""Observability – configure_logging."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from globalphone.observability.processors import PhoneNumberMaskingProcessor


def configure_logging(
    level: int | str = logging.INFO,
    *,
    json: bool = True,
    mask_numbers: bool = True,
) -> None:
    """Configure structlog on top of stdlib logging.

    Phone-bearing fields are masked before rendering unless *mask_numbers*
    is ``False``.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if mask_numbers:
        shared_processors.insert(0, PhoneNumberMaskingProcessor())

    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    renderer: Any = structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer()
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


__all__ = ["configure_logging"]
