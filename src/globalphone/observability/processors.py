"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

import re
from typing import Any

import structlog

_DIGIT = re.compile(r"\d")

DEFAULT_NUMBER_FIELDS: frozenset[str] = frozenset({
    "raw",
    "number",
    "candidate",
    "national_string",
    "stripped",
    "international_string",
})


def mask_digits(value: str, keep: int = 2) -> str:
    """Replace every digit but the last *keep* with ``*``."""
    total = len(_DIGIT.findall(value))
    seen = 0

    def _mask(match: re.Match[str]) -> str:
        nonlocal seen
        seen += 1
        return match.group(0) if seen > total - keep else "*"

    return _DIGIT.sub(_mask, value)


class PhoneNumberMaskingProcessor:
    """structlog processor that masks phone numbers carried in event fields.

    Only string values under the configured keys are touched; everything
    else passes through unchanged.

    Usage::

        import structlog
        from globalphone.observability.processors import PhoneNumberMaskingProcessor

        structlog.configure(processors=[PhoneNumberMaskingProcessor(), ...])
    """

    def __init__(self, fields: frozenset[str] | None = None, keep: int = 2) -> None:
        self._fields = fields or DEFAULT_NUMBER_FIELDS
        self._keep = keep

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        for key, value in event_dict.items():
            if key in self._fields and isinstance(value, str):
                event_dict[key] = mask_digits(value, self._keep)
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["DEFAULT_NUMBER_FIELDS", "PhoneNumberMaskingProcessor", "get_logger", "mask_digits"]
