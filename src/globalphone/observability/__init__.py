"""Observability – structured logging helpers."""
from globalphone.observability.factory import configure_logging
from globalphone.observability.processors import (
    DEFAULT_NUMBER_FIELDS,
    PhoneNumberMaskingProcessor,
    get_logger,
    mask_digits,
)

__all__ = [
    "DEFAULT_NUMBER_FIELDS",
    "PhoneNumberMaskingProcessor",
    "configure_logging",
    "get_logger",
    "mask_digits",
]
