"""Parsing errors — raw input that cannot become a number."""

from __future__ import annotations

from typing import Any

from globalphone.errors.base import GlobalPhoneError


class ParseError(GlobalPhoneError):
    """A raw string could not be turned into a :class:`Number`."""

    default_code = "parse_error"


class NotPossibleError(ParseError):
    """The normalized, prefix-stripped string fails a territory's possible pattern.

    ``candidate`` keeps the rejected string for callers; it is left out of
    ``to_dict`` so it never reaches logs unmasked.
    """

    default_code = "not_possible"

    def __init__(self, territory: str, candidate: str = "", **kwargs: Any) -> None:
        super().__init__(f"not possible for {territory}", territory=territory, **kwargs)
        self.candidate = candidate


class UnknownTerritoryError(GlobalPhoneError):
    """The database holds no territory with the requested name."""

    default_code = "unknown_territory"

    def __init__(self, territory: str, **kwargs: Any) -> None:
        super().__init__(f"unknown territory {territory!r}", territory=territory, **kwargs)


class NoDatabaseError(GlobalPhoneError):
    """A context was used before any territory data was configured."""

    default_code = "no_database"

    def __init__(self, message: str = "set db_path or pass a Database before parsing", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


__all__ = ["NoDatabaseError", "NotPossibleError", "ParseError", "UnknownTerritoryError"]
