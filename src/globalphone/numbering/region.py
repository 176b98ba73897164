"""Country-level numbering plan."""

from __future__ import annotations

import dataclasses
import re

from globalphone.numbering.format import Format


@dataclasses.dataclass(frozen=True, eq=False)
class Region:
    """Numbering-plan attributes shared by every territory of one country code.

    ``international_prefix`` and ``national_prefix_for_parsing`` are
    anchored at the start of the string. Without a parsing pattern the
    literal ``national_prefix`` is stripped instead.

    A region does not know its territories; each :class:`Territory` points
    at its region and the loader pairs them up in a ``NumberingPlan``.
    """

    country_code: str
    international_prefix: re.Pattern[str] | None = None
    national_prefix: str | None = None
    national_prefix_for_parsing: re.Pattern[str] | None = None
    national_prefix_transform_rule: str | None = None
    national_prefix_formatting_rule: str | None = None
    formats: tuple[Format, ...] = ()

    def strip_country_code(self, string: str) -> str:
        """Remove a leading ``+<country code>`` belonging to this region."""
        prefix = "+" + self.country_code
        if string.startswith(prefix):
            return string[len(prefix):]
        return string

    def __repr__(self) -> str:
        return f"Region(country_code={self.country_code!r})"


__all__ = ["Region"]
