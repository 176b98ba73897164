"""Format rules and two-pass format selection."""

from __future__ import annotations

import dataclasses
import enum
import re
from collections.abc import Sequence

from globalphone.numbering.normalization import expand_template


class FormatContext(str, enum.Enum):
    """Which presentation a format template is applied for."""

    NATIONAL = "national"
    INTERNATIONAL = "international"


@dataclasses.dataclass(frozen=True)
class Format:
    """A (match pattern, display template) rule.

    ``pattern`` is anchored at both ends; ``leading_digits`` only at the
    start. ``international_rule`` of ``None`` reuses ``national_rule``
    unless ``international_disabled`` is set, in which case the format has
    no international form at all.
    """

    pattern: re.Pattern[str]
    national_rule: str | None
    leading_digits: re.Pattern[str] | None = None
    national_prefix_formatting_rule: str | None = None
    international_rule: str | None = None
    international_disabled: bool = False

    def match(self, national_string: str, match_leading_digits: bool = True) -> bool:
        if (
            match_leading_digits
            and self.leading_digits is not None
            and self.leading_digits.match(national_string) is None
        ):
            return False
        return self.pattern.match(national_string) is not None

    def rule_for(self, context: FormatContext) -> str | None:
        if context is FormatContext.INTERNATIONAL:
            if self.international_disabled:
                return None
            return self.international_rule or self.national_rule
        return self.national_rule

    def apply(self, national_string: str, context: FormatContext) -> str | None:
        """Render *national_string* with the template for *context*.

        Returns ``None`` when the format has no template for that context.
        A string the pattern does not match is returned unchanged.
        """
        rule = self.rule_for(context)
        if rule is None:
            return None
        match = self.pattern.match(national_string)
        if match is None:
            return national_string
        return expand_template(rule, match)

    def first_in_pattern(self, national_string: str) -> str | None:
        """Return the first capture group of the pattern, if it captured anything."""
        match = self.pattern.match(national_string)
        if match is None or not self.pattern.groups:
            return None
        return match.group(1) or None


def find_format(formats: Sequence[Format], national_string: str) -> Format | None:
    """Pick the first format honouring leading digits, else the first loose match.

    Declaration order decides between several matching formats.
    """
    for fmt in formats:
        if fmt.match(national_string):
            return fmt
    for fmt in formats:
        if fmt.match(national_string, match_leading_digits=False):
            return fmt
    return None


__all__ = ["Format", "FormatContext", "find_format"]
