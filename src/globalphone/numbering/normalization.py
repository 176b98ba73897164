"""Dialable-character normalization and backreference templates."""

from __future__ import annotations

import re
from typing import Final

FULL_WIDTH_PLUS: Final = "＋"
LEADING_PLUS_CHARS: Final = re.compile(r"^\++")
NON_DIALABLE_CHARS: Final = re.compile(r"[^,#+*0-9]")
NON_DIGITS: Final = re.compile(r"[^0-9]")
SPLIT_FIRST_GROUP: Final = re.compile(r"^(\d+)\W*(.*)$", re.ASCII)

_BACKREFERENCE: Final = re.compile(r"\$(\d)")


def normalize(raw: str | None) -> str:
    """Reduce *raw* to its dialable characters (digits, ``+``, ``#``, ``*`` and ``,``).

    Full-width pluses count as ``+``. Noise is dropped before the leading
    run of pluses collapses to one, so ``" ++44"`` and ``"+-+44"`` both give
    ``"+44"`` and a second call changes nothing. ``None`` is treated as the
    empty string.
    """
    value = NON_DIALABLE_CHARS.sub("", (raw or "").replace(FULL_WIDTH_PLUS, "+"))
    return LEADING_PLUS_CHARS.sub("+", value)


def dialable(value: str) -> str:
    """Drop every non-dialable character without touching leading pluses."""
    return NON_DIALABLE_CHARS.sub("", value)


def expand_template(template: str, match: re.Match[str]) -> str:
    """Substitute ``$1``..``$9`` in *template* with the groups of *match*.

    Groups that did not participate, or that the pattern does not define,
    expand to the empty string.
    """

    def _group(ref: re.Match[str]) -> str:
        index = int(ref.group(1))
        if index > match.re.groups:
            return ""
        return match.group(index) or ""

    return _BACKREFERENCE.sub(_group, template)


def split_first_group(formatted: str) -> tuple[str, str] | None:
    """Split a formatted national string into its leading digit run and the rest."""
    match = SPLIT_FIRST_GROUP.match(formatted)
    if match is None:
        return None
    return match.group(1), match.group(2)


__all__ = [
    "LEADING_PLUS_CHARS",
    "NON_DIALABLE_CHARS",
    "NON_DIGITS",
    "SPLIT_FIRST_GROUP",
    "dialable",
    "expand_template",
    "normalize",
    "split_first_group",
]
