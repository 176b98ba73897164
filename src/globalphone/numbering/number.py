"""Number value object: validity and formatted representations."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

from globalphone.numbering.format import Format, FormatContext, find_format
from globalphone.numbering.normalization import NON_DIGITS, dialable, split_first_group
from globalphone.numbering.validity import is_valid_national_string, matching_labels

if TYPE_CHECKING:
    from globalphone.numbering.region import Region
    from globalphone.numbering.territory import Territory

T = TypeVar("T")


@dataclasses.dataclass(frozen=True, eq=False)
class Number:
    """A national string bound to the territory it was parsed for.

    ``national_string`` never carries a national prefix. Derived values are
    computed on first access and cached; concurrent first accesses may
    compute twice but always store and return the first result.
    """

    territory: Territory
    national_string: str
    _cache: dict[str, Any] = dataclasses.field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def _cached(self, key: str, compute: Callable[[], T]) -> T:
        try:
            return self._cache[key]  # type: ignore[no-any-return]
        except KeyError:
            return self._cache.setdefault(key, compute())  # type: ignore[no-any-return]

    # ------------------------------------------------------------------
    # Territory pass-throughs
    # ------------------------------------------------------------------

    @property
    def region(self) -> Region:
        return self.territory.region

    @property
    def country_code(self) -> str:
        return self.territory.country_code

    @property
    def national_prefix(self) -> str | None:
        return self.territory.national_prefix

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def format(self) -> Format | None:
        return self._cached(
            "format", lambda: find_format(self.territory.formats, self.national_string)
        )

    @property
    def is_valid(self) -> bool:
        return is_valid_national_string(self.territory, self.national_string, self.format)

    @property
    def types(self) -> tuple[str, ...]:
        """Labels of the territory's valid formats this number matches."""
        return matching_labels(self.territory, self.national_string)

    @property
    def national_format(self) -> str:
        return self._cached("national_format", self._compute_national_format)

    @property
    def international_format(self) -> str:
        return self._cached("international_format", self._compute_international_format)

    @property
    def international_string(self) -> str:
        return self._cached(
            "international_string", lambda: dialable(self.international_format)
        )

    @property
    def area_code(self) -> str | None:
        return self._cached("area_code", self._compute_area_code)

    @property
    def local_number(self) -> str:
        if self.area_code is None:
            return self.national_format
        split = self._split_formatted_national()
        return split[1] if split else self.national_format

    # ------------------------------------------------------------------
    # Computation
    # ------------------------------------------------------------------

    @property
    def _formatting_rule(self) -> str | None:
        fmt = self.format
        if fmt is None:
            return None
        if fmt.national_prefix_formatting_rule is not None:
            return fmt.national_prefix_formatting_rule
        return self.territory.formatting_rule

    def _rewrite_prefix(self, rule: str, first_group: str) -> str:
        return rule.replace("$NP", self.national_prefix or "").replace("$FG", first_group)

    def _compute_national_format(self) -> str:
        fmt = self.format
        if fmt is not None:
            result = fmt.apply(self.national_string, FormatContext.NATIONAL)
            if result is not None:
                return self._apply_national_prefix_format(result)
        return self.national_string

    def _apply_national_prefix_format(self, result: str) -> str:
        rule = self._formatting_rule
        split = split_first_group(result)
        if rule and split is not None:
            first_group, rest = split
            return f"{self._rewrite_prefix(rule, first_group)} {rest}"
        return result

    def _compute_international_format(self) -> str:
        fmt = self.format
        formatted = None
        if fmt is not None:
            formatted = fmt.apply(self.national_string, FormatContext.INTERNATIONAL)
        return f"+{self.country_code} {formatted or self.national_string}"

    def _split_formatted_national(self) -> tuple[str, str] | None:
        fmt = self.format
        if fmt is None:
            return None
        formatted = fmt.apply(self.national_string, FormatContext.NATIONAL)
        return split_first_group(formatted) if formatted is not None else None

    def _compute_area_code(self) -> str | None:
        fmt = self.format
        if fmt is None:
            return None
        rule = self._formatting_rule
        if rule is not None:
            split = self._split_formatted_national()
            if split is None:
                return None
            return NON_DIGITS.sub("", self._rewrite_prefix(rule, split[0])) or None
        return fmt.first_in_pattern(self.national_string)

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return self.international_string

    def __repr__(self) -> str:
        return f"Number(territory={self.territory.name!r}, national_string={self.national_string!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return (self.territory, self.national_string) == (other.territory, other.national_string)

    def __hash__(self) -> int:
        return hash((self.territory, self.national_string))

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: Any,
    ) -> Any:
        from pydantic_core import core_schema

        def _validate(value: Any) -> Number:
            if isinstance(value, Number):
                return value
            if not isinstance(value, str):
                raise ValueError(f"cannot build a Number from {type(value).__name__}")
            from globalphone.context import default_context
            from globalphone.errors import ParseError

            try:
                return default_context().parse(value)
            except ParseError as exc:
                raise ValueError(exc.message) from exc

        return core_schema.no_info_plain_validator_function(
            _validate,
            serialization=core_schema.to_string_ser_schema(),
        )


__all__ = ["Number"]
