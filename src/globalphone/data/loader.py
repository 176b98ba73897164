"""Territory data loader.

Turns JSON-shaped records into frozen :class:`NumberingPlan`, :class:`Region`,
:class:`Territory` and :class:`Format` instances, validating everything up
front. Every record may be positional (a list) or keyed (an object):

* region    — ``[countryCode, formats, territories, internationalPrefix,
  nationalPrefix, nationalPrefixForParsing, nationalPrefixTransformRule,
  nationalPrefixFormattingRule]``
* territory — ``[name, possibleNumber, nationalNumber, formattingRule,
  possibleFormats]``
* format    — ``[pattern, format, leadingDigits, nationalPrefixFormattingRule,
  intlFormat]``
"""

from __future__ import annotations

import dataclasses
import re
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from globalphone.errors import DataLoadError
from globalphone.numbering import Format, Region, Territory
from globalphone.numbering.territory import ValidFormats

UNLABELED = "__"
NO_INTERNATIONAL_FORMAT = "NA"


def _field(
    record: Any,
    index: int,
    column: str,
    *,
    path: str,
    required: bool = False,
) -> Any:
    if isinstance(record, Mapping):
        value = record.get(column)
    elif isinstance(record, Sequence) and not isinstance(record, str):
        value = record[index] if index < len(record) else None
    else:
        raise DataLoadError(f"expected a list or an object, got {type(record).__name__}", path=path)
    if value is None and required:
        raise DataLoadError(f"missing required field {column!r}", path=path)
    return value


def _string(record: Any, index: int, column: str, *, path: str, required: bool = False) -> str | None:
    value = _field(record, index, column, path=path, required=required)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise DataLoadError(f"{column!r} must be a string, got {type(value).__name__}", path=path)
    return str(value)


def _compile(source: str, *, full: bool, column: str, path: str) -> re.Pattern[str]:
    anchored = f"^(?:{source})$" if full else f"^(?:{source})"
    try:
        return re.compile(anchored, re.ASCII)
    except re.error as exc:
        raise DataLoadError(f"{column!r} does not compile: {exc}", path=path, cause=exc) from exc


def _pattern(
    record: Any,
    index: int,
    column: str,
    *,
    full: bool,
    path: str,
    required: bool = False,
) -> re.Pattern[str] | None:
    source = _string(record, index, column, path=path, required=required)
    if source is None:
        return None
    return _compile(source, full=full, column=column, path=path)


def _list(record: Any, index: int, column: str, *, path: str) -> list[Any]:
    value = _field(record, index, column, path=path)
    if value is None:
        return []
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise DataLoadError(f"{column!r} must be a list", path=path)
    return list(value)


def load_format(record: Any, *, path: str = "format") -> Format:
    pattern = _pattern(record, 0, "pattern", full=True, path=path, required=True)
    leading = _field(record, 2, "leadingDigits", path=path)
    if isinstance(leading, Sequence) and not isinstance(leading, str):
        # the last entry is the most specific one
        leading = leading[-1] if leading else None
    if leading is not None and not isinstance(leading, str):
        raise DataLoadError("'leadingDigits' must be a string or a list of strings", path=path)
    international = _string(record, 4, "intlFormat", path=path)
    return Format(
        pattern=pattern,  # type: ignore[arg-type]
        national_rule=_string(record, 1, "format", path=path),
        leading_digits=(
            _compile(leading, full=False, column="leadingDigits", path=path)
            if leading is not None
            else None
        ),
        national_prefix_formatting_rule=_string(record, 3, "nationalPrefixFormattingRule", path=path),
        international_rule=None if international == NO_INTERNATIONAL_FORMAT else international,
        international_disabled=international == NO_INTERNATIONAL_FORMAT,
    )


def load_valid_formats(value: Any, *, path: str) -> ValidFormats | None:
    """Flatten unlabeled lists and labelled mappings into ordered (label, pattern) pairs."""
    if value is None:
        return None
    entries: list[tuple[str, re.Pattern[str]]] = []

    def _add(label: str, source: Any, where: str) -> None:
        if not isinstance(source, str):
            raise DataLoadError("valid format patterns must be strings", path=where)
        entries.append((label, _compile(source, full=True, column="possibleFormats", path=where)))

    def _walk(item: Any, where: str) -> None:
        if isinstance(item, str):
            _add(UNLABELED, item, where)
        elif isinstance(item, Mapping):
            for label, source in item.items():
                _add(str(label), source, f"{where}.{label}")
        elif isinstance(item, Sequence):
            for i, child in enumerate(item):
                _walk(child, f"{where}[{i}]")
        else:
            raise DataLoadError(f"unsupported valid format entry {type(item).__name__}", path=where)

    _walk(value, path)
    return tuple(entries)


@dataclasses.dataclass(frozen=True)
class NumberingPlan:
    """One region record: the :class:`Region` and the territories built against it."""

    region: Region
    territories: tuple[Territory, ...] = ()

    @property
    def country_code(self) -> str:
        return self.region.country_code


def load_territory(record: Any, region: Region, *, path: str = "territory") -> Territory:
    name = _string(record, 0, "name", path=path, required=True)
    path = f"{path}({name})"
    return Territory(
        name=name,  # type: ignore[arg-type]
        region=region,
        possible_pattern=_pattern(record, 1, "possibleNumber", full=True, path=path, required=True),  # type: ignore[arg-type]
        national_pattern=_pattern(record, 2, "nationalNumber", full=True, path=path, required=True),  # type: ignore[arg-type]
        national_prefix_formatting_rule=_string(record, 3, "formattingRule", path=path),
        valid_number_formats=load_valid_formats(
            _field(record, 4, "possibleFormats", path=path), path=f"{path}.possibleFormats"
        ),
    )


def load_region(record: Any, *, path: str = "region") -> Region:
    """Build the :class:`Region` of a region record, ignoring its territories."""
    country_code = _string(record, 0, "countryCode", path=path, required=True)
    if not country_code or not country_code.isdigit():
        raise DataLoadError(f"country code must be digits, got {country_code!r}", path=path)
    path = f"{path}(+{country_code})"
    return Region(
        country_code=country_code,
        formats=tuple(
            load_format(item, path=f"{path}.formats[{i}]")
            for i, item in enumerate(_list(record, 1, "formats", path=path))
        ),
        international_prefix=_pattern(record, 3, "internationalPrefix", full=False, path=path),
        national_prefix=_string(record, 4, "nationalPrefix", path=path),
        national_prefix_for_parsing=_pattern(record, 5, "nationalPrefixForParsing", full=False, path=path),
        national_prefix_transform_rule=_string(record, 6, "nationalPrefixTransformRule", path=path),
        national_prefix_formatting_rule=_string(record, 7, "nationalPrefixFormattingRule", path=path),
    )


def load_plan(record: Any, *, path: str = "region") -> NumberingPlan:
    region = load_region(record, path=path)
    path = f"{path}(+{region.country_code})"
    territories = tuple(
        load_territory(item, region, path=f"{path}.territories[{i}]")
        for i, item in enumerate(_list(record, 2, "territories", path=path))
    )
    return NumberingPlan(region, territories)


def load_plans(records: Iterable[Any]) -> list[NumberingPlan]:
    return [load_plan(record, path=f"regions[{i}]") for i, record in enumerate(records)]


__all__ = [
    "NO_INTERNATIONAL_FORMAT",
    "UNLABELED",
    "NumberingPlan",
    "load_format",
    "load_plan",
    "load_plans",
    "load_region",
    "load_territory",
    "load_valid_formats",
]
