"""Database of regions and territories, and parsing across them."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from globalphone.data.loader import NumberingPlan, load_plans
from globalphone.errors import DataLoadError, NotPossibleError, UnknownTerritoryError
from globalphone.numbering import Number, Region, Territory, normalize
from globalphone.observability import get_logger

logger = get_logger(__name__)


class Database:
    """Read-only lookup of regions by country code and territories by name.

    Territory names are matched case-insensitively.
    """

    def __init__(self, plans: Iterable[NumberingPlan]) -> None:
        self._regions: dict[str, Region] = {}
        self._territories: dict[str, Territory] = {}
        self._members: dict[str, tuple[Territory, ...]] = {}
        for plan in plans:
            if plan.country_code in self._regions:
                raise DataLoadError(f"duplicate region +{plan.country_code}")
            self._regions[plan.country_code] = plan.region
            self._members[plan.country_code] = plan.territories
            for territory in plan.territories:
                key = territory.name.upper()
                if key in self._territories:
                    raise DataLoadError(f"duplicate territory {territory.name!r}")
                self._territories[key] = territory

    @classmethod
    def load(cls, records: Any) -> Database:
        """Build a database from decoded JSON (a list of regions or ``{"regions": [...]}``)."""
        if isinstance(records, Mapping):
            records = records.get("regions")
        if not isinstance(records, list):
            raise DataLoadError("expected a list of region records")
        db = cls(load_plans(records))
        logger.info(
            "database_loaded",
            regions=len(db._regions),
            territories=len(db._territories),
        )
        return db

    @classmethod
    def load_file(cls, path: str | Path) -> Database:
        path = Path(path)
        try:
            with path.open(encoding="utf-8") as fh:
                records = json.load(fh)
        except (OSError, ValueError) as exc:
            raise DataLoadError(f"cannot read territory data: {exc}", path=str(path), cause=exc) from exc
        return cls.load(records)

    @property
    def regions(self) -> tuple[Region, ...]:
        return tuple(self._regions.values())

    @property
    def territories(self) -> tuple[Territory, ...]:
        return tuple(self._territories.values())

    def region(self, country_code: str) -> Region | None:
        return self._regions.get(str(country_code))

    def territories_in(self, country_code: str) -> tuple[Territory, ...]:
        """Territories sharing *country_code*, in data order."""
        return self._members.get(str(country_code), ())

    def territory(self, name: str) -> Territory:
        try:
            return self._territories[name.upper()]
        except KeyError:
            raise UnknownTerritoryError(name) from None

    def region_for_string(self, string: str) -> Region | None:
        """Find the region whose country code begins *string* (no leading ``+``)."""
        for length in (1, 2, 3):
            region = self._regions.get(string[:length])
            if region is not None:
                return region
        return None

    def parse(self, raw: str | None, territory_name: str) -> Number:
        """Parse *raw* as dialed from within *territory_name*.

        Strings starting with ``+`` or with the territory's international
        call prefix are routed to the region named by their country code.
        """
        territory = self.territory(territory_name)
        string = normalize(raw)
        if string.startswith("+"):
            return self.parse_international_string(string)
        prefix = territory.region.international_prefix
        if prefix is not None:
            match = prefix.match(string)
            if match is not None and match.end() > 0:
                return self.parse_international_string(string[match.end():])
        return territory.parse_national_string(string)

    def parse_international_string(self, string: str) -> Number:
        string = normalize(string).lstrip("+")
        region = self.region_for_string(string)
        if region is None:
            logger.debug("unknown_country_code", candidate=string)
            raise NotPossibleError("international", string)
        return self.parse_in_region(region, string[len(region.country_code):])

    def parse_in_region(self, region: Region, string: str) -> Number:
        """Parse a country-code-stripped string against each territory of *region*.

        The first valid number wins; failing that, the first merely
        possible one.
        """
        fallback: Number | None = None
        for territory in self.territories_in(region.country_code):
            try:
                number = territory.parse_national_string(string)
            except NotPossibleError:
                continue
            if number.is_valid:
                return number
            if fallback is None:
                fallback = number
        if fallback is not None:
            return fallback
        logger.debug("region_parse_rejected", country_code=region.country_code, candidate=string)
        raise NotPossibleError(f"+{region.country_code}", string)

    def __repr__(self) -> str:
        return f"Database(regions={len(self._regions)}, territories={len(self._territories)})"


__all__ = ["Database"]
