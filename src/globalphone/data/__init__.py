"""Territory data: record loading and the region/territory database."""

from globalphone.data.database import Database
from globalphone.data.loader import (
    NumberingPlan,
    load_format,
    load_plan,
    load_plans,
    load_region,
    load_territory,
    load_valid_formats,
)

__all__ = [
    "Database",
    "NumberingPlan",
    "load_format",
    "load_plan",
    "load_plans",
    "load_region",
    "load_territory",
    "load_valid_formats",
]
