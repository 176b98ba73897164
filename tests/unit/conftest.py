"""Shared territory data for the unit tests.

Patterns are schematic, not the real numbering plans.
"""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any

import pytest

from globalphone.context import reset_default_context
from globalphone.data import Database
from globalphone.numbering import Territory

NANP_REGION: dict[str, Any] = {
    "countryCode": "1",
    "internationalPrefix": "011",
    "nationalPrefix": "1",
    "formats": [
        {"pattern": r"(\d{3})(\d{4})", "format": "$1-$2", "intlFormat": "NA"},
        {"pattern": r"(\d{3})(\d{3})(\d{4})", "format": "$1-$2-$3"},
    ],
    "territories": [
        {"name": "US", "possibleNumber": r"\d{7,10}", "nationalNumber": r"\d{10}"},
    ],
}

GB_REGION: dict[str, Any] = {
    "countryCode": "44",
    "internationalPrefix": "00",
    "nationalPrefix": "0",
    "nationalPrefixFormattingRule": "$NP$FG",
    "formats": [
        {"pattern": r"(\d{2})(\d{4})(\d{4})", "format": "$1 $2 $3", "leadingDigits": ["2", "2[0-9]"]},
        {
            "pattern": r"(\d{4})(\d{6})",
            "format": "$1 $2",
            "leadingDigits": "7",
            "nationalPrefixFormattingRule": "$NP$FG",
        },
        {"pattern": r"(\d{3})(\d{3})(\d{4})", "format": "$1 $2 $3"},
    ],
    "territories": [
        {
            "name": "GB",
            "possibleNumber": r"\d{7,10}",
            "nationalNumber": r"[1-9]\d{9}",
            "possibleFormats": [{"fixedLine": r"[12]\d{9}"}, {"mobile": r"7\d{9}"}],
        },
    ],
}

# Positional record shape; mobile numbers carry a "15" carrier code after
# the area code, rewritten to a leading 9.
AR_REGION: list[Any] = [
    "54",
    [
        [r"9(\d{2})(\d{4})(\d{4})", "$1 15-$2-$3", None, "$NP$FG", "9 $1 $2-$3"],
        [r"(\d{2})(\d{4})(\d{4})", "$1 $2-$3"],
    ],
    [
        ["AR", r"\d{10,11}", r"9\d{10}|[1-8]\d{9}", "$NP$FG", [r"9\d{10}", r"[1-8]\d{9}"]],
    ],
    "00",
    "0",
    r"0?(?:(11|2\d{2})?15)?",
    "9$1",
]

ZZ_REGION: dict[str, Any] = {
    "countryCode": "888",
    "formats": [{"pattern": r"(\d{4})(\d{4})", "format": "$1 $2"}],
    "territories": [
        {
            "name": "ZZ",
            "possibleNumber": r"\d{6,8}",
            "nationalNumber": r"\d{8}",
            "possibleFormats": [],
        },
    ],
}


@pytest.fixture
def records() -> list[Any]:
    return copy.deepcopy([NANP_REGION, GB_REGION, AR_REGION, ZZ_REGION])


@pytest.fixture
def db(records: list[Any]) -> Database:
    return Database.load(records)


@pytest.fixture
def db_file(tmp_path: Path, records: list[Any]) -> Path:
    path = tmp_path / "global_phone.json"
    path.write_text(json.dumps(records), encoding="utf-8")
    return path


@pytest.fixture
def us(db: Database) -> Territory:
    return db.territory("US")


@pytest.fixture
def gb(db: Database) -> Territory:
    return db.territory("GB")


@pytest.fixture
def ar(db: Database) -> Territory:
    return db.territory("AR")


@pytest.fixture
def zz(db: Database) -> Territory:
    return db.territory("ZZ")


@pytest.fixture(autouse=True)
def _fresh_default_context():
    reset_default_context()
    yield
    reset_default_context()
