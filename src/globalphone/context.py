"""Context – the top-level parse / validate / normalize API."""

from __future__ import annotations

import threading
from pathlib import Path

from globalphone.config import EnvSettingsLoader, GlobalPhoneSettings
from globalphone.data import Database
from globalphone.errors import NoDatabaseError, ParseError
from globalphone.numbering import Number, normalize
from globalphone.observability import configure_logging, get_logger

logger = get_logger(__name__)


class Context:
    """Holds a database and a default territory for parsing calls.

    The database is read from ``db_path`` on first use unless one is
    passed in directly.

    Example::

        ctx = Context(db_path="global_phone.json", default_territory_name="GB")
        number = ctx.parse("020 7946 0000")
        number.international_format   # "+44 20 7946 0000"
    """

    def __init__(
        self,
        db: Database | None = None,
        *,
        db_path: str | Path | None = None,
        default_territory_name: str = "US",
    ) -> None:
        self._db = db
        self.db_path = db_path
        self.default_territory_name = default_territory_name
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: GlobalPhoneSettings, *, configure_logs: bool = False) -> Context:
        if configure_logs:
            configure_logging(settings.log_level)
        return cls(
            db_path=settings.db_path or None,
            default_territory_name=settings.default_territory_name,
        )

    @property
    def db(self) -> Database:
        if self._db is None:
            with self._lock:
                if self._db is None:
                    if not self.db_path:
                        raise NoDatabaseError()
                    self._db = Database.load_file(self.db_path)
        return self._db

    def parse(self, raw: str | None, territory_name: str | None = None) -> Number:
        return self.db.parse(raw, territory_name or self.default_territory_name)

    def validate(self, raw: str | None, territory_name: str | None = None) -> bool:
        """Return whether *raw* parses to a valid number; parse failures give ``False``."""
        try:
            number = self.parse(raw, territory_name)
        except ParseError as exc:
            logger.debug("validate_rejected", raw=raw or "", code=exc.code)
            return False
        return number.is_valid

    def normalize(self, raw: str | None) -> str:
        return normalize(raw)


_default: Context | None = None
_default_lock = threading.Lock()


def default_context() -> Context:
    """Return the process-wide context, built from ``GLOBALPHONE_*`` settings on first use."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                settings = EnvSettingsLoader().load(GlobalPhoneSettings)
                _default = Context.from_settings(settings)
    return _default


def configure(
    db: Database | None = None,
    *,
    db_path: str | Path | None = None,
    default_territory_name: str = "US",
) -> Context:
    """Replace the process-wide context."""
    global _default
    with _default_lock:
        _default = Context(db, db_path=db_path, default_territory_name=default_territory_name)
    return _default


def reset_default_context() -> None:
    global _default
    with _default_lock:
        _default = None


def parse(raw: str | None, territory_name: str | None = None) -> Number:
    return default_context().parse(raw, territory_name)


def validate(raw: str | None, territory_name: str | None = None) -> bool:
    return default_context().validate(raw, territory_name)


__all__ = [
    "Context",
    "configure",
    "default_context",
    "parse",
    "reset_default_context",
    "validate",
]
