"""Root of the globalphone error hierarchy."""

from __future__ import annotations

from typing import Any


class GlobalPhoneError(Exception):
    """Base class for every error the library raises.

    Errors may name the territory they concern and, for data problems, the
    record path that was being loaded (``regions[1](+44).formats[0]``).
    Both show up in :meth:`to_dict` only when set.
    """

    default_code: str = "globalphone_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        territory: str | None = None,
        path: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.territory = territory
        self.path = path
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.path}: {self.message}" if self.path else self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form for logging; never includes the number being parsed."""
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.territory is not None:
            payload["territory"] = self.territory
        if self.path is not None:
            payload["path"] = self.path
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


__all__ = ["GlobalPhoneError"]
