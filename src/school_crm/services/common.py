"""Helpers shared by the service modules."""

from __future__ import annotations

from typing import Any, Iterable, Mapping


class RuleViolation(Exception):
    """Raised when a business constraint is violated.

    ``status_code`` is the HTTP status the API layer reports for it.
    """

    def __init__(self, detail: str, status_code: int = 400) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code


def apply_updates(instance: Any, updates: Mapping[str, Any], *, nullable: Iterable[str] = ()) -> None:
    """Merge ``updates`` onto ``instance``.

    A ``None`` value clears the attribute only for columns listed in ``nullable``;
    for every other column it is ignored.
    """

    allowed_nulls = set(nullable)
    for field, value in updates.items():
        if value is None and field not in allowed_nulls:
            continue
        setattr(instance, field, value)
