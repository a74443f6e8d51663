"""Observability – SensitiveFieldsFilter.

Message payloads and metadata are logged only after passing through this
filter.  Keys are matched case-insensitively; nested mappings and
lists of mappings are walked.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset({
    "password", "passwd", "secret", "token", "key", "api_key", "apikey",
    "auth", "authorization", "credentials", "access_token", "refresh_token",
})


class SensitiveFieldsFilter:
    """Replace values of sensitive keys with ``[REDACTED]``."""

    REDACTED = "[REDACTED]"

    def __init__(self, sensitive_fields: frozenset[str] | None = None) -> None:
        fields = sensitive_fields or DEFAULT_SENSITIVE_FIELDS
        self._fields = frozenset(f.lower() for f in fields)

    def is_sensitive(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._fields

    def redact(self, data: Mapping[str, Any]) -> dict[str, Any]:
        """Top-level keys only."""
        return {k: (self.REDACTED if self.is_sensitive(k) else v) for k, v in data.items()}

    def redact_deep(self, data: Mapping[str, Any]) -> dict[str, Any]:
        return {
            k: self.REDACTED if self.is_sensitive(k) else self._walk(v)
            for k, v in data.items()
        }

    def _walk(self, value: Any) -> Any:
        if isinstance(value, Mapping):
            return self.redact_deep(value)
        if isinstance(value, (list, tuple)):
            return [self._walk(item) for item in value]
        return value


__all__ = ["DEFAULT_SENSITIVE_FIELDS", "SensitiveFieldsFilter"]
