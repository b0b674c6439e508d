"""In-memory registry of localized text, partitioned by namespace.

Each consumer (conventionally a plugin, identified by its file path)
registers a namespace once and then adds already-translated strings to it.
Writes to an unregistered namespace raise ``NotRegisteredError``; reads are
lenient and report missing data as ``None``/``False``.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import ValidationError

from localization_manager.core.hashing import namespace_id
from localization_manager.schemas.text import (
    PluralText,
    TextValue,
    validate_entries,
)

logger = logging.getLogger(__name__)

# (text, source, key, plural, lowercase) -> text
TextFilter = Callable[[str, str, str, bool, bool], str]

# strtolower-style folding: only A-Z are touched
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


class LocalizationError(Exception):
    """Base class for errors raised by the localization store."""


class NotRegisteredError(LocalizationError):
    """Write attempted on a namespace that was never registered."""

    def __init__(self, source: str, namespace: str) -> None:
        self.source = source
        self.namespace_id = namespace
        super().__init__(
            f"Namespace not registered for {source.strip()!r}. Call register() first."
        )


class InvalidTextValueError(LocalizationError, ValueError):
    """Value is neither a string nor a singular/plural record."""

    def __init__(self, message: str, errors: ValidationError | None = None) -> None:
        self.errors = errors
        super().__init__(message)


def ascii_lower(text: str) -> str:
    return text.translate(_ASCII_LOWER)


class LocalizationStore:
    """Namespace -> key -> Text Value registry.

    Every read and write runs under one re-entrant lock per instance. Filters
    are called outside the lock.
    """

    def __init__(self, digest: str | None = None) -> None:
        self._digest = digest
        self._tables: dict[str, dict[str, TextValue]] = {}
        self._filters: list[TextFilter] = []
        self._lock = threading.RLock()

    # ─── Namespaces ───────────────────────────────────────────────────────────

    def namespace_id(self, source: str) -> str:
        return namespace_id(source, self._digest)

    def namespaces(self) -> tuple[str, ...]:
        with self._lock:
            return tuple(self._tables)

    def is_registered(self, source: str) -> bool:
        ns = self.namespace_id(source)
        with self._lock:
            return ns in self._tables

    def register(
        self, source: str, entries: Mapping[str, Any] | None = None
    ) -> None:
        """Create the namespace for *source* if needed and merge *entries*.

        Registering twice never clears existing entries.
        """
        ns = self.namespace_id(source)
        with self._lock:
            if ns not in self._tables:
                self._tables[ns] = {}
                logger.debug("Registered localization namespace %s (%s)", ns, source.strip())
            if entries:
                self.add_bulk(source, entries)

    def clear(self) -> None:
        """Drop every namespace and filter."""
        with self._lock:
            self._tables.clear()
            self._filters.clear()

    # ─── Writes ───────────────────────────────────────────────────────────────

    def _table_for_write(self, source: str) -> dict[str, TextValue]:
        ns = self.namespace_id(source)
        table = self._tables.get(ns)
        if table is None:
            logger.debug("Write to unregistered localization namespace %s", ns)
            raise NotRegisteredError(source, ns)
        return table

    def add(self, source: str, key: str, value: Any) -> None:
        with self._lock:
            table = self._table_for_write(source)
            try:
                table.update(validate_entries({key: value}))
            except ValidationError as exc:
                raise InvalidTextValueError(
                    f"Invalid localized text for key {key!r}", exc
                ) from exc

    def add_bulk(self, source: str, entries: Mapping[str, Any]) -> None:
        """Merge *entries* into the namespace; all values are validated first."""
        with self._lock:
            table = self._table_for_write(source)
            try:
                validated = validate_entries(entries)
            except ValidationError as exc:
                raise InvalidTextValueError("Invalid localized text in bulk entries", exc) from exc
            table.update(validated)

    # ─── Reads ────────────────────────────────────────────────────────────────

    def get(
        self,
        source: str,
        key: str,
        plural: bool = False,
        lowercase: bool = False,
    ) -> str | None:
        ns = self.namespace_id(source)
        with self._lock:
            value = self._tables.get(ns, {}).get(key)
            filters = tuple(self._filters)
        if value is None:
            return None

        text = value.resolve(plural) if isinstance(value, PluralText) else value
        if lowercase:
            text = ascii_lower(text)

        for fn in filters:
            text = fn(text, source, key, plural, lowercase)
        return text

    def has(self, source: str, key: str) -> bool:
        ns = self.namespace_id(source)
        with self._lock:
            return key in self._tables.get(ns, {})

    def get_all(self, source: str) -> dict[str, TextValue] | None:
        """Copy of the namespace's entries, or ``None`` if never registered."""
        ns = self.namespace_id(source)
        with self._lock:
            table = self._tables.get(ns)
            return dict(table) if table is not None else None

    # ─── Filters ──────────────────────────────────────────────────────────────

    @property
    def filters(self) -> tuple[TextFilter, ...]:
        with self._lock:
            return tuple(self._filters)

    def add_filter(self, fn: TextFilter) -> None:
        """Register a transform applied to every ``get`` result, in registration order."""
        with self._lock:
            self._filters.append(fn)
        logger.debug("Added localization filter %r", fn)

    def remove_filter(self, fn: TextFilter) -> bool:
        with self._lock:
            try:
                self._filters.remove(fn)
            except ValueError:
                return False
        logger.debug("Removed localization filter %r", fn)
        return True


# ─── Process-wide default ─────────────────────────────────────────────────────

_default_store: LocalizationStore | None = None
_default_lock = threading.Lock()


def get_default_store() -> LocalizationStore:
    """Return the process-wide store, creating it on first use."""
    global _default_store
    if _default_store is None:
        with _default_lock:
            if _default_store is None:
                _default_store = LocalizationStore()
    return _default_store


def reset_default_store() -> None:
    """Discard the process-wide store; the next ``get_default_store`` starts empty."""
    global _default_store
    with _default_lock:
        _default_store = None
