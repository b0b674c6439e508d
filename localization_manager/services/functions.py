"""Convenience helpers over the default ``LocalizationStore``.

Each helper converts a ``LocalizationError`` into a ``False``/``None``
return, handing the exception to ``error_callback`` when one is given.
Pass ``store=`` to target an instance other than the process-wide default.
"""

from __future__ import annotations

import html
import logging
import sys
from collections.abc import Callable, Mapping
from typing import Any, TextIO, TypeVar

from localization_manager.core.config import settings
from localization_manager.schemas.text import TextValue
from localization_manager.services.store import (
    LocalizationError,
    LocalizationStore,
    ascii_lower,
    get_default_store,
)

logger = logging.getLogger(__name__)

ErrorCallback = Callable[[LocalizationError], Any]

T = TypeVar("T")


def _call(
    fn: Callable[[LocalizationStore], T],
    fallback: T,
    store: LocalizationStore | None,
    error_callback: ErrorCallback | None,
) -> T:
    try:
        return fn(store if store is not None else get_default_store())
    except LocalizationError as exc:
        logger.warning("Localization call failed: %s", exc)
        if error_callback is not None:
            error_callback(exc)
        return fallback


# ─── Writes ───────────────────────────────────────────────────────────────────


def register_localized_text(
    source: str,
    entries: Mapping[str, Any] | None = None,
    error_callback: ErrorCallback | None = None,
    *,
    store: LocalizationStore | None = None,
) -> bool:
    def _register(s: LocalizationStore) -> bool:
        s.register(source, entries)
        return True

    return _call(_register, False, store, error_callback)


def add_localized_text(
    key: str,
    text: Any,
    source: str,
    error_callback: ErrorCallback | None = None,
    *,
    store: LocalizationStore | None = None,
) -> bool:
    def _add(s: LocalizationStore) -> bool:
        s.add(source, key, text)
        return True

    return _call(_add, False, store, error_callback)


def add_localized_texts(
    entries: Mapping[str, Any],
    source: str,
    error_callback: ErrorCallback | None = None,
    *,
    store: LocalizationStore | None = None,
) -> bool:
    def _add_bulk(s: LocalizationStore) -> bool:
        s.add_bulk(source, entries)
        return True

    return _call(_add_bulk, False, store, error_callback)


# ─── Reads ────────────────────────────────────────────────────────────────────


def get_localized_text(
    key: str,
    source: str,
    plural: bool = False,
    lowercase: bool = False,
    error_callback: ErrorCallback | None = None,
    *,
    store: LocalizationStore | None = None,
) -> str | None:
    text = _call(
        lambda s: s.get(source, key, plural, lowercase),
        None,
        store,
        error_callback,
    )
    # filters may reintroduce capitals
    if text is not None and lowercase:
        text = ascii_lower(text)
    return text


def get_singular_localized_text(
    key: str,
    source: str,
    lowercase: bool = False,
    error_callback: ErrorCallback | None = None,
    *,
    store: LocalizationStore | None = None,
) -> str | None:
    return get_localized_text(key, source, False, lowercase, error_callback, store=store)


def get_plural_localized_text(
    key: str,
    source: str,
    lowercase: bool = False,
    error_callback: ErrorCallback | None = None,
    *,
    store: LocalizationStore | None = None,
) -> str | None:
    return get_localized_text(key, source, True, lowercase, error_callback, store=store)


def get_all_localized_text(
    source: str,
    error_callback: ErrorCallback | None = None,
    *,
    store: LocalizationStore | None = None,
) -> dict[str, TextValue] | None:
    return _call(lambda s: s.get_all(source), None, store, error_callback)


def localized_text_exists(
    key: str,
    source: str,
    error_callback: ErrorCallback | None = None,
    *,
    store: LocalizationStore | None = None,
) -> bool:
    return _call(lambda s: s.has(source, key), False, store, error_callback)


# ─── Rendering ────────────────────────────────────────────────────────────────


def esc_localized_text(
    key: str,
    source: str,
    plural: bool = False,
    lowercase: bool = False,
    error_callback: ErrorCallback | None = None,
    *,
    store: LocalizationStore | None = None,
) -> str:
    """HTML-escaped text, or ``""`` when the key is missing."""
    text = get_localized_text(key, source, plural, lowercase, error_callback, store=store)
    # esc_html encodes the apostrophe as &#039;
    return html.escape(text or "", quote=settings.ESCAPE_QUOTES).replace("&#x27;", "&#039;")


def echo_localized_text(
    key: str,
    source: str,
    plural: bool = False,
    lowercase: bool = False,
    error_callback: ErrorCallback | None = None,
    *,
    store: LocalizationStore | None = None,
    file: TextIO | None = None,
) -> None:
    text = get_localized_text(key, source, plural, lowercase, error_callback, store=store)
    (file or sys.stdout).write(text or "")


def echo_esc_localized_text(
    key: str,
    source: str,
    plural: bool = False,
    lowercase: bool = False,
    error_callback: ErrorCallback | None = None,
    *,
    store: LocalizationStore | None = None,
    file: TextIO | None = None,
) -> None:
    (file or sys.stdout).write(
        esc_localized_text(key, source, plural, lowercase, error_callback, store=store)
    )
