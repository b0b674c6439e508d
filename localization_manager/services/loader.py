"""Load localized entries from JSON files."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from localization_manager.schemas.text import TextValue, validate_entries
from localization_manager.services.store import InvalidTextValueError

logger = logging.getLogger(__name__)


def load_entries(path: str | Path) -> dict[str, TextValue]:
    """Read a JSON object of ``key -> text`` from *path*.

    Values are strings or ``{"singular": ..., "plural": ...}`` objects. The
    result can be passed straight to ``LocalizationStore.register``.
    A missing file yields ``{}``.
    """
    path = Path(path)
    if not path.exists():
        logger.warning("Localization file not found: %s", path)
        return {}
    with open(path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise InvalidTextValueError(f"Malformed localization file {path}: {exc}") from exc
    try:
        return validate_entries(data)
    except ValidationError as exc:
        raise InvalidTextValueError(f"Invalid localized text in {path}", exc) from exc
