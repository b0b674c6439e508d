from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, StrictStr, TypeAdapter


# ─── Text values ──────────────────────────────────────────────────────────────


class PluralText(BaseModel):
    """A singular form with an optional plural; ``plural`` falls back to ``singular``."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    singular: StrictStr
    plural: StrictStr | None = None

    def resolve(self, plural: bool = False) -> str:
        if plural and self.plural is not None:
            return self.plural
        return self.singular


TextValue = Union[StrictStr, PluralText]

_text_adapter: TypeAdapter[TextValue] = TypeAdapter(TextValue)
_entries_adapter: TypeAdapter[dict[StrictStr, TextValue]] = TypeAdapter(
    dict[StrictStr, TextValue]
)


def validate_text(value: Any) -> TextValue:
    """Coerce *value* into a stored Text Value.

    Raises ``pydantic.ValidationError`` for anything other than a string, a
    ``PluralText`` or a ``{"singular": ..., "plural": ...}`` mapping.
    """
    return _text_adapter.validate_python(value)


def validate_entries(entries: Mapping[str, Any]) -> dict[str, TextValue]:
    return _entries_adapter.validate_python(entries)
