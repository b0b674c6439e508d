"""Namespace identifier derivation."""

from __future__ import annotations

import hashlib

from localization_manager.core.config import settings


def namespace_id(source: str, algorithm: str | None = None) -> str:
    """Hex digest of the whitespace-trimmed *source*.

    *source* is any stable caller-chosen string, conventionally the absolute
    path of the plugin file. Leading/trailing whitespace never changes the
    result. *algorithm* defaults to ``settings.NAMESPACE_DIGEST``; unknown
    names raise ``ValueError``.
    """
    digest = hashlib.new(algorithm or settings.NAMESPACE_DIGEST)
    digest.update(source.strip().encode("utf-8"))
    return digest.hexdigest()
