"""Unit tests for namespace identifier derivation."""

from __future__ import annotations

import hashlib

import pytest

from localization_manager.core import hashing
from localization_manager.core.hashing import namespace_id

PLUGIN_FILE = "/var/www/wp-content/plugins/shop/shop.php"


def test_md5_of_trimmed_source_by_default() -> None:
    assert namespace_id(PLUGIN_FILE) == hashlib.md5(PLUGIN_FILE.encode()).hexdigest()
    assert len(namespace_id(PLUGIN_FILE)) == 32


@pytest.mark.parametrize(
    "variant",
    [
        f" {PLUGIN_FILE}",
        f"{PLUGIN_FILE} ",
        f"\n\t{PLUGIN_FILE}\r\n",
    ],
)
def test_surrounding_whitespace_is_ignored(variant: str) -> None:
    assert namespace_id(variant) == namespace_id(PLUGIN_FILE)


def test_inner_whitespace_matters() -> None:
    assert namespace_id("/plugins/my shop.php") != namespace_id("/plugins/myshop.php")


def test_deterministic_and_distinct() -> None:
    assert namespace_id(PLUGIN_FILE) == namespace_id(PLUGIN_FILE)
    assert namespace_id(PLUGIN_FILE) != namespace_id("/plugins/forms/forms.php")


def test_non_ascii_source() -> None:
    source = "/plugins/boutique/café.php"
    assert namespace_id(source) == hashlib.md5(source.encode("utf-8")).hexdigest()


def test_explicit_algorithm() -> None:
    assert namespace_id(PLUGIN_FILE, "sha1") == hashlib.sha1(PLUGIN_FILE.encode()).hexdigest()


def test_algorithm_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(hashing.settings, "NAMESPACE_DIGEST", "sha256")
    assert namespace_id(PLUGIN_FILE) == hashlib.sha256(PLUGIN_FILE.encode()).hexdigest()


def test_unknown_algorithm_raises() -> None:
    with pytest.raises(ValueError):
        namespace_id(PLUGIN_FILE, "not-a-digest")
