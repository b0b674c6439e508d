"""Shared test fixtures.

Each test gets a fresh ``LocalizationStore`` and the process-wide default
store is discarded before and after the test, so tests never see each
other's namespaces.
"""

from __future__ import annotations

from typing import Generator

import pytest

from localization_manager.services.store import (
    LocalizationStore,
    get_default_store,
    reset_default_store,
)

PLUGIN_FILE = "/var/www/wp-content/plugins/shop/shop.php"


@pytest.fixture(autouse=True)
def _reset_default_store() -> Generator[None, None, None]:
    reset_default_store()
    yield
    reset_default_store()


@pytest.fixture()
def store() -> LocalizationStore:
    return LocalizationStore()


@pytest.fixture()
def registered_store(store: LocalizationStore) -> LocalizationStore:
    store.register(
        PLUGIN_FILE,
        {
            "greeting": "Hello",
            "item": {"singular": "Item", "plural": "Items"},
            "order": {"singular": "Order"},
        },
    )
    return store


@pytest.fixture()
def default_store() -> LocalizationStore:
    return get_default_store()
