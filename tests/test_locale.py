"""Tests for the active language and its persisted preference."""

from __future__ import annotations

import logging

import pytest

from storefront_ui.i18n import (
    ARABIC,
    ENGLISH,
    PREFERENCE_KEY,
    LanguageManager,
    LocaleConfig,
)
from storefront_ui.lib.storage import DiskStore


@pytest.fixture
def disk_store(tmp_path):
    store = DiskStore(tmp_path / "prefs")
    yield store
    store.close()


def test_locale_config_direction(translator):
    english = LocaleConfig.for_language(translator, ENGLISH)
    arabic = LocaleConfig.for_language(translator, ARABIC)
    assert english.direction == "ltr"
    assert arabic.is_rtl
    assert arabic.direction == "rtl"
    assert arabic.t("dashboard.sales") == "المبيعات"


def test_starts_with_device_language(translator, memory_store):
    manager = LanguageManager(translator, memory_store, device_language=ARABIC)
    assert manager.current_language == ARABIC
    assert manager.is_rtl
    assert memory_store.data == {}


def test_unsupported_device_language_falls_back_to_english(translator):
    manager = LanguageManager(translator, None, device_language="fr")
    assert manager.current_language == ENGLISH


def test_change_language_persists(translator, memory_store):
    manager = LanguageManager(translator, memory_store)
    locale = manager.change_language(ARABIC)

    assert locale.language == ARABIC
    assert manager.locale is locale
    assert memory_store.data[PREFERENCE_KEY] == ARABIC
    assert manager.is_loading is False


def test_change_to_unsupported_language_fails(translator, memory_store):
    manager = LanguageManager(translator, memory_store)
    with pytest.raises(ValueError):
        manager.change_language("de")
    assert manager.current_language == ENGLISH
    assert memory_store.data == {}


def test_toggle_language(translator):
    manager = LanguageManager(translator)
    assert manager.toggle_language().language == ARABIC
    assert manager.toggle_language().language == ENGLISH


def test_saved_preference_survives_restart(translator, tmp_path):
    first = DiskStore(tmp_path / "prefs")
    LanguageManager(translator, first).change_language(ARABIC)
    first.close()

    second = DiskStore(tmp_path / "prefs")
    try:
        manager = LanguageManager(translator, second, device_language=ENGLISH)
        assert manager.current_language == ARABIC
        assert manager.locale.direction == "rtl"
    finally:
        second.close()


def test_unsupported_saved_language_is_ignored(translator, memory_store):
    memory_store.data[PREFERENCE_KEY] = "fr"
    manager = LanguageManager(translator, memory_store)
    assert manager.current_language == ENGLISH


def test_failed_save_still_switches_language(translator, failing_store, caplog):
    manager = LanguageManager(translator, failing_store)
    with caplog.at_level(logging.ERROR):
        locale = manager.change_language(ARABIC)
    assert locale.language == ARABIC
    assert "Failed to save language preference" in caplog.text


def test_language_names(translator):
    manager = LanguageManager(translator)
    assert manager.language_name() == "English"
    assert manager.language_name(ARABIC) == "العربية"


def test_disk_store_round_trip(disk_store):
    assert disk_store.get("missing") is None
    disk_store.set("language", "ar")
    assert disk_store.get("language").value == "ar"
    disk_store.delete("language")
    assert disk_store.get("language") is None
