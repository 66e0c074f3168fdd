"""Tests for environment configuration."""

from __future__ import annotations

import pytest

from storefront_ui.config import DEFAULT_TAX_RATE, AppConfig, device_language


def test_defaults(monkeypatch, tmp_path):
    for name in ("STOREFRONT_PORT", "STOREFRONT_SERVICE", "STOREFRONT_TAX_RATE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("STOREFRONT_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("STOREFRONT_DEVICE_LANGUAGE", "en_US")

    config = AppConfig.from_env()

    assert config.port == 8000
    assert config.service_kind == "demo"
    assert config.tax_rate == DEFAULT_TAX_RATE
    assert config.device_language == "en"


@pytest.mark.parametrize(
    "raw, expected",
    [("0.15", 0.15), ("15", 0.15), ("0", 0.0), ("0.99", 0.99), ("1", 0.01)],
)
def test_tax_rate_accepts_fraction_or_percent(monkeypatch, tmp_path, raw, expected):
    monkeypatch.setenv("STOREFRONT_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("STOREFRONT_TAX_RATE", raw)
    assert AppConfig.from_env().tax_rate == pytest.approx(expected)


@pytest.mark.parametrize("raw", ["-1", "nan", "inf"])
def test_invalid_tax_rate_is_rejected(monkeypatch, tmp_path, raw):
    monkeypatch.setenv("STOREFRONT_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("STOREFRONT_TAX_RATE", raw)
    with pytest.raises(ValueError):
        AppConfig.from_env()


@pytest.mark.parametrize("code, expected", [("ar-SA", "ar"), ("AR", "ar"), ("fr_FR", "en")])
def test_device_language(monkeypatch, code, expected):
    monkeypatch.setenv("STOREFRONT_DEVICE_LANGUAGE", code)
    assert device_language() == expected
