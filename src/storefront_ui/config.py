"""
Runtime configuration for the Storefront UI.

All settings come from environment variables and are collected into a
frozen AppConfig so the rest of the app receives them explicitly.
"""

import locale
import math
import os
from dataclasses import dataclass
from functools import cache
from pathlib import Path

from storefront_ui.lib import logs, paths

LOG = logs.logger(__file__)

SUPPORTED_LANGUAGES = ("en", "ar")
DEFAULT_LANGUAGE = "en"
DEFAULT_TAX_RATE = 0.05


@dataclass(frozen=True, slots=True)
class AppConfig:
    """
    Application settings.

    Attributes:
        port: HTTP port the Reflex server listens on.
        service_kind: Registry key of the StoreService implementation.
        tax_rate: Checkout tax rate as a fraction (0.05 == 5%).
        data_dir: Directory holding the local preference store.
        device_language: Language reported by the device, before any
            stored preference is applied.
    """

    port: int = 8000
    service_kind: str = "demo"
    tax_rate: float = DEFAULT_TAX_RATE
    data_dir: Path = Path(".")
    device_language: str = DEFAULT_LANGUAGE

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Build the configuration from environment variables."""
        return cls(
            port=int(os.getenv("STOREFRONT_PORT", "8000")),
            service_kind=os.getenv("STOREFRONT_SERVICE", "demo").lower(),
            tax_rate=_parse_rate(os.getenv("STOREFRONT_TAX_RATE")),
            data_dir=paths.data_dir(),
            device_language=device_language(),
        )


def _parse_rate(raw: str | None) -> float:
    """
    Parse a tax rate, accepting either 0.05 or 5 for five percent.

    Values below 1 are fractions; 1 and above are percentages, so "1"
    means 1% rather than 100%.
    """
    if not raw:
        return DEFAULT_TAX_RATE
    rate = float(raw)
    if not math.isfinite(rate) or rate < 0:
        raise ValueError(f"Tax rate must be a non-negative number: {raw}")
    return rate / 100 if rate >= 1 else rate


def device_language() -> str:
    """
    Return the device language code, falling back to English.

    STOREFRONT_DEVICE_LANGUAGE overrides the OS locale. Unsupported
    languages resolve to the default.
    """
    code = os.getenv("STOREFRONT_DEVICE_LANGUAGE")
    if not code:
        try:
            code = locale.getlocale()[0] or DEFAULT_LANGUAGE
        except ValueError:
            LOG.warning("Failed to get device language", exc_info=True)
            code = DEFAULT_LANGUAGE
    code = code.split("_")[0].split("-")[0].lower()
    return code if code in SUPPORTED_LANGUAGES else DEFAULT_LANGUAGE


@cache
def get_config() -> AppConfig:
    """Return the process-wide configuration (read once)."""
    config = AppConfig.from_env()
    LOG.info("get_config - %s", config)
    return config
