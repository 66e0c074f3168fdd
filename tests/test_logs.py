"""Tests for logger naming."""

from __future__ import annotations

import logging

import pytest

from storefront_ui.lib import logs


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/app/src/storefront_ui/i18n/locale.py", "storefront_ui.i18n.locale"),
        ("/app/src/storefront_ui/router.py", "storefront_ui.router"),
        ("/app/src/storefront_ui/__init__.py", "storefront_ui"),
        ("/tmp/scratch.py", "scratch"),
    ],
)
def test_module_name(path, expected):
    assert logs.module_name(path) == expected


def test_package_loggers_share_one_handler():
    log = logs.logger("/app/src/storefront_ui/checkout.py")
    logs.logger("/app/src/storefront_ui/listing.py")

    assert log.name == "storefront_ui.checkout"
    assert not log.handlers
    assert len(logging.getLogger(logs.PACKAGE).handlers) == 1
