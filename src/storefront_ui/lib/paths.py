"""
Path utilities for the Storefront UI.

Resolves the directories the app writes to on the local device.
"""

import os
import tempfile
from pathlib import Path

_DATA_DIR_KEY = "STOREFRONT_DATA_DIR"


def temp_dir() -> Path:
    """
    Return the system temporary directory as a Path.

    Returns:
        Path object pointing to the system temp directory.
    """
    return Path(tempfile.gettempdir())


def data_dir() -> Path:
    """
    Return the directory holding local app data (the preference store).

    Uses STOREFRONT_DATA_DIR when set, otherwise a ``storefront_ui``
    folder under the system temp directory.
    """
    configured = os.getenv(_DATA_DIR_KEY)
    if configured:
        return Path(configured)
    return temp_dir() / "storefront_ui"
