"""
Local library modules shared across the Storefront UI.

Modules:
    logs: Logging utilities
    paths: Local data directory resolution
    storage: On-disk key-value storage for device preferences
"""

from storefront_ui.lib import logs, paths, storage

__all__ = ["logs", "paths", "storage"]
