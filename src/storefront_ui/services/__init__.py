"""
Service factory for the Storefront UI.

This module provides the get_store_service() factory function that returns
the appropriate StoreService implementation based on configuration.

Available Implementations:
- demo: In-memory service with static store data

The service is cached at the module level, so the same instance is reused
across all requests. Configure via the STOREFRONT_SERVICE environment
variable.
"""

from functools import cache
from typing import Callable, Dict

from storefront_ui.config import get_config
from storefront_ui.lib import logs
from storefront_ui.services.store_service import Collection, StoreService
from storefront_ui.services.store_service_demo import DemoStoreService

LOG = logs.logger(__file__)

_SERVICE_REGISTRY: Dict[str, Callable[[], StoreService]] = {
    "demo": lambda: DemoStoreService(),
}


@cache
def get_store_service(kind: str | None = None) -> StoreService:
    """Return the configured store service implementation."""
    resolved_kind = (kind or get_config().service_kind).lower()
    LOG.info("get_store_service - kind:%s resolved_kind:%s", kind, resolved_kind)
    try:
        factory = _SERVICE_REGISTRY[resolved_kind]
    except KeyError as exc:
        msg = f"Unknown store service kind: {resolved_kind}"
        raise ValueError(msg) from exc
    return factory()


__all__ = ["Collection", "DemoStoreService", "StoreService", "get_store_service"]
