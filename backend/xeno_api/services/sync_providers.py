"""
Storefront sync providers.

A provider turns a recorded sync request into work. The noop provider only
records the request; the shopify provider queues the Celery sync task.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from xeno_api.core.config import Settings
from xeno_api.models.sync_log import SYNC_IN_PROGRESS, SyncLog

logger = logging.getLogger(__name__)


class SyncProvider(ABC):
    name: str = "base"

    @abstractmethod
    def start(self, sync_log: SyncLog) -> str:
        """Begin the sync for a committed log; return the status to report"""

    def status(self, sync_log: SyncLog) -> str:
        """Current status of a sync this provider started"""
        return sync_log.status

    def note(self) -> Optional[str]:
        return None


class NoOpSyncProvider(SyncProvider):
    """Records the request and leaves it in progress"""

    name = "noop"

    def start(self, sync_log: SyncLog) -> str:
        logger.info(f"Sync {sync_log.id} recorded for tenant {sync_log.tenant_id}; no provider configured")
        return SYNC_IN_PROGRESS

    def note(self) -> Optional[str]:
        return "Storefront sync is not configured; the request was recorded only"


class ShopifySyncProvider(SyncProvider):
    """Queues run_tenant_sync on the Celery broker"""

    name = "shopify"

    def start(self, sync_log: SyncLog) -> str:
        # Importing the app makes it current before the shared task is sent
        from xeno_api.tasks.celery_app import celery_app  # noqa: F401
        from xeno_api.tasks.sync_tasks import run_tenant_sync

        result = run_tenant_sync.delay(str(sync_log.id))
        logger.info(f"Queued sync {sync_log.id} for tenant {sync_log.tenant_id} as task {result.id}")
        return SYNC_IN_PROGRESS


_PROVIDERS = {
    NoOpSyncProvider.name: NoOpSyncProvider,
    ShopifySyncProvider.name: ShopifySyncProvider,
}


def build_sync_provider(settings: Settings) -> SyncProvider:
    try:
        provider_cls = _PROVIDERS[settings.SYNC_PROVIDER.lower()]
    except KeyError:
        raise ValueError(f"Unknown SYNC_PROVIDER: {settings.SYNC_PROVIDER}")
    return provider_cls()
