"""
Background tasks for syncing Shopify store data into a tenant
"""

import asyncio
import logging
import uuid
from typing import Any, Callable, Dict, Optional

from celery import shared_task

from xeno_api.core.config import get_settings
from xeno_api.core.database import Database
from xeno_api.core.encryption import TokenEncryption
from xeno_api.models.base import utcnow
from xeno_api.models.sync_log import SYNC_COMPLETED, SYNC_FAILED, SyncLog
from xeno_api.models.tenant import Tenant
from xeno_api.services.shopify_client import ShopifyAdminClient, ShopifyClientError

logger = logging.getLogger(__name__)

ClientFactory = Callable[[str, Optional[str]], ShopifyAdminClient]


async def fetch_store_counts(client: ShopifyAdminClient) -> Dict[str, int]:
    """Read customer and order counts from the store"""
    customers = await client.count_customers()
    orders = await client.count_orders()
    return {'customers': customers, 'orders': orders}


def _mark(db, sync_log: SyncLog, status: str, records: int = 0, error: Optional[str] = None) -> None:
    sync_log.status = status
    sync_log.records_processed = records
    sync_log.error_message = error
    sync_log.completed_at = utcnow()
    db.commit()


def sync_tenant_store(database: Database, encryption: TokenEncryption, sync_log_id: str,
                      client_factory: ClientFactory) -> Dict[str, Any]:
    """
    Run one sync for the tenant that owns the sync log.

    Client errors are recorded on the log as a failed sync and are not raised.

    Returns:
        Dict with the sync outcome
    """
    with database.session_scope() as db:
        sync_log = db.get(SyncLog, _as_uuid(sync_log_id))
        if sync_log is None:
            logger.error(f"Sync log {sync_log_id} not found")
            return {'status': 'error', 'message': 'Sync log not found'}

        tenant = db.get(Tenant, sync_log.tenant_id)
        if tenant is None or not tenant.is_active:
            _mark(db, sync_log, SYNC_FAILED, error="Tenant is inactive")
            return {'status': SYNC_FAILED, 'message': 'Tenant is inactive'}

        access_token = encryption.decrypt_token(tenant.access_token)

        logger.info(f"Starting sync {sync_log.id} for {tenant.shop_domain}")
        try:
            client = client_factory(tenant.shop_domain, access_token)
            counts = asyncio.run(fetch_store_counts(client))
        except ShopifyClientError as e:
            logger.warning(f"Sync {sync_log.id} for {tenant.shop_domain} failed: {e}")
            _mark(db, sync_log, SYNC_FAILED, error=str(e))
            return {'status': SYNC_FAILED, 'message': str(e)}

        records = counts['customers'] + counts['orders']
        _mark(db, sync_log, SYNC_COMPLETED, records=records)
        logger.info(
            f"Completed sync {sync_log.id} for {tenant.shop_domain}: "
            f"{counts['customers']} customers, {counts['orders']} orders"
        )
        return {'status': SYNC_COMPLETED, 'records_processed': records, **counts}


def _as_uuid(value) -> uuid.UUID:
    return value if isinstance(value, uuid.UUID) else uuid.UUID(str(value))


@shared_task(bind=True, max_retries=3)
def run_tenant_sync(self, sync_log_id: str) -> Dict[str, Any]:
    """
    Celery entry point for a queued sync

    Args:
        sync_log_id: UUID of the sync log created when the sync was requested
    """
    settings = get_settings()
    database = Database.from_settings(settings)
    encryption = TokenEncryption(settings.SECRET_KEY)

    def client_factory(shop_domain: str, access_token: Optional[str]) -> ShopifyAdminClient:
        return ShopifyAdminClient(shop_domain, access_token, api_version=settings.SHOPIFY_API_VERSION)

    try:
        return sync_tenant_store(database, encryption, sync_log_id, client_factory)
    except Exception as e:
        logger.error(f"Error running sync {sync_log_id}: {e}")
        # Retry with exponential backoff
        raise self.retry(exc=e, countdown=60 * (2 ** self.request.retries))
    finally:
        database.dispose()
