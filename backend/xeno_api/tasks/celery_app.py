"""
Celery application configuration for background tasks
"""

from celery import Celery

from xeno_api.core.config import get_settings

settings = get_settings()

# Create Celery app instance
celery_app = Celery(
    'xeno_api',
    broker=settings.REDIS_URL,
    backend=settings.REDIS_URL,
    include=['xeno_api.tasks.sync_tasks'],
)

# Load configuration
celery_app.conf.update(
    task_serializer='json',
    accept_content=['json'],
    result_serializer='json',
    timezone='UTC',
    enable_utc=True,
    task_track_started=True,
    task_time_limit=10 * 60,  # 10 minutes hard limit
    task_soft_time_limit=8 * 60,
)
