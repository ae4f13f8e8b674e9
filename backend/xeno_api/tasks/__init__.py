"""
Celery application and background tasks
"""
