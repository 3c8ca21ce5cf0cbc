from celery import Celery

from wechat_radar.config import Settings

settings = Settings.from_env()

celery_app = Celery(
    "wechat_radar_workers",
    broker=settings.redis_url,
    backend=settings.redis_url,
    include=["wechat_radar.workers.fetch_worker"],
)

celery_app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,
)

# Registers the periodic tasks once the app is configured
import wechat_radar.workers.scheduler  # noqa: E402,F401
