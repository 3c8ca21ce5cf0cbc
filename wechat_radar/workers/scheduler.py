import logging
from datetime import timedelta
from wechat_radar.workers.celery_app import celery_app, settings

logger = logging.getLogger(__name__)


@celery_app.on_after_configure.connect
def setup_periodic_tasks(sender, **kwargs):
    logger.info("Setting up periodic tasks...")

    sender.add_periodic_task(
        timedelta(minutes=settings.fetch_interval_minutes),
        sender.signature('wechat_radar.workers.fetch_worker.fetch_all_targets'),
        name="fetch-all-targets",
    )

    logger.info(f"Scheduled fetch-all-targets every {settings.fetch_interval_minutes} minutes")
