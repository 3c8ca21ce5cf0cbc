from typing import Dict, Any
from sqlmodel import Session
import logging

from wechat_radar.database import build_engine
from wechat_radar.workers.celery_app import celery_app, settings
from wechat_radar.workers.ingestion import run_ingestion
from wechat_radar.workers.sogou_processing import create_http_client


logger = logging.getLogger(__name__)

engine = build_engine(settings)


@celery_app.task
def fetch_all_targets() -> Dict[str, Any]:
    """Run one ingestion pass over all active keywords and subscriptions"""
    try:
        with Session(engine) as session, create_http_client(settings.fetch_timeout_seconds) as client:
            summary = run_ingestion(session, client, delay=settings.fetch_delay_seconds)
        return summary.to_response()

    except Exception as e:
        logger.error(f"Error in fetch_all_targets task: {e}")
        return {"success": False, "error": str(e)}
