import logging

import httpx
from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from wechat_radar.config import Settings
from wechat_radar.dependencies import get_http_client, get_session, get_settings, require_cron_secret
from wechat_radar.workers.ingestion import run_ingestion

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/cron", tags=["cron"])


@router.get("/fetch", dependencies=[Depends(require_cron_secret)])
def trigger_fetch(
    session: Session = Depends(get_session),
    client: httpx.Client = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
):
    """Run one synchronous ingestion pass and report the totals"""
    try:
        summary = run_ingestion(session, client, delay=settings.fetch_delay_seconds)
    except Exception:
        logger.exception("Cron fetch failed")
        raise HTTPException(status_code=500, detail="Internal server error")

    return summary.to_response()
