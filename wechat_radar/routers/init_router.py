import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlmodel import Session

from wechat_radar.database import count_rows, create_db_and_tables, seed_default_keywords
from wechat_radar.dependencies import get_session

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/init", tags=["init"])


@router.get("")
def init_database(session: Session = Depends(get_session)):
    """Create missing tables and seed the starter keywords"""
    try:
        create_db_and_tables(session.get_bind())
        seed_default_keywords(session)
        counts = count_rows(session)
    except Exception as e:
        logger.exception("Database initialization failed")
        return JSONResponse(status_code=500, content={"success": False, "error": str(e)})

    return {
        "success": True,
        "message": "Database initialized",
        "counts": counts,
    }
