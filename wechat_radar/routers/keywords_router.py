import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select, col

from wechat_radar.dependencies import get_session, require_admin
from wechat_radar.models import KeywordConfig

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/keywords", tags=["keywords"])


class KeywordCreate(BaseModel):
    keyword: Optional[str] = None
    category: Optional[str] = None
    is_active: Optional[bool] = None


class KeywordUpdate(BaseModel):
    id: Optional[int] = None
    keyword: Optional[str] = None
    category: Optional[str] = None
    is_active: Optional[bool] = None


def _get_or_404(session: Session, keyword_id: int) -> KeywordConfig:
    keyword_config = session.get(KeywordConfig, keyword_id)
    if not keyword_config:
        raise HTTPException(status_code=404, detail="Keyword not found")
    return keyword_config


@router.get("")
def list_keywords(session: Session = Depends(get_session)):
    keywords = session.exec(
        select(KeywordConfig).order_by(col(KeywordConfig.created_at).desc(), col(KeywordConfig.id).desc())
    ).all()
    return {"keywords": keywords}


@router.post("", dependencies=[Depends(require_admin)])
def create_keyword(body: KeywordCreate, session: Session = Depends(get_session)):
    if not body.keyword or not body.category:
        raise HTTPException(status_code=400, detail="keyword and category are required")

    keyword_config = KeywordConfig(
        keyword=body.keyword,
        category=body.category,
        is_active=True if body.is_active is None else body.is_active,
    )
    session.add(keyword_config)
    try:
        session.commit()
    except IntegrityError:
        session.rollback()
        raise HTTPException(status_code=409, detail="Keyword already exists")

    session.refresh(keyword_config)
    logger.info(f"Created keyword '{keyword_config.keyword}' ({keyword_config.category})")
    return {"keyword": keyword_config}


@router.put("", dependencies=[Depends(require_admin)])
def update_keyword(body: KeywordUpdate, session: Session = Depends(get_session)):
    if body.id is None:
        raise HTTPException(status_code=400, detail="id is required")

    keyword_config = _get_or_404(session, body.id)
    if body.keyword:
        keyword_config.keyword = body.keyword
    if body.category:
        keyword_config.category = body.category
    if body.is_active is not None:
        keyword_config.is_active = body.is_active

    session.add(keyword_config)
    try:
        session.commit()
    except IntegrityError:
        session.rollback()
        raise HTTPException(status_code=409, detail="Keyword already exists")

    session.refresh(keyword_config)
    return {"keyword": keyword_config}


@router.delete("", dependencies=[Depends(require_admin)])
def delete_keyword(id: Optional[int] = Query(None), session: Session = Depends(get_session)):
    if id is None:
        raise HTTPException(status_code=400, detail="id is required")

    keyword_config = _get_or_404(session, id)
    session.delete(keyword_config)
    session.commit()
    logger.info(f"Deleted keyword {id}")
    return {"success": True}
