import logging
import math
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlmodel import Session

from wechat_radar.database import query_articles
from wechat_radar.database.article_store import SORT_HOT
from wechat_radar.dependencies import get_session

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/articles", tags=["articles"])


@router.get("")
def list_articles(
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    category: Optional[str] = Query(None, description="Exact category, 'all' for no filter"),
    keyword: Optional[str] = Query(None, description="Substring of title or summary"),
    account: Optional[str] = Query(None, description="Substring of the account name"),
    sort: str = Query(SORT_HOT, description="'hot' (read count) or 'latest' (publish time)"),
    session: Session = Depends(get_session),
):
    try:
        articles, total = query_articles(
            session,
            category=category,
            keyword=keyword,
            account=account,
            sort=sort,
            page=page,
            limit=limit,
        )
    except Exception:
        logger.exception("Failed to fetch articles")
        raise HTTPException(status_code=500, detail="Internal server error")

    return {
        "articles": articles,
        "pagination": {
            "page": page,
            "limit": limit,
            "total": total,
            "totalPages": math.ceil(total / limit),
        },
    }
