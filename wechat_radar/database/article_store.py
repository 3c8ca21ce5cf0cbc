from typing import Any, Dict, List, Optional, Tuple
from sqlmodel import Session, select, func, col, or_
import logging

from wechat_radar.models import Article, KeywordConfig, Subscription

logger = logging.getLogger(__name__)

SORT_HOT = "hot"
SORT_LATEST = "latest"
ALL_CATEGORIES = "all"


def list_active_keywords(session: Session) -> List[KeywordConfig]:
    return list(
        session.exec(
            select(KeywordConfig).where(KeywordConfig.is_active == True).order_by(KeywordConfig.id)
        ).all()
    )


def list_active_subscriptions(session: Session) -> List[Subscription]:
    return list(
        session.exec(
            select(Subscription).where(Subscription.is_active == True).order_by(Subscription.id)
        ).all()
    )


def upsert_article(session: Session, record: Dict[str, Any], category: Optional[str] = None) -> Article:
    """Insert a scraped article or refresh the counters of the row sharing its URL.

    Only ``read_count`` and ``like_count`` are written on conflict; everything else
    keeps its first-seen value. Commits on success, lets database errors propagate.
    """
    existing = session.exec(select(Article).where(Article.url == record["url"])).first()

    if existing:
        existing.read_count = record.get("read_count", 0)
        existing.like_count = record.get("like_count", 0)
        session.add(existing)
        session.commit()
        return existing

    data = dict(record)
    if category is not None:
        data["category"] = category
    article = Article(**data)
    session.add(article)
    session.commit()
    return article


def _apply_filters(statement, category: Optional[str], keyword: Optional[str], account: Optional[str]):
    # Search terms match as literal substrings, % and _ included
    if category and category != ALL_CATEGORIES:
        statement = statement.where(Article.category == category)

    if keyword:
        statement = statement.where(
            or_(
                col(Article.title).icontains(keyword, autoescape=True),
                col(Article.summary).icontains(keyword, autoescape=True),
            )
        )

    if account:
        statement = statement.where(col(Article.account_name).icontains(account, autoescape=True))

    return statement


def query_articles(
    session: Session,
    category: Optional[str] = None,
    keyword: Optional[str] = None,
    account: Optional[str] = None,
    sort: str = SORT_HOT,
    page: int = 1,
    limit: int = 20,
) -> Tuple[List[Article], int]:
    """Return one page of matching articles and the total number of matches."""
    if sort == SORT_LATEST:
        order = [col(Article.published_at).desc(), col(Article.id).desc()]
    else:
        order = [col(Article.read_count).desc(), col(Article.id).desc()]

    statement = _apply_filters(select(Article), category, keyword, account)
    statement = statement.order_by(*order).offset((page - 1) * limit).limit(limit)
    articles = list(session.exec(statement).all())

    count_statement = _apply_filters(select(func.count()).select_from(Article), category, keyword, account)
    total = session.exec(count_statement).one()

    return articles, total
