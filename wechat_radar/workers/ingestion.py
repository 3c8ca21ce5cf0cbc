import time
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Tuple

import httpx
from sqlmodel import Session

from wechat_radar.database.article_store import (
    list_active_keywords,
    list_active_subscriptions,
    upsert_article,
)
from wechat_radar.workers.sogou_processing import search_articles

logger = logging.getLogger(__name__)

FETCH_DELAY_SECONDS = 2.0


@dataclass
class IngestionSummary:
    total_fetched: int = 0
    total_saved: int = 0
    keywords: int = 0
    subscriptions: int = 0

    def to_response(self) -> Dict[str, Any]:
        return {
            "success": True,
            "totalFetched": self.total_fetched,
            "totalSaved": self.total_saved,
            "keywords": self.keywords,
            "subscriptions": self.subscriptions,
        }


def _save_articles(session: Session, articles: List[Dict[str, Any]], category: Optional[str]) -> int:
    saved = 0
    for article in articles:
        try:
            upsert_article(session, article, category=category)
            saved += 1
        except Exception as e:
            session.rollback()
            logger.error(f"Failed to save article {article.get('url')}: {e}")
    return saved


def run_ingestion(
    session: Session,
    client: httpx.Client,
    delay: float = FETCH_DELAY_SECONDS,
    sleep: Callable[[float], None] = time.sleep,
    now: Optional[datetime] = None,
) -> IngestionSummary:
    """Scrape every active keyword and subscription once and upsert the results.

    Targets are processed one at a time with ``delay`` seconds between two
    consecutive requests. Keyword results take the keyword's category on first
    insert; subscription results keep the unknown category.
    """
    keywords = list_active_keywords(session)
    subscriptions = list_active_subscriptions(session)

    # (mode, query, category) captured up front so edits made during the run are not seen
    targets: List[Tuple[str, str, Optional[str]]] = [
        ("keyword", kw.keyword, kw.category) for kw in keywords
    ] + [
        ("account", sub.account_name, None) for sub in subscriptions
    ]

    summary = IngestionSummary(keywords=len(keywords), subscriptions=len(subscriptions))
    logger.info(f"Starting ingestion for {len(keywords)} keywords and {len(subscriptions)} subscriptions")

    for i, (mode, query, category) in enumerate(targets):
        if i > 0 and delay > 0:
            sleep(delay)

        articles = search_articles(client, query, mode, now=now)
        saved = _save_articles(session, articles, category)
        summary.total_fetched += len(articles)
        summary.total_saved += saved

        logger.info(f"{mode} '{query}': fetched {len(articles)}, saved {saved} - target {i + 1}/{len(targets)}")

    logger.info(f"Ingestion finished: fetched {summary.total_fetched}, saved {summary.total_saved}")
    return summary
