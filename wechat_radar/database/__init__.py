from .database import build_engine, create_db_and_tables, seed_default_keywords, count_rows
from .article_store import (
    upsert_article,
    query_articles,
    list_active_keywords,
    list_active_subscriptions,
)

__all__ = [
    "build_engine",
    "create_db_and_tables",
    "seed_default_keywords",
    "count_rows",
    "upsert_article",
    "query_articles",
    "list_active_keywords",
    "list_active_subscriptions",
]
