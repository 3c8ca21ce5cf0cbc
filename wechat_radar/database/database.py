from typing import Dict
from sqlalchemy.engine import Engine
from sqlmodel import create_engine, Session, SQLModel, select, func
import logging

# Suppress SQLAlchemy engine logs
logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
logging.getLogger("sqlalchemy.pool").setLevel(logging.WARNING)
logging.getLogger("sqlalchemy.dialects").setLevel(logging.WARNING)

from wechat_radar.config import Settings
from wechat_radar.models import Article, KeywordConfig, Subscription

logger = logging.getLogger(__name__)

DEFAULT_KEYWORDS = [
    {"keyword": "健康", "category": "健康养生"},
    {"keyword": "养生", "category": "健康养生"},
    {"keyword": "科技", "category": "科技数码"},
    {"keyword": "互联网", "category": "科技数码"},
    {"keyword": "职场", "category": "职场成长"},
    {"keyword": "理财", "category": "财经理财"},
]


def build_engine(settings: Settings) -> Engine:
    connect_args = {}
    if settings.database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(settings.database_url, echo=settings.sql_echo, connect_args=connect_args)


def create_db_and_tables(bind: Engine):
    SQLModel.metadata.create_all(bind)


def seed_default_keywords(session: Session) -> int:
    """Insert the starter keyword set when no keywords exist yet. Returns rows added."""
    existing = session.exec(select(func.count()).select_from(KeywordConfig)).one()
    if existing:
        return 0

    for data in DEFAULT_KEYWORDS:
        session.add(KeywordConfig(**data))
    session.commit()
    logger.info(f"Seeded {len(DEFAULT_KEYWORDS)} default keywords")
    return len(DEFAULT_KEYWORDS)


def count_rows(session: Session) -> Dict[str, int]:
    return {
        "articles": session.exec(select(func.count()).select_from(Article)).one(),
        "subscriptions": session.exec(select(func.count()).select_from(Subscription)).one(),
        "keywords": session.exec(select(func.count()).select_from(KeywordConfig)).one(),
    }
