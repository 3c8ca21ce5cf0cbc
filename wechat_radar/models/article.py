from datetime import datetime
from typing import Optional, List
from sqlmodel import SQLModel, Field
from sqlalchemy import Column, JSON

from .utils import utc_now


UNKNOWN_CATEGORY = "unknown"


class Article(SQLModel, table=True):
    __tablename__ = "articles"

    id: Optional[int] = Field(default=None, primary_key=True)
    url: str = Field(unique=True, index=True)
    title: str
    summary: str = Field(default="")
    cover_url: Optional[str] = Field(default=None)
    account_name: str = Field(default="")

    # Engagement counters, refreshed on every re-scrape
    read_count: int = Field(default=0, index=True)
    like_count: int = Field(default=0)

    published_at: datetime = Field(index=True)
    fetched_at: datetime = Field(default_factory=utc_now)
    category: str = Field(default=UNKNOWN_CATEGORY, index=True)
    keywords: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
