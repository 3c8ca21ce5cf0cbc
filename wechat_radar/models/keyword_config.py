from datetime import datetime
from typing import Optional
from sqlmodel import SQLModel, Field

from .utils import utc_now


class KeywordConfig(SQLModel, table=True):
    __tablename__ = "keyword_configs"

    id: Optional[int] = Field(default=None, primary_key=True)
    keyword: str = Field(unique=True, index=True)
    category: str = Field(index=True)
    is_active: bool = Field(default=True, index=True)
    created_at: datetime = Field(default_factory=utc_now)
