from datetime import datetime
from typing import Optional
from sqlmodel import SQLModel, Field

from .utils import utc_now


class Subscription(SQLModel, table=True):
    __tablename__ = "subscriptions"

    id: Optional[int] = Field(default=None, primary_key=True)
    account_name: str = Field(unique=True, index=True)
    account_id: Optional[str] = Field(default=None)
    is_active: bool = Field(default=True, index=True)
    created_at: datetime = Field(default_factory=utc_now)
