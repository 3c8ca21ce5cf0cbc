import hmac
from typing import Generator, Optional

import httpx
from fastapi import Depends, Header, HTTPException, Request
from sqlalchemy.engine import Engine
from sqlmodel import Session

from wechat_radar.config import Settings
from wechat_radar.workers.sogou_processing import create_http_client


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_engine(request: Request) -> Engine:
    return request.app.state.engine


def get_session(engine: Engine = Depends(get_engine)) -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session


def get_http_client(settings: Settings = Depends(get_settings)) -> Generator[httpx.Client, None, None]:
    with create_http_client(settings.fetch_timeout_seconds) as client:
        yield client


def _secrets_match(supplied: Optional[str], expected: str) -> bool:
    if supplied is None:
        return False
    return hmac.compare_digest(supplied.encode("utf-8"), expected.encode("utf-8"))


def require_cron_secret(
    authorization: Optional[str] = Header(default=None),
    settings: Settings = Depends(get_settings),
):
    """Only enforced when a cron secret is configured"""
    if not settings.cron_secret:
        return
    if not _secrets_match(authorization, f"Bearer {settings.cron_secret}"):
        raise HTTPException(status_code=401, detail="Unauthorized")


def require_admin(
    authorization: Optional[str] = Header(default=None),
    settings: Settings = Depends(get_settings),
):
    if not settings.admin_password or authorization is None:
        raise HTTPException(status_code=401, detail="Unauthorized")
    password = authorization[len("Bearer "):] if authorization.startswith("Bearer ") else authorization
    if not _secrets_match(password, settings.admin_password):
        raise HTTPException(status_code=401, detail="Unauthorized")
