import logging
from typing import Optional

from fastapi import FastAPI

from wechat_radar.config import Settings
from wechat_radar.database import build_engine, create_db_and_tables
from wechat_radar.routers import (
    articles_router,
    cron_router,
    init_router,
    keywords_router,
    subscriptions_router,
)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    logging.basicConfig(level=settings.log_level)

    app = FastAPI(title="WeChat Radar API", description="WeChat article aggregation via Sogou search")
    app.state.settings = settings
    app.state.engine = build_engine(settings)

    app.include_router(articles_router)
    app.include_router(cron_router)
    app.include_router(init_router)
    app.include_router(keywords_router)
    app.include_router(subscriptions_router)

    @app.on_event("startup")
    async def startup_event():
        create_db_and_tables(app.state.engine)

    @app.get("/")
    async def root():
        return {"message": "WeChat Radar API - WeChat article aggregation"}

    return app


app = create_app()
