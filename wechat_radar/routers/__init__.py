from .articles_router import router as articles_router
from .cron_router import router as cron_router
from .init_router import router as init_router
from .keywords_router import router as keywords_router
from .subscriptions_router import router as subscriptions_router

__all__ = [
    "articles_router",
    "cron_router",
    "init_router",
    "keywords_router",
    "subscriptions_router",
]
