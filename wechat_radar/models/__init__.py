from .article import Article, UNKNOWN_CATEGORY
from .utils import utc_now
from .keyword_config import KeywordConfig
from .subscription import Subscription

__all__ = [
    "Article",
    "KeywordConfig",
    "Subscription",
    "UNKNOWN_CATEGORY",
    "utc_now",
]
