from .date_parser import parse_publish_date
from .extractor import extract_articles
from .fetcher import create_http_client, fetch_search_page, search_articles

__all__ = [
    'parse_publish_date',
    'extract_articles',
    'create_http_client',
    'fetch_search_page',
    'search_articles',
]
