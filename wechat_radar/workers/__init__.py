from .ingestion import IngestionSummary, run_ingestion
from .sogou_processing import (
    parse_publish_date,
    extract_articles,
    create_http_client,
    fetch_search_page,
    search_articles,
)

__all__ = [
    'IngestionSummary',
    'run_ingestion',
    'parse_publish_date',
    'extract_articles',
    'create_http_client',
    'fetch_search_page',
    'search_articles',
]
