import httpx
import logging
from datetime import datetime
from typing import Dict, List, Any, Optional

from .extractor import extract_articles

logger = logging.getLogger(__name__)

SEARCH_URL = "https://weixin.sogou.com/weixin"

# Sogou search type codes: 2 searches articles, 1 searches official accounts
SEARCH_TYPES = {
    "keyword": "2",
    "account": "1",
}

HEADERS = {
    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36",
}


def create_http_client(timeout: float = 15.0, transport: Optional[httpx.BaseTransport] = None) -> httpx.Client:
    """Build the client used for every search request of a run"""
    return httpx.Client(headers=HEADERS, timeout=timeout, transport=transport, follow_redirects=True)


def build_search_params(query: str, mode: str) -> Dict[str, str]:
    if mode not in SEARCH_TYPES:
        raise ValueError(f"Unknown search mode: {mode}")
    return {"type": SEARCH_TYPES[mode], "query": query, "ie": "utf8"}


def fetch_search_page(client: httpx.Client, query: str, mode: str) -> Optional[str]:
    """Fetch one search result page. Returns None when the request fails."""
    params = build_search_params(query, mode)

    try:
        response = client.get(SEARCH_URL, params=params, headers=HEADERS)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        logger.warning(f"Search for {mode} '{query}' returned HTTP {e.response.status_code}")
        return None
    except httpx.HTTPError as e:
        logger.error(f"Search request for {mode} '{query}' failed: {e}")
        return None

    return response.text


def search_articles(
    client: httpx.Client, query: str, mode: str, now: Optional[datetime] = None
) -> List[Dict[str, Any]]:
    html = fetch_search_page(client, query, mode)
    if html is None:
        return []
    return list(extract_articles(html, query, now=now))
