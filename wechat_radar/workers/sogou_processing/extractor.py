from datetime import datetime
from typing import Any, Dict, Iterator, Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup

from wechat_radar.models import UNKNOWN_CATEGORY
from .date_parser import parse_publish_date

SEARCH_ORIGIN = "https://weixin.sogou.com/"
SUMMARY_MAX_LENGTH = 200

ITEM_SELECTOR = ".news-box"
TITLE_SELECTOR = ".txt-box h3 a"
SUMMARY_SELECTOR = ".txt-box p"
ACCOUNT_SELECTOR = ".account a, a.account"
DATE_SELECTOR = ".s-p"
COVER_SELECTOR = ".img-box img"


def _text(node, selector: str) -> str:
    found = node.select_one(selector)
    return found.get_text().strip() if found else ""


def _attr(node, selector: str, name: str) -> str:
    found = node.select_one(selector)
    if not found:
        return ""
    return (found.get(name) or "").strip()


def extract_articles(html: str, query: str, now: Optional[datetime] = None) -> Iterator[Dict[str, Any]]:
    """Yield article records from a Sogou WeChat result page, in document order.

    Items without a title or a link are skipped. The generator is single pass;
    call again to re-parse.
    """
    soup = BeautifulSoup(html or "", "html.parser")

    for item in soup.select(ITEM_SELECTOR):
        title = _text(item, TITLE_SELECTOR)
        href = _attr(item, TITLE_SELECTOR, "href")
        if not title or not href:
            continue

        cover = _attr(item, COVER_SELECTOR, "src")

        yield {
            "title": title,
            "url": urljoin(SEARCH_ORIGIN, href),
            "summary": _text(item, SUMMARY_SELECTOR)[:SUMMARY_MAX_LENGTH],
            "account_name": _text(item, ACCOUNT_SELECTOR),
            "cover_url": urljoin(SEARCH_ORIGIN, cover) if cover else None,
            "published_at": parse_publish_date(_text(item, DATE_SELECTOR), now=now),
            "read_count": 0,  # Sogou does not expose engagement numbers
            "like_count": 0,
            "category": UNKNOWN_CATEGORY,
            "keywords": [query],
        }
