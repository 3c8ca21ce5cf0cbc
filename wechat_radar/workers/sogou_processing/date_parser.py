import re
from datetime import datetime, timedelta, timezone
from typing import Optional

from dateutil import parser as dateparser

HOURS_AGO = "小时前"
MINUTES_AGO = "分钟前"
YESTERDAY = "昨天"

_NUMBER_RE = re.compile(r"\d+")


def _leading_number(text: str) -> Optional[int]:
    match = _NUMBER_RE.search(text)
    return int(match.group()) if match else None


def _ago(text: str, now: datetime, unit: str) -> datetime:
    amount = _leading_number(text)
    if amount is None:
        return now
    try:
        return now - timedelta(**{unit: amount})
    except OverflowError:
        return now

def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_publish_date(text: str, now: Optional[datetime] = None) -> datetime:
    """Turn a listing-page date token into an absolute, timezone-aware UTC datetime.

    Handles "N小时前", "N分钟前", "昨天" and anything dateutil understands.
    Naive results are taken to be UTC. Unrecognized input falls back to
    ``now``; this never raises.
    """
    now = _as_utc(now) if now else datetime.now(timezone.utc)
    text = (text or "").strip()

    if HOURS_AGO in text:
        return _ago(text, now, "hours")

    if MINUTES_AGO in text:
        return _ago(text, now, "minutes")

    if text == YESTERDAY:
        return now - timedelta(hours=24)

    if not text:
        return now

    # Out-of-range offsets such as "+38" only fail once the offset is applied
    try:
        return _as_utc(dateparser.parse(text))
    except (ValueError, OverflowError):
        return now
