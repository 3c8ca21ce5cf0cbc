from datetime import datetime, timedelta, timezone

import pytest

from wechat_radar.workers.sogou_processing.date_parser import parse_publish_date

NOW = datetime(2024, 2, 10, 12, 30, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize("hours", [0, 1, 5, 23, 48])
def test_hours_ago(hours):
    assert parse_publish_date(f"{hours}小时前", NOW) == NOW - timedelta(hours=hours)


@pytest.mark.parametrize("minutes", [0, 1, 45, 59])
def test_minutes_ago(minutes):
    assert parse_publish_date(f"{minutes}分钟前", NOW) == NOW - timedelta(minutes=minutes)


def test_yesterday_is_exactly_24_hours_back():
    assert parse_publish_date("昨天", NOW) == NOW - timedelta(hours=24)


def test_absolute_date_is_taken_as_utc():
    parsed = parse_publish_date("2024-02-08", NOW)
    assert parsed == datetime(2024, 2, 8, tzinfo=timezone.utc)
    assert parsed.utcoffset() == timedelta(0)


def test_offset_date_is_converted_to_utc():
    parsed = parse_publish_date("2024-02-08T10:00:00+08:00", NOW)
    assert parsed == datetime(2024, 2, 8, 2, 0, tzinfo=timezone.utc)
    assert parsed.utcoffset() == timedelta(0)


def test_default_now_is_aware_utc():
    parsed = parse_publish_date("")
    assert parsed.utcoffset() == timedelta(0)
    assert abs(datetime.now(timezone.utc) - parsed) < timedelta(minutes=1)


def test_naive_now_is_treated_as_utc():
    naive = NOW.replace(tzinfo=None)
    assert parse_publish_date("1小时前", naive) == NOW - timedelta(hours=1)


@pytest.mark.parametrize("token", ["", "   ", "刚刚", "garbage", "3天前", "小时前"])
def test_unrecognized_tokens_fall_back_to_now(token):
    assert parse_publish_date(token, NOW) == NOW


@pytest.mark.parametrize("token", ["9:1+38.", "9A+65p", " /1:2+58", "T.8A+62"])
def test_out_of_range_utc_offsets_fall_back_to_now(token):
    assert parse_publish_date(token, NOW) == NOW


def test_surrounding_text_is_ignored_for_relative_tokens():
    assert parse_publish_date(" 约3小时前 ", NOW) == NOW - timedelta(hours=3)


def test_huge_offset_does_not_raise():
    assert parse_publish_date("99999999999小时前", NOW) == NOW
