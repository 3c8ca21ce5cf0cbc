from sqlmodel import Session, select

from wechat_radar.config import Settings
from wechat_radar.models import Article, Subscription
from wechat_radar.workers import fetch_worker
from wechat_radar.workers.celery_app import celery_app

from conftest import news_box, result_page


def test_task_is_registered():
    assert "wechat_radar.workers.fetch_worker.fetch_all_targets" in celery_app.tasks


def test_fetch_all_targets_runs_ingestion(engine, sogou, monkeypatch):
    with Session(engine) as session:
        session.add(Subscription(account_name="人民日报"))
        session.commit()
    sogou.add("人民日报", result_page(news_box(title="t", url="https://mp.weixin.qq.com/s/rm")))

    monkeypatch.setattr(fetch_worker, "engine", engine)
    monkeypatch.setattr(fetch_worker, "settings", Settings(database_url="sqlite://", fetch_delay_seconds=0))
    monkeypatch.setattr(fetch_worker, "create_http_client", lambda timeout: sogou.client())

    result = fetch_worker.fetch_all_targets()

    assert result == {
        "success": True,
        "totalFetched": 1,
        "totalSaved": 1,
        "keywords": 0,
        "subscriptions": 1,
    }
    with Session(engine) as session:
        assert session.exec(select(Article)).one().category == "unknown"


def test_fetch_all_targets_reports_unexpected_errors(monkeypatch):
    def broken_session(*args, **kwargs):
        raise RuntimeError("database unavailable")

    monkeypatch.setattr(fetch_worker, "Session", broken_session)

    result = fetch_worker.fetch_all_targets()

    assert result == {"success": False, "error": "database unavailable"}
