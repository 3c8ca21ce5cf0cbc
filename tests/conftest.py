import os
import sys
from pathlib import Path

import httpx
import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Importing the API and worker modules builds engines from the environment; keep them off the real database.
os.environ["DATABASE_URL"] = "sqlite://"

from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from wechat_radar.config import Settings
from wechat_radar.dependencies import get_http_client
from wechat_radar.main import create_app

ADMIN_PASSWORD = "admin-pass"
CRON_SECRET = "cron-secret"


def news_box(title="", url="", summary="", account="", date="", cover=None):
    img = f'<div class="img-box"><a href="{url}"><img src="{cover}"></a></div>' if cover else ""
    return f"""
    <div class="news-box">
      {img}
      <div class="txt-box">
        <h3><a href="{url}">{title}</a></h3>
        <p class="txt-info">{summary}</p>
        <div class="account"><a href="#">{account}</a></div>
        <span class="s-p">{date}</span>
      </div>
    </div>
    """


def result_page(*boxes):
    return "<html><body><div class='news-list'>" + "".join(boxes) + "</div></body></html>"


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture()
def session(engine):
    with Session(engine) as session:
        yield session


class FakeSogou:
    """Serves canned result pages keyed by query and records every request"""

    def __init__(self):
        self.pages = {}
        self.failures = set()
        self.requests = []

    def add(self, query, html):
        self.pages[query] = html

    def fail(self, query):
        self.failures.add(query)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        query = request.url.params.get("query")
        if query in self.failures:
            return httpx.Response(503, text="busy")
        return httpx.Response(200, text=self.pages.get(query, result_page()))

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handler))


@pytest.fixture()
def sogou():
    return FakeSogou()


@pytest.fixture()
def settings():
    return Settings(
        database_url="sqlite://",
        admin_password=ADMIN_PASSWORD,
        cron_secret=CRON_SECRET,
        fetch_delay_seconds=0,
    )


@pytest.fixture()
def client(engine, sogou, settings):
    app = create_app(settings)
    app.state.engine = engine

    def _http_client_override():
        with sogou.client() as http_client:
            yield http_client

    app.dependency_overrides[get_http_client] = _http_client_override
    return TestClient(app)


@pytest.fixture()
def admin_headers():
    return {"Authorization": f"Bearer {ADMIN_PASSWORD}"}
