import json

import httpx
import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app

ADMIN_PASSWORD = "test-secret"
SUPABASE_URL = "https://mirror.supabase.test"


def make_settings(tmp_path, **overrides):
    values = dict(
        DATABASE_URL=f"sqlite:///{tmp_path / 'catalog.db'}",
        ADMIN_PASSWORD=ADMIN_PASSWORD,
        SUPABASE_URL=None,
        SUPABASE_KEY=None,
        WHATSAPP_PHONE="+91 79071 20478",
        STATIC_DIR=None,
    )
    values.update(overrides)
    return Settings(_env_file=None, **values)


class FakeSupabase:
    """Minimal PostgREST stand-in for httpx.MockTransport"""

    def __init__(self):
        self.tables = {"categories": [], "products": []}
        self.requests = []
        self.next_id = 1000

    def _matches(self, row, params):
        if "id" in params and str(row["id"]) != params["id"][len("eq."):]:
            return False
        if "category" in params and row.get("category") != params["category"][len("eq."):]:
            return False
        return True

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        table = request.url.path.rsplit("/", 1)[-1]
        rows = self.tables[table]
        params = request.url.params

        if request.method == "GET":
            result = [row for row in rows if self._matches(row, params)]
            if params.get("order") == "id.desc":
                result.sort(key=lambda row: row["id"], reverse=True)
            return httpx.Response(200, json=result)

        if request.method == "POST":
            created = []
            for values in json.loads(request.content):
                if table == "categories" and any(r["name"] == values["name"] for r in rows):
                    return httpx.Response(409, json={"message": "duplicate key"})
                self.next_id += 1
                row = {"id": self.next_id, **values}
                rows.append(row)
                created.append(row)
            return httpx.Response(201, json=created)

        if request.method == "PATCH":
            values = json.loads(request.content)
            for row in rows:
                if self._matches(row, params):
                    row.update(values)
            return httpx.Response(204)

        if request.method == "DELETE":
            self.tables[table] = [row for row in rows if not self._matches(row, params)]
            return httpx.Response(204)

        return httpx.Response(405)


@pytest.fixture
def settings(tmp_path):
    return make_settings(tmp_path)


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as client:
        yield client


@pytest.fixture
def supabase():
    return FakeSupabase()


@pytest.fixture
def mirror_settings(tmp_path):
    return make_settings(tmp_path, SUPABASE_URL=SUPABASE_URL, SUPABASE_KEY="anon-key")


@pytest.fixture
def mirror_client(mirror_settings, supabase):
    app = create_app(mirror_settings, mirror_transport=httpx.MockTransport(supabase))
    with TestClient(app) as client:
        yield client


def admin(**payload):
    return {"password": ADMIN_PASSWORD, **payload}
