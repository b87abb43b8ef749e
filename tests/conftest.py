import httpx
import pytest
from fastapi.testclient import TestClient

from app.api.dependencies import get_http_client, get_route_store, get_settings
from app.core.config import Settings
from app.main import app
from app.services.saved_route_service import RouteStore

OSRM_URL = "http://osrm.test/route/v1/driving"
GEOCODE_URL = "http://geocode.test/search"

SAMPLE_GEOMETRY = {
    "type": "LineString",
    "coordinates": [[-73.0, 40.0], [-73.5, 40.5], [-74.0, 41.0]],
}


class FakeUpstream:
    """Records outbound requests and answers them from canned responses."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.places: dict[str, list[dict]] = {}
        self.routes: list[dict] = [
            {"distance": 12345.6, "duration": 789.0, "geometry": SAMPLE_GEOMETRY}
        ]
        self.geocode_status = 200
        self.route_status = 200
        self.route_error: Exception | None = None
        self.geocode_body = None
        self.route_body = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.host == "geocode.test":
            if self.geocode_status != 200:
                return httpx.Response(self.geocode_status, text="unavailable")
            if self.geocode_body is not None:
                return httpx.Response(200, json=self.geocode_body)
            return httpx.Response(200, json=self.places.get(request.url.params["q"], []))
        if self.route_error is not None:
            raise self.route_error
        if self.route_status != 200:
            return httpx.Response(self.route_status, json={"code": "InvalidQuery"})
        if self.route_body is not None:
            return httpx.Response(200, json=self.route_body)
        return httpx.Response(200, json={"code": "Ok", "routes": self.routes})

    def route_paths(self) -> list[str]:
        return [r.url.path for r in self.requests if r.url.host == "osrm.test"]


class FakeCursor:
    def __init__(self, docs):
        self.docs = docs

    def sort(self, key, direction):
        self.docs = sorted(self.docs, key=lambda d: d[key], reverse=direction < 0)
        return self

    def limit(self, n):
        self.docs = self.docs[:n]
        return self

    async def to_list(self, length=None):
        return list(self.docs[:length])


class FakeInsertResult:
    def __init__(self, inserted_id):
        self.inserted_id = inserted_id


class FakeCollection:
    """Just enough of a motor collection for the saved route store."""

    def __init__(self):
        self.docs: list[dict] = []
        self.fail_writes = False

    async def insert_one(self, doc):
        from pymongo.errors import PyMongoError

        if self.fail_writes:
            raise PyMongoError("write failed")
        doc = dict(doc, _id=f"id{len(self.docs) + 1}")
        self.docs.append(doc)
        return FakeInsertResult(doc["_id"])

    def find(self, query):
        return FakeCursor(list(self.docs))


@pytest.fixture
def test_settings():
    return Settings(osrm_base_url=OSRM_URL, geocode_url=GEOCODE_URL, geocode_user_agent="easymap-tests")


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def http_client(upstream):
    return httpx.AsyncClient(transport=httpx.MockTransport(upstream.handler))


@pytest.fixture
def collection():
    return FakeCollection()


@pytest.fixture
def store():
    return RouteStore()


@pytest.fixture
def client(test_settings, http_client, store):
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_http_client] = lambda: http_client
    app.dependency_overrides[get_route_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()
