import json
import re

import httpx
import pytest
from polyfactory.factories.pydantic_factory import ModelFactory

from chimpfields.chimpclient import ChimpClient, ClientConfig
from chimpfields.chimpclient.services.merge_field_service import MergeFieldService
from chimpfields.mergefields import MergeField, Options

# Shared Constants
API_KEY = "0123456789abcdef0123456789abcdef-us6"
BASE_URL = "https://us6.api.mailchimp.com/3.0/"
LIST_ID = "a1b2c3d4e5"


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(api_key=API_KEY)


@pytest.fixture
def client(config: ClientConfig):
    """Fixture to provide a fresh client, closed after the test."""
    with ChimpClient(config) as c:
        yield c


@pytest.fixture
def service(client: ChimpClient) -> MergeFieldService:
    """Fixture to provide the MergeFieldService of the client."""
    return MergeFieldService(client)


class MergeFieldFactory(ModelFactory[MergeField]):
    __model__ = MergeField

    list_id = LIST_ID

    @classmethod
    def merge_id(cls) -> int:
        return cls.__random__.randint(1, 10_000)

    @classmethod
    def options(cls) -> Options:
        return Options(size=25)


@pytest.fixture(scope="session")
def merge_field_factory() -> type[MergeFieldFactory]:
    """
    Returns the Factory CLASS itself, allowing tests to call .build()
    with different overrides.
    """
    return MergeFieldFactory


class FakeMergeFieldServer:
    """In-memory stand-in for the merge-field endpoints of one account.

    Every list starts with the default FNAME and LNAME fields, like a new
    Mailchimp list. The fields are returned in reverse creation order to make
    sure nothing relies on positions.
    """

    _path = re.compile(
        r"^/3\.0/lists/(?P<list_id>[^/]+)/merge-fields(?:/(?P<mid>\d+))?$"
    )

    def __init__(self):
        self.lists: dict[str, dict[int, dict]] = {}
        self._next_id: dict[str, int] = {}

    def _fields(self, list_id: str) -> dict[int, dict]:
        if list_id not in self.lists:
            self.lists[list_id] = {}
            self._next_id[list_id] = 1
            for tag, name in (("FNAME", "First Name"), ("LNAME", "Last Name")):
                self._store(list_id, {"tag": tag, "name": name, "type": "text"})
        return self.lists[list_id]

    def _store(self, list_id: str, payload: dict) -> dict:
        merge_id = self._next_id[list_id]
        self._next_id[list_id] += 1
        field = {
            "merge_id": merge_id,
            "tag": payload.get("tag") or f"MMERGE{merge_id}",
            "name": payload["name"],
            "type": payload["type"],
            "required": payload.get("required", False),
            "default_value": payload.get("default_value", ""),
            "public": payload.get("public", False),
            "display_order": payload.get("display_order", merge_id + 1),
            "options": payload.get("options", {}),
            "help_text": payload.get("help_text", ""),
            "list_id": list_id,
            "_links": [],
        }
        self.lists[list_id][merge_id] = field
        return field

    @staticmethod
    def _error(status: int, title: str, detail: str) -> httpx.Response:
        return httpx.Response(
            status,
            json={
                "type": "https://mailchimp.com/developer/marketing/docs/errors/",
                "title": title,
                "status": status,
                "detail": detail,
                "instance": "00000000-0000-0000-0000-000000000000",
            },
        )

    def handle(self, request: httpx.Request) -> httpx.Response:
        match = self._path.match(request.url.path)
        if match is None:
            return self._error(404, "Resource Not Found", "Unknown path.")
        fields = self._fields(match["list_id"])
        method = request.method

        if match["mid"] is None:
            if method == "POST":
                payload = json.loads(request.content or b"{}")
                if "name" not in payload or "type" not in payload:
                    return self._error(400, "Invalid Resource", "Missing name/type.")
                tags = {f["tag"] for f in fields.values()}
                if payload.get("tag") in tags:
                    detail = (
                        f"A Merge Field with the tag {payload['tag']!r} "
                        "already exists for this list."
                    )
                    return self._error(400, "Invalid Resource", detail)
                field = self._store(match["list_id"], payload)
                return httpx.Response(200, json=field)
            if method == "GET":
                items = list(reversed(list(fields.values())))
                field_type = request.url.params.get("type")
                if field_type:
                    items = [f for f in items if f["type"] == field_type]
                total = len(items)
                offset = int(request.url.params.get("offset", 0))
                count = int(request.url.params.get("count", 10))
                return httpx.Response(
                    200,
                    json={
                        "merge_fields": items[offset : offset + count],
                        "list_id": match["list_id"],
                        "total_items": total,
                    },
                )
            return self._error(405, "Method Not Allowed", "Not allowed.")

        merge_id = int(match["mid"])
        if merge_id not in fields:
            return self._error(
                404,
                "Resource Not Found",
                "The requested resource could not be found.",
            )
        if method == "GET":
            return httpx.Response(200, json=fields[merge_id])
        if method == "PATCH":
            payload = json.loads(request.content or b"{}")
            if "name" not in payload:
                return self._error(400, "Invalid Resource", "Name is required.")
            fields[merge_id].update(
                {k: v for k, v in payload.items() if k not in ("tag", "type")}
            )
            return httpx.Response(200, json=fields[merge_id])
        if method == "DELETE":
            del fields[merge_id]
            return httpx.Response(204)
        return self._error(405, "Method Not Allowed", "Not allowed.")


@pytest.fixture
def fake_server(respx_mock) -> FakeMergeFieldServer:
    """Route all merge-field requests of the test to an in-memory server."""
    server = FakeMergeFieldServer()
    respx_mock.route(url__startswith=f"{BASE_URL}lists/").mock(
        side_effect=server.handle
    )
    return server
