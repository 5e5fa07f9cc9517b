"""In-memory category backend and recording notifier shared by the tests."""
import json

import httpx

from client.api_client import ApiClient
from client.category_api import CategoryAPI
from services.notifier import Notifier


class FakeBackend:
    """Serves /api/categories from a list; records every request.

    `fail` maps (method, path) to a status code to return instead.
    `raise_on` holds (method, path) pairs that raise a transport error.
    """

    def __init__(self, categories=None):
        self.categories = [dict(c) for c in (categories or [])]
        self.requests: list[tuple[str, str, dict | None]] = []
        self.content_types: dict[tuple[str, str], str | None] = {}
        self.fail: dict[tuple[str, str], int] = {}
        self.raise_on: set[tuple[str, str]] = set()
        self._next_id = max((c["id"] for c in self.categories), default=0) + 1

    def handler(self, request: httpx.Request) -> httpx.Response:
        method, path = request.method, request.url.path
        body = json.loads(request.content) if request.content else None
        self.requests.append((method, path, body))
        self.content_types[(method, path)] = request.headers.get("content-type")

        if (method, path) in self.raise_on:
            raise httpx.ConnectError("connection refused", request=request)
        if (method, path) in self.fail:
            return httpx.Response(self.fail[(method, path)], json={"error": "nope"})

        if path == "/api/categories":
            if method == "GET":
                return httpx.Response(200, json=self.categories)
            if method == "POST":
                created = {"id": self._next_id, **body}
                self._next_id += 1
                self.categories.append(created)
                return httpx.Response(201, json=created)
        else:
            cat_id = int(path.rsplit("/", 1)[1])
            match = next((c for c in self.categories if c["id"] == cat_id), None)
            if match is None:
                return httpx.Response(404, json={"error": "not found"})
            if method == "PUT":
                match.update(body)
                return httpx.Response(200, json=match)
            if method == "DELETE":
                self.categories.remove(match)
                return httpx.Response(200, json={})
        return httpx.Response(405)

    def category_api(self) -> CategoryAPI:
        api = ApiClient(base_url="http://test", transport=httpx.MockTransport(self.handler))
        return CategoryAPI(api)

    def calls(self) -> list[tuple[str, str]]:
        return [(m, p) for m, p, _ in self.requests]


class RecordingNotifier(Notifier):
    def __init__(self):
        self.messages: list[tuple[str, str]] = []

    def success(self, message: str) -> None:
        self.messages.append(("success", message))

    def error(self, message: str) -> None:
        self.messages.append(("error", message))
