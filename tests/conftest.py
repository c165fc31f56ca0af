"""
Shared fixtures: an in-process RefHeap service behind ``httpx.MockTransport``.
"""
import json
from dataclasses import dataclass, field
from urllib.parse import parse_qs

import httpx
import pytest

from refheap.api import Config, RefheapClient

BASE_URL = "https://refheap.test/api"
USERS = {"raynes": "secret", "amalloy": "hunter2"}


def _json(status_code: int, data: dict) -> httpx.Response:
    return httpx.Response(status_code, content=json.dumps(data).encode(),
                          headers={"Content-Type": "application/json"})


@dataclass
class FakeRefheap:
    """
    Minimal RefHeap server: keeps pastes in a dict and answers like the real API.
    """
    pastes: dict[str, dict] = field(default_factory=dict)
    requests: list[httpx.Request] = field(default_factory=list)
    next_id: int = 1

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    @staticmethod
    def form(request: httpx.Request) -> dict[str, str]:
        return {k: v[0] for k, v in parse_qs(request.content.decode(), keep_blank_values=True).items()}

    def add(self, contents: str, language: str = "Plain Text", private: bool = False,
            user: str | None = None) -> dict:
        paste_id = str(self.next_id)
        self.next_id += 1
        paste = {
            "lines": len(contents.splitlines()) or 1,
            "views": 0,
            "date": "2012-01-04T01:44:22.964Z",
            "paste-id": paste_id,
            "language": language,
            "private": private,
            "url": f"https://refheap.test/{paste_id}",
            "user": user,
            "contents": contents,
        }
        self.pastes[paste_id] = paste
        return paste

    def _auth(self, fields: dict[str, str]) -> tuple[str | None, httpx.Response | None]:
        user = fields.get("username")
        if user is None:
            return None, None
        if USERS.get(user) != fields.get("token"):
            return None, _json(401, {"error": "That username and token combination is not valid."})
        return user, None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        parts = request.url.path.removeprefix("/api/").split("/")
        if parts[0] != "paste":
            return httpx.Response(404, text="<html>Not Found</html>")

        if len(parts) == 1 and request.method == "POST":
            return self._create(self.form(request))

        paste = self.pastes.get(parts[1])
        if paste is None:
            return _json(404, {"error": "Paste does not exist."})

        action = parts[2] if len(parts) > 2 else None
        if action == "highlight" and request.method == "GET":
            return _json(200, {"content": f'<div class="highlight"><pre>{paste["contents"]}</pre></div>'})
        if action == "fork" and request.method == "POST":
            return self._fork(paste, self.form(request))
        if action is None and request.method == "GET":
            paste["views"] += 1
            return _json(200, paste)
        if action is None and request.method == "POST":
            return self._edit(paste, self.form(request))
        if action is None and request.method == "DELETE":
            return self._delete(paste, dict(request.url.params))
        return httpx.Response(405)

    def _create(self, fields: dict[str, str]) -> httpx.Response:
        user, error = self._auth(fields)
        if error:
            return error
        if not fields.get("contents"):
            return _json(400, {"error": "Your paste cannot be empty."})
        paste = self.add(fields["contents"], fields.get("language", "Plain Text"),
                         fields.get("private") == "true", user)
        return _json(201, paste)

    def _owner_check(self, paste: dict, fields: dict[str, str]) -> httpx.Response | None:
        user, error = self._auth(fields)
        if error:
            return error
        if user is None or user != paste["user"]:
            return _json(403, {"error": "You can't edit this paste."})
        return None

    def _edit(self, paste: dict, fields: dict[str, str]) -> httpx.Response:
        error = self._owner_check(paste, fields)
        if error:
            return error
        if "contents" in fields:
            paste["contents"] = fields["contents"]
            paste["lines"] = len(fields["contents"].splitlines()) or 1
        if "language" in fields:
            paste["language"] = fields["language"]
        paste["private"] = fields.get("private") == "true"
        return _json(200, paste)

    def _delete(self, paste: dict, params: dict[str, str]) -> httpx.Response:
        error = self._owner_check(paste, params)
        if error:
            return error
        del self.pastes[paste["paste-id"]]
        return httpx.Response(204)

    def _fork(self, paste: dict, fields: dict[str, str]) -> httpx.Response:
        user, error = self._auth(fields)
        if error:
            return error
        copy = self.add(paste["contents"], paste["language"], paste["private"], user)
        return _json(200, copy)


@pytest.fixture
def fake_refheap():
    """A fresh fake service holding paste "1", owned by raynes"""
    service = FakeRefheap()
    service.add("(begin)", "Clojure", user="raynes")
    return service


@pytest.fixture
def transport(fake_refheap):
    return httpx.MockTransport(fake_refheap.handler)


@pytest.fixture
def config():
    """Config authenticated as the owner of paste 1"""
    return Config.full(BASE_URL, "raynes", "secret")


@pytest.fixture
def anon_config():
    return Config.with_base_url(BASE_URL)


@pytest.fixture
def client(config, transport):
    with RefheapClient(config, transport=transport) as c:
        yield c


@pytest.fixture
def anon_client(anon_config, transport):
    with RefheapClient(anon_config, transport=transport) as c:
        yield c
