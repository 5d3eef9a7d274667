from __future__ import annotations

import json
import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

import httpx
import pytest

from rollbar_client import RollbarClient

API_KEY = "secret-token"
ACCOUNT_ID = 4242

_PAT_PATH = re.compile(r"^/api/1/project/(\d+)/access_tokens$")
_TEAM_PATH = re.compile(r"^/api/1/team/(\d+)$")


def _envelope(result: Any) -> dict[str, Any]:
    return {"err": 0, "result": result}


def _failure(status: int, message: str) -> httpx.Response:
    return httpx.Response(status, json={"err": 1, "message": message})


@dataclass
class FakeRollbar:
    """In-memory stand-in for the Rollbar API."""

    projects: dict[int, list[dict[str, Any]]] = field(default_factory=dict)
    teams: dict[int, dict[str, Any]] = field(default_factory=dict)
    requests: list[httpx.Request] = field(default_factory=list)
    next_team_id: int = 100
    next_token: int = 1

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.headers.get("X-Rollbar-Access-Token") != API_KEY:
            return _failure(401, "Invalid access token")

        path = request.url.path
        match = _PAT_PATH.match(path)
        if match:
            return self._access_tokens(request, int(match.group(1)))
        match = _TEAM_PATH.match(path)
        if match:
            return self._team(request, int(match.group(1)))
        if path == "/api/1/teams":
            return self._teams(request)
        return _failure(404, "Not found")

    def _access_tokens(self, request: httpx.Request, project_id: int) -> httpx.Response:
        if project_id not in self.projects:
            return _failure(404, "Project not found")

        if request.method == "GET":
            return httpx.Response(200, json=_envelope(self.projects[project_id]))

        body = json.loads(request.content)
        token = {
            "project_id": project_id,
            "access_token": f"tok{self.next_token:029d}",
            "name": body["name"],
            "scopes": body["scopes"],
            "status": body.get("status", "enabled"),
            "rate_limit_window_size": body.get("rate_limit_window_size"),
            "rate_limit_window_count": body.get("rate_limit_window_count"),
            "date_created": 1600000000 + self.next_token,
            "date_modified": 1600000000 + self.next_token,
        }
        self.next_token += 1
        self.projects[project_id].append(token)
        # Rollbar answers creates with 200 rather than 201.
        return httpx.Response(200, json=_envelope(token))

    def _teams(self, request: httpx.Request) -> httpx.Response:
        if request.method == "GET":
            return httpx.Response(200, json=_envelope(list(self.teams.values())))

        body = json.loads(request.content)
        team = {
            "id": self.next_team_id,
            "name": body["name"],
            "access_level": body.get("access_level", "standard"),
            "account_id": ACCOUNT_ID,
        }
        self.teams[self.next_team_id] = team
        self.next_team_id += 1
        return httpx.Response(200, json=_envelope(team))

    def _team(self, request: httpx.Request, team_id: int) -> httpx.Response:
        if team_id not in self.teams:
            return _failure(404, "Team not found")
        if request.method == "DELETE":
            del self.teams[team_id]
            return httpx.Response(200, json={"err": 0})
        return httpx.Response(200, json=_envelope(self.teams[team_id]))


def make_client(handler: Any, *, api_key: str = API_KEY) -> RollbarClient:
    http_client = httpx.Client(
        base_url="https://api.rollbar.com",
        headers={"X-Rollbar-Access-Token": api_key},
        transport=httpx.MockTransport(handler),
    )
    return RollbarClient(api_key=api_key, http_client=http_client)


@pytest.fixture
def fake_rollbar() -> FakeRollbar:
    return FakeRollbar()


@pytest.fixture
def client(fake_rollbar: FakeRollbar) -> Iterator[RollbarClient]:
    rollbar = make_client(fake_rollbar)
    try:
        yield rollbar
    finally:
        rollbar.close()


@pytest.fixture
def client_for() -> Iterator[Any]:
    """Build clients around arbitrary MockTransport handlers."""
    created: list[RollbarClient] = []

    def build(handler: Any, *, api_key: str = API_KEY) -> RollbarClient:
        rollbar = make_client(handler, api_key=api_key)
        created.append(rollbar)
        return rollbar

    yield build
    for rollbar in created:
        rollbar.close()
