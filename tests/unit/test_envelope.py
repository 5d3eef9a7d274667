from __future__ import annotations

import pytest

from rollbar_client.envelope import ErrorResult, decode_envelope, decode_error_body
from rollbar_client.errors import ResponseDecodeError
from rollbar_client.models import ProjectAccessToken, Team


def test_decode_single_entity() -> None:
    payload = {"err": 0, "result": {"id": 7, "name": "ops", "access_level": "view", "account_id": 1}}

    team = decode_envelope("teams.read", payload, Team)

    assert team == Team(id=7, name="ops", access_level="view", account_id=1)


def test_decode_accepts_error_field_name() -> None:
    payload = {"error": 0, "result": []}

    assert decode_envelope("access_tokens.list", payload, list[ProjectAccessToken]) == []


def test_decode_sequence_maps_wire_names() -> None:
    payload = {
        "err": 0,
        "result": [
            {
                "name": "deploy",
                "project_id": 12,
                "access_token": "abc",
                "scopes": ["write", "read"],
                "status": "enabled",
                "rate_limit_window_size": 60,
                "rate_limit_window_count": 500,
                "date_created": 1600000000,
                "date_modified": 1600000001,
            }
        ],
    }

    tokens = decode_envelope("access_tokens.list", payload, list[ProjectAccessToken])

    assert len(tokens) == 1
    token = tokens[0]
    assert token.project_id == 12
    assert token.access_token == "abc"
    assert token.scopes == ["write", "read"]
    assert token.rate_limit_window_count == 500
    assert token.date_modified == 1600000001


def test_decode_failure_carries_context() -> None:
    with pytest.raises(ResponseDecodeError) as error_info:
        decode_envelope("teams.read", {"err": 0, "result": {"name": "missing id"}}, Team)

    error = error_info.value
    assert error.operation == "teams.read"
    assert "Team" in error.model_name
    assert error.raw_sample == {"err": 0, "result": {"name": "missing id"}}
    assert error.errors


def test_decode_error_body() -> None:
    decoded = decode_error_body({"err": 1, "message": "Project not found"})

    assert isinstance(decoded, ErrorResult)
    assert decoded.error == 1
    assert decoded.message == "Project not found"


def test_decode_error_body_keeps_unknown_shapes() -> None:
    assert decode_error_body("<html>bad gateway</html>") == "<html>bad gateway</html>"
    assert decode_error_body({"detail": "nope"}) == {"detail": "nope"}
    assert decode_error_body(None) is None
