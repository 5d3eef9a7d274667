"""Declarative resource handlers built on the accessors.

Each handler keeps a :class:`ResourceData` in step with Rollbar. An empty
``id`` means the resource is absent; a ``NotFoundError`` during a read clears
the ``id`` instead of reporting a failure.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Literal

from pydantic import ValidationError as ModelValidationError

from .errors import NotFoundError, RollbarClientError, ValidationError
from .models import TEAM_ACCESS_LEVELS, ProjectAccessTokenArgs

if TYPE_CHECKING:
    from .client import RollbarClient

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    severity: Severity
    summary: str
    detail: str = ""
    attribute_path: tuple[str, ...] = ()


@dataclass(slots=True)
class ResourceData:
    id: str = ""
    values: dict[str, Any] = field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        return self.values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.values[key] = value

    @property
    def exists(self) -> bool:
        return self.id != ""


def diagnostics_from_error(error: Exception) -> list[Diagnostic]:
    if isinstance(error, ValidationError):
        return [Diagnostic("error", str(error), attribute_path=(error.field,))]
    return [Diagnostic("error", str(error))]


def validate_access_level(value: Any, path: tuple[str, ...] = ("access_level",)) -> list[Diagnostic]:
    if value in TEAM_ACCESS_LEVELS:
        return []
    return [
        Diagnostic(
            "error",
            f'Invalid access_level: "{value}"',
            detail='Must be "standard", "light", or "view"',
            attribute_path=path,
        )
    ]


def _numeric_id(data: ResourceData) -> int:
    try:
        return int(data.id)
    except ValueError as error:
        raise ValueError(f"resource id {data.id!r} is not numeric") from error


class TeamResource:
    def __init__(self, client: RollbarClient, *, logger: logging.Logger | None = None) -> None:
        self._client = client
        self._logger = logger or logging.getLogger(__name__)

    def create(self, data: ResourceData) -> list[Diagnostic]:
        name = data.get("name", "")
        level = data.get("access_level", "standard")
        diagnostics = validate_access_level(level)
        if diagnostics:
            return diagnostics

        self._logger.info("creating team %r (%s)", name, level)
        try:
            team = self._client.teams.create(name, level)
        except RollbarClientError as error:
            self._logger.error("error creating team %r: %s", name, error)
            return diagnostics_from_error(error)

        data.id = str(team.id)
        return self.read(data)

    def read(self, data: ResourceData) -> list[Diagnostic]:
        team_id = _numeric_id(data)
        try:
            team = self._client.teams.read(team_id)
        except NotFoundError:
            self._logger.warning("team %s not found, removing from state", team_id)
            data.id = ""
            return []
        except RollbarClientError as error:
            self._logger.error("error reading team %s: %s", team_id, error)
            return diagnostics_from_error(error)

        data.set("name", team.name)
        data.set("account_id", team.account_id)
        data.set("access_level", team.access_level)
        return []

    def delete(self, data: ResourceData) -> list[Diagnostic]:
        team_id = _numeric_id(data)
        try:
            self._client.teams.delete(team_id)
        except RollbarClientError as error:
            self._logger.error("error deleting team %s: %s", team_id, error)
            return diagnostics_from_error(error)
        data.id = ""
        return []

    def import_state(self, team_id: str) -> ResourceData:
        return ResourceData(id=team_id)


class ProjectAccessTokenResource:
    """Tracks a token by its access token string; lookups go by project and name."""

    def __init__(self, client: RollbarClient, *, logger: logging.Logger | None = None) -> None:
        self._client = client
        self._logger = logger or logging.getLogger(__name__)

    def create(self, data: ResourceData) -> list[Diagnostic]:
        try:
            args = ProjectAccessTokenArgs(
                project_id=data.get("project_id", 0),
                name=data.get("name", ""),
                scopes=list(data.get("scopes") or []),
                status=data.get("status"),
                rate_limit_window_size=data.get("rate_limit_window_size"),
                rate_limit_window_count=data.get("rate_limit_window_count"),
            )
            token = self._client.access_tokens.create(args)
        except (RollbarClientError, ModelValidationError) as error:
            self._logger.error("error creating project access token: %s", error)
            return diagnostics_from_error(error)

        data.id = token.access_token
        return self.read(data)

    def read(self, data: ResourceData) -> list[Diagnostic]:
        project_id = data.get("project_id", 0)
        name = data.get("name", "")
        try:
            token = self._client.access_tokens.read(project_id, name)
        except NotFoundError:
            self._logger.warning("access token %r not found, removing from state", name)
            data.id = ""
            return []
        except RollbarClientError as error:
            return diagnostics_from_error(error)

        data.id = token.access_token
        data.set("access_token", token.access_token)
        data.set("scopes", list(token.scopes))
        data.set("status", token.status)
        data.set("rate_limit_window_size", token.rate_limit_window_size)
        data.set("rate_limit_window_count", token.rate_limit_window_count)
        data.set("date_created", token.date_created)
        data.set("date_modified", token.date_modified)
        return []

    def delete(self, data: ResourceData) -> list[Diagnostic]:
        try:
            self._client.access_tokens.delete(data.id)
        except RollbarClientError as error:
            return diagnostics_from_error(error)
        data.id = ""
        return []
