"""Public data models for the Rollbar client."""

from __future__ import annotations

from typing import Any, Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field

ProjectAccessTokenScope: TypeAlias = Literal["write", "read", "post_server_item", "post_client_server"]
ProjectAccessTokenStatus: TypeAlias = Literal["enabled", "disabled"]
TeamAccessLevel: TypeAlias = Literal["standard", "light", "view"]

TEAM_ACCESS_LEVELS: tuple[str, ...] = ("standard", "light", "view")


class ProjectAccessToken(BaseModel):
    """A Rollbar project access token."""

    model_config = ConfigDict(frozen=True)

    name: str
    project_id: int
    access_token: str = Field(min_length=1)
    scopes: list[ProjectAccessTokenScope]
    status: ProjectAccessTokenStatus | None = None
    rate_limit_window_size: int | None = None
    rate_limit_window_count: int | None = None
    date_created: int | None = None
    date_modified: int | None = None


class ProjectAccessTokenArgs(BaseModel):
    """Arguments for creating a project access token.

    Optional fields left as ``None`` are omitted from the request so Rollbar
    applies its own defaults.
    """

    project_id: int
    name: str
    scopes: list[ProjectAccessTokenScope]
    status: ProjectAccessTokenStatus | None = None
    rate_limit_window_size: int | None = None
    rate_limit_window_count: int | None = None

    def to_body(self) -> dict[str, Any]:
        return self.model_dump(exclude={"project_id"}, exclude_none=True)


class Team(BaseModel):
    """A Rollbar team."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    access_level: TeamAccessLevel = "standard"
    account_id: int | None = None
