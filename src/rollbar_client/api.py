"""Resource accessors for the Rollbar API."""

from __future__ import annotations

import logging

from .errors import NotFoundError, NotSupportedError, RequestDetails, ValidationError
from .models import (
    TEAM_ACCESS_LEVELS,
    ProjectAccessToken,
    ProjectAccessTokenArgs,
    Team,
)
from .protocols import RequestExecutor

PATH_PAT_LIST = "/project/{projectId}/access_tokens"
PATH_PAT_CREATE = "/project/{projectId}/access_tokens"
PATH_TEAMS = "/teams"
PATH_TEAM = "/team/{teamId}"


def _require_positive(field: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValidationError(field, "must be a positive integer")


class ProjectAccessTokensApi:
    def __init__(self, executor: RequestExecutor, *, logger: logging.Logger | None = None) -> None:
        self._executor = executor
        self._logger = logger or logging.getLogger(__name__)

    def list(self, project_id: int) -> list[ProjectAccessToken]:
        """List the access tokens of a project.

        A project without tokens yields an empty list; a missing project
        raises :class:`NotFoundError`.
        """
        if isinstance(project_id, bool) or not isinstance(project_id, int) or project_id < 0:
            raise ValidationError("project_id", "must be a non-negative integer")

        tokens = self._executor.execute(
            operation="access_tokens.list",
            method="GET",
            path=PATH_PAT_LIST,
            path_params={"projectId": project_id},
            result_type=list[ProjectAccessToken] | None,
        )
        return list(tokens or [])

    def read(self, project_id: int, name: str) -> ProjectAccessToken:
        """Return the first token of the project named ``name``.

        Rollbar has no lookup-by-name endpoint and does not enforce unique
        names, so this scans the list in backend order.
        """
        self._logger.debug("reading access token %r of project %s", name, project_id)
        tokens = self.list(project_id)

        matches = [token for token in tokens if token.name == name]
        if not matches:
            self._logger.warning("no access token named %r in project %s", name, project_id)
            raise NotFoundError(
                f"access_tokens.read found no token named {name!r}",
                details=RequestDetails(operation="access_tokens.read", method="GET"),
            )
        if len(matches) > 1:
            self._logger.warning(
                "%d access tokens named %r in project %s; using the first",
                len(matches),
                name,
                project_id,
            )
        return matches[0]

    def create(self, args: ProjectAccessTokenArgs) -> ProjectAccessToken:
        if args.project_id <= 0:
            raise ValidationError("project_id", "must be a positive integer")
        if args.name == "":
            raise ValidationError("name", "cannot be blank")
        if len(args.scopes) < 1:
            raise ValidationError("scopes", "at least one scope must be specified")

        token = self._executor.execute(
            operation="access_tokens.create",
            method="POST",
            path=PATH_PAT_CREATE,
            path_params={"projectId": args.project_id},
            json_body=args.to_body(),
            result_type=ProjectAccessToken,
            creating=True,
        )
        self._logger.debug("created access token %r in project %s", token.name, token.project_id)
        return token

    def delete(self, token: str) -> None:
        raise NotSupportedError("deleting project access tokens is not supported by the Rollbar API")


class TeamsApi:
    def __init__(self, executor: RequestExecutor, *, logger: logging.Logger | None = None) -> None:
        self._executor = executor
        self._logger = logger or logging.getLogger(__name__)

    def list(self) -> list[Team]:
        teams = self._executor.execute(
            operation="teams.list",
            method="GET",
            path=PATH_TEAMS,
            result_type=list[Team] | None,
        )
        return list(teams or [])

    def create(self, name: str, access_level: str = "standard") -> Team:
        if name == "":
            raise ValidationError("name", "cannot be blank")
        if access_level not in TEAM_ACCESS_LEVELS:
            raise ValidationError("access_level", 'must be "standard", "light", or "view"')

        team = self._executor.execute(
            operation="teams.create",
            method="POST",
            path=PATH_TEAMS,
            json_body={"name": name, "access_level": access_level},
            result_type=Team,
            creating=True,
        )
        self._logger.debug("created team %s", team.id)
        return team

    def read(self, team_id: int) -> Team:
        _require_positive("team_id", team_id)
        return self._executor.execute(
            operation="teams.read",
            method="GET",
            path=PATH_TEAM,
            path_params={"teamId": team_id},
            result_type=Team,
        )

    def delete(self, team_id: int) -> None:
        _require_positive("team_id", team_id)
        self._executor.execute(
            operation="teams.delete",
            method="DELETE",
            path=PATH_TEAM,
            path_params={"teamId": team_id},
        )
        self._logger.debug("deleted team %s", team_id)
