"""Rollbar API client for project access tokens and teams.

This module uses lazy exports so lightweight utilities (for example config parsing)
can be imported without immediately importing transport dependencies.
"""

from __future__ import annotations

from importlib import import_module
from typing import TYPE_CHECKING, Any

__all__ = [
    "ApiError",
    "ClientConfig",
    "ClientTimeoutError",
    "Diagnostic",
    "NotFoundError",
    "NotSupportedError",
    "ProjectAccessToken",
    "ProjectAccessTokenArgs",
    "ProjectAccessTokenResource",
    "ProjectAccessTokenScope",
    "ProjectAccessTokenStatus",
    "RequestExecutor",
    "ResourceData",
    "ResponseDecodeError",
    "RollbarClient",
    "RollbarClientError",
    "Team",
    "TeamAccessLevel",
    "TeamResource",
    "TransportError",
    "UnauthorizedError",
    "UnexpectedBackendError",
    "ValidationError",
]

_EXPORTS: dict[str, tuple[str, str]] = {
    "RollbarClient": (".client", "RollbarClient"),
    "ClientConfig": (".config", "ClientConfig"),
    "ApiError": (".errors", "ApiError"),
    "ClientTimeoutError": (".errors", "ClientTimeoutError"),
    "NotFoundError": (".errors", "NotFoundError"),
    "NotSupportedError": (".errors", "NotSupportedError"),
    "ResponseDecodeError": (".errors", "ResponseDecodeError"),
    "RollbarClientError": (".errors", "RollbarClientError"),
    "TransportError": (".errors", "TransportError"),
    "UnauthorizedError": (".errors", "UnauthorizedError"),
    "UnexpectedBackendError": (".errors", "UnexpectedBackendError"),
    "ValidationError": (".errors", "ValidationError"),
    "ProjectAccessToken": (".models", "ProjectAccessToken"),
    "ProjectAccessTokenArgs": (".models", "ProjectAccessTokenArgs"),
    "ProjectAccessTokenScope": (".models", "ProjectAccessTokenScope"),
    "ProjectAccessTokenStatus": (".models", "ProjectAccessTokenStatus"),
    "Team": (".models", "Team"),
    "TeamAccessLevel": (".models", "TeamAccessLevel"),
    "RequestExecutor": (".protocols", "RequestExecutor"),
    "Diagnostic": (".resources", "Diagnostic"),
    "ProjectAccessTokenResource": (".resources", "ProjectAccessTokenResource"),
    "ResourceData": (".resources", "ResourceData"),
    "TeamResource": (".resources", "TeamResource"),
}

if TYPE_CHECKING:
    from .client import RollbarClient
    from .config import ClientConfig
    from .errors import (
        ApiError,
        ClientTimeoutError,
        NotFoundError,
        NotSupportedError,
        ResponseDecodeError,
        RollbarClientError,
        TransportError,
        UnauthorizedError,
        UnexpectedBackendError,
        ValidationError,
    )
    from .models import (
        ProjectAccessToken,
        ProjectAccessTokenArgs,
        ProjectAccessTokenScope,
        ProjectAccessTokenStatus,
        Team,
        TeamAccessLevel,
    )
    from .protocols import RequestExecutor
    from .resources import Diagnostic, ProjectAccessTokenResource, ResourceData, TeamResource


def __getattr__(name: str) -> Any:
    module_info = _EXPORTS.get(name)
    if module_info is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attribute = module_info
    module = import_module(module_name, __name__)
    value = getattr(module, attribute)
    globals()[name] = value
    return value
