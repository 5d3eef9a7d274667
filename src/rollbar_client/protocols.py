"""Protocol contracts for Rollbar client extension points."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .transport import RequestOptions


@runtime_checkable
class RequestExecutor(Protocol):
    def execute(
        self,
        options: RequestOptions | None = None,
        *,
        operation: str | None = None,
        method: str | None = None,
        path: str | None = None,
        path_params: dict[str, Any] | None = None,
        json_body: Any | None = None,
        result_type: Any | None = None,
        creating: bool = False,
    ) -> Any: ...
