"""HTTP transport for the Rollbar client."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from json import JSONDecodeError
from typing import Any
from urllib.parse import quote

import httpx

from .envelope import decode_envelope, decode_error_body
from .errors import (
    ApiError,
    ClientTimeoutError,
    NotFoundError,
    RequestDetails,
    TransportError,
    UnauthorizedError,
    classify_response,
)

_PLACEHOLDER = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")


@dataclass(slots=True)
class RequestOptions:
    operation: str
    method: str
    path: str
    path_params: dict[str, Any] | None = None
    json_body: Any | None = None
    result_type: Any | None = None
    creating: bool = False


def _coerce_options(
    options: RequestOptions | None = None,
    *,
    operation: str | None = None,
    method: str | None = None,
    path: str | None = None,
    path_params: dict[str, Any] | None = None,
    json_body: Any | None = None,
    result_type: Any | None = None,
    creating: bool = False,
) -> RequestOptions:
    if options is not None:
        return options

    if operation is None or method is None or path is None:
        raise TypeError("operation, method, and path are required when options are not provided")

    return RequestOptions(
        operation=operation,
        method=method,
        path=path,
        path_params=path_params,
        json_body=json_body,
        result_type=result_type,
        creating=creating,
    )


def resolve_path(template: str, params: dict[str, Any] | None) -> str:
    """Substitute ``{name}`` placeholders; every placeholder must be supplied."""
    values = params or {}

    def substitute(match: re.Match[str]) -> str:
        name = match.group(1)
        if name not in values:
            raise ValueError(f"missing path parameter {name!r} for {template}")
        return quote(str(values[name]), safe="")

    return _PLACEHOLDER.sub(substitute, template)


def parse_response_body(response: httpx.Response) -> Any:
    if not response.content:
        return None

    content_type = response.headers.get("content-type", "")
    if "application/json" not in content_type:
        return response.text

    try:
        return response.json()
    except JSONDecodeError:
        return response.text


def check_status(response: httpx.Response, body: Any, options: RequestOptions, path: str) -> ApiError | None:
    details = RequestDetails(
        operation=options.operation,
        method=options.method,
        path=path,
        status_code=response.status_code,
        status_text=response.reason_phrase,
    )
    error = classify_response(details, creating=options.creating)
    if error is not None:
        details.response_body = decode_error_body(body)
    return error


class SyncTransport:
    def __init__(
        self,
        client: httpx.Client,
        api_prefix: str,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self._client = client
        self._api_prefix = api_prefix.rstrip("/")
        self._logger = logger or logging.getLogger(__name__)

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
    ) -> Any:
        options = _coerce_options(
            options,
            operation=operation,
            method=method,
            path=path,
            path_params=path_params,
            json_body=json_body,
            result_type=result_type,
            creating=creating,
        )
        path = self._api_prefix + resolve_path(options.path, options.path_params)
        self._logger.debug("%s %s %s", options.operation, options.method, path)

        try:
            response = self._client.request(options.method, path, json=options.json_body)
        except httpx.TimeoutException as error:
            self._logger.warning("%s timed out: %s", options.operation, error)
            raise ClientTimeoutError(str(error)) from error
        except httpx.HTTPError as error:
            self._logger.warning("%s transport failure: %s", options.operation, error)
            raise TransportError(str(error)) from error

        body = parse_response_body(response)
        error = check_status(response, body, options, path)
        if isinstance(error, (NotFoundError, UnauthorizedError)):
            self._logger.warning("%s: %s", options.operation, error)
            raise error
        if error is not None:
            self._logger.error("%s: %s body=%r", options.operation, error, error.details.response_body)
            raise error

        if options.result_type is None:
            return body
        return decode_envelope(options.operation, body, options.result_type)
