"""Error hierarchy for the Rollbar Python client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class RequestDetails:
    operation: str
    method: str
    path: str | None = None
    status_code: int | None = None
    status_text: str | None = None
    response_body: Any | None = None


class RollbarClientError(Exception):
    """Base class for all client errors."""


class ValidationError(RollbarClientError):
    """Raised before any request when caller-supplied arguments are invalid."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class NotSupportedError(RollbarClientError):
    """Raised for operations the Rollbar API does not offer."""


class TransportError(RollbarClientError):
    """Raised on network/transport failures."""


class ClientTimeoutError(TransportError):
    """Raised when request times out."""


class ApiError(RollbarClientError):
    """Raised when the API answers with a non-success HTTP status."""

    def __init__(self, message: str, *, details: RequestDetails) -> None:
        super().__init__(message)
        self.details = details

    @property
    def status_code(self) -> int | None:
        return self.details.status_code


class NotFoundError(ApiError):
    """Raised when the resource (or its parent resource) does not exist."""


class UnauthorizedError(ApiError):
    """Raised when the access token is invalid or lacks the needed scope."""


class UnexpectedBackendError(ApiError):
    """Raised for any status the classifier has no dedicated kind for."""


class ResponseDecodeError(RollbarClientError):
    """Raised when a successful response body does not match the expected shape."""

    def __init__(
        self,
        *,
        operation: str,
        model_name: str,
        errors: Any,
        raw_sample: Any | None = None,
    ) -> None:
        super().__init__(f"{operation} response validation failed for {model_name}")
        self.operation = operation
        self.model_name = model_name
        self.errors = errors
        self.raw_sample = raw_sample


def classify_response(details: RequestDetails, *, creating: bool = False) -> ApiError | None:
    """Map a response status to an error, or ``None`` when it is a success.

    Rollbar answers ``200 OK`` to successful creates where ``201 Created``
    would be correct, so creates accept both.
    """
    status = details.status_code or 0
    if status == 200 or (creating and status == 201):
        return None

    message = f"{details.operation} failed with status {status}"
    if status == 404:
        return NotFoundError(message, details=details)
    if status == 401:
        return UnauthorizedError(message, details=details)

    if details.status_text:
        message = f"{message} ({details.status_text})"
    return UnexpectedBackendError(message, details=details)
