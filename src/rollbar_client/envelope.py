"""Decoding of the ``{err, result}`` envelope wrapping every Rollbar response."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import AliasChoices, BaseModel, Field, TypeAdapter, ValidationError

from .errors import ResponseDecodeError

T = TypeVar("T")

_adapter_cache: dict[Any, TypeAdapter[Any]] = {}
_MAX_SAMPLE_DEPTH = 2
_MAX_SAMPLE_ITEMS = 5
_MAX_SAMPLE_STRING = 200
_ERROR_KEYS = {"err", "error", "message"}


class Envelope(BaseModel, Generic[T]):
    error: int = Field(default=0, validation_alias=AliasChoices("error", "err"))
    result: T


class ErrorResult(BaseModel):
    """Body Rollbar sends alongside non-success statuses."""

    error: int = Field(default=0, validation_alias=AliasChoices("error", "err"))
    message: str | None = None

    def __str__(self) -> str:
        return f"{self.error} {self.message or ''}".strip()


def _model_name(model_type: Any) -> str:
    return getattr(model_type, "__name__", repr(model_type))


def _adapter_for(model_type: Any) -> TypeAdapter[Any]:
    try:
        adapter = _adapter_cache.get(model_type)
    except TypeError:
        return TypeAdapter(model_type)

    if adapter is None:
        adapter = TypeAdapter(model_type)
        _adapter_cache[model_type] = adapter
    return adapter


def _sample_payload(value: Any, depth: int = 0) -> Any:
    if depth > _MAX_SAMPLE_DEPTH:
        return "<trimmed>"

    if isinstance(value, dict):
        sampled: dict[str, Any] = {}
        for index, (key, nested) in enumerate(value.items()):
            if index >= _MAX_SAMPLE_ITEMS:
                sampled["..."] = "<trimmed>"
                break
            sampled[str(key)] = _sample_payload(nested, depth + 1)
        return sampled

    if isinstance(value, list):
        sampled_items = [_sample_payload(item, depth + 1) for item in value[:_MAX_SAMPLE_ITEMS]]
        if len(value) > _MAX_SAMPLE_ITEMS:
            sampled_items.append("<trimmed>")
        return sampled_items

    if isinstance(value, str):
        return value if len(value) <= _MAX_SAMPLE_STRING else f"{value[:_MAX_SAMPLE_STRING]}..."

    if isinstance(value, (int, float, bool)) or value is None:
        return value

    return repr(value)


def decode_envelope(operation: str, payload: Any, result_type: Any) -> Any:
    """Unwrap ``payload`` and validate its ``result`` as ``result_type``."""
    envelope_type = Envelope[result_type]
    try:
        envelope = _adapter_for(envelope_type).validate_python(payload)
    except ValidationError as error:
        raise ResponseDecodeError(
            operation=operation,
            model_name=_model_name(envelope_type),
            errors=error.errors(),
            raw_sample=_sample_payload(payload),
        ) from error
    return envelope.result


def decode_error_body(payload: Any) -> Any:
    """Best-effort decode of an error body; unknown shapes are returned as-is."""
    if not isinstance(payload, dict) or not _ERROR_KEYS.intersection(payload):
        return payload
    try:
        return ErrorResult.model_validate(payload)
    except ValidationError:
        return payload
