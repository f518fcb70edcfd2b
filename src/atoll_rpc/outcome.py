"""Decide whether a response body is a success envelope, an error envelope, or neither.

The wire format has no discriminant field, so both shapes are tried in order:
success first, then the JSON-RPC error object. When a body happens to satisfy
both, the success shape wins. When it satisfies neither, the diagnostic of the
success attempt is reported, since that is the shape the caller asked for.
Validation is strict: a field of the wrong JSON type is a mismatch, not a
value to convert.
"""

from functools import lru_cache
from typing import Any, Type

from pydantic import TypeAdapter, ValidationError

from .errors import JsonDecodeError
from .models import InvalidJson, RequestOutcome, RpcJsonError, RpcResponse, Success


@lru_cache(maxsize=None)
def _success_adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(RpcResponse[result_type])


_error_adapter = TypeAdapter(RpcJsonError)


def decode_outcome(body: str, result_type: Type[Any] = Any) -> RequestOutcome:
    try:
        response = _success_adapter(result_type).validate_json(body, strict=True)
    except ValidationError as success_error:
        try:
            error = _error_adapter.validate_json(body, strict=True)
        except ValidationError:
            raise JsonDecodeError.from_validation_error(success_error) from success_error
        return InvalidJson(error=error)
    return Success(response=response)
