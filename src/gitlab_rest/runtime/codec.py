"""
GitLab JSON Decoding

This module decodes response bodies into typed targets and turns GitLab
error payloads into readable messages.
"""

from __future__ import annotations
from functools import lru_cache
from typing import Any, Optional, Union

from pydantic import TypeAdapter, ValidationError

from .errors import DecodeError


@lru_cache(maxsize=None)
def _adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def decode_json(body: Union[str, bytes], target: Any) -> Any:
    """
    Decode a JSON document into ``target``.

    The target may be anything pydantic can validate: a model class, a
    ``List[Model]``, a plain ``dict`` and so on.

    Args:
        body: Raw JSON text
        target: Type to decode into

    Returns:
        Decoded value

    Raises:
        DecodeError: If the body is not valid JSON or does not match target
    """
    try:
        return _adapter(target).validate_json(body)
    except ValidationError as e:
        if any(err["type"] == "json_invalid" for err in e.errors()):
            raise DecodeError("Invalid JSON response", cause=e) from e
        raise DecodeError(
            f"Response body does not match {_type_name(target)}",
            details={"errors": e.error_count()},
            cause=e,
        ) from e
    except (ValueError, TypeError) as e:
        raise DecodeError(f"Invalid JSON response: {e}", cause=e) from e


def parse_error_message(body: Union[str, bytes, None]) -> Optional[str]:
    """
    Extract a message from a GitLab error body.

    GitLab reports errors as one of::

        {"message": "404 Project Not Found"}
        {"message": {"name": ["has already been taken"]}}
        {"message": ["first", "second"]}
        {"error": "invalid_token", "error_description": "Token expired"}

    Args:
        body: Raw response body

    Returns:
        Flattened message, or None if the body carries no recognizable error
    """
    if not body:
        return None
    try:
        # Nesting depth is bounded by the JSON parser
        data = _adapter(Any).validate_json(body)
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None

    try:
        if "message" in data:
            return _flatten(data["message"])

        if "error" in data:
            message = _flatten(data["error"])
            description = data.get("error_description")
            if description:
                message = f"{message}: {description}"
            return message
    except RecursionError:
        return None

    return None


def _flatten(value: Any) -> str:
    if isinstance(value, dict):
        # Sorted so the message does not depend on server key order
        parts = [f"{key}: {_flatten(value[key])}" for key in sorted(value)]
        return "{" + ", ".join(parts) + "}"
    if isinstance(value, list):
        return "[" + ", ".join(_flatten(item) for item in value) + "]"
    return str(value)


def _type_name(target: Any) -> str:
    return getattr(target, "__name__", None) or str(target)


__all__ = [
    "decode_json",
    "parse_error_message",
]
