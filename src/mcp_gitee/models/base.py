"""Base model and response decoding for Gitee API payloads."""

from __future__ import annotations

from typing import Any, get_origin

from pydantic import BaseModel, TypeAdapter, ValidationError, model_validator

from ..exceptions import GiteeApiError


class GiteeModel(BaseModel):
    """Base model with common behavior for all Gitee API models.

    Gitee sends ``null`` for many unset scalars (a new hook's ``result``, the
    ``patch`` of a binary file); those keys fall back to the field default.
    """

    model_config = {"extra": "ignore", "populate_by_name": True}

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


def decode(tp: Any, data: Any) -> Any:
    """Validate a decoded JSON body against *tp*.

    An empty body decodes to an empty list for list types and is an error
    for anything else.
    """
    if data is None:
        if get_origin(tp) is list:
            return []
        raise GiteeApiError(None, "Empty response body")
    try:
        return TypeAdapter(tp).validate_python(data)
    except ValidationError as e:
        raise GiteeApiError(None, "Response validation failed", str(e)) from e
