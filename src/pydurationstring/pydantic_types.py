"""Pydantic v2 integration.

Use :data:`PydanticDurationString` as a model field type::

    class Job(BaseModel):
        timeout: PydanticDurationString

    Job.model_validate_json('{"timeout": "1m 30s"}').timeout  # DurationString('90s')

Fields validate from duration strings (and, in Python mode, from
``DurationString`` or ``timedelta``) and always serialize to the canonical
string. Requires the ``pydantic`` extra.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Annotated, Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from pydurationstring._constants import DURATION_PATTERN
from pydurationstring.duration import DurationString

__all__ = ["PydanticDurationString"]


def _validate(value: Any) -> DurationString:
    if isinstance(value, DurationString):
        return value
    if isinstance(value, timedelta):
        return DurationString.from_timedelta(value)
    if isinstance(value, str):
        return DurationString.from_string(value)
    raise ValueError(f"expected a duration string, got {type(value).__name__}")


class _DurationStringPydanticAnnotation:
    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        _source_type: Any,
        _handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        from_str = core_schema.chain_schema([
            core_schema.str_schema(),
            core_schema.no_info_plain_validator_function(DurationString.from_string),
        ])
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.no_info_plain_validator_function(_validate),
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls,
        _core_schema: core_schema.CoreSchema,
        _handler: GetJsonSchemaHandler,
    ) -> JsonSchemaValue:
        return {"type": "string", "pattern": DURATION_PATTERN}


PydanticDurationString = Annotated[DurationString, _DurationStringPydanticAnnotation]
"""DurationString field type for pydantic models."""
