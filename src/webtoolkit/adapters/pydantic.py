"""Pydantic field types for the nullable temporal wrappers.

Use ``JsonDateOnly`` / ``JsonTimeOnly`` as model field annotations. Validation
accepts the wrapper itself, ``None``, text in the wire layout or a native
``date``/``datetime``/``time``; JSON output is always the text layout or ``null``.
"""

from __future__ import annotations

from datetime import date, datetime, time
from typing import TYPE_CHECKING, Annotated, Any

from pydantic_core import core_schema

from webtoolkit.domain.dateonly import DateOnly
from webtoolkit.domain.errors import ScanError
from webtoolkit.domain.timeonly import TimeOnly

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
    from pydantic.json_schema import JsonSchemaValue


def _validate_date_only(value: object) -> DateOnly:
    if isinstance(value, DateOnly):
        return value
    if value is None or isinstance(value, str):
        return DateOnly.parse(value or "")
    if isinstance(value, date):
        return DateOnly.from_storage(value)
    raise ValueError(str(ScanError("DateOnly", value)))


def _validate_time_only(value: object) -> TimeOnly:
    if isinstance(value, TimeOnly):
        return value
    if value is None or isinstance(value, str):
        return TimeOnly.parse(value or "")
    if isinstance(value, (datetime, time)):
        return TimeOnly.from_storage(value)
    raise ValueError(str(ScanError("TimeOnly", value)))


def _serialize(value: DateOnly | TimeOnly) -> str | None:
    return value.to_text()


class _DateOnlyAnnotation:
    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        _ = source_type, handler
        return core_schema.no_info_plain_validator_function(
            _validate_date_only,
            serialization=core_schema.plain_serializer_function_ser_schema(
                _serialize, when_used="json"
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        _ = schema, handler
        return {"anyOf": [{"type": "string", "format": "date"}, {"type": "null"}]}


class _TimeOnlyAnnotation:
    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        _ = source_type, handler
        return core_schema.no_info_plain_validator_function(
            _validate_time_only,
            serialization=core_schema.plain_serializer_function_ser_schema(
                _serialize, when_used="json"
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        _ = schema, handler
        return {
            "anyOf": [{"type": "string", "pattern": r"^\d{2}:\d{2}$"}, {"type": "null"}]
        }


JsonDateOnly = Annotated[DateOnly, _DateOnlyAnnotation]
JsonTimeOnly = Annotated[TimeOnly, _TimeOnlyAnnotation]

__all__ = ["JsonDateOnly", "JsonTimeOnly"]
