"""
pydantic v2 integration for UncToken.

Use ``UncTokenField`` as a model field type:

    class Transfer(BaseModel):
        amount: UncTokenField

Validation accepts an UncToken instance or a base-10 digit string (JSON input
must be a string). Serialization emits the digit string in both Python and JSON
mode, so any dump validates back. The JSON schema describes the field as a
plain string.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from ..core.amounts import UncToken
from ..core.exc import AmountDomainError
from .text import from_text, to_text


def _validate_text(value: str) -> UncToken:
    # pydantic only reports ValueError/AssertionError as ValidationError.
    try:
        return from_text(value)
    except AmountDomainError as err:
        raise ValueError(str(err)) from err


class UncTokenAnnotation:
    """Core-schema provider attached to UncToken through ``Annotated``."""

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        from_str_schema = core_schema.chain_schema(
            [
                core_schema.str_schema(),
                core_schema.no_info_plain_validator_function(_validate_text),
            ]
        )
        return core_schema.json_or_python_schema(
            json_schema=from_str_schema,
            python_schema=core_schema.union_schema(
                [
                    core_schema.is_instance_schema(UncToken),
                    from_str_schema,
                ]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(to_text),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, _core_schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return handler(core_schema.str_schema())


UncTokenField = Annotated[UncToken, UncTokenAnnotation]


__all__ = [
    "UncTokenAnnotation",
    "UncTokenField",
]
