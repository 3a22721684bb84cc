"""Base model and field types shared by every HAR object.

Wire rules applied here:

* keys are camelCase (``startedDateTime``), a few are spelled out explicitly
  on the field (``redirectURL``, ``serverIPAddress``);
* optional fields drop their key when unset instead of encoding ``null``;
* scalars are strict, a ``"200"`` string never decodes into an int field;
* unknown keys are ignored on decode.
"""

from __future__ import annotations

import math
from typing import Annotated, Any, Optional, Union

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    PlainSerializer,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    StrictInt,
    model_serializer,
)
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from harlog.models.types import NOT_AVAILABLE


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def check_duration(value: Any) -> Any:
    """Accept a finite, non-negative JSON number, keeping ints as ints."""
    if not _is_number(value):
        raise PydanticCustomError(
            "number_type",
            "Input should be a valid number, got {type}",
            {"type": type(value).__name__},
        )
    if isinstance(value, float) and not math.isfinite(value):
        raise PydanticCustomError(
            "finite_number",
            "Duration should be a finite number, got {value}",
            {"value": value},
        )
    if value < 0:
        raise PydanticCustomError(
            "negative_duration",
            "Duration {value} should be greater than or equal to 0",
            {"value": value},
        )
    return value


def _size_from_wire(value: Any) -> Any:
    if type(value) is int and value == NOT_AVAILABLE:
        return None
    return value


def _size_to_wire(value: int | None) -> int:
    return NOT_AVAILABLE if value is None else value


# Milliseconds; fractional values are allowed on the wire.
Duration = Annotated[Union[int, float], BeforeValidator(check_duration)]

# Byte count where -1 means "not available"; held as None in memory.
ByteSize = Annotated[
    Optional[Annotated[StrictInt, Field(ge=0)]],
    BeforeValidator(_size_from_wire),
    PlainSerializer(_size_to_wire, return_type=int),
]


class HARModel(BaseModel):
    """Common configuration for HAR objects."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    @model_serializer(mode="wrap")
    def _omit_unset(
        self, handler: SerializerFunctionWrapHandler, info: SerializationInfo
    ) -> dict[str, Any]:
        data = handler(self)
        for name, field in type(self).model_fields.items():
            key = field.alias if info.by_alias and field.alias else name
            if key in data and self._omits(name, data[key]):
                del data[key]
        return data

    def _omits(self, name: str, wire_value: Any) -> bool:
        return wire_value is None
