"""JSON codec for HAR documents.

``encode``/``decode`` work on JSON text, ``to_dict``/``from_dict`` on the
equivalent Python values. Any HAR object can be the root, not only ``Log``;
the ``{"log": ...}`` file envelope is handled in ``harlog.storage.har_file``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, TypeVar

import orjson
from pydantic import ValidationError

from harlog.errors import ERRORS_BY_KIND, HarDecodeError, MalformedJsonError
from harlog.models.base import HARModel
from harlog.models.har import Entry, Log
from harlog.models.types import DecodeErrorKind

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=HARModel)

# pydantic error types with a dedicated decode error; all others are type mismatches
_KIND_BY_ERROR_TYPE: dict[str, DecodeErrorKind] = {
    "missing": DecodeErrorKind.MISSING_FIELD,
    "invalid_timing": DecodeErrorKind.INVALID_TIMING,
    "invalid_cache_state": DecodeErrorKind.INVALID_CACHE_STATE,
}


def format_path(loc: Sequence[str | int]) -> str:
    return ".".join(str(part) for part in loc)


def translate_validation_error(
    model_type: type[HARModel], exc: ValidationError
) -> HarDecodeError:
    """Map a pydantic ``ValidationError`` onto the decode error taxonomy."""
    details = exc.errors(include_url=False, include_input=False)
    first = details[0]
    kind = _KIND_BY_ERROR_TYPE.get(first["type"], DecodeErrorKind.TYPE_MISMATCH)
    error_cls = ERRORS_BY_KIND[kind]
    return error_cls(
        format_path(first["loc"]),
        first["msg"],
        entity=model_type.__name__,
        errors=[
            {"path": format_path(d["loc"]), "type": d["type"], "msg": d["msg"]}
            for d in details
        ],
    )


def parse_json(data: str | bytes) -> Any:
    try:
        return orjson.loads(data)
    except orjson.JSONDecodeError as e:
        raise MalformedJsonError("", str(e)) from e


def from_dict(model_type: type[M], raw: Any) -> M:
    """Build ``model_type`` from parsed JSON, raising ``HarDecodeError`` on failure."""
    try:
        return model_type.model_validate(raw, by_alias=True, by_name=False)
    except ValidationError as e:
        error = translate_validation_error(model_type, e)
        logger.debug("Failed to decode %s: %s", model_type.__name__, error)
        raise error from e


def decode(model_type: type[M], data: str | bytes) -> M:
    """Decode JSON text into ``model_type``."""
    return from_dict(model_type, parse_json(data))


def _add_entry_time(entry: Entry, data: dict[str, Any]) -> None:
    data["time"] = entry.total_time


def to_dict(model: HARModel, *, emit_entry_time: bool = False) -> dict[str, Any]:
    """Wire form of ``model`` as JSON-compatible Python values.

    With ``emit_entry_time`` each entry also carries HAR's ``time`` field,
    computed from its timings.
    """
    data = model.model_dump(mode="json", by_alias=True)
    if emit_entry_time:
        if isinstance(model, Entry):
            _add_entry_time(model, data)
        elif isinstance(model, Log):
            for entry, entry_data in zip(model.entries, data["entries"]):
                _add_entry_time(entry, entry_data)
    return data


def encode(
    model: HARModel, *, indent: bool = False, emit_entry_time: bool = False
) -> str:
    """Encode ``model`` as JSON text."""
    option = orjson.OPT_INDENT_2 if indent else 0
    data = to_dict(model, emit_entry_time=emit_entry_time)
    return orjson.dumps(data, option=option).decode()
