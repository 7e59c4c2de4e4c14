"""Temporal DataConverter for settlement requests and outputs.

Payloads are plain JSON. Two tags carry what JSON cannot:

    {"__fixed__": "<32 hex chars>"}        FixedDecimal, as its 16-byte wire form
    {"__type__": "<module.Class>", ...}    frozen dataclass, one key per field

Tuples travel as lists and come back as tuples. Only classes defined in
_DECODABLE_MODULES are ever instantiated from a payload.
"""

from __future__ import annotations

import dataclasses
import importlib
import json
from typing import Any

from temporalio.converter import (
    CompositePayloadConverter,
    DataConverter,
    DefaultPayloadConverter,
    JSONPlainPayloadConverter,
    JSONTypeConverter,
)

from settled_forward.core.fixed_point import FixedDecimal
from settled_forward.core.result import Err, Ok

_FIXED_TAG = "__fixed__"
_TYPE_TAG = "__type__"

_DECODABLE_MODULES: frozenset[str] = frozenset({
    "settled_forward.gateway.types",
    "settled_forward.instrument.config",
    "settled_forward.workflow.types",
})


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


def _encode(obj: Any) -> Any:
    match obj:
        case None | bool() | int() | str():
            return obj
        case FixedDecimal():
            return {_FIXED_TAG: obj.serialize().hex()}
        case tuple() | list():
            return [_encode(x) for x in obj]
        case _ if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
            cls = type(obj)
            fields = {f.name: _encode(getattr(obj, f.name)) for f in dataclasses.fields(obj)}
            return {_TYPE_TAG: f"{cls.__module__}.{cls.__qualname__}", **fields}
        case _:
            raise TypeError(f"settlement payloads cannot carry {type(obj).__name__}")


class SettlementJSONEncoder(json.JSONEncoder):
    def default(self, o: Any) -> Any:
        return _encode(o)


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


def _dataclass_for(qualified: str) -> type:
    module_name, _, class_name = qualified.rpartition(".")
    if module_name not in _DECODABLE_MODULES:
        raise TypeError(f"refusing to decode {qualified!r}")
    cls = getattr(importlib.import_module(module_name), class_name, None)
    if not (isinstance(cls, type) and dataclasses.is_dataclass(cls)):
        raise TypeError(f"{qualified!r} is not a settlement dataclass")
    return cls


def _decode(value: Any) -> Any:
    if isinstance(value, list):
        return tuple(_decode(x) for x in value)
    if not isinstance(value, dict):
        return value
    if _FIXED_TAG in value:
        match FixedDecimal.deserialize(bytes.fromhex(value[_FIXED_TAG])):
            case Ok(fixed):
                return fixed
            case Err(e):
                raise TypeError(e)
    if _TYPE_TAG in value:
        cls = _dataclass_for(value[_TYPE_TAG])
        return cls(**{
            f.name: _decode(value[f.name])
            for f in dataclasses.fields(cls)
            if f.name in value
        })
    return {k: _decode(v) for k, v in value.items()}


class SettlementJSONTypeConverter(JSONTypeConverter):
    """Claims tagged values; anything else goes to Temporal's default handling."""

    def to_typed_value(self, hint: type, value: Any) -> Any:
        if isinstance(value, dict) and (_FIXED_TAG in value or _TYPE_TAG in value):
            return _decode(value)
        return JSONTypeConverter.Unhandled


# ---------------------------------------------------------------------------
# Wire up
# ---------------------------------------------------------------------------


class SettlementPayloadConverter(CompositePayloadConverter):
    """Temporal's default converters with the JSON one swapped for ours."""

    def __init__(self) -> None:
        others = [
            c for c in DefaultPayloadConverter.default_encoding_payload_converters
            if not isinstance(c, JSONPlainPayloadConverter)
        ]
        super().__init__(
            *others,
            JSONPlainPayloadConverter(
                encoder=SettlementJSONEncoder,
                custom_type_converters=[SettlementJSONTypeConverter()],
            ),
        )


SETTLEMENT_DATA_CONVERTER = DataConverter(payload_converter_class=SettlementPayloadConverter)
