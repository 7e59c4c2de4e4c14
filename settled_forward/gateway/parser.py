"""Binary codec for execute requests and results.

Request (336 bytes)::

    old_quantity     2 x u64 LE
    old_fair_values  10 x 16-byte FixedDecimal
    new_fair_values  10 x 16-byte FixedDecimal

Result (24 bytes)::

    new_quantity     2 x u64 LE
    fee_quantity     1 x u64 LE

Decoding never raises: a wrong length or an undecodable slot is
Err[InvalidInputError] naming the offending field.
"""

from __future__ import annotations

import struct

from settled_forward.core.errors import InvalidInputError, invalid_input
from settled_forward.core.fixed_point import FixedDecimal
from settled_forward.core.result import Err, Ok
from settled_forward.gateway.types import ExecuteInput, ExecutionResult
from settled_forward.infra.config import (
    DECIMAL_LEN,
    EXECUTE_INPUT_LEN,
    EXECUTE_RESULT_LEN,
    FAIR_VALUE_SLOTS,
    QUANTITY_SLOTS,
)

_QUANTITIES = struct.Struct(f"<{QUANTITY_SLOTS}Q")
_RESULT = struct.Struct(f"<{QUANTITY_SLOTS + 1}Q")


def _decode_slots(
    raw: bytes, offset: int, name: str, source: str,
) -> Ok[tuple[FixedDecimal, ...]] | Err[InvalidInputError]:
    values: list[FixedDecimal] = []
    for i in range(FAIR_VALUE_SLOTS):
        start = offset + i * DECIMAL_LEN
        chunk = raw[start:start + DECIMAL_LEN]
        match FixedDecimal.deserialize(chunk):
            case Err(e):
                return Err(invalid_input(f"{name}[{i}]", chunk.hex(), source, e))
            case Ok(v):
                values.append(v)
    return Ok(tuple(values))


def parse_execute_input(raw: bytes) -> Ok[ExecuteInput] | Err[InvalidInputError]:
    """Decode a 336-byte execute request."""
    source = "gateway.parser.parse_execute_input"
    if len(raw) != EXECUTE_INPUT_LEN:
        return Err(invalid_input(
            "payload", len(raw), source,
            f"execute input must be {EXECUTE_INPUT_LEN} bytes",
        ))

    old_quantity = _QUANTITIES.unpack_from(raw, 0)
    old_offset = _QUANTITIES.size
    new_offset = old_offset + FAIR_VALUE_SLOTS * DECIMAL_LEN

    match _decode_slots(raw, old_offset, "old_fair_values", source):
        case Err() as e:
            return e
        case Ok(old_fair_values):
            pass
    match _decode_slots(raw, new_offset, "new_fair_values", source):
        case Err() as e:
            return e
        case Ok(new_fair_values):
            pass

    return Ok(ExecuteInput(
        old_quantity=(old_quantity[0], old_quantity[1]),
        old_fair_values=old_fair_values,
        new_fair_values=new_fair_values,
    ))


def encode_execute_input(inp: ExecuteInput) -> bytes:
    """Encode an ExecuteInput into its 336-byte wire form."""
    return (
        _QUANTITIES.pack(*inp.old_quantity)
        + b"".join(v.serialize() for v in inp.old_fair_values)
        + b"".join(v.serialize() for v in inp.new_fair_values)
    )


def encode_execute_result(result: ExecutionResult) -> bytes:
    """Encode in declared field order: new_quantity then fee_quantity."""
    return _RESULT.pack(*result.new_quantity, result.fee_quantity)


def parse_execute_result(raw: bytes) -> Ok[ExecutionResult] | Err[InvalidInputError]:
    """Decode a 24-byte execute result."""
    if len(raw) != EXECUTE_RESULT_LEN:
        return Err(invalid_input(
            "payload", len(raw), "gateway.parser.parse_execute_result",
            f"execute result must be {EXECUTE_RESULT_LEN} bytes",
        ))
    senior, junior, fee = _RESULT.unpack(raw)
    return Ok(ExecutionResult(new_quantity=(senior, junior), fee_quantity=fee))
