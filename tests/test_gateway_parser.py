"""Tests for settled_forward.gateway — execute request and result codecs."""

from __future__ import annotations

import struct

import pytest
from hypothesis import given

from settled_forward.core.errors import InvalidInputError
from settled_forward.core.fixed_point import U64_MAX, ZERO
from settled_forward.core.result import Err, unwrap
from settled_forward.gateway.parser import (
    encode_execute_input,
    encode_execute_result,
    parse_execute_input,
    parse_execute_result,
)
from settled_forward.gateway.types import ExecuteInput, ExecutionResult, PriceObservation
from tests.strategies import d, execute_inputs

_SLOTS = (ZERO,) * 10


def _input() -> ExecuteInput:
    new = (d(120), d("0.5")) + _SLOTS[2:]
    return ExecuteInput(old_quantity=(100_000, 50_000), old_fair_values=_SLOTS, new_fair_values=new)


class TestExecuteInputCodec:
    def test_length(self) -> None:
        assert len(encode_execute_input(_input())) == 336

    def test_layout(self) -> None:
        raw = encode_execute_input(_input())
        assert struct.unpack_from("<2Q", raw, 0) == (100_000, 50_000)
        assert raw[16:176] == bytes(160)
        assert raw[176:192] == d(120).serialize()
        assert raw[192:208] == d("0.5").serialize()

    def test_parse(self) -> None:
        parsed = unwrap(parse_execute_input(encode_execute_input(_input())))
        assert parsed == _input()
        assert parsed.observation == PriceObservation(underlying_new=d(120), settlement_new=d("0.5"))

    @given(inp=execute_inputs())
    def test_round_trip(self, inp: ExecuteInput) -> None:
        assert unwrap(parse_execute_input(encode_execute_input(inp))) == inp

    @pytest.mark.parametrize("length", [0, 335, 337])
    def test_wrong_length(self, length: int) -> None:
        result = parse_execute_input(bytes(length))
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidInputError)
        assert result.error.field == "payload"

    def test_bad_slot_named(self) -> None:
        raw = bytearray(encode_execute_input(_input()))
        # scale byte of new_fair_values[3]
        raw[176 + 3 * 16 + 2] = 29
        result = parse_execute_input(bytes(raw))
        assert isinstance(result, Err)
        assert result.error.field == "new_fair_values[3]"

    def test_negative_values_decode(self) -> None:
        new = (d(-1),) + _SLOTS[1:]
        inp = ExecuteInput(old_quantity=(1, 1), old_fair_values=_SLOTS, new_fair_values=new)
        assert unwrap(parse_execute_input(encode_execute_input(inp))).new_fair_values[0] == d(-1)


class TestExecutionResultCodec:
    def test_layout(self) -> None:
        raw = encode_execute_result(ExecutionResult(new_quantity=(100_166, 99_833), fee_quantity=1))
        assert raw == struct.pack("<3Q", 100_166, 99_833, 1)

    def test_parse(self) -> None:
        raw = struct.pack("<3Q", U64_MAX, 0, 0)
        assert unwrap(parse_execute_result(raw)) == ExecutionResult(new_quantity=(U64_MAX, 0), fee_quantity=0)

    def test_wrong_length(self) -> None:
        assert isinstance(parse_execute_result(bytes(23)), Err)


class TestTypes:
    def test_input_rejects_wrong_slot_count(self) -> None:
        with pytest.raises(TypeError):
            ExecuteInput(old_quantity=(1, 1), old_fair_values=_SLOTS[:9], new_fair_values=_SLOTS)

    def test_input_rejects_negative_quantity(self) -> None:
        with pytest.raises(TypeError):
            ExecuteInput(old_quantity=(-1, 1), old_fair_values=_SLOTS, new_fair_values=_SLOTS)

    def test_result_rejects_non_u64(self) -> None:
        with pytest.raises(TypeError):
            ExecutionResult(new_quantity=(U64_MAX + 1, 0), fee_quantity=0)

    def test_result_accessors(self) -> None:
        r = ExecutionResult(new_quantity=(3, 4), fee_quantity=1)
        assert (r.senior, r.junior, r.total) == (3, 4, 8)
