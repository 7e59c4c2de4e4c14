"""Tests for settled_forward.instrument.config — SettlementConfig and its record."""

from __future__ import annotations

import hashlib
import logging
import struct
from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from settled_forward.core.errors import InvalidInputError, MathError
from settled_forward.core.fixed_point import U64_MAX, FixedDecimal
from settled_forward.core.result import Err, unwrap
from settled_forward.infra.config import CONFIG_RECORD_LEN, CONFIG_TAG
from settled_forward.instrument.config import SettlementConfig
from tests.strategies import d, notionals, prices


def _config(strike: str = "100", notional: int = 1000) -> SettlementConfig:
    return SettlementConfig(strike=d(strike), notional=notional, is_linear=True, is_standard=False)


class TestCreate:
    def test_valid(self) -> None:
        config = unwrap(SettlementConfig.create(100.0, 1000, True, True))
        assert config.strike == d(100)
        assert config.notional == 1000
        assert config.is_linear is True
        assert config.is_standard is True

    def test_strike_uses_shortest_repr(self) -> None:
        config = unwrap(SettlementConfig.create(0.1, 1, False, True))
        assert config.strike.value == Decimal("0.1")

    def test_zero_strike(self) -> None:
        assert unwrap(SettlementConfig.create(0.0, 1, True, True)).strike.is_zero()

    def test_negative_strike_is_invalid_input(self) -> None:
        result = SettlementConfig.create(-1.0, 1000, True, True)
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidInputError)
        assert result.error.field == "strike"

    def test_negative_infinity_is_invalid_input(self) -> None:
        result = SettlementConfig.create(float("-inf"), 1000, True, True)
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidInputError)

    def test_nan_is_math_error(self) -> None:
        result = SettlementConfig.create(float("nan"), 1000, True, True)
        assert isinstance(result, Err)
        assert isinstance(result.error, MathError)

    def test_infinity_is_math_error(self) -> None:
        result = SettlementConfig.create(float("inf"), 1000, True, True)
        assert isinstance(result, Err)
        assert isinstance(result.error, MathError)

    def test_too_large_is_math_error(self) -> None:
        result = SettlementConfig.create(1e30, 1000, True, True)
        assert isinstance(result, Err)
        assert isinstance(result.error, MathError)

    def test_int_strike_too_large_for_a_float_is_math_error(self) -> None:
        result = SettlementConfig.create(10**400, 1000, True, True)
        assert isinstance(result, Err)
        assert isinstance(result.error, MathError)

    def test_int_strike_is_exact(self) -> None:
        config = unwrap(SettlementConfig.create(2**90, 1000, True, True))
        assert config.strike == FixedDecimal.from_int(2**90)

    @pytest.mark.parametrize("notional", [-1, U64_MAX + 1, True])
    def test_bad_notional(self, notional: int) -> None:
        result = SettlementConfig.create(1.0, notional, True, True)
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidInputError)

    def test_direct_construction_rejects_negative_strike(self) -> None:
        with pytest.raises(TypeError):
            SettlementConfig(strike=d(-1), notional=1, is_linear=True, is_standard=True)


class TestRecord:
    def test_layout(self) -> None:
        raw = _config().to_record()
        assert len(raw) == CONFIG_RECORD_LEN
        assert raw[:8] == hashlib.sha256(b"account:RedeemLogicConfig").digest()[:8]
        assert struct.unpack_from("<Q", raw, 8) == (1000,)
        assert raw[16:18] == b"\x01\x00"
        assert raw[18:] == d(100).serialize()

    def test_round_trip(self) -> None:
        config = _config("0.5", 7)
        assert unwrap(SettlementConfig.from_record(config.to_record())) == config

    @given(strike=prices(), notional=notionals(), is_linear=st.booleans(), is_standard=st.booleans())
    def test_round_trip_property(
        self, strike: FixedDecimal, notional: int, is_linear: bool, is_standard: bool,
    ) -> None:
        config = SettlementConfig(strike, notional, is_linear, is_standard)
        assert unwrap(SettlementConfig.from_record(config.to_record())) == config

    def test_wrong_length(self) -> None:
        result = SettlementConfig.from_record(_config().to_record()[:-1])
        assert isinstance(result, Err)
        assert result.error.field == "record"

    def test_wrong_tag(self) -> None:
        raw = bytes(8) + _config().to_record()[8:]
        result = SettlementConfig.from_record(raw)
        assert isinstance(result, Err)
        assert result.error.field == "record.tag"

    def test_bad_bool_byte(self) -> None:
        raw = bytearray(_config().to_record())
        raw[17] = 2
        result = SettlementConfig.from_record(bytes(raw))
        assert isinstance(result, Err)
        assert result.error.field == "record.is_standard"

    def test_bad_strike_bytes(self) -> None:
        raw = CONFIG_TAG + struct.pack("<QBB", 1, 1, 1) + bytes([0, 0, 29, 0]) + bytes(12)
        result = SettlementConfig.from_record(raw)
        assert isinstance(result, Err)
        assert result.error.field == "record.strike"

    def test_negative_strike_bytes(self) -> None:
        raw = CONFIG_TAG + struct.pack("<QBB", 1, 1, 1) + d(-1).serialize()
        result = SettlementConfig.from_record(raw)
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidInputError)


class TestDump:
    def test_logs_every_field(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="settled_forward.instrument.config")
        _config("0.5", 7).dump()
        assert "+ notional: 7" in caplog.text
        assert "+ is_linear: True" in caplog.text
        assert "+ is_standard: False" in caplog.text
        assert "+ strike: 0.5" in caplog.text
