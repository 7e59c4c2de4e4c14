"""Tests for settled_forward.settlement.validation."""

from __future__ import annotations

from hypothesis import given

from settled_forward.core.errors import InvalidInputError
from settled_forward.core.fixed_point import U64_MAX, ZERO, FixedDecimal
from settled_forward.core.result import Err, Ok
from settled_forward.settlement.validation import (
    require_non_negative,
    validate_fair_values,
    validate_notional,
    validate_quantities,
)
from tests.strategies import d, prices

SLOTS = (ZERO,) * 10


class TestRequireNonNegative:
    def test_zero_passes(self) -> None:
        assert require_non_negative(ZERO, "x", "src") == Ok(ZERO)

    def test_negative_fails(self) -> None:
        result = require_non_negative(d("-0.0001"), "strike", "src")
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidInputError)
        assert result.error.field == "strike"

    @given(p=prices())
    def test_prices_pass(self, p: FixedDecimal) -> None:
        assert isinstance(require_non_negative(p, "p", "src"), Ok)


class TestValidateFairValues:
    def test_all_zero_passes(self) -> None:
        assert validate_fair_values(SLOTS, SLOTS) == Ok(None)

    def test_reports_first_negative_slot(self) -> None:
        new = SLOTS[:4] + (d(-1),) + SLOTS[5:8] + (d(-2),) + SLOTS[9:]
        result = validate_fair_values(SLOTS, new)
        assert isinstance(result, Err)
        assert result.error.field == "new_fair_values[4]"

    def test_old_values_checked_first(self) -> None:
        bad = SLOTS[:9] + (d(-1),)
        result = validate_fair_values(bad, bad)
        assert isinstance(result, Err)
        assert result.error.field == "old_fair_values[9]"

    def test_wrong_slot_count(self) -> None:
        result = validate_fair_values(SLOTS[:2], SLOTS)
        assert isinstance(result, Err)
        assert result.error.field == "old_fair_values"


class TestValidateQuantities:
    def test_pair_passes(self) -> None:
        assert validate_quantities((0, U64_MAX)) == Ok(None)

    def test_wrong_length(self) -> None:
        assert isinstance(validate_quantities((1,)), Err)

    def test_negative(self) -> None:
        result = validate_quantities((1, -1))
        assert isinstance(result, Err)
        assert result.error.field == "old_quantity[1]"

    def test_above_u64(self) -> None:
        assert isinstance(validate_quantities((U64_MAX + 1, 0)), Err)

    def test_bool_rejected(self) -> None:
        assert isinstance(validate_quantities((True, 0)), Err)


class TestValidateNotional:
    def test_u64_bounds_pass(self) -> None:
        assert validate_notional(0) == Ok(None)
        assert validate_notional(U64_MAX) == Ok(None)

    def test_negative(self) -> None:
        result = validate_notional(-1000)
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidInputError)
        assert result.error.field == "notional"

    def test_above_u64(self) -> None:
        assert isinstance(validate_notional(2**100), Err)

    def test_bool_rejected(self) -> None:
        assert isinstance(validate_notional(False), Err)
