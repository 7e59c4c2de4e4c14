"""Clamp the payoff to the pool, truncate to integer units, book the residual as fee.

    senior = min(total, max(0, senior_old + payoff))
    junior = max(0, total - senior)
    fee    = total - floor(senior) - floor(junior)

Neither side can go negative or exceed the pool. Flooring both sides loses
at most one unit each; the loss is kept as fee, so quantity is conserved.
"""

from __future__ import annotations

from collections.abc import Sequence

from settled_forward.core.errors import MathError, math_error
from settled_forward.core.fixed_point import U64_MAX, ZERO, FixedDecimal, FixedPointOverflow
from settled_forward.core.result import Err, Ok
from settled_forward.gateway.types import ExecutionResult

_SOURCE = "settlement.allocation"


def total_quantity(old_quantity: Sequence[int]) -> Ok[int] | Err[MathError]:
    """Checked u64 sum of the pool."""
    total = sum(old_quantity)
    if total > U64_MAX:
        return Err(math_error("total_quantity", f"{_SOURCE}.total_quantity", f"{total} overflows u64"))
    return Ok(total)


def wipeout_result(old_quantity: Sequence[int]) -> Ok[ExecutionResult] | Err[MathError]:
    """Whole pool to the junior side, no fee."""
    match total_quantity(old_quantity):
        case Err() as e:
            return e
        case Ok(total):
            return Ok(ExecutionResult(new_quantity=(0, total), fee_quantity=0))


def allocate(
    old_quantity: Sequence[int], payoff: FixedDecimal,
) -> Ok[ExecutionResult] | Err[MathError]:
    """Apply payoff to the senior side and split the pool in integer units."""
    source = f"{_SOURCE}.allocate"
    match total_quantity(old_quantity):
        case Err() as e:
            return e
        case Ok(total):
            pass

    total_d = FixedDecimal.from_int(total)
    try:
        senior_d = total_d.min(ZERO.max(FixedDecimal.from_int(old_quantity[0]) + payoff))
        junior_d = ZERO.max(total_d - senior_d)
    except FixedPointOverflow as exc:
        return Err(math_error("clamp", source, str(exc)))

    match senior_d.floor().to_u64().map_err(lambda e: math_error("senior_to_u64", source, e)):
        case Err() as err:
            return err
        case Ok(senior):
            pass
    match junior_d.floor().to_u64().map_err(lambda e: math_error("junior_to_u64", source, e)):
        case Err() as err:
            return err
        case Ok(junior):
            pass

    fee = total - senior - junior
    if fee < 0:
        return Err(math_error("fee", source, f"allocated {senior + junior} exceeds pool {total}"))
    return Ok(ExecutionResult(new_quantity=(senior, junior), fee_quantity=fee))
