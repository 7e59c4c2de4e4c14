"""Settled-forward payoff: the decimal change in senior-side collateral.

    payoff = settlement * f
    f      = notional * (underlying - strike) / d
    d      = 1            (linear: payoff in quote currency)
           = underlying   (inverse: payoff in base asset, converted at spot)

Positive payoff favours the senior (long) side, negative the junior (short).

Degenerate underlying price under the inverse convention:
  * strike > 0: total loss for the senior side. The caller short-circuits
    via is_senior_wipeout() before the formula is reached.
  * strike = 0: f is 0/0; f = notional is used instead.
"""

from __future__ import annotations

import logging

from settled_forward.core.errors import InvalidInputError, MathError, math_error
from settled_forward.core.fixed_point import ONE, ZERO, FixedDecimal, FixedPointOverflow
from settled_forward.core.result import Err, Ok, first_err
from settled_forward.settlement.validation import require_non_negative

logger = logging.getLogger(__name__)


def check_payoff_inputs(
    underlying_new: FixedDecimal, strike: FixedDecimal,
) -> Ok[None] | Err[InvalidInputError]:
    """underlying_new >= 0 and strike >= 0."""
    source = "settlement.payoff.check_payoff_inputs"
    return first_err((
        require_non_negative(underlying_new, "underlying_new", source),
        require_non_negative(strike, "strike", source),
    ))


def is_senior_wipeout(underlying_new: FixedDecimal, strike: FixedDecimal, is_linear: bool) -> bool:
    """Inverse contract, underlying at zero, positive strike."""
    return underlying_new.is_zero() and not is_linear and strike > ZERO


def compute_payoff(
    underlying_new: FixedDecimal,
    settlement_new: FixedDecimal,
    strike: FixedDecimal,
    notional: int,
    is_linear: bool,
) -> Ok[FixedDecimal] | Err[InvalidInputError | MathError]:
    """Payoff for a normalized settlement price.

    Must not be called for a wipeout (see is_senior_wipeout); that case
    would divide by a zero underlying and is reported as a MathError.
    """
    source = "settlement.payoff.compute_payoff"
    match check_payoff_inputs(underlying_new, strike):
        case Err() as e:
            return e
        case Ok():
            pass

    try:
        notional_d = FixedDecimal.from_int(notional)
        if underlying_new.is_zero() and not is_linear and strike.is_zero():
            f = notional_d
        else:
            denominator = ONE if is_linear else underlying_new
            f = notional_d * (underlying_new - strike) / denominator
        payoff = settlement_new * f
    except FixedPointOverflow as exc:
        return Err(math_error("payoff", source, str(exc)))
    except ZeroDivisionError:
        return Err(math_error("payoff", source, "inverse payoff with zero underlying"))

    logger.debug(
        "payoff=%s (underlying=%s settlement=%s strike=%s notional=%d linear=%s)",
        payoff, underlying_new, settlement_new, strike, notional, is_linear,
    )
    return Ok(payoff)
