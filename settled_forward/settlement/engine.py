"""Settlement engine: one deterministic pass over one price observation.

    validate -> (wipeout?) -> normalize quote -> payoff -> clamp & round

execute_plugin() is the pure core over plain values. execute() adds the
calling convention: it validates every fair-value slot of the request and
feeds slots 0 and 1 of the new values, with the instrument's config, into
execute_plugin(). The first Err aborts the call; nothing is retried.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from settled_forward.core.errors import SettlementError
from settled_forward.core.fixed_point import FixedDecimal
from settled_forward.core.result import Err, Ok
from settled_forward.gateway.types import ExecuteInput, ExecutionResult
from settled_forward.instrument.config import SettlementConfig
from settled_forward.settlement.allocation import allocate, wipeout_result
from settled_forward.settlement.payoff import (
    check_payoff_inputs,
    compute_payoff,
    is_senior_wipeout,
)
from settled_forward.settlement.quote import normalize_settlement_price
from settled_forward.settlement.validation import (
    validate_fair_values,
    validate_notional,
    validate_quantities,
)

logger = logging.getLogger(__name__)


def execute_plugin(
    old_quantity: Sequence[int],
    underlying_new: FixedDecimal,
    settlement_new: FixedDecimal,
    strike: FixedDecimal,
    notional: int,
    is_linear: bool,
    is_standard: bool,
) -> Ok[ExecutionResult] | Err[SettlementError]:
    """Reallocate old_quantity ([senior, junior]) after a price observation."""
    match validate_quantities(old_quantity):
        case Err() as e:
            return e
        case Ok():
            pass
    match validate_notional(notional):
        case Err() as e:
            return e
        case Ok():
            pass
    match check_payoff_inputs(underlying_new, strike):
        case Err() as e:
            return e
        case Ok():
            pass

    if is_senior_wipeout(underlying_new, strike, is_linear):
        logger.warning(
            "underlying at zero on inverse contract with strike %s: senior side wiped out",
            strike,
        )
        return wipeout_result(old_quantity)

    settlement = normalize_settlement_price(settlement_new, is_standard)

    match compute_payoff(underlying_new, settlement, strike, notional, is_linear):
        case Err() as e:
            return e
        case Ok(payoff):
            return allocate(old_quantity, payoff)


def execute(
    config: SettlementConfig, request: ExecuteInput,
) -> Ok[ExecutionResult] | Err[SettlementError]:
    """Run one settlement for an instrument against a decoded request."""
    match validate_fair_values(request.old_fair_values, request.new_fair_values):
        case Err() as e:
            return e
        case Ok():
            pass
    config.dump()

    observation = request.observation
    result = execute_plugin(
        request.old_quantity,
        observation.underlying_new,
        observation.settlement_new,
        config.strike,
        config.notional,
        config.is_linear,
        config.is_standard,
    )
    match result:
        case Ok(r):
            logger.info(
                "settled %s -> %s fee=%d", list(request.old_quantity), list(r.new_quantity), r.fee_quantity,
            )
        case Err(err):
            logger.warning("settlement aborted: %s (%s)", err.message, err.code)
    return result
