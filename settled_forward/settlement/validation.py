"""Input gate: reject negative prices before any arithmetic runs.

Fair values are attacker-supplied, so every slot of both the old and the
new arrays is checked, including the slots this engine never reads.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from settled_forward.core.errors import InvalidInputError, invalid_input
from settled_forward.core.fixed_point import U64_MAX, ZERO, FixedDecimal
from settled_forward.core.result import Err, Ok, first_err
from settled_forward.infra.config import FAIR_VALUE_SLOTS, QUANTITY_SLOTS

logger = logging.getLogger(__name__)

_SOURCE = "settlement.validation"


def require_non_negative(
    value: FixedDecimal, field: str, source: str,
) -> Ok[FixedDecimal] | Err[InvalidInputError]:
    """Pass value through if >= 0, else InvalidInput naming field."""
    if value < ZERO:
        logger.warning("rejected %s=%s: negative", field, value)
        return Err(invalid_input(field, value, source, f"{field} must be >= 0"))
    return Ok(value)


def validate_fair_values(
    old_fair_values: Sequence[FixedDecimal],
    new_fair_values: Sequence[FixedDecimal],
) -> Ok[None] | Err[InvalidInputError]:
    """Every slot of both arrays must be >= 0."""
    source = f"{_SOURCE}.validate_fair_values"
    for name, values in (("old_fair_values", old_fair_values), ("new_fair_values", new_fair_values)):
        if len(values) != FAIR_VALUE_SLOTS:
            return Err(invalid_input(
                name, len(values), source, f"expected {FAIR_VALUE_SLOTS} slots",
            ))
    return first_err(
        require_non_negative(v, f"{name}[{i}]", source)
        for name, values in (("old_fair_values", old_fair_values), ("new_fair_values", new_fair_values))
        for i, v in enumerate(values)
    )


def validate_quantities(old_quantity: Sequence[int]) -> Ok[None] | Err[InvalidInputError]:
    """old_quantity must be a [senior, junior] pair of u64 values."""
    source = f"{_SOURCE}.validate_quantities"
    if len(old_quantity) != QUANTITY_SLOTS:
        return Err(invalid_input(
            "old_quantity", len(old_quantity), source, f"expected {QUANTITY_SLOTS} entries",
        ))
    for i, q in enumerate(old_quantity):
        if isinstance(q, bool) or not isinstance(q, int) or not 0 <= q <= U64_MAX:
            return Err(invalid_input(f"old_quantity[{i}]", q, source, "must be u64"))
    return Ok(None)


def validate_notional(notional: int) -> Ok[None] | Err[InvalidInputError]:
    """notional must be a u64."""
    if isinstance(notional, bool) or not isinstance(notional, int) or not 0 <= notional <= U64_MAX:
        return Err(invalid_input("notional", notional, f"{_SOURCE}.validate_notional", "must be u64"))
    return Ok(None)
