"""Settlement-leg quote normalization.

An inverse-quoted settlement price (e.g. USD/BTC rather than BTC/USD) is
inverted so the payoff formula always sees a standard quote. A literal zero
is passed through unchanged in either convention: it has no reciprocal, and
as a multiplier it zeroes the payoff.
"""

from __future__ import annotations

from settled_forward.core.fixed_point import FixedDecimal


def normalize_settlement_price(settlement_new: FixedDecimal, is_standard: bool) -> FixedDecimal:
    """Return settlement_new as a standard quote."""
    if is_standard or settlement_new.is_zero():
        return settlement_new
    return settlement_new.reciprocal()
