"""Value types of the calling convention shared by all redeem-logic engines.

The request carries ten fair-value slots per side even though the settled
forward reads only slots 0 (underlying) and 1 (settlement leg) of the new
values; sibling engines use the rest.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias, final

from settled_forward.core.fixed_point import U64_MAX, FixedDecimal
from settled_forward.infra.config import (
    FAIR_VALUE_SLOTS,
    QUANTITY_SLOTS,
    SETTLEMENT_SLOT,
    UNDERLYING_SLOT,
)

QuantityPair: TypeAlias = tuple[int, int]


def _is_u64(q: object) -> bool:
    return isinstance(q, int) and not isinstance(q, bool) and 0 <= q <= U64_MAX


@final
@dataclass(frozen=True, slots=True)
class PriceObservation:
    """The two prices the engine reads out of the fair-value slots."""

    underlying_new: FixedDecimal
    settlement_new: FixedDecimal


@final
@dataclass(frozen=True, slots=True)
class ExecuteInput:
    """old_quantity is [senior, junior]; fair values are fixed-size tuples."""

    old_quantity: QuantityPair
    old_fair_values: tuple[FixedDecimal, ...]
    new_fair_values: tuple[FixedDecimal, ...]

    def __post_init__(self) -> None:
        if len(self.old_quantity) != QUANTITY_SLOTS:
            raise TypeError(f"ExecuteInput.old_quantity must have {QUANTITY_SLOTS} entries")
        for q in self.old_quantity:
            if not _is_u64(q):
                raise TypeError(f"ExecuteInput.old_quantity entries must be u64, got {q!r}")
        for name in ("old_fair_values", "new_fair_values"):
            if len(getattr(self, name)) != FAIR_VALUE_SLOTS:
                raise TypeError(f"ExecuteInput.{name} must have {FAIR_VALUE_SLOTS} slots")

    @property
    def observation(self) -> PriceObservation:
        return PriceObservation(
            underlying_new=self.new_fair_values[UNDERLYING_SLOT],
            settlement_new=self.new_fair_values[SETTLEMENT_SLOT],
        )


@final
@dataclass(frozen=True, slots=True)
class ExecutionResult:
    """Reallocated collateral. new_quantity[0] is senior, [1] is junior.

    fee_quantity is the rounding residual kept by the protocol, so
    sum(new_quantity) + fee_quantity equals the old total.
    """

    new_quantity: QuantityPair
    fee_quantity: int

    def __post_init__(self) -> None:
        if len(self.new_quantity) != QUANTITY_SLOTS:
            raise TypeError(f"ExecutionResult.new_quantity must be a pair, got {self.new_quantity!r}")
        for q in (*self.new_quantity, self.fee_quantity):
            if not _is_u64(q):
                raise TypeError(f"ExecutionResult quantities must be u64, got {q!r}")

    @property
    def senior(self) -> int:
        return self.new_quantity[0]

    @property
    def junior(self) -> int:
        return self.new_quantity[1]

    @property
    def total(self) -> int:
        """Allocated quantity plus fee."""
        return self.new_quantity[0] + self.new_quantity[1] + self.fee_quantity
