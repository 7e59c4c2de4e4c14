"""
demo_settled_forward.py -- A walkthrough of one settled forward, from config to payout.

A settled forward splits a collateral pool between two sides. The senior
(long) side gains when the underlying rises above the strike; the junior
(short) side gains when it falls. Each settlement call takes the last
[senior, junior] split and a fresh price observation and returns the new
split plus a fee for whatever was lost to integer rounding.

We will:
  1. Initialize an inverse BTC forward (strike 100, notional 1000) in a store
  2. Encode a price observation as the 336-byte execute request
  3. Settle it and decode the 24-byte result
  4. Show the failure modes: negative price, reused address, NaN strike
  5. Settle a linear forward whose settlement leg is inverse-quoted

Run this:  .venv/bin/python demo_settled_forward.py
"""

from __future__ import annotations

import logging

from settled_forward.core.fixed_point import ZERO, FixedDecimal
from settled_forward.core.result import Err, Ok, unwrap
from settled_forward.gateway.parser import encode_execute_input, parse_execute_result
from settled_forward.gateway.types import ExecuteInput
from settled_forward.infra.config import LoggingConfig, configure_logging
from settled_forward.infra.memory_adapter import InMemoryConfigStore
from settled_forward.settlement.handlers import handle_execute, handle_initialize


def sep(title: str) -> None:
    """Print a section separator."""
    print(f"\n{'=' * 72}")
    print(f"  {title}")
    print(f"{'=' * 72}\n")


def price(raw: str) -> FixedDecimal:
    return unwrap(FixedDecimal.parse(raw))


def request(underlying: str, settlement: str = "1") -> bytes:
    # Ten fair-value slots per side. This engine reads new slots 0 and 1.
    new = (price(underlying), price(settlement)) + (ZERO,) * 8
    return encode_execute_input(ExecuteInput(
        old_quantity=(100_000, 100_000),
        old_fair_values=(ZERO,) * 10,
        new_fair_values=new,
    ))


configure_logging(LoggingConfig(level=logging.WARNING))
store = InMemoryConfigStore()


# ============================================================================
#  STEP 1: INITIALIZE
# ============================================================================
#
# The config is fixed for the life of the instrument. The strike arrives as
# a float and is converted once, via its shortest repr, into FixedDecimal.

sep("STEP 1: Initialize an inverse forward")

match handle_initialize(store, "btc-usd-inverse", 100.0, 1000, is_linear=False, is_standard=True):
    case Ok(config):
        print(f"  strike:       {config.strike}")
        print(f"  notional:     {config.notional}")
        print(f"  is_linear:    {config.is_linear}")
        print(f"  is_standard:  {config.is_standard}")
        print(f"  record:       {config.to_record().hex()}")
    case Err(e):
        raise RuntimeError(f"initialize failed: {e}")


# ============================================================================
#  STEP 2 + 3: SETTLE
# ============================================================================
#
# Inverse payoff: notional * (underlying - strike) / underlying.
# With underlying 120: 1000 * 20 / 120 = 166.67 moves to the senior side.
# Both sides are floored, so 0.67 + 0.33 = 1 unit becomes the fee.

sep("STEP 2: Settle at underlying = 120")

payload = request("120")
print(f"  request bytes: {len(payload)}")
raw = unwrap(handle_execute(store, "btc-usd-inverse", payload))
result = unwrap(parse_execute_result(raw))
print(f"  new_quantity:  {list(result.new_quantity)}")
print(f"  fee_quantity:  {result.fee_quantity}")
print(f"  conserved:     {result.total == 200_000}")

sep("STEP 3: Underlying goes to zero")

# Inverse contract, positive strike, zero underlying: the senior side is
# wiped out. There is no division by zero; the pool goes to the junior side.
result = unwrap(parse_execute_result(unwrap(handle_execute(store, "btc-usd-inverse", request("0")))))
print(f"  new_quantity:  {list(result.new_quantity)}")


# ============================================================================
#  STEP 4: FAILURES
# ============================================================================
#
# Every failure is a value with a stable numeric code. Nothing is clamped
# silently and nothing is retried.

sep("STEP 4: Failure modes")

for label, outcome in (
    ("negative underlying", handle_execute(store, "btc-usd-inverse", request("-1"))),
    ("address reused", handle_initialize(store, "btc-usd-inverse", 50.0, 1, True, True)),
    ("NaN strike", handle_initialize(store, "other", float("nan"), 1, True, True)),
    ("unknown address", handle_execute(store, "nowhere", request("100"))),
):
    match outcome:
        case Err(e):
            print(f"  {label:22s} -> {e.kind.number} {e.message}")
        case Ok(_):
            raise RuntimeError(f"{label} unexpectedly succeeded")


# ============================================================================
#  STEP 5: INVERSE-QUOTED SETTLEMENT LEG
# ============================================================================
#
# A settlement price of 2 quoted inverse means 0.5 in standard terms.
# Linear payoff: 1000 * (100 - 50) * 0.5 = 25000.

sep("STEP 5: Linear forward, inverse-quoted settlement leg")

unwrap(handle_initialize(store, "eth-linear", 50.0, 1000, is_linear=True, is_standard=False))
result = unwrap(parse_execute_result(unwrap(handle_execute(store, "eth-linear", request("100", "2")))))
print(f"  new_quantity:  {list(result.new_quantity)}")
print(f"  fee_quantity:  {result.fee_quantity}")

print()
print("Done. Every settlement above conserved the pool exactly.")
