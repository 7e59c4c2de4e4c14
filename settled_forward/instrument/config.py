"""SettlementConfig — the immutable per-instrument settlement parameters.

Created once at initialization from a float strike, persisted as a 34-byte
record and read back on every settlement call::

    tag (8) | notional u64 LE (8) | is_linear (1) | is_standard (1) | strike (16)

The tag is the first 8 bytes of sha256("account:RedeemLogicConfig").
"""

from __future__ import annotations

import logging
import math
import struct
from dataclasses import dataclass
from typing import final

from settled_forward.core.errors import (
    InvalidInputError,
    MathError,
    invalid_input,
    math_error,
)
from settled_forward.core.fixed_point import U64_MAX, ZERO, FixedDecimal
from settled_forward.core.result import Err, Ok
from settled_forward.infra.config import (
    CONFIG_RECORD_LEN,
    CONFIG_TAG,
    CONFIG_TAG_LEN,
    DECIMAL_LEN,
)

logger = logging.getLogger(__name__)

_BODY = struct.Struct("<QBB")
_STRIKE_OFFSET = CONFIG_TAG_LEN + _BODY.size


@final
@dataclass(frozen=True, slots=True)
class SettlementConfig:
    """Contract terms of a settled forward.

    strike:      fixed-point price, >= 0
    notional:    contract size in base-asset units, u64
    is_linear:   True for linear payoff, False for inverse
    is_standard: True if the settlement leg is quoted standard, False if inverse
    """

    strike: FixedDecimal
    notional: int
    is_linear: bool
    is_standard: bool

    def __post_init__(self) -> None:
        if self.strike < ZERO:
            raise TypeError(f"SettlementConfig.strike must be >= 0, got {self.strike}")
        if isinstance(self.notional, bool) or not 0 <= self.notional <= U64_MAX:
            raise TypeError(f"SettlementConfig.notional must be u64, got {self.notional!r}")

    @staticmethod
    def create(
        strike: float, notional: int, is_linear: bool, is_standard: bool,
    ) -> Ok[SettlementConfig] | Err[InvalidInputError | MathError]:
        """Build the config from initialization parameters.

        NaN or a strike that does not fit the fixed-point domain is a
        MathError; a negative strike or a notional outside u64 is InvalidInput.
        """
        source = "instrument.config.SettlementConfig.create"
        if isinstance(strike, float) and math.isnan(strike):
            return Err(math_error("strike_from_float", source, "strike is NaN"))
        if strike < 0:
            return Err(invalid_input("strike", strike, source, "strike must be >= 0"))
        if isinstance(notional, bool) or not 0 <= notional <= U64_MAX:
            return Err(invalid_input("notional", notional, source, "notional must be u64"))
        match FixedDecimal.from_float(strike):
            case Err(e):
                return Err(math_error("strike_from_float", source, e))
            case Ok(fixed_strike):
                return Ok(SettlementConfig(
                    strike=fixed_strike, notional=notional,
                    is_linear=is_linear, is_standard=is_standard,
                ))

    # --- Persisted record ---

    def to_record(self) -> bytes:
        """Serialize to the 34-byte persisted record."""
        return (
            CONFIG_TAG
            + _BODY.pack(self.notional, int(self.is_linear), int(self.is_standard))
            + self.strike.serialize()
        )

    @staticmethod
    def from_record(raw: bytes) -> Ok[SettlementConfig] | Err[InvalidInputError]:
        """Decode a persisted record. Any malformed byte is InvalidInput."""
        source = "instrument.config.SettlementConfig.from_record"
        if len(raw) != CONFIG_RECORD_LEN:
            return Err(invalid_input(
                "record", len(raw), source,
                f"record must be {CONFIG_RECORD_LEN} bytes",
            ))
        if raw[:CONFIG_TAG_LEN] != CONFIG_TAG:
            return Err(invalid_input("record.tag", raw[:CONFIG_TAG_LEN].hex(), source, "unknown record tag"))
        notional, is_linear, is_standard = _BODY.unpack_from(raw, CONFIG_TAG_LEN)
        for name, flag in (("is_linear", is_linear), ("is_standard", is_standard)):
            if flag not in (0, 1):
                return Err(invalid_input(f"record.{name}", flag, source, "bool byte must be 0 or 1"))
        match FixedDecimal.deserialize(raw[_STRIKE_OFFSET:_STRIKE_OFFSET + DECIMAL_LEN]):
            case Err(e):
                return Err(invalid_input("record.strike", raw[_STRIKE_OFFSET:].hex(), source, e))
            case Ok(strike):
                pass
        if strike < ZERO:
            return Err(invalid_input("record.strike", strike, source, "strike must be >= 0"))
        return Ok(SettlementConfig(
            strike=strike, notional=notional,
            is_linear=bool(is_linear), is_standard=bool(is_standard),
        ))

    def dump(self) -> None:
        """Log every field at DEBUG."""
        logger.debug("settlement config:")
        logger.debug("+ notional: %d", self.notional)
        logger.debug("+ is_linear: %s", self.is_linear)
        logger.debug("+ is_standard: %s", self.is_standard)
        logger.debug("+ strike: %s", self.strike)
