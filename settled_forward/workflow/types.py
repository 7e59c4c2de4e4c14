"""Activity input/output wrappers for settlement over Temporal.

All types: @final @dataclass(frozen=True, slots=True). The output carries
either a result or an error description, never both; domain failures are
data, not activity failures, so Temporal never retries them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final

from settled_forward.core.errors import SettlementError
from settled_forward.gateway.types import ExecuteInput, ExecutionResult
from settled_forward.instrument.config import SettlementConfig


@final
@dataclass(frozen=True, slots=True)
class SettlementRequest:
    """One settlement of one instrument. request_id doubles as workflow ID."""

    request_id: str
    config: SettlementConfig
    execute_input: ExecuteInput

    def __post_init__(self) -> None:
        if not self.request_id:
            raise TypeError("SettlementRequest.request_id must be non-empty")


@final
@dataclass(frozen=True, slots=True)
class SettlementOutput:
    """Result of execute_settlement."""

    result: ExecutionResult | None = None
    error_code: str | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        if (self.result is None) == (self.error_code is None):
            raise TypeError("SettlementOutput requires exactly one of result or error_code")

    @staticmethod
    def failed(err: SettlementError) -> SettlementOutput:
        return SettlementOutput(error_code=err.code, error=f"{err.source}: {err.message}")

    @property
    def ok(self) -> bool:
        return self.result is not None
