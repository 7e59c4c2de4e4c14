"""Workflow wrapper that runs a single settlement activity.

Determinism contract: no I/O, no randomness, no clock access here. The
settlement is run exactly once; a failure is reported in the output and
the orchestrator decides whether to try again on a fresh observation.
"""

from __future__ import annotations

from temporalio import workflow
from temporalio.common import RetryPolicy

with workflow.unsafe.imports_passed_through():
    from settled_forward.infra.config import WorkerConfig
    from settled_forward.workflow.activities import execute_settlement
    from settled_forward.workflow.types import SettlementOutput, SettlementRequest

SETTLEMENT_RETRY = RetryPolicy(maximum_attempts=1)


@workflow.defn(name="SettledForwardSettlement")
class SettlementWorkflow:
    """Settle one observation for one instrument."""

    @workflow.run
    async def run(self, req: SettlementRequest) -> SettlementOutput:
        return await workflow.execute_activity(
            execute_settlement,
            req,
            start_to_close_timeout=WorkerConfig().activity_timeout,
            retry_policy=SETTLEMENT_RETRY,
        )
