"""Activity implementation: run one settlement.

The activity is a thin wrapper. All domain logic lives in
settled_forward.settlement; the activity only adapts Ok/Err into a
SettlementOutput and logs through activity.logger.

Idempotent: the output is a pure function of the input.
"""

from __future__ import annotations

from temporalio import activity

from settled_forward.core.result import Err, Ok
from settled_forward.settlement.engine import execute
from settled_forward.workflow.types import SettlementOutput, SettlementRequest


@activity.defn(name="execute_settlement")
async def execute_settlement(req: SettlementRequest) -> SettlementOutput:
    """Settle req.execute_input against req.config.

    Timeout: 10s | Retries: none (a failed settlement is aborted)
    """
    activity.logger.info("Executing settlement %s", req.request_id)
    match execute(req.config, req.execute_input):
        case Ok(result):
            activity.logger.info(
                "Settlement %s: new_quantity=%s fee=%d",
                req.request_id, list(result.new_quantity), result.fee_quantity,
            )
            return SettlementOutput(result=result)
        case Err(err):
            activity.logger.warning(
                "Settlement %s aborted: %s %s", req.request_id, err.code, err.message,
            )
            return SettlementOutput.failed(err)
