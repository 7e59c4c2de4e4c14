"""settled_forward.workflow -- Temporal activity and workflow for settlements."""

from settled_forward.workflow.activities import (
    execute_settlement as execute_settlement,
)
from settled_forward.workflow.settlement_workflow import (
    SETTLEMENT_RETRY as SETTLEMENT_RETRY,
)
from settled_forward.workflow.settlement_workflow import (
    SettlementWorkflow as SettlementWorkflow,
)
from settled_forward.workflow.types import (
    SettlementOutput as SettlementOutput,
)
from settled_forward.workflow.types import (
    SettlementRequest as SettlementRequest,
)
