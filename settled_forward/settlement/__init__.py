"""settled_forward.settlement — the settlement pipeline and its handlers."""

from settled_forward.settlement.allocation import (
    allocate as allocate,
)
from settled_forward.settlement.engine import (
    execute as execute,
)
from settled_forward.settlement.engine import (
    execute_plugin as execute_plugin,
)
from settled_forward.settlement.handlers import (
    handle_execute as handle_execute,
)
from settled_forward.settlement.handlers import (
    handle_initialize as handle_initialize,
)
from settled_forward.settlement.payoff import (
    compute_payoff as compute_payoff,
)
from settled_forward.settlement.quote import (
    normalize_settlement_price as normalize_settlement_price,
)
from settled_forward.settlement.validation import (
    validate_fair_values as validate_fair_values,
)
