"""settled_forward.instrument — persisted contract terms."""

from settled_forward.instrument.config import (
    SettlementConfig as SettlementConfig,
)
