"""Layout constants, worker settings and logging setup.

Pure configuration data plus one function, configure_logging(), that the
worker process calls once at start-up. Library code never configures
logging itself; it only obtains module loggers.
"""

from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import final

# ---------------------------------------------------------------------------
# Calling convention shared with sibling redeem-logic engines
# ---------------------------------------------------------------------------

QUANTITY_SLOTS: int = 2
FAIR_VALUE_SLOTS: int = 10
UNDERLYING_SLOT: int = 0
SETTLEMENT_SLOT: int = 1

U64_LEN: int = 8
DECIMAL_LEN: int = 16

EXECUTE_INPUT_LEN: int = QUANTITY_SLOTS * U64_LEN + 2 * FAIR_VALUE_SLOTS * DECIMAL_LEN  # 336
EXECUTE_RESULT_LEN: int = (QUANTITY_SLOTS + 1) * U64_LEN  # 24

# ---------------------------------------------------------------------------
# Persisted config record
# ---------------------------------------------------------------------------

CONFIG_RECORD_NAME: str = "RedeemLogicConfig"
CONFIG_TAG_LEN: int = 8
CONFIG_TAG: bytes = hashlib.sha256(f"account:{CONFIG_RECORD_NAME}".encode()).digest()[:CONFIG_TAG_LEN]

CONFIG_RECORD_LEN: int = (
    CONFIG_TAG_LEN
    + U64_LEN      # notional
    + 1            # is_linear
    + 1            # is_standard
    + DECIMAL_LEN  # strike
)  # 34


# ---------------------------------------------------------------------------
# Temporal worker
# ---------------------------------------------------------------------------


@final
@dataclass(frozen=True, slots=True)
class WorkerConfig:
    """Connection and queue settings for the settlement worker."""

    target_host: str = "localhost:7233"
    namespace: str = "default"
    task_queue: str = "settled-forward"
    activity_timeout: timedelta = timedelta(seconds=10)


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


@final
@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Root logging configuration for processes that host the engine."""

    level: int = logging.INFO
    fmt: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    datefmt: str = "%Y-%m-%dT%H:%M:%S%z"
    engine_level: int | None = None  # overrides level for settled_forward.*


def configure_logging(config: LoggingConfig = LoggingConfig()) -> None:
    """Install a stream handler on the root logger.

    Idempotent: basicConfig is a no-op once the root logger has handlers.
    """
    logging.basicConfig(level=config.level, format=config.fmt, datefmt=config.datefmt)
    if config.engine_level is not None:
        logging.getLogger("settled_forward").setLevel(config.engine_level)
