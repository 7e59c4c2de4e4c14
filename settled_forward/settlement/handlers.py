"""Instruction handlers: initialize an instrument, execute a settlement.

These tie together the config store, the record and wire codecs and the
engine. Inputs and outputs are bytes-level, as delivered by a transport.
"""

from __future__ import annotations

import logging

from settled_forward.core.errors import SettlementError, generic_error
from settled_forward.core.result import Err, Ok
from settled_forward.gateway.parser import encode_execute_result, parse_execute_input
from settled_forward.infra.protocols import ConfigStore
from settled_forward.instrument.config import SettlementConfig
from settled_forward.settlement.engine import execute

logger = logging.getLogger(__name__)


def handle_initialize(
    store: ConfigStore,
    address: str,
    strike: float,
    notional: int,
    is_linear: bool,
    is_standard: bool,
) -> Ok[SettlementConfig] | Err[SettlementError]:
    """Create the config for a new instrument and persist it at address."""
    match store.exists(address):
        case Err() as e:
            return e
        case Ok(True):
            return Err(generic_error(
                "initialize", "settlement.handlers.handle_initialize",
                f"address already in use: {address}",
            ))
        case Ok(False):
            pass

    match SettlementConfig.create(strike, notional, is_linear, is_standard):
        case Err() as e:
            return e
        case Ok(config):
            pass

    match store.put(address, config.to_record()):
        case Err() as e:
            return e
        case Ok():
            logger.info(
                "initialized %s: strike=%s notional=%d linear=%s standard=%s",
                address, config.strike, config.notional, config.is_linear, config.is_standard,
            )
            return Ok(config)


def handle_execute(
    store: ConfigStore, address: str, payload: bytes,
) -> Ok[bytes] | Err[SettlementError]:
    """Settle the instrument at address against an encoded execute request.

    Returns the encoded execute result.
    """
    match store.get(address):
        case Err() as e:
            return e
        case Ok(record):
            pass
    match SettlementConfig.from_record(record).map_err(
        lambda e: e.with_context(f"config record at {address}"),
    ):
        case Err() as e:
            return e
        case Ok(config):
            pass
    return (
        parse_execute_input(payload)
        .and_then(lambda request: execute(config, request))
        .map(encode_execute_result)
    )
