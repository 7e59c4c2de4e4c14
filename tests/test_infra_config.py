"""Tests for settled_forward.infra.config — layout constants and logging setup."""

from __future__ import annotations

import hashlib
import logging
from datetime import timedelta

from settled_forward.infra.config import (
    CONFIG_RECORD_LEN,
    CONFIG_TAG,
    EXECUTE_INPUT_LEN,
    EXECUTE_RESULT_LEN,
    LoggingConfig,
    WorkerConfig,
    configure_logging,
)


class TestLayout:
    def test_lengths(self) -> None:
        assert EXECUTE_INPUT_LEN == 336
        assert EXECUTE_RESULT_LEN == 24
        assert CONFIG_RECORD_LEN == 34

    def test_tag(self) -> None:
        assert CONFIG_TAG == hashlib.sha256(b"account:RedeemLogicConfig").digest()[:8]


class TestWorkerConfig:
    def test_defaults(self) -> None:
        config = WorkerConfig()
        assert config.target_host == "localhost:7233"
        assert config.task_queue == "settled-forward"
        assert config.activity_timeout == timedelta(seconds=10)


class TestConfigureLogging:
    def test_engine_level_override(self) -> None:
        engine = logging.getLogger("settled_forward")
        previous = engine.level
        try:
            configure_logging(LoggingConfig(engine_level=logging.DEBUG))
            assert engine.level == logging.DEBUG
        finally:
            engine.setLevel(previous)

    def test_no_override_leaves_engine_level(self) -> None:
        engine = logging.getLogger("settled_forward")
        previous = engine.level
        configure_logging(LoggingConfig())
        assert engine.level == previous
