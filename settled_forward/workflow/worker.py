"""Worker hosting the settlement workflow and activity.

Usage::

    import asyncio
    from settled_forward.workflow.worker import run_worker

    asyncio.run(run_worker())
"""

from __future__ import annotations

from temporalio.client import Client
from temporalio.worker import Worker

from settled_forward.infra.config import LoggingConfig, WorkerConfig, configure_logging
from settled_forward.workflow.activities import execute_settlement
from settled_forward.workflow.settlement_workflow import SettlementWorkflow


async def run_worker(
    config: WorkerConfig = WorkerConfig(),
    logging_config: LoggingConfig = LoggingConfig(),
) -> None:
    """Connect to Temporal and run the worker until interrupted."""
    from settled_forward.workflow.converter import SETTLEMENT_DATA_CONVERTER

    configure_logging(logging_config)
    client = await Client.connect(
        config.target_host, namespace=config.namespace,
        data_converter=SETTLEMENT_DATA_CONVERTER,
    )

    worker = Worker(
        client,
        task_queue=config.task_queue,
        workflows=[SettlementWorkflow],
        activities=[execute_settlement],
    )
    await worker.run()
