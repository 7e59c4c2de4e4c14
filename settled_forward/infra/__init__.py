"""settled_forward.infra — configuration, storage protocol and adapters."""

from settled_forward.infra.config import LoggingConfig as LoggingConfig
from settled_forward.infra.config import WorkerConfig as WorkerConfig
from settled_forward.infra.config import configure_logging as configure_logging
from settled_forward.infra.memory_adapter import InMemoryConfigStore as InMemoryConfigStore
from settled_forward.infra.protocols import ConfigStore as ConfigStore
