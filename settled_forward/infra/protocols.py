"""Storage protocol for persisted config records.

Handlers depend on this abstraction; adapters implement it. Records are
opaque bytes here; encoding is SettlementConfig's responsibility.

All methods return Ok[T] | Err[GenericError]. Storage failures are values,
never exceptions.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from settled_forward.core.errors import GenericError
from settled_forward.core.result import Err, Ok


@runtime_checkable
class ConfigStore(Protocol):
    """Address-keyed store of config records.

    Invariants:
      - put() never overwrites: an address already in use is Err.
      - get() returns Err if the address is unknown.
    """

    def put(
        self, address: str, record: bytes,
    ) -> Ok[None] | Err[GenericError]: ...

    def get(
        self, address: str,
    ) -> Ok[bytes] | Err[GenericError]: ...

    def exists(
        self, address: str,
    ) -> Ok[bool] | Err[GenericError]: ...
