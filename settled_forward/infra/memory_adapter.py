"""In-memory ConfigStore.

Lets handlers and the test suite run without a backing store.
"""

from __future__ import annotations

from typing import final

from settled_forward.core.errors import GenericError, generic_error
from settled_forward.core.result import Err, Ok


@final
class InMemoryConfigStore:
    """Config records keyed by address. Write-once per address."""

    def __init__(self) -> None:
        self._records: dict[str, bytes] = {}

    def put(
        self, address: str, record: bytes,
    ) -> Ok[None] | Err[GenericError]:
        if address in self._records:
            return Err(generic_error(
                "put", "memory_adapter.put", f"address already in use: {address}",
            ))
        self._records[address] = bytes(record)
        return Ok(None)

    def get(
        self, address: str,
    ) -> Ok[bytes] | Err[GenericError]:
        if address in self._records:
            return Ok(self._records[address])
        return Err(generic_error(
            "get", "memory_adapter.get", f"config record not found: {address}",
        ))

    def exists(
        self, address: str,
    ) -> Ok[bool] | Err[GenericError]:
        return Ok(address in self._records)

    def count(self) -> int:
        """Test-only helper."""
        return len(self._records)
