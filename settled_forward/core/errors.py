"""Error value hierarchy — no settlement function raises exceptions.

Every failure is a frozen dataclass value that can be pattern-matched,
serialized and logged. Base class SettlementError, three @final subclasses
matching the failure kinds an orchestrator has to distinguish:

    GenericError       6000  catch-all, also used for storage lookups
    InvalidInputError  6001  negative price / strike, malformed payload
    MathError          6002  overflow or out-of-range numeric conversion
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import final


class ErrorKind(Enum):
    """Failure kinds with their stable numeric codes and messages."""

    GENERIC_ERROR = (6000, "generic error")
    INVALID_INPUT = (6001, "invalid input")
    MATH_ERROR = (6002, "failed to perform some math operation safely")

    @property
    def number(self) -> int:
        return self.value[0]

    @property
    def description(self) -> str:
        return self.value[1]


@dataclass(frozen=True, slots=True)
class SettlementError:
    """Base error value. NOT @final — has subclasses."""

    message: str
    code: str
    source: str  # "module.function" that produced this error

    @property
    def kind(self) -> ErrorKind:
        return ErrorKind[self.code]

    def with_context(self, context: str) -> SettlementError:
        """Return a copy with context prepended to message."""
        return replace(self, message=f"{context}: {self.message}")

    def to_dict(self) -> dict[str, object]:
        """Serialize to dict with stable keys."""
        return {
            "message": self.message,
            "code": self.code,
            "number": self.kind.number,
            "source": self.source,
        }


@final
@dataclass(frozen=True, slots=True)
class GenericError(SettlementError):
    """Condition not otherwise classified."""

    operation: str

    def to_dict(self) -> dict[str, object]:
        return {**SettlementError.to_dict(self), "operation": self.operation}


@final
@dataclass(frozen=True, slots=True)
class InvalidInputError(SettlementError):
    """A supplied value is outside its allowed domain."""

    field: str  # e.g. "new_fair_values[3]"
    actual_value: str

    def to_dict(self) -> dict[str, object]:
        return {
            **SettlementError.to_dict(self),
            "field": self.field,
            "actual_value": self.actual_value,
        }


@final
@dataclass(frozen=True, slots=True)
class MathError(SettlementError):
    """A numeric result is not representable in its target type."""

    operation: str

    def to_dict(self) -> dict[str, object]:
        return {**SettlementError.to_dict(self), "operation": self.operation}


def invalid_input(field: str, actual: object, source: str, detail: str = "") -> InvalidInputError:
    """Build an InvalidInputError with the standard message."""
    message = ErrorKind.INVALID_INPUT.description
    if detail:
        message = f"{message}: {detail}"
    return InvalidInputError(
        message=message, code=ErrorKind.INVALID_INPUT.name, source=source,
        field=field, actual_value=str(actual),
    )


def math_error(operation: str, source: str, detail: str = "") -> MathError:
    """Build a MathError with the standard message."""
    message = ErrorKind.MATH_ERROR.description
    if detail:
        message = f"{message}: {detail}"
    return MathError(
        message=message, code=ErrorKind.MATH_ERROR.name, source=source,
        operation=operation,
    )


def generic_error(operation: str, source: str, detail: str = "") -> GenericError:
    """Build a GenericError with the standard message."""
    message = ErrorKind.GENERIC_ERROR.description
    if detail:
        message = f"{message}: {detail}"
    return GenericError(
        message=message, code=ErrorKind.GENERIC_ERROR.name, source=source,
        operation=operation,
    )
