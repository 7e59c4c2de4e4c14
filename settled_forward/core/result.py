"""Ok / Err: how settlement steps report success or failure.

A step that can fail returns ``Ok(value)`` or ``Err(error)`` and the caller
pattern-matches on it::

    match compute_payoff(...):
        case Err() as e:
            return e
        case Ok(payoff):
            ...

Domain failures never travel as exceptions; the first Err ends the call.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, NoReturn, TypeAlias, TypeVar, final

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")


@final
@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T

    def map(self, f: Callable[[T], U]) -> Ok[U]:
        return Ok(f(self.value))

    def and_then(self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Chain a further step that may itself fail."""
        return f(self.value)

    def map_err(self, f: Callable[[Any], Any]) -> Ok[T]:  # noqa: ARG002
        return self

    def unwrap(self) -> T:
        return self.value


@final
@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    error: E

    def map(self, f: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        return self

    def and_then(self, f: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        return self

    def map_err(self, f: Callable[[E], F]) -> Err[F]:
        return Err(f(self.error))

    def unwrap(self) -> NoReturn:
        raise RuntimeError(f"unwrap on Err: {self.error}")


Result: TypeAlias = Ok[T] | Err[E]


def unwrap(result: Ok[T] | Err[Any]) -> T:
    """Value of an Ok, else RuntimeError. For tests and process boundaries."""
    match result:
        case Ok(value):
            return value
        case Err(error):
            raise RuntimeError(f"unwrap on Err: {error}")
        case _:
            raise TypeError(f"not a Result: {type(result).__name__}")


def first_err(results: Iterable[Ok[Any] | Err[E]]) -> Ok[None] | Err[E]:
    """Consume results in order and stop at the first Err."""
    for r in results:
        if isinstance(r, Err):
            return r
    return Ok(None)
