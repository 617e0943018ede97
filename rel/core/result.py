"""Result type for explicit error handling.

Failures that callers are expected to handle are returned as ``Err`` values
instead of being raised. Lookups whose failure simply means "no value" return
``None`` and are chained with :func:`first_present`.

Usage:
    match repo.fetch():
        case Ok(output):
            ...
        case Err(error):
            console.error(error.message)

    url = first_present(
        lambda: options.push_repo,
        lookup_branch_remote,
        lambda: "origin",
    )
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeGuard, TypeVar

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")

__all__ = ["Err", "Ok", "Result", "first_present", "is_err", "is_ok"]


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Successful result carrying ``value``."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_err(self) -> None:
        raise ValueError(f"called unwrap_err on Ok: {self.value}")

    def ok(self) -> T:
        """Return the value (``None`` for ``Err``)."""
        return self.value

    def map(self, f: Callable[[T], U]) -> Ok[U]:
        return Ok(f(self.value))

    def map_err(self, f: Callable[[E], F]) -> Ok[T]:
        return self

    def or_else(self, f: Callable[[E], Result[T, F]]) -> Ok[T]:
        """Keep this value; the alternative is never evaluated."""
        return self

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err[E]:
    """Failed result carrying ``error``."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> None:
        raise ValueError(f"called unwrap on Err: {self.error}")

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_err(self) -> E:
        return self.error

    def ok(self) -> None:
        return None

    def map(self, f: Callable[[T], U]) -> Err[E]:
        return self

    def map_err(self, f: Callable[[E], F]) -> Err[F]:
        return Err(f(self.error))

    def or_else(self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Evaluate the alternative with this error.

        This is the building block of "try A, else B" chains:

            repo.remote_get_url(name).or_else(lambda _: repo.remote_config_url(name))
        """
        return f(self.error)

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]


def is_ok[T, E](result: Result[T, E]) -> TypeGuard[Ok[T]]:
    """Type guard that narrows a Result to Ok."""
    return isinstance(result, Ok)


def is_err[T, E](result: Result[T, E]) -> TypeGuard[Err[E]]:
    """Type guard that narrows a Result to Err."""
    return isinstance(result, Err)


def first_present[T](*steps: Callable[[], T | None]) -> T | None:
    """Return the first value produced by ``steps``.

    Steps are evaluated lazily, in order. ``None`` and empty strings count as
    "no value" and move on to the next step.

    Args:
        steps: Zero-argument callables, each returning a value or None.

    Returns:
        The first present value, or None if every step came up empty.
    """
    for step in steps:
        value = step()
        if value is None or value == "":
            continue
        return value
    return None
