"""Explicit success/failure values for stages that must never raise.

Hook stages return ``Result`` so the "never block the commit" contract is
visible in their signatures; the hook command is responsible for logging and
discarding any ``Err``.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E", bound=BaseException)


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful stage outcome."""

    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed stage outcome carrying the exception that stopped it."""

    error: E

    @property
    def ok(self) -> bool:
        return False


Result: TypeAlias = Ok[T] | Err[E]


def capture(fn: Callable[[], T]) -> Result[T, Exception]:
    """Run fn, folding any exception into an Err."""
    try:
        return Ok(fn())
    except Exception as e:  # noqa: BLE001
        return Err(e)
