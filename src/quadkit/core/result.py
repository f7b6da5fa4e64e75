"""
Minimal result values for operations that report failure without raising.

Ok and Err are frozen, slotted dataclasses; Result is their union. The error
slot is either quadkit.core.errors.Error (may fail) or
quadkit.core.infallible.Infallible (proven not to fail).

Examples:
    >>> from quadkit.core.result import Err, Ok, Result
    >>> def half(n: int) -> Result[int, str]:
    ...     return Ok(n // 2) if n % 2 == 0 else Err("odd")
    >>> half(4), half(3)
    (Ok(value=2), Err(error='odd'))
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

__all__ = [
    "Ok",
    "Err",
    "Result",
]

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful outcome."""

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed outcome."""

    error: E


Result = Union[Ok[T], Err[E]]
