"""
Result type for best-effort operations.

Focus and announcement requests must never raise into the hosting widget's
event handler. Operations that can fail return ``Ok``/``Err`` instead, and
callers decide whether the failure matters.

Usage:
    from focus_core.result import Result, Ok, Err

    result = registry.safe_focus(button)
    if result.is_err():
        logger.debug(f"Focus did not move: {result.error}")

    element = result.unwrap_or(None)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, NoReturn, TypeVar, Union

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Mapped success type


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result holding a value.

    Example:
        >>> Ok("button").unwrap()
        'button'
    """

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Get the success value."""
        return self.value

    def unwrap_or(self, default: Any) -> T:
        """Get the success value; default is ignored."""
        return self.value

    def map(self, func: Callable[[T], U]) -> "Ok[U]":
        """Transform the success value.

        Example:
            >>> Ok(2).map(lambda i: i + 1)
            Ok(3)
        """
        return Ok(func(self.value))

    @property
    def error(self) -> None:
        return None

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed result holding an error value.

    Example:
        >>> Err("detached").is_err()
        True
    """

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """Raises, since there is no success value.

        Raises:
            ValueError: Always.
        """
        raise ValueError(f"Called unwrap on Err: {self.error}")

    def unwrap_or(self, default: T) -> T:
        """Return default."""
        return default

    def map(self, func: Callable[[Any], U]) -> "Err[E]":
        """No-op for Err."""
        return self

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result = Union[Ok[T], Err[E]]
