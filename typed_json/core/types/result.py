# typed_json/core/types/result.py

"""Result monad shared by every decoder."""

# Standard library imports
from typing import Callable
from typing import Literal

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict


class Ok[T](BaseModel):
    """Success result."""

    model_config = ConfigDict(frozen=True)

    value: T

    def is_ok(self) -> Literal[True]:
        return True

    def is_err(self) -> Literal[False]:
        return False

    def map[U](self, func: Callable[[T], U]) -> "Ok[U]":
        """Map function over success value."""
        return Ok(value=func(self.value))

    def flat_map[U, E](self, func: Callable[[T], "Result[U, E]"]) -> "Result[U, E]":
        """Flat map for chaining operations."""
        return func(self.value)

    def map_error[F](self, func: Callable[[object], F]) -> "Ok[T]":
        """Map over the error has no effect on successes."""
        return self


class Err[E](BaseModel):
    """Error result."""

    model_config = ConfigDict(frozen=True)

    error: E

    def is_ok(self) -> Literal[False]:
        return False

    def is_err(self) -> Literal[True]:
        return True

    def map[U](self, func: Callable[[object], U]) -> "Err[E]":
        """Map has no effect on errors."""
        return self

    def flat_map[U](self, func: Callable[[object], "Result[U, E]"]) -> "Err[E]":
        """Flat map has no effect on errors."""
        return self

    def map_error[F](self, func: Callable[[E], F]) -> "Err[F]":
        """Transform the carried error."""
        return Err(error=func(self.error))


type Result[T, E] = Ok[T] | Err[E]

__all__ = ["Ok", "Err", "Result"]
