"""
result.py

Tagged success/failure values returned by the ladder engine.
Expected conditions (unknown word, no ladder, ...) come back as a failed
Outcome instead of being raised, so every caller has to look at `ok`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    INVALID_INPUT = "invalid_input"
    WORD_NOT_FOUND = "word_not_found"
    NO_PATH = "no_path"
    ITERATION_LIMIT_EXCEEDED = "iteration_limit_exceeded"
    RECONSTRUCTION_INVARIANT_VIOLATION = "reconstruction_invariant_violation"


@dataclass(frozen=True)
class Failure:
    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"


class LadderError(Exception):
    """Raised by Outcome.unwrap() when the outcome is a failure."""

    def __init__(self, failure: Failure) -> None:
        super().__init__(str(failure))
        self.failure = failure

    @property
    def kind(self) -> ErrorKind:
        return self.failure.kind


@dataclass(frozen=True)
class Outcome(Generic[T]):
    value: Optional[T] = None
    failure: Optional[Failure] = None

    @classmethod
    def success(cls, value: T) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def fail(cls, kind: ErrorKind, message: str) -> "Outcome[T]":
        return cls(failure=Failure(kind, message))

    @property
    def ok(self) -> bool:
        return self.failure is None

    @property
    def kind(self) -> Optional[ErrorKind]:
        """Error kind of a failed outcome, None on success."""
        return None if self.failure is None else self.failure.kind

    def unwrap(self) -> T:
        """Return the value; raise LadderError if this is a failure."""
        if self.failure is not None:
            raise LadderError(self.failure)
        return self.value  # type: ignore[return-value]

    def propagate(self) -> "Outcome":
        """Re-tag a failure for a caller expecting a different value type."""
        if self.failure is None:
            raise ValueError("cannot propagate a successful outcome")
        return Outcome(failure=self.failure)
