"""
Operation Results

Every volume operation reports how it went as an ``OperationResult``
instead of raising. Callers that only care about success can use the
plain ``None``/``False`` API on the volume; callers that need to tell
"missing" from "broken" look at ``kind``.

Author: YSNRFD
Version: 1.0.0
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Generic, Optional, TypeVar


T = TypeVar('T')


class ResultKind(Enum):
    """Outcome of a volume operation."""
    OK = auto()
    NOT_FOUND = auto()
    IO_ERROR = auto()
    CONTRACT_VIOLATION = auto()


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    """The outcome of one volume operation and, on success, its value."""
    kind: ResultKind
    value: Optional[T] = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.kind is ResultKind.OK

    @classmethod
    def success(cls, value: Optional[T] = None) -> 'OperationResult[T]':
        return cls(ResultKind.OK, value=value)

    @classmethod
    def not_found(cls) -> 'OperationResult[T]':
        return cls(ResultKind.NOT_FOUND)

    @classmethod
    def failure(cls, error: BaseException) -> 'OperationResult[T]':
        return cls(ResultKind.IO_ERROR, error=error)

    @classmethod
    def violation(cls, error: BaseException) -> 'OperationResult[T]':
        return cls(ResultKind.CONTRACT_VIOLATION, error=error)
