"""
Explicit outcome of a handler-layer call.

Handlers return `Success(value)` or `Failure(error)` instead of raising, and the
HTTP boundary turns a `Failure` into an error response using the error's code
and status.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from app.core.exceptions import BaseAPIException

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    error: BaseAPIException

    @property
    def ok(self) -> bool:
        return False

    @property
    def code(self) -> str:
        return self.error.code

    @property
    def status_code(self) -> int:
        return self.error.status_code


Result = Union[Success[T], Failure]
