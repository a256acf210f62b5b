"""Return types for paced sequence requests."""

from dataclasses import dataclass
from typing import Generic, TypeVar

_T = TypeVar("_T")


class RequestResult:
    """Base class for request_next() results."""


@dataclass(frozen=True)
class Produced(RequestResult, Generic[_T]):
    """The source yielded a value."""

    value: _T


@dataclass(frozen=True)
class Exhausted(RequestResult):
    """The source is exhausted; terminal."""

    pass


EXHAUSTED = Exhausted()
