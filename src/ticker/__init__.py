from .paced import (
    AsyncPacedIterator,
    PacedIterator,
    TickerState,
    aticks,
    ticks,
)
from .results import EXHAUSTED, Exhausted, Produced, RequestResult
from .utils.validation import IntervalValidationError, validate_interval

__all__ = [
    "AsyncPacedIterator",
    "PacedIterator",
    "TickerState",
    "aticks",
    "ticks",
    "EXHAUSTED",
    "Exhausted",
    "Produced",
    "RequestResult",
    "IntervalValidationError",
    "validate_interval",
]
