"""Error kinds and the exceptions raised when a failed result is unwrapped."""

from enum import Enum
from typing import Dict, Type


class ErrorKind(str, Enum):
    INVALID_INPUT = "invalid_input"
    EMPTY_STACK = "empty_stack"
    FETCH_FAILED = "fetch_failed"
    UNDEFINED = "undefined"


# ============================================================================
#                               Exceptions
# ============================================================================


class UtilkitError(Exception):
    """Base class for errors raised by ``Err.unwrap()``."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInputError(UtilkitError):
    """Raised when an argument fails validation."""

    kind = ErrorKind.INVALID_INPUT


class EmptyStackError(UtilkitError):
    """Raised when popping or peeking an empty stack."""

    kind = ErrorKind.EMPTY_STACK


class FetchFailedError(UtilkitError):
    """Raised when the simulated fetch is told to fail."""

    kind = ErrorKind.FETCH_FAILED


class UndefinedResultError(UtilkitError):
    """Raised when an operation has no defined value for its input."""

    kind = ErrorKind.UNDEFINED


_ERRORS_BY_KIND: Dict[ErrorKind, Type[UtilkitError]] = {
    cls.kind: cls
    for cls in (InvalidInputError, EmptyStackError, FetchFailedError, UndefinedResultError)
}


def error_for(kind: ErrorKind, message: str) -> UtilkitError:
    return _ERRORS_BY_KIND[kind](message)
