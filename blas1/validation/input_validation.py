"""
Argument Validation

Checks vector arguments before any kernel touches them. Every check here
runs before the first element is written, so a rejected call leaves the
caller's vectors exactly as they were.

Two roles:
    input   - read-only; any 1-D array-like of reals, coerced to float64
    output  - written in place; must already be a writeable 1-D float64 ndarray

Usage:
    from blas1.validation import as_input_vector, as_output_vector, check_same_length

    x = as_input_vector(x, 'axpy', 'x')
    y = as_output_vector(y, 'axpy', 'y')
    check_same_length('axpy', x, y)
"""

import logging
from typing import Any

import numpy as np

logger = logging.getLogger(__name__)


class BLASError(Exception):
    """Base class for every error raised by blas1."""


class LengthMismatchError(BLASError, ValueError):
    """Raised when a two-vector operation receives vectors of different length."""

    def __init__(self, operation: str, len_x: int, len_y: int):
        self.operation = operation
        self.len_x = len_x
        self.len_y = len_y
        super().__init__(
            f"{operation}: vectors x and y must have the same length "
            f"(got {len_x} and {len_y})"
        )


class InvalidInputError(BLASError, ValueError):
    """Raised when an argument cannot be used by an operation at all."""

    def __init__(self, operation: str, argument: str, reason: str):
        self.operation = operation
        self.argument = argument
        self.reason = reason
        super().__init__(f"{operation}: invalid argument '{argument}': {reason}")


def _reject(error: BLASError) -> BLASError:
    logger.debug("rejected call: %s", error)
    return error


def as_input_vector(values: Any, operation: str, argument: str) -> np.ndarray:
    """
    Coerce a read-only vector argument to a 1-D float64 array.

    ndarrays that are already float64 come back as-is (no copy), so the
    caller's buffer is read directly and never written.

    Args:
        values: Any 1-D array-like of reals
        operation: Operation name, used in error messages
        argument: Argument name, used in error messages

    Returns:
        1-D float64 ndarray
    """
    try:
        is_complex = np.iscomplexobj(values)
        arr = None if is_complex else np.asarray(values, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise _reject(InvalidInputError(operation, argument, f"not a real vector ({e})")) from e

    if is_complex:
        raise _reject(InvalidInputError(operation, argument, "complex values are not supported"))

    if arr.ndim != 1:
        raise _reject(InvalidInputError(
            operation, argument, f"expected a 1-D vector, got {arr.ndim}-D"
        ))
    return arr


def as_output_vector(values: Any, operation: str, argument: str) -> np.ndarray:
    """
    Check that a vector argument can be mutated in place.

    Output vectors are never converted: a copy would silently swallow the
    result. Lists, integer arrays and read-only views are rejected.

    Args:
        values: Caller-owned buffer
        operation: Operation name, used in error messages
        argument: Argument name, used in error messages

    Returns:
        The same ndarray object
    """
    if not isinstance(values, np.ndarray):
        raise _reject(InvalidInputError(
            operation, argument,
            f"in-place argument must be a numpy.ndarray, got {type(values).__name__}"
        ))
    if values.ndim != 1:
        raise _reject(InvalidInputError(
            operation, argument, f"expected a 1-D vector, got {values.ndim}-D"
        ))
    if values.dtype != np.float64:
        raise _reject(InvalidInputError(
            operation, argument, f"in-place argument must be float64, got {values.dtype}"
        ))
    if not values.flags.writeable:
        raise _reject(InvalidInputError(operation, argument, "array is read-only"))
    return values


def check_same_length(operation: str, x: np.ndarray, y: np.ndarray) -> None:
    """Raise LengthMismatchError unless x and y have the same length."""
    if len(x) != len(y):
        raise _reject(LengthMismatchError(operation, len(x), len(y)))


def check_not_empty(operation: str, argument: str, x: np.ndarray) -> None:
    """Raise InvalidInputError for a zero-length vector."""
    if len(x) == 0:
        raise _reject(InvalidInputError(operation, argument, "vector is empty"))
