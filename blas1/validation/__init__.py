"""
blas1 Validation Module

Argument checks shared by every backend.

Exports:
    - as_input_vector: Coerce a read-only argument to a 1-D float64 array
    - as_output_vector: Check that an argument can be mutated in place
    - check_same_length: Reject two-vector calls with unequal lengths
    - check_not_empty: Reject zero-length vectors where no answer exists
    - BLASError: Base error
    - LengthMismatchError: Raised on unequal vector lengths
    - InvalidInputError: Raised on unusable arguments
"""

from .input_validation import (
    as_input_vector,
    as_output_vector,
    check_same_length,
    check_not_empty,
    BLASError,
    LengthMismatchError,
    InvalidInputError,
)

__all__ = [
    # Checks
    'as_input_vector',
    'as_output_vector',
    'check_same_length',
    'check_not_empty',
    # Errors
    'BLASError',
    'LengthMismatchError',
    'InvalidInputError',
]
