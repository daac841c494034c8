"""
PRNG Suite Errors

All failures are raised immediately from the call that triggered them.
Generators never swallow an error and never keep corrupted state.

- InvalidParameterError: bad constructor / histogram / registry arguments
- UndefinedOperationError: modular inverse of a value not coprime with the modulus
"""


class PRNGError(Exception):
    """Base class for every error raised by prng_suite."""


class InvalidParameterError(PRNGError, ValueError):
    """A parameter was rejected at construction or call time."""


class UndefinedOperationError(PRNGError, ArithmeticError):
    """The requested arithmetic has no defined result (e.g. no modular inverse)."""
