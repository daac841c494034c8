#!/usr/bin/env python3
"""
Generator Interface (v1.0.0)

Defines the capability that ALL generators implement.

Required Methods (ALL generators):
- produce_next() -> float
- name (property)
- state (property)

Provided by BaseGenerator:
- sample(n) -> np.ndarray

Generators are mutable: every produce_next() call advances the internal
recurrence. No locking is done here; an instance must not be sampled from
several threads at once without external synchronization.
"""

import math
from abc import ABC, abstractmethod
from typing import Any, Dict, Protocol, runtime_checkable

import numpy as np

from prng_suite.errors import InvalidParameterError


UINT64_MAX = (1 << 64) - 1


@runtime_checkable
class GeneratorInterface(Protocol):
    """
    Anything that can produce the next sample as a float.

    This is a Protocol class, so composites and normal generators accept
    any object with produce_next(), not only BaseGenerator subclasses.
    """

    def produce_next(self) -> float:
        """Advance the stream and return the next sample."""
        ...


class BaseGenerator(ABC):
    """Abstract base for every generator in the suite."""

    name: str = "generator"

    @abstractmethod
    def produce_next(self) -> float:
        """Advance the recurrence and return the next sample."""

    @property
    @abstractmethod
    def state(self) -> Dict[str, Any]:
        """Snapshot of the recurrence variables (a copy)."""

    def sample(self, n: int) -> np.ndarray:
        """
        Draw n consecutive samples.

        Args:
            n: Number of samples (>= 0)

        Returns:
            float64 array of length n, in draw order
        """
        if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or n < 0:
            raise InvalidParameterError(f"Sample count must be a non-negative integer, got {n!r}")
        out = np.empty(int(n), dtype=np.float64)
        for i in range(int(n)):
            out[i] = self.produce_next()
        return out

    def __repr__(self) -> str:
        params = ", ".join(f"{k}={v}" for k, v in self.state.items())
        return f"{self.__class__.__name__}({params})"


def check_uint64(param: str, value: Any) -> int:
    """Validate an unsigned 64-bit integer parameter and return it as int."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidParameterError(f"{param} must be an integer, got {value!r}")
    value = int(value)
    if value < 0 or value > UINT64_MAX:
        raise InvalidParameterError(f"{param} must be in [0, 2^64), got {value}")
    return value


def check_modulus(param: str, value: Any) -> int:
    """Validate a modulus: unsigned 64-bit and strictly positive."""
    value = check_uint64(param, value)
    if value == 0:
        raise InvalidParameterError(f"{param} must be positive, got 0")
    return value


def check_finite(param: str, value: Any) -> float:
    """Validate a finite real parameter and return it as float."""
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise InvalidParameterError(f"{param} must be a real number, got {value!r}") from None
    if not math.isfinite(value):
        raise InvalidParameterError(f"{param} must be finite, got {value}")
    return value
