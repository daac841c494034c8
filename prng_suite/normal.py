#!/usr/bin/env python3
"""
Normal Approximation Generators
===============================

Turn a uniform [0, 1) stream into an (approximately) normal stream.

- SumOfUniformsGenerator ("three sigma"): sum of 12 uniforms, Irwin-Hall.
  Mean 6 and variance 12 * 1/12 = 1, so m + (sum - 6) * s is close to
  N(m, s^2) by the Central Limit Theorem. It is an approximation only:
  the output can never leave m +/- 6s.
- PolarGenerator: Marsaglia's polar form of Box-Muller. Each accepted
  (v1, v2) pair yields two independent normals; the second is cached and
  returned by the next call without drawing any uniforms.

Uniform source:
    Pass `uniform` as any generator of this package (composition), or any
    zero-argument callable returning [0, 1). Without one, a numpy
    Generator is built from SeedSequence(seed). seed=None pulls fresh OS
    entropy, so instances built in the same run do not repeat each
    other; the entropy is logged at DEBUG for replay.
"""

import logging
import math
from typing import Any, Callable, Dict, Optional, Union

import numpy as np

from prng_suite.base import BaseGenerator, GeneratorInterface, check_finite, check_uint64
from prng_suite.errors import InvalidParameterError

logger = logging.getLogger(__name__)

UniformSource = Union[GeneratorInterface, Callable[[], float]]

# Irwin-Hall terms; 12 makes the variance exactly 1
SUM_TERMS = 12


def make_uniform_source(uniform: Optional[UniformSource] = None,
                        seed: Optional[int] = None) -> Callable[[], float]:
    """
    Resolve the uniform [0, 1) source used by a normal generator.

    Args:
        uniform: Generator instance or zero-arg callable; None for numpy
        seed: Seed for the numpy source (ignored when uniform is given)

    Returns:
        Zero-argument callable returning the next uniform
    """
    if uniform is None:
        if seed is not None:
            seed = check_uint64("seed", seed)
        seq = np.random.SeedSequence(seed)
        logger.debug(f"Uniform source seeded: entropy={seq.entropy}")
        return np.random.default_rng(seq).random

    if isinstance(uniform, GeneratorInterface):
        return uniform.produce_next
    if callable(uniform):
        return uniform

    raise InvalidParameterError(
        f"uniform must be a generator or a callable, got {type(uniform).__name__}"
    )


def _check_stddev(stddev: Any) -> float:
    stddev = check_finite("stddev", stddev)
    if stddev < 0.0:
        raise InvalidParameterError(f"stddev must be >= 0, got {stddev}")
    return stddev


class SumOfUniformsGenerator(BaseGenerator):
    """Irwin-Hall normal approximation: mean + (sum of 12 uniforms - 6) * stddev."""

    name = "three_sigma"

    def __init__(self, mean: float = 0.0, stddev: float = 1.0,
                 uniform: Optional[UniformSource] = None, seed: Optional[int] = None):
        self.mean = check_finite("mean", mean)
        self.stddev = _check_stddev(stddev)
        self._uniform = make_uniform_source(uniform, seed)
        logger.debug(f"Three sigma created: mean={self.mean}, stddev={self.stddev}")

    def produce_next(self) -> float:
        total = 0.0
        for _ in range(SUM_TERMS):
            total += self._uniform()
        return self.mean + (total - SUM_TERMS / 2.0) * self.stddev

    @property
    def state(self) -> Dict[str, Any]:
        return {"mean": self.mean, "stddev": self.stddev}


class PolarGenerator(BaseGenerator):
    """
    Polar (Box-Muller) normal generator with a one-value cache.

    Invariant: when a value is pending, produce_next() returns it and
    clears the flag without touching the uniform source.
    """

    name = "polar"

    def __init__(self, mean: float = 0.0, stddev: float = 1.0,
                 uniform: Optional[UniformSource] = None, seed: Optional[int] = None):
        self.mean = check_finite("mean", mean)
        self.stddev = _check_stddev(stddev)
        self._uniform = make_uniform_source(uniform, seed)
        self._cached = 0.0
        self._pending = False
        self.rejections = 0
        logger.debug(f"Polar created: mean={self.mean}, stddev={self.stddev}")

    def produce_next(self) -> float:
        if self._pending:
            self._pending = False
            return self._cached

        while True:
            v1 = 2.0 * self._uniform() - 1.0
            v2 = 2.0 * self._uniform() - 1.0
            s = v1 * v1 + v2 * v2
            # s == 0 makes log(s)/s undefined, s >= 1 is outside the unit disc
            if 0.0 < s < 1.0:
                break
            self.rejections += 1

        factor = math.sqrt(-2.0 * math.log(s) / s)
        self._cached = self.mean + v2 * factor * self.stddev
        self._pending = True
        return self.mean + v1 * factor * self.stddev

    @property
    def pending(self) -> bool:
        return self._pending

    @property
    def state(self) -> Dict[str, Any]:
        return {
            "mean": self.mean,
            "stddev": self.stddev,
            "pending": self._pending,
            "cached": self._cached,
            "rejections": self.rejections,
        }
