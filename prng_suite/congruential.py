#!/usr/bin/env python3
"""
Congruential Generators - uniform streams over a fixed modulus

- LinearCongruentialGenerator:    x <- (a*x + c) mod m
- QuadraticCongruentialGenerator: x <- (d*x^2 + a*x + c) mod m
- FibonacciGenerator:             next <- (x1 + x2) mod m
- InverseCongruentialGenerator:   x <- (a*inv(x) + c) mod p

All parameters are unsigned 64-bit values. Products are formed with Python
integers and reduced mod m on every step, so a*x or d*x^2 never wraps.
Every produce_next() returns state / m, which lies in [0, 1).
"""

import logging
from typing import Any, Dict

from prng_suite.base import BaseGenerator, check_modulus, check_uint64
from prng_suite.errors import UndefinedOperationError

logger = logging.getLogger(__name__)


def mod_inverse(value: int, modulus: int) -> int:
    """
    Modular multiplicative inverse via the extended Euclidean algorithm.

    The Bezout coefficient is tracked as a signed int and only corrected
    into [0, modulus) once the loop is done.

    Args:
        value: Integer to invert
        modulus: Positive modulus

    Returns:
        y in [0, modulus) with (value * y) % modulus == 1 % modulus

    Raises:
        UndefinedOperationError: If gcd(value, modulus) != 1
    """
    if modulus == 1:
        return 0

    r0, r1 = modulus, value % modulus
    t0, t1 = 0, 1
    while r1 != 0:
        q = r0 // r1
        r0, r1 = r1, r0 - q * r1
        t0, t1 = t1, t0 - q * t1

    if r0 != 1:
        raise UndefinedOperationError(
            f"{value} has no inverse modulo {modulus} (gcd={r0})"
        )

    if t0 < 0:
        t0 += modulus
    return t0


class LinearCongruentialGenerator(BaseGenerator):
    """Classic LCG: x <- (a*x + c) mod m, output x / m."""

    name = "lcg"

    def __init__(self, modulus: int, multiplier: int, increment: int, seed: int):
        self.m = check_modulus("modulus", modulus)
        self.a = check_uint64("multiplier", multiplier)
        self.c = check_uint64("increment", increment)
        self.x = check_uint64("seed", seed) % self.m
        logger.debug(f"LCG created: m={self.m}, a={self.a}, c={self.c}, seed={self.x}")

    def produce_next(self) -> float:
        self.x = (self.a * self.x + self.c) % self.m
        return self.x / self.m

    @property
    def state(self) -> Dict[str, Any]:
        return {"modulus": self.m, "multiplier": self.a, "increment": self.c, "x": self.x}


class QuadraticCongruentialGenerator(BaseGenerator):
    """Quadratic congruential: x <- (d*x^2 + a*x + c) mod m, output x / m."""

    name = "quadratic"

    def __init__(self, modulus: int, multiplier: int, increment: int,
                 quadratic: int, seed: int):
        self.m = check_modulus("modulus", modulus)
        self.a = check_uint64("multiplier", multiplier)
        self.c = check_uint64("increment", increment)
        self.d = check_uint64("quadratic", quadratic)
        self.x = check_uint64("seed", seed) % self.m
        logger.debug(
            f"Quadratic created: m={self.m}, a={self.a}, c={self.c}, d={self.d}, seed={self.x}"
        )

    def produce_next(self) -> float:
        x = self.x
        self.x = (self.d * x * x + self.a * x + self.c) % self.m
        return self.x / self.m

    @property
    def state(self) -> Dict[str, Any]:
        return {
            "modulus": self.m,
            "multiplier": self.a,
            "increment": self.c,
            "quadratic": self.d,
            "x": self.x,
        }


class FibonacciGenerator(BaseGenerator):
    """
    Additive lagged generator: next <- (x1 + x2) mod m; x1, x2 <- x2, next.

    Registers start at (0, 1). A non-zero seed replaces x1 only, so seed=0
    always reproduces the classic Fibonacci start.
    """

    name = "fibonacci"

    def __init__(self, modulus: int, seed: int = 0):
        self.m = check_modulus("modulus", modulus)
        seed = check_uint64("seed", seed)
        self.x1 = 0
        self.x2 = 1 % self.m
        if seed != 0:
            self.x1 = seed % self.m
        logger.debug(f"Fibonacci created: m={self.m}, x1={self.x1}, x2={self.x2}")

    def produce_next(self) -> float:
        next_value = (self.x1 + self.x2) % self.m
        self.x1 = self.x2
        self.x2 = next_value
        return next_value / self.m

    @property
    def state(self) -> Dict[str, Any]:
        return {"modulus": self.m, "x1": self.x1, "x2": self.x2}


class InverseCongruentialGenerator(BaseGenerator):
    """
    Inversive congruential generator: x <- (a*inv(x) + c) mod p, output x / p.

    p is expected to be prime. When the current state has no inverse
    (x == 0, or a common factor with p) produce_next() raises
    UndefinedOperationError and the state is left unchanged.
    """

    name = "inverse"

    def __init__(self, modulus: int, multiplier: int, increment: int, seed: int):
        self.p = check_modulus("modulus", modulus)
        self.a = check_uint64("multiplier", multiplier)
        self.c = check_uint64("increment", increment)
        self.x = check_uint64("seed", seed) % self.p
        logger.debug(f"Inverse created: p={self.p}, a={self.a}, c={self.c}, seed={self.x}")

    def produce_next(self) -> float:
        inv_x = mod_inverse(self.x, self.p)
        self.x = (self.a * inv_x + self.c) % self.p
        return self.x / self.p

    @property
    def state(self) -> Dict[str, Any]:
        return {"modulus": self.p, "multiplier": self.a, "increment": self.c, "x": self.x}
