#!/usr/bin/env python3
"""
Combine (difference) generator.

Wraps two existing streams X and Y and returns (X - Y) wrapped into [0, 1).
Subtracting two independent uniforms breaks up structure the congruential
streams have on their own.

Ownership:
    The composite only holds references. X and Y stay usable (and
    mutable) by whoever else holds them: drawing from the composite
    advances both, and drawing from X directly advances the stream the
    composite sees. This sharing is intended. If X and Y are the same
    instance, every output is built from two consecutive draws of one
    stream; that is the caller's choice and is only logged.
"""

import logging
from typing import Any, Dict

from prng_suite.base import BaseGenerator, GeneratorInterface
from prng_suite.errors import InvalidParameterError

logger = logging.getLogger(__name__)


class CombineGenerator(BaseGenerator):
    """d <- X.next() - Y.next(); d += 1 if d < 0."""

    name = "combine"

    def __init__(self, x: GeneratorInterface, y: GeneratorInterface):
        for label, gen in (("x", x), ("y", y)):
            if not isinstance(gen, GeneratorInterface):
                raise InvalidParameterError(
                    f"Combine input {label} must provide produce_next(), got {type(gen).__name__}"
                )
        if x is y:
            logger.warning("Combine inputs alias the same generator instance; streams are shared")
        self.x = x
        self.y = y
        logger.debug(f"Combine created: x={x!r}, y={y!r}")

    def produce_next(self) -> float:
        # X strictly before Y
        value_x = self.x.produce_next()
        value_y = self.y.produce_next()
        difference = value_x - value_y
        if difference < 0.0:
            difference += 1.0
            # -1e-17 + 1.0 rounds up to 1.0, which wraps to 0.0
            if difference >= 1.0:
                difference = 0.0
        return difference

    @property
    def state(self) -> Dict[str, Any]:
        return {
            "x": getattr(self.x, "name", type(self.x).__name__),
            "y": getattr(self.y, "name", type(self.y).__name__),
        }
