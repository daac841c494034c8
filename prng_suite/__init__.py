"""
PRNG Suite v1.0.0

Pluggable pseudo-random generators behind one interface, plus a histogram
summarizer for eyeballing their output distribution.

Generators:
- lcg:         LinearCongruentialGenerator
- quadratic:   QuadraticCongruentialGenerator
- fibonacci:   FibonacciGenerator
- inverse:     InverseCongruentialGenerator
- combine:     CombineGenerator (difference of two generators)
- three_sigma: SumOfUniformsGenerator (Irwin-Hall normal approximation)
- polar:       PolarGenerator (polar Box-Muller)

Usage:
    from prng_suite import build_suite, histogram, format_histogram

    suite = build_suite(seed=42)
    values = suite.draw('lcg', 1000)
    print(format_histogram(histogram(values, 0.0, 1.0, 10)))
"""

from prng_suite.base import BaseGenerator, GeneratorInterface
from prng_suite.combine import CombineGenerator
from prng_suite.config import GeneratorSpec, SuiteConfig
from prng_suite.congruential import (
    FibonacciGenerator,
    InverseCongruentialGenerator,
    LinearCongruentialGenerator,
    QuadraticCongruentialGenerator,
    mod_inverse,
)
from prng_suite.errors import InvalidParameterError, PRNGError, UndefinedOperationError
from prng_suite.histogram import HistogramBin, format_histogram, histogram, uniformity_test
from prng_suite.normal import PolarGenerator, SumOfUniformsGenerator
from prng_suite.registry import (
    GENERATOR_REGISTRY,
    GeneratorSuite,
    build_suite,
    create_generator,
    get_generator_info,
    list_available_generators,
)

__version__ = "1.0.0"
__all__ = [
    'BaseGenerator',
    'GeneratorInterface',
    'LinearCongruentialGenerator',
    'QuadraticCongruentialGenerator',
    'FibonacciGenerator',
    'InverseCongruentialGenerator',
    'CombineGenerator',
    'SumOfUniformsGenerator',
    'PolarGenerator',
    'mod_inverse',
    'HistogramBin',
    'histogram',
    'format_histogram',
    'uniformity_test',
    'GeneratorSpec',
    'SuiteConfig',
    'GENERATOR_REGISTRY',
    'GeneratorSuite',
    'build_suite',
    'create_generator',
    'get_generator_info',
    'list_available_generators',
    'PRNGError',
    'InvalidParameterError',
    'UndefinedOperationError',
]
