#!/usr/bin/env python3
"""
Generator Registry and Suite

Single entry point for creating generators by name, and for building the
ordered, caller-owned collection a driver selects from.

Usage:
    from prng_suite import create_generator, build_suite

    lcg = create_generator('lcg', seed=42)
    suite = build_suite(seed=42)
    values = suite.draw('combine', 1000)

Composites are wired by name to members declared earlier in the same
suite. The suite owns every instance; a composite only refers to them, so
drawing from 'combine' also advances 'lcg' and 'quadratic'.
"""

import logging
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

import numpy as np

from prng_suite.base import BaseGenerator, check_uint64
from prng_suite.combine import CombineGenerator
from prng_suite.config import GeneratorSpec, SuiteConfig
from prng_suite.congruential import (
    FibonacciGenerator,
    InverseCongruentialGenerator,
    LinearCongruentialGenerator,
    QuadraticCongruentialGenerator,
)
from prng_suite.errors import InvalidParameterError
from prng_suite.normal import PolarGenerator, SumOfUniformsGenerator

logger = logging.getLogger(__name__)

# 2^31 - 1, the Park-Miller prime
MERSENNE_31 = 2147483647

UNIFORM_RANGE = (0.0, 1.0)
NORMAL_RANGE = (-3.0, 3.0)

# Seed 0 is a fixed point of every c=0 recurrence in the default lineup
DEFAULT_SEED = 1


# ============================================================================
# GENERATOR REGISTRY
# ============================================================================

GENERATOR_REGISTRY = {
    'lcg': {
        'factory': LinearCongruentialGenerator,
        'default_params': {
            'modulus': MERSENNE_31,
            'multiplier': 16807,
            'increment': 0,
        },
        'description': 'Linear congruential (MINSTD multiplier)',
        'family': 'uniform',
        'histogram_range': UNIFORM_RANGE,
    },
    'quadratic': {
        'factory': QuadraticCongruentialGenerator,
        'default_params': {
            'modulus': MERSENNE_31,
            'multiplier': 40014,
            'increment': 0,
            'quadratic': 53668,
        },
        'description': 'Quadratic congruential',
        'family': 'uniform',
        'histogram_range': UNIFORM_RANGE,
    },
    'fibonacci': {
        'factory': FibonacciGenerator,
        'default_params': {
            'modulus': MERSENNE_31,
        },
        'description': 'Additive Fibonacci (seed replaces the first register)',
        'family': 'uniform',
        'histogram_range': UNIFORM_RANGE,
    },
    'inverse': {
        'factory': InverseCongruentialGenerator,
        'default_params': {
            'modulus': MERSENNE_31,
            'multiplier': 16805,
            'increment': 10,
        },
        'description': 'Inversive congruential over a prime modulus',
        'family': 'uniform',
        'histogram_range': UNIFORM_RANGE,
    },
    'combine': {
        'factory': CombineGenerator,
        'default_params': {},
        'description': 'Difference of two generators wrapped into [0, 1)',
        'family': 'composite',
        'histogram_range': UNIFORM_RANGE,
    },
    'three_sigma': {
        'factory': SumOfUniformsGenerator,
        'default_params': {
            'mean': 0.0,
            'stddev': 1.0,
        },
        'description': 'Sum of 12 uniforms (Irwin-Hall normal approximation)',
        'family': 'normal',
        'histogram_range': NORMAL_RANGE,
    },
    'polar': {
        'factory': PolarGenerator,
        'default_params': {
            'mean': 0.0,
            'stddev': 1.0,
        },
        'description': 'Polar Box-Muller normal generator',
        'family': 'normal',
        'histogram_range': NORMAL_RANGE,
    },
}


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def get_generator_info(kind: str) -> Dict[str, Any]:
    """Get registry entry for a generator kind"""
    if kind not in GENERATOR_REGISTRY:
        raise InvalidParameterError(
            f"Unknown generator kind: {kind}. Available: {list_available_generators()}"
        )
    return GENERATOR_REGISTRY[kind]


def list_available_generators() -> List[str]:
    """List all registered generator kinds"""
    return list(GENERATOR_REGISTRY.keys())


def create_generator(kind: str, seed: Optional[int] = None, **params) -> BaseGenerator:
    """
    Create a primitive or normal generator.

    Args:
        kind: Registry key (not 'combine'; composites need a suite)
        seed: Congruential kinds default to DEFAULT_SEED,
            normal kinds to fresh entropy.
        **params: Overrides on top of the registry defaults

    Returns:
        New generator instance
    """
    info = get_generator_info(kind)
    if info['family'] == 'composite':
        raise InvalidParameterError(
            f"'{kind}' wraps other generators; build it with CombineGenerator or a suite"
        )

    kwargs = dict(info['default_params'])
    kwargs.update(params)
    if info['family'] == 'uniform':
        kwargs['seed'] = DEFAULT_SEED if seed is None else seed
    else:
        kwargs['seed'] = seed

    try:
        return info['factory'](**kwargs)
    except TypeError as e:
        raise InvalidParameterError(f"Bad parameters for {kind}: {e}") from e


# ============================================================================
# GENERATOR SUITE
# ============================================================================

class GeneratorSuite:
    """
    Ordered, caller-owned collection of generator instances.

    Members are addressed by 0-based index or by name. Not thread-safe:
    members are mutated on every draw.
    """

    def __init__(self):
        self._generators: List[BaseGenerator] = []
        self._specs: List[GeneratorSpec] = []
        self._index: Dict[str, int] = {}

    def add(self, spec: GeneratorSpec, generator: BaseGenerator) -> int:
        """Append a member and return its handle (index)."""
        if spec.name in self._index:
            raise InvalidParameterError(f"Duplicate generator name: {spec.name}")
        self._index[spec.name] = len(self._generators)
        self._generators.append(generator)
        self._specs.append(spec)
        return self._index[spec.name]

    def _resolve(self, key: Union[int, str]) -> int:
        if isinstance(key, str):
            if key not in self._index:
                raise InvalidParameterError(
                    f"Unknown generator: {key}. Available: {self.names()}"
                )
            return self._index[key]
        if isinstance(key, bool) or not isinstance(key, (int, np.integer)):
            raise InvalidParameterError(f"Generator key must be a name or index, got {key!r}")
        if not 0 <= key < len(self._generators):
            raise InvalidParameterError(
                f"Generator index {key} out of range (0..{len(self._generators) - 1})"
            )
        return int(key)

    def get(self, key: Union[int, str]) -> BaseGenerator:
        return self._generators[self._resolve(key)]

    def spec(self, key: Union[int, str]) -> GeneratorSpec:
        return self._specs[self._resolve(key)]

    def names(self) -> List[str]:
        return [s.name for s in self._specs]

    def histogram_range(self, key: Union[int, str]) -> Tuple[float, float]:
        """Configured range, falling back to the registry default for the kind."""
        spec = self.spec(key)
        low, high = get_generator_info(spec.kind)['histogram_range']
        if spec.histogram_min is not None:
            low = spec.histogram_min
        if spec.histogram_max is not None:
            high = spec.histogram_max
        return low, high

    def draw(self, key: Union[int, str], n: int) -> np.ndarray:
        return self.get(key).sample(n)

    def __getitem__(self, key: Union[int, str]) -> BaseGenerator:
        return self.get(key)

    def __len__(self) -> int:
        return len(self._generators)

    def __iter__(self) -> Iterator[BaseGenerator]:
        return iter(self._generators)


def derive_seed(seed: int, position: int) -> int:
    """Deterministic 64-bit child seed for the member at a suite position."""
    seq = np.random.SeedSequence([seed, position])
    return int(seq.generate_state(1, dtype=np.uint64)[0])


def build_suite(config: Optional[SuiteConfig] = None, seed: int = DEFAULT_SEED) -> GeneratorSuite:
    """
    Build every generator a config declares, in order.

    Args:
        config: Suite configuration (default lineup when None)
        seed: Seed for members without a fixed seed. Normal kinds get
            a per-member seed derived from (seed, position), so two normal
            members never mirror each other and the run stays replayable.

    Returns:
        Populated GeneratorSuite
    """
    config = config or SuiteConfig.default()
    seed = check_uint64("seed", seed)
    suite = GeneratorSuite()

    for spec in config.generators:
        info = get_generator_info(spec.kind)
        if 'seed' in spec.params:
            raise InvalidParameterError(
                f"{spec.name}: seed belongs in the 'seed' field, not in params"
            )

        if info['family'] == 'composite':
            if len(spec.components) != 2:
                raise InvalidParameterError(
                    f"{spec.name}: combine needs exactly 2 components, got {spec.components}"
                )
            missing = [c for c in spec.components if c not in suite.names()]
            if missing:
                raise InvalidParameterError(
                    f"{spec.name}: components {missing} must be declared earlier in the suite"
                )
            if spec.params:
                raise InvalidParameterError(f"{spec.name}: combine takes no params, got {spec.params}")
            x, y = (suite.get(c) for c in spec.components)
            generator = CombineGenerator(x, y)
            logger.info(f"Wired {spec.name} = {spec.components[0]} - {spec.components[1]}")
        elif info['family'] == 'normal':
            member_seed = spec.seed
            if member_seed is None:
                member_seed = derive_seed(seed, len(suite))
            generator = create_generator(spec.kind, seed=member_seed, **spec.params)
        else:
            member_seed = seed if spec.seed is None else spec.seed
            generator = create_generator(spec.kind, seed=member_seed, **spec.params)

        suite.add(spec, generator)

    logger.info(f"Built suite with {len(suite)} generators: {suite.names()}")
    return suite
