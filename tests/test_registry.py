#!/usr/bin/env python3
"""
Registry and suite tests.

Tests:
1. Registry lookup and factory
2. Default suite lineup and composite wiring
3. Shared mutation through the composite (by design)
4. Seed handling and replay

Version: 1.0.0
"""

import sys
from pathlib import Path

import numpy as np
import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from prng_suite import (
    CombineGenerator,
    GeneratorSpec,
    InvalidParameterError,
    LinearCongruentialGenerator,
    PolarGenerator,
    SuiteConfig,
    build_suite,
    create_generator,
    get_generator_info,
    list_available_generators,
)

M31 = 2147483647


class TestRegistry:

    def test_all_kinds_registered(self):
        assert list_available_generators() == [
            'lcg', 'quadratic', 'fibonacci', 'inverse', 'combine', 'three_sigma', 'polar'
        ]

    def test_unknown_kind(self):
        with pytest.raises(InvalidParameterError, match="Unknown generator kind"):
            get_generator_info('mersenne')

    def test_create_lcg_with_defaults(self):
        gen = create_generator('lcg', seed=1)
        assert isinstance(gen, LinearCongruentialGenerator)
        assert gen.produce_next() == 16807 / M31

    def test_create_with_overrides(self):
        gen = create_generator('fibonacci', seed=0, modulus=1000)
        assert gen.state == {"modulus": 1000, "x1": 0, "x2": 1}

    def test_create_normal_kind(self):
        assert isinstance(create_generator('polar', seed=3), PolarGenerator)

    def test_composite_needs_a_suite(self):
        with pytest.raises(InvalidParameterError):
            create_generator('combine')

    def test_unknown_parameter(self):
        with pytest.raises(InvalidParameterError, match="Bad parameters"):
            create_generator('lcg', seed=1, shift=3)

    def test_histogram_ranges(self):
        assert get_generator_info('lcg')['histogram_range'] == (0.0, 1.0)
        assert get_generator_info('three_sigma')['histogram_range'] == (-3.0, 3.0)

    def test_default_seed_gives_live_streams(self):
        """Without a seed, congruential kinds do not start on the seed-0 fixed point."""
        assert np.unique(create_generator('lcg').sample(100)).size > 1
        assert np.unique(create_generator('quadratic').sample(100)).size > 1
        assert create_generator('inverse').sample(5).shape == (5,)

    def test_default_lcg_can_feed_polar(self):
        values = PolarGenerator(uniform=create_generator('lcg')).sample(10)
        assert np.all(np.isfinite(values))


class TestDefaultSuite:

    def test_unseeded_suite_is_not_constant(self):
        """build_suite() with no arguments draws varying uniform streams."""
        suite = build_suite()
        for name in ('lcg', 'quadratic', 'combine'):
            assert np.unique(suite.draw(name, 100)).size > 1, name

    def test_lineup_order(self):
        suite = build_suite(seed=1)
        assert suite.names() == [
            'lcg', 'quadratic', 'fibonacci', 'inverse', 'combine', 'three_sigma', 'polar'
        ]
        assert len(suite) == 7

    def test_lookup_by_index_and_name(self):
        suite = build_suite(seed=1)
        assert suite.get(0) is suite.get('lcg')
        assert suite[4] is suite['combine']

    def test_bad_keys(self):
        suite = build_suite(seed=1)
        with pytest.raises(InvalidParameterError):
            suite.get(7)
        with pytest.raises(InvalidParameterError):
            suite.get(-1)
        with pytest.raises(InvalidParameterError):
            suite.get('nope')

    def test_combine_refers_to_suite_members(self):
        suite = build_suite(seed=1)
        combine = suite['combine']
        assert isinstance(combine, CombineGenerator)
        assert combine.x is suite['lcg']
        assert combine.y is suite['quadratic']

    def test_combine_draws_advance_shared_members(self):
        """Sampling the composite moves lcg forward: one shared stream."""
        suite = build_suite(seed=1)
        suite.draw('combine', 3)
        twin = LinearCongruentialGenerator(M31, 16807, 0, 1)
        twin.sample(3)
        assert suite['lcg'].state['x'] == twin.state['x']

    def test_inverse_keeps_fixed_seed(self):
        suite = build_suite(seed=999)
        assert suite['inverse'].state['x'] == 1

    def test_histogram_range_per_member(self):
        suite = build_suite(seed=1)
        assert suite.histogram_range('lcg') == (0.0, 1.0)
        assert suite.histogram_range(6) == (-3.0, 3.0)

    def test_histogram_range_override(self):
        config = SuiteConfig(generators=[
            GeneratorSpec(name='lcg', kind='lcg', histogram_min=0.25, histogram_max=0.75)
        ])
        assert build_suite(config, seed=1).histogram_range('lcg') == (0.25, 0.75)


class TestSuiteSeeding:

    def test_same_seed_replays_every_member(self):
        a = build_suite(seed=1234)
        b = build_suite(seed=1234)
        for name in a.names():
            assert np.array_equal(a.draw(name, 50), b.draw(name, 50)), name

    def test_normal_members_get_distinct_seeds(self):
        config = SuiteConfig(generators=[
            GeneratorSpec(name='p1', kind='polar'),
            GeneratorSpec(name='p2', kind='polar'),
        ])
        suite = build_suite(config, seed=1234)
        assert not np.array_equal(suite.draw('p1', 20), suite.draw('p2', 20))

    def test_negative_seed_rejected(self):
        with pytest.raises(InvalidParameterError):
            build_suite(seed=-1)


class TestSuiteWiring:

    def test_seed_inside_params_rejected(self):
        """The seed has its own field; a params copy is a config error, not a TypeError."""
        config = SuiteConfig(generators=[
            GeneratorSpec(name='a', kind='lcg', params={'seed': 5}),
        ])
        with pytest.raises(InvalidParameterError, match="seed"):
            build_suite(config, seed=1)

    def test_forward_reference_rejected(self):
        config = SuiteConfig(generators=[
            GeneratorSpec(name='mix', kind='combine', components=['a', 'b']),
            GeneratorSpec(name='a', kind='lcg'),
            GeneratorSpec(name='b', kind='lcg'),
        ])
        with pytest.raises(InvalidParameterError, match="declared earlier"):
            build_suite(config, seed=1)

    def test_combine_needs_two_components(self):
        config = SuiteConfig(generators=[
            GeneratorSpec(name='a', kind='lcg'),
            GeneratorSpec(name='mix', kind='combine', components=['a']),
        ])
        with pytest.raises(InvalidParameterError):
            build_suite(config, seed=1)

    def test_unknown_kind_in_config(self):
        config = SuiteConfig(generators=[GeneratorSpec(name='x', kind='xorshift')])
        with pytest.raises(InvalidParameterError):
            build_suite(config, seed=1)

    def test_composite_of_composites(self):
        config = SuiteConfig(generators=[
            GeneratorSpec(name='a', kind='lcg'),
            GeneratorSpec(name='b', kind='fibonacci'),
            GeneratorSpec(name='c', kind='quadratic'),
            GeneratorSpec(name='ab', kind='combine', components=['a', 'b']),
            GeneratorSpec(name='abc', kind='combine', components=['ab', 'c']),
        ])
        values = build_suite(config, seed=77).draw('abc', 10_000)
        assert np.all((values >= 0.0) & (values < 1.0))
