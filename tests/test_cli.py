#!/usr/bin/env python3
"""
prng_histogram.py command-line tests.

Version: 1.0.0
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import prng_histogram


class TestCli:

    def test_list_menu(self, capsys):
        assert prng_histogram.main(['--list', '--seed', '1']) == 0
        out = capsys.readouterr().out
        assert out.startswith("Choose a generator")
        assert "1: lcg" in out
        assert "7: polar" in out

    def test_histogram_by_menu_index(self, capsys):
        code = prng_histogram.main(['--generator', '1', '--count', '200', '--bins', '5', '--seed', '1'])
        assert code == 0
        lines = capsys.readouterr().out.strip().splitlines()
        assert lines[0] == "Interval   Frequency"
        assert len(lines) == 6
        assert lines[1].startswith("[0; 0.2]")

    def test_show_values(self, capsys):
        prng_histogram.main(['-g', 'lcg', '-n', '2', '-b', '2', '--seed', '1', '--show-values'])
        out = capsys.readouterr().out
        # 16807 / (2^31 - 1)
        assert out.startswith("Random Values: 7.82637e-06, ")

    def test_normal_generator_uses_three_sigma_range(self, capsys):
        prng_histogram.main(['-g', 'polar', '-n', '100', '-b', '6', '--seed', '3'])
        lines = capsys.readouterr().out.strip().splitlines()
        assert lines[1].startswith("[-3; -2]")
        assert lines[-1].startswith("[2; 3]")

    def test_range_override_and_chi_square(self, capsys):
        code = prng_histogram.main([
            '-g', 'combine', '-n', '1000', '-b', '4', '--seed', '9',
            '--min', '0', '--max', '2', '--chi-square',
        ])
        assert code == 0
        out = capsys.readouterr().out
        assert "[1.5; 2]    0" in out
        assert "chi2=" in out

    def test_invalid_choice_returns_error(self):
        assert prng_histogram.main(['--generator', '9', '--seed', '1']) == 1
        assert prng_histogram.main(['--generator', 'xorshift', '--seed', '1']) == 1

    def test_invalid_bins_returns_error(self):
        assert prng_histogram.main(['-g', 'lcg', '-b', '0', '--seed', '1']) == 1

    def test_missing_config_returns_error(self, tmp_path):
        assert prng_histogram.main(['--config', str(tmp_path / "nope.json"), '--seed', '1']) == 1

    @pytest.mark.parametrize("content", [
        '{"generators": [',
        '{"generators": [{"kind": "lcg"}]}',
    ])
    def test_malformed_config_returns_error(self, tmp_path, content):
        path = tmp_path / "suite.json"
        path.write_text(content)
        assert prng_histogram.main(['--config', str(path), '--seed', '1']) == 1

    def test_seed_in_params_returns_error(self, tmp_path):
        path = tmp_path / "suite.json"
        path.write_text('{"generators": [{"name": "a", "kind": "lcg", "params": {"seed": 5}}]}')
        assert prng_histogram.main(['--config', str(path), '-g', 'a', '--seed', '1']) == 1

    def test_custom_config(self, tmp_path, capsys):
        path = tmp_path / "suite.json"
        path.write_text(
            '{"generators": [{"name": "tiny", "kind": "fibonacci", "params": {"modulus": 10}}],'
            ' "default_bins": 2}'
        )
        code = prng_histogram.main(['--config', str(path), '-g', 'tiny', '-n', '4', '--seed', '0'])
        assert code == 0
        lines = capsys.readouterr().out.strip().splitlines()
        # 1 2 3 5 -> 0.1 0.2 0.3 0.5: three below 0.5, one at 0.5
        assert lines[1] == "[0; 0.5]    0.75"
        assert lines[2] == "[0.5; 1]    0.25"
