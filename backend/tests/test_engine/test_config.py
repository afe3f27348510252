"""Tests for generator configuration and seeded randomness."""

from __future__ import annotations

import pytest

from bouba.engine.config import GeneratorConfig, draw_circle_count
from bouba.engine.errors import ConfigurationError
from bouba.engine.random_source import RandomSource, choice, seed_to_int, uniform
from tests.conftest import ScriptedSource


class TestGeneratorConfig:
    def test_defaults_valid(self):
        config = GeneratorConfig().validate()
        assert config.max_tries == 100
        assert config.max_circle_tries == 400
        assert config.n_points == 50

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"circle_count": 2},
            {"min_radius": 0},
            {"min_radius": 100, "max_radius": 50},
            {"min_radius": 0.5, "max_radius": 2},
            {"max_tries": 0},
            {"n_points": 1},
        ],
    )
    def test_rejects(self, kwargs):
        with pytest.raises(ConfigurationError):
            GeneratorConfig(**kwargs).validate()

    def test_fractional_radii_allow_small_minimum(self):
        GeneratorConfig(min_radius=0.5, max_radius=2, integer_radii=False).validate()

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            GeneratorConfig(circle_count=1).validate()

    def test_draw_circle_count(self):
        assert draw_circle_count(ScriptedSource([0.0])) == 10
        assert draw_circle_count(ScriptedSource([0.999])) == 49
        assert draw_circle_count(ScriptedSource([0.5]), 4, 8) == 6


class TestRandomSource:
    def test_same_seed_same_draws(self):
        a = RandomSource(42)
        b = RandomSource(42)
        assert [a.random() for _ in range(10)] == [b.random() for _ in range(10)]

    def test_string_seed_is_stable(self):
        assert seed_to_int("ooBouba") == seed_to_int("ooBouba")
        assert seed_to_int("ooBouba") != seed_to_int("ooKiki")
        a = RandomSource("ooBouba")
        b = RandomSource("ooBouba")
        assert a.random() == b.random()

    def test_negative_seed_wraps(self):
        assert seed_to_int(-1) == 2**64 - 1
        assert seed_to_int(2**64 + 5) == 5
        a = RandomSource(-1)
        b = RandomSource(2**64 - 1)
        assert a.random() == b.random()

    def test_draws_in_unit_interval(self):
        source = RandomSource(7)
        for _ in range(1000):
            assert 0.0 <= source.random() < 1.0

    def test_uniform_accepts_reversed_bounds(self):
        assert uniform(ScriptedSource([0.25]), 100, 50) == pytest.approx(62.5)
        assert RandomSource(1).uniform(2, 1) >= 1

    def test_choice(self):
        assert choice(ScriptedSource([0.6]), ["light", "dark"]) == "dark"
        assert RandomSource(3).choice(["only"]) == "only"
        with pytest.raises(IndexError):
            choice(ScriptedSource([0.1]), [])
