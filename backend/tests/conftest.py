"""Shared test fixtures."""

from __future__ import annotations

import pytest

from bouba.engine.config import GeneratorConfig


class ScriptedSource:
    """Uniform source replaying fixed draws in order."""

    def __init__(self, draws: list[float]) -> None:
        self.draws = list(draws)
        self.calls = 0

    def random(self) -> float:
        value = self.draws[self.calls]
        self.calls += 1
        return value


# Seed used wherever a test needs one reproducible shape
SEED = 20240611


@pytest.fixture
def four_circles() -> GeneratorConfig:
    return GeneratorConfig(circle_count=4, min_radius=50, max_radius=100)


@pytest.fixture
def six_circles() -> GeneratorConfig:
    return GeneratorConfig(circle_count=6, min_radius=50, max_radius=100)
