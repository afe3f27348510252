"""Generator configuration: shape size and retry budgets."""

from __future__ import annotations

from dataclasses import dataclass

from bouba.engine.errors import ConfigurationError
from bouba.engine.random_source import UniformSource, uniform

# Circle-count range used when the seed alone decides the shape
MIN_SEEDED_CIRCLES = 10
MAX_SEEDED_CIRCLES = 50


@dataclass
class GeneratorConfig:
    """Parameters for one Bouba shape."""

    circle_count: int = 10
    min_radius: float = 50.0
    max_radius: float = 100.0

    # Whole-chain attempts before the session gives up
    max_tries: int = 100
    # Placement attempts for a single circle
    max_circle_tries: int = 400

    # Contour vertices per circle
    n_points: int = 50

    # Radii are truncated to whole units, as in the reference generator
    integer_radii: bool = True

    # Tangent pairs may come out a few ulps short of r1 + r2
    overlap_tolerance: float = 1e-9

    # Opaque fill colour handed through to the renderer
    color: str = "#fb4885"

    def validate(self) -> GeneratorConfig:
        if self.circle_count < 3:
            raise ConfigurationError(f"circle_count must be >= 3, got {self.circle_count}")
        if self.min_radius <= 0:
            raise ConfigurationError(f"min_radius must be > 0, got {self.min_radius}")
        if self.max_radius < self.min_radius:
            raise ConfigurationError(
                f"max_radius ({self.max_radius}) must be >= min_radius ({self.min_radius})"
            )
        if self.integer_radii and self.min_radius < 1:
            raise ConfigurationError("integer_radii requires min_radius >= 1")
        if self.max_tries < 1 or self.max_circle_tries < 1:
            raise ConfigurationError("retry budgets must be positive")
        if self.n_points < 2:
            raise ConfigurationError(f"n_points must be >= 2, got {self.n_points}")
        return self


def draw_circle_count(
    source: UniformSource,
    low: int = MIN_SEEDED_CIRCLES,
    high: int = MAX_SEEDED_CIRCLES,
) -> int:
    """Circle count in [low, high) taken from the seed."""
    return int(uniform(source, low, high))
