"""ShapeSession: the retry state machine behind one Bouba shape.

States:
  LOADING -> READY    closed chain passed validation; chain frozen, tries reset
  LOADING -> LOADING  attempt rejected, budget left
  LOADING -> FAILED   attempt rejected, tries >= max_tries

FAILED is left only through reset(). Every attempt builds a brand new chain;
the session's chain is replaced only on acceptance.
"""

from __future__ import annotations

import asyncio
import dataclasses
import enum
import logging
from collections.abc import AsyncIterator
from dataclasses import dataclass
from typing import Any

from bouba.engine.bbox import BoundingBox, bounding_box
from bouba.engine.chain import build_chain, closed_chain, is_valid_chain
from bouba.engine.config import GeneratorConfig
from bouba.engine.contour import TraversalConvention, trace
from bouba.engine.errors import (
    GlobalOverlapRejected,
    LocalPlacementExhausted,
    RetryBudgetExhausted,
)
from bouba.engine.random_source import RandomSource, UniformSource
from bouba.utils.geometry import Circle, Point

logger = logging.getLogger(__name__)


class SessionStatus(str, enum.Enum):
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class SessionState:
    status: SessionStatus = SessionStatus.LOADING
    tries: int = 0
    circles: tuple[Circle, ...] = ()
    angles: tuple[float, ...] = ()
    # Reason the most recent attempt was rejected
    last_error: str = ""


def attempt(state: SessionState, config: GeneratorConfig, source: UniformSource) -> SessionState:
    """Run one whole-chain attempt and return the next state.

    States other than LOADING are returned unchanged.
    """
    if state.status is not SessionStatus.LOADING:
        return state

    try:
        chain = closed_chain(build_chain(config, source))
        if not is_valid_chain(chain.circles, config.overlap_tolerance):
            raise GlobalOverlapRejected("closed chain has overlapping or degenerate circles")
    except (LocalPlacementExhausted, GlobalOverlapRejected) as e:
        tries = state.tries + 1
        status = SessionStatus.FAILED if tries >= config.max_tries else SessionStatus.LOADING
        return dataclasses.replace(state, status=status, tries=tries, last_error=str(e))

    return SessionState(
        status=SessionStatus.READY,
        tries=0,
        circles=tuple(chain.circles),
        angles=tuple(chain.angles),
    )


class ShapeSession:
    """Owns the generation state for one shape and drives it to READY or FAILED."""

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        source: UniformSource | None = None,
        *,
        seed: int | str | None = None,
        convention: TraversalConvention | str = TraversalConvention.A,
    ) -> None:
        self.config = (config or GeneratorConfig()).validate()
        self.source: UniformSource = source if source is not None else RandomSource(seed)
        self.convention = TraversalConvention(convention)
        self.state = SessionState()
        self.attempts = 0
        self._generation = 0

    # -- status -----------------------------------------------------------

    @property
    def status(self) -> SessionStatus:
        return self.state.status

    @property
    def tries(self) -> int:
        return self.state.tries

    def is_loading(self) -> bool:
        return self.state.status is SessionStatus.LOADING

    def is_ready(self) -> bool:
        return self.state.status is SessionStatus.READY

    def is_failed(self) -> bool:
        return self.state.status is SessionStatus.FAILED

    def raise_for_status(self) -> None:
        if self.is_failed():
            raise RetryBudgetExhausted(self.state.tries)

    # -- driving ----------------------------------------------------------

    def step(self) -> SessionStatus:
        """Run a single attempt. No-op unless LOADING."""
        if not self.is_loading():
            return self.state.status

        self.state = attempt(self.state, self.config, self.source)
        self.attempts += 1

        if self.is_ready():
            logger.info(
                "Shape ready: %d circles after %d attempts",
                len(self.state.circles),
                self.attempts,
            )
        elif self.is_failed():
            logger.warning(
                "Shape failed: retry budget of %d exhausted (%s)",
                self.config.max_tries,
                self.state.last_error,
            )
        else:
            logger.debug("  attempt %d rejected: %s", self.attempts, self.state.last_error)
        return self.state.status

    async def iter_attempts(self) -> AsyncIterator[SessionState]:
        """Yield the state after each attempt, giving the event loop a turn in between.

        Stops when the session settles, or when reset() starts a new generation.
        """
        generation = self._generation
        while self.is_loading() and generation == self._generation:
            self.step()
            yield self.state
            await asyncio.sleep(0)

    async def run(self) -> SessionStatus:
        async for _ in self.iter_attempts():
            pass
        return self.state.status

    # -- control ----------------------------------------------------------

    def reset(
        self,
        config: GeneratorConfig | None = None,
        *,
        seed: int | str | None = None,
        **overrides: Any,
    ) -> None:
        """Restart generation, optionally with new parameters or a new seed.

        Keyword overrides patch the current config, e.g. ``reset(circle_count=12)``
        or ``reset(color="#a9ffd4")``.
        """
        new_config = config or self.config
        if overrides:
            new_config = dataclasses.replace(new_config, **overrides)
        self.config = new_config.validate()
        if seed is not None:
            self.source = RandomSource(seed)
        self.state = SessionState()
        self.attempts = 0
        self._generation += 1
        logger.debug("Session reset (%d circles)", self.config.circle_count)

    def toggle_traversal_convention(self) -> TraversalConvention:
        self.convention = self.convention.toggled()
        return self.convention

    # -- outputs ----------------------------------------------------------

    @property
    def circles(self) -> list[Circle]:
        """Accepted chain; empty unless READY."""
        return list(self.state.circles) if self.is_ready() else []

    @property
    def angles(self) -> list[float]:
        return list(self.state.angles) if self.is_ready() else []

    def contour(self) -> list[Point]:
        """Freshly traced outline under the current convention; empty unless READY."""
        if not self.is_ready():
            return []
        return trace(self.circles, self.angles, self.convention, self.config.n_points)

    def bounding_box(self) -> BoundingBox:
        return bounding_box(self.circles)
