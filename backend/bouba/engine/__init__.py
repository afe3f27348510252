"""Bouba shape generation engine."""

from bouba.engine.bbox import BoundingBox, bounding_box
from bouba.engine.chain import Chain, build_chain, close_loop, closed_chain, is_valid_chain
from bouba.engine.config import GeneratorConfig
from bouba.engine.contour import TraversalConvention, trace
from bouba.engine.random_source import RandomSource
from bouba.engine.session import SessionStatus, ShapeSession

__all__ = [
    "BoundingBox",
    "bounding_box",
    "Chain",
    "build_chain",
    "close_loop",
    "closed_chain",
    "is_valid_chain",
    "GeneratorConfig",
    "TraversalConvention",
    "trace",
    "RandomSource",
    "SessionStatus",
    "ShapeSession",
]
