"""POST /api/bouba: seeded shape generation and retracing."""

from __future__ import annotations

import json
import logging
import time
from collections.abc import AsyncGenerator

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import StreamingResponse

from bouba.config import Settings
from bouba.dependencies import get_settings
from bouba.engine.config import GeneratorConfig, draw_circle_count
from bouba.engine.contour import TraversalConvention, trace
from bouba.engine.errors import ConfigurationError
from bouba.engine.random_source import RandomSource
from bouba.engine.session import ShapeSession
from bouba.models.requests import CircleModel, GenerateRequest, TraceRequest
from bouba.models.responses import BoundingBoxModel, ShapeResponse, TraceResponse
from bouba.utils.geometry import Circle, Point, contour_is_simple

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/bouba")


def _session_from_request(req: GenerateRequest, settings: Settings) -> ShapeSession:
    """Build a session, drawing the circle count from the seed when omitted."""
    source = RandomSource(req.seed)
    circle_count = req.circle_count
    if circle_count is None:
        circle_count = draw_circle_count(
            source, settings.seeded_min_circles, settings.seeded_max_circles
        )

    config = GeneratorConfig(
        circle_count=circle_count,
        min_radius=req.min_radius if req.min_radius is not None else settings.default_min_radius,
        max_radius=req.max_radius if req.max_radius is not None else settings.default_max_radius,
        max_tries=req.max_tries if req.max_tries is not None else settings.default_max_tries,
        n_points=req.n_points,
        color=req.color,
    )
    try:
        return ShapeSession(config, source, convention=req.convention)
    except ConfigurationError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e


def _points(points: list[Point]) -> list[tuple[float, float]]:
    return [(p.x, p.y) for p in points]


def _shape_response(session: ShapeSession, seed: int | str, elapsed_ms: float) -> ShapeResponse:
    contour = session.contour()
    box = session.bounding_box()
    return ShapeResponse(
        status=session.status.value,
        tries=session.tries,
        attempts=session.attempts,
        seed=seed,
        circle_count=session.config.circle_count,
        convention=session.convention.value,
        color=session.config.color,
        circles=[CircleModel(x=c.x, y=c.y, r=c.r) for c in session.circles],
        angles=session.angles,
        contour=_points(contour),
        bbox=BoundingBoxModel(
            left=box.left,
            top=box.top,
            right=box.right,
            bottom=box.bottom,
            width=box.width,
            height=box.height,
        ),
        contour_is_simple=contour_is_simple(contour),
        processing_time_ms=round(elapsed_ms, 1),
    )


@router.post("", response_model=ShapeResponse)
async def generate(
    req: GenerateRequest,
    settings: Settings = Depends(get_settings),
) -> ShapeResponse:
    start = time.perf_counter()
    session = _session_from_request(req, settings)
    await session.run()
    elapsed = (time.perf_counter() - start) * 1000
    logger.info(
        "Generated seed=%s: %s after %d attempts in %.0fms",
        req.seed,
        session.status.value,
        session.attempts,
        elapsed,
    )
    return _shape_response(session, req.seed, elapsed)


async def _stream_generate(session: ShapeSession, seed: int | str) -> AsyncGenerator[str, None]:
    """One SSE event per attempt, then the final shape."""
    start = time.perf_counter()

    async for state in session.iter_attempts():
        data = json.dumps({
            "attempt": session.attempts,
            "status": state.status.value,
            "tries": state.tries,
            "error": state.last_error,
        })
        yield f"event: progress\ndata: {data}\n\n"

    elapsed = (time.perf_counter() - start) * 1000
    result = _shape_response(session, seed, elapsed)
    yield f"event: result\ndata: {json.dumps(result.model_dump())}\n\n"

    yield f"event: done\ndata: {json.dumps({'type': 'done'})}\n\n"


@router.post("/stream")
async def generate_stream(
    req: GenerateRequest,
    settings: Settings = Depends(get_settings),
) -> StreamingResponse:
    session = _session_from_request(req, settings)
    return StreamingResponse(
        _stream_generate(session, req.seed),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",
        },
    )


@router.post("/trace", response_model=TraceResponse)
async def retrace(req: TraceRequest) -> TraceResponse:
    """Retrace an existing chain, e.g. after switching convention."""
    if len(req.angles) < len(req.circles):
        raise HTTPException(
            status_code=422,
            detail=f"need {len(req.circles)} angles, got {len(req.angles)}",
        )

    circles = [Circle(c.x, c.y, c.r) for c in req.circles]
    convention = TraversalConvention(req.convention)
    contour = trace(circles, req.angles, convention, req.n_points)
    return TraceResponse(
        convention=convention.value,
        contour=_points(contour),
        contour_is_simple=contour_is_simple(contour),
    )
