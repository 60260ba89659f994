from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

from geometrykernel import config
from geometrykernel.config import PARAMETRIC_HIGH, PARAMETRIC_LOW, PRECISION, ClampStrategy
from geometrykernel.errors import ConfigurationError
from geometrykernel.model.geometry_primitives import Segment, Vector3
from geometrykernel.utils import clamp

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClosestPoints:
    """Result of a closest-points query between two segments."""
    s: float
    t: float
    point1: Vector3
    point2: Vector3
    distance: float


def resolve_clamp_strategy(strategy: Optional[Union[ClampStrategy, str]] = None) -> ClampStrategy:
    """
    Turn a strategy name (or None for the configured default) into a ClampStrategy.

    Raises:
        ConfigurationError: If the name is not a known strategy.
    """
    if strategy is None:
        strategy = config.DEFAULT_CLAMP_STRATEGY
    try:
        return ClampStrategy(strategy)
    except ValueError as e:
        valid = ", ".join(s.value for s in ClampStrategy)
        logger.error(f"Unknown clamp strategy '{strategy}' (expected one of: {valid})")
        raise ConfigurationError(f"Unknown clamp strategy '{strategy}'") from e


def closest_points(
    segment1: Segment,
    segment2: Segment,
    strategy: Optional[Union[ClampStrategy, str]] = None
) -> ClosestPoints:
    """
    Find the closest pair of points between two finite segments.

    The segments are parametrised as P1(s) = S1 + s * D1 and P2(t) = S2 + t * D2
    with s, t in [0, 1]. Minimising |P1(s) - P2(t)|^2 over the unbounded lines
    gives the 2x2 normal equations

        A s - B t = -C
        B s - E t = -F

    with A = D1·D1, B = D1·D2, C = D1·R, E = D2·D2, F = D2·R and R = S1 - S2.
    Their determinant A E - B^2 vanishes when the directions are parallel or
    either segment has zero length.

    Args:
        segment1: The first segment.
        segment2: The second segment.
        strategy: ClampStrategy or its name. None uses config.DEFAULT_CLAMP_STRATEGY.
            SINGLE_PASS clamps s and t independently once. It reproduces the
            classic formulation but is only locally optimal when both
            parameters leave the segments (e.g. disjoint collinear segments).
            EXACT re-projects the other parameter after each clamp and always
            returns the global minimum.

    Returns:
        ClosestPoints holding the parameters, both points and their distance.
        The distance is always finite and non-negative.
    """
    strategy = resolve_clamp_strategy(strategy)

    d1 = segment1.to_vector()
    d2 = segment2.to_vector()
    r = segment1.start - segment2.start

    a = d1.dot(d1)
    e = d2.dot(d2)
    f = d2.dot(r)
    b = d1.dot(d2)
    c = d1.dot(r)

    if strategy is ClampStrategy.EXACT:
        s, t = _solve_exact(a, b, c, e, f)
    else:
        s, t = _solve_single_pass(a, b, c, e, f)

    point1 = segment1.start + d1 * s
    point2 = segment2.start + d2 * t
    return ClosestPoints(s=s, t=t, point1=point1, point2=point2, distance=point1.distance_to(point2))


def closest_distance(
    segment1: Segment,
    segment2: Segment,
    strategy: Optional[Union[ClampStrategy, str]] = None
) -> float:
    """Shortest distance between two finite segments. See closest_points()."""
    return closest_points(segment1, segment2, strategy).distance


def _solve_single_pass(a: float, b: float, c: float, e: float, f: float) -> tuple[float, float]:
    denominator = a * e - b * b

    if abs(denominator) > PRECISION:
        s = (b * f - c * e) / denominator
        t = (a * f - b * c) / denominator
    else:
        # Parallel or degenerate: anchor on the start of the first segment
        logger.debug(f"Parallel or degenerate segments (denominator={denominator:.3e})")
        s = 0.0
        t = f / e if e > PRECISION else 0.0

    s = clamp(s, PARAMETRIC_LOW, PARAMETRIC_HIGH)
    t = clamp(t, PARAMETRIC_LOW, PARAMETRIC_HIGH)
    return s, t


def _solve_exact(a: float, b: float, c: float, e: float, f: float) -> tuple[float, float]:
    # Zero length is tested exactly and parallelism relative to a * e, so the result is scale free
    if a == 0.0 and e == 0.0:
        logger.debug("Both segments have zero length")
        return 0.0, 0.0

    if a == 0.0:
        # First segment is a point: project it onto the second
        return 0.0, clamp(f / e, PARAMETRIC_LOW, PARAMETRIC_HIGH)

    if e == 0.0:
        # Second segment is a point: project it onto the first
        return clamp(-c / a, PARAMETRIC_LOW, PARAMETRIC_HIGH), 0.0

    # Non-negative up to rounding (Cauchy-Schwarz)
    denominator = a * e - b * b
    if denominator > PRECISION * a * e:
        s = clamp((b * f - c * e) / denominator, PARAMETRIC_LOW, PARAMETRIC_HIGH)
    else:
        logger.debug(f"Parallel segments (denominator={denominator:.3e})")
        s = 0.0

    # Closest point on the second line to P1(s)
    t = (b * s + f) / e

    # If t left the segment, clamp it and re-project the clamped end onto the first segment
    if t < PARAMETRIC_LOW:
        t = PARAMETRIC_LOW
        s = clamp(-c / a, PARAMETRIC_LOW, PARAMETRIC_HIGH)
    elif t > PARAMETRIC_HIGH:
        t = PARAMETRIC_HIGH
        s = clamp((b - c) / a, PARAMETRIC_LOW, PARAMETRIC_HIGH)

    return s, t
