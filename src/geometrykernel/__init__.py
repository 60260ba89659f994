"""
Minimal 3D geometry kernel: vectors, segments and segment-to-segment distance.
"""
import logging

from geometrykernel.config import ClampStrategy
from geometrykernel.model.geometry_primitives import Segment, Vector3
from geometrykernel.model.geometry_utils import (
    ClosestPoints,
    closest_distance,
    closest_points,
)

# Silent unless the application configures logging (see logging_config.setup_logging)
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ClampStrategy",
    "ClosestPoints",
    "Segment",
    "Vector3",
    "closest_distance",
    "closest_points",
]
