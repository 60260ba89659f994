"""
Geometric Primitives: 3D vectors and finite segments.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Sequence, Union
import math

import numpy as np

from geometrykernel.config import PRECISION
from geometrykernel.errors import VectorShapeError
from geometrykernel.utils import nearly_equal

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(eq=False)
class Vector3:
    """
    A point or a free vector in 3D space.

    The same type serves both roles. Arithmetic always returns a new instance;
    the components may be reassigned directly, which is the only mutation.
    An instance mutated from several threads needs external locking.

    Equality is component-wise and relative: two components are equal when
    they differ by at most PRECISION times the larger magnitude.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3:
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.is_close(other)

    def __str__(self) -> str:
        return f"Vector3[{self.x:g}, {self.y:g}, {self.z:g}]"

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def normalize(self) -> Vector3:
        """Unit vector in the same direction, or the zero vector if there is none."""
        mag = self.magnitude
        if mag <= PRECISION:
            return Vector3()
        return Vector3(self.x / mag, self.y / mag, self.z / mag)

    def is_close(self, other: Vector3, rel_tol: float = PRECISION) -> bool:
        return (
            nearly_equal(self.x, other.x, rel_tol)
            and nearly_equal(self.y, other.y, rel_tol)
            and nearly_equal(self.z, other.z, rel_tol)
        )

    def distance_to(self, other: Vector3) -> float:
        dx = other.x - self.x
        dy = other.y - self.y
        dz = other.z - self.z
        return math.sqrt(dx * dx + dy * dy + dz * dz)

    def dot(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def copy(self) -> Vector3:
        return Vector3(self.x, self.y, self.z)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @classmethod
    def from_array(cls, values: Union[Sequence[float], npt.NDArray[np.float64]]) -> Vector3:
        """
        Build a vector from any array-like holding exactly three numbers.

        Raises:
            VectorShapeError: If the input does not hold exactly three elements.
        """
        arr = np.asarray(values, dtype=np.float64)
        if arr.shape != (3,):
            raise VectorShapeError(f"Expected 3 components, got array of shape {arr.shape}.")
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))


@dataclass(frozen=True)
class Segment:
    """A finite line segment between two points.

    The endpoints are copied on construction, so mutating the vectors passed in
    afterwards does not affect the segment. Start and end may coincide.
    """
    start: Vector3 = field(default_factory=Vector3)
    end: Vector3 = field(default_factory=Vector3)

    # Tolerance based equality of the endpoints cannot be hashed consistently
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", self.start.copy())
        object.__setattr__(self, "end", self.end.copy())

    def reverse(self) -> Segment:
        return Segment(start=self.end, end=self.start)

    def to_vector(self) -> Vector3:
        """Direction vector from start to end."""
        return self.end - self.start

    def point_at(self, t: float) -> Vector3:
        """Point at parameter t, where 0 is the start and 1 is the end."""
        return self.start + self.to_vector() * t

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)

    @property
    def is_degenerate(self) -> bool:
        """True when the segment has (numerically) zero length."""
        direction = self.to_vector()
        return direction.dot(direction) <= PRECISION
