"""
Plane geometry for mesh slicing.

A plane is given by an origin point and a normal vector. The normal does not
need to be unit length: it only enters the crossing formula as the coefficient
of a linear form, so any non-zero multiple describes the same plane.

For a segment PQ the crossing parameter lambda is chosen such that
``lambda * P + (1 - lambda) * Q`` lies on the plane:

    lambda = dot(origin - Q, normal) / dot(P - Q, normal)

- lambda in [0, 1]   =>  [PQ] intersects the plane
- lambda infinite    =>  [PQ] is parallel to the plane
- lambda NaN         =>  [PQ] is contained in the plane

Floating point arithmetic is not exact, so a crossing is only accepted when
lambda lies inside ``[PRECISION, 1 - PRECISION]``. Values closer to an
endpoint are treated as touching that endpoint, which avoids inserting a
vertex (almost) on top of an existing one.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

import numpy as np

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

# Tolerance on lambda used for every cut unless overridden.
PRECISION: float = 1e-5

Vector = Tuple[float, float, float]


def _as_vector(values: Iterable[float], name: str) -> Vector:
    vals = [float(c) for c in values]
    if len(vals) != 3:
        raise ValueError(f"{name} must have exactly 3 components, got {len(vals)}")
    return (vals[0], vals[1], vals[2])


@dataclass(frozen=True)
class Plane:
    """
    Infinite cutting plane.

    Attributes:
        origin: Any point on the plane.
        normal: Plane normal; the zero vector marks a degenerate plane.
    """

    origin: Vector
    normal: Vector

    def __post_init__(self) -> None:
        object.__setattr__(self, "origin", _as_vector(self.origin, "origin"))
        object.__setattr__(self, "normal", _as_vector(self.normal, "normal"))

    @property
    def is_degenerate(self) -> bool:
        """True when the normal is the zero vector (cutting is then a no-op)."""
        return self.normal[0] == 0 and self.normal[1] == 0 and self.normal[2] == 0

    def as_arrays(self) -> Tuple[np.ndarray, np.ndarray]:
        return np.asarray(self.origin, dtype=float), np.asarray(self.normal, dtype=float)

    def signed_distance(self, points: np.ndarray) -> np.ndarray:
        """
        Evaluate ``dot(p - origin, normal)`` for each point.

        The result is a true distance only when the normal is unit length;
        its sign tells which side of the plane a point lies on.

        Args:
            points: (N, 3) array, or a single (3,) point.

        Returns:
            (N,) array of values (or a 0-d array for a single point).
        """
        origin, normal = self.as_arrays()
        pts = np.asarray(points, dtype=float)
        return (pts - origin) @ normal

    @classmethod
    def from_points(cls, a: Sequence[float], b: Sequence[float], c: Sequence[float]) -> "Plane":
        """Plane through three points, normal following the (a, b, c) winding."""
        pa = np.asarray(a, dtype=float)
        pb = np.asarray(b, dtype=float)
        pc = np.asarray(c, dtype=float)
        normal = np.cross(pb - pa, pc - pa)
        if np.allclose(normal, 0.0):
            raise ValueError("Points are collinear; they do not define a plane")
        return cls(tuple(pa.tolist()), tuple(normal.tolist()))


def solve_crossing(
    p: Sequence[float],
    q: Sequence[float],
    origin: Sequence[float],
    normal: Sequence[float],
) -> float:
    """
    Compute lambda such that ``lambda * p + (1 - lambda) * q`` is on the plane.

    A zero denominator gives ``inf`` (segment parallel to the plane) or ``nan``
    (segment inside the plane) rather than raising, so callers only need to
    check the result with :func:`is_crossing`.
    """
    num = (
        (origin[0] - q[0]) * normal[0]
        + (origin[1] - q[1]) * normal[1]
        + (origin[2] - q[2]) * normal[2]
    )
    den = (
        (p[0] - q[0]) * normal[0]
        + (p[1] - q[1]) * normal[1]
        + (p[2] - q[2]) * normal[2]
    )
    if den == 0:
        if num == 0:
            return math.nan
        return math.copysign(math.inf, num)
    return num / den


def is_crossing(lam: float, precision: float = PRECISION) -> bool:
    """True if lambda describes a genuine crossing strictly inside the segment."""
    if not math.isfinite(lam):
        return False
    return not (lam < precision or lam > 1 - precision)


def check_precision(precision: float) -> float:
    """
    Validate a crossing tolerance and return it as a float.

    A tolerance of zero or less would accept a crossing at a split vertex
    that already lies on the plane, so the same triangle would be split
    again on every visit.

    Raises:
        ValueError: If `precision` is not strictly between 0 and 0.5.
    """
    value = float(precision)
    if not 0.0 < value < 0.5:
        raise ValueError(f"precision must be in (0, 0.5), got {precision!r}")
    return value


def interpolate(p: Sequence[float], q: Sequence[float], lam: float) -> Vector:
    """Return ``lam * p + (1 - lam) * q``."""
    return (
        lam * p[0] + (1 - lam) * q[0],
        lam * p[1] + (1 - lam) * q[1],
        lam * p[2] + (1 - lam) * q[2],
    )
