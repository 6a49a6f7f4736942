"""Circles, circular arcs and cubic Bezier segments."""
from __future__ import annotations

import logging
import math
from typing import NamedTuple

import numpy as np

from .types import Scalar, Pair
from .geometry import GeometryError, Vector, Point
from .geometry import _fields_eq, _fields_ne, _fields_hash, _unsupported

logger = logging.getLogger(__name__)

# ============================================================
# Circle
# ============================================================
class Circle(NamedTuple):
    c: Point
    r: Scalar

    __eq__ = _fields_eq
    __ne__ = _fields_ne
    __hash__ = _fields_hash
    __add__ = __mul__ = __rmul__ = _unsupported

    @classmethod
    def through(cls, p0: Point, p1: Point, p2: Point, strict: bool = False) -> Circle:
        """Circumcircle of three points.

        The center is where the bisectors of p0-p1 and p2-p1 meet. For
        collinear points those are parallel, so the center comes back as
        ``Point(inf, inf)`` and the radius as inf; with *strict* set,
        GeometryError is raised instead.
        """
        try:
            c = p0.bisector(p1).intersect(p2.bisector(p1), strict=strict)
        except GeometryError as e:
            raise GeometryError(f"Collinear points: {p0}, {p1}, {p2}") from e
        if not (math.isfinite(c.x) and math.isfinite(c.y)):
            logger.debug("circle through %s, %s, %s has non-finite center %s", p0, p1, p2, c)
        return cls(c, (c - p0).len())

    def __bool__(self) -> bool:
        return self.r != 0

# ============================================================
# Arc
# ============================================================
class Arc(NamedTuple):
    """Circle plus start/end angles in radians.

    Angles are stored as given: no range normalization, and a0 < a1 is not
    implied. Sweep direction is up to the caller.
    """
    c: Circle
    a0: Scalar
    a1: Scalar

    __eq__ = _fields_eq
    __ne__ = _fields_ne
    __hash__ = _fields_hash
    __add__ = __mul__ = __rmul__ = _unsupported

    @classmethod
    def from_points(cls, c: Circle, p0: Point, p1: Point) -> Arc:
        """Arc on *c* with end angles taken from p0 and p1 as seen from the center."""
        return cls(c, (p0 - c.c).angle(), (p1 - c.c).angle())

    def __bool__(self) -> bool:
        return bool(self.c) and self.a0 != self.a1

# ============================================================
# Cubic Bezier
# ============================================================
class Bezier(NamedTuple):
    """Cubic Bezier segment given by its control polygon.

    Any four points are accepted; coincident control points simply
    degrade the curve to a lower degree. The parameter *t* is never
    clamped, values outside [0, 1] extrapolate.
    """
    p0: Point
    p1: Point
    p2: Point
    p3: Point

    __eq__ = _fields_eq
    __ne__ = _fields_ne
    __hash__ = _fields_hash
    __add__ = __mul__ = __rmul__ = _unsupported

    def point(self, t: Scalar) -> Point:
        """Curve point at *t* (De Casteljau)."""
        p01 = self.p0.lerp(t, self.p1)
        p12 = self.p1.lerp(t, self.p2)
        p23 = self.p2.lerp(t, self.p3)
        p012 = p01.lerp(t, p12)
        p123 = p12.lerp(t, p23)
        return p012.lerp(t, p123)

    def tangent(self, t: Scalar) -> Vector:
        """First derivative at *t*. Not normalized: its length is the curve speed."""
        t2 = t * t
        mt2 = (1 - t) * (1 - t)
        k1 = 1 - 4 * t + 3 * t2
        k2 = 2 * t - 3 * t2
        p0, p1, p2, p3 = self
        return Vector(-3 * p0.x * mt2 + 3 * p1.x * k1 + 3 * p2.x * k2 + 3 * p3.x * t2,
                      -3 * p0.y * mt2 + 3 * p1.y * k1 + 3 * p2.y * k2 + 3 * p3.y * t2)

    def normal(self, t: Scalar) -> Vector:
        """Second derivative at *t*, not normalized.

        This is its own closed form, not ``tangent(t).normal()``.
        """
        p0, p1, p2, p3 = self
        return Vector(6 * ((-p0.x + 3*p1.x - 3*p2.x + p3.x) * t + (p0.x - 2*p1.x + p2.x)),
                      6 * ((-p0.y + 3*p1.y - 3*p2.y + p3.y) * t + (p0.y - 2*p1.y + p2.y)))

    def split(self, t: Scalar) -> Pair[Bezier]:
        """Subdivide at *t* into the [0, t] and [t, 1] pieces."""
        p01 = self.p0.lerp(t, self.p1)
        p12 = self.p1.lerp(t, self.p2)
        p23 = self.p2.lerp(t, self.p3)
        p012 = p01.lerp(t, p12)
        p123 = p12.lerp(t, p23)
        p0123 = p012.lerp(t, p123)
        return Pair(Bezier(self.p0, p01, p012, p0123),
                    Bezier(p0123, p123, p23, self.p3))

    def halve(self) -> Pair[Bezier]:
        """split(0.5) using midpoints only."""
        p01 = self.p0.midpoint(self.p1)
        p12 = self.p1.midpoint(self.p2)
        p23 = self.p2.midpoint(self.p3)
        p012 = p01.midpoint(p12)
        p123 = p12.midpoint(p23)
        p0123 = p012.midpoint(p123)
        return Pair(Bezier(self.p0, p01, p012, p0123),
                    Bezier(p0123, p123, p23, self.p3))

    def points(self, ts) -> np.ndarray:
        """Evaluate at every parameter in *ts*; returns an (n, 2) array.

        *ts* may be a scalar or an array of any shape; it is flattened.

        Same interpolation steps as point(), done column-wise.
        """
        t = np.asarray(ts, dtype=np.float64).ravel()[:, np.newaxis]
        ctrl = self.to_array()
        def lerp(p, q):
            return (1 - t) * p + t * q
        p01 = lerp(ctrl[0], ctrl[1])
        p12 = lerp(ctrl[1], ctrl[2])
        p23 = lerp(ctrl[2], ctrl[3])
        return lerp(lerp(p01, p12), lerp(p12, p23))

    def to_array(self) -> np.ndarray:
        """Control points as a (4, 2) array."""
        return np.array(self, dtype=np.float64)
