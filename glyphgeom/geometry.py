"""Vector, point and implicit-line primitives.

All three are immutable NamedTuples. Equality is field-wise float == between
values of the same type (so nan is unequal to itself), and ``v += w`` rebinds
``v`` to a new value. Degenerate inputs never raise on the default paths; they
resolve to documented sentinel values instead.
"""
from __future__ import annotations

import logging
import math
import numbers
from typing import NamedTuple

import numpy as np

from .types import Coord, Scalar
from .constants import NO_INTERSECTION, ABS_TOL, FLOAT_MIN_NORMAL

logger = logging.getLogger(__name__)

# ============================================================
# Error Type
# ============================================================
class GeometryError(ValueError):
    """Raised by the strict variants of degenerate constructions."""

# ============================================================
# Float Helpers
# ============================================================
def _div(num: float, den: float) -> float:
    """IEEE 754 division: x/0 gives +-inf (or nan for 0/0) instead of raising."""
    if den:
        return num / den
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(num) / np.float64(den))

def _is_normal(x: float) -> bool:
    """True for finite, non-zero, non-subnormal floats."""
    return math.isfinite(x) and abs(x) >= FLOAT_MIN_NORMAL

# ============================================================
# Value Semantics
# ============================================================
# NamedTuple bases would otherwise compare, hash and concatenate as tuples.
def _fields_eq(self, other) -> bool:
    """Field-wise IEEE ==, so nan never equals itself; other types are unequal."""
    if type(other) is not type(self):
        return False
    return all(a == b for a, b in zip(self, other))

def _fields_ne(self, other) -> bool:
    return not _fields_eq(self, other)

def _fields_hash(self) -> int:
    return hash((type(self).__name__, *self))

def _unsupported(self, other):
    return NotImplemented

# ============================================================
# Vector
# ============================================================
class Vector(NamedTuple):
    """Free displacement in the plane."""
    dx: Coord
    dy: Coord

    @classmethod
    def from_point(cls, p: Point) -> Vector:
        """Position vector of *p* (displacement from the origin)."""
        return cls(p.x, p.y)

    __eq__ = _fields_eq
    __ne__ = _fields_ne
    __hash__ = _fields_hash

    def __bool__(self) -> bool:
        return bool(self.dx or self.dy)

    def __neg__(self) -> Vector:
        return Vector(-self.dx, -self.dy)

    def __add__(self, other):
        if isinstance(other, Vector):
            return Vector(self.dx + other.dx, self.dy + other.dy)
        if isinstance(other, Point):
            return other + self
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vector):
            return Vector(self.dx - other.dx, self.dy - other.dy)
        return NotImplemented

    def __mul__(self, s):
        if not isinstance(s, numbers.Real):
            return NotImplemented
        return Vector(self.dx * s, self.dy * s)

    __rmul__ = __mul__

    def __truediv__(self, s):
        if not isinstance(s, numbers.Real):
            return NotImplemented
        return Vector(_div(self.dx, s), _div(self.dy, s))

    def len(self) -> Scalar:
        """Euclidean magnitude (hypot, so no intermediate overflow)."""
        return math.hypot(self.dx, self.dy)

    def dot(self, v: Vector) -> Scalar:
        return self.dx * v.dx + self.dy * v.dy

    def normalized(self) -> Vector:
        """Unit vector in the same direction; the zero vector is returned as-is."""
        d = self.len()
        return self / d if d else self

    def perpendicular(self) -> Vector:
        """Rotate 90 degrees CCW. Length is preserved, not normalized."""
        return Vector(-self.dy, self.dx)

    def normal(self) -> Vector:
        return self.perpendicular().normalized()

    def angle(self) -> Scalar:
        """Direction in radians, in (-pi, pi]."""
        return math.atan2(self.dy, self.dx)

    def rebase(self, bx: Vector, by: Vector | None = None) -> Vector:
        """Coordinates of this vector in the frame (bx, by).

        Computed as raw dot products ``(self.bx, self.by)``; neither axis is
        normalized here, so pass an orthonormal basis to get a rotation.
        *by* defaults to ``bx.perpendicular()``.
        """
        if by is None:
            by = bx.perpendicular()
        return Vector(self.dx * bx.dx + self.dy * bx.dy,
                      self.dx * by.dx + self.dy * by.dy)

    def isclose(self, v: Vector, abs_tol: float = ABS_TOL) -> bool:
        return abs(self.dx - v.dx) <= abs_tol and abs(self.dy - v.dy) <= abs_tol

    def to_array(self) -> np.ndarray:
        return np.array([self.dx, self.dy], dtype=np.float64)

# ============================================================
# Point
# ============================================================
class Point(NamedTuple):
    """Fixed position in the plane.

    Truthiness is stricter than Vector's: both coordinates must be normal
    floats, so the origin, points on an axis, and points at infinity
    are all falsy.
    """
    x: Coord
    y: Coord

    @classmethod
    def from_vector(cls, v: Vector) -> Point:
        return cls(v.dx, v.dy)

    __eq__ = _fields_eq
    __ne__ = _fields_ne
    __hash__ = _fields_hash
    __mul__ = __rmul__ = _unsupported

    def __bool__(self) -> bool:
        return _is_normal(self.x) and _is_normal(self.y)

    def __add__(self, other):
        if isinstance(other, Vector):
            return Point(self.x + other.dx, self.y + other.dy)
        return NotImplemented  # Point + Point: use midpoint()

    def __sub__(self, other):
        if isinstance(other, Vector):
            return Point(self.x - other.dx, self.y - other.dy)
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y)
        return NotImplemented

    def midpoint(self, p: Point) -> Point:
        return self + (p - self) / 2

    def lerp(self, a: Scalar, p: Point) -> Point:
        """Affine interpolation ``(1-a)*self + a*p``; *a* outside [0, 1] extrapolates."""
        return Point((1-a) * self.x + a * p.x, (1-a) * self.y + a * p.y)

    def distance_to(self, line: Line) -> Scalar:
        """Signed distance to *line*, positive on the side its normal points to.

        Scaled by ``hypot(a, b)`` so the magnitude is correct whether or not
        the line is normalized. A degenerate line gives inf or nan.
        """
        return _div(line.a * self.x + line.b * self.y - line.c,
                    math.hypot(line.a, line.b))

    def bisector(self, p: Point) -> Line:
        """Perpendicular bisector of the segment self -> p."""
        d = p - self
        return Line(d.dx * 2, d.dy * 2,
                    (d.dx * p.x + d.dy * p.y) + (d.dx * self.x + d.dy * self.y))

    def isclose(self, p: Point, abs_tol: float = ABS_TOL) -> bool:
        return abs(self.x - p.x) <= abs_tol and abs(self.y - p.y) <= abs_tol

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float64)

# ============================================================
# Line
# ============================================================
class Line(NamedTuple):
    """Implicit line ``a*x + b*y = c``."""
    a: Coord
    b: Coord
    c: Coord

    @classmethod
    def through(cls, p0: Point, p1: Point) -> Line:
        """Line through p0 and p1; its normal is (p1 - p0) rotated CCW."""
        n = (p1 - p0).perpendicular()
        return cls(n.dx, n.dy, n.dx * p0.x + n.dy * p0.y)

    __eq__ = _fields_eq
    __ne__ = _fields_ne
    __hash__ = _fields_hash
    __add__ = __mul__ = __rmul__ = _unsupported  # intersection: use intersect()

    def __bool__(self) -> bool:
        return bool(self.a or self.b)

    def intersect(self, l: Line, strict: bool = False) -> Point:
        """Intersection point of two lines.

        Parallel or coincident lines give ``Point(inf, inf)``, or raise
        GeometryError when *strict* is set.
        """
        det = self.a * l.b - self.b * l.a
        if not det:
            if strict:
                raise GeometryError(f"Parallel lines: det={det:.2e}")
            logger.debug("parallel lines %s, %s; returning point at infinity", self, l)
            return Point(*NO_INTERSECTION)
        return Point((self.c * l.b - self.b * l.c) / det,
                     (self.a * l.c - self.c * l.a) / det)

    def normalized(self) -> Line:
        """Same line scaled to a unit normal; returned unchanged if a == b == 0."""
        d = self.normal().len()
        return Line(self.a / d, self.b / d, self.c / d) if d else self

    def normal(self) -> Vector:
        return Vector(self.a, self.b)
