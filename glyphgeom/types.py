"""Shared type definitions for the glyphgeom kernel."""
from typing import Generic, NamedTuple, TypeVar

Coord = float   # x / y / dx / dy
Scalar = float  # parameters, angles, ratios, radii

T = TypeVar("T")

class Pair(NamedTuple, Generic[T]):
    first: T; second: T
