"""2-D geometry kernel: vectors, points, lines, circles, arcs and cubic Beziers."""

from .types import Coord, Scalar, Pair
from .geometry import GeometryError, Vector, Point, Line
from .curves import Circle, Arc, Bezier
from .logging_config import setup_logging
