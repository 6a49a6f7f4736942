"""Shared test fixtures for glyphgeom tests."""
import logging
import pytest
from glyphgeom.geometry import Point
from glyphgeom.curves import Bezier


@pytest.fixture
def arch():
    """Symmetric arch: (0,0) (0,1) (1,1) (1,0); peak at (0.5, 0.75)."""
    return Bezier(Point(0, 0), Point(0, 1), Point(1, 1), Point(1, 0))


@pytest.fixture
def s_curve():
    """Asymmetric S-shaped cubic with no coincident control points."""
    return Bezier(Point(1.0, 2.0), Point(4.5, 7.25), Point(6.0, -3.0), Point(10.0, 1.5))


@pytest.fixture
def collapsed():
    """All four control points coincide."""
    p = Point(3.0, -2.0)
    return Bezier(p, p, p, p)


@pytest.fixture
def glyphgeom_logger():
    """The package logger, with handlers, level and propagation restored afterwards."""
    logger = logging.getLogger("glyphgeom")
    saved_level, saved_handlers = logger.level, list(logger.handlers)
    saved_propagate = logger.propagate
    yield logger
    for h in logger.handlers:
        if h not in saved_handlers:
            h.close()
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)
    logger.propagate = saved_propagate
