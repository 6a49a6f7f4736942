"""Named numeric constants for the geometry kernel.

All coordinates are IEEE doubles; nothing here is read from the environment.
"""
import math

import numpy as np

INF = math.inf                          # sentinel coordinate
NO_INTERSECTION = (INF, INF)            # parallel / coincident lines
ABS_TOL = 1e-12                         # default isclose() tolerance
FLOAT_MIN_NORMAL = float(np.finfo(np.float64).tiny)  # 2.2250738585072014e-308
