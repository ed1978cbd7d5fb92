"""
GEOMtools

Numba-compiled numerical geometry on 3-vectors and low-order matrices:
vector primitives, a closed-form symmetric 2x2 eigensolver, semi-axes of
ellipses from generating vectors, general transpose-times-matrix products and
spherical coordinate Jacobians.

Author: GEOMtools developers
"""

import logging as _logging

from .errors import GeomToolsError, AllocationError
from .funcs.vector import VectorOperations
from .funcs.eigen_vals import EigenvalueOperations
from .funcs.ellipse import EllipseOperations
from .funcs.matrix import MatrixOperations
from .funcs.coordinates import CoordinateOperations

__version__ = "0.1.0"

# library code never configures handlers; applications do
_logging.getLogger(__name__).addHandler(_logging.NullHandler())

__all__ = [
    'GeomToolsError',
    'AllocationError',
    'VectorOperations',
    'EigenvalueOperations',
    'EllipseOperations',
    'MatrixOperations',
    'CoordinateOperations',
]
