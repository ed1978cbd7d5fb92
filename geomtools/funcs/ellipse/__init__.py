"""
GEOMtools Ellipse Operations Module

Semi-major and semi-minor axes of ellipses given by two arbitrary generating
vectors, for single ellipses and fields of them, plus point sampling and
orthogonal projection onto a plane.
"""

# Import main classes
from .operations import EllipseOperations


# Import core functions for advanced users
from .core_functions import (
    ellipse_semi_axes_nb_core,
    ellipse_semi_axes_field_nb_core,
    ellipse_semi_axes_np_core,
    ellipse_points_np_core
)

# Define public API
__all__ = [
    'EllipseOperations',
    # Core functions for advanced use
    'ellipse_semi_axes_nb_core',
    'ellipse_semi_axes_field_nb_core',
    'ellipse_semi_axes_np_core',
    'ellipse_points_np_core'
]
