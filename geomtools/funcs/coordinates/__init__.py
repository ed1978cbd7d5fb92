"""
GEOMtools Coordinate Operations Module

Spherical to rectangular conversions, the Jacobian of that map and the
rectangular velocity of a point given spherical rates.
"""

# Import main classes
from .operations import CoordinateOperations


# Import core functions for advanced users
from .core_functions import (
    spherical_jacobian_transposed_nb_core,
    spherical_jacobian_transposed_field_nb_core,
    spherical_to_rectangular_nb_core,
    spherical_to_rectangular_field_nb_core,
    spherical_jacobian_transposed_np_core,
    spherical_to_rectangular_np_core,
    matrix_transpose_np_core,
    matrix_vector_np_core
)

# Define public API
__all__ = [
    'CoordinateOperations',
    # Core functions for advanced use
    'spherical_jacobian_transposed_nb_core',
    'spherical_jacobian_transposed_field_nb_core',
    'spherical_to_rectangular_nb_core',
    'spherical_to_rectangular_field_nb_core',
    'spherical_jacobian_transposed_np_core',
    'spherical_to_rectangular_np_core',
    'matrix_transpose_np_core',
    'matrix_vector_np_core'
]
