"""
GEOMtools Vector Operations Module

Provides the vector primitives the rest of the package is built on: dot
product, overflow-safe Euclidean norm, scaling, linear combination and the
perpendicular component, for single 3-vectors and for vector fields.
"""

# Import main classes
from .operations import VectorOperations, as_input_array, as_vector, check_output


# Import core functions for advanced users
from .core_functions import (
    vector_dot_nb_core,
    vector_norm_nb_core,
    vector_scale_nb_core,
    vector_linear_combination_nb_core,
    vector_perpendicular_nb_core,
    vector_dot_field_nb_core,
    vector_norm_field_nb_core,
    vector_linear_combination_field_nb_core,
    vector_dot_np_core,
    vector_norm_np_core,
    vector_scale_np_core,
    vector_linear_combination_np_core,
    vector_perpendicular_np_core
)

# Define public API
__all__ = [
    'VectorOperations',
    'as_input_array',
    'as_vector',
    'check_output',
    # Core functions for advanced use
    'vector_dot_nb_core',
    'vector_norm_nb_core',
    'vector_scale_nb_core',
    'vector_linear_combination_nb_core',
    'vector_perpendicular_nb_core',
    'vector_dot_field_nb_core',
    'vector_norm_field_nb_core',
    'vector_linear_combination_field_nb_core',
    'vector_dot_np_core',
    'vector_norm_np_core',
    'vector_scale_np_core',
    'vector_linear_combination_np_core',
    'vector_perpendicular_np_core'
]
