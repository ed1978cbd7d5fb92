"""
GEOMtools Matrix Operations Module

General-dimension transpose-times-matrix product with an explicit aliasing
contract and allocation-failure reporting.
"""

# Import main classes
from .operations import MatrixOperations, temporary_matrix


# Import core functions for advanced users
from .core_functions import (
    matrix_transpose_product_nb_core,
    matrix_transpose_product_np_core
)

# Define public API
__all__ = [
    'MatrixOperations',
    'temporary_matrix',
    # Core functions for advanced use
    'matrix_transpose_product_nb_core',
    'matrix_transpose_product_np_core'
]
