"""
GEOMtools Eigenvalue Operations Module

Closed-form diagonalization of real symmetric 2x2 matrices: eigenvalues on an
exactly diagonal matrix and unit eigenvectors as the columns of a rotation.
Numba kernels for single matrices and fields, with a NumPy fallback.
"""

# Import main classes
from .operations import EigenvalueOperations


# Import core functions for advanced users
from .core_functions import (
    symmetric_2x2_eigensystem_nb_core,
    diagonalize_symmetric_2x2_nb_core,
    diagonalize_symmetric_2x2_field_nb_core,
    diagonalize_symmetric_2x2_np_core
)

# Define public API
__all__ = [
    'EigenvalueOperations',
    # Core functions for advanced use
    'symmetric_2x2_eigensystem_nb_core',
    'diagonalize_symmetric_2x2_nb_core',
    'diagonalize_symmetric_2x2_field_nb_core',
    'diagonalize_symmetric_2x2_np_core'
]
