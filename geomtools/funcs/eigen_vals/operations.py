"""
GEOMtools: Eigenvalue Operations

This module diagonalizes real symmetric 2x2 matrices in closed form. The
result is a pair (D, C) with D diagonal (off-diagonal entries exactly zero)
and C a rotation whose columns are the unit eigenvectors, so that
C^T S C = D and C^T C = I.

Only the 2x2 symmetric case is handled; there is no general n x n solver.

Author: GEOMtools developers

"""

import logging
import numpy as np
from typing import Tuple
from .constants import *
from .core_functions import *

logger = logging.getLogger(__name__)


class EigenvalueOperations:
    """
    A class to diagonalize symmetric 2x2 matrices and fields of them.

    This class provides methods for:
    - The full decomposition (D, C) of a symmetric matrix
    - The eigenvalues alone, in the order they appear on D's diagonal
    """

    def __init__(
        self,
        use_numba: bool = True,
        debug: bool = False):
        """
        Initialize the EigenvalueOperations class.

        Args:
            use_numba (bool, optional): Use Numba core functions. Defaults to True.
            debug (bool, optional): Log the computational path taken. Defaults to False.
        """
        self.use_numba = use_numba
        self.debug = debug
        if self.debug:
            logger.debug("EigenvalueOperations: use_numba=%s", use_numba)


    def _validate(
        self,
        symmetric_matrix) -> np.ndarray:
        symmetric_matrix = np.asarray(symmetric_matrix)
        if symmetric_matrix.ndim < 2 or symmetric_matrix.shape[:2] != (MATRIX_DIM, MATRIX_DIM):
            raise ValueError(
                f"Matrix must have shape (2, 2, ...), got {symmetric_matrix.shape}")
        if symmetric_matrix.dtype not in [np.float32, np.float64]:
            symmetric_matrix = symmetric_matrix.astype(np.float64)
        if not symmetric_matrix.flags.writeable:
            # kernel signatures take writable arrays
            symmetric_matrix = symmetric_matrix.copy()
        return symmetric_matrix


    def diagonalize_symmetric_2x2(
        self,
        symmetric_matrix: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """
        Diagonalize a symmetric 2x2 matrix, or a field of them.

        Only the lower triangle (S[0,0], S[1,0], S[1,1]) is read, so the input
        is treated as symmetric by construction.

        Args:
            symmetric_matrix: array of shape (2, 2) or (2, 2, ...)

        Returns:
            diag: eigenvalue matrices, same shape as the input. D[0,0] >= D[1,1]
                  unless the input is already diagonal, in which case D = S.
            rot: rotations with unit eigenvector columns, ordered like diag.
                 The identity when the input is already diagonal.
        """
        symmetric_matrix = self._validate(symmetric_matrix)

        if self.use_numba and symmetric_matrix.ndim == 2:
            if self.debug:
                logger.debug("diagonalize_symmetric_2x2: single-matrix numba kernel")
            symmetric_matrix = symmetric_matrix.astype(np.float64, copy=False)
            diag = np.empty((MATRIX_DIM, MATRIX_DIM), dtype=np.float64)
            rot = np.empty((MATRIX_DIM, MATRIX_DIM), dtype=np.float64)
            diagonalize_symmetric_2x2_nb_core(symmetric_matrix, diag, rot)
            return diag, rot

        elif self.use_numba:
            if self.debug:
                logger.debug("diagonalize_symmetric_2x2: field numba kernel over %s",
                             symmetric_matrix.shape[2:])
            field_shape = symmetric_matrix.shape[2:]
            flat = np.ascontiguousarray(
                symmetric_matrix.reshape(MATRIX_DIM, MATRIX_DIM, -1))
            diag = np.empty_like(flat)
            rot = np.empty_like(flat)
            diagonalize_symmetric_2x2_field_nb_core(flat, diag, rot)
            return (diag.reshape((MATRIX_DIM, MATRIX_DIM) + field_shape),
                    rot.reshape((MATRIX_DIM, MATRIX_DIM) + field_shape))

        else:
            if self.debug:
                logger.debug("diagonalize_symmetric_2x2: numpy fallback")
            return diagonalize_symmetric_2x2_np_core(symmetric_matrix)


    def eigenvalues_symmetric_2x2(
        self,
        symmetric_matrix: np.ndarray) -> np.ndarray:
        """
        Eigenvalues of a symmetric 2x2 matrix (or field), shape (2, ...),
        ordered as on the diagonal returned by diagonalize_symmetric_2x2.
        """
        diag, _ = self.diagonalize_symmetric_2x2(symmetric_matrix)
        return np.stack([diag[0, 0, ...], diag[1, 1, ...]])
