"""
GEOMtools: Matrix Operations

General-dimension matrix products. The product is accumulated in a freshly
allocated temporary and only then copied to the caller's output, so the
output may be one of the inputs. Failure to get that temporary is the only
error the numerical routines raise; it is reported as an AllocationError with
category MALLOCFAILED and nothing is written to the output.

Author: GEOMtools developers

"""

import logging
import numpy as np
from typing import Optional
from .constants import *
from .core_functions import *
from ...errors import AllocationError
from ..vector.operations import as_input_array, check_output

logger = logging.getLogger(__name__)


def temporary_matrix(
    shape: tuple) -> np.ndarray:
    """
    Allocate an uninitialised float64 work matrix, translating a MemoryError
    into an AllocationError.
    """
    try:
        return np.empty(shape, dtype=np.float64)
    except MemoryError as exc:
        logger.error("%s: %s (shape %s)",
                     ALLOCATION_FAILED_CATEGORY, ALLOCATION_FAILED_MESSAGE, shape)
        raise AllocationError(ALLOCATION_FAILED_MESSAGE,
                              category=ALLOCATION_FAILED_CATEGORY) from exc


class MatrixOperations:
    """
    A class to multiply general matrices.
    No data objects. Only methods.

    """
    def __init__(
        self,
        use_numba: bool = True,
        debug: bool = False):
        """
        Initialize the MatrixOperations class.

        Args:
            use_numba (bool, optional): use Numba core functions. Defaults to True.
            debug (bool, optional): Log the computational path taken. Defaults to False.
        """
        self.use_numba = use_numba
        self.debug = debug
        if self.debug:
            logger.debug("MatrixOperations: use_numba=%s", use_numba)


    def transpose_product(
        self,
        m1: np.ndarray,
        m2: np.ndarray,
        nrows: Optional[int] = None,
        out: Optional[np.ndarray] = None) -> np.ndarray:
        """
        Transpose of m1 times m2, mout[i, j] = sum_k m1[k, i] * m2[k, j].

        Args:
            m1: matrix of shape (nr, nc1)
            m2: matrix of shape (nr, nc2)
            nrows (int, optional): contract over the first nrows rows only.
                Defaults to all rows. A non-positive value gives the zero matrix.
            out (np.ndarray, optional): float64 array of shape (nc1, nc2) to
                receive the product. May be m1 or m2.

        Returns:
            mout: the (nc1, nc2) product

        Raises:
            ValueError: if the inputs are not 2D or their row counts disagree
            AllocationError: if the temporary product matrix cannot be allocated
        """
        m1 = as_input_array(m1)
        m2 = as_input_array(m2)
        if m1.ndim != 2 or m2.ndim != 2:
            raise ValueError(f"Matrices must be 2D, got {m1.shape} and {m2.shape}")

        if nrows is None:
            if m1.shape[0] != m2.shape[0]:
                raise ValueError(
                    f"Row dimensions must match: {m1.shape[0]} vs {m2.shape[0]}")
            nrows = m1.shape[0]
        else:
            nrows = int(nrows)
            if nrows > min(m1.shape[0], m2.shape[0]):
                raise ValueError(
                    f"nrows={nrows} exceeds the rows of m1 {m1.shape} or m2 {m2.shape}")

        shape = (m1.shape[1], m2.shape[1])
        if out is not None:
            check_output(out, shape)

        tmp = temporary_matrix(shape)
        if self.use_numba:
            if self.debug:
                logger.debug("transpose_product: numba kernel, %s^T x %s over %d rows",
                             m1.shape, m2.shape, nrows)
            matrix_transpose_product_nb_core(m1, m2, nrows, tmp)
        else:
            if self.debug:
                logger.debug("transpose_product: numpy fallback")
            matrix_transpose_product_np_core(m1, m2, nrows, tmp)

        if out is None:
            return tmp
        out[...] = tmp
        return out
