from numba import njit, prange
import numpy as np
from .constants import *

##########################################################################################
# Core numba JIT functions for matrix products
##########################################################################################

@njit([transpose_product_sig_64], parallel=True, fastmath=True, cache=True)
def matrix_transpose_product_nb_core(
    m1,
    m2,
    nrows,
    tmp):
    """
    Transpose of m1 times m2 over the first nrows rows
    m1: shape (nr, nc1)
    m2: shape (nr, nc2)
    tmp: output, shape (nc1, nc2), must not alias m1 or m2

    tmp[i, j] = sum_k m1[k, i] * m2[k, j], k < nrows
    """
    nc1 = m1.shape[1]
    nc2 = m2.shape[1]

    for row in prange(nc1):
        for col in range(nc2):
            inner = 0.0
            for k in range(nrows):
                inner += m1[k, row] * m2[k, col]
            tmp[row, col] = inner


##########################################################################################
# Core numpy functions for matrix products
##########################################################################################


def matrix_transpose_product_np_core(
    m1 : np.ndarray,
    m2 : np.ndarray,
    nrows : int,
    tmp : np.ndarray) -> np.ndarray:
    """
    Compute m1^T m2 over the first nrows rows into tmp. A non-positive nrows
    gives the zero matrix.
    """

    if nrows <= 0:
        tmp[...] = 0.0
        return tmp

    np.einsum('ki,kj->ij',
              m1[:nrows],
              m2[:nrows],
              out=tmp)

    return tmp
