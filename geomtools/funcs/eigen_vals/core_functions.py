from numba import njit, prange
import numpy as np
from .constants import *
from typing import Tuple

##########################################################################################
# Core numba JIT functions for the symmetric 2x2 eigensystem
##########################################################################################


@njit([eigensystem_2x2_sig], cache=True)
def symmetric_2x2_eigensystem_nb_core(a, b, c):
    """
    Diagonalize the symmetric matrix S = [[a, b], [b, c]] in closed form.

    Returns (d0, d1, c00, c01, c10, c11) such that C^T S C = diag(d0, d1)
    with C = [[c00, c01], [c10, c11]] a rotation whose columns are unit
    eigenvectors. d0 >= d1 unless S is already diagonal, in which case
    D = S and C = I.

    The entries are scaled by their largest magnitude before the quadratic is
    solved. The larger-magnitude root comes from the discriminant and the
    other from det / root, which avoids cancellation. The first eigenvector
    is taken orthogonal to whichever row of S - d0 I has the larger norm; the
    second is the first rotated by +90 degrees.
    """
    if b == 0.0:
        return a, c, 1.0, 0.0, 0.0, 1.0

    scale = max(abs(a), abs(b), abs(c))
    a = a / scale
    b = b / scale
    c = c / scale

    trace = a + c
    det = a * c - b * b
    diff = a - c
    sqrt_disc = np.sqrt(diff * diff + 4.0 * b * b)

    if trace >= 0.0:
        root1 = 0.5 * (trace + sqrt_disc)
        root2 = det / root1
    else:
        root2 = 0.5 * (trace - sqrt_disc)
        root1 = det / root2

    if abs(a - root1) >= abs(c - root1):
        # orthogonal to the first row (a - root1, b)
        e0 = -b
        e1 = a - root1
    else:
        # orthogonal to the second row (b, c - root1)
        e0 = root1 - c
        e1 = b

    length = np.sqrt(e0 * e0 + e1 * e1)
    e0 = e0 / length
    e1 = e1 / length

    return root1 * scale, root2 * scale, e0, -e1, e1, e0


@njit([diagonalize_2x2_sig_64], cache=True)
def diagonalize_symmetric_2x2_nb_core(sym, diag, rot):
    """
    Diagonalize a single symmetric 2x2 matrix.

    Args:
        sym: Input symmetric matrix (2, 2); only sym[0,0], sym[1,0], sym[1,1] are read
        diag: Output eigenvalue matrix (2, 2), off-diagonal entries exactly zero
        rot: Output rotation (2, 2), columns are the eigenvectors
    """
    d0, d1, c00, c01, c10, c11 = symmetric_2x2_eigensystem_nb_core(
        sym[0, 0], sym[1, 0], sym[1, 1])

    diag[0, 0] = d0
    diag[0, 1] = 0.0
    diag[1, 0] = 0.0
    diag[1, 1] = d1

    rot[0, 0] = c00
    rot[0, 1] = c01
    rot[1, 0] = c10
    rot[1, 1] = c11


@njit([diagonalize_2x2_field_sig_32, diagonalize_2x2_field_sig_64],
      parallel=True, cache=True)
def diagonalize_symmetric_2x2_field_nb_core(sym, diag, rot):
    """
    Diagonalize a field of symmetric 2x2 matrices.

    Args:
        sym: Input symmetric tensors (2, 2, N)
        diag: Output eigenvalue matrices (2, 2, N)
        rot: Output rotations (2, 2, N)
    """
    N = sym.shape[2]

    for n in prange(N):
        d0, d1, c00, c01, c10, c11 = symmetric_2x2_eigensystem_nb_core(
            sym[0, 0, n], sym[1, 0, n], sym[1, 1, n])

        diag[0, 0, n] = d0
        diag[0, 1, n] = 0.0
        diag[1, 0, n] = 0.0
        diag[1, 1, n] = d1

        rot[0, 0, n] = c00
        rot[0, 1, n] = c01
        rot[1, 0, n] = c10
        rot[1, 1, n] = c11


##########################################################################################
# Core numpy functions for the symmetric 2x2 eigensystem
##########################################################################################


def diagonalize_symmetric_2x2_np_core(
    sym: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    NumPy fallback for diagonalizing symmetric 2x2 matrices of shape (2, 2, ...).
    Same formulae and branch choices as the Numba kernel, evaluated with
    masks instead of branches.

    Returns:
        diag: (2, 2, ...) eigenvalue matrices
        rot: (2, 2, ...) rotations with eigenvector columns
    """
    a = sym[0, 0, ...]
    b = sym[1, 0, ...]
    c = sym[1, 1, ...]

    is_diagonal = (b == 0.0)
    scale = np.maximum(np.maximum(np.abs(a), np.abs(b)), np.abs(c))
    scale = np.where(is_diagonal, 1.0, scale)
    sa = a / scale
    sb = b / scale
    sc = c / scale

    trace = sa + sc
    det = sa * sc - sb * sb
    diff = sa - sc
    sqrt_disc = np.sqrt(diff * diff + 4.0 * sb * sb)

    positive = trace >= 0.0
    big_root = np.where(positive, 0.5 * (trace + sqrt_disc), 0.5 * (trace - sqrt_disc))
    small_root = det / np.where(big_root == 0.0, 1.0, big_root)
    root1 = np.where(positive, big_root, small_root)
    root2 = np.where(positive, small_root, big_root)

    first_row = np.abs(sa - root1) >= np.abs(sc - root1)
    e0 = np.where(first_row, -sb, root1 - sc)
    e1 = np.where(first_row, sa - root1, sb)
    length = np.sqrt(e0 * e0 + e1 * e1)
    length = np.where(length == 0.0, 1.0, length)
    e0 = np.where(is_diagonal, 1.0, e0 / length)
    e1 = np.where(is_diagonal, 0.0, e1 / length)

    diag = np.zeros(sym.shape, dtype=np.result_type(sym.dtype, np.float64))
    diag[0, 0, ...] = np.where(is_diagonal, a, root1 * scale)
    diag[1, 1, ...] = np.where(is_diagonal, c, root2 * scale)

    rot = np.empty_like(diag)
    rot[0, 0, ...] = e0
    rot[0, 1, ...] = -e1
    rot[1, 0, ...] = e1
    rot[1, 1, ...] = e0

    return diag, rot
