from numba import njit, prange
import numpy as np
from .constants import *
from typing import Tuple
from ..vector.core_functions import (
    vector_dot_nb_core,
    vector_norm_nb_core,
    vector_scale_nb_core,
    vector_linear_combination_nb_core,
    vector_dot_np_core,
    vector_norm_np_core,
    vector_linear_combination_np_core
)
from ..eigen_vals.core_functions import (
    symmetric_2x2_eigensystem_nb_core,
    diagonalize_symmetric_2x2_np_core
)

##########################################################################################
# Core numba JIT functions for ellipse semi-axes
##########################################################################################
#
# The ellipse generated by vec1, vec2 is the set cos(t) vec1 + sin(t) vec2.
# Its squared norm is the quadratic form X^T S X over the unit vector
# X = (cos t, sin t), with S the Gram matrix of vec1, vec2. If C^T S C = D,
# the extrema of the form are at the columns of C, so the semi-axes are
#
#     C[0,k] vec1 + C[1,k] vec2,   k = 0, 1
#
# and they are orthogonal because the columns of C are.


@njit([semi_axes_sig_64], cache=True)
def ellipse_semi_axes_nb_core(vec1, vec2, smajor, sminor):
    """
    Semi-major and semi-minor axes of the ellipse generated by vec1, vec2.

    Args:
        vec1, vec2: generating vectors (3,), need not be independent
        smajor: output semi-major axis (3,)
        sminor: output semi-minor axis (3,)

    Both outputs are the zero vector when vec1 and vec2 are both zero.
    """
    v1 = vec1.copy()
    v2 = vec2.copy()

    # no reciprocal of scale: it may overflow
    scale = max(vector_norm_nb_core(v1), vector_norm_nb_core(v2))
    if scale == 0.0:
        for i in range(3):
            smajor[i] = 0.0
            sminor[i] = 0.0
        return

    for i in range(3):
        v1[i] = v1[i] / scale
        v2[i] = v2[i] / scale

    s00 = vector_dot_nb_core(v1, v1)
    s10 = vector_dot_nb_core(v1, v2)
    s11 = vector_dot_nb_core(v2, v2)

    d0, d1, c00, c01, c10, c11 = symmetric_2x2_eigensystem_nb_core(s00, s10, s11)

    if abs(d0) >= abs(d1):
        vector_linear_combination_nb_core(c00, v1, c10, v2, smajor)
        vector_linear_combination_nb_core(c01, v1, c11, v2, sminor)
    else:
        vector_linear_combination_nb_core(c01, v1, c11, v2, smajor)
        vector_linear_combination_nb_core(c00, v1, c10, v2, sminor)

    vector_scale_nb_core(scale, smajor, smajor)
    vector_scale_nb_core(scale, sminor, sminor)


@njit([semi_axes_field_sig_64], parallel=True, cache=True)
def ellipse_semi_axes_field_nb_core(vec1, vec2, smajor, sminor):
    """
    Semi-axes for a field of ellipses.

    Args:
        vec1, vec2: generating vector fields (3, N)
        smajor, sminor: output axis fields (3, N)
    """
    N = vec1.shape[1]

    for n in prange(N):
        ellipse_semi_axes_nb_core(
            vec1[:, n], vec2[:, n],
            smajor[:, n], sminor[:, n])


##########################################################################################
# Core numpy functions for ellipse semi-axes
##########################################################################################


def ellipse_semi_axes_np_core(
    vec1: np.ndarray,
    vec2: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    NumPy fallback for the semi-axes of ellipses with generating vectors of
    shape (3, ...). Follows the Numba kernel step by step, with the
    zero-scale case masked out.

    Returns:
        smajor, sminor: arrays shaped like vec1
    """
    scale = np.asarray(np.maximum(vector_norm_np_core(vec1), vector_norm_np_core(vec2)))
    is_zero = scale == 0.0
    safe_scale = np.where(is_zero, 1.0, scale)[np.newaxis, ...]
    v1 = vec1 / safe_scale
    v2 = vec2 / safe_scale

    gram = np.empty((2, 2) + scale.shape, dtype=np.float64)
    gram[0, 0, ...] = vector_dot_np_core(v1, v1)
    gram[1, 0, ...] = vector_dot_np_core(v1, v2)
    gram[0, 1, ...] = gram[1, 0, ...]
    gram[1, 1, ...] = vector_dot_np_core(v2, v2)

    diag, rot = diagonalize_symmetric_2x2_np_core(gram)

    first_major = np.abs(diag[0, 0, ...]) >= np.abs(diag[1, 1, ...])
    major_c0 = np.where(first_major, rot[0, 0, ...], rot[0, 1, ...])
    major_c1 = np.where(first_major, rot[1, 0, ...], rot[1, 1, ...])
    minor_c0 = np.where(first_major, rot[0, 1, ...], rot[0, 0, ...])
    minor_c1 = np.where(first_major, rot[1, 1, ...], rot[1, 0, ...])

    smajor = vector_linear_combination_np_core(major_c0, v1, major_c1, v2)
    sminor = vector_linear_combination_np_core(minor_c0, v1, minor_c1, v2)
    smajor = smajor * scale[np.newaxis, ...]
    sminor = sminor * scale[np.newaxis, ...]

    return smajor, sminor


def ellipse_points_np_core(
    vec1: np.ndarray,
    vec2: np.ndarray,
    theta: np.ndarray,
    center: np.ndarray) -> np.ndarray:
    """
    Points center + cos(theta) vec1 + sin(theta) vec2 for a 1D array of
    angles. Returns shape (3, M).
    """
    out = vector_linear_combination_np_core(
        np.cos(theta), vec1[:, np.newaxis],
        np.sin(theta), vec2[:, np.newaxis])
    out += center[:, np.newaxis]

    return out
