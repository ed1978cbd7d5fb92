from numba import njit, prange
import numpy as np
from .constants import *

##########################################################################################
# Core numba JIT functions for single 3-vectors
##########################################################################################

@njit([sig_dot_f64], cache=True)
def vector_dot_nb_core(
    vec1,
    vec2):
    """
    Dot product of two 3-vectors
    vec1, vec2: shape (3,)
    returns: scalar
    """
    return (vec1[X] * vec2[X] +
            vec1[Y] * vec2[Y] +
            vec1[Z] * vec2[Z])


@njit([sig_norm_f64], cache=True)
def vector_norm_nb_core(
    vec):
    """
    Euclidean norm of a 3-vector
    vec: shape (3,)
    returns: scalar >= 0

    The components are divided by the largest magnitude before squaring, so
    vectors with components near the overflow or underflow limits still give
    a finite, accurate norm.
    """
    vmax = max(abs(vec[X]), abs(vec[Y]), abs(vec[Z]))
    if vmax == 0.0:
        return 0.0

    ux = vec[X] / vmax
    uy = vec[Y] / vmax
    uz = vec[Z] / vmax
    return vmax * np.sqrt(ux * ux + uy * uy + uz * uz)


@njit([sig_scale_f64], cache=True)
def vector_scale_nb_core(
    k,
    vec,
    out):
    """
    Scale a 3-vector: out = k * vec
    out may be the same array as vec
    """
    x = vec[X]
    y = vec[Y]
    z = vec[Z]
    out[X] = k * x
    out[Y] = k * y
    out[Z] = k * z


@njit([sig_lincom_f64], cache=True)
def vector_linear_combination_nb_core(
    k1,
    vec1,
    k2,
    vec2,
    out):
    """
    Linear combination of two 3-vectors: out = k1 * vec1 + k2 * vec2
    out may be the same array as vec1 or vec2
    """
    x = k1 * vec1[X] + k2 * vec2[X]
    y = k1 * vec1[Y] + k2 * vec2[Y]
    z = k1 * vec1[Z] + k2 * vec2[Z]
    out[X] = x
    out[Y] = y
    out[Z] = z


@njit([sig_perp_f64], cache=True)
def vector_perpendicular_nb_core(
    vec1,
    vec2,
    out):
    """
    Component of vec1 orthogonal to vec2
    out may be the same array as vec1 or vec2

    Both vectors are scaled by their largest component before the projection
    is removed. If vec2 is the zero vector, out = vec1.
    """
    a = vec1.copy()
    b = vec2.copy()
    amax = max(abs(a[X]), abs(a[Y]), abs(a[Z]))
    bmax = max(abs(b[X]), abs(b[Y]), abs(b[Z]))

    if amax == 0.0:
        out[X] = 0.0
        out[Y] = 0.0
        out[Z] = 0.0
        return
    if bmax == 0.0:
        out[X] = a[X]
        out[Y] = a[Y]
        out[Z] = a[Z]
        return

    for i in range(3):
        a[i] = a[i] / amax
        b[i] = b[i] / bmax

    factor = vector_dot_nb_core(a, b) / vector_dot_nb_core(b, b)
    for i in range(3):
        out[i] = amax * (a[i] - factor * b[i])


##########################################################################################
# Core numba JIT functions for vector fields
##########################################################################################

@njit([sig_dot_field_f32, sig_dot_field_f64], parallel=True, fastmath=True, cache=True)
def vector_dot_field_nb_core(
    vec1,
    vec2):
    """
    Dot product of two vector fields
    vec1, vec2: shape (3, N)
    returns: shape (N,)
    """
    N = vec1.shape[1]
    out = np.zeros(N, dtype=vec1.dtype)

    for n in prange(N):
        out[n] = (vec1[X, n] * vec2[X, n] +
                  vec1[Y, n] * vec2[Y, n] +
                  vec1[Z, n] * vec2[Z, n])

    return out


@njit([sig_norm_field_f32, sig_norm_field_f64], parallel=True, cache=True)
def vector_norm_field_nb_core(
    vec):
    """
    Norm of a vector field, with the same overflow guard as the single-vector kernel
    vec: shape (3, N)
    returns: shape (N,)
    """
    N = vec.shape[1]
    out = np.zeros(N, dtype=vec.dtype)

    for n in prange(N):
        vmax = max(abs(vec[X, n]), abs(vec[Y, n]), abs(vec[Z, n]))
        if vmax > 0.0:
            ux = vec[X, n] / vmax
            uy = vec[Y, n] / vmax
            uz = vec[Z, n] / vmax
            out[n] = vmax * np.sqrt(ux * ux + uy * uy + uz * uz)

    return out


@njit([sig_lincom_field_f32, sig_lincom_field_f64], parallel=True, fastmath=True, cache=True)
def vector_linear_combination_field_nb_core(
    k1,
    vec1,
    k2,
    vec2):
    """
    Linear combination of two vector fields with constant coefficients
    vec1, vec2: shape (3, N)
    returns: shape (3, N)
    """
    N = vec1.shape[1]
    out = np.empty_like(vec1)

    for n in prange(N):
        for c in range(3):
            out[c, n] = k1 * vec1[c, n] + k2 * vec2[c, n]

    return out


##########################################################################################
# Core numpy functions for vector operations
##########################################################################################


def vector_dot_np_core(
    vector_field_1 : np.ndarray,
    vector_field_2 : np.ndarray) -> np.ndarray:
    """
    Compute the dot product of two vectors (or vector fields) of shape (3, ...).
    """

    out = np.einsum("i...,i...->...",
                    vector_field_1,
                    vector_field_2)

    return out


def vector_norm_np_core(
    vector_field : np.ndarray) -> np.ndarray:
    """
    Compute the norm of a vector (or vector field) of shape (3, ...), scaling
    by the largest component magnitude first.
    """

    vmax = np.max(np.abs(vector_field), axis=0)
    safe = np.where(vmax == 0.0, 1.0, vmax)
    unit = vector_field / safe[np.newaxis, ...]
    out = vmax * np.sqrt(vector_dot_np_core(unit, unit))

    return out


def vector_scale_np_core(
    k : float,
    vector_field : np.ndarray) -> np.ndarray:
    """
    Scale a vector (or vector field) by a constant.
    """

    return k * vector_field


def vector_linear_combination_np_core(
    k1 : float,
    vector_field_1 : np.ndarray,
    k2 : float,
    vector_field_2 : np.ndarray) -> np.ndarray:
    """
    Compute k1 * vec1 + k2 * vec2. The coefficients may be scalars or arrays
    broadcasting against the trailing (non-component) axes.
    """

    k1 = np.asarray(k1)[np.newaxis, ...]
    k2 = np.asarray(k2)[np.newaxis, ...]
    out = k1 * vector_field_1 + k2 * vector_field_2

    return out


def vector_perpendicular_np_core(
    vector_field_1 : np.ndarray,
    vector_field_2 : np.ndarray) -> np.ndarray:
    """
    Component of vec1 orthogonal to vec2, with vec1 returned unchanged where
    vec2 is zero.
    """

    amax = np.asarray(np.max(np.abs(vector_field_1), axis=0))
    bmax = np.asarray(np.max(np.abs(vector_field_2), axis=0))
    a = vector_field_1 / np.where(amax == 0.0, 1.0, amax)[np.newaxis, ...]
    b = vector_field_2 / np.where(bmax == 0.0, 1.0, bmax)[np.newaxis, ...]

    b_dot_b = vector_dot_np_core(b, b)
    factor = np.asarray(vector_dot_np_core(a, b) / np.where(b_dot_b == 0.0, 1.0, b_dot_b))
    out = amax[np.newaxis, ...] * (a - factor[np.newaxis, ...] * b)

    return out
