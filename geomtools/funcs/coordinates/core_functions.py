from numba import njit, prange
import numpy as np
from .constants import *

##########################################################################################
# Core numba JIT functions for spherical coordinates
##########################################################################################
#
#   x = r cos(lon) sin(colat)
#   y = r sin(lon) sin(colat)
#   z = r cos(colat)
#
# The Jacobian kernels fill one row per spherical coordinate (the transpose
# of d(x, y, z)/d(r, colat, lon)); operations.py transposes the result.


@njit([sig_jacobian_transposed_64], fastmath=True, cache=True)
def spherical_jacobian_transposed_nb_core(
    r,
    colat,
    lon,
    out):
    """
    Partial derivatives of (x, y, z) with respect to (r, colat, lon)
    out: shape (3, 3), out[j, i] = d x_i / d q_j
    """
    cos_colat = np.cos(colat)
    sin_colat = np.sin(colat)
    cos_lon = np.cos(lon)
    sin_lon = np.sin(lon)

    out[R, X] = cos_lon * sin_colat
    out[R, Y] = sin_lon * sin_colat
    out[R, Z] = cos_colat

    out[COLAT, X] = r * cos_lon * cos_colat
    out[COLAT, Y] = r * sin_lon * cos_colat
    out[COLAT, Z] = -r * sin_colat

    out[LON, X] = -r * sin_lon * sin_colat
    out[LON, Y] = r * cos_lon * sin_colat
    out[LON, Z] = 0.0


@njit([sig_jacobian_transposed_field_64], parallel=True, fastmath=True, cache=True)
def spherical_jacobian_transposed_field_nb_core(
    r,
    colat,
    lon,
    out):
    """
    Transposed Jacobian at every point of flattened coordinate fields
    r, colat, lon: shape (N,)
    out: shape (3, 3, N)
    """
    N = r.shape[0]

    for n in prange(N):
        cos_colat = np.cos(colat[n])
        sin_colat = np.sin(colat[n])
        cos_lon = np.cos(lon[n])
        sin_lon = np.sin(lon[n])

        out[R, X, n] = cos_lon * sin_colat
        out[R, Y, n] = sin_lon * sin_colat
        out[R, Z, n] = cos_colat

        out[COLAT, X, n] = r[n] * cos_lon * cos_colat
        out[COLAT, Y, n] = r[n] * sin_lon * cos_colat
        out[COLAT, Z, n] = -r[n] * sin_colat

        out[LON, X, n] = -r[n] * sin_lon * sin_colat
        out[LON, Y, n] = r[n] * cos_lon * sin_colat
        out[LON, Z, n] = 0.0


@njit([sig_sph_to_rect_64], fastmath=True, cache=True)
def spherical_to_rectangular_nb_core(
    r,
    colat,
    lon,
    out):
    """
    Rectangular coordinates of a point given in spherical coordinates
    out: shape (3,)
    """
    sin_colat = np.sin(colat)
    out[X] = r * np.cos(lon) * sin_colat
    out[Y] = r * np.sin(lon) * sin_colat
    out[Z] = r * np.cos(colat)


@njit([sig_sph_to_rect_field_64], parallel=True, fastmath=True, cache=True)
def spherical_to_rectangular_field_nb_core(
    r,
    colat,
    lon,
    out):
    """
    Rectangular coordinates for flattened spherical coordinate fields
    r, colat, lon: shape (N,)
    out: shape (3, N)
    """
    N = r.shape[0]

    for n in prange(N):
        sin_colat = np.sin(colat[n])
        out[X, n] = r[n] * np.cos(lon[n]) * sin_colat
        out[Y, n] = r[n] * np.sin(lon[n]) * sin_colat
        out[Z, n] = r[n] * np.cos(colat[n])


##########################################################################################
# Core numpy functions for spherical coordinates
##########################################################################################


def spherical_jacobian_transposed_np_core(
    r : np.ndarray,
    colat : np.ndarray,
    lon : np.ndarray) -> np.ndarray:
    """
    Transposed Jacobian d(x, y, z)/d(r, colat, lon) for broadcastable
    coordinate arrays. Returns shape (3, 3, ...), out[j, i] = d x_i / d q_j.
    """

    cos_colat = np.cos(colat)
    sin_colat = np.sin(colat)
    cos_lon = np.cos(lon)
    sin_lon = np.sin(lon)

    out = np.array([
        [cos_lon * sin_colat,       sin_lon * sin_colat,        cos_colat],
        [r * cos_lon * cos_colat,   r * sin_lon * cos_colat,    -r * sin_colat],
        [-r * sin_lon * sin_colat,  r * cos_lon * sin_colat,    np.zeros_like(r)]])

    return out


def spherical_to_rectangular_np_core(
    r : np.ndarray,
    colat : np.ndarray,
    lon : np.ndarray) -> np.ndarray:
    """
    Rectangular coordinates for broadcastable spherical coordinate arrays.
    Returns shape (3, ...).
    """

    sin_colat = np.sin(colat)
    out = np.array([
        r * np.cos(lon) * sin_colat,
        r * np.sin(lon) * sin_colat,
        r * np.cos(colat)])

    return out


def matrix_transpose_np_core(
    tensor_field : np.ndarray) -> np.ndarray:
    """
    Swap the two leading (matrix) axes of a (M, M, ...) array.
    """

    out = np.einsum('ij... -> ji...',
                    tensor_field)

    return np.ascontiguousarray(out)


def matrix_vector_np_core(
    tensor_field : np.ndarray,
    vector_field : np.ndarray) -> np.ndarray:
    """
    Pointwise matrix-vector product A_ij v_j for (3, 3, ...) and (3, ...).
    """

    out = np.einsum('ij...,j...->i...',
                    tensor_field,
                    vector_field)

    return out
