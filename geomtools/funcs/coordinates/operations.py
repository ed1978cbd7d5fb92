"""
GEOMtools: Coordinate Operations

Spherical (radius, colatitude, longitude) to rectangular conversions and the
Jacobian of that map. Angles are in radians, colatitude measured from +z and
longitude from +x towards +y. Scalars give single results; array inputs are
broadcast against each other and give fields with the coordinate axes in
front, (3, ...) for positions and (3, 3, ...) for Jacobians.

Author: GEOMtools developers

"""

import logging
import numpy as np
from typing import Tuple
from .constants import *
from .core_functions import *
from ..vector.operations import as_input_array, as_vector

logger = logging.getLogger(__name__)


class CoordinateOperations():
    """
    Spherical coordinate transformations using Numba kernels
    """

    def __init__(
        self,
        use_numba: bool = True,
        debug: bool = False) -> None:

        self.use_numba = use_numba
        self.debug = debug
        if self.debug:
            logger.debug("CoordinateOperations: use_numba=%s", use_numba)


    def _broadcast(
        self,
        r,
        colat,
        lon) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        r, colat, lon = np.broadcast_arrays(
            np.asarray(r, dtype=np.float64),
            np.asarray(colat, dtype=np.float64),
            np.asarray(lon, dtype=np.float64))
        return r, colat, lon


    def spherical_to_rectangular(
        self,
        r,
        colat,
        lon) -> np.ndarray:
        """
        Rectangular coordinates of points given in spherical coordinates.

        Args:
            r: distance from the origin
            colat: angle from the +z axis (radians)
            lon: angle from +x towards +y in the xy-plane (radians)

        Returns:
            rect: (3,) for scalar inputs, (3, ...) otherwise
        """
        r, colat, lon = self._broadcast(r, colat, lon)
        shape = r.shape

        if not self.use_numba:
            return spherical_to_rectangular_np_core(r, colat, lon)

        if r.ndim == 0:
            out = np.empty(NUM_COMPONENTS_RECT, dtype=np.float64)
            spherical_to_rectangular_nb_core(float(r), float(colat), float(lon), out)
            return out

        if self.debug:
            logger.debug("spherical_to_rectangular: field kernel on %s points", r.size)
        out = np.empty((NUM_COMPONENTS_RECT, r.size), dtype=np.float64)
        spherical_to_rectangular_field_nb_core(
            as_input_array(r.ravel()),
            as_input_array(colat.ravel()),
            as_input_array(lon.ravel()),
            out)
        return out.reshape((NUM_COMPONENTS_RECT,) + shape)


    def rectangular_from_spherical_jacobian(
        self,
        r,
        colat,
        lon) -> np.ndarray:
        """
        Jacobian of the spherical to rectangular map,

            jacobi[i, j] = d x_i / d q_j,   x = (x, y, z),  q = (r, colat, lon)

        Args:
            r: distance from the origin
            colat: colatitude (radians)
            lon: longitude (radians)

        Returns:
            jacobi: (3, 3) for scalar inputs, (3, 3, ...) otherwise. Rows index
                the rectangular coordinate, columns the spherical one.
        """
        r, colat, lon = self._broadcast(r, colat, lon)
        shape = r.shape

        if not self.use_numba:
            return matrix_transpose_np_core(
                spherical_jacobian_transposed_np_core(r, colat, lon))

        if r.ndim == 0:
            jacobi_t = np.empty((NUM_COMPONENTS_RECT, NUM_COMPONENTS_RECT), dtype=np.float64)
            spherical_jacobian_transposed_nb_core(float(r), float(colat), float(lon), jacobi_t)
            return matrix_transpose_np_core(jacobi_t)

        if self.debug:
            logger.debug("rectangular_from_spherical_jacobian: field kernel on %s points",
                         r.size)
        jacobi_t = np.empty((NUM_COMPONENTS_RECT, NUM_COMPONENTS_RECT, r.size),
                            dtype=np.float64)
        spherical_jacobian_transposed_field_nb_core(
            as_input_array(r.ravel()),
            as_input_array(colat.ravel()),
            as_input_array(lon.ravel()),
            jacobi_t)
        jacobi = matrix_transpose_np_core(jacobi_t)
        return jacobi.reshape((NUM_COMPONENTS_RECT, NUM_COMPONENTS_RECT) + shape)


    def rectangular_velocity(
        self,
        r,
        colat,
        lon,
        rates) -> np.ndarray:
        """
        Rectangular velocity (dx/dt, dy/dt, dz/dt) of a point moving with
        spherical rates (dr/dt, dcolat/dt, dlon/dt).

        Args:
            r, colat, lon: spherical position of the point(s)
            rates: (3,) or (3, ...) spherical rates, matching the position shape

        Returns:
            velocity: (3,) or (3, ...)
        """
        jacobi = self.rectangular_from_spherical_jacobian(r, colat, lon)
        rates = as_vector(rates, "rates")
        if rates.shape[1:] != jacobi.shape[2:]:
            raise ValueError(
                f"rates shape {rates.shape} does not match positions {jacobi.shape[2:]}")
        return matrix_vector_np_core(jacobi, rates)
