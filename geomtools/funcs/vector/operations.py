"""
    GEOMtools Vector Operations Module

    This module provides the vector primitives used throughout the package:
    dot product, Euclidean norm, scaling, linear combination and the
    component of one vector perpendicular to another. Single 3-vectors of
    shape (3,) go through scalar Numba kernels, vector fields of shape
    (3, ...) through parallel field kernels, and everything falls back to
    NumPy when Numba is not used.

    Results that are vectors can be written into a caller-supplied `out`
    array, which is allowed to be one of the inputs.

    Author: GEOMtools developers

"""

import logging
import numpy as np
from typing import Optional, Union
from .constants import *
from .core_functions import *

logger = logging.getLogger(__name__)


def as_input_array(
    data) -> np.ndarray:
    """
    View `data` as a float64 array the Numba kernels accept. Writable float64
    arrays are returned as-is; read-only ones (memmaps, np.broadcast_to,
    np.frombuffer) are copied; the kernel signatures only take writable arrays.
    """
    arr = np.asarray(data, dtype=np.float64)
    if not arr.flags.writeable:
        arr = arr.copy()
    return arr


def as_vector(
    vec,
    name: str = "vector") -> np.ndarray:
    """
    View `vec` as a float64 array with 3 leading components. Arrays that
    already are writable float64 are returned as-is (no copy), so in-place
    outputs keep pointing at the caller's storage.
    """
    arr = as_input_array(vec)
    if arr.ndim == 0 or arr.shape[0] != NUM_COMPONENTS:
        raise ValueError(f"{name} must have shape (3, ...), got {arr.shape}")
    return arr


def check_output(
    out: np.ndarray,
    shape: tuple,
    name: str = "out") -> np.ndarray:
    """
    Validate a caller-supplied output array.
    """
    if not isinstance(out, np.ndarray):
        raise TypeError(f"{name} must be a numpy array, got {type(out)}")
    if out.dtype != np.float64:
        raise TypeError(f"{name} must be float64, got {out.dtype}")
    if out.shape != shape:
        raise ValueError(f"{name} must have shape {shape}, got {out.shape}")
    return out


class VectorOperations():
    """
    Vector primitives using Numba kernels
    """

    def __init__(
        self,
        use_numba: bool = True,
        debug: bool = False) -> None:

        self.use_numba = use_numba
        self.debug = debug
        if self.debug:
            logger.debug("VectorOperations: use_numba=%s", use_numba)


    def _flatten(
        self,
        vector_field: np.ndarray) -> np.ndarray:
        # field kernels work on (3, N); keep C order so reshape is a view when possible
        return np.ascontiguousarray(vector_field.reshape(NUM_COMPONENTS, -1))


    def dot(
        self,
        vector_1,
        vector_2) -> Union[float, np.ndarray]:
        """
        Dot product of two vectors, or pointwise dot product of two vector
        fields of shape (3, ...).
        """
        vector_1 = as_vector(vector_1, "vector_1")
        vector_2 = as_vector(vector_2, "vector_2")
        if vector_1.shape != vector_2.shape:
            raise ValueError(f"shape mismatch: {vector_1.shape} vs {vector_2.shape}")

        if self.use_numba:
            if vector_1.ndim == 1:
                return vector_dot_nb_core(vector_1, vector_2)
            out = vector_dot_field_nb_core(
                self._flatten(vector_1),
                self._flatten(vector_2))
            return out.reshape(vector_1.shape[1:])
        else:
            out = vector_dot_np_core(vector_1, vector_2)
            return float(out) if vector_1.ndim == 1 else out


    def norm(
        self,
        vector) -> Union[float, np.ndarray]:
        """
        Euclidean norm of a vector, or pointwise norm of a vector field.
        """
        vector = as_vector(vector)

        if self.use_numba:
            if vector.ndim == 1:
                return vector_norm_nb_core(vector)
            out = vector_norm_field_nb_core(self._flatten(vector))
            return out.reshape(vector.shape[1:])
        else:
            out = vector_norm_np_core(vector)
            return float(out) if vector.ndim == 1 else out


    def scale(
        self,
        k: float,
        vector,
        out: Optional[np.ndarray] = None) -> np.ndarray:
        """
        k * vector. `out` may be `vector` itself.
        """
        vector = as_vector(vector)
        if out is None:
            out = np.empty_like(vector)
        else:
            check_output(out, vector.shape)

        if self.use_numba and vector.ndim == 1:
            vector_scale_nb_core(float(k), vector, out)
        else:
            out[...] = vector_scale_np_core(k, vector)
        return out


    def linear_combination(
        self,
        k1: float,
        vector_1,
        k2: float,
        vector_2,
        out: Optional[np.ndarray] = None) -> np.ndarray:
        """
        k1 * vector_1 + k2 * vector_2. `out` may be either input.
        """
        vector_1 = as_vector(vector_1, "vector_1")
        vector_2 = as_vector(vector_2, "vector_2")
        if vector_1.shape != vector_2.shape:
            raise ValueError(f"shape mismatch: {vector_1.shape} vs {vector_2.shape}")
        if out is None:
            out = np.empty_like(vector_1)
        else:
            check_output(out, vector_1.shape)

        scalar_coeffs = np.ndim(k1) == 0 and np.ndim(k2) == 0
        if self.use_numba and scalar_coeffs and vector_1.ndim == 1:
            vector_linear_combination_nb_core(
                float(k1), vector_1,
                float(k2), vector_2,
                out)
        elif self.use_numba and scalar_coeffs:
            result = vector_linear_combination_field_nb_core(
                float(k1), self._flatten(vector_1),
                float(k2), self._flatten(vector_2))
            out[...] = result.reshape(vector_1.shape)
        else:
            out[...] = vector_linear_combination_np_core(
                k1, vector_1,
                k2, vector_2)
        return out


    def perpendicular_component(
        self,
        vector_1,
        vector_2,
        out: Optional[np.ndarray] = None) -> np.ndarray:
        """
        Component of vector_1 orthogonal to vector_2. If vector_2 is zero the
        result is vector_1. `out` may be either input.
        """
        vector_1 = as_vector(vector_1, "vector_1")
        vector_2 = as_vector(vector_2, "vector_2")
        if vector_1.shape != vector_2.shape:
            raise ValueError(f"shape mismatch: {vector_1.shape} vs {vector_2.shape}")
        if out is None:
            out = np.empty_like(vector_1)
        else:
            check_output(out, vector_1.shape)

        if self.use_numba and vector_1.ndim == 1:
            vector_perpendicular_nb_core(vector_1, vector_2, out)
        else:
            out[...] = vector_perpendicular_np_core(vector_1, vector_2)
        return out
