"""
GEOMtools: Ellipse Operations

Semi-axes of ellipses given by two generating vectors. An ellipse centered at
the origin is the set

    cos(theta) vec1 + sin(theta) vec2,    theta in (-pi, pi]

where vec1 and vec2 are arbitrary, possibly dependent, 3-vectors. The
semi-major axis is a vector of largest norm in that set, the semi-minor axis
one of smallest norm; the two are orthogonal and the same ellipse is
generated by (smajor, sminor). Each axis is only defined up to sign.

The problem reduces to diagonalizing the 2x2 Gram matrix of the (rescaled)
generating vectors, see funcs.eigen_vals.

Author: GEOMtools developers

"""

import logging
import numpy as np
from typing import Optional, Tuple
from .constants import *
from .core_functions import *
from ..vector.operations import VectorOperations, as_vector, check_output

logger = logging.getLogger(__name__)


class EllipseOperations:
    """
    A class to compute semi-axes of ellipses from generating vectors.

    This class provides methods for:
    - Semi-axes of a single ellipse, writing into optional (aliasable) outputs
    - Semi-axes over fields of generating vectors
    - Sampling points on an ellipse
    - Orthogonal projection of an ellipse onto a plane
    """

    def __init__(
        self,
        use_numba: bool = True,
        debug: bool = False):
        """
        Initialize the EllipseOperations class.

        Args:
            use_numba (bool, optional): Use Numba core functions. Defaults to True.
            debug (bool, optional): Log the computational path taken. Defaults to False.
        """
        self.use_numba = use_numba
        self.debug = debug
        self.vector_ops = VectorOperations(
            use_numba=use_numba,
            debug=debug)
        if self.debug:
            logger.debug("EllipseOperations: use_numba=%s", use_numba)


    def semi_axes(
        self,
        vec1,
        vec2,
        smajor: Optional[np.ndarray] = None,
        sminor: Optional[np.ndarray] = None) -> Tuple[np.ndarray, np.ndarray]:
        """
        Semi-major and semi-minor axes of the ellipse generated by vec1, vec2.

        Args:
            vec1, vec2: generating vectors of shape (3,)
            smajor, sminor (optional): float64 arrays of shape (3,) to receive
                the axes. Either may be vec1 or vec2 itself.

        Returns:
            smajor, sminor: the semi-axes. Both are the zero vector when vec1
            and vec2 are zero; sminor is zero when they are linearly dependent.
            Degeneracy is not an error, callers check for zero axes themselves.
        """
        vec1 = as_vector(vec1, "vec1")
        vec2 = as_vector(vec2, "vec2")
        if vec1.shape != (3,) or vec2.shape != (3,):
            raise ValueError("semi_axes takes single 3-vectors, use semi_axes_field for fields")

        smajor = np.empty(3) if smajor is None else check_output(smajor, (3,), "smajor")
        sminor = np.empty(3) if sminor is None else check_output(sminor, (3,), "sminor")

        if self.use_numba:
            if self.debug:
                logger.debug("semi_axes: numba kernel")
            ellipse_semi_axes_nb_core(vec1, vec2, smajor, sminor)
        else:
            if self.debug:
                logger.debug("semi_axes: numpy fallback")
            major, minor = ellipse_semi_axes_np_core(vec1, vec2)
            smajor[...] = major
            sminor[...] = minor

        return smajor, sminor


    def semi_axes_field(
        self,
        vec1_field: np.ndarray,
        vec2_field: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """
        Semi-axes at every point of two generating-vector fields.

        Args:
            vec1_field, vec2_field: arrays of shape (3, ...)

        Returns:
            smajor, sminor: arrays of shape (3, ...)
        """
        vec1_field = as_vector(vec1_field, "vec1_field")
        vec2_field = as_vector(vec2_field, "vec2_field")
        if vec1_field.shape != vec2_field.shape:
            raise ValueError(
                f"shape mismatch: {vec1_field.shape} vs {vec2_field.shape}")

        if self.use_numba:
            if self.debug:
                logger.debug("semi_axes_field: numba kernel over %s", vec1_field.shape[1:])
            flat1 = np.ascontiguousarray(vec1_field.reshape(3, -1))
            flat2 = np.ascontiguousarray(vec2_field.reshape(3, -1))
            smajor = np.empty_like(flat1)
            sminor = np.empty_like(flat1)
            ellipse_semi_axes_field_nb_core(flat1, flat2, smajor, sminor)
            return (smajor.reshape(vec1_field.shape),
                    sminor.reshape(vec1_field.shape))
        else:
            if self.debug:
                logger.debug("semi_axes_field: numpy fallback")
            return ellipse_semi_axes_np_core(vec1_field, vec2_field)


    def ellipse_points(
        self,
        vec1,
        vec2,
        theta,
        center=None) -> np.ndarray:
        """
        Points center + cos(theta) vec1 + sin(theta) vec2.

        Args:
            vec1, vec2: generating vectors (3,)
            theta: angle or 1D array of angles in radians
            center (optional): ellipse center (3,). Defaults to the origin.

        Returns:
            points of shape (3, M), M = number of angles
        """
        vec1 = as_vector(vec1, "vec1")
        vec2 = as_vector(vec2, "vec2")
        center = np.zeros(3) if center is None else as_vector(center, "center")
        theta = np.atleast_1d(np.asarray(theta, dtype=np.float64))
        if theta.ndim != 1:
            raise ValueError(f"theta must be a scalar or 1D array, got shape {theta.shape}")

        return ellipse_points_np_core(vec1, vec2, theta, center)


    def project_onto_plane(
        self,
        center,
        vec1,
        vec2,
        normal,
        constant: float = 0.0) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Orthogonal projection of an ellipse onto the plane normal . x = constant.

        The center is projected onto the plane, the generating vectors lose
        their component along the normal, and the semi-axes of the projected
        generating vectors are extracted. An ellipse seen edge-on projects to
        a segment, i.e. a zero semi-minor axis.

        Args:
            center: ellipse center (3,)
            vec1, vec2: generating vectors (3,)
            normal: plane normal (3,), must be nonzero
            constant (float, optional): plane constant. Defaults to 0.0.

        Returns:
            center, smajor, sminor of the projected ellipse
        """
        center = as_vector(center, "center")
        normal = as_vector(normal, "normal")
        normal_length = self.vector_ops.norm(normal)
        if normal_length == 0.0:
            raise ValueError("Plane normal must be a nonzero vector")

        unit_normal = normal / normal_length
        # distance of the center from the plane along the unit normal
        offset = self.vector_ops.dot(center, unit_normal) - constant / normal_length
        proj_center = self.vector_ops.linear_combination(1.0, center, -offset, unit_normal)

        proj1 = self.vector_ops.perpendicular_component(vec1, normal)
        proj2 = self.vector_ops.perpendicular_component(vec2, normal)
        smajor, sminor = self.semi_axes(proj1, proj2)

        return proj_center, smajor, sminor
