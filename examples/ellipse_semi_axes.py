"""
    Example script computing ellipse semi-axes with GEOMtools
    Author: GEOMtools developers

"""

import logging
import numpy as np

from geomtools import (
    EllipseOperations,
    MatrixOperations,
    CoordinateOperations,
)

if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    # Initialize the ellipse operations class (numba kernels, debug logging on)
    eo = EllipseOperations(use_numba=True, debug=True)

    # Generating vectors of an ellipse centered at the origin
    vec1 = np.array([1.0, 1.0, 1.0])
    vec2 = np.array([1.0, -1.0, 1.0])

    smajor, sminor = eo.semi_axes(vec1, vec2)
    print(f"Semi-major axis: {smajor}")     # (-sqrt(2), 0, -sqrt(2))
    print(f"Semi-minor axis: {sminor}")     # (0, sqrt(2), 0)

    # Project a tilted ellipse onto the z = 0 plane
    center, pmajor, pminor = eo.project_onto_plane(
        np.array([0.0, 0.0, 4.0]),
        vec1,
        vec2,
        normal=np.array([0.0, 0.0, 1.0]))
    print(f"Projected center: {center}, axes: {pmajor}, {pminor}")

    # A field of ellipses, shape (3, N, N)
    N = 64
    vec1_field = np.random.normal(size=(3, N, N))
    vec2_field = np.random.normal(size=(3, N, N))
    smajor_field, sminor_field = eo.semi_axes_field(vec1_field, vec2_field)
    print(f"Shape of semi-major axis field: {smajor_field.shape}")

    # Transpose products, e.g. the Gram matrix of a set of column vectors
    mo = MatrixOperations(debug=True)
    basis = np.column_stack([vec1, vec2, smajor])
    print(f"Gram matrix:\n{mo.transpose_product(basis, basis)}")

    # Jacobian of the spherical to rectangular map
    co = CoordinateOperations(debug=True)
    jacobi = co.rectangular_from_spherical_jacobian(1.0, np.pi / 3, np.pi / 4)
    print(f"d(x, y, z)/d(r, colat, lon):\n{jacobi}")
