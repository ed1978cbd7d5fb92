from numba import types

##############################################################################
# Type signatures for Numba functions
##############################################################################

# Semi-axes of a single ellipse
semi_axes_sig_64 = types.void(
    types.float64[:],       # vec1: (3,)
    types.float64[:],       # vec2: (3,)
    types.float64[:],       # smajor: (3,), may alias vec1 or vec2
    types.float64[:],       # sminor: (3,), may alias vec1 or vec2
)

# Semi-axes over a field of ellipses
semi_axes_field_sig_64 = types.void(
    types.float64[:,:],     # vec1: (3, N)
    types.float64[:,:],     # vec2: (3, N)
    types.float64[:,:],     # smajor: (3, N)
    types.float64[:,:],     # sminor: (3, N)
)
