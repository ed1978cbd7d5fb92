from numba import types

##############################################################################
# Global constants
##############################################################################

NUM_COMPONENTS_RECT = 3
X, Y, Z = 0, 1, 2           # rectangular coordinate indexes
R, COLAT, LON = 0, 1, 2     # spherical coordinate indexes

##############################################################################
# Type signatures for Numba functions
##############################################################################

# Single point
sig_jacobian_transposed_64 = types.void(
    types.float64,          # r
    types.float64,          # colat
    types.float64,          # lon
    types.float64[:,:],     # out: (3, 3), out[j, i] = d x_i / d q_j
)
sig_sph_to_rect_64 = types.void(
    types.float64,          # r
    types.float64,          # colat
    types.float64,          # lon
    types.float64[:],       # out: (3,)
)

# Flattened fields of points
sig_jacobian_transposed_field_64 = types.void(
    types.float64[:],       # r: (N,)
    types.float64[:],       # colat: (N,)
    types.float64[:],       # lon: (N,)
    types.float64[:,:,:],   # out: (3, 3, N)
)
sig_sph_to_rect_field_64 = types.void(
    types.float64[:],       # r: (N,)
    types.float64[:],       # colat: (N,)
    types.float64[:],       # lon: (N,)
    types.float64[:,:],     # out: (3, N)
)
