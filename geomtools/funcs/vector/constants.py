from numba import types

##############################################################################
# Global constants
##############################################################################

# Constants
X, Y, Z = 0, 1, 2
NUM_COMPONENTS = 3


##############################################################################
# Type signatures for Numba functions
##############################################################################

# Single-vector dot product and norm signatures
sig_dot_f64 = types.float64(
    types.float64[:],
    types.float64[:]
    )
sig_norm_f64 = types.float64(
    types.float64[:]
    )

# Scaling, linear combination and perpendicular component write into `out`
sig_scale_f64 = types.void(
    types.float64,          # k
    types.float64[:],       # vec
    types.float64[:]        # out (may alias vec)
    )
sig_lincom_f64 = types.void(
    types.float64,          # k1
    types.float64[:],       # vec1
    types.float64,          # k2
    types.float64[:],       # vec2
    types.float64[:]        # out (may alias vec1 or vec2)
    )
sig_perp_f64 = types.void(
    types.float64[:],       # vec1
    types.float64[:],       # vec2
    types.float64[:]        # out (may alias vec1 or vec2)
    )

# Field signatures, vectors stored as (3, N)
sig_dot_field_f32 = types.float32[:](
    types.float32[:,:],
    types.float32[:,:]
    )
sig_dot_field_f64 = types.float64[:](
    types.float64[:,:],
    types.float64[:,:]
    )
sig_norm_field_f32 = types.float32[:](
    types.float32[:,:]
    )
sig_norm_field_f64 = types.float64[:](
    types.float64[:,:]
    )
sig_lincom_field_f32 = types.float32[:,:](
    types.float32,
    types.float32[:,:],
    types.float32,
    types.float32[:,:]
    )
sig_lincom_field_f64 = types.float64[:,:](
    types.float64,
    types.float64[:,:],
    types.float64,
    types.float64[:,:]
    )
