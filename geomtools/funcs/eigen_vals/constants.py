from numba import types

##############################################################################
# Global constants
##############################################################################

MATRIX_DIM = 2      # only the closed-form 2x2 symmetric case is supported

##############################################################################
# Type signatures for Numba functions
##############################################################################

# Scalar eigensystem of [[a, b], [b, c]]:
# returns (d0, d1, c00, c01, c10, c11)
eigensystem_2x2_sig = types.UniTuple(types.float64, 6)(
    types.float64,      # a = S[0, 0]
    types.float64,      # b = S[1, 0] = S[0, 1]
    types.float64,      # c = S[1, 1]
)

# Single symmetric matrix
diagonalize_2x2_sig_64 = types.void(
    types.float64[:,:],     # sym: (2, 2)
    types.float64[:,:],     # diag: (2, 2)
    types.float64[:,:],     # rot: (2, 2)
)

# Field of symmetric matrices
diagonalize_2x2_field_sig_32 = types.void(
    types.float32[:,:,:],   # sym: (2, 2, N)
    types.float32[:,:,:],   # diag: (2, 2, N)
    types.float32[:,:,:],   # rot: (2, 2, N)
)
diagonalize_2x2_field_sig_64 = types.void(
    types.float64[:,:,:],   # sym: (2, 2, N)
    types.float64[:,:,:],   # diag: (2, 2, N)
    types.float64[:,:,:],   # rot: (2, 2, N)
)
