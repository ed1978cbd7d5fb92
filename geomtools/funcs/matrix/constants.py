from numba import types

##############################################################################
# Global constants
##############################################################################

# Reported when the temporary product buffer cannot be allocated
ALLOCATION_FAILED_CATEGORY = "MALLOCFAILED"
ALLOCATION_FAILED_MESSAGE = "An attempt to create a temporary matrix failed."

##############################################################################
# Type signatures for Numba functions
##############################################################################

# Transpose of m1 times m2, accumulated into tmp
transpose_product_sig_64 = types.void(
    types.float64[:,:],     # m1: (nr, nc1)
    types.float64[:,:],     # m2: (nr, nc2)
    types.int64,            # nrows: rows contracted over, <= 0 gives zeros
    types.float64[:,:],     # tmp: (nc1, nc2)
)
