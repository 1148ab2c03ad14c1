##############################################################################
# Global constants
##############################################################################

# Cartesian axis indices
X, Y, Z = 0, 1, 2

# Basis-vector aliases for the same axes
I, J, K = X, Y, Z

# Default number of dimensions for Vector.origin
DEFAULT_NUM_OF_DIMS = 3

# Value substituted for a missing component when zipping vectors of
# different dimension
FILL_VALUE = 0
