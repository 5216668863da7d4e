"""MPMTorch: Voigt notation operations and stress invariants."""
#
#                                                                       Modules
# =============================================================================
from mpmtorch.math import voigt_notation
from mpmtorch.math import invariants
