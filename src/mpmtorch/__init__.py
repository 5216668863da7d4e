"""MPMTorch: Material point method constitutive models in PyTorch."""
#
#                                                                       Modules
# =============================================================================
from mpmtorch import math
from mpmtorch import material
