"""MPMTorch: Material constitutive modeling and state update."""
#
#                                                                       Modules
# =============================================================================
from mpmtorch.material import models
from mpmtorch.material import material_su
