"""MPMTorch: Standard material constitutive models."""
#
#                                                                       Modules
# =============================================================================
from mpmtorch.material.models.standard import softening
from mpmtorch.material.models.standard import mohr_coulomb
from mpmtorch.material.models.standard import bingham
