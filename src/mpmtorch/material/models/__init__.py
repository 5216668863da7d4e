"""MPMTorch: Material constitutive models."""
#
#                                                                       Modules
# =============================================================================
from mpmtorch.material.models import interface
from mpmtorch.material.models import elastic
from mpmtorch.material.models import standard
