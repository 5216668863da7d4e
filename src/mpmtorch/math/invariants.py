"""MPMTorch: Stress and strain invariants.

This module includes the computation of the stress invariants that
parameterize pressure-sensitive yield surfaces in the Haigh-Westergaard stress
space, namely the hydrostatic coordinate, the deviatoric radius and the Lode
angle, as well as the equivalent deviatoric strain.

Functions
---------
get_stress_invariants
    Compute stress invariants from stress tensor Voigt matricial form.
get_equivalent_dev_strain
    Compute equivalent deviatoric strain.
"""
#
#                                                                       Modules
# =============================================================================
# Standard
import math
# Third-party
import torch
# Local
from mpmtorch.math.voigt_notation import check_voigt_vector
#
#                                                          Authorship & Credits
# =============================================================================
__author__ = 'Bernardo Ferreira (bernardo_ferreira@brown.edu)'
__credits__ = ['Bernardo Ferreira', ]
__status__ = 'Stable'
# =============================================================================
#
# =============================================================================
def get_stress_invariants(stress_vmf, n_dim):
    """Compute stress invariants from stress tensor Voigt matricial form.

    Stress invariants:

    * ``mean_p``

        * Mean stress, :math:`p = (\\sigma_{11} + \\sigma_{22}
          + \\sigma_{33})/3`.

    * ``dev_stress``

        * Deviatoric stress tensor (Voigt matricial form),
          :math:`\\boldsymbol{s} = \\boldsymbol{\\sigma} - p \\mathbf{I}`.

    * ``j2``, ``j3``

        * Second and third invariants of the deviatoric stress tensor.

    * ``rho``

        * Deviatoric radius, :math:`\\rho = \\sqrt{2 J_{2}}`.

    * ``theta``

        * Lode angle, :math:`\\theta \\in [0, \\pi/3]`.

    * ``epsilon``

        * Hydrostatic coordinate, :math:`\\xi = (\\sigma_{11} + \\sigma_{22}
          + \\sigma_{33})/\\sqrt{3}`.

    ----

    The Lode angle cosine argument is bounded to [-0.99, 0.99] before the
    inverse cosine is evaluated.

    Parameters
    ----------
    stress_vmf : torch.Tensor(1d)
        Stress tensor stored in Voigt matricial form.
    n_dim : int
        Problem number of spatial dimensions.

    Returns
    -------
    invariants : dict
        Stress invariants (item, torch.Tensor) stored as key-value pairs.
    """
    # Check stress tensor
    check_voigt_vector(stress_vmf, name='Stress')
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Get stress components
    s = stress_vmf
    # Compute mean stress
    mean_p = (s[0] + s[1] + s[2])/3.0
    # Compute deviatoric stress
    dev_stress = s.clone()
    dev_stress[:3] = dev_stress[:3] - mean_p
    d = dev_stress
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Compute second invariant of deviatoric stress
    j2 = ((s[0] - s[1])**2 + (s[1] - s[2])**2 + (s[0] - s[2])**2)/6.0 \
        + s[3]**2
    if n_dim == 3:
        j2 = j2 + s[4]**2 + s[5]**2
    # Compute third invariant of deviatoric stress
    j3 = d[0]*d[1]*d[2] - d[2]*d[3]**2
    if n_dim == 3:
        j3 = j3 + 2.0*d[3]*d[4]*d[5] - d[0]*d[4]**2 - d[1]*d[5]**2
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Compute Lode angle cosine argument
    if torch.abs(j2) > 0.0:
        theta_val = (3.0*math.sqrt(3.0)/2.0)*(j3/j2**1.5)
    else:
        theta_val = torch.zeros_like(j2)
    theta_val = torch.clamp(theta_val, min=-0.99, max=0.99)
    # Compute Lode angle
    theta = (1.0/3.0)*torch.acos(theta_val)
    theta = torch.clamp(theta, min=0.0, max=math.pi/3.0)
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Compute deviatoric radius
    rho = torch.sqrt(2.0*j2)
    # Compute hydrostatic coordinate
    epsilon = (s[0] + s[1] + s[2])/math.sqrt(3.0)
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Store stress invariants
    invariants = {'mean_p': mean_p, 'dev_stress': dev_stress, 'j2': j2,
                  'j3': j3, 'rho': rho, 'theta': theta, 'epsilon': epsilon}
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    return invariants
# =============================================================================
def get_equivalent_dev_strain(strain_vmf):
    """Compute equivalent deviatoric strain.

    .. math::

       \\bar{\\varepsilon}_{d} = \\sqrt{\\frac{2}{3} \\boldsymbol{e} :
       \\boldsymbol{e}}

    where :math:`\\boldsymbol{e}` is the deviatoric strain tensor.

    Parameters
    ----------
    strain_vmf : torch.Tensor(1d)
        Strain tensor stored in Voigt matricial form (engineering shear
        strains).

    Returns
    -------
    eq_dev_strain : torch.Tensor(0d)
        Equivalent deviatoric strain.
    """
    # Check strain tensor
    check_voigt_vector(strain_vmf, name='Strain')
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Compute volumetric strain
    vol_strain = strain_vmf[0] + strain_vmf[1] + strain_vmf[2]
    # Compute deviatoric normal strains
    dev_normal = strain_vmf[:3] - vol_strain/3.0
    # Compute tensorial shear strains
    shear = 0.5*strain_vmf[3:]
    # Compute deviatoric strain squared norm
    norm_sq = torch.sum(dev_normal**2) + 2.0*torch.sum(shear**2)
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Compute equivalent deviatoric strain
    eq_dev_strain = torch.sqrt((2.0/3.0)*norm_sq)
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    return eq_dev_strain
