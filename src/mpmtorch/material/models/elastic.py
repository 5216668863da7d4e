"""MPMTorch: Isotropic linear elasticity.

This module includes the computation of the isotropic linear elastic moduli
and of the associated elastic stiffness and compliance stored in Voigt
matricial form (engineering shear strains).

Functions
---------
get_bulk_shear_moduli
    Compute bulk and shear moduli from Young's modulus and Poisson ratio.
get_elastic_stiffness_vmf
    Compute isotropic elastic stiffness Voigt matricial form.
get_elastic_compliance_vmf
    Compute isotropic elastic compliance Voigt matricial form.
"""
#
#                                                                       Modules
# =============================================================================
# Third-party
import torch
#
#                                                          Authorship & Credits
# =============================================================================
__author__ = 'Bernardo Ferreira (bernardo_ferreira@brown.edu)'
__credits__ = ['Bernardo Ferreira', ]
__status__ = 'Stable'
# =============================================================================
#
# =============================================================================
def get_bulk_shear_moduli(E, v):
    """Compute bulk and shear moduli from Young's modulus and Poisson ratio.

    Parameters
    ----------
    E : float
        Young's modulus.
    v : float
        Poisson ratio.

    Returns
    -------
    K : float
        Bulk modulus.
    G : float
        Shear modulus.
    """
    # Check Poisson ratio
    if v == 0.5:
        raise RuntimeError('Bulk modulus is undefined for an incompressible '
                           'material (Poisson ratio of 0.5).')
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Compute bulk and shear modulus
    K = E/(3.0*(1.0 - 2.0*v))
    G = E/(2.0*(1.0 + v))
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    return K, G
# =============================================================================
def get_elastic_stiffness_vmf(K, G, dtype=torch.float64, device=None):
    """Compute isotropic elastic stiffness Voigt matricial form.

    The elastic stiffness is assembled as

    .. math::

       \\mathbf{D}^{e} = \\begin{bmatrix}
       a_{1} & a_{2} & a_{2} & 0 & 0 & 0 \\\\
       a_{2} & a_{1} & a_{2} & 0 & 0 & 0 \\\\
       a_{2} & a_{2} & a_{1} & 0 & 0 & 0 \\\\
       0 & 0 & 0 & G & 0 & 0 \\\\
       0 & 0 & 0 & 0 & G & 0 \\\\
       0 & 0 & 0 & 0 & 0 & G
       \\end{bmatrix}

    with :math:`a_{1} = K + 4G/3` and :math:`a_{2} = K - 2G/3`.

    Parameters
    ----------
    K : float
        Bulk modulus.
    G : float
        Shear modulus.
    dtype : torch.dtype, default=torch.float64
        Data type of the elastic stiffness.
    device : torch.device, default=None
        Device on which torch.Tensor is allocated.

    Returns
    -------
    elastic_stiffness_vmf : torch.Tensor(2d)
        Elastic stiffness stored in Voigt matricial form.
    """
    # Compute elastic stiffness parameters
    a1 = K + (4.0/3.0)*G
    a2 = K - (2.0/3.0)*G
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Initialize elastic stiffness
    elastic_stiffness_vmf = torch.zeros((6, 6), dtype=dtype, device=device)
    # Assemble normal-normal block
    elastic_stiffness_vmf[:3, :3] = a2
    elastic_stiffness_vmf[0, 0] = a1
    elastic_stiffness_vmf[1, 1] = a1
    elastic_stiffness_vmf[2, 2] = a1
    # Assemble shear diagonal
    elastic_stiffness_vmf[3, 3] = G
    elastic_stiffness_vmf[4, 4] = G
    elastic_stiffness_vmf[5, 5] = G
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    return elastic_stiffness_vmf
# =============================================================================
def get_elastic_compliance_vmf(K, G, dtype=torch.float64, device=None):
    """Compute isotropic elastic compliance Voigt matricial form.

    Parameters
    ----------
    K : float
        Bulk modulus.
    G : float
        Shear modulus.
    dtype : torch.dtype, default=torch.float64
        Data type of the elastic compliance.
    device : torch.device, default=None
        Device on which torch.Tensor is allocated.

    Returns
    -------
    elastic_compliance_vmf : torch.Tensor(2d)
        Elastic compliance stored in Voigt matricial form, i.e., the inverse
        of the elastic stiffness.
    """
    # Compute elastic compliance parameters
    b1 = 1.0/(9.0*K) + 1.0/(3.0*G)
    b2 = 1.0/(9.0*K) - 1.0/(6.0*G)
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Initialize elastic compliance
    elastic_compliance_vmf = torch.zeros((6, 6), dtype=dtype, device=device)
    # Assemble normal-normal block
    elastic_compliance_vmf[:3, :3] = b2
    elastic_compliance_vmf[0, 0] = b1
    elastic_compliance_vmf[1, 1] = b1
    elastic_compliance_vmf[2, 2] = b1
    # Assemble shear diagonal
    elastic_compliance_vmf[3, 3] = 1.0/G
    elastic_compliance_vmf[4, 4] = 1.0/G
    elastic_compliance_vmf[5, 5] = 1.0/G
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    return elastic_compliance_vmf
