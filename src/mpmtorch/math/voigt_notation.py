"""MPMTorch: Strain/Stress tensors Voigt notation storage.

This module contains the procedures associated with the storage of
strain/stress tensorial quantities following the Voigt notation. Independently
of the problem number of spatial dimensions, symmetric second-order tensors are
always stored as 6-component vectors in engineering ordering, i.e., the three
normal components followed by the three shear components.

Functions
---------
get_problem_type_parameters
    Get parameters dependent on the problem type.
check_voigt_vector
    Check strain/stress tensor Voigt matricial form.
get_identity_voigt
    Get second-order identity tensor Voigt matricial form.
zero_out_of_plane
    Enforce null out-of-plane shear components in 2D problems.
get_tensor_from_voigt
    Recover tensor from associated Voigt matricial form.
get_voigt_from_tensor
    Get tensor Voigt matricial form.
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
#
#                                                       Problem type parameters
# =============================================================================
def get_problem_type_parameters(problem_type):
    """Get parameters dependent on the problem type.

    Parameters
    ----------
    problem_type : int
        Problem type: 2D plane strain (1) and 3D (4).

    Returns
    -------
    n_dim : int
        Problem number of spatial dimensions.
    comp_order_sym : tuple
        Strain/Stress components symmetric order (Voigt).
    """
    # Set problem number of spatial dimensions
    if problem_type == 1:
        n_dim = 2
    elif problem_type == 4:
        n_dim = 3
    else:
        raise RuntimeError('Unavailable problem type.')
    # Set strain/stress components symmetric order (normal components
    # followed by shear components)
    comp_order_sym = ('11', '22', '33', '12', '23', '13')
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    return n_dim, comp_order_sym
#
#                                                       Voigt matricial storage
# =============================================================================
def check_voigt_vector(tensor_vmf, name='Strain/Stress'):
    """Check strain/stress tensor Voigt matricial form.

    Parameters
    ----------
    tensor_vmf : torch.Tensor(1d)
        Tensor stored in Voigt matricial form.
    name : str, default='Strain/Stress'
        Tensor name used in the error message.
    """
    if not isinstance(tensor_vmf, torch.Tensor):
        raise RuntimeError(f'{name} tensor Voigt matricial form must be '
                           f'torch.Tensor.')
    elif tensor_vmf.shape != (6,):
        raise RuntimeError(f'{name} tensor Voigt matricial form must be '
                           f'torch.Tensor(1d) with 6 components, but got '
                           f'shape {tuple(tensor_vmf.shape)}.')
# =============================================================================
def get_identity_voigt(n_dim, dtype=torch.float64, device=None):
    """Get second-order identity tensor Voigt matricial form.

    In 2D problems the out-of-plane normal component is not part of the
    identity, i.e., only the in-plane normal components are set.

    Parameters
    ----------
    n_dim : int
        Problem number of spatial dimensions.
    dtype : torch.dtype, default=torch.float64
        Data type of the identity tensor.
    device : torch.device, default=None
        Device on which torch.Tensor is allocated.

    Returns
    -------
    identity_vmf : torch.Tensor(1d)
        Second-order identity tensor stored in Voigt matricial form.
    """
    if n_dim == 2:
        identity_vmf = torch.tensor([1.0, 1.0, 0.0, 0.0, 0.0, 0.0],
                                    dtype=dtype, device=device)
    elif n_dim == 3:
        identity_vmf = torch.tensor([1.0, 1.0, 1.0, 0.0, 0.0, 0.0],
                                    dtype=dtype, device=device)
    else:
        raise RuntimeError('Invalid number of spatial dimensions.')
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    return identity_vmf
# =============================================================================
def zero_out_of_plane(tensor_vmf, n_dim):
    """Enforce null out-of-plane shear components in 2D problems.

    Parameters
    ----------
    tensor_vmf : torch.Tensor(1d)
        Tensor stored in Voigt matricial form.
    n_dim : int
        Problem number of spatial dimensions.

    Returns
    -------
    tensor_vmf : torch.Tensor(1d)
        Tensor stored in Voigt matricial form (copy) with null out-of-plane
        shear components ('23' and '13') if 2D problem.
    """
    tensor_vmf = tensor_vmf.clone()
    if n_dim == 2:
        tensor_vmf[4] = 0.0
        tensor_vmf[5] = 0.0
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    return tensor_vmf
# =============================================================================
def get_tensor_from_voigt(tensor_vmf, is_strain=False):
    """Recover tensor from associated Voigt matricial form.

    Parameters
    ----------
    tensor_vmf : torch.Tensor(1d)
        Tensor stored in Voigt matricial form.
    is_strain : bool, default=False
        If True, then the Voigt matricial form stores engineering shear
        strains, which are halved to recover the tensorial components.

    Returns
    -------
    tensor : torch.Tensor(2d)
        Symmetric second-order tensor.
    """
    check_voigt_vector(tensor_vmf)
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Set shear components factor
    factor = 0.5 if is_strain else 1.0
    # Build indexing mapping (row major order)
    index_map = [0, 3, 5, 3, 1, 4, 5, 4, 2]
    # Build component factors (row major order)
    index_factor = torch.tensor([1.0, factor, factor, factor, 1.0, factor,
                                 factor, factor, 1.0],
                                dtype=tensor_vmf.dtype,
                                device=tensor_vmf.device)
    # Get tensor from Voigt matricial form
    tensor = (tensor_vmf[index_map]*index_factor).view(3, 3)
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    return tensor
# =============================================================================
def get_voigt_from_tensor(tensor, is_strain=False):
    """Get tensor Voigt matricial form.

    Parameters
    ----------
    tensor : torch.Tensor(2d)
        Symmetric second-order tensor.
    is_strain : bool, default=False
        If True, then the shear components are stored as engineering shear
        strains (doubled).

    Returns
    -------
    tensor_vmf : torch.Tensor(1d)
        Tensor stored in Voigt matricial form.
    """
    # Check tensor
    if not isinstance(tensor, torch.Tensor):
        raise RuntimeError('Tensor must be torch.Tensor.')
    elif tensor.shape != (3, 3):
        raise RuntimeError('Tensor must be torch.Tensor(2d) of shape (3, 3).')
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Set shear components factor
    factor = 2.0 if is_strain else 1.0
    # Build indexing mapping
    index_map = ([0, 1, 2, 0, 1, 0], [0, 1, 2, 1, 2, 2])
    # Compute tensor Voigt matricial form
    tensor_vmf = tensor[index_map].clone()
    tensor_vmf[3:] = factor*tensor_vmf[3:]
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    return tensor_vmf
