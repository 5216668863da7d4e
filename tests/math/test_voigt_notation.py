"""Test strain/stress tensors Voigt notation matricial storage."""
#
#                                                                       Modules
# =============================================================================
# Third-party
import pytest
import torch
# Local
from mpmtorch.math.voigt_notation import get_problem_type_parameters, \
    check_voigt_vector, get_identity_voigt, zero_out_of_plane, \
    get_tensor_from_voigt, get_voigt_from_tensor
# =============================================================================
#
#                                                          Authorship & Credits
# =============================================================================
__author__ = 'Bernardo Ferreira (bernardo_ferreira@brown.edu)'
__credits__ = ['Bernardo Ferreira', ]
__status__ = 'Stable'
# =============================================================================
#
# =============================================================================
@pytest.mark.parametrize('problem_type, n_dim_sol',
                         [(1, 2), (4, 3)])
def test_get_problem_type_parameters(problem_type, n_dim_sol):
    """Test problem type parameters."""
    # Initialize errors
    errors = []
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Get problem type parameters
    n_dim, comp_order_sym = get_problem_type_parameters(problem_type)
    # Check number of spatial dimensions
    if n_dim != n_dim_sol:
        errors.append('Number of spatial dimensions was not properly set.')
    # Check components order (always six components)
    if comp_order_sym != ('11', '22', '33', '12', '23', '13'):
        errors.append('Strain/Stress components order was not properly set.')
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    assert not errors, "Errors:\n{}".format("\n".join(errors))
# -----------------------------------------------------------------------------
@pytest.mark.parametrize('problem_type', [0, 2, 3, 5])
def test_get_problem_type_parameters_invalid(problem_type):
    """Test detection of unavailable problem type."""
    with pytest.raises(RuntimeError):
        _ = get_problem_type_parameters(problem_type)
# -----------------------------------------------------------------------------
@pytest.mark.parametrize('tensor_vmf',
                         [torch.zeros(3), torch.zeros(4), torch.zeros((6, 1)),
                          [0.0, 0.0, 0.0, 0.0, 0.0, 0.0]])
def test_check_voigt_vector_invalid(tensor_vmf):
    """Test detection of invalid Voigt matricial form."""
    with pytest.raises(RuntimeError):
        check_voigt_vector(tensor_vmf)
# -----------------------------------------------------------------------------
def test_get_identity_voigt():
    """Test second-order identity tensor Voigt matricial form."""
    # Initialize errors
    errors = []
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Check 2D identity (in-plane normal components only)
    identity_sol = torch.tensor([1.0, 1.0, 0.0, 0.0, 0.0, 0.0],
                                dtype=torch.float64)
    if not torch.equal(get_identity_voigt(2), identity_sol):
        errors.append('2D identity tensor was not properly built.')
    # Check 3D identity
    identity_sol = torch.tensor([1.0, 1.0, 1.0, 0.0, 0.0, 0.0],
                                dtype=torch.float64)
    if not torch.equal(get_identity_voigt(3), identity_sol):
        errors.append('3D identity tensor was not properly built.')
    # Check invalid number of spatial dimensions
    with pytest.raises(RuntimeError):
        _ = get_identity_voigt(1)
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    assert not errors, "Errors:\n{}".format("\n".join(errors))
# -----------------------------------------------------------------------------
def test_zero_out_of_plane():
    """Test enforcement of null out-of-plane shear components."""
    # Initialize errors
    errors = []
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Set tensor stored in Voigt matricial form
    tensor_vmf = torch.tensor([1.0, 2.0, 3.0, 4.0, 5.0, 6.0],
                              dtype=torch.float64)
    # Check 2D problem
    tensor_2d = zero_out_of_plane(tensor_vmf, 2)
    if not torch.equal(tensor_2d, torch.tensor([1.0, 2.0, 3.0, 4.0, 0.0, 0.0],
                                               dtype=torch.float64)):
        errors.append('Out-of-plane shear components were not zeroed in 2D '
                      'problem.')
    # Check 3D problem
    tensor_3d = zero_out_of_plane(tensor_vmf, 3)
    if not torch.equal(tensor_3d, tensor_vmf):
        errors.append('Tensor was modified in 3D problem.')
    # Check input tensor is not modified
    if tensor_vmf[4] != 5.0 or tensor_vmf[5] != 6.0:
        errors.append('Input tensor was modified in place.')
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    assert not errors, "Errors:\n{}".format("\n".join(errors))
# -----------------------------------------------------------------------------
def test_get_tensor_from_voigt():
    """Test recovery of strain and stress tensors from Voigt matricial form."""
    # Initialize errors
    errors = []
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Set random tensor stored in Voigt matricial form
    tensor_vmf = torch.rand(6, dtype=torch.float64)
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Recover stress tensor
    stress = get_tensor_from_voigt(tensor_vmf)
    stress_sol = torch.tensor(
        [[tensor_vmf[0], tensor_vmf[3], tensor_vmf[5]],
         [tensor_vmf[3], tensor_vmf[1], tensor_vmf[4]],
         [tensor_vmf[5], tensor_vmf[4], tensor_vmf[2]]], dtype=torch.float64)
    if not torch.allclose(stress, stress_sol):
        errors.append('Stress tensor was not properly recovered from the '
                      'corresponding Voigt matricial form.')
    # Recover strain tensor
    strain = get_tensor_from_voigt(tensor_vmf, is_strain=True)
    strain_sol = torch.tensor(
        [[tensor_vmf[0], 0.5*tensor_vmf[3], 0.5*tensor_vmf[5]],
         [0.5*tensor_vmf[3], tensor_vmf[1], 0.5*tensor_vmf[4]],
         [0.5*tensor_vmf[5], 0.5*tensor_vmf[4], tensor_vmf[2]]],
        dtype=torch.float64)
    if not torch.allclose(strain, strain_sol):
        errors.append('Strain tensor was not properly recovered from the '
                      'corresponding Voigt matricial form.')
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    assert not errors, "Errors:\n{}".format("\n".join(errors))
# -----------------------------------------------------------------------------
def test_get_voigt_from_tensor():
    """Test strain and stress tensors Voigt matricial form."""
    # Initialize errors
    errors = []
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Set random symmetric tensor
    random_tensor = torch.rand((3, 3), dtype=torch.float64)
    tensor = 0.5*(random_tensor + random_tensor.T)
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Get stress tensor Voigt matricial form
    stress_vmf = get_voigt_from_tensor(tensor)
    stress_vmf_sol = torch.tensor([tensor[0, 0], tensor[1, 1], tensor[2, 2],
                                   tensor[0, 1], tensor[1, 2], tensor[0, 2]],
                                  dtype=torch.float64)
    if not torch.allclose(stress_vmf, stress_vmf_sol):
        errors.append('Stress tensor was not properly stored in Voigt '
                      'matricial form.')
    # Get strain tensor Voigt matricial form (engineering shear strains)
    strain_vmf = get_voigt_from_tensor(tensor, is_strain=True)
    stress_vmf_sol[3:] = 2.0*stress_vmf_sol[3:]
    if not torch.allclose(strain_vmf, stress_vmf_sol):
        errors.append('Strain tensor was not properly stored in Voigt '
                      'matricial form.')
    # Check invalid tensor shape
    with pytest.raises(RuntimeError):
        _ = get_voigt_from_tensor(torch.zeros((2, 2)))
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    assert not errors, "Errors:\n{}".format("\n".join(errors))
