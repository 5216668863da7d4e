"""Test stress and strain invariants."""
#
#                                                                       Modules
# =============================================================================
# Standard
import math
# Third-party
import pytest
import torch
# Local
from mpmtorch.math.invariants import get_stress_invariants, \
    get_equivalent_dev_strain
from mpmtorch.math.voigt_notation import get_tensor_from_voigt
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
@pytest.mark.parametrize('n_dim', [2, 3])
def test_get_stress_invariants_hydrostatic(n_dim):
    """Test stress invariants of hydrostatic stress state."""
    # Initialize errors
    errors = []
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Set hydrostatic stress state
    stress_vmf = torch.tensor([-100.0, -100.0, -100.0, 0.0, 0.0, 0.0],
                              dtype=torch.float64)
    # Compute stress invariants
    invariants = get_stress_invariants(stress_vmf, n_dim)
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Check mean stress and hydrostatic coordinate
    if not torch.isclose(invariants['mean_p'],
                         torch.tensor(-100.0, dtype=torch.float64)):
        errors.append('Mean stress was not properly computed.')
    if not torch.isclose(invariants['epsilon'],
                         torch.tensor(-300.0/math.sqrt(3.0),
                                      dtype=torch.float64)):
        errors.append('Hydrostatic coordinate was not properly computed.')
    # Check null deviatoric quantities
    if not torch.equal(invariants['dev_stress'],
                       torch.zeros(6, dtype=torch.float64)):
        errors.append('Deviatoric stress of hydrostatic state is not null.')
    if invariants['j2'] != 0.0 or invariants['j3'] != 0.0 \
            or invariants['rho'] != 0.0:
        errors.append('Deviatoric invariants of hydrostatic state are not '
                      'null.')
    # Check Lode angle (null cosine argument)
    if not torch.isclose(invariants['theta'],
                         torch.tensor(math.pi/6.0, dtype=torch.float64)):
        errors.append('Lode angle of hydrostatic state was not properly '
                      'computed.')
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    assert not errors, "Errors:\n{}".format("\n".join(errors))
# -----------------------------------------------------------------------------
def test_get_stress_invariants_3d():
    """Test stress invariants of general 3D stress state."""
    # Initialize errors
    errors = []
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Set stress state
    stress_vmf = torch.tensor([-120.0, -80.0, -60.0, 15.0, -10.0, 5.0],
                              dtype=torch.float64)
    # Compute stress invariants
    invariants = get_stress_invariants(stress_vmf, n_dim=3)
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Compute deviatoric stress tensor
    stress = get_tensor_from_voigt(stress_vmf)
    dev_stress = stress - torch.trace(stress)/3.0*torch.eye(
        3, dtype=torch.float64)
    # Compute expected invariants
    j2_sol = 0.5*torch.sum(dev_stress*dev_stress)
    j3_sol = torch.linalg.det(dev_stress)
    # Check invariants
    if not torch.isclose(invariants['j2'], j2_sol):
        errors.append('Second deviatoric invariant was not properly '
                      'computed.')
    if not torch.isclose(invariants['j3'], j3_sol):
        errors.append('Third deviatoric invariant was not properly '
                      'computed.')
    if not torch.isclose(invariants['rho'], torch.sqrt(2.0*j2_sol)):
        errors.append('Deviatoric radius was not properly computed.')
    # Check Lode angle
    r_val = (3.0*math.sqrt(3.0)/2.0)*j3_sol/j2_sol**1.5
    theta_sol = torch.acos(r_val)/3.0
    if not torch.isclose(invariants['theta'], theta_sol):
        errors.append('Lode angle was not properly computed.')
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    assert not errors, "Errors:\n{}".format("\n".join(errors))
# -----------------------------------------------------------------------------
def test_get_stress_invariants_2d():
    """Test stress invariants ignore out-of-plane shear in 2D problem."""
    # Initialize errors
    errors = []
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Set stress state with spurious out-of-plane shear components
    stress_vmf = torch.tensor([-120.0, -80.0, -60.0, 15.0, -10.0, 5.0],
                              dtype=torch.float64)
    stress_vmf_plane = stress_vmf.clone()
    stress_vmf_plane[4:] = 0.0
    # Compute stress invariants
    invariants = get_stress_invariants(stress_vmf, n_dim=2)
    invariants_plane = get_stress_invariants(stress_vmf_plane, n_dim=3)
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Check invariants
    for key in ('j2', 'j3', 'rho', 'theta', 'epsilon'):
        if not torch.isclose(invariants[key], invariants_plane[key]):
            errors.append(f'Invariant \'{key}\' of 2D problem depends on '
                          f'out-of-plane shear components.')
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    assert not errors, "Errors:\n{}".format("\n".join(errors))
# -----------------------------------------------------------------------------
@pytest.mark.parametrize('stress_vmf, theta_sol',
                         [([-100.0, -50.0, -50.0, 0.0, 0.0, 0.0],
                           math.acos(-0.99)/3.0),
                          ([-50.0, -100.0, -100.0, 0.0, 0.0, 0.0],
                           math.acos(0.99)/3.0)])
def test_get_stress_invariants_lode_clamp(stress_vmf, theta_sol):
    """Test Lode angle bounds at the compression and extension meridians."""
    # Compute stress invariants
    invariants = get_stress_invariants(
        torch.tensor(stress_vmf, dtype=torch.float64), n_dim=3)
    # Check Lode angle
    assert torch.isclose(invariants['theta'],
                         torch.tensor(theta_sol, dtype=torch.float64))
# -----------------------------------------------------------------------------
def test_get_equivalent_dev_strain():
    """Test equivalent deviatoric strain."""
    # Initialize errors
    errors = []
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Check volumetric strain (null deviatoric part)
    strain_vmf = torch.tensor([1e-3, 1e-3, 1e-3, 0.0, 0.0, 0.0],
                              dtype=torch.float64)
    if not torch.isclose(get_equivalent_dev_strain(strain_vmf),
                         torch.tensor(0.0, dtype=torch.float64)):
        errors.append('Equivalent deviatoric strain of volumetric strain is '
                      'not null.')
    # Check simple shear (engineering shear strain)
    gamma = 2e-3
    strain_vmf = torch.tensor([0.0, 0.0, 0.0, gamma, 0.0, 0.0],
                              dtype=torch.float64)
    eq_sol = torch.tensor(gamma/math.sqrt(3.0), dtype=torch.float64)
    if not torch.isclose(get_equivalent_dev_strain(strain_vmf), eq_sol):
        errors.append('Equivalent deviatoric strain of simple shear was not '
                      'properly computed.')
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    assert not errors, "Errors:\n{}".format("\n".join(errors))
