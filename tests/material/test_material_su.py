"""Test material state update."""
#
#                                                                       Modules
# =============================================================================
# Third-party
import pytest
import torch
# Local
from mpmtorch.material.material_su import get_available_constitutive_models, \
    get_constitutive_model, material_state_update
from mpmtorch.material.models.standard.mohr_coulomb import MohrCoulomb
from mpmtorch.material.models.standard.bingham import Bingham
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
def test_get_constitutive_model():
    """Test material constitutive model getter."""
    # Initialize errors
    errors = []
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Check available constitutive models
    if set(get_available_constitutive_models()) != {'mohr_coulomb',
                                                    'bingham'}:
        errors.append('Available constitutive models were not properly '
                      'set.')
    if get_constitutive_model('mohr_coulomb') is not MohrCoulomb \
            or get_constitutive_model('bingham') is not Bingham:
        errors.append('Constitutive model class was not properly '
                      'retrieved.')
    # Check unknown constitutive model
    with pytest.raises(RuntimeError):
        _ = get_constitutive_model('von_mises')
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    assert not errors, "Errors:\n{}".format("\n".join(errors))
# -----------------------------------------------------------------------------
def test_material_state_update_mohr_coulomb(mohr_coulomb_parameters,
                                            material_point):
    """Test material state update of Mohr-Coulomb constitutive model."""
    # Build constitutive model
    model = get_constitutive_model('mohr_coulomb')(4, mohr_coulomb_parameters)
    # Set stress and incremental strain
    stress = torch.tensor([-100.0, -100.0, -100.0, 0.0, 0.0, 0.0],
                          dtype=torch.float64)
    inc_strain = torch.tensor([-1e-6, -1e-6, -1e-6, 0.0, 0.0, 0.0],
                              dtype=torch.float64)
    # Perform material state update (collaborator is ignored)
    state_variables = material_state_update(
        model, stress, inc_strain, model.state_init(),
        particle=material_point(torch.zeros(6), 0.0))
    # Check updated stress
    assert torch.equal(state_variables['stress_vmf'],
                       model.compute_stress(stress, inc_strain))
# -----------------------------------------------------------------------------
def test_material_state_update_bingham(bingham_parameters, material_point):
    """Test material state update of Bingham constitutive model."""
    # Initialize errors
    errors = []
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Build constitutive model
    model = get_constitutive_model('bingham')(1, bingham_parameters)
    stress = torch.zeros(6, dtype=torch.float64)
    inc_strain = torch.zeros(6, dtype=torch.float64)
    # Perform material state update
    state_variables = material_state_update(
        model, stress, inc_strain, model.state_init(),
        particle=material_point(torch.zeros(6), 200.0))
    stress_sol = torch.tensor([-200.0, -200.0, 0.0, 0.0, 0.0, 0.0],
                              dtype=torch.float64)
    if not torch.equal(state_variables['stress_vmf'], stress_sol):
        errors.append('Material state update was not properly performed.')
    # Check missing material point collaborator
    with pytest.raises(RuntimeError):
        _ = material_state_update(model, stress, inc_strain,
                                  model.state_init())
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    assert not errors, "Errors:\n{}".format("\n".join(errors))
