"""MPMTorch: Material state update.

Functions
---------
get_available_constitutive_models
    Get available material constitutive models.
get_constitutive_model
    Get material constitutive model class.
material_state_update
    Material state update for any given constitutive model.
"""
#
#                                                                       Modules
# =============================================================================
# Local
from mpmtorch.material.models.standard.mohr_coulomb import MohrCoulomb
from mpmtorch.material.models.standard.bingham import Bingham
#
#                                                          Authorship & Credits
# =============================================================================
__author__ = 'Bernardo Ferreira (bernardo_ferreira@brown.edu)'
__credits__ = ['Bernardo Ferreira', ]
__status__ = 'Stable'
# =============================================================================
#
# =============================================================================
def get_available_constitutive_models():
    """Get available material constitutive models.

    Returns
    -------
    available_models : tuple[str]
        Available material constitutive models names (str).
    """
    return ('mohr_coulomb', 'bingham')
# =============================================================================
def get_constitutive_model(name):
    """Get material constitutive model class.

    Parameters
    ----------
    name : str
        Material constitutive model name.

    Returns
    -------
    model_class : type
        Material constitutive model class.
    """
    if name == 'mohr_coulomb':
        model_class = MohrCoulomb
    elif name == 'bingham':
        model_class = Bingham
    else:
        raise RuntimeError(f'Unknown material constitutive model \'{name}\'. '
                           f'Available models: '
                           f'{", ".join(get_available_constitutive_models())}.')
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    return model_class
# =============================================================================
def material_state_update(constitutive_model, stress, inc_strain,
                          state_variables_old, particle=None):
    """Material state update for any given constitutive model.

    Parameters
    ----------
    constitutive_model : ConstitutiveModel
        Material constitutive model.
    stress : torch.Tensor(1d)
        Stress tensor stored in Voigt matricial form.
    inc_strain : torch.Tensor(1d)
        Incremental strain tensor stored in Voigt matricial form.
    state_variables_old : dict
        Last converged material constitutive model state variables.
    particle : object, default=None
        Material point collaborator. Only passed to constitutive models that
        require it.

    Returns
    -------
    state_variables : dict
        Material constitutive model state variables.
    """
    # Perform state update
    if constitutive_model.is_collaborator_required():
        if particle is None:
            raise RuntimeError(f'Material constitutive model '
                               f'\'{constitutive_model.get_name()}\' '
                               f'requires the material point collaborator.')
        state_variables = constitutive_model.state_update(
            stress, inc_strain, state_variables_old, particle=particle)
    else:
        state_variables = constitutive_model.state_update(
            stress, inc_strain, state_variables_old)
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    return state_variables
