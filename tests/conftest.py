"""Setting fixtures for pytest."""
#
#                                                                       Modules
# =============================================================================
# Third-party
import pytest
import torch
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
class MaterialPoint:
    """Material point collaborator providing strain rate and pressure.

    Attributes
    ----------
    _strain_rate : dict
        Strain rate (torch.Tensor(1d), Voigt matricial form) of each phase.
    _pressure : dict
        Pressure (float) of each phase.
    """
    def __init__(self, strain_rate, pressure):
        """Constructor.

        Parameters
        ----------
        strain_rate : {torch.Tensor(1d), dict}
            Strain rate stored in Voigt matricial form (engineering shear
            components halved), single phase or per phase.
        pressure : {float, dict}
            Pressure, single phase or per phase.
        """
        if not isinstance(strain_rate, dict):
            strain_rate = {0: strain_rate}
        if not isinstance(pressure, dict):
            pressure = {0: pressure}
        self._strain_rate = strain_rate
        self._pressure = pressure
    # -------------------------------------------------------------------------
    def strain_rate(self, phase):
        """Get strain rate of given phase."""
        return torch.as_tensor(self._strain_rate[phase], dtype=torch.float64)
    # -------------------------------------------------------------------------
    def pressure(self, phase):
        """Get pressure of given phase."""
        return self._pressure[phase]
# =============================================================================
@pytest.fixture
def mohr_coulomb_parameters():
    """Mohr-Coulomb constitutive model parameters (no softening)."""
    model_parameters = {'density': 1800.0,
                        'youngs_modulus': 1.0e7,
                        'poisson_ratio': 0.3,
                        'friction': 30.0,
                        'dilation': 0.0,
                        'cohesion': 1000.0,
                        'residual_friction': 30.0,
                        'residual_dilation': 0.0,
                        'residual_cohesion': 1000.0,
                        'peak_epds': 0.0,
                        'crit_epds': 0.1,
                        'tension_cutoff': 0.0,
                        'porosity': 0.3}
    return model_parameters
# -----------------------------------------------------------------------------
@pytest.fixture
def softening_mohr_coulomb_parameters(mohr_coulomb_parameters):
    """Mohr-Coulomb constitutive model parameters with strain softening."""
    model_parameters = dict(mohr_coulomb_parameters)
    model_parameters.update({'dilation': 10.0,
                             'residual_friction': 20.0,
                             'residual_dilation': 0.0,
                             'residual_cohesion': 100.0,
                             'peak_epds': 0.01,
                             'crit_epds': 0.1})
    return model_parameters
# -----------------------------------------------------------------------------
@pytest.fixture
def bingham_parameters():
    """Bingham constitutive model parameters."""
    model_parameters = {'density': 1000.0,
                        'youngs_modulus': 1.0e6,
                        'poisson_ratio': 0.3,
                        'tau0': 10.0,
                        'mu': 0.5,
                        'critical_shear_rate': 1.0e-3}
    return model_parameters
# -----------------------------------------------------------------------------
@pytest.fixture
def material_point():
    """Material point collaborator factory."""
    return MaterialPoint
