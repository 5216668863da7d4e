"""Bingham viscoplastic constitutive model.

This module includes the implementation of the Bingham viscoplastic fluid
constitutive model. The stress is the superposition of the material point
pressure (obtained from the material point collaborator) and a viscous shear
stress computed from the material point strain rate. Below the critical shear
rate, or while the viscous shear stress remains below the yield stress, the
material behaves as a rigid solid and only the pressure contributes to the
stress.

Classes
-------
Bingham
    Bingham viscoplastic constitutive model.
"""
#
#                                                                       Modules
# =============================================================================
# Standard
import copy
import math
import warnings
# Third-party
import torch
# Local
from mpmtorch.material.models.interface import ConstitutiveModel, \
    ConfigurationError
from mpmtorch.material.models.elastic import get_bulk_shear_moduli, \
    get_elastic_stiffness_vmf
from mpmtorch.math.voigt_notation import get_problem_type_parameters, \
    check_voigt_vector, get_identity_voigt
#
#                                                          Authorship & Credits
# =============================================================================
__author__ = 'Bernardo Ferreira (bernardo_ferreira@brown.edu)'
__credits__ = ['Bernardo Ferreira', ]
__status__ = 'Stable'
# =============================================================================
#
# =============================================================================
class Bingham(ConstitutiveModel):
    """Bingham viscoplastic constitutive model.

    Attributes
    ----------
    _name : str
        Constitutive model name.
    _problem_type : int
        Problem type: 2D plane strain (1) and 3D (4).
    _n_dim : int
        Problem number of spatial dimensions.
    _comp_order_sym : tuple
        Strain/Stress components symmetric order.
    _model_parameters : dict
        Material constitutive model parameters.
    _elastic_stiffness_vmf : torch.Tensor(2d)
        Elastic stiffness stored in Voigt matricial form.
    _device_type : {'cpu', 'cuda'}
        Type of device on which torch.Tensor is allocated.
    _device : torch.device
        Device on which torch.Tensor is allocated.

    Methods
    -------
    get_required_model_parameters()
        Get required material constitutive model parameters.
    check_model_parameters(cls, model_parameters)
        Check material constitutive model parameters.
    is_collaborator_required(self)
        Check if state update requires the material point collaborator.
    state_init(self)
        Get initialized material constitutive model state variables.
    state_update(self, stress, inc_strain, state_variables_old, particle=None)
        Perform material constitutive model state update.
    compute_stress(self, stress, inc_strain, particle, phase=0)
        Compute updated stress.
    thermodynamic_pressure(self, volumetric_strain)
        Compute thermodynamic pressure.
    """
    def __init__(self, problem_type, model_parameters, device_type='cpu'):
        """Constitutive model constructor.

        Parameters
        ----------
        problem_type : int
            Problem type: 2D plane strain (1) and 3D (4).
        model_parameters : dict
            Material constitutive model parameters.
        device_type : {'cpu', 'cuda'}, default='cpu'
            Type of device on which torch.Tensor is allocated.
        """
        # Set material constitutive model name
        self._name = 'bingham'
        # Check material constitutive model parameters
        self.check_model_parameters(model_parameters)
        # Set initialization parameters
        self._problem_type = problem_type
        self._model_parameters = copy.deepcopy(model_parameters)
        # Set device
        self.set_device(device_type)
        # Get problem type parameters
        self._n_dim, self._comp_order_sym = \
            get_problem_type_parameters(problem_type)
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Compute bulk and shear modulus
        K, G = get_bulk_shear_moduli(model_parameters['youngs_modulus'],
                                     model_parameters['poisson_ratio'])
        self._model_parameters.update({'bulk_modulus': K, 'shear_modulus': G})
        # Compute elastic stiffness
        self._elastic_stiffness_vmf = get_elastic_stiffness_vmf(
            K, G, device=self._device)
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Check critical shear rate
        if model_parameters['critical_shear_rate'] < 1e-15:
            warnings.warn('Critical shear rate of Bingham constitutive model '
                          'is below 1e-15 and is raised to 1e-15 in each '
                          'stress computation.')
    # -------------------------------------------------------------------------
    @staticmethod
    def get_required_model_parameters():
        """Get required material constitutive model parameters.

        Model parameters:

        - 'density' : Material density;
        - 'youngs_modulus' : Young's modulus;
        - 'poisson_ratio' : Poisson ratio;
        - 'tau0' : Yield stress;
        - 'mu' : Plastic viscosity;
        - 'critical_shear_rate' : Shear rate below which the material
          behaves as a rigid solid.

        Returns
        -------
        model_parameters_names : tuple[str]
            Material constitutive model parameters names (str).
        """
        return ('density', 'youngs_modulus', 'poisson_ratio', 'tau0', 'mu',
                'critical_shear_rate')
    # -------------------------------------------------------------------------
    @classmethod
    def check_model_parameters(cls, model_parameters):
        """Check material constitutive model parameters.

        Parameters
        ----------
        model_parameters : dict
            Material constitutive model parameters.
        """
        # Check common material constitutive model parameters
        super().check_model_parameters(model_parameters)
        # Check non-negative parameters
        for name in ('tau0', 'mu'):
            if model_parameters[name] < 0.0:
                raise ConfigurationError(f'Material parameter \'{name}\' '
                                         f'must be non-negative.',
                                         parameters=(name,))
    # -------------------------------------------------------------------------
    def is_collaborator_required(self):
        """Check if state update requires the material point collaborator.

        Returns
        -------
        is_required : bool
            True if the state update requires the material point collaborator,
            False otherwise.
        """
        return True
    # -------------------------------------------------------------------------
    def state_init(self):
        """Get initialized material constitutive model state variables.

        Constitutive model state variables:

        * ``stress_vmf``

            * Cauchy stress tensor (Voigt matricial form).

        * ``shear_rate``

            * Equivalent shear rate.

        * ``apparent_viscosity``

            * Apparent viscosity.

        * ``is_yielded``

            * Flowing (yielded) state flag.

        ----

        Returns
        -------
        state_variables_init : dict
            Initialized material constitutive model state variables.
        """
        # Initialize constitutive model state variables
        state_variables_init = dict()
        state_variables_init['stress_vmf'] = \
            torch.zeros(6, dtype=torch.float64, device=self._device)
        state_variables_init['shear_rate'] = \
            torch.tensor(0.0, dtype=torch.float64, device=self._device)
        state_variables_init['apparent_viscosity'] = \
            torch.tensor(0.0, dtype=torch.float64, device=self._device)
        state_variables_init['is_yielded'] = False
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        return state_variables_init
    # -------------------------------------------------------------------------
    def state_update(self, stress, inc_strain, state_variables_old,
                     particle=None, phase=0):
        """Perform material constitutive model state update.

        Parameters
        ----------
        stress : torch.Tensor(1d)
            Stress tensor stored in Voigt matricial form.
        inc_strain : torch.Tensor(1d)
            Incremental strain tensor stored in Voigt matricial form.
        state_variables_old : dict
            Last converged material constitutive model state variables.
        particle : object, default=None
            Material point collaborator providing the strain rate and the
            pressure of a given phase.
        phase : int, default=0
            Material point phase.

        Returns
        -------
        state_variables : dict
            Material constitutive model state variables.
        """
        # Perform state update
        su_results = self._state_update(stress, inc_strain, particle, phase)
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Store updated state variables
        state_variables = self.state_init()
        for key in state_variables.keys():
            state_variables[key] = su_results[key]
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        return state_variables
    # -------------------------------------------------------------------------
    def compute_stress(self, stress, inc_strain, particle, phase=0):
        """Compute updated stress.

        Parameters
        ----------
        stress : torch.Tensor(1d)
            Stress tensor stored in Voigt matricial form (unused).
        inc_strain : torch.Tensor(1d)
            Incremental strain tensor stored in Voigt matricial form (unused).
        particle : object
            Material point collaborator providing the strain rate and the
            pressure of a given phase.
        phase : int, default=0
            Material point phase.

        Returns
        -------
        updated_stress : torch.Tensor(1d)
            Updated stress tensor stored in Voigt matricial form.
        """
        return self._state_update(stress, inc_strain, particle,
                                  phase)['stress_vmf']
    # -------------------------------------------------------------------------
    def thermodynamic_pressure(self, volumetric_strain):
        """Compute thermodynamic pressure.

        Parameters
        ----------
        volumetric_strain : float
            Volumetric strain.

        Returns
        -------
        pressure : float
            Thermodynamic pressure (positive in compression).
        """
        return -self._model_parameters['bulk_modulus']*volumetric_strain
    # -------------------------------------------------------------------------
    def _state_update(self, stress, inc_strain, particle, phase):
        """Compute viscoplastic stress from material point strain rate.

        Parameters
        ----------
        stress : torch.Tensor(1d)
            Stress tensor stored in Voigt matricial form.
        inc_strain : torch.Tensor(1d)
            Incremental strain tensor stored in Voigt matricial form.
        particle : object
            Material point collaborator.
        phase : int
            Material point phase.

        Returns
        -------
        su_results : dict
            State update results: updated stress ('stress_vmf'), shear rate
            ('shear_rate'), apparent viscosity ('apparent_viscosity') and
            flowing state flag ('is_yielded').
        """
        # Check material point collaborator
        if particle is None:
            raise RuntimeError('Bingham constitutive model requires the '
                               'material point collaborator to compute the '
                               'stress.')
        # Check input tensors
        check_voigt_vector(stress, name='Stress')
        check_voigt_vector(inc_strain, name='Incremental strain')
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Get material properties
        tau0 = self._model_parameters['tau0']
        mu = self._model_parameters['mu']
        critical_shear_rate = \
            max(self._model_parameters['critical_shear_rate'], 1e-15)
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Get material point strain rate
        strain_rate = torch.as_tensor(particle.strain_rate(phase),
                                      dtype=torch.float64,
                                      device=self._device).clone()
        check_voigt_vector(strain_rate, name='Strain rate')
        # Double shear components of strain rate
        strain_rate[3:] = 2.0*strain_rate[3:]
        # Compute shear rate
        shear_rate = torch.sqrt(2.0*(torch.dot(strain_rate, strain_rate)
                                     + torch.dot(strain_rate[3:],
                                                 strain_rate[3:])))
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Compute apparent viscosity
        apparent_viscosity = torch.tensor(0.0, dtype=torch.float64,
                                          device=self._device)
        if shear_rate**2 > critical_shear_rate**2:
            apparent_viscosity = 2.0*(tau0/shear_rate + mu)
        # Compute viscous shear stress
        tau = apparent_viscosity*strain_rate
        # Check von Mises yield criterion
        is_yielded = bool(apparent_viscosity > 0.0)
        if 0.5*torch.dot(tau[:3], tau[:3]) < tau0**2:
            tau = torch.zeros_like(tau)
            is_yielded = False
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Get material point pressure
        pressure = particle.pressure(phase)
        if not math.isfinite(float(pressure)):
            raise RuntimeError(f'Material point pressure must be finite but '
                               f'got {pressure}.')
        # Compute updated stress
        updated_stress = -pressure*get_identity_voigt(
            self._n_dim, device=self._device) + tau
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Store state update results
        su_results = {'stress_vmf': updated_stress,
                      'shear_rate': shear_rate,
                      'apparent_viscosity': apparent_viscosity,
                      'is_yielded': is_yielded}
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        return su_results
