"""MPMTorch: Material constitutive model interface.

This module includes the interface to implement a material constitutive model
called once per material point and time step.

Classes
-------
ConfigurationError
    Invalid or missing material constitutive model parameters.
ConstitutiveModel
    Material constitutive model interface.
"""
#
#                                                                       Modules
# =============================================================================
# Standard
from abc import ABC, abstractmethod
import copy
import math
import numbers
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
class ConfigurationError(RuntimeError):
    """Invalid or missing material constitutive model parameters.

    Attributes
    ----------
    parameters : tuple[str]
        Names of the offending material constitutive model parameters.
    """
    def __init__(self, message, parameters=()):
        """Constructor.

        Parameters
        ----------
        message : str
            Error message.
        parameters : tuple[str], default=()
            Names of the offending material constitutive model parameters.
        """
        super().__init__(message)
        self.parameters = tuple(parameters)
# =============================================================================
class ConstitutiveModel(ABC):
    """Material constitutive model interface.

    Material constitutive model parameters and the elastic stiffness are set
    once at construction and are never mutated afterwards, such that a single
    model instance can be shared (read-only) by every material point of the
    associated material.

    Attributes
    ----------
    _name : str
        Material constitutive model name.
    _problem_type : int
        Problem type: 2D plane strain (1) and 3D (4).
    _n_dim : int
        Problem number of spatial dimensions.
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
    state_init(self)
        Get initialized material constitutive model state variables.
    state_update(self, stress, inc_strain, state_variables_old, particle=None)
        Perform material constitutive model state update.
    compute_stress(self, stress, inc_strain, *args, **kwargs)
        Compute updated stress.
    is_collaborator_required(self)
        Check if state update requires the material point collaborator.
    get_name(self)
        Get material constitutive model name.
    get_model_parameters(self)
        Get material constitutive model parameters.
    get_density(self)
        Get material density.
    get_elastic_stiffness(self)
        Get elastic stiffness stored in Voigt matricial form.
    get_sound_speed(self)
        Get material elastic P-wave speed.
    set_device(self, device_type)
        Set device on which torch.Tensor is allocated.
    get_device(self)
        Get device on which torch.Tensor is allocated.
    """
    @abstractmethod
    def __init__(self, problem_type, model_parameters, device_type='cpu'):
        """Constructor.

        Parameters
        ----------
        problem_type : int
            Problem type: 2D plane strain (1) and 3D (4).
        model_parameters : dict
            Material constitutive model parameters.
        device_type : {'cpu', 'cuda'}, default='cpu'
            Type of device on which torch.Tensor is allocated.
        """
        pass
    # -------------------------------------------------------------------------
    @staticmethod
    @abstractmethod
    def get_required_model_parameters():
        """Get required material constitutive model parameters.

        Returns
        -------
        model_parameters_names : tuple[str]
            Material constitutive model parameters names (str).
        """
        pass
    # -------------------------------------------------------------------------
    @classmethod
    def check_model_parameters(cls, model_parameters):
        """Check material constitutive model parameters.

        All the required parameters must be available and be real-valued
        scalars. Common elastic parameters are also checked for physical
        admissibility.

        Parameters
        ----------
        model_parameters : dict
            Material constitutive model parameters.
        """
        # Check material constitutive model parameters container
        if not isinstance(model_parameters, dict):
            raise ConfigurationError('Material constitutive model parameters '
                                     'must be provided as a dict.')
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Get required material constitutive model parameters
        required_parameters = cls.get_required_model_parameters()
        # Check missing parameters
        missing = tuple(x for x in required_parameters
                        if x not in model_parameters.keys())
        if missing:
            raise ConfigurationError(
                f'Missing required material parameter(s) of '
                f'{cls.__name__} constitutive model: {", ".join(missing)}.',
                parameters=missing)
        # Check parameters type
        invalid = tuple(x for x in required_parameters
                        if isinstance(model_parameters[x], bool)
                        or not isinstance(model_parameters[x], numbers.Real)
                        or not math.isfinite(model_parameters[x]))
        if invalid:
            raise ConfigurationError(
                f'Material parameter(s) of {cls.__name__} constitutive '
                f'model must be finite real scalars: {", ".join(invalid)}.',
                parameters=invalid)
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Check elastic parameters
        if model_parameters['density'] < 0.0:
            raise ConfigurationError('Material density must be '
                                     'non-negative.', parameters=('density',))
        if model_parameters['youngs_modulus'] <= 0.0:
            raise ConfigurationError('Young\'s modulus must be positive.',
                                     parameters=('youngs_modulus',))
        if not -1.0 < model_parameters['poisson_ratio'] < 0.5:
            raise ConfigurationError('Poisson ratio must lie in the open '
                                     'interval (-1, 0.5).',
                                     parameters=('poisson_ratio',))
    # -------------------------------------------------------------------------
    @abstractmethod
    def state_init(self):
        """Get initialized material constitutive model state variables.

        Returns
        -------
        state_variables_init : dict
            Initialized material constitutive model state variables.
        """
        pass
    # -------------------------------------------------------------------------
    @abstractmethod
    def state_update(self, stress, inc_strain, state_variables_old,
                     particle=None):
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
            Material point collaborator.

        Returns
        -------
        state_variables : dict
            Material constitutive model state variables.
        """
        pass
    # -------------------------------------------------------------------------
    @abstractmethod
    def compute_stress(self, stress, inc_strain, *args, **kwargs):
        """Compute updated stress.

        Parameters
        ----------
        stress : torch.Tensor(1d)
            Stress tensor stored in Voigt matricial form.
        inc_strain : torch.Tensor(1d)
            Incremental strain tensor stored in Voigt matricial form.

        Returns
        -------
        updated_stress : torch.Tensor(1d)
            Updated stress tensor stored in Voigt matricial form.
        """
        pass
    # -------------------------------------------------------------------------
    def is_collaborator_required(self):
        """Check if state update requires the material point collaborator.

        Returns
        -------
        is_required : bool
            True if the state update requires the material point collaborator,
            False otherwise.
        """
        return False
    # -------------------------------------------------------------------------
    def get_name(self):
        """Get material constitutive model name.

        Returns
        -------
        name : str
            Material constitutive model name.
        """
        return self._name
    # -------------------------------------------------------------------------
    def get_problem_type(self):
        """Get problem type.

        Returns
        -------
        problem_type : int
            Problem type: 2D plane strain (1) and 3D (4).
        """
        return self._problem_type
    # -------------------------------------------------------------------------
    def get_model_parameters(self):
        """Get material constitutive model parameters.

        Returns
        -------
        model_parameters : dict
            Material constitutive model parameters.
        """
        return copy.deepcopy(self._model_parameters)
    # -------------------------------------------------------------------------
    def get_density(self):
        """Get material density.

        Returns
        -------
        density : float
            Material density.
        """
        return self._model_parameters['density']
    # -------------------------------------------------------------------------
    def get_elastic_stiffness(self):
        """Get elastic stiffness stored in Voigt matricial form.

        Returns
        -------
        elastic_stiffness_vmf : torch.Tensor(2d)
            Elastic stiffness stored in Voigt matricial form (copy).
        """
        return self._elastic_stiffness_vmf.clone()
    # -------------------------------------------------------------------------
    def get_sound_speed(self):
        """Get material elastic P-wave speed.

        Returns
        -------
        sound_speed : float
            Material elastic P-wave speed. Null if material density is null.
        """
        # Get material properties
        density = self._model_parameters['density']
        E = self._model_parameters['youngs_modulus']
        v = self._model_parameters['poisson_ratio']
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Compute elastic P-wave speed
        sound_speed = 0.0
        if density > 0.0:
            sound_speed = math.sqrt(E*(1.0 - v)
                                    / ((1.0 + v)*(1.0 - 2.0*v)*density))
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        return sound_speed
    # -------------------------------------------------------------------------
    def set_device(self, device_type):
        """Set device on which torch.Tensor is allocated.

        Parameters
        ----------
        device_type : {'cpu', 'cuda'}
            Type of device on which torch.Tensor is allocated.
        """
        if device_type in ('cpu', 'cuda'):
            if device_type == 'cuda' and not torch.cuda.is_available():
                raise RuntimeError('PyTorch with CUDA is not available. '
                                   'Please set the model device type as CPU '
                                   'as:\n\n' + 'model.set_device(\'cpu\').')
            self._device_type = device_type
            self._device = torch.device(device_type)
        else:
            raise RuntimeError('Invalid device type.')
    # -------------------------------------------------------------------------
    def get_device(self):
        """Get device on which torch.Tensor is allocated.

        Returns
        -------
        device_type : {'cpu', 'cuda'}
            Type of device on which torch.Tensor is allocated.
        device : torch.device
            Device on which torch.Tensor is allocated.
        """
        return self._device_type, self._device
