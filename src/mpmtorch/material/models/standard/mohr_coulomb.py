"""Mohr-Coulomb elasto-plastic constitutive model with strain softening.

This module includes the implementation of the Mohr-Coulomb constitutive model
with non-associative plastic flow rule and strain softening of the friction
angle, dilation angle and cohesion.

The yield surface is the Mohr-Coulomb surface expressed in terms of the
Haigh-Westergaard stress invariants. The plastic potential is the hyperbolic
Mohr-Coulomb surface rounded in the deviatoric plane through the Willam-Warnke
elliptic function, which removes the corner singularities of the flow
direction.

The state update follows a single-step explicit elastic-predictor /
plastic-corrector scheme: the plastic multiplier is computed either at the
last converged stress (if it is already yielding) or at the elastic trial
stress, and the plastic correction is always applied along the flow direction
evaluated at the last converged stress. No local iterations are performed
such that consistency at the yield surface is only approximately enforced.

Classes
-------
MohrCoulomb
    Mohr-Coulomb constitutive model with strain softening.
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
    get_elastic_stiffness_vmf, get_elastic_compliance_vmf
from mpmtorch.material.models.standard.softening import get_softening_law
from mpmtorch.math.invariants import get_stress_invariants, \
    get_equivalent_dev_strain
from mpmtorch.math.voigt_notation import get_problem_type_parameters, \
    check_voigt_vector, zero_out_of_plane
#
#                                                          Authorship & Credits
# =============================================================================
__author__ = 'Bernardo Ferreira (bernardo_ferreira@brown.edu)'
__credits__ = ['Bernardo Ferreira', ]
__status__ = 'Stable'
# =============================================================================
#
# =============================================================================
class MohrCoulomb(ConstitutiveModel):
    """Mohr-Coulomb constitutive model with strain softening.

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
    _softening_law : function
        Strain softening law.
    _softening_parameters : dict
        Strain softening law parameters.
    _is_epds_accumulated : bool
        If True, then the accumulated plastic deviatoric strain stored in the
        material point state variables is updated in each state update.
    _elastic_stiffness_vmf : torch.Tensor(2d)
        Elastic stiffness stored in Voigt matricial form.
    _elastic_compliance_vmf : torch.Tensor(2d)
        Elastic compliance stored in Voigt matricial form.
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
    compute_stress(self, stress, inc_strain, epds=0.0)
        Compute updated stress.
    get_plastic_state(self, epds)
        Get current strength parameters.
    compute_yield_function(self, invariants, plastic_state)
        Compute yield function.
    compute_plastic_potential(self, invariants, plastic_state)
        Compute plastic potential.
    compute_flow_gradients(self, invariants, plastic_state)
        Compute yield function and plastic potential stress gradients.
    """
    def __init__(self, problem_type, model_parameters, device_type='cpu',
                 is_epds_accumulated=False):
        """Constitutive model constructor.

        Parameters
        ----------
        problem_type : int
            Problem type: 2D plane strain (1) and 3D (4).
        model_parameters : dict
            Material constitutive model parameters.
        device_type : {'cpu', 'cuda'}, default='cpu'
            Type of device on which torch.Tensor is allocated.
        is_epds_accumulated : bool, default=False
            If True, then the accumulated plastic deviatoric strain stored in
            the material point state variables is updated in each state
            update. If False, then it is passed through unchanged.
        """
        # Set material constitutive model name
        self._name = 'mohr_coulomb'
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Check material constitutive model parameters
        self.check_model_parameters(model_parameters)
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Set initialization parameters
        self._problem_type = problem_type
        self._model_parameters = copy.deepcopy(model_parameters)
        self._is_epds_accumulated = bool(is_epds_accumulated)
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Set device
        self.set_device(device_type)
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Get problem type parameters
        self._n_dim, self._comp_order_sym = \
            get_problem_type_parameters(problem_type)
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Get material properties
        E = model_parameters['youngs_modulus']
        v = model_parameters['poisson_ratio']
        # Compute bulk and shear modulus
        K, G = get_bulk_shear_moduli(E, v)
        self._model_parameters.update({'bulk_modulus': K, 'shear_modulus': G})
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Compute elastic stiffness and compliance
        self._elastic_stiffness_vmf = get_elastic_stiffness_vmf(
            K, G, device=self._device)
        self._elastic_compliance_vmf = get_elastic_compliance_vmf(
            K, G, device=self._device)
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Set strain softening law
        self._softening_law = get_softening_law('linear')
        # Set strain softening law parameters (angles in radians)
        peak = (math.radians(model_parameters['friction']),
                math.radians(model_parameters['dilation']),
                model_parameters['cohesion'])
        residual = (math.radians(model_parameters['residual_friction']),
                    math.radians(model_parameters['residual_dilation']),
                    model_parameters['residual_cohesion'])
        self._softening_parameters = \
            {'peak': peak, 'residual': residual,
             'peak_epds': model_parameters['peak_epds'],
             'crit_epds': model_parameters['crit_epds']}
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Check strain softening parameters consistency
        if any(r > p for p, r in zip(peak, residual)):
            warnings.warn('Residual strength parameters of Mohr-Coulomb '
                          'constitutive model exceed the peak values. The '
                          'strain softening law will increase the material '
                          'strength.')
        if model_parameters['crit_epds'] <= model_parameters['peak_epds']:
            warnings.warn('Critical accumulated plastic deviatoric strain of '
                          'Mohr-Coulomb constitutive model does not exceed '
                          'the peak accumulated plastic deviatoric strain. '
                          'Strain softening is not active.')
    # -------------------------------------------------------------------------
    @staticmethod
    def get_required_model_parameters():
        """Get required material constitutive model parameters.

        Model parameters:

        - 'density' : Material density;
        - 'youngs_modulus' : Young's modulus;
        - 'poisson_ratio' : Poisson ratio;
        - 'friction' : Peak friction angle (degrees);
        - 'dilation' : Peak dilation angle (degrees);
        - 'cohesion' : Peak cohesion;
        - 'residual_friction' : Residual friction angle (degrees);
        - 'residual_dilation' : Residual dilation angle (degrees);
        - 'residual_cohesion' : Residual cohesion;
        - 'peak_epds' : Accumulated plastic deviatoric strain at which
          softening starts;
        - 'crit_epds' : Accumulated plastic deviatoric strain at which the
          residual state is attained;
        - 'tension_cutoff' : Tension cutoff;
        - 'porosity' : Porosity.

        Returns
        -------
        model_parameters_names : tuple[str]
            Material constitutive model parameters names (str).
        """
        # Set material properties names
        model_parameters_names = ('density', 'youngs_modulus',
                                  'poisson_ratio', 'friction', 'dilation',
                                  'cohesion', 'residual_friction',
                                  'residual_dilation', 'residual_cohesion',
                                  'peak_epds', 'crit_epds', 'tension_cutoff',
                                  'porosity')
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        return model_parameters_names
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
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Check friction angles
        for name in ('friction', 'residual_friction'):
            if not 0.0 <= model_parameters[name] < 90.0:
                raise ConfigurationError(f'Friction angle \'{name}\' must '
                                         f'lie in the interval [0, 90) '
                                         f'degrees.', parameters=(name,))
        # Check dilation angles
        for name in ('dilation', 'residual_dilation'):
            if not -90.0 < model_parameters[name] < 90.0:
                raise ConfigurationError(f'Dilation angle \'{name}\' must '
                                         f'lie in the interval (-90, 90) '
                                         f'degrees.', parameters=(name,))
        # Check non-negative parameters
        for name in ('cohesion', 'residual_cohesion', 'peak_epds',
                     'crit_epds', 'tension_cutoff'):
            if model_parameters[name] < 0.0:
                raise ConfigurationError(f'Material parameter \'{name}\' '
                                         f'must be non-negative.',
                                         parameters=(name,))
        # Check porosity
        if not 0.0 <= model_parameters['porosity'] < 1.0:
            raise ConfigurationError('Porosity must lie in the interval '
                                     '[0, 1).', parameters=('porosity',))
    # -------------------------------------------------------------------------
    def state_init(self):
        """Get initialized material constitutive model state variables.

        Constitutive model state variables:

        * ``stress_vmf``

            * Cauchy stress tensor (Voigt matricial form).

            * *Symbol*: :math:`\\boldsymbol{\\sigma}`

        * ``inc_p_strain_vmf``

            * Incremental plastic strain tensor (Voigt matricial form).

            * *Symbol*: :math:`\\Delta \\boldsymbol{\\varepsilon}^{p}`

        * ``epds``

            * Accumulated equivalent plastic deviatoric strain.

            * *Symbol*: :math:`\\bar{\\varepsilon}^{p}_{d}`

        * ``p_multiplier``

            * Plastic multiplier.

            * *Symbol*: :math:`\\Delta \\lambda`

        * ``is_plast``

            * Plastic step flag.

        ----

        Returns
        -------
        state_variables_init : dict
            Initialized material constitutive model state variables.
        """
        # Initialize constitutive model state variables
        state_variables_init = dict()
        # Initialize stress and strain tensors
        state_variables_init['stress_vmf'] = \
            torch.zeros(6, dtype=torch.float64, device=self._device)
        state_variables_init['inc_p_strain_vmf'] = \
            torch.zeros(6, dtype=torch.float64, device=self._device)
        # Initialize internal variables
        state_variables_init['epds'] = \
            torch.tensor(0.0, dtype=torch.float64, device=self._device)
        state_variables_init['p_multiplier'] = \
            torch.tensor(0.0, dtype=torch.float64, device=self._device)
        # Initialize state flags
        state_variables_init['is_plast'] = False
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        return state_variables_init
    # -------------------------------------------------------------------------
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
            Material point collaborator (unused).

        Returns
        -------
        state_variables : dict
            Material constitutive model state variables.
        """
        # Get last converged accumulated plastic deviatoric strain
        epds_old = state_variables_old['epds']
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Perform state update
        su_results = self._state_update(stress, inc_strain, epds_old)
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Update accumulated plastic deviatoric strain
        epds = torch.as_tensor(epds_old, dtype=torch.float64,
                               device=self._device).clone()
        if self._is_epds_accumulated:
            # Compute plastic strain increment from plastic flow rule
            flow_p_strain_vmf = su_results['p_multiplier'] \
                * su_results['dp_dsigma']
            epds = epds + get_equivalent_dev_strain(flow_p_strain_vmf)
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Initialize state variables dictionary
        state_variables = self.state_init()
        # Store updated state variables
        state_variables['stress_vmf'] = su_results['stress_vmf']
        state_variables['inc_p_strain_vmf'] = su_results['inc_p_strain_vmf']
        state_variables['epds'] = epds
        state_variables['p_multiplier'] = su_results['p_multiplier']
        state_variables['is_plast'] = su_results['is_plast']
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        return state_variables
    # -------------------------------------------------------------------------
    def compute_stress(self, stress, inc_strain, epds=0.0):
        """Compute updated stress.

        Parameters
        ----------
        stress : torch.Tensor(1d)
            Stress tensor stored in Voigt matricial form.
        inc_strain : torch.Tensor(1d)
            Incremental strain tensor stored in Voigt matricial form.
        epds : float, default=0.0
            Accumulated equivalent plastic deviatoric strain.

        Returns
        -------
        updated_stress : torch.Tensor(1d)
            Updated stress tensor stored in Voigt matricial form.
        """
        return self._state_update(stress, inc_strain, epds)['stress_vmf']
    # -------------------------------------------------------------------------
    def get_plastic_state(self, epds):
        """Get current strength parameters.

        Parameters
        ----------
        epds : float
            Accumulated equivalent plastic deviatoric strain.

        Returns
        -------
        plastic_state : dict
            Current friction angle ('phi', radians), dilation angle ('psi',
            radians) and cohesion ('cohesion').
        """
        # Compute current strength parameters
        phi, psi, cohesion = \
            self._softening_law(self._softening_parameters, epds)
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        return {'phi': phi, 'psi': psi, 'cohesion': cohesion}
    # -------------------------------------------------------------------------
    def compute_yield_function(self, invariants, plastic_state):
        """Compute yield function.

        .. math::

           F = \\sqrt{\\frac{3}{2}} \\rho \\left[
           \\frac{\\sin(\\theta + \\pi/3)}{\\sqrt{3} \\cos \\phi}
           + \\frac{\\cos(\\theta + \\pi/3) \\tan \\phi}{3} \\right]
           + \\frac{\\xi}{3} \\tan \\phi - c

        Parameters
        ----------
        invariants : dict
            Stress invariants.
        plastic_state : dict
            Current strength parameters.

        Returns
        -------
        yield_function : torch.Tensor(0d)
            Yield function value.
        """
        # Get current strength parameters
        phi = plastic_state['phi']
        cohesion = plastic_state['cohesion']
        # Get stress invariants
        rho = invariants['rho']
        theta = invariants['theta']
        epsilon = invariants['epsilon']
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Compute yield function
        yield_function = math.sqrt(1.5)*rho*(
            torch.sin(theta + math.pi/3.0)/(math.sqrt(3.0)*math.cos(phi))
            + torch.cos(theta + math.pi/3.0)*math.tan(phi)/3.0) \
            + (epsilon/3.0)*math.tan(phi) - cohesion
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        return yield_function
    # -------------------------------------------------------------------------
    def compute_plastic_potential(self, invariants, plastic_state):
        """Compute plastic potential.

        .. math::

           P = \\sqrt{(\\chi \\, c \\tan \\psi)^{2}
           + \\left(R_{mw} \\sqrt{\\frac{3}{2}} \\rho \\right)^{2}}
           + \\frac{\\xi}{\\sqrt{3}} \\tan \\psi

        where :math:`\\chi = 0.1` is the hyperbola eccentricity and
        :math:`R_{mw}` is the Willam-Warnke deviatoric shape factor.

        Parameters
        ----------
        invariants : dict
            Stress invariants.
        plastic_state : dict
            Current strength parameters.

        Returns
        -------
        plastic_potential : torch.Tensor(0d)
            Plastic potential value.
        """
        # Compute deviatoric shape factor
        r_mw, _ = self._get_deviatoric_shape_factor(invariants, plastic_state)
        # Compute hyperbolic term
        omega = self._get_hyperbolic_term(invariants, plastic_state, r_mw)
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Compute plastic potential
        plastic_potential = torch.sqrt(omega) \
            + invariants['epsilon']*math.tan(plastic_state['psi']) \
            / math.sqrt(3.0)
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        return plastic_potential
    # -------------------------------------------------------------------------
    def compute_flow_gradients(self, invariants, plastic_state):
        """Compute yield function and plastic potential stress gradients.

        Both gradients are computed by chain rule through the hydrostatic
        coordinate, the deviatoric radius and the Lode angle. Out-of-plane
        shear components are null in 2D problems.

        Parameters
        ----------
        invariants : dict
            Stress invariants.
        plastic_state : dict
            Current strength parameters.

        Returns
        -------
        df_dsigma : torch.Tensor(1d)
            Yield function stress gradient (Voigt matricial form).
        dp_dsigma : torch.Tensor(1d)
            Plastic potential stress gradient (Voigt matricial form).
        softening : float
            Strain softening contribution to the plastic multiplier
            denominator.
        """
        # Get current strength parameters
        phi = plastic_state['phi']
        psi = plastic_state['psi']
        # Get stress invariants
        rho = invariants['rho']
        theta = invariants['theta']
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Compute stress invariants gradients
        depsilon_dsigma, drho_dsigma, dtheta_dsigma = \
            self._get_invariants_gradients(invariants)
        #
        #                                               Yield function gradient
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Compute yield function derivatives w.r.t. stress invariants
        df_depsilon = math.tan(phi)/3.0
        df_drho = math.sqrt(1.5)*(
            torch.sin(theta + math.pi/3.0)/(math.sqrt(3.0)*math.cos(phi))
            + torch.cos(theta + math.pi/3.0)*math.tan(phi)/3.0)
        df_dtheta = math.sqrt(1.5)*rho*(
            torch.cos(theta + math.pi/3.0)/(math.sqrt(3.0)*math.cos(phi))
            - torch.sin(theta + math.pi/3.0)*math.tan(phi)/3.0)
        # Compute yield function stress gradient
        df_dsigma = df_depsilon*depsilon_dsigma + df_drho*drho_dsigma \
            + df_dtheta*dtheta_dsigma
        df_dsigma = zero_out_of_plane(df_dsigma, self._n_dim)
        #
        #                                           Plastic potential gradient
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Compute deviatoric shape factor and Lode angle derivative
        r_mw, dr_mw_dtheta = \
            self._get_deviatoric_shape_factor(invariants, plastic_state)
        # Compute hyperbolic term
        omega = self._get_hyperbolic_term(invariants, plastic_state, r_mw)
        # Compute plastic potential derivatives w.r.t. stress invariants
        dp_depsilon = math.tan(psi)/math.sqrt(3.0)
        dp_drho = 3.0*rho*r_mw**2/(2.0*torch.sqrt(omega))
        dp_dtheta = 3.0*rho**2*r_mw*dr_mw_dtheta/(2.0*torch.sqrt(omega))
        # Compute plastic potential stress gradient
        dp_dsigma = dp_depsilon*depsilon_dsigma + dp_drho*drho_dsigma \
            + dp_dtheta*dtheta_dsigma
        dp_dsigma = zero_out_of_plane(dp_dsigma, self._n_dim)
        #
        #                                                  Softening coupling
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Set strain softening contribution (yield surface shrinkage coupling
        # with plastic flow is not accounted for)
        softening = 0.0
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        return df_dsigma, dp_dsigma, softening
    # -------------------------------------------------------------------------
    def _get_invariants_gradients(self, invariants):
        """Compute stress invariants stress gradients.

        Parameters
        ----------
        invariants : dict
            Stress invariants.

        Returns
        -------
        depsilon_dsigma : torch.Tensor(1d)
            Hydrostatic coordinate stress gradient.
        drho_dsigma : torch.Tensor(1d)
            Deviatoric radius stress gradient.
        dtheta_dsigma : torch.Tensor(1d)
            Lode angle stress gradient.
        """
        # Get stress invariants
        dev_stress = invariants['dev_stress']
        j2 = invariants['j2']
        j3 = invariants['j3']
        rho = invariants['rho']
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Compute hydrostatic coordinate stress gradient
        depsilon_dsigma = torch.zeros_like(dev_stress)
        depsilon_dsigma[:3] = 1.0/math.sqrt(3.0)
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Compute deviatoric radius stress gradient
        multiplier = 1.0
        if torch.abs(rho) > 0.0:
            multiplier = 1.0/rho
        drho_dsigma = zero_out_of_plane(multiplier*dev_stress, self._n_dim)
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Compute Lode parameter
        is_j2_null = bool(torch.abs(j2) < 1e-22)
        r_val = 0.0
        if not is_j2_null:
            r_val = (3.0*math.sqrt(3.0)/2.0)*(j3/j2**1.5)
        # Compute Lode angle derivative w.r.t. Lode parameter
        divider = 1.0 - r_val**2
        if divider <= 0.0:
            divider = 0.001
        dtheta_dr = -1.0/(3.0*math.sqrt(divider))
        # Compute Lode parameter derivatives w.r.t. deviatoric invariants
        dr_dj2 = (-9.0*math.sqrt(3.0)/4.0)*j3
        dr_dj3 = 1.5*math.sqrt(3.0)
        if not is_j2_null:
            dr_dj2 = dr_dj2/j2**2.5
            dr_dj3 = dr_dj3/j2**1.5
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Compute second deviatoric invariant stress gradient
        dj2_dsigma = dev_stress
        # Build deviatoric stress tensor rows
        dev1 = dev_stress[[0, 3, 5]]
        dev2 = dev_stress[[3, 1, 4]]
        dev3 = dev_stress[[5, 4, 2]]
        # Compute third deviatoric invariant stress gradient
        dj3_dsigma = torch.stack(
            (torch.dot(dev1, dev1) - (2.0/3.0)*j2,
             torch.dot(dev2, dev2) - (2.0/3.0)*j2,
             torch.dot(dev3, dev3) - (2.0/3.0)*j2,
             torch.dot(dev1, dev2),
             torch.dot(dev2, dev3),
             torch.dot(dev1, dev3)))
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Compute Lode angle stress gradient
        dtheta_dsigma = dtheta_dr*(dr_dj2*dj2_dsigma + dr_dj3*dj3_dsigma)
        dtheta_dsigma = zero_out_of_plane(dtheta_dsigma, self._n_dim)
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        return depsilon_dsigma, drho_dsigma, dtheta_dsigma
    # -------------------------------------------------------------------------
    @staticmethod
    def _get_deviatoric_shape_factor(invariants, plastic_state):
        """Compute Willam-Warnke deviatoric shape factor.

        Parameters
        ----------
        invariants : dict
            Stress invariants.
        plastic_state : dict
            Current strength parameters.

        Returns
        -------
        r_mw : torch.Tensor(0d)
            Willam-Warnke deviatoric shape factor.
        dr_mw_dtheta : torch.Tensor(0d)
            Willam-Warnke deviatoric shape factor derivative w.r.t. Lode
            angle.
        """
        # Get current friction angle
        phi = plastic_state['phi']
        # Get Lode angle
        theta = invariants['theta']
        cos_theta = torch.cos(theta)
        sin_theta = torch.sin(theta)
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Compute Mohr-Coulomb deviatoric radius factor
        r_mc = (3.0 - math.sin(phi))/(6.0*math.cos(phi))
        # Compute deviatoric eccentricity
        e_val = (3.0 - math.sin(phi))/(3.0 + math.sin(phi))
        e_val = min(max(e_val, 0.501), 1.0)
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Compute elliptic function radicand
        sqpart = 4.0*(1.0 - e_val**2)*cos_theta**2 + 5.0*e_val**2 \
            - 4.0*e_val
        if sqpart < 0.0:
            sqpart = torch.full_like(sqpart, 1e-5)
        # Compute elliptic function denominator
        m = 2.0*(1.0 - e_val**2)*cos_theta \
            + (2.0*e_val - 1.0)*torch.sqrt(sqpart)
        if torch.abs(m) < 1e-22:
            m = torch.full_like(m, 0.001)
        # Compute elliptic function numerator
        l = 4.0*(1.0 - e_val**2)*cos_theta**2 + (2.0*e_val - 1.0)**2
        # Compute deviatoric shape factor
        r_mw = (l/m)*r_mc
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Compute elliptic function derivatives w.r.t. Lode angle
        dl_dtheta = -8.0*(1.0 - e_val**2)*cos_theta*sin_theta
        dm_dtheta = -2.0*(1.0 - e_val**2)*sin_theta \
            + 0.5*(2.0*e_val - 1.0)*dl_dtheta/torch.sqrt(sqpart)
        # Compute deviatoric shape factor derivative w.r.t. Lode angle
        dr_mw_dtheta = r_mc*(m*dl_dtheta - l*dm_dtheta)/m**2
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        return r_mw, dr_mw_dtheta
    # -------------------------------------------------------------------------
    @staticmethod
    def _get_hyperbolic_term(invariants, plastic_state, r_mw):
        """Compute plastic potential hyperbolic term.

        Parameters
        ----------
        invariants : dict
            Stress invariants.
        plastic_state : dict
            Current strength parameters.
        r_mw : torch.Tensor(0d)
            Willam-Warnke deviatoric shape factor.

        Returns
        -------
        omega : torch.Tensor(0d)
            Plastic potential hyperbolic term blending the cohesion and shear
            contributions.
        """
        # Set hyperbola eccentricity
        xi = 0.1
        # Get current dilation angle and cohesion
        psi = plastic_state['psi']
        cohesion = plastic_state['cohesion']
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Compute hyperbolic term
        omega = (xi*cohesion*math.tan(psi))**2 \
            + (r_mw*math.sqrt(1.5)*invariants['rho'])**2
        if omega < 1e-22:
            omega = torch.full_like(omega, 0.001)
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        return omega
    # -------------------------------------------------------------------------
    def _state_update(self, stress, inc_strain, epds):
        """Perform elastic-predictor / plastic-corrector stress update.

        Parameters
        ----------
        stress : torch.Tensor(1d)
            Stress tensor stored in Voigt matricial form.
        inc_strain : torch.Tensor(1d)
            Incremental strain tensor stored in Voigt matricial form.
        epds : float
            Accumulated equivalent plastic deviatoric strain.

        Returns
        -------
        su_results : dict
            State update results: updated stress ('stress_vmf'), incremental
            plastic strain ('inc_p_strain_vmf'), plastic multiplier
            ('p_multiplier'), plastic step flag ('is_plast') and plastic
            potential stress gradient at the last converged stress
            ('dp_dsigma').
        """
        # Check input tensors
        check_voigt_vector(stress, name='Stress')
        check_voigt_vector(inc_strain, name='Incremental strain')
        # Set input tensors data type and device
        stress = stress.to(dtype=torch.float64, device=self._device)
        inc_strain = inc_strain.to(dtype=torch.float64, device=self._device)
        # Get elastic stiffness
        de = self._elastic_stiffness_vmf
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Get current strength parameters
        plastic_state = self.get_plastic_state(epds)
        #
        #                                                    Last converged state
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Compute stress invariants
        invariants = get_stress_invariants(stress, self._n_dim)
        # Compute yield function
        yield_function = self.compute_yield_function(invariants, plastic_state)
        is_yielding = bool(yield_function > 1e-22)
        # Compute yield function and plastic potential stress gradients
        df_dsigma, dp_dsigma, softening = \
            self.compute_flow_gradients(invariants, plastic_state)
        # Compute plastic multiplier
        p_multiplier = torch.tensor(0.0, dtype=torch.float64,
                                    device=self._device)
        if is_yielding:
            denominator = torch.dot(df_dsigma, torch.matmul(de, dp_dsigma)) \
                + softening
            if denominator != 0.0:
                p_multiplier = torch.dot(
                    df_dsigma, torch.matmul(de, inc_strain))/denominator
        #
        #                                                    Elastic trial state
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Compute elastic trial stress
        trial_stress = stress + torch.matmul(de, inc_strain)
        # Compute trial stress invariants
        trial_invariants = get_stress_invariants(trial_stress, self._n_dim)
        # Compute trial yield function
        trial_yield_function = \
            self.compute_yield_function(trial_invariants, plastic_state)
        is_trial_yielding = bool(trial_yield_function > 1e-22)
        # Compute trial yield function and plastic potential stress gradients
        trial_df_dsigma, trial_dp_dsigma, trial_softening = \
            self.compute_flow_gradients(trial_invariants, plastic_state)
        # Compute trial plastic multiplier
        trial_p_multiplier = torch.tensor(0.0, dtype=torch.float64,
                                          device=self._device)
        trial_denominator = torch.dot(
            trial_df_dsigma, torch.matmul(de, trial_dp_dsigma)) \
            + trial_softening
        if trial_denominator != 0.0:
            trial_p_multiplier = trial_yield_function/trial_denominator
        #
        #                                                     Plastic corrector
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Select plastic multiplier
        if is_yielding:
            selected_p_multiplier = p_multiplier
        elif is_trial_yielding:
            selected_p_multiplier = trial_p_multiplier
        else:
            selected_p_multiplier = torch.tensor(0.0, dtype=torch.float64,
                                                 device=self._device)
        # Compute updated stress (plastic correction along the last converged
        # plastic potential stress gradient)
        updated_stress = trial_stress \
            - selected_p_multiplier*torch.matmul(de, dp_dsigma)
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Compute incremental plastic strain
        inc_p_strain = inc_strain - torch.matmul(
            self._elastic_compliance_vmf, stress - updated_stress)
        inc_p_strain = zero_out_of_plane(inc_p_strain, self._n_dim)
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Store state update results
        su_results = {'stress_vmf': updated_stress,
                      'inc_p_strain_vmf': inc_p_strain,
                      'p_multiplier': selected_p_multiplier,
                      'is_plast': is_yielding or is_trial_yielding,
                      'dp_dsigma': dp_dsigma}
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        return su_results
