"""Strain softening laws.

This module includes the definition of the strain softening laws of
frictional/cohesive materials, i.e., the evolution of the friction angle,
dilation angle and cohesion with the accumulated equivalent plastic deviatoric
strain, and the suitable processing of the associated parameters.

Classes
-------
SofteningLaw(ABC)
    Strain softening law interface.
LinearSofteningLaw(SofteningLaw)
    Piecewise linear strain softening law.

Functions
---------
get_available_softening_types
    Get available strain softening laws.
get_softening_law
    Get softening law to compute current strength parameters.
"""
#
#                                                                       Modules
# =============================================================================
# Standard
from abc import ABC, abstractmethod
# Third-party
import numpy as np
#
#                                                          Authorship & Credits
# =============================================================================
__author__ = 'Bernardo Ferreira (bernardo_ferreira@brown.edu)'
__credits__ = ['Bernardo Ferreira', ]
__status__ = 'Stable'
# =============================================================================
#
# =============================================================================
def get_available_softening_types():
    """Get available strain softening laws.

    Available strain softening laws:

    * Piecewise linear softening

        .. math::

           \\phi(\\bar{\\varepsilon}^{p}_{d}) = \\phi_{r}
           + (\\phi_{p} - \\phi_{r}) \\dfrac{\\bar{\\varepsilon}^{p}_{d}
           - \\bar{\\varepsilon}^{p}_{d, crit}}{\\bar{\\varepsilon}^{p}_{d, peak}
           - \\bar{\\varepsilon}^{p}_{d, crit}}

        and similarly for the dilation angle and cohesion.

        Parameters:

        - 'peak' : Peak friction angle, dilation angle and cohesion \
                   (tuple[float]);
        - 'residual' : Residual friction angle, dilation angle and cohesion \
                       (tuple[float]);
        - 'peak_epds' : Accumulated plastic deviatoric strain at which \
                        softening starts (float);
        - 'crit_epds' : Accumulated plastic deviatoric strain at which \
                        residual state is attained (float).

    ----

    Returns
    -------
    available_softening_types : tuple[str]
        List of available strain softening laws (str).
    """
    # Set available strain softening types
    available_softening_types = ('linear',)
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    return available_softening_types
# =============================================================================
def get_softening_law(softening_type):
    """Get softening law to compute current strength parameters.

    Parameters
    ----------
    softening_type : str
        Type of softening law.

    Returns
    -------
    softening_law : function
        Softening law.
    """
    # Get softening class
    if softening_type == 'linear':
        # Piecewise linear strain softening
        softening_class = LinearSofteningLaw
    else:
        # Unknown strain softening type
        raise RuntimeError('Unknown type of strain softening law.')
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Get softening law
    softening_law = softening_class.softening_law
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    return softening_law
# =============================================================================
class SofteningLaw(ABC):
    """Strain softening law interface.

    Methods
    -------
    softening_law(softening_parameters, epds)
        Compute strength parameters for given plastic deviatoric strain.
    """
    @staticmethod
    @abstractmethod
    def softening_law(softening_parameters, epds):
        """Compute strength parameters for given plastic deviatoric strain.

        Parameters
        ----------
        softening_parameters : dict
            Softening law parameters.
        epds : float
            Accumulated equivalent plastic deviatoric strain.

        Returns
        -------
        phi : float
            Current friction angle (radians).
        psi : float
            Current dilation angle (radians).
        cohesion : float
            Current cohesion.
        """
        pass
# =============================================================================
class LinearSofteningLaw(SofteningLaw):
    """Piecewise linear strain softening law.

    The strength parameters are equal to the peak values up to the peak
    accumulated plastic deviatoric strain and are linearly interpolated
    towards the residual values between the peak and critical accumulated
    plastic deviatoric strains. At and beyond the critical accumulated plastic
    deviatoric strain the peak values are recovered.

    Methods
    -------
    softening_law(softening_parameters, epds)
        Compute strength parameters for given plastic deviatoric strain.
    """
    @staticmethod
    def softening_law(softening_parameters, epds):
        """Compute strength parameters for given plastic deviatoric strain.

        Parameters
        ----------
        softening_parameters : dict
            Softening law parameters.
        epds : float
            Accumulated equivalent plastic deviatoric strain.

        Returns
        -------
        phi : float
            Current friction angle (radians).
        psi : float
            Current dilation angle (radians).
        cohesion : float
            Current cohesion.
        """
        # Get peak and residual strength parameters
        peak = np.asarray(softening_parameters['peak'], dtype=float)
        residual = np.asarray(softening_parameters['residual'], dtype=float)
        # Get softening accumulated plastic deviatoric strain thresholds
        peak_epds = softening_parameters['peak_epds']
        crit_epds = softening_parameters['crit_epds']
        # Check accumulated plastic deviatoric strain
        epds = float(epds)
        if epds < 0.0:
            raise RuntimeError(f'Expecting non-negative accumulated plastic '
                               f'deviatoric strain but got {epds}.')
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Compute current strength parameters
        if epds - peak_epds <= 0.0:
            strength = peak
        elif epds - crit_epds < 0.0:
            strength = residual + (peak - residual)*(epds - crit_epds) \
                / (peak_epds - crit_epds)
        else:
            # TODO: Switch to residual strength once the accumulated plastic
            # deviatoric strain update is enabled in the state update path
            strength = peak
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        phi, psi, cohesion = (float(x) for x in strength)
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        return phi, psi, cohesion
