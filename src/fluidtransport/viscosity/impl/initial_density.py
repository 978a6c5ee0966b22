r"""Rainwater-Friend initial density dependence.

The second viscosity virial coefficient

.. math::

    B_\eta(T) = B_\eta^*(T^*) N_A \sigma_\eta^3, \qquad
    B_\eta^*(T^*) = \sum_i b_i (T^*)^{t_i}

is returned in m^3/mol (sigma in m). The viscosity contribution itself is
``eta0 * B_eta * rhomolar`` and is assembled by the caller.
"""

from __future__ import annotations

from ..utils.units import N_A
from .helpers import lennard_jones, power_sum, pure_component, viscosity_block
from .params import RainwaterFriendInitialDensity


def viscosity_initial_density_dependence_Rainwater_Friend(state) -> float:
    """Return B_eta [m^3/mol], not the viscosity increment."""
    routine = "viscosity_initial_density_dependence_Rainwater_Friend"
    fluid = pure_component(state, routine)
    data = viscosity_block(fluid, "initial_density", RainwaterFriendInitialDensity, routine)
    epsilon_over_k, sigma = lennard_jones(fluid, routine)

    Tstar = state.T / epsilon_over_k
    B_eta_star = power_sum(data.b, Tstar, data.t)
    return N_A * sigma ** 3 * B_eta_star
