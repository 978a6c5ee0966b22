"""
Low-density mixture viscosity:
- Wilke (J. Chem. Phys. 18, 1950) mixing of pure-component dilute-gas viscosities
"""

from typing import List
import math

from fluidtransport.common.exceptions import MissingTransportData

from .dilute import DILUTE_ROUTINES
from .state import FluidState


def wilke_viscosity(Xi: List[float], mu_pure: List[float], M: List[float]) -> float:
    """
    Wilke mixing rule:
    mu_mix = sum_i Xi_i * mu_i / sum_j Xi_j * phi_ij
    phi_ij = [1 + sqrt(mu_i/mu_j)*(M_j/M_i)**0.25]^2 / [sqrt(8)*(1 + M_i/M_j)**0.5]
    Xi : mole fractions (normalized)
    mu_pure : component viscosities [Pa s]
    M : molar masses [kg/mol]
    """
    n = len(Xi)
    if len(mu_pure) != n or len(M) != n:
        raise ValueError("Xi, mu_pure and M must have the same length")
    phi = [[0.0] * n for _ in range(n)]
    for i in range(n):
        for j in range(n):
            if i == j:
                phi[i][j] = 1.0
            else:
                phi[i][j] = (
                    (1.0 + math.sqrt(mu_pure[i] / mu_pure[j]) * (M[j] / M[i]) ** 0.25) ** 2
                    / (math.sqrt(8.0) * math.sqrt(1.0 + M[i] / M[j]))
                )
    denom = [sum(Xi[j] * phi[i][j] for j in range(n)) for i in range(n)]
    return sum(Xi[i] * mu_pure[i] / denom[i] for i in range(n))


def component_dilute_viscosities(state) -> List[float]:
    """Zero-density viscosity of every component at the state temperature [Pa s]."""
    mu_i = []
    for fluid in state.components:
        dilute = fluid.viscosity.dilute
        if dilute is None:
            raise MissingTransportData(f"No dilute-gas viscosity block for component '{fluid.name}'")
        pure_state = FluidState.pure(fluid, T=state.T, rhomolar=0.0)
        mu_i.append(DILUTE_ROUTINES[dilute.model](pure_state))
    return mu_i


def viscosity_dilute_mixture_Wilke(state) -> float:
    mu_i = component_dilute_viscosities(state)
    M = [fluid.molar_mass for fluid in state.components]
    return wilke_viscosity(list(state.mole_fractions), mu_i, M)
