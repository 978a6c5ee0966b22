"""Fluid-specific correlations whose constants are fixed in code.

* Water: IAPWS 2008 (Huber et al., J. Phys. Chem. Ref. Data 38, 2009), total
  viscosity ``mu0 * mu1 * mu2``. The critical enhancement ``mu2`` needs
  (drho/dp)_T at the state and at 1.5 T* with the same density; when the state
  does not carry both it is taken as 1, as the release allows for industrial
  use.
* Hydrogen: higher-order term of Muzny et al. (J. Chem. Eng. Data 58, 2013).
* n-Hexane: higher-order term of Michailidou et al. (J. Phys. Chem. Ref. Data
  42, 2013).

The water and hydrogen terms use the mass density of the state; none of these
routines look at the fluid's coefficient blocks.
"""

from __future__ import annotations

from math import acos, atan, exp, log, sin, sqrt, tan

import numpy as np

from .helpers import pure_component

_WATER_T_STAR = 647.096  # K
_WATER_RHO_STAR = 322.0  # kg/m^3
_WATER_MU_STAR = 1.0e-6  # Pa s
_WATER_P_STAR = 22.064e6  # Pa
_WATER_TR_BAR = 1.5
_WATER_X_MU = 0.068
_WATER_QC = 1.0 / 1.9  # 1/nm
_WATER_QD = 1.0 / 1.1  # 1/nm
_WATER_NU = 0.630
_WATER_GAMMA = 1.239
_WATER_XI0 = 0.13  # nm
_WATER_GAMMA0 = 0.06
_WATER_XI_SMALL = 0.3817016416  # nm

_WATER_H0 = np.array([1.67752, 2.20462, 0.6366564, -0.241605])

# H[i][j]: i -> (1/Tbar - 1)^i, j -> (rhobar - 1)^j
_WATER_H1 = np.array(
    [
        [5.20094e-1, 2.22531e-1, -2.81378e-1, 1.61913e-1, -3.25372e-2, 0.0, 0.0],
        [8.50895e-2, 9.99115e-1, -9.06851e-1, 2.57399e-1, 0.0, 0.0, 0.0],
        [-1.08374, 1.88797, -7.72479e-1, 0.0, 0.0, 0.0, 0.0],
        [-2.89555e-1, 1.26613, -4.89837e-1, 0.0, 6.98452e-2, 0.0, -4.35673e-3],
        [0.0, 0.0, -2.57040e-1, 0.0, 0.0, 8.72102e-3, 0.0],
        [0.0, 1.20573e-1, 0.0, 0.0, 0.0, 0.0, -5.93264e-4],
    ]
)

_HYDROGEN_TC = 33.145  # K
_HYDROGEN_RHO_SCALE = 0.011  # m^3/kg, 1/90.909 kg/m^3
_HYDROGEN_C = (6.43449673e-6, 4.56334068e-2, 2.32797868e-1, 9.58326120e-1, 1.27941189e-1, 3.63576595e-1)

_HEXANE_TC = 507.82  # K
_HEXANE_RHOC = 233.182  # kg/m^3
_HEXANE_C = (
    2.53402335,
    -9.724061002,
    0.469437316,
    158.5571631,
    72.42916856,
    10.60751253,
    8.628373915,
    -6.61346441,
    -2.212724566,
)


def water_dilute_reduced(Tbar: float) -> float:
    return 100.0 * sqrt(Tbar) / float(np.sum(_WATER_H0 / Tbar ** np.arange(len(_WATER_H0))))


def water_residual_factor(Tbar: float, rhobar: float) -> float:
    t_pow = (1.0 / Tbar - 1.0) ** np.arange(_WATER_H1.shape[0])
    r_pow = (rhobar - 1.0) ** np.arange(_WATER_H1.shape[1])
    return exp(rhobar * float(t_pow @ _WATER_H1 @ r_pow))


def water_critical_enhancement(Tbar: float, rhobar: float, zeta: float, zeta_reference: float) -> float:
    """IAPWS 2008 factor mu2 from the reduced compressibilities (drho/dp)_T * p*/rho*."""
    delta_chi = rhobar * (zeta - zeta_reference * _WATER_TR_BAR / Tbar)
    if delta_chi <= 0.0:
        return 1.0
    xi = _WATER_XI0 * (delta_chi / _WATER_GAMMA0) ** (_WATER_NU / _WATER_GAMMA)
    return exp(_WATER_X_MU * water_crossover_function(xi))


def water_crossover_function(xi: float) -> float:
    """Y(xi) for correlation length xi in nm."""
    qc_xi = _WATER_QC * xi
    qd_xi = _WATER_QD * xi
    if xi <= _WATER_XI_SMALL:
        Y = 0.2 * qc_xi * qd_xi ** 5 * (1.0 - qc_xi + qc_xi ** 2 - 765.0 / 504.0 * qd_xi ** 2)
    else:
        psi_D = acos(1.0 / sqrt(1.0 + qd_xi ** 2))
        w = sqrt(abs((qc_xi - 1.0) / (qc_xi + 1.0))) * tan(psi_D / 2.0)
        if qc_xi > 1.0:
            L = log((1.0 + w) / (1.0 - w))
        else:
            L = 2.0 * atan(abs(w))
        Y = (
            sin(3.0 * psi_D) / 12.0
            - sin(2.0 * psi_D) / (4.0 * qc_xi)
            + (1.0 - 1.25 * qc_xi ** 2) * sin(psi_D) / qc_xi ** 2
            - ((1.0 - 1.5 * qc_xi ** 2) * psi_D - abs(qc_xi ** 2 - 1.0) ** 1.5 * L) / qc_xi ** 3
        )
    return Y


def viscosity_water_hardcoded(state) -> float:
    pure_component(state, "viscosity_water_hardcoded")
    Tbar = state.T / _WATER_T_STAR
    rhobar = state.rhomass / _WATER_RHO_STAR
    mu0 = water_dilute_reduced(Tbar)
    mu1 = water_residual_factor(Tbar, rhobar)

    # without both compressibilities, mu2 = 1 (industrial use)
    drhodp = getattr(state, "drhodp_constT", None)
    drhodp_reference = getattr(state, "drhodp_constT_reference", None)
    mu2 = 1.0
    if drhodp is not None and drhodp_reference is not None:
        scale = _WATER_P_STAR / _WATER_RHO_STAR
        mu2 = water_critical_enhancement(Tbar, rhobar, drhodp * scale, drhodp_reference * scale)
    return mu0 * mu1 * mu2 * _WATER_MU_STAR


def viscosity_hydrogen_higher_order_hardcoded(state) -> float:
    pure_component(state, "viscosity_hydrogen_higher_order_hardcoded")
    c1, c2, c3, c4, c5, c6 = _HYDROGEN_C
    Tr = state.T / _HYDROGEN_TC
    rhor = state.rhomass * _HYDROGEN_RHO_SCALE
    return c1 * rhor ** 2 * exp(c2 * Tr + c3 / Tr + c4 * rhor ** 2 / (c5 + Tr) + c6 * rhor ** 6)


def viscosity_hexane_higher_order_hardcoded(state) -> float:
    pure_component(state, "viscosity_hexane_higher_order_hardcoded")
    c = _HEXANE_C
    Tr = state.T / _HEXANE_TC
    rhor = state.rhomass / _HEXANE_RHOC
    bracket = (
        c[0] / Tr
        + c[1] / (c[2] + Tr + c[3] * rhor * rhor)
        + c[4] * (1.0 + rhor) / (c[5] + c[6] * Tr + c[7] * rhor + rhor * rhor + c[8] * rhor * Tr)
    )
    # uPa s -> Pa s
    return rhor ** (2.0 / 3.0) * sqrt(Tr) * bracket / 1e6


HARDCODED_HIGHER_ORDER = {
    "hydrogen": viscosity_hydrogen_higher_order_hardcoded,
    "hexane": viscosity_hexane_higher_order_hardcoded,
}

HARDCODED_TOTAL = {
    "water": viscosity_water_hardcoded,
}
