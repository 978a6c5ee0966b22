"""Friction theory residual viscosity (Quinones-Cisneros, Zeberg-Mikkelsen, Stenby 2000).

The residual term is split along the van der Waals repulsive and attractive
pressures of the state, all in bar::

    pr  = T (dp/dT)_rho          repulsive
    pa  = p - pr                 attractive
    pid = rho R T                ideal
    deltapr = pr - pid

    eta_f = ka pa + kr deltapr + ki pid + kaa pa^2 + kdrdr deltapr^2
            + krr pr^2 + kii pid^2 + krrr pr^3 + kaaa pa^3

Each friction coefficient is ``(A0 + A1 psi1 + A2 psi2) tau^N`` with
``psi1 = exp(tau) - c1`` and ``psi2 = exp(tau^2) - c2``. The result is in Pa s.
"""

from __future__ import annotations

from math import exp

import numpy as np

from fluidtransport.common.exceptions import MissingTransportData

from ..utils.units import PA_TO_BAR
from .helpers import pure_component, viscosity_block
from .params import FrictionTheoryHigherOrder


def _friction_coefficient(A: np.ndarray, psi1: float, psi2: float, tau_pow: float) -> float:
    if len(A) == 0:
        return 0.0
    return float(A[0] + A[1] * psi1 + A[2] * psi2) * tau_pow


def friction_coefficients(data: FrictionTheoryHigherOrder, T: float) -> dict:
    tau = data.T_reduce / T
    psi1 = exp(tau) - data.c1
    psi2 = exp(tau ** 2) - data.c2

    k = {
        "ki": _friction_coefficient(data.Ai, psi1, psi2, tau),
        "ka": _friction_coefficient(data.Aa, psi1, psi2, tau ** data.Na),
        "kr": _friction_coefficient(data.Ar, psi1, psi2, tau ** data.Nr),
        "kaa": _friction_coefficient(data.Aaa, psi1, psi2, tau ** data.Naa),
        "kii": _friction_coefficient(data.Aii, psi1, psi2, tau ** data.Nii),
        "krr": 0.0,
        "kdrdr": 0.0,
        "krrr": 0.0,
        "kaaa": 0.0,
    }
    if len(data.Arr):
        k["krr"] = _friction_coefficient(data.Arr, psi1, psi2, tau ** data.Nrr)
    else:
        k["kdrdr"] = _friction_coefficient(data.Adrdr, psi1, psi2, tau ** data.Nrr)
    # cubic terms only come as a pair
    if len(data.Arrr) and len(data.Aaaa):
        k["krrr"] = _friction_coefficient(data.Arrr, psi1, psi2, tau ** data.Nrrr)
        k["kaaa"] = _friction_coefficient(data.Aaaa, psi1, psi2, tau ** data.Naaa)
    return k


def viscosity_higher_order_friction_theory(state) -> float:
    routine = "viscosity_higher_order_friction_theory"
    fluid = pure_component(state, routine)
    data = viscosity_block(fluid, "higher_order", FrictionTheoryHigherOrder, routine)
    if state.p is None or state.dpdT_constrho is None:
        raise MissingTransportData(f"{routine} needs p and (dp/dT)_rho from the equation of state")

    T = state.T
    k = friction_coefficients(data, T)

    p = state.p * PA_TO_BAR
    pr = T * state.dpdT_constrho * PA_TO_BAR
    pa = p - pr
    pid = state.rhomolar * state.gas_constant * T * PA_TO_BAR
    deltapr = pr - pid

    return (
        k["ka"] * pa
        + k["kr"] * deltapr
        + k["ki"] * pid
        + k["kaa"] * pa * pa
        + k["kdrdr"] * deltapr * deltapr
        + k["krr"] * pr * pr
        + k["kii"] * pid * pid
        + k["krrr"] * pr * pr * pr
        + k["kaaa"] * pa * pa * pa
    )
