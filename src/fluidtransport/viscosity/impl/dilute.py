r"""Dilute-gas (zero-density) viscosity terms.

* Kinetic theory with the Neufeld et al. (1972) fit of :math:`\Omega^{(2,2)}`::

      eta0 = 26.692e-9 * sqrt(M*T) / (sigma^2 * Omega22(T*))
      Omega22 = 1.16145*T*^-0.14874 + 0.52487*exp(-0.77320*T*) + 2.16178*exp(-2.43787*T*)

  with T* = T/(epsilon/k), sigma in nm and M in kg/kmol; result in Pa s.
* Effective cross section ``S(T*) = exp(sum a_i (ln T*)^t_i)`` with a fitted
  leading constant ``C`` instead of 26.692e-9.
* A plain power series ``eta0 = sum a_i T^t_i`` (T in K, eta0 in Pa s).
* The Chapman-Enskog expression with ``Omega(T*) = sum a_i T*^t_i``, written in
  SI units: ``eta0 = 5/16 sqrt(M R T / pi) / (N_A sigma^2 Omega)``. A block
  that carries its own ``C`` and ``T_reducing`` instead uses
  ``eta0 = C sqrt(T) / sum a_i (T/T_reducing)^t_i``, leaving the fluid's
  sigma free for the Rainwater-Friend term.
"""

from __future__ import annotations

from math import exp, log, pi, sqrt

from ..utils.units import N_A
from .helpers import lennard_jones, power_sum, pure_component, viscosity_block
from .params import (
    CollisionIntegralDilute,
    CollisionIntegralPowersOfTDilute,
    KineticTheoryDilute,
    PowersOfTDilute,
)


def omega22_neufeld(Tstar: float) -> float:
    return 1.16145 * Tstar ** (-0.14874) + 0.52487 * exp(-0.77320 * Tstar) + 2.16178 * exp(-2.43787 * Tstar)


def viscosity_dilute_kinetic_theory(state) -> float:
    routine = "viscosity_dilute_kinetic_theory"
    fluid = pure_component(state, routine)
    # only the Lennard-Jones parameters are used, whatever dilute block is configured
    epsilon_over_k, sigma = lennard_jones(fluid, routine)

    T = state.T
    Tstar = T / epsilon_over_k
    sigma_nm = sigma * 1e9
    molar_mass_kgkmol = state.molar_mass * 1000.0
    return 26.692e-9 * sqrt(molar_mass_kgkmol * T) / (sigma_nm ** 2 * omega22_neufeld(Tstar))


def viscosity_dilute_collision_integral(state) -> float:
    routine = "viscosity_dilute_collision_integral"
    fluid = pure_component(state, routine)
    data = viscosity_block(fluid, "dilute", CollisionIntegralDilute, routine)
    epsilon_over_k, sigma = lennard_jones(fluid, routine)

    T = state.T
    Tstar = T / epsilon_over_k
    sigma_nm = sigma * 1e9
    S = exp(power_sum(data.a, log(Tstar), data.t))
    return data.C * sqrt(data.molar_mass * T) / (sigma_nm ** 2 * S)


def viscosity_dilute_powers_of_T(state) -> float:
    routine = "viscosity_dilute_powers_of_T"
    fluid = pure_component(state, routine)
    data = viscosity_block(fluid, "dilute", PowersOfTDilute, routine)
    return power_sum(data.a, state.T, data.t)


def viscosity_dilute_collision_integral_powers_of_T(state) -> float:
    routine = "viscosity_dilute_collision_integral_powers_of_T"
    fluid = pure_component(state, routine)
    data = viscosity_block(fluid, "dilute", CollisionIntegralPowersOfTDilute, routine)
    T = state.T
    if data.self_contained:
        return data.C * sqrt(T) / power_sum(data.a, T / data.T_reducing, data.t)

    epsilon_over_k, sigma = lennard_jones(fluid, routine)
    Tstar = T / epsilon_over_k
    omega = power_sum(data.a, Tstar, data.t)
    M = state.molar_mass
    return 5.0 / 16.0 * sqrt(M * state.gas_constant * T / pi) / (N_A * sigma ** 2 * omega)


DILUTE_ROUTINES = {
    KineticTheoryDilute.model: viscosity_dilute_kinetic_theory,
    CollisionIntegralDilute.model: viscosity_dilute_collision_integral,
    PowersOfTDilute.model: viscosity_dilute_powers_of_T,
    CollisionIntegralPowersOfTDilute.model: viscosity_dilute_collision_integral_powers_of_T,
}
