from typing import Any, Type

import numpy as np

from fluidtransport.common.exceptions import MissingTransportData, MixtureNotSupported

from .params import FluidTransport


def power_sum(coeffs: np.ndarray, x: float, exponents: np.ndarray) -> float:
    """sum_i c_i * x**e_i"""
    if len(coeffs) == 0:
        return 0.0
    return float(np.sum(coeffs * np.power(x, exponents)))


def pure_component(state, routine: str) -> FluidTransport:
    if not state.is_pure_or_pseudopure:
        raise MixtureNotSupported(f"{routine} is only for pure and pseudo-pure fluids")
    return state.components[0]


def viscosity_block(fluid: FluidTransport, slot: str, cls: Type, routine: str) -> Any:
    block = getattr(fluid.viscosity, slot)
    if not isinstance(block, cls):
        raise MissingTransportData(
            f"{routine} needs a '{cls.model}' {slot} block for fluid '{fluid.name}'"
        )
    return block


def lennard_jones(fluid: FluidTransport, routine: str):
    """Return (epsilon/k [K], sigma [m]) or raise if the fluid lacks them."""
    if fluid.epsilon_over_k is None or fluid.sigma_eta is None:
        raise MissingTransportData(
            f"{routine} needs epsilon_over_k and sigma_eta for fluid '{fluid.name}'"
        )
    return fluid.epsilon_over_k, fluid.sigma_eta
