"""Convenience exports for the viscosity correlations."""

from .impl.loader import load_fluid_from_json
from .impl.params import FluidTransport, ViscosityModel
from .impl.state import FluidState, ThermoState
from .interfaces import TransportRoutines

__all__ = [
    "FluidState",
    "FluidTransport",
    "ThermoState",
    "TransportRoutines",
    "ViscosityModel",
    "load_fluid_from_json",
]
