"""Thermodynamic state consumed by the transport routines.

The routines never evaluate an equation of state themselves; whatever backend
produced the state only has to expose the members of :class:`ThermoState`.
:class:`FluidState` is the plain container used when the numbers come from
elsewhere (tables, another library, a test).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Protocol

from ..utils.units import R_UNIVERSAL
from .params import FluidTransport


class ThermoState(Protocol):
    """T[K], rhomolar[mol/m^3] and fluid data.

    Optional members: p[Pa], (dp/dT)_rho[Pa/K], and (drho/dp)_T[kg/m^3/Pa] at the
    state and at the same density and 1.5 times the critical temperature
    (``drhodp_constT_reference``, used only by the water correlation).
    """

    T: float
    rhomolar: float
    p: Optional[float]
    dpdT_constrho: Optional[float]
    drhodp_constT: Optional[float]
    drhodp_constT_reference: Optional[float]
    components: List[FluidTransport]
    mole_fractions: List[float]

    @property
    def rhomass(self) -> float: ...

    @property
    def molar_mass(self) -> float: ...

    @property
    def gas_constant(self) -> float: ...

    @property
    def is_pure_or_pseudopure(self) -> bool: ...


@dataclass
class FluidState:
    T: float
    rhomolar: float
    components: List[FluidTransport]
    mole_fractions: List[float] = field(default_factory=list)
    p: Optional[float] = None
    dpdT_constrho: Optional[float] = None
    drhodp_constT: Optional[float] = None
    drhodp_constT_reference: Optional[float] = None
    R: float = R_UNIVERSAL

    def __post_init__(self):
        if self.T <= 0:
            raise ValueError("Temperature must be >0 K for transport evaluation")
        if self.rhomolar < 0:
            raise ValueError("Density must be >=0 for transport evaluation")
        if not self.components:
            raise ValueError("State requires at least one fluid component")
        if not self.mole_fractions:
            self.mole_fractions = [1.0 / len(self.components)] * len(self.components)
        if len(self.mole_fractions) != len(self.components):
            raise ValueError("len(mole_fractions) must equal len(components)")
        if any(x < 0.0 for x in self.mole_fractions):
            raise ValueError(f"Mole fractions must be non-negative, got {self.mole_fractions}")
        total = sum(self.mole_fractions)
        if total <= 0.0:
            raise ValueError("Mole fractions all zero; provide nonzero composition.")
        self.mole_fractions = [float(x) / total for x in self.mole_fractions]

    @classmethod
    def pure(cls, fluid: FluidTransport, T: float, rhomolar: float, **kwargs) -> "FluidState":
        return cls(T=T, rhomolar=rhomolar, components=[fluid], mole_fractions=[1.0], **kwargs)

    @property
    def molar_mass(self) -> float:
        return sum(x * c.molar_mass for x, c in zip(self.mole_fractions, self.components))

    @property
    def rhomass(self) -> float:
        return self.rhomolar * self.molar_mass

    @property
    def gas_constant(self) -> float:
        return self.R

    @property
    def is_pure_or_pseudopure(self) -> bool:
        return len(self.components) == 1
