"""Coefficient containers for the viscosity correlations.

Every block is built from a JSON ``params`` mapping through the model registry,
so that a fluid file can name its correlations explicitly::

    "viscosity": {
        "dilute": {"model": "collision_integral", "a": [...], "t": [...], "C": 2.66958e-08, "molar_mass": 28.01348},
        "higher_order": {"model": "batschinski_hildebrand", ...}
    }

Units follow the formulas in :mod:`.dilute`, :mod:`.initial_density` and
:mod:`.higher_order`; they are not converted here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Mapping, Optional, Sequence

import numpy as np

from .registry import build, register


def _array(values: Optional[Sequence[float]]) -> np.ndarray:
    if values is None:
        return np.zeros(0)
    return np.asarray(values, dtype=float)


def _check_lengths(model: str, **arrays: np.ndarray) -> None:
    lengths = {name: len(arr) for name, arr in arrays.items()}
    if len(set(lengths.values())) > 1:
        raise ValueError(f"Coefficient arrays for '{model}' differ in length: {lengths}")


@dataclass
class KineticTheoryDilute:
    """Neufeld collision integral with the fluid's own sigma and epsilon/k."""

    model: ClassVar[str] = "kinetic_theory"


@dataclass
class CollisionIntegralDilute:
    a: np.ndarray
    t: np.ndarray
    C: float
    molar_mass: float  # kg/kmol

    model: ClassVar[str] = "collision_integral"

    def __post_init__(self):
        _check_lengths(self.model, a=self.a, t=self.t)


@dataclass
class PowersOfTDilute:
    a: np.ndarray
    t: np.ndarray

    model: ClassVar[str] = "powers_of_T"

    def __post_init__(self):
        _check_lengths(self.model, a=self.a, t=self.t)


@dataclass
class CollisionIntegralPowersOfTDilute:
    """Omega as a power series in reduced temperature.

    With ``C`` and ``T_reducing`` set the block is self-contained and the
    fluid's sigma and epsilon/k are not read.
    """

    a: np.ndarray
    t: np.ndarray
    C: Optional[float] = None  # Pa s / K^0.5
    T_reducing: Optional[float] = None  # K

    model: ClassVar[str] = "collision_integral_powers_of_T"

    def __post_init__(self):
        _check_lengths(self.model, a=self.a, t=self.t)
        if (self.C is None) != (self.T_reducing is None):
            raise ValueError("'C' and 'T_reducing' must be given together")

    @property
    def self_contained(self) -> bool:
        return self.C is not None


@dataclass
class RainwaterFriendInitialDensity:
    b: np.ndarray
    t: np.ndarray

    model: ClassVar[str] = "rainwater_friend"

    def __post_init__(self):
        _check_lengths(self.model, b=self.b, t=self.t)


@dataclass
class BatschinskiHildebrandHigherOrder:
    T_reduce: float
    rhomolar_reduce: float
    a: np.ndarray
    d1: np.ndarray
    t1: np.ndarray
    gamma: np.ndarray
    l: np.ndarray
    f: np.ndarray
    d2: np.ndarray
    t2: np.ndarray
    g: np.ndarray
    h: np.ndarray
    p: np.ndarray
    q: np.ndarray

    model: ClassVar[str] = "batschinski_hildebrand"

    def __post_init__(self):
        _check_lengths(self.model, a=self.a, d1=self.d1, t1=self.t1, gamma=self.gamma, l=self.l)
        _check_lengths(self.model, f=self.f, d2=self.d2, t2=self.t2)
        _check_lengths(self.model, g=self.g, h=self.h)
        _check_lengths(self.model, p=self.p, q=self.q)
        if len(self.f) and not (len(self.g) and len(self.p)):
            raise ValueError("Close-packed density terms 'f' need both 'g'/'h' and 'p'/'q' coefficients")

    @property
    def has_close_packed_term(self) -> bool:
        return len(self.f) > 0


@dataclass
class FrictionTheoryHigherOrder:
    """Quinones-Cisneros friction theory coefficients.

    Each ``A*`` list holds the three coefficients multiplying ``1``, ``psi1``
    and ``psi2``. ``Arr`` and ``Adrdr`` are alternatives; ``Aii``, ``Arrr`` and
    ``Aaaa`` are optional.
    """

    T_reduce: float
    c1: float
    c2: float
    Ai: np.ndarray
    Aa: np.ndarray
    Ar: np.ndarray
    Aaa: np.ndarray
    Arr: np.ndarray
    Adrdr: np.ndarray
    Aii: np.ndarray
    Arrr: np.ndarray
    Aaaa: np.ndarray
    Na: float
    Nr: float
    Naa: float
    Nrr: float
    Nii: float = 0.0
    Nrrr: float = 0.0
    Naaa: float = 0.0

    model: ClassVar[str] = "friction_theory"

    def __post_init__(self):
        for name in ("Ai", "Aa", "Ar", "Aaa"):
            if len(getattr(self, name)) != 3:
                raise ValueError(f"Friction theory coefficient '{name}' needs exactly 3 entries")
        if len(self.Arr) == 0 and len(self.Adrdr) == 0:
            raise ValueError("Friction theory needs either 'Arr' or 'Adrdr' coefficients")
        for name in ("Arr", "Adrdr", "Aii", "Arrr", "Aaaa"):
            if len(getattr(self, name)) not in (0, 3):
                raise ValueError(f"Friction theory coefficient '{name}' needs 0 or 3 entries")


@dataclass
class HardcodedCorrelation:
    """Marker for fluid-specific correlations whose constants live in code."""

    name: str

    model: ClassVar[str] = "hardcoded"


_SLOT_MODELS = {
    "dilute": ("kinetic_theory", "collision_integral", "powers_of_T", "collision_integral_powers_of_T"),
    "initial_density": ("rainwater_friend",),
    "higher_order": ("batschinski_hildebrand", "friction_theory", "hardcoded:hydrogen", "hardcoded:hexane"),
    "hardcoded": ("hardcoded:water",),
}


@dataclass
class ViscosityModel:
    dilute: Optional[Any] = None
    initial_density: Optional[RainwaterFriendInitialDensity] = None
    higher_order: Optional[Any] = None
    hardcoded: Optional[HardcodedCorrelation] = None

    @staticmethod
    def from_params(params: Mapping[str, Any]) -> "ViscosityModel":
        blocks: Dict[str, Any] = {}
        for slot, allowed in _SLOT_MODELS.items():
            entry = params.get(slot)
            if entry is None:
                continue
            key = f"hardcoded:{entry.get('name')}" if entry["model"] == "hardcoded" else entry["model"]
            if key not in allowed:
                raise ValueError(f"Model '{key}' cannot be used as the viscosity {slot} term")
            blocks[slot] = build(entry["model"], entry)
        return ViscosityModel(**blocks)

    def describe(self) -> Dict[str, Optional[str]]:
        out: Dict[str, Optional[str]] = {}
        for slot in ("dilute", "initial_density", "higher_order", "hardcoded"):
            block = getattr(self, slot)
            if block is None:
                out[slot] = None
            elif isinstance(block, HardcodedCorrelation):
                out[slot] = f"hardcoded:{block.name}"
            else:
                out[slot] = block.model
        return out


@dataclass
class FluidTransport:
    """Transport parameters of one pure or pseudo-pure fluid."""

    name: str
    molar_mass: float  # kg/mol
    epsilon_over_k: Optional[float] = None  # K
    sigma_eta: Optional[float] = None  # m
    viscosity: ViscosityModel = field(default_factory=ViscosityModel)


@register("kinetic_theory")
def _factory_kinetic_theory(params: Dict[str, Any]) -> KineticTheoryDilute:
    return KineticTheoryDilute()


@register("collision_integral")
def _factory_collision_integral(params: Dict[str, Any]) -> CollisionIntegralDilute:
    return CollisionIntegralDilute(
        a=_array(params["a"]),
        t=_array(params["t"]),
        C=float(params["C"]),
        molar_mass=float(params["molar_mass"]),
    )


@register("powers_of_T")
def _factory_powers_of_T(params: Dict[str, Any]) -> PowersOfTDilute:
    return PowersOfTDilute(a=_array(params["a"]), t=_array(params["t"]))


@register("collision_integral_powers_of_T")
def _factory_collision_integral_powers_of_T(params: Dict[str, Any]) -> CollisionIntegralPowersOfTDilute:
    C = params.get("C")
    T_reducing = params.get("T_reducing")
    return CollisionIntegralPowersOfTDilute(
        a=_array(params["a"]),
        t=_array(params["t"]),
        C=None if C is None else float(C),
        T_reducing=None if T_reducing is None else float(T_reducing),
    )


@register("rainwater_friend")
def _factory_rainwater_friend(params: Dict[str, Any]) -> RainwaterFriendInitialDensity:
    return RainwaterFriendInitialDensity(b=_array(params["b"]), t=_array(params["t"]))


@register("batschinski_hildebrand")
def _factory_batschinski_hildebrand(params: Dict[str, Any]) -> BatschinskiHildebrandHigherOrder:
    a = _array(params["a"])
    # gamma/l default to zero so that exp(-gamma*delta^l) == 1
    gamma = _array(params.get("gamma", [0.0] * len(a)))
    l = _array(params.get("l", [0.0] * len(a)))
    return BatschinskiHildebrandHigherOrder(
        T_reduce=float(params["T_reduce"]),
        rhomolar_reduce=float(params["rhomolar_reduce"]),
        a=a,
        d1=_array(params["d1"]),
        t1=_array(params["t1"]),
        gamma=gamma,
        l=l,
        f=_array(params.get("f")),
        d2=_array(params.get("d2")),
        t2=_array(params.get("t2")),
        g=_array(params.get("g")),
        h=_array(params.get("h")),
        p=_array(params.get("p")),
        q=_array(params.get("q")),
    )


@register("friction_theory")
def _factory_friction_theory(params: Dict[str, Any]) -> FrictionTheoryHigherOrder:
    return FrictionTheoryHigherOrder(
        T_reduce=float(params["T_reduce"]),
        c1=float(params["c1"]),
        c2=float(params["c2"]),
        Ai=_array(params["Ai"]),
        Aa=_array(params["Aa"]),
        Ar=_array(params["Ar"]),
        Aaa=_array(params["Aaa"]),
        Arr=_array(params.get("Arr")),
        Adrdr=_array(params.get("Adrdr")),
        Aii=_array(params.get("Aii")),
        Arrr=_array(params.get("Arrr")),
        Aaaa=_array(params.get("Aaaa")),
        Na=float(params["Na"]),
        Nr=float(params["Nr"]),
        Naa=float(params["Naa"]),
        Nrr=float(params["Nrr"]),
        Nii=float(params.get("Nii", 0.0)),
        Nrrr=float(params.get("Nrrr", 0.0)),
        Naaa=float(params.get("Naaa", 0.0)),
    )


@register("hardcoded")
def _factory_hardcoded(params: Dict[str, Any]) -> HardcodedCorrelation:
    name = params["name"]
    if name not in ("water", "hydrogen", "hexane"):
        raise KeyError(f"No hardcoded viscosity correlation named '{name}'")
    return HardcodedCorrelation(name=name)
