import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

# imported for their registrations
from . import params  # noqa: F401  kinetic_theory, collision_integral, ..., hardcoded

from .params import FluidTransport, ViscosityModel
from .registry import build, register
from ..utils.units import assert_unit

logger = logging.getLogger(__name__)


@register("fluid_transport")
def _factory_fluid(params: Dict[str, Any]) -> FluidTransport:
    for k in ("name", "molar_mass", "molar_mass_unit"):
        if k not in params:
            raise KeyError(f"Missing '{k}' in fluid_transport params")
    assert_unit(params["molar_mass_unit"], "kg/mol", "molar mass")
    if "sigma_eta" in params:
        assert_unit(params.get("sigma_unit", ""), "m", "sigma_eta")
    if "epsilon_over_k" in params:
        assert_unit(params.get("T_unit", ""), "K", "epsilon_over_k")

    viscosity = ViscosityModel.from_params(params.get("viscosity", {}))
    fluid = FluidTransport(
        name=params["name"],
        molar_mass=float(params["molar_mass"]),
        epsilon_over_k=float(params["epsilon_over_k"]) if "epsilon_over_k" in params else None,
        sigma_eta=float(params["sigma_eta"]) if "sigma_eta" in params else None,
        viscosity=viscosity,
    )
    logger.debug("Built transport data for %s: %s", fluid.name, viscosity.describe())
    return fluid


def load_from_json(json_path: Union[str, Path]) -> Any:
    p = Path(json_path)
    data = json.loads(p.read_text(encoding="utf-8"))
    # accepts both {model, params} and a flat {model, ...}
    params = data.get("params", data)
    logger.debug("Loading '%s' model from %s", data["model"], p)
    return build(data["model"], params)


def load_fluid_from_json(json_path: Union[str, Path]) -> FluidTransport:
    fluid = load_from_json(json_path)
    if not isinstance(fluid, FluidTransport):
        raise TypeError(f"{json_path} did not yield a FluidTransport instance")
    return fluid
