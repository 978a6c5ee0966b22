"""Aggregated viscosity routines and the total-viscosity assembly for pure fluids."""

from __future__ import annotations

import logging
from typing import Dict

from fluidtransport.common.exceptions import MissingTransportData

from .impl.dilute import (
    DILUTE_ROUTINES,
    viscosity_dilute_collision_integral,
    viscosity_dilute_collision_integral_powers_of_T,
    viscosity_dilute_kinetic_theory,
    viscosity_dilute_powers_of_T,
)
from .impl.friction_theory import viscosity_higher_order_friction_theory
from .impl.hardcoded import (
    HARDCODED_HIGHER_ORDER,
    HARDCODED_TOTAL,
    viscosity_hexane_higher_order_hardcoded,
    viscosity_hydrogen_higher_order_hardcoded,
    viscosity_water_hardcoded,
)
from .impl.helpers import pure_component
from .impl.higher_order import viscosity_higher_order_modified_Batschinski_Hildebrand
from .impl.initial_density import viscosity_initial_density_dependence_Rainwater_Friend
from .impl.mixers import viscosity_dilute_mixture_Wilke
from .impl.params import (
    BatschinskiHildebrandHigherOrder,
    FrictionTheoryHigherOrder,
    HardcodedCorrelation,
)

logger = logging.getLogger(__name__)

_HIGHER_ORDER_ROUTINES = {
    BatschinskiHildebrandHigherOrder.model: viscosity_higher_order_modified_Batschinski_Hildebrand,
    FrictionTheoryHigherOrder.model: viscosity_higher_order_friction_theory,
}


class TransportRoutines:
    """Catalogue of viscosity correlations evaluated from a :class:`ThermoState`.

    Every routine reads T, density and the fluid's coefficient blocks from the
    state and returns a single contribution in SI units (Pa s), except the
    Rainwater-Friend routine which returns B_eta in m^3/mol.
    """

    viscosity_dilute_kinetic_theory = staticmethod(viscosity_dilute_kinetic_theory)
    viscosity_dilute_collision_integral = staticmethod(viscosity_dilute_collision_integral)
    viscosity_dilute_powers_of_T = staticmethod(viscosity_dilute_powers_of_T)
    viscosity_dilute_collision_integral_powers_of_T = staticmethod(viscosity_dilute_collision_integral_powers_of_T)
    viscosity_initial_density_dependence_Rainwater_Friend = staticmethod(
        viscosity_initial_density_dependence_Rainwater_Friend
    )
    viscosity_higher_order_modified_Batschinski_Hildebrand = staticmethod(
        viscosity_higher_order_modified_Batschinski_Hildebrand
    )
    viscosity_water_hardcoded = staticmethod(viscosity_water_hardcoded)
    viscosity_hydrogen_higher_order_hardcoded = staticmethod(viscosity_hydrogen_higher_order_hardcoded)
    viscosity_hexane_higher_order_hardcoded = staticmethod(viscosity_hexane_higher_order_hardcoded)
    viscosity_higher_order_friction_theory = staticmethod(viscosity_higher_order_friction_theory)
    viscosity_dilute_mixture_Wilke = staticmethod(viscosity_dilute_mixture_Wilke)

    @staticmethod
    def viscosity_dilute(state) -> float:
        fluid = pure_component(state, "viscosity_dilute")
        dilute = fluid.viscosity.dilute
        if dilute is None:
            raise MissingTransportData(f"No dilute-gas viscosity block for fluid '{fluid.name}'")
        return DILUTE_ROUTINES[dilute.model](state)

    @staticmethod
    def viscosity_higher_order(state) -> float:
        fluid = pure_component(state, "viscosity_higher_order")
        block = fluid.viscosity.higher_order
        if block is None:
            return 0.0
        if isinstance(block, HardcodedCorrelation):
            return HARDCODED_HIGHER_ORDER[block.name](state)
        return _HIGHER_ORDER_ROUTINES[block.model](state)

    @staticmethod
    def viscosity_contributions(state) -> Dict[str, float]:
        """Return the dilute, initial-density and higher-order terms and their total [Pa s]."""
        fluid = pure_component(state, "viscosity_contributions")
        model = fluid.viscosity

        if model.hardcoded is not None:
            total = HARDCODED_TOTAL[model.hardcoded.name](state)
            return {"dilute": float("nan"), "initial_density": float("nan"), "higher_order": float("nan"), "total": total}

        eta_dilute = TransportRoutines.viscosity_dilute(state)
        eta_initial = 0.0
        if model.initial_density is not None:
            B_eta = viscosity_initial_density_dependence_Rainwater_Friend(state)
            eta_initial = eta_dilute * B_eta * state.rhomolar
        eta_higher = TransportRoutines.viscosity_higher_order(state)

        total = eta_dilute + eta_initial + eta_higher
        logger.debug(
            "%s viscosity at T=%s K, rho=%s mol/m^3: dilute=%g initial=%g higher=%g",
            fluid.name,
            state.T,
            state.rhomolar,
            eta_dilute,
            eta_initial,
            eta_higher,
        )
        return {"dilute": eta_dilute, "initial_density": eta_initial, "higher_order": eta_higher, "total": total}

    @staticmethod
    def viscosity(state) -> float:
        """Total viscosity [Pa s] of a pure or pseudo-pure fluid."""
        return TransportRoutines.viscosity_contributions(state)["total"]
