r"""Higher-order (residual) viscosity terms driven by reduced density.

Modified Batschinski-Hildebrand form:

.. math::

    \Delta\eta = \sum_i a_i \delta^{d1_i} \tau^{t1_i} \exp(-\gamma_i \delta^{l_i})
        + \left(\sum_i f_i \delta^{d2_i} \tau^{t2_i}\right)
          \left(\frac{1}{\delta_0(\tau) - \delta} - \frac{1}{\delta_0(\tau)}\right)

with :math:`\tau = T_r/T`, :math:`\delta = \rho/\rho_r` and the close-packed
density :math:`\delta_0(\tau) = \sum_i g_i \tau^{h_i} / \sum_i p_i \tau^{q_i}`.
The ratio form covers every :math:`\delta_0` variant found in the literature.
The ``exp(-gamma delta^l)`` factor reduces to 1 when gamma is zero, which is how
the plain Batschinski-Hildebrand polynomial is expressed.
"""

from __future__ import annotations

import numpy as np

from .helpers import power_sum, pure_component, viscosity_block
from .params import BatschinskiHildebrandHigherOrder


def close_packed_reduced_density(data: BatschinskiHildebrandHigherOrder, tau: float) -> float:
    return power_sum(data.g, tau, data.h) / power_sum(data.p, tau, data.q)


def viscosity_higher_order_modified_Batschinski_Hildebrand(state) -> float:
    routine = "viscosity_higher_order_modified_Batschinski_Hildebrand"
    fluid = pure_component(state, routine)
    data = viscosity_block(fluid, "higher_order", BatschinskiHildebrandHigherOrder, routine)

    tau = data.T_reduce / state.T
    delta = state.rhomolar / data.rhomolar_reduce

    S = 0.0
    if len(data.a):
        S = float(
            np.sum(
                data.a
                * np.power(delta, data.d1)
                * np.power(tau, data.t1)
                * np.exp(-data.gamma * np.power(delta, data.l))
            )
        )

    if data.has_close_packed_term:
        F = float(np.sum(data.f * np.power(delta, data.d2) * np.power(tau, data.t2)))
        delta0 = close_packed_reduced_density(data, tau)
        if delta >= delta0:
            raise ValueError(
                f"Reduced density {delta} is at or beyond the close-packed limit {delta0} for '{fluid.name}'"
            )
        S += F * (1.0 / (delta0 - delta) - 1.0 / delta0)
    return S
