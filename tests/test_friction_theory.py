from math import exp

import pytest

from fluidtransport.common.exceptions import MissingTransportData
from fluidtransport.viscosity.impl.friction_theory import (
    friction_coefficients,
    viscosity_higher_order_friction_theory,
)
from fluidtransport.viscosity.impl.params import FluidTransport, ViscosityModel
from fluidtransport.viscosity.impl.registry import build
from fluidtransport.viscosity.impl.state import FluidState

ZERO = [0.0, 0.0, 0.0]


def build_friction_fluid(**coeffs):
    params = {
        "model": "friction_theory",
        "T_reduce": 150.0,
        "c1": 0.0,
        "c2": 0.0,
        "Ai": ZERO,
        "Aa": ZERO,
        "Ar": ZERO,
        "Aaa": ZERO,
        "Arr": ZERO,
        "Na": 1,
        "Nr": 1,
        "Naa": 2,
        "Nrr": 2,
    }
    params.update(coeffs)
    viscosity = ViscosityModel(higher_order=build("friction_theory", params))
    return FluidTransport(name="ft", molar_mass=0.044, viscosity=viscosity)


def ideal_gas_state(fluid, T, rhomolar):
    R = 8.3144598
    return FluidState.pure(fluid, T=T, rhomolar=rhomolar, p=rhomolar * R * T, dpdT_constrho=rhomolar * R, R=R)


def test_ideal_gas_only_feels_ideal_pressure_terms():
    # ideal gas: pr == pid, so pa == 0 and deltapr == 0
    fluid = build_friction_fluid(Ai=[1.0e-7, 0.0, 0.0], Aa=[5.0, 0.0, 0.0], Ar=[5.0, 0.0, 0.0])
    state = ideal_gas_state(fluid, T=300.0, rhomolar=1000.0)
    pid_bar = 1000.0 * 8.3144598 * 300.0 * 1e-5
    expected = 1.0e-7 * 0.5 * pid_bar
    assert viscosity_higher_order_friction_theory(state) == pytest.approx(expected, rel=1e-10)


def test_attractive_and_repulsive_pressures():
    fluid = build_friction_fluid(Aa=[2.0e-8, 0.0, 0.0], Ar=[3.0e-8, 0.0, 0.0], Aaa=[1.0e-9, 0.0, 0.0])
    T, rho, R = 300.0, 1000.0, 8.3144598
    p = 20.0e5
    dpdT = 1.2e4
    state = FluidState.pure(fluid, T=T, rhomolar=rho, p=p, dpdT_constrho=dpdT, R=R)

    tau = 0.5
    pr = T * dpdT * 1e-5
    pa = p * 1e-5 - pr
    pid = rho * R * T * 1e-5
    expected = 2.0e-8 * tau * pa + 3.0e-8 * tau * (pr - pid) + 1.0e-9 * tau ** 2 * pa ** 2
    assert viscosity_higher_order_friction_theory(state) == pytest.approx(expected, rel=1e-10)


def test_psi_functions_and_exclusive_quadratic_repulsive_terms():
    fluid = build_friction_fluid(
        c1=1.0,
        c2=0.5,
        Ai=[0.0, 1.0e-7, 2.0e-7],
        Arr=None,
        Adrdr=[4.0e-9, 0.0, 0.0],
    )
    k = friction_coefficients(fluid.viscosity.higher_order, 300.0)
    tau = 0.5
    psi1 = exp(tau) - 1.0
    psi2 = exp(tau ** 2) - 0.5
    assert k["ki"] == pytest.approx((1.0e-7 * psi1 + 2.0e-7 * psi2) * tau, rel=1e-12)
    assert k["krr"] == 0.0
    assert k["kdrdr"] == pytest.approx(4.0e-9 * tau ** 2, rel=1e-12)

    fluid = build_friction_fluid(Arr=[4.0e-9, 0.0, 0.0], Adrdr=[1.0, 1.0, 1.0])
    k = friction_coefficients(fluid.viscosity.higher_order, 300.0)
    assert k["kdrdr"] == 0.0
    assert k["krr"] == pytest.approx(4.0e-9 * 0.25, rel=1e-12)


def test_cubic_terms_need_both_coefficient_sets():
    fluid = build_friction_fluid(Arrr=[1.0, 0.0, 0.0], Nrrr=3)
    k = friction_coefficients(fluid.viscosity.higher_order, 300.0)
    assert k["krrr"] == 0.0 and k["kaaa"] == 0.0

    fluid = build_friction_fluid(Arrr=[1.0, 0.0, 0.0], Aaaa=[2.0, 0.0, 0.0], Nrrr=3, Naaa=3)
    k = friction_coefficients(fluid.viscosity.higher_order, 300.0)
    assert k["krrr"] == pytest.approx(0.125)
    assert k["kaaa"] == pytest.approx(0.25)


def test_requires_pressure_and_derivative():
    fluid = build_friction_fluid(Ai=[1.0e-7, 0.0, 0.0])
    with pytest.raises(MissingTransportData):
        viscosity_higher_order_friction_theory(FluidState.pure(fluid, T=300.0, rhomolar=10.0))


def test_invalid_coefficient_shapes():
    with pytest.raises(ValueError):
        build_friction_fluid(Ai=[1.0, 2.0])
    with pytest.raises(ValueError):
        build_friction_fluid(Arr=None)
