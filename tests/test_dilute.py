import pytest

from fluidtransport.common.exceptions import MissingTransportData, MixtureNotSupported
from fluidtransport.viscosity.impl import dilute
from fluidtransport.viscosity.impl.params import FluidTransport, ViscosityModel
from fluidtransport.viscosity.impl.registry import build
from fluidtransport.viscosity.impl.state import FluidState

N2_A = [0.431, -0.4623, 0.08406, 0.005341, -0.00331]


def build_nitrogen(dilute_params=None):
    viscosity = ViscosityModel()
    if dilute_params is not None:
        viscosity.dilute = build(dilute_params["model"], dilute_params)
    return FluidTransport(
        name="N2",
        molar_mass=0.02801348,
        epsilon_over_k=98.94,
        sigma_eta=0.3656e-9,
        viscosity=viscosity,
    )


def test_kinetic_theory_nitrogen_300K():
    fluid = build_nitrogen({"model": "kinetic_theory"})
    state = FluidState.pure(fluid, T=300.0, rhomolar=0.0)
    eta = dilute.viscosity_dilute_kinetic_theory(state)
    assert eta == pytest.approx(17.66e-6, rel=1e-3)


def test_neufeld_collision_integral_decreases_with_temperature():
    values = [dilute.omega22_neufeld(Tstar) for Tstar in (0.5, 1.0, 3.0, 10.0, 50.0)]
    assert all(a > b for a, b in zip(values, values[1:]))
    assert abs(dilute.omega22_neufeld(1.0) - 1.5925) < 1e-3


def test_collision_integral_nitrogen_300K():
    fluid = build_nitrogen(
        {"model": "collision_integral", "a": N2_A, "t": [0, 1, 2, 3, 4], "C": 0.0266958e-6, "molar_mass": 28.01348}
    )
    state = FluidState.pure(fluid, T=300.0, rhomolar=40.0)
    assert dilute.viscosity_dilute_collision_integral(state) == pytest.approx(17.877e-6, rel=1e-3)


def test_dilute_terms_do_not_depend_on_density():
    fluid = build_nitrogen(
        {"model": "collision_integral", "a": N2_A, "t": [0, 1, 2, 3, 4], "C": 0.0266958e-6, "molar_mass": 28.01348}
    )
    low = dilute.viscosity_dilute_collision_integral(FluidState.pure(fluid, T=250.0, rhomolar=0.0))
    high = dilute.viscosity_dilute_collision_integral(FluidState.pure(fluid, T=250.0, rhomolar=20000.0))
    assert low == high


def test_powers_of_T():
    fluid = build_nitrogen({"model": "powers_of_T", "a": [1.0e-6, 2.0e-8], "t": [0, 1]})
    state = FluidState.pure(fluid, T=300.0, rhomolar=0.0)
    assert abs(dilute.viscosity_dilute_powers_of_T(state) - 7.0e-6) < 1e-18


def test_collision_integral_powers_of_T_matches_kinetic_theory_constant():
    # Omega == 1 leaves the bare Chapman-Enskog prefactor, 26.692e-9 sqrt(M T)/sigma_nm^2
    fluid = build_nitrogen({"model": "collision_integral_powers_of_T", "a": [1.0], "t": [0]})
    state = FluidState.pure(fluid, T=300.0, rhomolar=0.0)
    expected = 26.692e-9 * (28.01348 * 300.0) ** 0.5 / 0.3656 ** 2
    assert dilute.viscosity_dilute_collision_integral_powers_of_T(state) == pytest.approx(expected, rel=1e-3)


def test_mixture_is_rejected():
    fluid = build_nitrogen({"model": "kinetic_theory"})
    state = FluidState(T=300.0, rhomolar=1.0, components=[fluid, fluid], mole_fractions=[0.5, 0.5])
    for routine in dilute.DILUTE_ROUTINES.values():
        with pytest.raises(MixtureNotSupported):
            routine(state)


def test_missing_block_or_lennard_jones_data():
    fluid = build_nitrogen({"model": "kinetic_theory"})
    state = FluidState.pure(fluid, T=300.0, rhomolar=0.0)
    with pytest.raises(MissingTransportData):
        dilute.viscosity_dilute_collision_integral(state)

    bare = FluidTransport(name="X", molar_mass=0.028)
    with pytest.raises(MissingTransportData):
        dilute.viscosity_dilute_kinetic_theory(FluidState.pure(bare, T=300.0, rhomolar=0.0))


def test_coefficient_length_mismatch():
    with pytest.raises(ValueError):
        build("powers_of_T", {"a": [1.0, 2.0], "t": [0]})


def test_state_validation():
    fluid = build_nitrogen({"model": "kinetic_theory"})
    with pytest.raises(ValueError):
        FluidState.pure(fluid, T=0.0, rhomolar=1.0)
    with pytest.raises(ValueError):
        FluidState.pure(fluid, T=300.0, rhomolar=-1.0)
    with pytest.raises(ValueError):
        FluidState(T=300.0, rhomolar=1.0, components=[fluid], mole_fractions=[0.5, 0.5])

    state = FluidState(T=300.0, rhomolar=2.0, components=[fluid, fluid], mole_fractions=[1.0, 3.0])
    assert state.mole_fractions == [0.25, 0.75]
    assert not state.is_pure_or_pseudopure
    assert abs(state.rhomass - 2.0 * 0.02801348) < 1e-15


def test_collision_integral_powers_of_T_with_own_constant():
    block = build(
        "collision_integral_powers_of_T",
        {"a": [1.0, 0.5], "t": [0, 1], "C": 1.0e-6, "T_reducing": 100.0},
    )
    # no Lennard-Jones parameters on the fluid
    fluid = FluidTransport(name="H2S", molar_mass=0.034081, viscosity=ViscosityModel(dilute=block))
    state = FluidState.pure(fluid, T=300.0, rhomolar=0.0)
    expected = 1.0e-6 * 300.0 ** 0.5 / (1.0 + 0.5 * 3.0)
    assert dilute.viscosity_dilute_collision_integral_powers_of_T(state) == pytest.approx(expected, rel=1e-12)

    with pytest.raises(ValueError):
        build("collision_integral_powers_of_T", {"a": [1.0], "t": [0], "C": 1.0e-6})


def test_negative_mole_fractions_are_rejected():
    fluid = build_nitrogen({"model": "kinetic_theory"})
    for fractions in ([2.0, -1.0], [1.0, -1.0]):
        with pytest.raises(ValueError, match="non-negative"):
            FluidState(T=300.0, rhomolar=1.0, components=[fluid, fluid], mole_fractions=fractions)
    with pytest.raises(ValueError, match="all zero"):
        FluidState(T=300.0, rhomolar=1.0, components=[fluid, fluid], mole_fractions=[0.0, 0.0])
