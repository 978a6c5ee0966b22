import argparse
import logging

from fluidtransport.viscosity import FluidState, TransportRoutines, load_fluid_from_json


def main():
    parser = argparse.ArgumentParser(description="Evaluate the viscosity of a fluid transport file at (T, rho).")
    parser.add_argument("fluid", help="fluid JSON, e.g. data/fluids/nitrogen.json")
    parser.add_argument("--T", type=float, required=True, help="temperature [K]")
    parser.add_argument("--rhomolar", type=float, required=True, help="molar density [mol/m^3]")
    parser.add_argument("--p", type=float, default=None, help="pressure [Pa], needed by friction theory")
    parser.add_argument("--dpdT", type=float, default=None, help="(dp/dT)_rho [Pa/K], needed by friction theory")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    fluid = load_fluid_from_json(args.fluid)
    state = FluidState.pure(fluid, T=args.T, rhomolar=args.rhomolar, p=args.p, dpdT_constrho=args.dpdT)
    out = TransportRoutines.viscosity_contributions(state)
    print(f"[Viscosity] {fluid.name} T={args.T} K, rho={args.rhomolar} mol/m^3")
    for name, value in out.items():
        print(f"  {name:16s} {value:.6e} Pa·s")


if __name__ == "__main__":
    main()
