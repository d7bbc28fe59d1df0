#!/usr/bin/env python3
"""Basic property evaluation example.

This script demonstrates how to:
1. Evaluate single correlations for water and NaCl brine
2. Evaluate every property of a cell at once
3. Catch out-of-range inputs before a run

Run with: python examples/basic_properties.py
"""

import logging

import jax.numpy as jnp

from jax_brine import (
    Celsius,
    Membrane,
    density_brine,
    latent_heat_water,
    saturation_pressure_water,
    thermal_conductivity_maxwell,
    vapor_pressure_brine,
    viscosity_brine,
)
from jax_brine.properties import (
    create_default_property_config,
    evaluate_brine_properties,
    validate_inputs,
)


def main():
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    print("=" * 60)
    print("Brine Property Correlations")
    print("=" * 60)

    # Seawater-like feed at 60 °C
    T = 333.15
    w_nacl = 0.035

    print(f"\nFeed: T = {T:.2f} K, w_NaCl = {w_nacl}")
    print(f"  P_sat(water)     = {float(saturation_pressure_water(T)):10.1f} Pa")
    print(f"  P_vap(brine)     = {float(vapor_pressure_brine(T, 1.0 - w_nacl)):10.1f} Pa")
    print(f"  latent heat      = {float(latent_heat_water(T)) / 1e3:10.1f} kJ/kg")
    print(f"  density          = {float(density_brine(T, w_nacl)):10.2f} kg/m^3")
    print(f"  viscosity        = {float(viscosity_brine(Celsius(value=60.0), w_nacl)):10.3e} Pa s")
    print(f"  k_membrane(PTFE) = {float(thermal_conductivity_maxwell(T, 0.8, Membrane.PTFE)):10.4f} W/m/K")

    print("\n--- All properties of one cell ---")
    config = create_default_property_config(membrane="PTFE", porosity=0.8)
    props = evaluate_brine_properties(T, w_nacl, config)
    for name, value in props.items():
        print(f"  {name:<24} {float(value):.6g}")

    print("\n--- Input validation ---")
    T_cells = jnp.array([300.0, 340.0, 380.0])
    w_cells = jnp.array([0.035, 0.12, 0.28])
    problems = validate_inputs(T_cells, w_cells, config)
    if problems:
        for problem in problems:
            print(f"  - {problem}")
    else:
        print("  All inputs in range")

    print("\n--- Out-of-range evaluation (logged, not raised) ---")
    evaluate_brine_properties(T_cells, w_cells, config)


if __name__ == "__main__":
    main()
