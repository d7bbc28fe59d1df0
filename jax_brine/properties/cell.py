"""Evaluation of all brine properties for one mesh cell.

A host solver typically needs every property of a cell at once inside its
per-cell update. ``evaluate_brine_properties`` computes the full set from
temperature and salinity; ``make_property_fn`` returns the same computation
with the configuration captured in a closure, ready for ``jax.jit`` and
``jax.vmap`` over all cells.
"""

from typing import Callable, Optional

import jax.numpy as jnp
import numpy as np

from jax_brine.core.brine import (
    CONDUCTIVITY_MAX_MOLALITY,
    CONDUCTIVITY_T_RANGE_K,
    DENSITY_T_RANGE_C,
    SOLUBILITY_T_RANGE,
    VISCOSITY_T_RANGE_C,
    VISCOSITY_W_RANGE,
    density_brine,
    solubility_nacl,
    thermal_conductivity_brine,
    vapor_pressure_brine,
    viscosity_brine,
)
from jax_brine.core.membrane import thermal_conductivity_maxwell
from jax_brine.core.types import ZERO_CELSIUS_IN_KELVIN, BrineProperties
from jax_brine.core.units import (
    MW_NACL,
    TemperatureLike,
    mass_fraction_to_molality,
    to_celsius,
    to_kelvin,
)
from jax_brine.core.water import latent_heat_water, saturation_pressure_water
from jax_brine.properties.config import BrinePropertyConfig

PropertyFn = Callable[[jnp.ndarray, jnp.ndarray], BrineProperties]


def evaluate_brine_properties(
    T: TemperatureLike,
    w_nacl: jnp.ndarray,
    config: Optional[BrinePropertyConfig] = None,
) -> BrineProperties:
    """Compute every brine property of a cell.

    Args:
        T: Temperature [K].
        w_nacl: Mass fraction of NaCl.
        config: Property configuration. Defaults to ``BrinePropertyConfig()``.

    Returns:
        BrineProperties for the cell (arrays broadcast over batched inputs).
    """
    if config is None:
        config = BrinePropertyConfig()
    diagnostics = config.diagnostics

    T_K = to_kelvin(T)
    t_C = to_celsius(T_K, raw="K")
    w = jnp.asarray(w_nacl)

    return BrineProperties(
        temperature=T_K,
        mass_fraction_nacl=w,
        molality=mass_fraction_to_molality(w),
        saturation_pressure=saturation_pressure_water(T_K),
        vapor_pressure=vapor_pressure_brine(T_K, 1.0 - w),
        solubility=solubility_nacl(T_K, diagnostics),
        latent_heat=latent_heat_water(T_K),
        density=density_brine(T_K, w, diagnostics),
        viscosity=viscosity_brine(t_C, w, diagnostics),
        thermal_conductivity=thermal_conductivity_brine(T_K, w, diagnostics),
        membrane_conductivity=thermal_conductivity_maxwell(
            T_K, config.porosity, config.membrane, config.gas_model
        ),
    )


def make_property_fn(config: BrinePropertyConfig) -> PropertyFn:
    """Create a JIT-compilable property function with the config baked in.

    Usage:
        config = create_default_property_config(membrane="PTFE")
        props_fn = jax.jit(jax.vmap(make_property_fn(config)))
        props = props_fn(cell_temperatures, cell_mass_fractions)

    Args:
        config: Property configuration (captured in closure).

    Returns:
        A pure function (T [K], w_nacl) -> BrineProperties.
    """

    def property_fn(T: jnp.ndarray, w_nacl: jnp.ndarray) -> BrineProperties:
        return evaluate_brine_properties(T, w_nacl, config)

    return property_fn


def validate_inputs(
    T: TemperatureLike,
    w_nacl: jnp.ndarray,
    config: Optional[BrinePropertyConfig] = None,
) -> list[str]:
    """Check cell inputs against the validated range of every correlation.

    Host-side counterpart of the in-graph range diagnostics: nothing is
    logged, all problems are returned at once.

    Args:
        T: Temperature [K].
        w_nacl: Mass fraction of NaCl.
        config: Property configuration (selects the optional viscosity
            temperature check).

    Returns:
        List of warning/error messages (empty if every input is in range).
    """
    if config is None:
        config = BrinePropertyConfig()
    warnings = []

    T_K = np.atleast_1d(np.asarray(to_kelvin(T)))
    t_C = T_K - ZERO_CELSIUS_IN_KELVIN
    w = np.atleast_1d(np.asarray(w_nacl))

    if np.any((w < 0.0) | (w >= 1.0)):
        warnings.append("NaCl mass fraction must be in [0, 1)")
        return warnings

    m = w / (1.0 - w) / MW_NACL * 1000.0

    low, high = SOLUBILITY_T_RANGE
    if np.any((T_K < low) | (T_K > high)):
        warnings.append(f"Solubility: temperature outside [{low:g}, {high:g}] K")
    low, high = CONDUCTIVITY_T_RANGE_K
    if np.any((T_K < low) | (T_K > high)):
        warnings.append(f"Thermal conductivity: temperature outside [{low:g}, {high:g}] K")
    if np.any(m > CONDUCTIVITY_MAX_MOLALITY):
        warnings.append(
            f"Thermal conductivity: molality {m.max():.3g} mol/kg above {CONDUCTIVITY_MAX_MOLALITY:g}"
        )
    low, high = DENSITY_T_RANGE_C
    if np.any((t_C < low) | (t_C > high)):
        warnings.append(f"Density: temperature outside [{low:g}, {high:g}] C")
    low, high = VISCOSITY_W_RANGE
    if np.any((w < low) | (w > high)):
        warnings.append(f"Viscosity: mass fraction outside [{low:g}, {high:g}]")
    if config.diagnostics.check_viscosity_temperature:
        low, high = VISCOSITY_T_RANGE_C
        if np.any((t_C < low) | (t_C > high)):
            warnings.append(f"Viscosity: temperature outside [{low:g}, {high:g}] C")

    return warnings
