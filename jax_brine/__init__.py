"""JAX-native property correlations for water, NaCl brine and porous membranes.

This package provides:
- Closed-form correlations for saturation pressure, vapor pressure over
  brine, solubility, latent heat, density, viscosity and thermal conductivity
- Maxwell-model conductivity of porous distillation membranes
- Full JIT-compilability and vmap-compatibility for per-cell solver updates
- Range diagnostics routed to an injected logger
- Validation against literature reference data

Quick start:
    >>> from jax_brine import density_brine, vapor_pressure_brine
    >>> rho = density_brine(298.15, 0.05)  # [kg/m^3]
    >>> p = vapor_pressure_brine(333.15, 0.965)  # [Pa]

For all properties of many cells:
    >>> import jax
    >>> from jax_brine.properties import create_default_property_config, make_property_fn
    >>> config = create_default_property_config(membrane="PTFE", porosity=0.8)
    >>> props_fn = jax.jit(jax.vmap(make_property_fn(config)))
    >>> props = props_fn(cell_temperatures, cell_mass_fractions)
"""

__version__ = "0.1.0"

# Core types
from jax_brine.core.types import (
    Kelvin,
    Celsius,
    Membrane,
    GasConductivityModel,
    BrineProperties,
)
from jax_brine.core.exceptions import (
    BrinePropertyError,
    InvalidSelectorError,
    DomainError,
    OutOfRangeWarning,
)
from jax_brine.core.diagnostics import DiagnosticsConfig

# Correlations
from jax_brine.core.units import (
    mass_fraction_to_molality,
    mass_fraction_to_mole_fraction,
)
from jax_brine.core.water import (
    saturation_pressure_water,
    latent_heat_water,
)
from jax_brine.core.brine import (
    solubility_nacl,
    thermal_conductivity_brine,
    activity_coefficient_water,
    vapor_pressure_brine,
    density_brine,
    viscosity_brine,
)
from jax_brine.core.membrane import thermal_conductivity_maxwell

# Per-cell evaluation
from jax_brine.properties import (
    BrinePropertyConfig,
    create_default_property_config,
    evaluate_brine_properties,
    make_property_fn,
)

__all__ = [
    # Version
    "__version__",
    # Core types
    "Kelvin",
    "Celsius",
    "Membrane",
    "GasConductivityModel",
    "BrineProperties",
    "BrinePropertyError",
    "InvalidSelectorError",
    "DomainError",
    "OutOfRangeWarning",
    "DiagnosticsConfig",
    # Correlations
    "mass_fraction_to_molality",
    "mass_fraction_to_mole_fraction",
    "saturation_pressure_water",
    "latent_heat_water",
    "solubility_nacl",
    "thermal_conductivity_brine",
    "activity_coefficient_water",
    "vapor_pressure_brine",
    "density_brine",
    "viscosity_brine",
    "thermal_conductivity_maxwell",
    # Per-cell evaluation
    "BrinePropertyConfig",
    "create_default_property_config",
    "evaluate_brine_properties",
    "make_property_fn",
]
