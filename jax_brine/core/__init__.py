"""Core property correlations for water, NaCl brine and porous membranes."""

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
from jax_brine.core.diagnostics import (
    DiagnosticsConfig,
    DEFAULT_DIAGNOSTICS,
    QUIET_DIAGNOSTICS,
)
from jax_brine.core.units import (
    mass_fraction_to_molality,
    molality_to_mass_fraction,
    mass_fraction_to_mole_fraction,
    mass_fractions_to_mole_fractions,
    to_kelvin,
    to_celsius,
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
from jax_brine.core.membrane import (
    thermal_conductivity_maxwell,
    resolve_membrane,
)

__all__ = [
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
    "DEFAULT_DIAGNOSTICS",
    "QUIET_DIAGNOSTICS",
    "mass_fraction_to_molality",
    "molality_to_mass_fraction",
    "mass_fraction_to_mole_fraction",
    "mass_fractions_to_mole_fractions",
    "to_kelvin",
    "to_celsius",
    "saturation_pressure_water",
    "latent_heat_water",
    "solubility_nacl",
    "thermal_conductivity_brine",
    "activity_coefficient_water",
    "vapor_pressure_brine",
    "density_brine",
    "viscosity_brine",
    "thermal_conductivity_maxwell",
    "resolve_membrane",
]
