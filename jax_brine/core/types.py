"""JAX-compatible dataclasses and selectors for the property correlations."""

from enum import Enum, IntEnum

import chex
import jax.numpy as jnp

ZERO_CELSIUS_IN_KELVIN = 273.15


@chex.dataclass
class Kelvin:
    """Temperature tagged as Kelvin.

    Attributes:
        value: Temperature [K].
    """

    value: chex.Array  # [K]

    def to_celsius(self) -> "Celsius":
        return Celsius(value=jnp.asarray(self.value) - ZERO_CELSIUS_IN_KELVIN)


@chex.dataclass
class Celsius:
    """Temperature tagged as degrees Celsius.

    Attributes:
        value: Temperature [°C].
    """

    value: chex.Array  # [°C]

    def to_kelvin(self) -> Kelvin:
        return Kelvin(value=jnp.asarray(self.value) + ZERO_CELSIUS_IN_KELVIN)


class Membrane(IntEnum):
    """Membrane materials with tabulated solid-phase conductivity.

    The integer values are the material codes accepted by
    ``thermal_conductivity_maxwell`` and index its coefficient tables.
    """

    PVDF = 0
    PTFE = 1
    PP = 2
    PES = 3


class GasConductivityModel(Enum):
    """Correlations for the conductivity of the air/vapor trapped in the pores."""

    BAHMANYAR = "bahmanyar"  # 2.72e-3 + 7.77e-5 T
    JONSSON = "jonsson"  # 1.5e-3 sqrt(T)


@chex.dataclass
class BrineProperties:
    """All brine properties of one cell (or a batch of cells).

    Attributes:
        temperature: Temperature [K].
        mass_fraction_nacl: Mass fraction of NaCl [kg/kg].
        molality: NaCl molality [mol/kg water].
        saturation_pressure: Saturation pressure of pure water [Pa].
        vapor_pressure: Water vapor pressure over the brine [Pa].
        solubility: Saturated mass fraction of NaCl [kg/kg].
        latent_heat: Latent heat of evaporation [J/kg].
        density: Brine density [kg/m^3].
        viscosity: Brine dynamic viscosity [Pa s].
        thermal_conductivity: Brine thermal conductivity [W/m/K].
        membrane_conductivity: Effective conductivity of the porous membrane [W/m/K].
    """

    temperature: chex.Array  # [K]
    mass_fraction_nacl: chex.Array  # [kg/kg]
    molality: chex.Array  # [mol/kg]
    saturation_pressure: chex.Array  # [Pa]
    vapor_pressure: chex.Array  # [Pa]
    solubility: chex.Array  # [kg/kg]
    latent_heat: chex.Array  # [J/kg]
    density: chex.Array  # [kg/m^3]
    viscosity: chex.Array  # [Pa s]
    thermal_conductivity: chex.Array  # [W/m/K]
    membrane_conductivity: chex.Array  # [W/m/K]
