"""Effective thermal conductivity of porous membranes.

Maxwell model for a solid membrane matrix with gas-filled pores, valid for
porosities above about 60 % (Garcia-Payo and Izquierdo-Gil, J. Phys. D 37
(2004) 3008; reviewed by Hitsov et al., Sep. Purif. Technol. 142 (2015) 48).

Material and gas-model selectors are resolved in Python before tracing, so an
unknown selector raises ``InvalidSelectorError`` instead of silently falling
back to another material.
"""

from typing import Union

import jax.numpy as jnp
import numpy as np

from jax_brine.core.exceptions import InvalidSelectorError
from jax_brine.core.types import GasConductivityModel, Membrane
from jax_brine.core.units import TemperatureLike, to_kelvin

MembraneLike = Union[Membrane, int, str]
GasModelLike = Union[GasConductivityModel, str]

# Solid-phase conductivity k_s = A * 1e-4 * T + B * 1e-2, indexed by Membrane
SOLID_CONDUCTIVITY_A = jnp.array([5.769, 5.769, 12.5, 4.167])
SOLID_CONDUCTIVITY_B = jnp.array([0.9144, 8.914, -23.51, 1.452])


def resolve_membrane(material: MembraneLike) -> Membrane:
    """Map a material code, name or ``Membrane`` onto a ``Membrane``.

    Raises:
        InvalidSelectorError: If the code does not name a known material.
    """
    if isinstance(material, Membrane):
        return material
    if isinstance(material, str):
        try:
            return Membrane[material.strip().upper()]
        except KeyError:
            pass
    elif isinstance(material, (int, np.integer)) and not isinstance(material, bool):
        try:
            return Membrane(int(material))
        except ValueError:
            pass
    known = ", ".join(f"{m.value}={m.name}" for m in Membrane)
    raise InvalidSelectorError(
        f"Unknown membrane material {material!r}. Known materials: {known}"
    )


def resolve_gas_model(model: GasModelLike) -> GasConductivityModel:
    """Map a model name or ``GasConductivityModel`` onto a ``GasConductivityModel``.

    Raises:
        InvalidSelectorError: If the name does not match a known model.
    """
    if isinstance(model, GasConductivityModel):
        return model
    if isinstance(model, str):
        try:
            return GasConductivityModel(model.strip().lower())
        except ValueError:
            pass
    known = ", ".join(m.value for m in GasConductivityModel)
    raise InvalidSelectorError(f"Unknown gas conductivity model {model!r}. Known models: {known}")


def gas_thermal_conductivity(
    T: TemperatureLike,
    model: GasModelLike = GasConductivityModel.BAHMANYAR,
) -> jnp.ndarray:
    """Conductivity of the air and vapor trapped in the pores.

    Args:
        T: Temperature [K].
        model: BAHMANYAR (linear fit, default) or JONSSON (square-root fit).

    Returns:
        Gas conductivity [W/m/K].
    """
    T = to_kelvin(T)
    if resolve_gas_model(model) is GasConductivityModel.JONSSON:
        return 1.5e-3 * jnp.sqrt(T)
    return 2.72e-3 + 7.77e-5 * T


def solid_thermal_conductivity(T: TemperatureLike, material: MembraneLike) -> jnp.ndarray:
    """Conductivity of the membrane polymer.

    Args:
        T: Temperature [K].
        material: Membrane material (``Membrane``, code 0-3 or name).

    Returns:
        Solid conductivity [W/m/K].
    """
    T = to_kelvin(T)
    i = int(resolve_membrane(material))
    return SOLID_CONDUCTIVITY_A[i] * 1.0e-4 * T + SOLID_CONDUCTIVITY_B[i] * 1.0e-2


def thermal_conductivity_maxwell(
    T: TemperatureLike,
    porosity: jnp.ndarray,
    material: MembraneLike,
    gas_model: GasModelLike = GasConductivityModel.BAHMANYAR,
) -> jnp.ndarray:
    """Effective conductivity of a porous membrane (Maxwell model).

    beta = (k_s - k_g) / (k_s + 2 k_g)
    k = k_g (1 + 2 beta (1 - eps)) / (1 - beta (1 - eps))

    Args:
        T: Temperature [K].
        porosity: Void fraction of the membrane.
        material: Membrane material (``Membrane``, code 0-3 or name).
        gas_model: Gas-phase conductivity correlation.

    Returns:
        Effective thermal conductivity [W/m/K].

    Raises:
        InvalidSelectorError: If ``material`` or ``gas_model`` is unknown.
    """
    material = resolve_membrane(material)
    k_gas = gas_thermal_conductivity(T, gas_model)
    k_solid = solid_thermal_conductivity(T, material)
    solid_fraction = 1.0 - jnp.asarray(porosity)
    beta = (k_solid - k_gas) / (k_solid + 2.0 * k_gas)
    return k_gas * (1.0 + 2.0 * beta * solid_fraction) / (1.0 - beta * solid_fraction)
