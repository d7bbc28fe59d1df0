"""Unit and composition conversions.

Temperatures may be passed either as tagged ``Kelvin`` / ``Celsius`` values
or as raw arrays. A raw array is taken to be in the unit the receiving
correlation was fitted in; tagged values are converted explicitly.

Composition conversions:
- NaCl mass fraction <-> molality
- N-component mass fractions -> mole fractions
"""

from typing import Literal, Sequence, Union

import jax.numpy as jnp
import numpy as np

from jax_brine.core.diagnostics import concrete_or_none
from jax_brine.core.exceptions import DomainError
from jax_brine.core.types import Celsius, Kelvin, ZERO_CELSIUS_IN_KELVIN

# Molar masses [g/mol]
MW_WATER = 18.01534
MW_NACL = 58.4428

TemperatureLike = Union[Kelvin, Celsius, jnp.ndarray, float]


# =============================================================================
# Temperature
# =============================================================================


def kelvin_to_celsius(T: jnp.ndarray) -> jnp.ndarray:
    return jnp.asarray(T) - ZERO_CELSIUS_IN_KELVIN


def celsius_to_kelvin(t: jnp.ndarray) -> jnp.ndarray:
    return jnp.asarray(t) + ZERO_CELSIUS_IN_KELVIN


def to_kelvin(T: TemperatureLike, raw: Literal["K", "C"] = "K") -> jnp.ndarray:
    """Return a temperature in Kelvin.

    Args:
        T: Tagged temperature or raw array.
        raw: Unit of ``T`` when it is a raw array.

    Returns:
        Temperature [K].
    """
    if isinstance(T, Kelvin):
        return jnp.asarray(T.value)
    if isinstance(T, Celsius):
        return celsius_to_kelvin(T.value)
    if raw == "C":
        return celsius_to_kelvin(T)
    return jnp.asarray(T)


def to_celsius(T: TemperatureLike, raw: Literal["K", "C"] = "C") -> jnp.ndarray:
    """Return a temperature in degrees Celsius.

    Args:
        T: Tagged temperature or raw array.
        raw: Unit of ``T`` when it is a raw array.

    Returns:
        Temperature [°C].
    """
    if isinstance(T, Celsius):
        return jnp.asarray(T.value)
    if isinstance(T, Kelvin):
        return kelvin_to_celsius(T.value)
    if raw == "K":
        return kelvin_to_celsius(T)
    return jnp.asarray(T)


# =============================================================================
# Composition
# =============================================================================


def mass_fraction_to_molality(w_nacl: jnp.ndarray) -> jnp.ndarray:
    """Convert the NaCl mass fraction into molality.

    m = (mol of NaCl) / (kg of water) = w / (1 - w) / MW_NaCl * 1000

    Args:
        w_nacl: Mass fraction of NaCl, must lie in [0, 1).

    Returns:
        Molality [mol/kg].

    Raises:
        DomainError: If a concrete input reaches w >= 1. Traced inputs are
            not checked and give inf (w = 1) or negative values (w > 1).
    """
    w_host = concrete_or_none(w_nacl)
    if w_host is not None and np.any(w_host >= 1.0):
        raise DomainError(
            f"Molality is undefined for NaCl mass fraction >= 1 (got {w_host.max():g})"
        )
    w = jnp.asarray(w_nacl)
    return w / (1.0 - w) / MW_NACL * 1000.0


def molality_to_mass_fraction(m: jnp.ndarray) -> jnp.ndarray:
    """Convert NaCl molality [mol/kg] into the NaCl mass fraction."""
    solute = jnp.asarray(m) * MW_NACL / 1000.0
    return solute / (1.0 + solute)


def _component_axis_weights(
    molar_weights: jnp.ndarray, mass_fractions: jnp.ndarray
) -> jnp.ndarray:
    """Broadcast molar weights over any trailing (cell) axes of mass_fractions."""
    n_components = molar_weights.shape[0]
    if mass_fractions.ndim == 0 or mass_fractions.shape[0] != n_components:
        raise ValueError(
            f"Expected {n_components} mass fractions along axis 0, "
            f"got shape {mass_fractions.shape}"
        )
    return molar_weights.reshape((n_components,) + (1,) * (mass_fractions.ndim - 1))


def mass_fractions_to_mole_fractions(
    molar_weights: Union[Sequence[float], jnp.ndarray],
    mass_fractions: Union[Sequence[float], jnp.ndarray],
) -> jnp.ndarray:
    """Convert the mass fractions of a mixture into mole fractions.

    Args:
        molar_weights: Molar weight of each component [g/mol], shape (n,).
        mass_fractions: Mass fraction of each component, shape (n, ...).
            Trailing axes are treated as independent cells.

    Returns:
        Mole fractions with the shape of ``mass_fractions``; they sum to 1
        along axis 0.
    """
    mw = jnp.asarray(molar_weights)
    w = jnp.asarray(mass_fractions)
    if mw.ndim != 1 or mw.shape[0] < 1:
        raise ValueError("molar_weights must be a non-empty 1-D sequence")
    moles = w / _component_axis_weights(mw, w)
    return moles / jnp.sum(moles, axis=0)


def mass_fraction_to_mole_fraction(
    component_index: int,
    molar_weights: Union[Sequence[float], jnp.ndarray],
    mass_fractions: Union[Sequence[float], jnp.ndarray],
) -> jnp.ndarray:
    """Convert the mass fraction of one component into its mole fraction.

    x_k = (w_k / MW_k) / sum_i (w_i / MW_i)

    The mass fractions are expected to sum to one; this is not enforced.

    Args:
        component_index: Index of the requested component.
        molar_weights: Molar weight of each component [g/mol], shape (n,).
        mass_fractions: Mass fraction of each component, shape (n, ...).

    Returns:
        Mole fraction of component ``component_index``.
    """
    n_components = len(molar_weights)
    if not 0 <= component_index < n_components:
        raise IndexError(
            f"component_index {component_index} out of range for {n_components} components"
        )
    return mass_fractions_to_mole_fractions(molar_weights, mass_fractions)[component_index]
