"""Pure-water property correlations.

This module provides JIT-compilable functions for:
- Saturation pressure of water (Reynolds, 1979)
- Latent heat of evaporation (Drioli and Romano, 2001)

All functions are pure and compatible with JAX transformations (jit, vmap, grad).
"""

import jax.numpy as jnp

from jax_brine.core.units import TemperatureLike, to_kelvin


# =============================================================================
# Saturation Pressure
# =============================================================================

# Reynolds, Thermodynamic Properties in SI (1979)
PSAT_A = 0.01  # [1/K]
PSAT_T_REF = 338.15  # [K]
H2O_P_CRITICAL = 22.089e6  # [Pa]
H2O_T_CRITICAL = 647.286  # [K]

PSAT_COEFFICIENTS = jnp.array(
    [
        -7.4192420,
        2.97221e-1,
        -1.155286e-1,
        8.68563e-3,
        1.094098e-3,
        -4.39993e-3,
        2.520658e-3,
        -5.218684e-4,
    ]
)


def saturation_pressure_water(T: TemperatureLike) -> jnp.ndarray:
    """Calculate the saturation pressure of pure water.

    x = A (T - T_p)
    ln(P_sat / P_c) = (T_c / T - 1) * sum_{i=0}^{7} F_i x^i

    Args:
        T: Temperature [K].

    Returns:
        Saturation pressure [Pa].
    """
    T = to_kelvin(T)
    x = PSAT_A * (T - PSAT_T_REF)
    series = jnp.zeros_like(x)
    for i in range(PSAT_COEFFICIENTS.shape[0]):
        series = series + PSAT_COEFFICIENTS[i] * x**i
    return H2O_P_CRITICAL * jnp.exp(series * (H2O_T_CRITICAL / T - 1.0))


# =============================================================================
# Latent Heat
# =============================================================================


def latent_heat_water(T: TemperatureLike) -> jnp.ndarray:
    """Latent heat of water evaporation/condensation at 1 atm.

    h_fg = 1e3 * (1.7535 T + 2024.3)

    A raw temperature is used directly in the linear map; a ``Celsius``
    value is converted to Kelvin first.

    Args:
        T: Temperature [K].

    Returns:
        Latent heat [J/kg].
    """
    T = to_kelvin(T)
    return 1.0e3 * (1.7535 * T + 2024.3)
