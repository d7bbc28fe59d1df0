"""Aqueous NaCl (brine) property correlations.

This module provides JIT-compilable functions for:
- NaCl solubility (Sparrow, 2003)
- Brine thermal conductivity (Ramires et al., 1994)
- Water activity coefficient (Lawson and Lloyd)
- Water vapor pressure over brine
- Brine density (Sparrow, 2003)
- Brine viscosity

Correlations that are only valid over a limited range report out-of-range
inputs through ``jax_brine.core.diagnostics`` and return the extrapolated
value.
"""

import jax.numpy as jnp

from jax_brine.core.diagnostics import (
    DEFAULT_DIAGNOSTICS,
    DiagnosticsConfig,
    check_above,
    check_range,
)
from jax_brine.core.units import (
    MW_NACL,
    MW_WATER,
    TemperatureLike,
    mass_fraction_to_molality,
    mass_fraction_to_mole_fraction,
    to_celsius,
    to_kelvin,
)
from jax_brine.core.water import saturation_pressure_water

# Validated input ranges
SOLUBILITY_T_RANGE = (0.0, 450.0)  # compared against the Kelvin argument
CONDUCTIVITY_T_RANGE_K = (295.0, 365.0)
CONDUCTIVITY_MAX_MOLALITY = 6.0  # [mol/kg]
DENSITY_T_RANGE_C = (0.0, 300.0)
VISCOSITY_T_RANGE_C = (0.0, 80.0)
VISCOSITY_W_RANGE = (0.0, 0.25)


# =============================================================================
# Solubility
# =============================================================================

# Sparrow, Desalination 159 (2003) 161-170, eq. (5)
SOLUBILITY_COEFFICIENTS = jnp.array([0.2628, 62.75e-6, 1.084e-6])


def solubility_nacl(
    T: TemperatureLike,
    diagnostics: DiagnosticsConfig = DEFAULT_DIAGNOSTICS,
) -> jnp.ndarray:
    """Saturated NaCl concentration as a mass fraction.

    w_sat = sum_{i=0}^{2} A_i t^i, t in °C

    The range warning is not gated by the message level.

    Args:
        T: Temperature [K].
        diagnostics: Diagnostic policy.

    Returns:
        Saturated mass fraction of NaCl.
    """
    T = to_kelvin(T)
    check_range(
        T,
        *SOLUBILITY_T_RANGE,
        "Solubility correlation at %g K is out of temperature range.",
        diagnostics,
        gated=False,
    )
    t = to_celsius(T, raw="K")
    w_sat = jnp.zeros_like(t)
    for i in range(SOLUBILITY_COEFFICIENTS.shape[0]):
        w_sat = w_sat + SOLUBILITY_COEFFICIENTS[i] * t**i
    return w_sat


# =============================================================================
# Thermal Conductivity
# =============================================================================

# Ramires et al., J. Chem. Eng. Data 39 (1994), eq. (7); row i multiplies m^i
CONDUCTIVITY_COEFFICIENTS = jnp.array(
    [
        [0.5621, 0.00199, -8.6e-6],
        [-0.01394, 0.000294, -2.3e-6],
        [0.00177, -6.3e-5, 4.5e-7],
    ]
)


def thermal_conductivity_brine(
    T: TemperatureLike,
    w_nacl: jnp.ndarray,
    diagnostics: DiagnosticsConfig = DEFAULT_DIAGNOSTICS,
) -> jnp.ndarray:
    """Thermal conductivity of an aqueous NaCl solution.

    lambda = sum_i m^i sum_j a_ij t^j, with m the molality and t in °C

    Args:
        T: Temperature [K].
        w_nacl: Mass fraction of NaCl.
        diagnostics: Diagnostic policy.

    Returns:
        Thermal conductivity [W/m/K].
    """
    T = to_kelvin(T)
    m = mass_fraction_to_molality(w_nacl)
    check_range(
        T,
        *CONDUCTIVITY_T_RANGE_K,
        "Out of temperature range for %g K in thermal conductivity correlation",
        diagnostics,
    )
    check_above(
        m,
        CONDUCTIVITY_MAX_MOLALITY,
        "Out of molality range for %g mol/kg in thermal conductivity correlation",
        diagnostics,
    )
    t = to_celsius(T, raw="K")
    n = CONDUCTIVITY_COEFFICIENTS.shape[0]
    conductivity = jnp.zeros_like(t * m)
    for i in range(n):
        row = jnp.zeros_like(t)
        for j in range(n):
            row = row + CONDUCTIVITY_COEFFICIENTS[i, j] * t**j
        conductivity = conductivity + row * m**i
    return conductivity


# =============================================================================
# Activity and Vapor Pressure
# =============================================================================


def activity_coefficient_water(x_nv: jnp.ndarray) -> jnp.ndarray:
    """Activity coefficient of water in aqueous NaCl (Lawson and Lloyd).

    gamma = 1 - 0.5 x_nv - 10 x_nv^2

    Args:
        x_nv: Mole fraction of the nonvolatile solute.

    Returns:
        Dimensionless activity coefficient.
    """
    x_nv = jnp.asarray(x_nv)
    return 1.0 - 0.5 * x_nv - 10.0 * x_nv**2


BRINE_MOLAR_WEIGHTS = jnp.array([MW_WATER, MW_NACL])  # [water, NaCl]


def vapor_pressure_brine(T: TemperatureLike, w_water: jnp.ndarray) -> jnp.ndarray:
    """Water vapor pressure over an NaCl solution.

    p = (1 - x_nv) * gamma(x_nv) * P_sat(T)

    Args:
        T: Temperature [K].
        w_water: Mass fraction of water.

    Returns:
        Vapor pressure [Pa].
    """
    w_water = jnp.asarray(w_water)
    mass_fractions = jnp.stack([w_water, 1.0 - w_water])
    x_nv = 1.0 - mass_fraction_to_mole_fraction(0, BRINE_MOLAR_WEIGHTS, mass_fractions)
    gamma = activity_coefficient_water(x_nv)
    return (1.0 - x_nv) * gamma * saturation_pressure_water(T)


# =============================================================================
# Density
# =============================================================================

# Sparrow, Desalination 159 (2003) 161-170, eq. (7); row i multiplies t^i
DENSITY_COEFFICIENTS = jnp.array(
    [
        [1.001, 0.7666, -0.0149, 0.2663, 0.8845],
        [-0.0214, -3.496, 10.02, -6.56, -31.37],
        [-5.263, 39.87, 176.2, 363.5, -7.784],
        [15.42, -167.0, 980.7, -2573.0, 876.6],
        [-0.0276, 0.2978, -2.017, 6.345, -3.914],
    ]
)
DENSITY_ROW_SCALES = jnp.array([1.0e3, 1.0e0, 1.0e-3, 1.0e-6, 1.0e-6])


def density_brine(
    T: TemperatureLike,
    w_nacl: jnp.ndarray,
    diagnostics: DiagnosticsConfig = DEFAULT_DIAGNOSTICS,
) -> jnp.ndarray:
    """Density of an aqueous NaCl solution.

    rho = sum_i C_i t^i sum_j A_ij w^j, t in °C

    Args:
        T: Temperature [K].
        w_nacl: Mass fraction of NaCl.
        diagnostics: Diagnostic policy.

    Returns:
        Density [kg/m^3].
    """
    t = to_celsius(T, raw="K")
    w = jnp.asarray(w_nacl)
    check_range(
        t,
        *DENSITY_T_RANGE_C,
        "Density correlation at %g C is out of temperature range.",
        diagnostics,
    )
    n = DENSITY_COEFFICIENTS.shape[0]
    density = jnp.zeros_like(t * w)
    for i in range(n):
        row = jnp.zeros_like(w)
        for j in range(n):
            row = row + DENSITY_COEFFICIENTS[i, j] * w**j
        density = density + row * DENSITY_ROW_SCALES[i] * t**i
    return density


# =============================================================================
# Viscosity
# =============================================================================


def viscosity_brine(
    T: TemperatureLike,
    w_nacl: jnp.ndarray,
    diagnostics: DiagnosticsConfig = DEFAULT_DIAGNOSTICS,
) -> jnp.ndarray:
    """Dynamic viscosity of an aqueous NaCl solution.

    Empirical fit valid for 0 <= t <= 80 °C and 0 <= w <= 0.25. The
    temperature range is only checked when
    ``diagnostics.check_viscosity_temperature`` is set.

    Args:
        T: Temperature [°C].
        w_nacl: Mass fraction of NaCl.
        diagnostics: Diagnostic policy.

    Returns:
        Viscosity [Pa s].
    """
    t = to_celsius(T, raw="C")
    w = jnp.asarray(w_nacl)
    if diagnostics.check_viscosity_temperature:
        check_range(
            t,
            *VISCOSITY_T_RANGE_C,
            "Viscosity correlation at %g C is out of temperature range.",
            diagnostics,
        )
    check_range(
        w,
        *VISCOSITY_W_RANGE,
        "Viscosity correlation for salinity of %g is out of mass-fraction range.",
        diagnostics,
    )
    mu = (
        17.02821
        - 0.39206 * t
        + 0.188912 * w
        - 0.00466 * t * w
        + 0.003025 * t * t
        + 0.011738 * w * w
    )
    return mu * 0.001
