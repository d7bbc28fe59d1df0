"""Validate the property correlations against literature reference data.

Acceptance criteria (relative error at every reference point):
- Saturation pressure: < 1 %
- Brine density: < 0.5 %
- Thermal conductivity: < 2 %
- NaCl solubility: < 2 %
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

import jax.numpy as jnp

from jax_brine.core.brine import density_brine, solubility_nacl, thermal_conductivity_brine
from jax_brine.core.diagnostics import QUIET_DIAGNOSTICS
from jax_brine.core.water import saturation_pressure_water
from jax_brine.validation_pack.property_validation.reference_points import (
    ReferencePoint,
    get_all_reference_data,
    get_reference_data,
)

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCES = {
    "saturation_pressure": 0.01,
    "density": 0.005,
    "thermal_conductivity": 0.02,
    "solubility": 0.02,
}


@dataclass
class PropertyValidationResult:
    """Result of validating one correlation against reference data.

    Attributes:
        property_name: Property identifier
        n_points: Number of reference points tested
        max_relative_error: Maximum relative error across all points
        mean_relative_error: Mean relative error across all points
        all_errors: List of (T, w, ref, calc, rel_error) for each point
        passed: True if all points within tolerance
        tolerance: Tolerance used for pass/fail
    """

    property_name: str
    n_points: int
    max_relative_error: float
    mean_relative_error: float
    all_errors: List[tuple]
    passed: bool
    tolerance: float


def _evaluators() -> Dict[str, Callable[[ReferencePoint], jnp.ndarray]]:
    """Map property names onto the correlation evaluated at a reference point."""
    return {
        "saturation_pressure": lambda p: saturation_pressure_water(p.temperature_k),
        "density": lambda p: density_brine(
            p.temperature_k, p.mass_fraction_nacl, QUIET_DIAGNOSTICS
        ),
        "thermal_conductivity": lambda p: thermal_conductivity_brine(
            p.temperature_k, p.mass_fraction_nacl, QUIET_DIAGNOSTICS
        ),
        "solubility": lambda p: solubility_nacl(p.temperature_k, QUIET_DIAGNOSTICS),
    }


def validate_single_property(
    property_name: str,
    tolerance: Optional[float] = None,
) -> PropertyValidationResult:
    """Validate one correlation against its reference data.

    Args:
        property_name: Property identifier (see ``get_all_reference_data``)
        tolerance: Maximum allowed relative error. Defaults to the entry of
            ``DEFAULT_TOLERANCES``.

    Returns:
        PropertyValidationResult with validation metrics.

    Raises:
        ValueError: If the property is unknown.
    """
    reference = get_reference_data(property_name)
    evaluate = _evaluators()[property_name.lower()]
    if tolerance is None:
        tolerance = DEFAULT_TOLERANCES[property_name.lower()]

    errors = []
    rel_errors = []

    for point in reference:
        calc = float(evaluate(point))
        if point.value != 0:
            rel_error = abs(calc - point.value) / abs(point.value)
        else:
            rel_error = float("inf")

        errors.append((point.temperature_k, point.mass_fraction_nacl, point.value, calc, rel_error))
        rel_errors.append(rel_error)

    max_error = max(rel_errors) if rel_errors else 0.0
    mean_error = sum(rel_errors) / len(rel_errors) if rel_errors else 0.0
    passed = max_error <= tolerance

    logger.debug(
        "%s: %d points, max error %.3g%%, %s",
        property_name,
        len(reference),
        max_error * 100,
        "PASS" if passed else "FAIL",
    )

    return PropertyValidationResult(
        property_name=property_name,
        n_points=len(reference),
        max_relative_error=max_error,
        mean_relative_error=mean_error,
        all_errors=errors,
        passed=passed,
        tolerance=tolerance,
    )


def validate_against_reference(
    properties: Optional[List[str]] = None,
    tolerance: Optional[float] = None,
) -> Dict[str, PropertyValidationResult]:
    """Validate several correlations against reference data.

    Args:
        properties: Property names. If None, validates all available.
        tolerance: Override for the per-property default tolerance.

    Returns:
        Dict mapping property names to PropertyValidationResult.
    """
    if properties is None:
        properties = list(get_all_reference_data().keys())

    return {name: validate_single_property(name, tolerance) for name in properties}
