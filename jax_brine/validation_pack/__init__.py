"""Validation of the correlations against public reference data."""

from jax_brine.validation_pack.property_validation import (
    validate_against_reference,
    PropertyValidationResult,
)

__all__ = [
    "validate_against_reference",
    "PropertyValidationResult",
]
