"""Property validation against literature reference data.

Validation includes:
- Saturation pressure of water vs IAPWS-95
- Brine density vs CRC handbook values
- Thermal conductivity of water vs IAPWS
- NaCl solubility vs CRC handbook values
"""

from jax_brine.validation_pack.property_validation.reference_points import (
    ReferencePoint,
    get_reference_data,
    get_all_reference_data,
)
from jax_brine.validation_pack.property_validation.validate_correlations import (
    PropertyValidationResult,
    validate_single_property,
    validate_against_reference,
)

__all__ = [
    "ReferencePoint",
    "get_reference_data",
    "get_all_reference_data",
    "PropertyValidationResult",
    "validate_single_property",
    "validate_against_reference",
]
