"""Per-cell evaluation of the full brine property set."""

from jax_brine.properties.config import (
    BrinePropertyConfig,
    create_default_property_config,
    validate_config,
)
from jax_brine.properties.cell import (
    evaluate_brine_properties,
    make_property_fn,
    validate_inputs,
)

__all__ = [
    "BrinePropertyConfig",
    "create_default_property_config",
    "validate_config",
    "evaluate_brine_properties",
    "make_property_fn",
    "validate_inputs",
]
