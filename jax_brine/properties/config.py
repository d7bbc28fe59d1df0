"""Configuration for per-cell brine property evaluation.

The configuration is an immutable value that a host solver builds once per
run and passes to every property evaluation. Selectors are resolved when the
configuration is created so that an unknown membrane fails before the first
cell is evaluated.
"""

from dataclasses import dataclass

from jax_brine.core.diagnostics import DEFAULT_DIAGNOSTICS, DiagnosticsConfig
from jax_brine.core.membrane import (
    GasModelLike,
    MembraneLike,
    resolve_gas_model,
    resolve_membrane,
)
from jax_brine.core.types import GasConductivityModel, Membrane


@dataclass(frozen=True)
class BrinePropertyConfig:
    """Static choices shared by all cells of a solver run.

    Attributes:
        membrane: Membrane material for the Maxwell conductivity.
        porosity: Membrane porosity (void fraction).
        gas_model: Gas-phase conductivity correlation.
        diagnostics: Range-warning policy.
    """

    membrane: Membrane = Membrane.PVDF
    porosity: float = 0.75
    gas_model: GasConductivityModel = GasConductivityModel.BAHMANYAR
    diagnostics: DiagnosticsConfig = DEFAULT_DIAGNOSTICS


def create_default_property_config(
    membrane: MembraneLike = Membrane.PVDF,
    porosity: float = 0.75,
    gas_model: GasModelLike = GasConductivityModel.BAHMANYAR,
    message_level: int = 0,
    check_viscosity_temperature: bool = False,
) -> BrinePropertyConfig:
    """Create a property configuration.

    Args:
        membrane: Membrane material (``Membrane``, code 0-3 or name).
        porosity: Membrane porosity.
        gas_model: Gas-phase conductivity correlation.
        message_level: Solver message verbosity id.
        check_viscosity_temperature: Enable the viscosity temperature check.

    Returns:
        BrinePropertyConfig with resolved selectors.

    Raises:
        InvalidSelectorError: If the membrane or gas model is unknown.
    """
    return BrinePropertyConfig(
        membrane=resolve_membrane(membrane),
        porosity=float(porosity),
        gas_model=resolve_gas_model(gas_model),
        diagnostics=DiagnosticsConfig(
            message_level=message_level,
            check_viscosity_temperature=check_viscosity_temperature,
        ),
    )


def validate_config(config: BrinePropertyConfig) -> list[str]:
    """Validate a property configuration for physical consistency.

    Args:
        config: Configuration to validate.

    Returns:
        List of warning/error messages (empty if valid).
    """
    warnings = []

    if not isinstance(config.membrane, Membrane):
        warnings.append(f"Membrane must be a Membrane, got {config.membrane!r}")
    if not isinstance(config.gas_model, GasConductivityModel):
        warnings.append(f"Gas model must be a GasConductivityModel, got {config.gas_model!r}")

    if config.porosity <= 0 or config.porosity >= 1:
        warnings.append("Porosity must be in (0, 1)")
    elif config.porosity < 0.6:
        warnings.append(
            f"Porosity {config.porosity:g} is below 0.6; the Maxwell model is fitted for higher porosities"
        )

    return warnings
