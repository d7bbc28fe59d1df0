"""Range diagnostics for the property correlations.

Correlations are only validated over the range of the data they were fitted
to. When an input leaves that range the computation still proceeds with the
supplied value, but a warning is written to an injected logger. The checks
are implemented with ``jax.debug.callback`` so that they also fire inside
``jax.jit`` and ``jax.vmap``.

The verbosity of a solver run is carried by a ``DiagnosticsConfig`` value
that is passed explicitly to every correlation that reports diagnostics.
"""

import functools
import logging
import warnings
from dataclasses import dataclass
from typing import Optional

import jax
import jax.numpy as jnp
import numpy as np

from jax_brine.core.exceptions import OutOfRangeWarning

# Range warnings are suppressed from this message level upwards.
RANGE_WARNING_CUTOFF = 2


@dataclass(frozen=True)
class DiagnosticsConfig:
    """Diagnostic policy shared by the correlations of one solver run.

    Attributes:
        message_level: Solver message verbosity id. Range warnings are only
            reported while ``message_level < RANGE_WARNING_CUTOFF``.
        check_viscosity_temperature: Also check the 0-80 °C temperature range
            of the viscosity correlation (disabled by default).
        logger_name: Name of the logger receiving the warnings.
        escalate: Additionally issue ``OutOfRangeWarning`` through ``warnings``.
    """

    message_level: int = 0
    check_viscosity_temperature: bool = False
    logger_name: str = "jax_brine.correlations"
    escalate: bool = False

    @property
    def range_warnings_enabled(self) -> bool:
        return self.message_level < RANGE_WARNING_CUTOFF


DEFAULT_DIAGNOSTICS = DiagnosticsConfig()
QUIET_DIAGNOSTICS = DiagnosticsConfig(message_level=RANGE_WARNING_CUTOFF)


def _report_out_of_range(
    value: np.ndarray,
    *,
    lower: float,
    upper: float,
    message: str,
    logger_name: str,
    escalate: bool,
) -> None:
    """Host-side half of ``check_range``; receives concrete numpy values."""
    values = np.atleast_1d(np.asarray(value))
    outside = (values < lower) | (values > upper)
    if not np.any(outside):
        return
    sink = logging.getLogger(logger_name)
    for bad in values[outside]:
        text = message % float(bad)
        sink.warning(text)
        if escalate:
            warnings.warn(text, OutOfRangeWarning, stacklevel=2)


def check_range(
    value: jnp.ndarray,
    lower: float,
    upper: float,
    message: str,
    diagnostics: DiagnosticsConfig = DEFAULT_DIAGNOSTICS,
    gated: bool = True,
) -> None:
    """Report every element of ``value`` outside ``[lower, upper]``.

    Never raises and never alters ``value``.

    Args:
        value: Input to check (scalar or array, may be traced).
        lower: Lower bound of the validated range.
        upper: Upper bound of the validated range.
        message: ``%``-format string with one ``%g`` slot for the value.
        diagnostics: Diagnostic policy of the caller.
        gated: If False, report regardless of ``diagnostics.message_level``.
    """
    if gated and not diagnostics.range_warnings_enabled:
        return
    callback = functools.partial(
        _report_out_of_range,
        lower=float(lower),
        upper=float(upper),
        message=message,
        logger_name=diagnostics.logger_name,
        escalate=diagnostics.escalate,
    )
    jax.debug.callback(callback, jnp.asarray(value))


def check_above(
    value: jnp.ndarray,
    upper: float,
    message: str,
    diagnostics: DiagnosticsConfig = DEFAULT_DIAGNOSTICS,
    gated: bool = True,
) -> None:
    """Report every element of ``value`` above ``upper``."""
    check_range(value, -np.inf, upper, message, diagnostics, gated)


def concrete_or_none(x) -> Optional[np.ndarray]:
    """Return ``x`` as a numpy array, or None while it is being traced."""
    try:
        return np.asarray(x)
    except jax.errors.TracerArrayConversionError:
        return None
