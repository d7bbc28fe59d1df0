"""Exception and warning types raised by the property correlations."""


class BrinePropertyError(Exception):
    """Base class for errors raised by jax_brine."""


class InvalidSelectorError(BrinePropertyError, ValueError):
    """Raised when a material or model selector does not match any known entry."""


class DomainError(BrinePropertyError, ArithmeticError):
    """Raised when an input hits an algebraic singularity of a correlation."""


class OutOfRangeWarning(UserWarning):
    """Issued when an input lies outside the validated range of a correlation."""
