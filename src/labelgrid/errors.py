"""Errors raised by labelgrid.

Every error kind inherits from :class:`LabelGridError`
and from the builtin exception that best describes it,
so callers can catch either ``LabelGridError`` or
the usual ``KeyError``, ``ValueError``, ``TypeError``.
"""


class LabelGridError(Exception):
    """Base exception for the labelgrid library."""


class LengthMismatchError(LabelGridError, ValueError):
    """Supplied sequences disagree in length with the declared shape."""


class SchemaMismatchError(LabelGridError, ValueError):
    """Row or column labels of two operands differ where they must be equal."""


class KeyNotFoundError(LabelGridError, KeyError):
    """A label or group key is not present."""


class TypeMismatchError(LabelGridError, TypeError):
    """The dtypes of two arrays disagree where they must be equal."""


class UnsupportedOperationError(LabelGridError, TypeError):
    """The operation is not defined for the dtype it was invoked on."""


class InsufficientDataError(LabelGridError, ValueError):
    """Not enough values to compute an unbiased statistic."""


class EmptyReductionError(LabelGridError, ValueError):
    """A reduction was requested over zero present values."""
