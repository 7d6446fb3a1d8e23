from __future__ import annotations

"""Exception taxonomy for the SVM engine.

Argument-shaped problems derive from ``ValueError`` and state problems from
``RuntimeError`` so callers can catch either the precise class or the builtin.
"""


class SvmError(Exception):
    """Base class for every error raised by the engine."""


class InvalidConfiguration(SvmError, ValueError):
    """Kernel or SVM parameter out of its valid range."""


class InvalidDataset(SvmError, ValueError):
    """Empty dataset, malformed examples, or non-finite values."""


class DimensionMismatch(SvmError, ValueError):
    """Feature vector dimensionality differs from what is expected."""


class InconsistentDimensions(InvalidDataset, DimensionMismatch):
    """Examples of one dataset do not share a single dimensionality."""


class InvalidArgument(SvmError, ValueError):
    """Operation argument out of range (e.g. cross-validation fold count)."""


class Untrained(SvmError, RuntimeError):
    """Prediction or evaluation requested before a successful training."""


class UnsupportedOperation(SvmError, RuntimeError):
    """Operation not available for the model's configuration."""


class SolverFailure(SvmError, RuntimeError):
    """The optimizer did not converge or the problem is infeasible."""
