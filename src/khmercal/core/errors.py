class KhmerCalError(Exception):
    """Base error."""

class InvalidInputError(KhmerCalError, ValueError):
    """Raised before any computation when a year, month index or option is out of range."""

class ComputationFailureError(KhmerCalError, RuntimeError):
    """Raised when a bounded search ends without a result (a logic defect, not a transient condition)."""
