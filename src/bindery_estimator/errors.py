"""Error types raised by the store and service layers."""


class BinderyError(Exception):
    """Base exception for all bindery estimator failures."""


class NotFoundError(BinderyError):
    """A referenced customer, quote, job or run list item does not exist."""


class InvalidStateError(BinderyError):
    """The entity is not in the status the operation requires."""


class ConflictError(BinderyError):
    """A uniqueness or one-to-one rule would be violated."""


class InvalidArgumentError(BinderyError):
    """A caller-supplied value failed validation."""


class StoreCorruptError(BinderyError):
    """A data file exists but does not hold a JSON array."""
