class NullInputError(ValueError):
    """Raised when no grid was supplied."""


class InvalidArgumentError(ValueError):
    """Raised when the step bound is negative."""
