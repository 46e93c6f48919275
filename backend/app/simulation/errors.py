"""Engine error types."""


class InvalidArgumentError(ValueError):
    """Raised when an engine entry point receives an argument it cannot run with."""
