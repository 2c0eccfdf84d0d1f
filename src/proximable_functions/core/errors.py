"""
Exception types raised by the proximable-functions core.

Collaborator failures (gradient, proximal or projection evaluations supplied
by concrete function types) are never wrapped in these.
"""

NOT_IMPLEMENTED_MESSAGE = "This method has not been implemented for this function!"


class ProximableFunctionsError(ValueError):
    """Base exception for invalid values handed to the core."""
    pass


class InvalidOptionsError(ProximableFunctionsError):
    """Options or configuration values outside their admissible range."""
    pass


class UnresolvedParameterError(ProximableFunctionsError):
    """A solver parameter (iteration count, Lipschitz constant) is still unset at solver entry."""
    pass


class NotImplementedMethodError(NotImplementedError):
    """No operator registered for a (function type, options type) combination."""

    def __init__(self, message: str = NOT_IMPLEMENTED_MESSAGE):
        super().__init__(message)
