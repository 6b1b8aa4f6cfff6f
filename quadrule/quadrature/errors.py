
class QuadratureError(ValueError):
    """Base class of the errors raised when a quadrature rule is requested
    with an invalid configuration.

    The offending request is kept on the exception so callers can inspect it.
    """
    def __init__(self, message: str, *, family=None, dim=None, shape=None, order=None):
        super().__init__(message)
        self.family = family
        self.dim = dim
        self.shape = shape
        self.order = order


class UnsupportedRuleError(QuadratureError):
    """The rule family is unknown or can not be used on the reference shape."""


class UnsupportedShapeError(QuadratureError):
    """The reference shape is unknown or does not exist in the dimension."""


class UnsupportedOrderError(QuadratureError):
    """No tabulated simplex rule of the requested order."""


class InvalidOrderError(QuadratureError):
    """The order is not a positive integer, or is below the family minimum."""
