"""Exceptions for quadrature integration."""


class QuadratureWarning(UserWarning):
    """Warning for quadrature issues (e.g., n does not fill whole panels)."""

    pass


class InvalidArgumentError(ValueError):
    """Error when a quadrature rule receives an invalid argument."""

    pass
