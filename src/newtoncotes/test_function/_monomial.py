from typing import Union

from torch import Tensor


def identity(x: Union[float, Tensor]) -> Union[float, Tensor]:
    r"""
    Identity integrand :math:`f(x) = x`.

    Every closed Newton-Cotes rule integrates it exactly when ``n`` fills
    whole panels, which makes it the simplest check of a rule's weights.

    Parameters
    ----------
    x : float or Tensor
        Sample point(s).

    Returns
    -------
    float or Tensor
        ``x`` unchanged.
    """
    return x


def square(x: Union[float, Tensor]) -> Union[float, Tensor]:
    r"""
    Quadratic integrand :math:`f(x) = x^2`.

    Examples
    --------
    >>> square(torch.tensor([1.0, 2.0, 3.0]))
    tensor([1., 4., 9.])
    """
    return x * x


def cube(x: Union[float, Tensor]) -> Union[float, Tensor]:
    r"""Cubic integrand :math:`f(x) = x^3`."""
    return x * x * x


def monomial_integral(k: int, a: float, b: float) -> float:
    r"""
    Exact value of :math:`\int_a^b x^k \, dx = (b^{k+1} - a^{k+1}) / (k + 1)`.

    Parameters
    ----------
    k : int
        Non-negative exponent.
    a, b : float
        Integration bounds.

    Returns
    -------
    float
        Closed-form integral.
    """
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")
    return (b ** (k + 1) - a ** (k + 1)) / (k + 1)
