"""Composite Simpson's rules for integrating a callable."""

from typing import Callable, Union

from torch import Tensor

from newtoncotes.quadrature._newton_cotes import _newton_cotes


def simpson_one_third(
    f: Callable[[Union[float, Tensor]], Union[float, Tensor]],
    n: int,
    a: Union[float, Tensor],
    b: Union[float, Tensor],
    *,
    vectorized: bool = True,
) -> Tensor:
    """
    Integrate f from a to b using composite Simpson's 1/3 rule.

    Parameters
    ----------
    f : callable
        Integrand function.
    n : int
        Number of equal-width subintervals. Should be even.
    a, b : float or Tensor
        Integration bounds. Can be batched.
    vectorized : bool
        If False, ``f`` is called once per sample point with a Python float.

    Returns
    -------
    Tensor
        Integral approximation.

    Raises
    ------
    InvalidArgumentError
        If ``n`` is not an integer >= 1.

    Warns
    -----
    QuadratureWarning
        If ``n`` is odd. The weights are still applied as below.

    Notes
    -----
    Integral = (h/3) * [f0 + 4*f1 + 2*f2 + 4*f3 + ... + fn]

    Exact for cubics when ``n`` is even. Error is O(h^4).

    Examples
    --------
    >>> simpson_one_third(lambda x: x**2, 2, 0, 1)
    tensor(0.3333, dtype=torch.float64)
    """
    return _newton_cotes("simpson_one_third", f, n, a, b, vectorized)


def simpson_three_eighths(
    f: Callable[[Union[float, Tensor]], Union[float, Tensor]],
    n: int,
    a: Union[float, Tensor],
    b: Union[float, Tensor],
    *,
    vectorized: bool = True,
) -> Tensor:
    """
    Integrate f from a to b using composite Simpson's 3/8 rule.

    Parameters
    ----------
    f : callable
        Integrand function.
    n : int
        Number of equal-width subintervals. Should be a multiple of 3.
    a, b : float or Tensor
        Integration bounds. Can be batched.
    vectorized : bool
        If False, ``f`` is called once per sample point with a Python float.

    Returns
    -------
    Tensor
        Integral approximation.

    Warns
    -----
    QuadratureWarning
        If ``n`` is not a multiple of 3.

    Notes
    -----
    Integral = (3h/8) * [f0 + 3*f1 + 3*f2 + 2*f3 + 3*f4 + ... + fn]

    Interior points with index divisible by 3 get weight 2, all others 3.
    When ``n`` is not a multiple of 3 the last panel is incomplete and the
    estimate stays biased however large ``n`` gets; for f(x) = x on [1, 3]
    with n = 100 it returns about 3.99 instead of 4.
    """
    return _newton_cotes("simpson_three_eighths", f, n, a, b, vectorized)
