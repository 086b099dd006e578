"""Composite Boole's rule."""

from typing import Callable, Union

from torch import Tensor

from newtoncotes.quadrature._newton_cotes import _newton_cotes


def boole(
    f: Callable[[Union[float, Tensor]], Union[float, Tensor]],
    n: int,
    a: Union[float, Tensor],
    b: Union[float, Tensor],
    *,
    vectorized: bool = True,
) -> Tensor:
    """
    Integrate f from a to b using composite Boole's rule.

    Parameters
    ----------
    f : callable
        Integrand function.
    n : int
        Number of equal-width subintervals. Should be a multiple of 4.
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
        If ``n`` is not a multiple of 4.

    Notes
    -----
    Integral = (2h/45) * [7*f0 + 32*f1 + 12*f2 + 32*f3 + 14*f4 + ... + 7*fn]

    Exact for polynomials of degree <= 5 when ``n`` is a multiple of 4.
    Error is O(h^6).

    Examples
    --------
    >>> boole(lambda x: x**4, 4, 0, 1)
    tensor(0.2000, dtype=torch.float64)
    """
    return _newton_cotes("boole", f, n, a, b, vectorized)
