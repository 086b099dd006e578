"""Composite trapezoidal rule."""

from typing import Callable, Union

from torch import Tensor

from newtoncotes.quadrature._newton_cotes import _newton_cotes


def trapezoid(
    f: Callable[[Union[float, Tensor]], Union[float, Tensor]],
    n: int,
    a: Union[float, Tensor],
    b: Union[float, Tensor],
    *,
    vectorized: bool = True,
) -> Tensor:
    """
    Integrate f from a to b using the composite trapezoidal rule.

    Parameters
    ----------
    f : callable
        Integrand function. Receives a tensor of sample points and returns
        a tensor of function values, or a single float per call when
        ``vectorized=False``.
    n : int
        Number of equal-width subintervals. Must be at least 1.
    a, b : float or Tensor
        Lower and upper integration bounds. Can be batched.
    vectorized : bool
        If False, ``f`` is called once per sample point with a Python float.

    Returns
    -------
    Tensor
        Integral approximation. Shape matches broadcast(a, b).

    Raises
    ------
    InvalidArgumentError
        If ``n`` is not an integer >= 1.

    Notes
    -----
    With ``h = (b - a) / n`` the estimate is

        h * [f(a)/2 + f(a + h) + ... + f(b - h) + f(b)/2]

    which is exact for linear integrands. Error is O(h^2).

    Examples
    --------
    >>> trapezoid(lambda x: x, 100, 1, 3)
    tensor(4., dtype=torch.float64)
    """
    return _newton_cotes("trapezoid", f, n, a, b, vectorized)
