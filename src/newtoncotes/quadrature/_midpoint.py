"""Composite midpoint rule."""

from typing import Callable, Union

from torch import Tensor

from newtoncotes.quadrature._newton_cotes import _newton_cotes


def midpoint(
    f: Callable[[Union[float, Tensor]], Union[float, Tensor]],
    n: int,
    a: Union[float, Tensor],
    b: Union[float, Tensor],
    *,
    vectorized: bool = True,
) -> Tensor:
    """
    Integrate f from a to b using the composite midpoint rule.

    The midpoint rule is open: f is sampled at the centre of each of the
    ``n`` subintervals and never at the bounds, so integrands that are
    singular at a or b can still be evaluated.

    Parameters
    ----------
    f : callable
        Integrand function.
    n : int
        Number of equal-width subintervals. Must be at least 1.
    a, b : float or Tensor
        Integration bounds. Can be batched.
    vectorized : bool
        If False, ``f`` is called once per sample point with a Python float.

    Returns
    -------
    Tensor
        Integral approximation.

    Examples
    --------
    >>> midpoint(lambda x: 1 / torch.sqrt(x), 1000, 0, 1)  # approximately 2.0
    """
    return _newton_cotes("midpoint", f, n, a, b, vectorized)
