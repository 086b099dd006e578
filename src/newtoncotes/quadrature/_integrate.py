"""Rule selection by name."""

from typing import Callable, Union

from torch import Tensor

from newtoncotes.quadrature._boole import boole
from newtoncotes.quadrature._exceptions import InvalidArgumentError
from newtoncotes.quadrature._midpoint import midpoint
from newtoncotes.quadrature._simpson import (
    simpson_one_third,
    simpson_three_eighths,
)
from newtoncotes.quadrature._trapezoid import trapezoid

RULES = {
    "trapezoid": trapezoid,
    "midpoint": midpoint,
    "simpson_one_third": simpson_one_third,
    "simpson_three_eighths": simpson_three_eighths,
    "boole": boole,
}


def integrate(
    f: Callable[[Union[float, Tensor]], Union[float, Tensor]],
    n: int,
    a: Union[float, Tensor],
    b: Union[float, Tensor],
    *,
    rule: str = "trapezoid",
    vectorized: bool = True,
) -> Tensor:
    """
    Integrate f from a to b with the Newton-Cotes rule named ``rule``.

    Parameters
    ----------
    f : callable
        Integrand function.
    n : int
        Number of equal-width subintervals.
    a, b : float or Tensor
        Integration bounds.
    rule : str
        Key of ``RULES``.
    vectorized : bool
        If False, ``f`` is called once per sample point with a Python float.

    Returns
    -------
    Tensor
        Integral approximation.

    Raises
    ------
    InvalidArgumentError
        If ``rule`` is unknown or ``n`` is invalid.

    Examples
    --------
    >>> integrate(torch.sin, 128, 0, torch.pi, rule="boole")  # approximately 2.0
    """
    try:
        method = RULES[rule]
    except KeyError:
        raise InvalidArgumentError(
            f"rule must be one of {', '.join(RULES)}, got '{rule}'"
        ) from None

    return method(f, n, a, b, vectorized=vectorized)
