"""Node and weight computation for Newton-Cotes rules."""

import numbers
from typing import Optional, Tuple, Union

import torch
from torch import Tensor

from newtoncotes.quadrature._exceptions import InvalidArgumentError

# rule -> (numerator, denominator) of the factor multiplying h
_SCALES = {
    "trapezoid": (1, 1),
    "midpoint": (1, 1),
    "simpson_one_third": (1, 3),
    "simpson_three_eighths": (3, 8),
    "boole": (2, 45),
}

# Number of subintervals each composite weight pattern repeats over.
_PANELS = {
    "simpson_one_third": 2,
    "simpson_three_eighths": 3,
    "boole": 4,
}


def _check_rule(rule: str) -> str:
    if rule not in _SCALES:
        raise InvalidArgumentError(
            f"rule must be one of {', '.join(_SCALES)}, got '{rule}'"
        )
    return rule


def _check_subdivisions(n: int) -> int:
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise InvalidArgumentError(
            f"n must be an integer, got {type(n).__name__}"
        )
    if n < 1:
        raise InvalidArgumentError(f"n must be at least 1, got {n}")
    return int(n)


def _as_bounds(
    a: Union[float, Tensor],
    b: Union[float, Tensor],
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tuple[Tensor, Tensor]:
    """Convert bounds to broadcast floating point tensors."""
    # Infer dtype and device
    if isinstance(a, Tensor):
        dtype = dtype or a.dtype
        device = device or a.device
    elif isinstance(b, Tensor):
        dtype = dtype or b.dtype
        device = device or b.device
    else:
        dtype = dtype or torch.float64
        device = device or torch.device("cpu")

    if not dtype.is_floating_point:
        dtype = torch.float64

    a = torch.as_tensor(a, dtype=dtype, device=device)
    b = torch.as_tensor(b, dtype=dtype, device=device)

    return torch.broadcast_tensors(a, b)


def _weight_pattern(
    rule: str,
    n: int,
    dtype: torch.dtype = torch.float64,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Unscaled weights of a composite rule with ``n`` subintervals.

    Closed rules return ``n + 1`` weights for the points ``a + i*h``,
    ``i = 0..n``. The midpoint rule returns ``n`` unit weights.
    """
    if rule == "midpoint":
        return torch.ones(n, dtype=dtype, device=device)

    i = torch.arange(n + 1, device=device)

    if rule == "trapezoid":
        weights = torch.ones(n + 1, dtype=dtype, device=device)
        endpoint = 0.5
    elif rule == "simpson_one_third":
        weights = torch.where(i % 2 == 0, 2, 4)
        endpoint = 1
    elif rule == "simpson_three_eighths":
        weights = torch.where(i % 3 == 0, 2, 3)
        endpoint = 1
    else:
        # Boole: odd points 32, even points 14 on panel edges and 12 inside
        weights = torch.where(
            i % 2 == 1, 32, torch.where(i % 4 == 0, 14, 12)
        )
        endpoint = 7

    weights = weights.to(dtype)
    weights[0] = endpoint
    weights[n] = endpoint

    return weights


def _nodes(rule: str, n: int, a: Tensor, b: Tensor) -> Tuple[Tensor, Tensor]:
    """Equally spaced sample points for broadcast bounds, and the step h."""
    h = (b - a) / n

    if rule == "midpoint":
        i = torch.arange(n, dtype=a.dtype, device=a.device) + 0.5
    else:
        i = torch.arange(n + 1, dtype=a.dtype, device=a.device)

    nodes = a.unsqueeze(-1) + i * h.unsqueeze(-1)

    return nodes, h


def newton_cotes_nodes_weights(
    rule: str,
    n: int,
    a: Union[float, Tensor] = 0.0,
    b: Union[float, Tensor] = 1.0,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tuple[Tensor, Tensor]:
    """
    Compute composite Newton-Cotes nodes and weights on [a, b].

    Parameters
    ----------
    rule : str
        One of ``"trapezoid"``, ``"midpoint"``, ``"simpson_one_third"``,
        ``"simpson_three_eighths"`` or ``"boole"``.
    n : int
        Number of equal-width subintervals.
    a, b : float or Tensor
        Integration bounds. Can be batched.
    dtype : torch.dtype, optional
        Output dtype. Inferred from a/b if not specified, float64 otherwise.
    device : torch.device, optional
        Output device. Inferred from a/b if not specified.

    Returns
    -------
    nodes : Tensor
        Shape (*batch, n + 1) for closed rules, (*batch, n) for the midpoint
        rule. Ascending when a < b.
    weights : Tensor
        Same shape as ``nodes``, scaled so that ``(f(nodes) * weights).sum(-1)``
        approximates the integral.

    Raises
    ------
    InvalidArgumentError
        If ``rule`` is unknown or ``n < 1``.

    Examples
    --------
    >>> nodes, weights = newton_cotes_nodes_weights("simpson_one_third", 2)
    >>> nodes
    tensor([0.0000, 0.5000, 1.0000], dtype=torch.float64)
    >>> weights
    tensor([0.1667, 0.6667, 0.1667], dtype=torch.float64)
    """
    rule = _check_rule(rule)
    n = _check_subdivisions(n)

    a, b = _as_bounds(a, b, dtype, device)
    nodes, h = _nodes(rule, n, a, b)

    numerator, denominator = _SCALES[rule]
    pattern = _weight_pattern(rule, n, dtype=a.dtype, device=a.device)
    weights = pattern * (h.unsqueeze(-1) * numerator / denominator)

    return nodes, weights
