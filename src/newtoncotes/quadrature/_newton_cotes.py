"""Shared evaluation loop for composite Newton-Cotes rules."""

import warnings
from typing import Callable, Union

import torch
from torch import Tensor

from newtoncotes.quadrature._exceptions import QuadratureWarning
from newtoncotes.quadrature._nodes import (
    _PANELS,
    _SCALES,
    _as_bounds,
    _check_subdivisions,
    _nodes,
    _weight_pattern,
)


def _evaluate(f: Callable, nodes: Tensor, vectorized: bool) -> Tensor:
    """Sample f at every node, returning a tensor shaped like ``nodes``."""
    if vectorized:
        values = torch.as_tensor(f(nodes), dtype=nodes.dtype, device=nodes.device)
        return torch.broadcast_to(values, nodes.shape)

    # One call per point, in ascending node order along the last dim
    samples = [float(f(x)) for x in nodes.detach().reshape(-1).tolist()]

    return torch.tensor(
        samples, dtype=nodes.dtype, device=nodes.device
    ).reshape(nodes.shape)


def _newton_cotes(
    rule: str,
    f: Callable,
    n: int,
    a: Union[float, Tensor],
    b: Union[float, Tensor],
    vectorized: bool = True,
) -> Tensor:
    n = _check_subdivisions(n)

    panel = _PANELS.get(rule)
    if panel is not None and n % panel != 0:
        warnings.warn(
            f"{rule} expects n to be a multiple of {panel}, got n={n}; "
            f"the result is computed but may be inaccurate",
            QuadratureWarning,
            stacklevel=3,
        )

    a, b = _as_bounds(a, b)
    nodes, h = _nodes(rule, n, a, b)

    weights = _weight_pattern(rule, n, dtype=a.dtype, device=a.device)
    values = _evaluate(f, nodes, vectorized)

    area = (values * weights).sum(dim=-1)

    numerator, denominator = _SCALES[rule]

    return numerator * (area * h) / denominator
