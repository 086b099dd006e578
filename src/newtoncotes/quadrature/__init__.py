"""
Newton-Cotes quadrature module.

Function-based integration (evaluates callable at equally spaced points):
    trapezoid, midpoint, simpson_one_third, simpson_three_eighths, boole

Rule selection:
    integrate, RULES

Node/weight computation:
    newton_cotes_nodes_weights

Exceptions:
    QuadratureWarning, InvalidArgumentError
"""

from newtoncotes.quadrature._boole import boole
from newtoncotes.quadrature._exceptions import (
    InvalidArgumentError,
    QuadratureWarning,
)
from newtoncotes.quadrature._integrate import RULES, integrate
from newtoncotes.quadrature._midpoint import midpoint
from newtoncotes.quadrature._nodes import newton_cotes_nodes_weights
from newtoncotes.quadrature._simpson import (
    simpson_one_third,
    simpson_three_eighths,
)
from newtoncotes.quadrature._trapezoid import trapezoid

__all__ = [
    # Closed rules
    "trapezoid",
    "simpson_one_third",
    "simpson_three_eighths",
    "boole",
    # Open rules
    "midpoint",
    # Rule selection
    "integrate",
    "RULES",
    # Node/weight computation
    "newton_cotes_nodes_weights",
    # Exceptions
    "QuadratureWarning",
    "InvalidArgumentError",
]
