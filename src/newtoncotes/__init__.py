"""newtoncotes: Newton-Cotes quadrature for PyTorch."""

from . import (
    quadrature,
    test_function,
)

__all__ = [
    "quadrature",
    "test_function",
]

__version__ = "0.1.0"
