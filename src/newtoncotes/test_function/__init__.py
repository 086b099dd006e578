from ._monomial import cube, identity, monomial_integral, square

__all__ = [
    "cube",
    "identity",
    "monomial_integral",
    "square",
]
