"""Print Newton-Cotes estimates of an example integral for every rule."""

import argparse
import logging
import sys
import warnings
from typing import Callable, Optional, Sequence, TextIO

from newtoncotes import quadrature, test_function

logger = logging.getLogger(__name__)

MAX_ITERATIONS = 100

FUNCTIONS = {
    "identity": test_function.identity,
    "square": test_function.square,
    "cube": test_function.cube,
}

# display name -> rule, in the order the table is printed
METHODS = (
    ("trapezoid", quadrature.trapezoid),
    ("simpson 1/3", quadrature.simpson_one_third),
    ("simpson 3/8", quadrature.simpson_three_eighths),
    ("mid-point", quadrature.midpoint),
    ("boole", quadrature.boole),
)


def example(
    method: Callable,
    method_name: str,
    f: Callable,
    a: float,
    b: float,
    iterations: int = MAX_ITERATIONS,
    out: Optional[TextIO] = None,
) -> None:
    """
    Print the estimate of one rule with ``iterations`` and twice as many
    subintervals.

    Partial-panel warnings are logged at debug level instead of printed.
    """
    out = sys.stdout if out is None else out

    print(
        f"\nIntegral of the given function between {a:.3f} and {b:.3f} ({method_name} method)",
        file=out,
    )
    print("-" * 15, file=out)
    for n in (iterations, 2 * iterations):
        logger.debug("%s: n=%d, a=%s, b=%s", method_name, n, a, b)
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always", quadrature.QuadratureWarning)
            value = method(f, n, a, b).item()
        for warning in caught:
            if issubclass(warning.category, quadrature.QuadratureWarning):
                logger.debug("%s", warning.message)
            else:
                warnings.warn(warning.message, warning.category, stacklevel=2)
        print(f"With {n} iterations: {value:f}", file=out)
    print("-" * 15, file=out)


def _read_bounds(parser: argparse.ArgumentParser, bounds: Sequence[str]):
    if not bounds:
        try:
            bounds = input("Integration bounds (separated by a space): ").split()
        except EOFError:
            parser.error("expected two bounds, got end of input")
    if len(bounds) != 2:
        parser.error(f"expected two bounds, got {len(bounds)}")
    try:
        return float(bounds[0]), float(bounds[1])
    except ValueError:
        parser.error(f"bounds must be numbers, got {' '.join(bounds)}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="newtoncotes",
        description="Integrate an example function with every Newton-Cotes rule.",
    )
    parser.add_argument(
        "bounds",
        nargs="*",
        metavar="BOUND",
        help="lower and upper bound; prompted for when omitted",
    )
    parser.add_argument(
        "--function",
        choices=sorted(FUNCTIONS),
        default="square",
        help="integrand (default: square)",
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=MAX_ITERATIONS,
        help=f"subintervals of the first estimate (default: {MAX_ITERATIONS})",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.iterations < 1:
        parser.error(f"--iterations must be at least 1, got {args.iterations}")

    a, b = _read_bounds(parser, args.bounds)
    f = FUNCTIONS[args.function]
    logger.info("integrating %s on [%s, %s]", args.function, a, b)

    for method_name, method in METHODS:
        example(method, method_name, f, a, b, iterations=args.iterations)

    return 0
