import math

import hypothesis
import hypothesis.strategies
import pytest
import scipy.integrate
import torch

from newtoncotes.test_function import identity, square


class TestTrapezoid:
    def test_linear_exact(self):
        """Integral of x from 1 to 3 = 4"""
        from newtoncotes.quadrature import trapezoid

        result = trapezoid(identity, 100, 1, 3)

        assert abs(result.item() - 4.0) < 1e-5

    def test_single_subinterval(self):
        """n = 1 is the two-point trapezoid formula"""
        from newtoncotes.quadrature import trapezoid

        result = trapezoid(square, 1, 0.0, 2.0)

        assert torch.allclose(
            result, torch.tensor(0.5 * 2.0 * (0.0 + 4.0), dtype=torch.float64)
        )

    def test_matches_scipy(self):
        """Compare with scipy.integrate.trapezoid on the same samples"""
        from newtoncotes.quadrature import trapezoid

        x = torch.linspace(0, torch.pi, 101, dtype=torch.float64)

        result = trapezoid(torch.sin, 100, 0, torch.pi)
        expected = scipy.integrate.trapezoid(torch.sin(x).numpy(), x.numpy())

        assert torch.allclose(
            result, torch.tensor(expected, dtype=result.dtype), rtol=1e-10
        )

    def test_error_decreases_with_n(self):
        from newtoncotes.quadrature import trapezoid

        coarse = abs(trapezoid(square, 1000, 0, 1).item() - 1 / 3)
        fine = abs(trapezoid(square, 2000, 0, 1).item() - 1 / 3)

        assert coarse < 1e-6
        assert fine < coarse

    def test_constant_integrand_broadcasts(self):
        from newtoncotes.quadrature import trapezoid

        result = trapezoid(lambda x: 2.0, 10, -1, 4)

        assert torch.allclose(result, torch.tensor(10.0, dtype=torch.float64))

    def test_batched_limits(self):
        from newtoncotes.quadrature import trapezoid

        b = torch.linspace(1, 5, 10, dtype=torch.float64)
        result = trapezoid(identity, 8, 0, b)

        assert result.shape == (10,)
        assert torch.allclose(result, b**2 / 2)

    def test_nan_propagates(self):
        from newtoncotes.quadrature import trapezoid

        result = trapezoid(lambda x: torch.full_like(x, math.nan), 10, 0, 1)

        assert torch.isnan(result)


class TestTrapezoidPointwise:
    def test_calls_once_per_point_in_order(self):
        from newtoncotes.quadrature import trapezoid

        calls = []

        def f(x):
            calls.append(x)
            return x * x

        trapezoid(f, 10, 0, 1, vectorized=False)

        assert len(calls) == 11
        assert all(isinstance(x, float) for x in calls)
        assert calls == sorted(calls)
        assert calls[0] == 0.0
        assert calls[-1] == pytest.approx(1.0)

    def test_scalar_math_function(self):
        from newtoncotes.quadrature import trapezoid

        result = trapezoid(math.sin, 1000, 0, math.pi, vectorized=False)

        assert abs(result.item() - 2.0) < 1e-5

    def test_matches_vectorized(self):
        from newtoncotes.quadrature import trapezoid

        pointwise = trapezoid(square, 50, 0, 2, vectorized=False)
        vectorized = trapezoid(square, 50, 0, 2)

        assert torch.allclose(pointwise, vectorized, rtol=1e-12)

    def test_integrand_error_propagates(self):
        from newtoncotes.quadrature import trapezoid

        with pytest.raises(ZeroDivisionError):
            trapezoid(lambda x: 1 / x, 10, 0, 1, vectorized=False)


class TestTrapezoidProperties:
    @hypothesis.settings(deadline=None)
    @hypothesis.given(
        a=hypothesis.strategies.floats(min_value=-10, max_value=10),
        b=hypothesis.strategies.floats(min_value=-10, max_value=10),
        n=hypothesis.strategies.integers(min_value=1, max_value=64),
    )
    def test_swapping_bounds_negates(self, a, b, n):
        from newtoncotes.quadrature import trapezoid

        forward = trapezoid(lambda x: x**2 + 1, n, a, b)
        backward = trapezoid(lambda x: x**2 + 1, n, b, a)

        assert torch.allclose(forward, -backward, rtol=1e-9, atol=1e-9)

    def test_idempotent(self):
        from newtoncotes.quadrature import trapezoid

        first = trapezoid(torch.exp, 37, -1.5, 2.25)
        second = trapezoid(torch.exp, 37, -1.5, 2.25)

        assert torch.equal(first, second)


class TestTrapezoidValidation:
    @pytest.mark.parametrize("n", [0, -1, -100])
    def test_rejects_non_positive_n(self, n):
        from newtoncotes.quadrature import InvalidArgumentError, trapezoid

        with pytest.raises(InvalidArgumentError, match="at least 1"):
            trapezoid(identity, n, 0, 1)

    @pytest.mark.parametrize("n", [2.5, "10", True, None])
    def test_rejects_non_integer_n(self, n):
        from newtoncotes.quadrature import InvalidArgumentError, trapezoid

        with pytest.raises(InvalidArgumentError, match="integer"):
            trapezoid(identity, n, 0, 1)

    def test_error_is_value_error(self):
        from newtoncotes.quadrature import trapezoid

        with pytest.raises(ValueError):
            trapezoid(identity, 0, 0, 1)


class TestTrapezoidGradients:
    def test_gradient_closure_param(self):
        """Gradient flows through closure parameters"""
        from newtoncotes.quadrature import trapezoid

        theta = torch.tensor(2.0, requires_grad=True, dtype=torch.float64)

        # integral of theta * x from 0 to 1 = theta / 2
        result = trapezoid(lambda x: theta * x, 10, 0, 1)
        result.backward()

        assert torch.allclose(
            theta.grad, torch.tensor(0.5, dtype=torch.float64)
        )

    def test_gradient_upper_limit(self):
        """d/db integral_0^b sin(x) dx approximately sin(b)"""
        from newtoncotes.quadrature import trapezoid

        b = torch.tensor(1.0, requires_grad=True, dtype=torch.float64)

        result = trapezoid(torch.sin, 200, 0, b)
        result.backward()

        assert torch.allclose(b.grad, torch.sin(b).detach(), atol=1e-4)


class TestTrapezoidDtypes:
    @pytest.mark.parametrize("dtype", [torch.float32, torch.float64])
    def test_dtype_from_limits(self, dtype):
        from newtoncotes.quadrature import trapezoid

        a = torch.tensor(0.0, dtype=dtype)
        b = torch.tensor(1.0, dtype=dtype)

        result = trapezoid(identity, 10, a, b)

        assert result.dtype == dtype

    def test_python_limits_use_float64(self):
        from newtoncotes.quadrature import trapezoid

        assert trapezoid(identity, 10, 0, 1).dtype == torch.float64

    def test_pointwise_integrand_receives_float(self):
        from newtoncotes.quadrature import trapezoid

        seen = set()

        def f(x: float) -> float:
            seen.add(type(x))
            return 2.0 * x

        result = trapezoid(f, 5, 0, 1, vectorized=False)

        assert seen == {float}
        assert torch.allclose(result, torch.tensor(1.0, dtype=torch.float64))
