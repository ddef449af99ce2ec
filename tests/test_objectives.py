"""
Tests for benchmark surfaces and objective binding.
"""
import numpy as np
import pytest

from realga import SURFACES, beale, booth, evaluate, make_individual, make_objective, three_hump_camel


class TestSurfaces:
    """Known minima of the benchmark surfaces."""

    @pytest.mark.parametrize(
        "surface, minimum",
        [
            (beale, (3.0, 0.5)),
            (booth, (1.0, 3.0)),
            (three_hump_camel, (0.0, 0.0)),
        ],
    )
    def test_global_minimum_is_zero(self, surface, minimum):
        assert surface(*minimum) == pytest.approx(0.0, abs=1e-12)

    @pytest.mark.parametrize("surface", [beale, booth, three_hump_camel])
    def test_positive_away_from_minimum(self, surface):
        assert surface(7.0, 7.0) > 0.0

    def test_vectorized(self):
        """Surfaces score whole arrays at once."""
        xs = np.array([1.0, 0.0, 2.0])
        ys = np.array([3.0, 0.0, 2.0])

        values = booth(xs, ys)

        assert values.shape == (3,)
        np.testing.assert_allclose(values, [booth(x, y) for x, y in zip(xs, ys)])

    def test_booth_value(self):
        # (0 + 0 - 7)^2 + (0 + 0 - 5)^2
        assert booth(0.0, 0.0) == pytest.approx(74.0)

    def test_registry(self):
        assert set(SURFACES) == {"beale", "booth", "three_hump_camel"}


class TestObjectiveBinding:
    """Tests for evaluate and make_objective."""

    def test_evaluate_returns_float(self):
        value = evaluate(make_individual(1.0, 3.0), booth)

        assert isinstance(value, float)
        assert value == pytest.approx(0.0)

    def test_evaluate_defaults_to_beale(self):
        assert evaluate(make_individual(3.0, 0.5)) == pytest.approx(0.0, abs=1e-12)

    def test_make_objective_by_name(self):
        objective = make_objective("three_hump_camel")

        assert objective(make_individual(0.0, 0.0)) == pytest.approx(0.0)
        assert objective.__name__ == "three_hump_camel"

    def test_make_objective_unknown_name(self):
        with pytest.raises(KeyError, match="Unknown surface"):
            make_objective("rosenbrock")

    def test_pure(self):
        objective = make_objective(beale)
        individual = make_individual(12.5, 0.75)

        assert objective(individual) == objective(individual)
