"""Tests for easing functions."""

import math

import pytest
from trail_tween import EASINGS, get_easing


class TestEndpoints:
    """Every easing starts at 0 and ends at 1."""

    @pytest.mark.parametrize("name", sorted(EASINGS))
    def test_zero(self, name):
        assert math.isclose(EASINGS[name](0.0), 0.0, abs_tol=1e-12)

    @pytest.mark.parametrize("name", sorted(EASINGS))
    def test_one(self, name):
        assert math.isclose(EASINGS[name](1.0), 1.0, abs_tol=1e-12)


class TestQuadratics:
    def test_ease_in_at_half(self):
        """Ease-in is t*t."""
        assert EASINGS["ease_in"](0.5) == 0.25

    def test_ease_out_at_half(self):
        assert EASINGS["ease_out"](0.5) == 0.75

    def test_ease_in_out_at_half(self):
        assert EASINGS["ease_in_out"](0.5) == 0.5

    def test_ease_in_strictly_increasing(self):
        ease_in = EASINGS["ease_in"]
        samples = [ease_in(i / 100) for i in range(101)]
        assert all(b > a for a, b in zip(samples, samples[1:]))


class TestOvershoot:
    def test_back_overshoots(self):
        ease = EASINGS["ease_out_back"]
        assert max(ease(i / 100) for i in range(101)) > 1.0

    def test_elastic_overshoots(self):
        ease = EASINGS["ease_out_elastic"]
        assert max(ease(i / 100) for i in range(101)) > 1.0


class TestLookup:
    def test_get_easing(self):
        assert get_easing("linear")(0.3) == 0.3

    def test_unknown_name(self):
        with pytest.raises(KeyError, match="bogus"):
            get_easing("bogus")
