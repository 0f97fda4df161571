import math

from unitconv.classes import Affine, Identity, Linear, self_conversion


def test_identity_returns_value():
    assert self_conversion(42.5) == 42.5
    assert Identity()(-3.0) == -3.0
    assert Identity() == self_conversion


def test_identity_passes_non_finite_values():
    assert math.isinf(self_conversion(float("inf")))
    assert math.isnan(self_conversion(float("nan")))


def test_linear_scales():
    assert Linear(1000)(2.5) == 2500
    assert Linear(0.5) == Linear(0.5)
    assert Linear(0.5) != Linear(2)
    assert repr(Linear(9)) == "Linear(9)"


def test_affine_shifts_before_scaling():
    fahrenheit_to_celsius = Affine(5 / 9, shift=-32.0)
    assert math.isclose(fahrenheit_to_celsius(212), 100.0)
    assert math.isclose(fahrenheit_to_celsius(32), 0.0, abs_tol=1e-12)


def test_affine_offset_after_scaling():
    celsius_to_fahrenheit = Affine(9 / 5, offset=32.0)
    assert math.isclose(celsius_to_fahrenheit(100), 212.0)
    assert math.isclose(celsius_to_fahrenheit(-40), -40.0)


def test_conversions_are_hashable():
    assert len({Linear(2), Linear(2), Affine(1.0, offset=1.0), Identity()}) == 3
