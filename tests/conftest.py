import pytest

from unitconv import UnitConv


@pytest.fixture
def area():
    return UnitConv("area")


@pytest.fixture
def custom():
    return UnitConv("custom")
