import pytest

from mipmodel import Model


@pytest.fixture
def model() -> Model:
    return Model()


@pytest.fixture
def x(model):
    x = model.new_float(0.0, 100.0)
    x.name = "x"
    return x


@pytest.fixture
def y(model, x):
    y = model.new_int(0, 100)
    y.name = "y"
    return y
