"""Shared pytest fixtures for PyInterpFunct tests."""
import pytest
import numpy as np
from pathlib import Path

from pyinterpfunct.core.interpolated_function import InterpolatedFunction


def write_data_file(directory: Path, name: str, content: str) -> Path:
    path = directory / name
    path.write_text(content)
    return path


@pytest.fixture
def quadratic_file(tmp_path):
    """Four samples of x**2 on [0, 3]."""
    return write_data_file(tmp_path, "quadratic.dat", "0 0\n1 1\n2 4\n3 9\n")


@pytest.fixture
def linear_file(tmp_path):
    """Samples of 2x + 1 on [10, 20]."""
    return write_data_file(tmp_path, "linear.dat", "10 21\n15 31\n20 41\n")


@pytest.fixture
def sine_arrays():
    """Dense samples of sin(x) on [0, pi]."""
    x = np.linspace(0.0, np.pi, 41)
    return x, np.sin(x)


@pytest.fixture
def sine_file(tmp_path, sine_arrays):
    x, y = sine_arrays
    content = "\n".join(f"{xi:.17g} {yi:.17g}" for xi, yi in zip(x, y)) + "\n"
    return write_data_file(tmp_path, "sine.dat", content)


@pytest.fixture
def missing_file(tmp_path):
    return tmp_path / "does_not_exist.dat"


@pytest.fixture
def quadratic_function(quadratic_file):
    function = InterpolatedFunction()
    assert function.initialize_from_file(quadratic_file)
    return function
