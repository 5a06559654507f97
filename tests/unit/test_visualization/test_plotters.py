"""Unit tests for visualization plotters."""

import matplotlib
matplotlib.use('Agg')

from unittest.mock import patch

import pytest

from pyinterpfunct.core.interpolated_function import InterpolatedFunction
from pyinterpfunct.core.exceptions import UninitializedFunctionError
from pyinterpfunct.visualization.plotters import FunctionVisualizer


class TestFunctionVisualizer:
    """Test cases for FunctionVisualizer."""

    def test_plot_spline_function(self, tmp_path, quadratic_function):
        visualizer = FunctionVisualizer(tmp_path)
        filepath = visualizer.plot_function(quadratic_function, "square", num_points=50)
        assert filepath == tmp_path / "pyinterpfunct_plots" / "square.png"
        assert filepath.exists()

    def test_plot_unity_function(self, tmp_path):
        function = InterpolatedFunction()
        function.initialize_as_unity(2.0, 2.0)
        visualizer = FunctionVisualizer(tmp_path)
        filepath = visualizer.plot_function(function, "flat", num_points=20)
        assert filepath.exists()

    def test_disabled_visualizer_does_nothing(self, tmp_path, quadratic_function):
        visualizer = FunctionVisualizer(tmp_path)
        visualizer.is_enabled = False
        with patch('matplotlib.pyplot.subplots') as mock_subplots:
            assert visualizer.plot_function(quadratic_function, "square") is None
        mock_subplots.assert_not_called()
        assert not (tmp_path / "pyinterpfunct_plots").exists()

    def test_figure_is_closed(self, tmp_path, quadratic_function):
        visualizer = FunctionVisualizer(tmp_path)
        with patch('matplotlib.pyplot.close') as mock_close:
            visualizer.plot_function(quadratic_function, "square", num_points=10)
        mock_close.assert_called_once()

    def test_uninitialized_function_raises(self, tmp_path):
        visualizer = FunctionVisualizer(tmp_path)
        with pytest.raises(UninitializedFunctionError):
            visualizer.plot_function(InterpolatedFunction(), "nothing")
