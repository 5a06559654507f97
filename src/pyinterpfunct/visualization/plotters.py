import logging
from pathlib import Path
from typing import Optional, Union

import matplotlib.pyplot as plt
import numpy as np

from pyinterpfunct.core.interpolated_function import InterpolatedFunction
from pyinterpfunct.data.constants import FileConstants, ProcessingConstants

logger = logging.getLogger(__name__)


class FunctionVisualizer:
    """Plots interpolated functions together with their knots."""

    # --- Constructor ---
    def __init__(self, output_dir: Union[str, Path]) -> None:
        self.plot_directory = Path(output_dir) / FileConstants.PLOT_DIRECTORY_NAME
        self.is_enabled = True
        self.setup_style()
        logger.debug("FunctionVisualizer initialized, plots go to: %s", self.plot_directory)

    @staticmethod
    def setup_style() -> None:
        plt.rcParams.update({
            'font.size': 10,
            'font.family': 'sans-serif',
            'axes.titlesize': 12,
            'axes.labelsize': 10,
            'legend.fontsize': 9,
            'axes.grid': True,
            'grid.alpha': 0.3,
            'grid.linestyle': '--',
            'figure.facecolor': 'white',
            'savefig.dpi': 300,
            'figure.autolayout': True
        })

    # --- Public API ---
    def plot_function(self, function: InterpolatedFunction, name: str,
                      num_points: int = ProcessingConstants.DEFAULT_VISUALIZATION_POINTS,
                      x_label: str = "x", y_label: str = "f(x)") -> Optional[Path]:
        """
        Plot function over its domain padded on both sides, with knots marked in spline mode.
        Args:
            function: Initialized function to plot
            name: Title and file stem of the plot
            num_points: Number of evaluation points
            x_label: Label of the argument axis
            y_label: Label of the value axis
        Returns:
            Path of the saved figure, or None if visualization is disabled
        """
        if not self.is_enabled:
            logger.debug("Visualization disabled, skipping plot of '%s'", name)
            return None
        x_min, x_max = function.x_min, function.x_max
        padding = (x_max - x_min) * ProcessingConstants.DOMAIN_PADDING_FACTOR
        if padding <= 0.0:
            padding = max(abs(x_min), 1.0) * ProcessingConstants.DOMAIN_PADDING_FACTOR
        x_values = np.linspace(x_min - padding, x_max + padding, num_points)
        y_values = function(x_values)
        fig, ax = plt.subplots(figsize=(10, 6))
        try:
            ax.plot(x_values, y_values, color='tab:blue', linewidth=1.5,
                    label='unity' if function.is_unity else 'cubic spline')
            knots = function.knots
            if knots is not None:
                ax.scatter(knots[0], knots[1], color='tab:red', s=12, zorder=3, label='data')
            ax.axvline(x_min, color='gray', linestyle=':', linewidth=1)
            ax.axvline(x_max, color='gray', linestyle=':', linewidth=1)
            ax.set_xlabel(x_label)
            ax.set_ylabel(y_label)
            ax.set_title(name)
            ax.legend(loc='best')
            self.plot_directory.mkdir(parents=True, exist_ok=True)
            filepath = self.plot_directory / f"{name}.png"
            fig.savefig(str(filepath), bbox_inches='tight')
            logger.info("Saved plot of '%s' to %s", name, filepath)
            return filepath
        finally:
            plt.close(fig)
