"""Re-sample a tabulated function on an even grid and write it next to the input."""
import logging
import sys
from pathlib import Path

from pyinterpfunct.core.interpolated_function import InterpolatedFunction
from pyinterpfunct.parsing.runtime import initialize_or_abort


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s -> %(message)s"
    )
    # Silence noisy libraries
    logging.getLogger('matplotlib').setLevel(logging.WARNING)


def resample_file(file_path: Path, num_points: int = 300) -> Path:
    """Write num_points re-interpolated (x, y) pairs to reint-<name> and return its path."""
    function = initialize_or_abort(InterpolatedFunction(), file_path)
    x_values, y_values = function.resample(num_points)
    out_path = file_path.parent / f"reint-{file_path.name}"
    with open(out_path, 'w') as f:
        for x, y in zip(x_values, y_values):
            f.write(f"{x:g} {y:g}\n")
    return out_path


if __name__ == "__main__":
    setup_logging()
    default_path = Path(__file__).parent / "data" / "quadratic.dat"
    path = Path(sys.argv[1]) if len(sys.argv) > 1 else default_path
    print(f"Written: {resample_file(path)}")
