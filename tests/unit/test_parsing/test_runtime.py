"""Tests for the hard-fail loading adapters."""

import pytest

from pyinterpfunct.core.interpolated_function import InterpolatedFunction
from pyinterpfunct.parsing.runtime import initialize_or_abort, load_or_abort


class TestInitializeOrAbort:
    """Test process termination on failed loads."""

    def test_success_returns_instance(self, quadratic_file):
        function = InterpolatedFunction()
        assert initialize_or_abort(function, quadratic_file) is function
        assert function.x_max == 3.0

    def test_missing_file_exits_with_diagnostic(self, missing_file, capsys):
        with pytest.raises(SystemExit) as excinfo:
            initialize_or_abort(InterpolatedFunction(), missing_file)
        assert excinfo.value.code == 1
        assert str(missing_file) in capsys.readouterr().err

    def test_load_or_abort(self, linear_file):
        function = load_or_abort(linear_file)
        assert function.x_min == 10.0

    def test_load_or_abort_missing(self, missing_file):
        with pytest.raises(SystemExit):
            load_or_abort(missing_file)
