"""Tests for probdisc package import and basic smoke tests."""

import importlib
import subprocess
import sys


class TestImport:
    """Test that probdisc can be imported."""

    def test_import_probdisc(self) -> None:
        """Test importing the probdisc package."""
        import probdisc

        assert hasattr(probdisc, "__version__")

    def test_version_exists(self) -> None:
        """Test that __version__ is defined."""
        import probdisc

        assert isinstance(probdisc.__version__, str)
        assert len(probdisc.__version__) > 0

    def test_reimport(self) -> None:
        """Test that probdisc can be reimported."""
        import probdisc

        importlib.reload(probdisc)
        assert probdisc.__version__

    def test_public_api(self) -> None:
        """Test that the documented entry points are exported."""
        import probdisc

        for name in ("discretise", "discretize", "left_align", "centre",
                     "right_align", "remove_infinite_tails", "Method"):
            assert hasattr(probdisc, name), name
            assert name in probdisc.__all__


class TestCLISmoke:
    """Interpreter smoke tests for the probdisc package."""

    def test_python_c_discretise(self) -> None:
        """Test discretising via python -c."""
        code = (
            "import probdisc; "
            "d = probdisc.discretise(probdisc.Uniform(0, 10), 1.0, method='left_aligned'); "
            "print(len(d))"
        )
        result = subprocess.run(
            [sys.executable, "-c", code],
            capture_output=True,
            text=True,
        )
        assert result.returncode == 0, result.stderr
        assert result.stdout.strip() == "10"

    def test_python_c_version(self) -> None:
        """Test that version string is valid semver-like."""
        result = subprocess.run(
            [sys.executable, "-c", "import probdisc; print(probdisc.__version__)"],
            capture_output=True,
            text=True,
        )
        assert result.returncode == 0
        version = result.stdout.strip()
        # Basic semver check: at least major.minor.patch
        parts = version.split(".")
        assert len(parts) >= 3, f"Version {version!r} is not semver-like"
