"""Top-level package for the quiz toolkit.

Provides subpackages:
- quiz_toolkit.core – QuizItem models, output validation and serialization
- quiz_toolkit.extractor – PDF + solutions transcript extraction pipeline
- quiz_toolkit.cli – command line entry points (quiz-build, quiz-parse-solutions)
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"

    if pyproject.exists():
        try:
            content = pyproject.read_text(encoding="utf-8")
            for line in content.splitlines():
                if line.strip().startswith("version"):
                    # Parse: version = "0.3.1"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass

    try:
        from importlib.metadata import version as pkg_version
        return pkg_version("quiz_toolkit")
    except Exception:
        return "0.0.0"

__version__ = _get_version()
__copyright__ = "Copyright 2026 The quiz_toolkit authors. Licensed under the MIT License"
__all__: list[str] = ["__version__"]
