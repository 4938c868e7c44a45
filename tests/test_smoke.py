"""
Smoke tests to verify basic infrastructure setup.
Run these after fresh environment setup to confirm everything works.
"""

import importlib
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent


def test_python_version():
    """Test Python version meets requirements."""
    assert sys.version_info >= (3, 9), f"Python 3.9+ required, got {sys.version}"


def test_package_imports():
    """Test that configured packages can be imported."""
    packages = [
        "numpy",
        "pytest",
        "psutil",
        "latticeca",
        "latticeca.core",
        "latticeca.nhood",
        "latticeca.engine",
        "latticeca.rules",
        "latticeca.config",
        "latticeca.cli",
    ]

    failed_imports = []
    for package in packages:
        try:
            importlib.import_module(package)
        except ImportError as e:
            failed_imports.append(f"{package}: {e}")

    if failed_imports:
        pytest.fail(f"Failed to import packages: {failed_imports}")


def test_public_api():
    """Top-level package re-exports the core types."""
    import latticeca

    for name in latticeca.__all__:
        assert hasattr(latticeca, name), f"latticeca.{name} missing"


def test_project_files():
    """Test that packaging and documentation files exist."""
    required = ["pyproject.toml", "README.md", "DESIGN.md", "latticeca", "tests"]

    missing = [name for name in required if not (ROOT / name).exists()]
    if missing:
        pytest.fail(f"Missing project files: {missing}")
