"""pytest plugin for archrule.

Provides fixtures for architecture testing:
    archrule_config: Rule configuration (override in conftest.py)
    archrule_result: CheckResult for the source directory

Configuration (pytest.ini or pyproject.toml):
    archrule_source_dir: Source directory to analyze (default: "src")
    archrule_config_file: Configuration file relative to rootdir

Example:
    def test_use_cases_return_dtos(archrule_result):
        assert_no_exposed_models(archrule_result)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

# Register fixtures from fixtures module
from archrule.presentation.pytest_plugin.fixtures import (
    archrule_config,
    archrule_result,
    assert_no_exposed_models,
)

if TYPE_CHECKING:
    import pytest

__all__ = [
    "archrule_config",
    "archrule_result",
    "assert_no_exposed_models",
]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini("archrule_source_dir", "Source directory analyzed by archrule", default="src")
    parser.addini("archrule_config_file", "archrule configuration file", default="")


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest plugin with markers."""
    config.addinivalue_line(
        "markers",
        "arch: mark test as architecture test",
    )
