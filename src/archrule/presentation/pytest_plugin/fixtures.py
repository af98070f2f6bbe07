"""pytest fixtures for architecture testing.

User overrides archrule_config in their conftest.py.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from archrule.application.services import ArchRuleChecker
from archrule.domain.exceptions.violation import ArchitectureViolationError
from archrule.infrastructure.config import find_config_file, load_config

if TYPE_CHECKING:
    from archrule.domain.model.check_result import CheckResult
    from archrule.domain.model.configuration import RuleConfig


def _get_ini_value(config: pytest.Config, name: str, default: str) -> str:
    """Get ini value from pytest config with fallback.

    Args:
        config: pytest Config object
        name: ini option name
        default: default value if not set

    Returns:
        String value of ini option
    """
    value = config.getini(name)
    if value:
        return str(value)
    return default


def _root_dir(request: pytest.FixtureRequest) -> Path:
    return Path(str(request.config.rootpath))


@pytest.fixture(scope="session")
def archrule_config(request: pytest.FixtureRequest) -> RuleConfig:
    """Rule configuration for the session.

    Loads archrule_config_file when set, otherwise searches the standard
    locations under the rootdir. Override in conftest.py to configure
    in code.

    Returns:
        RuleConfig (defaults if no file found)
    """
    root_dir = _root_dir(request)
    configured = _get_ini_value(request.config, "archrule_config_file", "")
    path = root_dir / configured if configured else find_config_file(root_dir)
    return load_config(path)


@pytest.fixture(scope="session")
def archrule_result(
    request: pytest.FixtureRequest,
    archrule_config: RuleConfig,
) -> CheckResult:
    """Check result for the configured source directory.

    Reads archrule_source_dir from pytest.ini (default: "src").

    Returns:
        CheckResult for the whole source tree
    """
    source_dir = _get_ini_value(request.config, "archrule_source_dir", "src")
    source_path = _root_dir(request) / source_dir

    if not source_path.exists():
        raise FileNotFoundError(
            f"archrule_source_dir '{source_path}' does not exist. "
            f"Configure archrule_source_dir in pytest.ini or pyproject.toml."
        )

    return ArchRuleChecker(archrule_config).check(source_path)


def assert_no_exposed_models(result: CheckResult) -> None:
    """Fail with every violation listed.

    Args:
        result: Check result to assert on

    Raises:
        ArchitectureViolationError: If result has violations
    """
    if not result.passed:
        raise ArchitectureViolationError(result.violations)
