"""Pytest configuration and shared fixtures."""

import pytest
from click.testing import CliRunner

from shared.config import HardpassConfig
from shared.logger import HardpassLogger

from hardpass.core.engine import HardpassEngine
from hardpass.core.evaluator import PolicyEvaluator


@pytest.fixture
def evaluator():
    """Evaluator with the default policy."""
    return PolicyEvaluator()


@pytest.fixture
def silent_logger():
    """Logger with no console handler."""
    return HardpassLogger("test", console_output=False)


@pytest.fixture
def engine(silent_logger):
    """Engine with the default configuration and a silent logger."""
    return HardpassEngine(HardpassConfig(), logger=silent_logger)


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def write_config(tmp_path):
    """Write TOML text to a config file and return its path."""

    def _write(text: str):
        path = tmp_path / "hardpass.toml"
        path.write_text(text, encoding="utf-8")
        return path

    return _write
