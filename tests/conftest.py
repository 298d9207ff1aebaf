"""Pytest fixtures for tests."""

import pytest
from click.testing import CliRunner

from remote25sl.models import InputPort


@pytest.fixture
def config_file(tmp_path):
    """Path to a config file inside a temporary directory (not created)."""
    return tmp_path / "config.json"


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(params=list(InputPort))
def any_port(request):
    """Each of the three input ports in turn."""
    return request.param
