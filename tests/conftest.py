"""
Pytest configuration and fixtures.
"""

import logging
from pathlib import Path

import pytest


SAMPLE_CONFIG = """\
# Work machines
Host foo bar
    HostName 10.0.0.1
    User root
    Port 2200

Host baz
    HostName 10.0.0.2
"""


@pytest.fixture
def sample_config() -> str:
    """Two-block ssh_config text."""
    return SAMPLE_CONFIG


@pytest.fixture
def ssh_home(tmp_path: Path) -> Path:
    """Fake home directory with ~/.ssh/config and two config.d fragments."""
    ssh_dir = tmp_path / ".ssh"
    config_dir = ssh_dir / "config.d"
    config_dir.mkdir(parents=True)

    (config_dir / "20-work.conf").write_text("Host work\n    HostName work.example.com\n")
    (config_dir / "10-home.conf").write_text("Host home\n    HostName 192.168.1.10\n")
    (ssh_dir / "config").write_text("Host *\n    User admin\n")

    return tmp_path


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by setup_logging() during a test."""
    yield
    root_logger = logging.getLogger("sshhosts")
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
