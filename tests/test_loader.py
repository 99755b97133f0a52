"""
Tests for configuration loading and validation.
"""

from pathlib import Path

import pytest

from sshhosts.config.loader import ConfigError, ConfigLoader, default_config_files, load_config
from sshhosts.config.parser import GrammarError


def test_default_config_files(ssh_home: Path) -> None:
    """Fragments come first in name order, then ~/.ssh/config."""
    paths = default_config_files(ssh_home)

    assert paths == [
        ssh_home / ".ssh" / "config.d" / "10-home.conf",
        ssh_home / ".ssh" / "config.d" / "20-work.conf",
        ssh_home / ".ssh" / "config",
    ]


def test_default_config_files_without_fragment_dir(tmp_path: Path) -> None:
    assert default_config_files(tmp_path) == [tmp_path / ".ssh" / "config"]


def test_default_config_files_skips_subdirectories(ssh_home: Path) -> None:
    (ssh_home / ".ssh" / "config.d" / "nested").mkdir()

    paths = default_config_files(ssh_home)

    assert all(p.name != "nested" for p in paths)


def test_load_files_concatenates_in_order(ssh_home: Path) -> None:
    loader = ConfigLoader()

    hosts = loader.load_files(default_config_files(ssh_home))

    assert [h.patterns for h in hosts] == [("home",), ("work",), ("*",)]
    assert hosts[2].user == "admin"


def test_load_files_uses_defaults(ssh_home: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: ssh_home))

    hosts = ConfigLoader().load_files()

    assert [h.name for h in hosts] == ["home", "work", "*"]


def test_load_config_function(tmp_path: Path, sample_config: str) -> None:
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.write_text(sample_config)
    second.write_text("Host qux\n")

    hosts = load_config(first, second)

    assert [h.name for h in hosts] == ["foo", "baz", "qux"]


def test_load_file(tmp_path: Path, sample_config: str) -> None:
    path = tmp_path / "config"
    path.write_text(sample_config)

    hosts = ConfigLoader().load_file(str(path))

    assert len(hosts) == 2
    assert hosts[0].port == 2200


def test_missing_file() -> None:
    with pytest.raises(ConfigError, match="not found") as exc_info:
        ConfigLoader().load_file("/nonexistent/ssh_config")

    assert exc_info.value.path == Path("/nonexistent/ssh_config")


def test_directory_is_not_a_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Not a file"):
        ConfigLoader().load_file(tmp_path)


def test_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "config"
    path.write_bytes(b"Host \xff\n")

    with pytest.raises(ConfigError, match="UTF-8"):
        ConfigLoader().load_file(path)


def test_parse_error_aborts_whole_load(tmp_path: Path) -> None:
    good = tmp_path / "good"
    bad = tmp_path / "bad"
    good.write_text("Host good\n")
    bad.write_text("User root\n")

    loader = ConfigLoader()
    with pytest.raises(ConfigError) as exc_info:
        loader.load_files([good, bad])

    assert str(bad) in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, GrammarError)
    assert loader.last_document is None


def test_missing_file_aborts_whole_load(tmp_path: Path) -> None:
    good = tmp_path / "good"
    good.write_text("Host good\n")

    with pytest.raises(ConfigError):
        ConfigLoader().load_files([good, tmp_path / "missing"])


def test_load_string_wraps_errors() -> None:
    with pytest.raises(ConfigError, match="Failed to parse <string>"):
        ConfigLoader().load_string("Host a\nPort abc\n")


def test_validate_clean_config(sample_config: str) -> None:
    loader = ConfigLoader()
    hosts = loader.load_string(sample_config)

    assert loader.validate(hosts) == []


def test_validate_warnings() -> None:
    loader = ConfigLoader()
    hosts = loader.load_string(
        "Host a b\nPort 70000\nForwardAgent yes\nHost b\nPort 0\n",
        filename="ssh_config",
    )

    warnings = loader.validate(hosts)

    assert "Unsupported directive 'ForwardAgent' ignored (ssh_config, line 3)" in warnings
    assert "Host 'a' has port 70000 outside 1-65535" in warnings
    assert "Host 'b' has port 0 outside 1-65535" in warnings
    assert "Pattern 'b' is declared by 2 Host blocks" in warnings
    assert len(warnings) == 4


@pytest.mark.parametrize("as_str", [True, False])
def test_load_files_accepts_single_path(tmp_path: Path, sample_config: str, as_str: bool) -> None:
    path = tmp_path / "config"
    path.write_text(sample_config)

    hosts = ConfigLoader().load_files(str(path) if as_str else path)

    assert [h.name for h in hosts] == ["foo", "baz"]
