"""
Configuration loader: file reading, default file list and validation.
"""

from collections.abc import Iterable
from pathlib import Path

from ..const import CONFIG_DIR_NAME, CONFIG_FILE_NAME, MAX_PORT, MIN_PORT, SSH_DIR_NAME
from ..logging import get_logger
from .lexer import LexerError
from .parser import ConfigDocument, ParseError, parse_config
from .schema import HostRecord


logger = get_logger("config.loader")


class ConfigError(Exception):
    """Exception raised for configuration errors."""

    def __init__(self, message: str, path: str | Path | None = None):
        self.path = path
        super().__init__(message)


def default_config_files(home: str | Path | None = None) -> list[Path]:
    """
    Build the default list of configuration files.

    Files in ~/.ssh/config.d come first, sorted by name, followed by
    ~/.ssh/config.

    Args:
        home: Home directory (defaults to the current user's)

    Returns:
        Ordered list of paths
    """
    ssh_dir = (Path(home) if home is not None else Path.home()) / SSH_DIR_NAME
    config_dir = ssh_dir / CONFIG_DIR_NAME

    paths: list[Path] = []
    if config_dir.is_dir():
        paths.extend(sorted(p for p in config_dir.iterdir() if p.is_file()))
    else:
        logger.debug(f"No fragment directory at {config_dir}")

    paths.append(ssh_dir / CONFIG_FILE_NAME)
    return paths


class ConfigLoader:
    """
    Loads host records from files or strings.

    Usage:
        loader = ConfigLoader()
        hosts = loader.load_files(["~/.ssh/config"])
        # or, with the default file list
        hosts = loader.load_files()
        # or
        hosts = loader.load_string(config_text)
    """

    def __init__(self):
        self.last_document: ConfigDocument | None = None

    def _parse(self, source: str, filename: str) -> ConfigDocument:
        try:
            return parse_config(source, filename)
        except (LexerError, ParseError) as e:
            raise ConfigError(f"Failed to parse {filename}: {e}", filename) from e

    def _read(self, path: Path) -> str:
        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}", path)

        if not path.is_file():
            raise ConfigError(f"Not a file: {path}", path)

        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise ConfigError(f"Configuration file is not valid UTF-8: {path}", path) from e
        except OSError as e:
            raise ConfigError(f"Failed to read {path}: {e}", path) from e

    def _load_document(self, path: str | Path) -> ConfigDocument:
        path = Path(path).expanduser()
        logger.debug(f"Reading {path}")
        document = self._parse(self._read(path), str(path))
        logger.debug(f"Loaded {len(document)} host(s) from {path}")
        return document

    def load_file(self, path: str | Path) -> list[HostRecord]:
        """
        Load host records from a file.

        Args:
            path: Path to the configuration file

        Returns:
            Host records in declaration order

        Raises:
            ConfigError: If the file cannot be read or parsed
        """
        document = self._load_document(path)
        self.last_document = document
        return list(document.hosts)

    def load_string(self, source: str, filename: str = "<string>") -> list[HostRecord]:
        """
        Load host records from a string.

        Raises:
            ConfigError: If the text cannot be parsed
        """
        document = self._parse(source, filename)
        self.last_document = document
        return list(document.hosts)

    def load_files(self, paths: str | Path | Iterable[str | Path] | None = None) -> list[HostRecord]:
        """
        Load and concatenate host records from several files.

        Args:
            paths: A file, or files in load order; default_config_files() if empty

        Returns:
            Records of all files, file by file in the given order

        Raises:
            ConfigError: On the first file that cannot be read or parsed;
                nothing is returned for the files loaded before it
        """
        if isinstance(paths, (str, Path)):
            paths = [paths]

        paths = list(paths or [])
        if not paths:
            paths = default_config_files()

        merged = ConfigDocument(filename=", ".join(str(p) for p in paths))
        for path in paths:
            merged.merge(self._load_document(path))

        self.last_document = merged
        return list(merged.hosts)

    def validate(self, hosts: list[HostRecord]) -> list[str]:
        """
        Validate host records and return list of warnings.

        Args:
            hosts: Records to validate

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        # Unsupported directives from the last load
        if self.last_document:
            for directive in self.last_document.ignored:
                warnings.append(
                    f"Unsupported directive '{directive.name}' ignored "
                    f"({directive.filename}, line {directive.line})"
                )

        for host in hosts:
            if not MIN_PORT <= host.port <= MAX_PORT:
                warnings.append(f"Host '{host.name}' has port {host.port} outside {MIN_PORT}-{MAX_PORT}")

        # Same pattern declared by more than one block
        seen: dict[str, int] = {}
        for host in hosts:
            for pattern in host.patterns:
                seen[pattern] = seen.get(pattern, 0) + 1

        for pattern, count in seen.items():
            if count > 1:
                warnings.append(f"Pattern '{pattern}' is declared by {count} Host blocks")

        return warnings


def load_config(*paths: str | Path) -> list[HostRecord]:
    """
    Convenience function to load host records from files.

    Args:
        paths: Configuration files; the default file list if none given

    Returns:
        Concatenated host records
    """
    loader = ConfigLoader()
    return loader.load_files(paths)
