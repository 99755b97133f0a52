"""
Host record produced by the parser.

One HostRecord per Host block, frozen once the block is closed.
"""

from dataclasses import asdict, dataclass, field
from typing import Any

from ..const import DEFAULT_PORT


@dataclass(frozen=True)
class HostRecord:
    """
    Settings of a single Host block.

    Example:
        Host foo bar          -> HostRecord(patterns=("foo", "bar"),
          HostName 10.0.0.1                 hostname="10.0.0.1",
          Port 2200                         port=2200)
    """
    patterns: tuple[str, ...]
    hostname: str = ""
    user: str = ""
    port: int = DEFAULT_PORT
    proxy_command: str = ""
    host_key_algorithms: str = ""
    identity_file: str = ""
    line: int = field(default=0, compare=False)

    def __repr__(self) -> str:
        return f"HostRecord({' '.join(self.patterns)!r}, hostname={self.hostname!r}, port={self.port})"

    @property
    def name(self) -> str:
        """First pattern of the block."""
        return self.patterns[0]

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dict."""
        data = asdict(self)
        data["patterns"] = list(self.patterns)
        del data["line"]
        return data

    def to_ssh_config(self) -> str:
        """Render the record back as an ssh_config block (non-default fields only)."""
        lines = [f"Host {' '.join(self.patterns)}"]
        if self.hostname:
            lines.append(f"    HostName {self.hostname}")
        if self.user:
            lines.append(f"    User {self.user}")
        if self.port != DEFAULT_PORT:
            lines.append(f"    Port {self.port}")
        if self.proxy_command:
            lines.append(f"    ProxyCommand {self.proxy_command}")
        if self.host_key_algorithms:
            lines.append(f"    HostKeyAlgorithms {self.host_key_algorithms}")
        if self.identity_file:
            lines.append(f"    IdentityFile {self.identity_file}")
        return "\n".join(lines) + "\n"
