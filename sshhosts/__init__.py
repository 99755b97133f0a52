"""
sshhosts - parse OpenSSH client configuration into host records.
"""

from .config import ConfigLoader, HostRecord, load_config, parse
from .const import APP_VERSION

__version__ = APP_VERSION

__all__ = [
    "ConfigLoader",
    "HostRecord",
    "load_config",
    "parse",
    "__version__",
]
