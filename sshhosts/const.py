"""
Application constants and metadata.
"""

# Application info
APP_NAME = "sshhosts"
APP_VERSION = "0.1.0"

# Defaults
DEFAULT_PORT = 22
MIN_PORT = 1
MAX_PORT = 65535

# Default file locations, relative to the home directory
SSH_DIR_NAME = ".ssh"
CONFIG_FILE_NAME = "config"
CONFIG_DIR_NAME = "config.d"
