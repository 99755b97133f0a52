"""
ssh_config parsing: lexer, parser and file loader.
"""

from .lexer import Lexer, LexerError, Token, TokenType
from .loader import ConfigError, ConfigLoader, default_config_files, load_config
from .parser import (
    ConfigDocument,
    ConfigParser,
    GrammarError,
    NumericError,
    ParseError,
    parse,
    parse_config,
)
from .schema import HostRecord

__all__ = [
    "Lexer",
    "LexerError",
    "Token",
    "TokenType",
    "ConfigParser",
    "ConfigDocument",
    "ParseError",
    "GrammarError",
    "NumericError",
    "parse",
    "parse_config",
    "HostRecord",
    "ConfigLoader",
    "ConfigError",
    "default_config_files",
    "load_config",
]
