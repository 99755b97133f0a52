"""
Parser for ssh_config token streams.

Consumes tokens from the lexer and assembles the ordered list of host
records. The grammar is flat: every directive belongs to the Host block
opened most recently, and nothing may appear before the first Host line.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from ..logging import get_logger
from .lexer import Lexer, LexerError, Token, TokenType
from .schema import HostRecord


logger = get_logger("config.parser")


class ParseError(Exception):
    """Exception raised for parser errors."""

    def __init__(self, message: str, token: Token | None = None):
        self.message = message
        self.token = token
        if token:
            super().__init__(f"Line {token.line}, column {token.column}: {message}")
        else:
            super().__init__(message)


class GrammarError(ParseError):
    """Directive out of place, or a directive not followed by its value."""


class NumericError(ParseError):
    """Port value is not a base-10 integer."""


class ParserState(Enum):
    """Parser states."""

    NO_HOST = auto()  # before the first Host line
    IN_HOST = auto()  # inside a Host block


# Keyword token -> HostRecord field it sets
FIELD_TOKENS = {
    TokenType.HOSTNAME: "hostname",
    TokenType.USER: "user",
    TokenType.PORT: "port",
    TokenType.PROXY_COMMAND: "proxy_command",
    TokenType.HOST_KEY_ALGORITHMS: "host_key_algorithms",
    TokenType.IDENTITY_FILE: "identity_file",
}


@dataclass
class IgnoredDirective:
    """An unsupported directive skipped by the parser."""
    name: str
    line: int = 0
    filename: str = "<string>"

    def __repr__(self) -> str:
        return f"IgnoredDirective({self.name}, {self.filename}:{self.line})"


@dataclass
class ConfigDocument:
    """
    Parsed document: host records in declaration order plus the
    unsupported directives that were skipped.
    """
    hosts: list[HostRecord] = field(default_factory=list)
    ignored: list[IgnoredDirective] = field(default_factory=list)
    filename: str = "<string>"

    def __len__(self) -> int:
        return len(self.hosts)

    def merge(self, other: "ConfigDocument") -> None:
        """Append another document's records after this one's."""
        self.hosts.extend(other.hosts)
        self.ignored.extend(other.ignored)


def parse_port(token: Token) -> int:
    """Convert a Port value to int, accepting base-10 digits only."""
    text = token.value
    digits = text[1:] if text[:1] in ("+", "-") else text
    if not digits.isascii() or not digits.isdigit():
        raise NumericError(f"Invalid port number: {text!r}", token)
    return int(text)


class ConfigParser:
    """
    State machine parser for ssh_config.

    Grammar:
        document   := (comment | blank)* host_block*
        host_block := HOST HOST_PATTERNS directive*
        directive  := KEYWORD VALUE | IGNORED IGNORED?
    """

    def __init__(self, source: str, filename: str = "<string>"):
        self.lexer = Lexer(source)
        self.filename = filename

        self.state = ParserState.NO_HOST
        self.current_token: Token | None = None
        self.previous_token: Token | None = None

        # Field values of the Host block being parsed
        self._draft: dict[str, Any] | None = None

    def _advance(self) -> Token:
        """Fetch the next token from the lexer."""
        self.current_token = self.lexer.next_token()
        return self.current_token

    def _open_host(self, token: Token) -> None:
        self._draft = {"patterns": (), "line": token.line}
        self.state = ParserState.IN_HOST

    def _close_host(self, doc: ConfigDocument) -> None:
        if self._draft is None:
            return
        record = HostRecord(**self._draft)
        logger.debug(f"{self.filename}:{record.line}: parsed host {' '.join(record.patterns)}")
        doc.hosts.append(record)
        self._draft = None

    def _expect_value(self) -> Token:
        """Fetch the value token paired with a keyword."""
        value = self._advance()

        # Lexer diagnostics (e.g. a missing value) surface as the message
        if value.type != TokenType.VALUE:
            raise GrammarError(value.value, value)

        return value

    def parse(self) -> ConfigDocument:
        """Parse the entire configuration document."""
        doc = ConfigDocument(filename=self.filename)

        while True:
            token = self._advance()

            if self._missing_patterns(token):
                raise GrammarError(token.value, token)

            if token.type == TokenType.ERROR:
                raise LexerError.from_token(token)

            if token.type == TokenType.EOF:
                self._close_host(doc)
                break

            if self.state == ParserState.NO_HOST and token.type != TokenType.HOST:
                raise GrammarError("directive before Host block", token)

            if token.type == TokenType.HOST:
                self._close_host(doc)
                self._open_host(token)

            elif token.type == TokenType.HOST_PATTERNS:
                self._draft["patterns"] = tuple(token.value.split())

            elif token.type in FIELD_TOKENS:
                value = self._expect_value()
                name = FIELD_TOKENS[token.type]
                if token.type == TokenType.PORT:
                    self._draft[name] = parse_port(value)
                else:
                    self._draft[name] = value.value

            elif token.type == TokenType.IGNORED:
                if not self._is_ignored_value(token):
                    logger.debug(f"{self.filename}:{token.line}: ignoring directive {token.value!r}")
                    doc.ignored.append(
                        IgnoredDirective(name=token.value, line=token.line, filename=self.filename)
                    )

            else:
                raise GrammarError(f"Unexpected {token.type.name} token", token)

            self.previous_token = token

        return doc

    def _missing_patterns(self, token: Token) -> bool:
        """Check if a Host keyword is followed by something other than its patterns."""
        previous = self.previous_token
        return (
            previous is not None
            and previous.type == TokenType.HOST
            and token.type != TokenType.HOST_PATTERNS
        )

    def _is_ignored_value(self, token: Token) -> bool:
        """Check if an IGNORED token is the value of the preceding IGNORED keyword."""
        previous = self.previous_token
        return (
            previous is not None
            and previous.type == TokenType.IGNORED
            and previous.line == token.line
        )


def parse_config(source: str, filename: str = "<string>") -> ConfigDocument:
    """
    Convenience function to parse a configuration string.

    Args:
        source: ssh_config text
        filename: Filename for error messages

    Returns:
        Parsed ConfigDocument
    """
    parser = ConfigParser(source, filename)
    return parser.parse()


def parse(source: str) -> list[HostRecord]:
    """Parse ssh_config text into host records."""
    return parse_config(source).hosts
