"""
Lexer (tokenizer) for OpenSSH client configuration syntax.

Supports:
- One directive per line, keyword matched case-insensitively
- "Keyword value" and "Keyword=value" separators
- Full-line comments (#) and blank lines
- Host lines carrying whitespace-separated patterns
- Unsupported directives, tagged as ignorable instead of failing

The lexer never raises on bad input: problems are reported as ERROR
tokens and the parser decides what to do with them.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator


class TokenType(Enum):
    """Token types for the ssh_config syntax."""

    # Keywords
    HOST = auto()                 # Host
    HOSTNAME = auto()             # HostName
    USER = auto()                 # User
    PORT = auto()                 # Port
    PROXY_COMMAND = auto()        # ProxyCommand
    HOST_KEY_ALGORITHMS = auto()  # HostKeyAlgorithms
    IDENTITY_FILE = auto()        # IdentityFile

    # Values
    HOST_PATTERNS = auto()        # value of a Host line, split by the parser
    VALUE = auto()                # value of any other known directive

    # Special
    IGNORED = auto()              # unsupported directive or its value
    EOF = auto()                  # end of input

    # Error
    ERROR = auto()                # lexer error token


@dataclass
class Token:
    """A single token from the lexer."""

    type: TokenType
    value: str
    pos: int
    line: int
    column: int

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.column})"


class LexerError(Exception):
    """Exception raised for lexer errors."""

    def __init__(self, message: str, line: int, column: int, pos: int = 0):
        self.message = message
        self.line = line
        self.column = column
        self.pos = pos
        super().__init__(f"Line {line}, column {column} (offset {pos}): {message}")

    @classmethod
    def from_token(cls, token: Token) -> "LexerError":
        """Build an error from an ERROR token."""
        return cls(token.value, token.line, token.column, token.pos)


class Lexer:
    """
    Tokenizer for ssh_config syntax.

    Example config:
        Host web web.example.com
            HostName 10.0.0.5
            User deploy
            Port 2222

    Every known keyword token is followed by its value token on the next
    call to next_token().
    """

    # Lowercased keyword -> token type
    KEYWORDS = {
        "host": TokenType.HOST,
        "hostname": TokenType.HOSTNAME,
        "user": TokenType.USER,
        "port": TokenType.PORT,
        "proxycommand": TokenType.PROXY_COMMAND,
        "hostkeyalgorithms": TokenType.HOST_KEY_ALGORITHMS,
        "identityfile": TokenType.IDENTITY_FILE,
    }

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.line = 1
        self.column = 1
        self.line_start = 0

        # Value token owed to the caller after a keyword token
        self._pending: Token | None = None

    def _current(self) -> str:
        """Get current character or empty string if at end."""
        if self.pos >= len(self.source):
            return ""
        return self.source[self.pos]

    def _advance(self) -> str:
        """Advance position and return current character."""
        if self.pos >= len(self.source):
            return ""

        char = self.source[self.pos]
        self.pos += 1

        if char == "\n":
            self.line += 1
            self.column = 1
            self.line_start = self.pos
        else:
            self.column += 1

        return char

    def _skip_blanks(self) -> None:
        """Skip spaces and tabs on the current line."""
        while self._current() in (" ", "\t", "\r"):
            self._advance()

    def _skip_line(self) -> None:
        """Skip the rest of the current line, including the newline."""
        while self._current() and self._current() != "\n":
            self._advance()
        self._advance()

    def _skip_whitespace_and_comments(self) -> None:
        """Skip blank lines, indentation and full-line comments."""
        while True:
            char = self._current()
            if char and char in " \t\r\n":
                self._advance()
            elif char == "#":
                self._skip_line()
            else:
                break

    def _token(self, token_type: TokenType, value: str, pos: int, line: int, column: int) -> Token:
        return Token(type=token_type, value=value, pos=pos, line=line, column=column)

    def _error(self, message: str, pos: int, line: int, column: int) -> Token:
        """Build an ERROR token and resync at the next line."""
        self._skip_line()
        return self._token(TokenType.ERROR, message, pos, line, column)

    def _read_keyword(self) -> str:
        """Read a directive keyword (letters and digits)."""
        start_pos = self.pos
        while self._current() and self._current().isascii() and self._current().isalnum():
            self._advance()
        return self.source[start_pos:self.pos]

    def _read_value(self) -> tuple[str, int, int, int]:
        """
        Read the rest of the line as a value.

        Returns:
            Tuple of (trimmed value, pos, line, column) where the position
            points at the first non-blank character of the value.
        """
        self._skip_blanks()
        if self._current() == "=":
            self._advance()
            self._skip_blanks()

        start_pos = self.pos
        start_line = self.line
        start_col = self.column

        while self._current() and self._current() != "\n":
            self._advance()

        value = self.source[start_pos:self.pos].strip()
        self._advance()  # consume newline

        return value, start_pos, start_line, start_col

    def _read_directive(self) -> Token:
        """Read a keyword and queue its value token."""
        start_pos = self.pos
        start_line = self.line
        start_col = self.column

        keyword = self._read_keyword()

        char = self._current()
        if char and char not in " \t\r\n=":
            return self._error(
                f"Unexpected character {char!r} after keyword {keyword!r}",
                self.pos,
                self.line,
                self.column,
            )

        value, value_pos, value_line, value_col = self._read_value()
        keyword_type = self.KEYWORDS.get(keyword.lower())

        if keyword_type is None:
            # Unsupported directive: lexes fine, the parser skips it
            if value:
                self._pending = self._token(
                    TokenType.IGNORED, value, value_pos, value_line, value_col
                )
            return self._token(TokenType.IGNORED, keyword, start_pos, start_line, start_col)

        if not value:
            self._pending = self._token(
                TokenType.ERROR,
                f"Missing value for {keyword!r}",
                value_pos,
                value_line,
                value_col,
            )
        elif keyword_type is TokenType.HOST:
            self._pending = self._token(
                TokenType.HOST_PATTERNS, value, value_pos, value_line, value_col
            )
        else:
            self._pending = self._token(TokenType.VALUE, value, value_pos, value_line, value_col)

        return self._token(keyword_type, keyword, start_pos, start_line, start_col)

    def next_token(self) -> Token:
        """Get the next token from the source."""
        if self._pending is not None:
            token, self._pending = self._pending, None
            return token

        self._skip_whitespace_and_comments()

        if self.pos >= len(self.source):
            return self._token(TokenType.EOF, "", self.pos, self.line, self.column)

        char = self._current()

        # Directives
        if char.isascii() and char.isalpha():
            return self._read_directive()

        # Unknown character at start of line
        return self._error(
            f"Unexpected character: {char!r}",
            self.pos,
            self.line,
            self.column,
        )

    def tokenize(self) -> Iterator[Token]:
        """Generate all tokens from the source."""
        while True:
            token = self.next_token()
            yield token
            if token.type == TokenType.EOF:
                break

    def __iter__(self) -> Iterator[Token]:
        """Allow iteration over tokens."""
        return self.tokenize()


def tokenize(source: str) -> list[Token]:
    """Convenience function to tokenize a source string."""
    return list(Lexer(source))
