"""
Tokenizer turning JSON source text into a located token list.

The whole input is scanned eagerly in one forward pass. Each recognizer takes
a cursor and returns ``(cursor, token)``; an unchanged cursor together with
``None`` means the construct does not start there and the next recognizer is
tried. Conditions no recognizer can recover from raise immediately.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias

from jsonparser._errors import MalformedFloat
from jsonparser._errors import MissingNumberAfterMinus
from jsonparser._errors import UnexpectedCharacter
from jsonparser._errors import UnterminatedString
from jsonparser._profiling import ProfileContext

Position: TypeAlias = int

SYMBOLS = frozenset("[]{}:,")
_DIGITS = frozenset("0123456789")
_BOOLEANS = frozenset({"true", "false"})


class TokenKind(Enum):
    """Token classification produced by the lexer."""

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    NULL = "null"
    SYMBOL = "symbol"
    # Never produced; exhaustion is detected by index into the token list.
    END_OF_FILE = "end_of_file"


@dataclass(frozen=True, slots=True)
class Token:
    """
    Classified fragment of source text.

    ``value`` holds the literal text; for strings it is the body between the
    quotes, taken verbatim. ``line`` and ``column`` are 1-based and point at
    the first character of the token.
    """

    kind: TokenKind
    value: str
    line: int
    column: int


class JsonLexer:
    """
    Scans JSON text into tokens, tracking line and column.

    A ``\\n``, a lone ``\\r`` and a ``\\r\\n`` pair each count as one line
    break, whether they appear between tokens or inside string literals.
    """

    def __init__(self, text: str):
        self.text = text
        self.length = len(text)
        self.pos: Position = 0
        self.line = 1
        self.line_start: Position = 0

        self._recognizers: tuple[
            Callable[[Position], tuple[Position, Token | None]], ...
        ] = (
            self.scan_symbol,
            self.scan_string,
            self.scan_number,
            self.scan_boolean,
            self.scan_null,
        )

    def peek(self, cursor: Position) -> str:
        """Returns the character at ``cursor``, or "" past the end."""
        return self.text[cursor] if cursor < self.length else ""

    def location(self, cursor: Position) -> tuple[int, int]:
        """Line and column of ``cursor`` on the current line."""
        return self.line, cursor - self.line_start + 1

    def consume(self, end: Position) -> None:
        """Advances to ``end``, counting line breaks along the way."""
        text = self.text
        for i in range(self.pos, end):
            char = text[i]
            if char == "\n" or (char == "\r" and self.peek(i + 1) != "\n"):
                self.line += 1
                self.line_start = i + 1
        self.pos = end

    def scan_symbol(self, cursor: Position) -> tuple[Position, Token | None]:
        char = self.peek(cursor)
        if char not in SYMBOLS:
            return cursor, None
        return cursor + 1, Token(TokenKind.SYMBOL, char, *self.location(cursor))

    def scan_string(self, cursor: Position) -> tuple[Position, Token | None]:
        """Scans a quoted string; the body is kept without interpretation."""
        if self.peek(cursor) != '"':
            return cursor, None

        with ProfileContext("scan_string"):
            end = self.text.find('"', cursor + 1)
            if end == -1:
                raise UnterminatedString(
                    "unterminated string",
                    self.text[cursor:],
                    *self.location(cursor),
                )
            return end + 1, Token(
                TokenKind.STRING,
                self.text[cursor + 1 : end],
                *self.location(cursor),
            )

    def scan_number(self, cursor: Position) -> tuple[Position, Token | None]:
        """Scans ``-?digits(.digits)?`` into an integer or float token."""
        end = cursor
        if self.peek(end) == "-":
            end += 1

        if self.peek(end) not in _DIGITS:
            if end != cursor:
                raise MissingNumberAfterMinus(
                    "no number after '-'", "-", *self.location(cursor)
                )
            return cursor, None

        with ProfileContext("scan_number"):
            while self.peek(end) in _DIGITS:
                end += 1

            kind = TokenKind.INTEGER
            if self.peek(end) == ".":
                if self.peek(end + 1) not in _DIGITS:
                    raise MalformedFloat(
                        "couldn't parse float: expected digit after '.'",
                        self.text[cursor : end + 1],
                        *self.location(cursor),
                    )
                end += 1
                while self.peek(end) in _DIGITS:
                    end += 1
                kind = TokenKind.FLOAT

            return end, Token(kind, self.text[cursor:end], *self.location(cursor))

    def _scan_word(self, cursor: Position) -> Position:
        end = cursor
        while self.peek(end).isalpha():
            end += 1
        return end

    def scan_boolean(self, cursor: Position) -> tuple[Position, Token | None]:
        end = self._scan_word(cursor)
        word = self.text[cursor:end]
        if word not in _BOOLEANS:
            return cursor, None
        return end, Token(TokenKind.BOOLEAN, word, *self.location(cursor))

    def scan_null(self, cursor: Position) -> tuple[Position, Token | None]:
        end = self._scan_word(cursor)
        if self.text[cursor:end] != "null":
            return cursor, None
        return end, Token(TokenKind.NULL, "null", *self.location(cursor))

    def next_token(self) -> Token | None:
        """Returns the next token, or None once the input is exhausted."""
        while self.pos < self.length and self.text[self.pos].isspace():
            self.consume(self.pos + 1)

        if self.pos >= self.length:
            return None

        for recognize in self._recognizers:
            end, token = recognize(self.pos)
            if token is not None:
                self.consume(end)
                return token

        raise UnexpectedCharacter(
            "unexpected character",
            self.text[self.pos],
            *self.location(self.pos),
        )

    def tokenize(self) -> list[Token]:
        """Scans the remaining input into a token list."""
        with ProfileContext("tokenize", self.length):
            tokens: list[Token] = []
            while (token := self.next_token()) is not None:
                tokens.append(token)
            return tokens


def tokenize(text: str) -> list[Token]:
    """
    Converts JSON text into an ordered list of tokens.

    Raises a ParseError subclass (UnterminatedString, MalformedFloat,
    MissingNumberAfterMinus or UnexpectedCharacter) on the first character
    sequence that cannot start a token.
    """
    return JsonLexer(text).tokenize()
