"""
Error taxonomy for tokenizing and parsing.

Every failure is a ParseError carrying a message and, where a token or
character position is known, the offending literal with its line and column.
"""

from typing import TYPE_CHECKING
from typing import TypeVar

if TYPE_CHECKING:
    from jsonparser._lexer import Token


class ParseError(ValueError):
    """
    Handles JSON syntax failures with the location of the offending text.

    Located errors render as ``<msg> at [ <literal> ] (line L, column C)``;
    errors without a location render as the bare message.
    """

    def __init__(
        self,
        msg: str,
        literal: str | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        if not isinstance(msg, str) or not msg:
            raise TypeError("msg must be a non-empty string")
        if line is not None and line < 1:
            raise ValueError("line must be a positive integer")
        if column is not None and column < 1:
            raise ValueError("column must be a positive integer")

        self.msg = msg
        self.literal = literal
        self.line = line
        self.column = column

        super().__init__(self._format())

    @property
    def has_location(self) -> bool:
        return self.line is not None and self.column is not None

    def _format(self) -> str:
        if not self.has_location:
            return self.msg
        return (
            f"{self.msg} at [ {self.literal} ] "
            f"(line {self.line}, column {self.column})"
        )


# Lexer stage


class UnterminatedString(ParseError):
    """String literal without a closing quote."""


class MalformedFloat(ParseError):
    """Decimal point not followed by a digit."""


class MissingNumberAfterMinus(ParseError):
    """Minus sign not followed by a digit."""


class UnexpectedCharacter(ParseError):
    """No token starts at this character."""


# Parser stage


class UnexpectedTokenAfterSeparator(ParseError):
    """Comma immediately followed by a closing symbol, comma or colon."""


class ExpectedSeparatorOrClose(ParseError):
    """Element or property not followed by ',' or the closing symbol."""


class ExpectedColon(ParseError):
    """Object key not followed by ':'."""


class ExpectedValue(ParseError):
    """No value starts at a position that requires one."""


class InvalidObjectKey(ParseError):
    """Object key is not a string token."""


class InvalidNumber(ParseError):
    """Numeric literal rejected by conversion or out of 64-bit range."""


class NestingTooDeep(ParseError):
    """Arrays and objects nested beyond the configured depth."""


class UnexpectedEndOfInput(ParseError):
    """Tokens exhausted while a value or closing symbol was still required."""

    def __init__(self, msg: str = "failed to parse JSON") -> None:
        super().__init__(msg)


class TrailingTokens(ParseError):
    """Tokens remain after a complete top-level value."""


E = TypeVar("E", bound=ParseError)


def token_error(error_type: type[E], msg: str, token: "Token") -> E:
    """Builds a located error pointing at ``token``."""
    return error_type(msg, token.value, token.line, token.column)


__all__ = [
    "ExpectedColon",
    "ExpectedSeparatorOrClose",
    "ExpectedValue",
    "InvalidNumber",
    "InvalidObjectKey",
    "MalformedFloat",
    "MissingNumberAfterMinus",
    "NestingTooDeep",
    "ParseError",
    "TrailingTokens",
    "UnexpectedCharacter",
    "UnexpectedEndOfInput",
    "UnexpectedTokenAfterSeparator",
    "UnterminatedString",
    "token_error",
]
