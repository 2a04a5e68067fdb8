"""
Recursive-descent parser turning a token list into a value tree.

Every ``parse_*`` recognizer takes a cursor into the token list and returns
``(cursor, value)``. Returning the cursor unchanged means "no match" and
leaves no trace, so ``parse_value`` can try the recognizers in a fixed order.
Fatal conditions are raised as ParseError subclasses and collapse into a
single returned error at ``parse``.
"""

import math
from collections.abc import Callable
from collections.abc import Iterator
from collections.abc import Sequence
from contextlib import contextmanager
from dataclasses import dataclass

from jsonparser._errors import ExpectedColon
from jsonparser._errors import ExpectedSeparatorOrClose
from jsonparser._errors import ExpectedValue
from jsonparser._errors import InvalidNumber
from jsonparser._errors import InvalidObjectKey
from jsonparser._errors import NestingTooDeep
from jsonparser._errors import ParseError
from jsonparser._errors import TrailingTokens
from jsonparser._errors import UnexpectedEndOfInput
from jsonparser._errors import UnexpectedTokenAfterSeparator
from jsonparser._errors import token_error
from jsonparser._lexer import Position
from jsonparser._lexer import Token
from jsonparser._lexer import TokenKind
from jsonparser._profiling import ProfileContext
from jsonparser._values import INT64_MAX
from jsonparser._values import INT64_MIN
from jsonparser._values import JsonArray
from jsonparser._values import JsonBoolean
from jsonparser._values import JsonFloat
from jsonparser._values import JsonInteger
from jsonparser._values import JsonNull
from jsonparser._values import JsonObject
from jsonparser._values import JsonString
from jsonparser._values import Value

DEFAULT_MAX_DEPTH = 256

# Symbols that may not directly follow a comma
_AFTER_SEPARATOR_FORBIDDEN = frozenset("]},:")


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures parsing behavior with immutable settings.

    ``max_depth`` bounds how deeply arrays and objects may nest.
    """

    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if isinstance(self.max_depth, bool) or not isinstance(
            self.max_depth, int
        ):
            raise TypeError("max_depth must be an integer")
        if self.max_depth < 1:
            raise ValueError("max_depth must be positive")


def _is_symbol(token: Token | None, symbol: str) -> bool:
    return (
        token is not None
        and token.kind is TokenKind.SYMBOL
        and token.value == symbol
    )


class JsonParser:
    """
    Walks a token list with a forward-only cursor.

    Values are recognized in a fixed order: array, boolean, float, integer,
    null, string, object.
    """

    def __init__(self, tokens: Sequence[Token], config: ParseConfig):
        self.tokens = tokens
        self.config = config
        self.depth = 0

        self._recognizers: tuple[
            Callable[[Position], tuple[Position, Value | None]], ...
        ] = (
            self.parse_array,
            self.parse_boolean,
            self.parse_float,
            self.parse_integer,
            self.parse_null,
            self.parse_string,
            self.parse_object,
        )

    def token_at(self, cursor: Position) -> Token | None:
        """Returns the token at ``cursor``, or None once exhausted."""
        return self.tokens[cursor] if cursor < len(self.tokens) else None

    def _require_token(self, cursor: Position) -> Token:
        token = self.token_at(cursor)
        if token is None:
            raise UnexpectedEndOfInput()
        return token

    @contextmanager
    def _nested(self, opening: Token) -> Iterator[None]:
        self.depth += 1
        try:
            if self.depth > self.config.max_depth:
                raise token_error(
                    NestingTooDeep,
                    f"nesting deeper than {self.config.max_depth} levels",
                    opening,
                )
            yield
        finally:
            self.depth -= 1

    def parse(self) -> Value:
        """Parses one value that must span the entire token list."""
        with ProfileContext("parse", len(self.tokens)):
            cursor, value = self.parse_value(0)
            if cursor != len(self.tokens):
                raise token_error(
                    TrailingTokens,
                    "unexpected content after JSON value",
                    self.tokens[cursor],
                )
            return value

    def parse_value(self, cursor: Position) -> tuple[Position, Value]:
        """Parses the value that must start at ``cursor``."""
        token = self._require_token(cursor)
        for recognize in self._recognizers:
            end, value = recognize(cursor)
            if end != cursor and value is not None:
                return end, value
        raise token_error(ExpectedValue, "expected a JSON value", token)

    def parse_boolean(self, cursor: Position) -> tuple[Position, Value | None]:
        token = self.token_at(cursor)
        if token is None or token.kind is not TokenKind.BOOLEAN:
            return cursor, None
        return cursor + 1, JsonBoolean(token.value == "true")

    def parse_null(self, cursor: Position) -> tuple[Position, Value | None]:
        token = self.token_at(cursor)
        if token is None or token.kind is not TokenKind.NULL:
            return cursor, None
        return cursor + 1, JsonNull()

    def parse_string(self, cursor: Position) -> tuple[Position, Value | None]:
        token = self.token_at(cursor)
        if token is None or token.kind is not TokenKind.STRING:
            return cursor, None
        return cursor + 1, JsonString(token.value)

    def parse_integer(self, cursor: Position) -> tuple[Position, Value | None]:
        token = self.token_at(cursor)
        if token is None or token.kind is not TokenKind.INTEGER:
            return cursor, None

        try:
            number = int(token.value)
        except ValueError as e:
            raise token_error(
                InvalidNumber, "couldn't parse integer", token
            ) from e
        if not INT64_MIN <= number <= INT64_MAX:
            raise token_error(
                InvalidNumber, "integer out of 64-bit range", token
            )
        return cursor + 1, JsonInteger(number)

    def parse_float(self, cursor: Position) -> tuple[Position, Value | None]:
        token = self.token_at(cursor)
        if token is None or token.kind is not TokenKind.FLOAT:
            return cursor, None

        try:
            number = float(token.value)
        except ValueError as e:
            raise token_error(InvalidNumber, "couldn't parse float", token) from e
        if math.isinf(number):
            raise token_error(InvalidNumber, "float out of range", token)
        return cursor + 1, JsonFloat(number)

    def _separator_or_close(
        self, cursor: Position, close: str, after: str
    ) -> tuple[Position, bool]:
        """
        Consumes the ',' or closing symbol following an element.

        Returns the advanced cursor and whether the container was closed.
        """
        token = self._require_token(cursor)
        if _is_symbol(token, close):
            return cursor + 1, True

        if _is_symbol(token, ","):
            following = self.token_at(cursor + 1)
            if (
                following is not None
                and following.kind is TokenKind.SYMBOL
                and following.value in _AFTER_SEPARATOR_FORBIDDEN
            ):
                raise token_error(
                    UnexpectedTokenAfterSeparator,
                    f"unexpected '{following.value}' after {after}",
                    following,
                )
            return cursor + 1, False

        raise token_error(
            ExpectedSeparatorOrClose,
            f"expected ',' or '{close}' after {after}",
            token,
        )

    def parse_array(self, cursor: Position) -> tuple[Position, Value | None]:
        opening = self.token_at(cursor)
        if opening is None or not _is_symbol(opening, "["):
            return cursor, None

        with ProfileContext("parse_array"), self._nested(opening):
            idx = cursor + 1
            if _is_symbol(self.token_at(idx), "]"):
                return idx + 1, JsonArray()

            items: list[Value] = []
            while True:
                idx, item = self.parse_value(idx)
                items.append(item)
                idx, closed = self._separator_or_close(idx, "]", "array element")
                if closed:
                    return idx, JsonArray(tuple(items))

    def _parse_key(self, cursor: Position) -> tuple[Position, str]:
        token = self._require_token(cursor)
        if token.kind is not TokenKind.STRING:
            raise token_error(
                InvalidObjectKey,
                "expected string key for object property",
                token,
            )
        return cursor + 1, token.value

    def _expect_colon(self, cursor: Position) -> Position:
        token = self._require_token(cursor)
        if not _is_symbol(token, ":"):
            raise token_error(
                ExpectedColon, "expected ':' after property key", token
            )
        return cursor + 1

    def parse_object(self, cursor: Position) -> tuple[Position, Value | None]:
        opening = self.token_at(cursor)
        if opening is None or not _is_symbol(opening, "{"):
            return cursor, None

        with ProfileContext("parse_object"), self._nested(opening):
            idx = cursor + 1
            if _is_symbol(self.token_at(idx), "}"):
                return idx + 1, JsonObject()

            members: dict[str, Value] = {}
            while True:
                idx, key = self._parse_key(idx)
                idx = self._expect_colon(idx)
                idx, value = self.parse_value(idx)
                # Last write wins; the key keeps its first position.
                members[key] = value
                idx, closed = self._separator_or_close(
                    idx, "}", "object property"
                )
                if closed:
                    return idx, JsonObject(members)


def parse(
    tokens: Sequence[Token], config: ParseConfig | None = None
) -> tuple[Value, None] | tuple[None, ParseError]:
    """
    Parses a token list into a value tree.

    Returns ``(value, None)`` on success and ``(None, error)`` on failure;
    parse errors are never raised from here.
    """
    parser = JsonParser(tokens, config or ParseConfig())
    try:
        return parser.parse(), None
    except ParseError as error:
        return None, error
    except RecursionError:
        return None, NestingTooDeep("nesting exceeds the interpreter stack")
