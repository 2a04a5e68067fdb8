"""
JSON parsing with a two-stage lexer and recursive-descent parser.

Tokenizes a JSON document up front, then builds a tree of typed values,
reporting syntax errors with the line and column of the offending text.
"""

from typing import IO
from typing import Any

from jsonparser._errors import ExpectedColon
from jsonparser._errors import ExpectedSeparatorOrClose
from jsonparser._errors import ExpectedValue
from jsonparser._errors import InvalidNumber
from jsonparser._errors import InvalidObjectKey
from jsonparser._errors import MalformedFloat
from jsonparser._errors import MissingNumberAfterMinus
from jsonparser._errors import NestingTooDeep
from jsonparser._errors import ParseError
from jsonparser._errors import TrailingTokens
from jsonparser._errors import UnexpectedCharacter
from jsonparser._errors import UnexpectedEndOfInput
from jsonparser._errors import UnexpectedTokenAfterSeparator
from jsonparser._errors import UnterminatedString
from jsonparser._lexer import JsonLexer
from jsonparser._lexer import Token
from jsonparser._lexer import TokenKind
from jsonparser._lexer import tokenize
from jsonparser._parser import JsonParser
from jsonparser._parser import ParseConfig
from jsonparser._parser import parse
from jsonparser._profiling import HotPathStats
from jsonparser._profiling import clear_hot_path_stats
from jsonparser._profiling import get_hot_path_stats
from jsonparser._values import JsonArray
from jsonparser._values import JsonBoolean
from jsonparser._values import JsonFloat
from jsonparser._values import JsonInteger
from jsonparser._values import JsonNull
from jsonparser._values import JsonObject
from jsonparser._values import JsonString
from jsonparser._values import PythonValue
from jsonparser._values import Value

__version__ = "0.1.0"


def parse_text(
    text: str, config: ParseConfig | None = None
) -> tuple[Value, None] | tuple[None, ParseError]:
    """
    Tokenizes and parses ``text``.

    Lexer and parser failures alike are returned as ``(None, error)``.
    """
    try:
        tokens = tokenize(text)
    except ParseError as error:
        return None, error
    return parse(tokens, config)


def loads(s: str, **kwargs: Any) -> PythonValue:
    """
    Parses a JSON string into plain Python objects.

    Keyword arguments configure the parse (see ParseConfig). Raises the
    ParseError describing the first syntax problem.
    """
    if not isinstance(s, str):
        raise TypeError(
            f"the JSON object must be str, not {type(s).__name__}"
        )

    value, error = parse_text(s, ParseConfig(**kwargs))
    if error is not None:
        raise error
    return value.to_python()


def load(fp: IO[str], **kwargs: Any) -> PythonValue:
    """Parses JSON read from a file-like object."""
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")

    return loads(fp.read(), **kwargs)


__all__ = [
    "ExpectedColon",
    "ExpectedSeparatorOrClose",
    "ExpectedValue",
    "HotPathStats",
    "InvalidNumber",
    "InvalidObjectKey",
    "JsonArray",
    "JsonBoolean",
    "JsonFloat",
    "JsonInteger",
    "JsonLexer",
    "JsonNull",
    "JsonObject",
    "JsonParser",
    "JsonString",
    "MalformedFloat",
    "MissingNumberAfterMinus",
    "NestingTooDeep",
    "ParseConfig",
    "ParseError",
    "PythonValue",
    "Token",
    "TokenKind",
    "TrailingTokens",
    "UnexpectedCharacter",
    "UnexpectedEndOfInput",
    "UnexpectedTokenAfterSeparator",
    "UnterminatedString",
    "Value",
    "clear_hot_path_stats",
    "get_hot_path_stats",
    "load",
    "loads",
    "parse",
    "parse_text",
    "tokenize",
]
