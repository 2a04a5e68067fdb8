"""
Pytest configuration and shared fixtures for jsonparser tests.

Provides immutable test case fixtures for documents that must parse and
documents that must fail with a specific error.
"""

from dataclasses import dataclass
from typing import Any

import pytest

import jsonparser


@dataclass(frozen=True)
class JsonTestCase:
    """
    Immutable container for JSON test case data.

    Holds test input and expected behavior for consistent test execution.
    """

    description: str
    input_data: str
    should_fail: bool = False
    expected_output: Any = None
    expected_error: type[jsonparser.ParseError] | None = None


@pytest.fixture
def json_fail_cases() -> list[JsonTestCase]:
    """
    Provides JSON strings that must fail, with the error each must raise.

    Adapted from the json.org JSON_checker suite. Cases that only fail under
    escape, leading-zero or root-type rules are left out: string bodies are
    taken verbatim and numbers are not checked for leading zeros.
    """
    fail_docs = [
        # https://json.org/JSON_checker/test/fail2.json
        ('["Unclosed array"', jsonparser.UnexpectedEndOfInput),
        # https://json.org/JSON_checker/test/fail3.json
        ('{unquoted_key: "keys must be quoted"}', jsonparser.UnexpectedCharacter),
        # https://json.org/JSON_checker/test/fail4.json
        ('["extra comma",]', jsonparser.UnexpectedTokenAfterSeparator),
        # https://json.org/JSON_checker/test/fail5.json
        ('["double extra comma",,]', jsonparser.UnexpectedTokenAfterSeparator),
        # https://json.org/JSON_checker/test/fail6.json
        ('[   , "<-- missing value"]', jsonparser.ExpectedValue),
        # https://json.org/JSON_checker/test/fail7.json
        ('["Comma after the close"],', jsonparser.TrailingTokens),
        # https://json.org/JSON_checker/test/fail8.json
        ('["Extra close"]]', jsonparser.TrailingTokens),
        # https://json.org/JSON_checker/test/fail9.json
        ('{"Extra comma": true,}', jsonparser.UnexpectedTokenAfterSeparator),
        # https://json.org/JSON_checker/test/fail10.json
        (
            '{"Extra value after close": true} "misplaced quoted value"',
            jsonparser.TrailingTokens,
        ),
        # https://json.org/JSON_checker/test/fail11.json
        ('{"Illegal expression": 1 + 2}', jsonparser.UnexpectedCharacter),
        # https://json.org/JSON_checker/test/fail12.json
        ('{"Illegal invocation": alert()}', jsonparser.UnexpectedCharacter),
        # https://json.org/JSON_checker/test/fail14.json
        ('{"Numbers cannot be hex": 0x14}', jsonparser.UnexpectedCharacter),
        # https://json.org/JSON_checker/test/fail16.json
        ("[\\naked]", jsonparser.UnexpectedCharacter),
        # https://json.org/JSON_checker/test/fail19.json
        ('{"Missing colon" null}', jsonparser.ExpectedColon),
        # https://json.org/JSON_checker/test/fail20.json
        ('{"Double colon":: null}', jsonparser.ExpectedValue),
        # https://json.org/JSON_checker/test/fail21.json
        ('{"Comma instead of colon", null}', jsonparser.ExpectedColon),
        # https://json.org/JSON_checker/test/fail22.json
        ('["Colon instead of comma": false]', jsonparser.ExpectedSeparatorOrClose),
        # https://json.org/JSON_checker/test/fail23.json
        ('["Bad value", truth]', jsonparser.UnexpectedCharacter),
        # https://json.org/JSON_checker/test/fail24.json
        ("['single quote']", jsonparser.UnexpectedCharacter),
        # https://json.org/JSON_checker/test/fail29.json
        ("[0e]", jsonparser.UnexpectedCharacter),
        # https://json.org/JSON_checker/test/fail30.json
        ("[0e+]", jsonparser.UnexpectedCharacter),
        # https://json.org/JSON_checker/test/fail31.json
        ("[0e+-1]", jsonparser.UnexpectedCharacter),
        # https://json.org/JSON_checker/test/fail32.json
        (
            '{"Comma instead if closing brace": true,',
            jsonparser.UnexpectedEndOfInput,
        ),
        # https://json.org/JSON_checker/test/fail33.json
        ('["mismatch"}', jsonparser.ExpectedSeparatorOrClose),
    ]

    return [
        JsonTestCase(
            description=doc,
            input_data=doc,
            should_fail=True,
            expected_error=error,
        )
        for doc, error in fail_docs
    ]


@pytest.fixture
def json_pass_cases() -> list[JsonTestCase]:
    """
    Provides JSON strings that must parse, within the supported literals.

    No escape sequences and no exponents.
    """
    return [
        JsonTestCase(
            description="complex nested structure",
            input_data="""[
    "JSON Test Pattern pass1",
    {"object with 1 member":["array with 1 element"]},
    {},
    [],
    -42,
    true,
    false,
    null,
    {
        "integer": 1234567890,
        "real": -9876.543210,
        "zero": 0,
        "one": 1,
        "space": " ",
        "slash": "/ & /",
        "alpha": "abcdefghijklmnopqrstuvwyz",
        "ALPHA": "ABCDEFGHIJKLMNOPQRSTUVWYZ",
        "digit": "0123456789",
        "0123456789": "digit",
        "special": "`1~!@#$%^&*()_+-={':[,]}|;.</>?",
        "true": true,
        "false": false,
        "null": null,
        "array":[  ],
        "object":{  },
        "address": "50 St. James Street",
        "url": "https://www.JSON.org/",
        "comment": "// /* <!-- --",
        "# -- --> */": " ",
        " s p a c e d " :[1,2 , 3

,

4 , 5        ,          6           ,7        ],"compact":[1,2,3,4,5,6,7]
    }
]""",
        ),
        JsonTestCase(
            description="deep nesting",
            input_data='[[[[[[[[[[[[[[[[[[["Not too deep"]]]]]]]]]]]]]]]]]]]',
            expected_output=[[[[[[[[[[[[[[[[[[["Not too deep"]]]]]]]]]]]]]]]]]]],
        ),
        JsonTestCase(
            description="simple object",
            input_data='{"JSON Test Pattern pass3": {"The outermost value": "must be an object or array.", "In this test": "It is an object."}}',
            expected_output={
                "JSON Test Pattern pass3": {
                    "The outermost value": "must be an object or array.",
                    "In this test": "It is an object.",
                }
            },
        ),
    ]


@pytest.fixture
def basic_json_values() -> list[JsonTestCase]:
    """
    Provides basic JSON value test cases for fundamental parsing.

    Covers every value variant and basic container structures.
    """
    return [
        JsonTestCase("null value", "null", False, jsonparser.JsonNull()),
        JsonTestCase("true boolean", "true", False, jsonparser.JsonBoolean(True)),
        JsonTestCase(
            "false boolean", "false", False, jsonparser.JsonBoolean(False)
        ),
        JsonTestCase("integer", "42", False, jsonparser.JsonInteger(42)),
        JsonTestCase(
            "negative integer", "-17", False, jsonparser.JsonInteger(-17)
        ),
        JsonTestCase("float", "3.14", False, jsonparser.JsonFloat(3.14)),
        JsonTestCase(
            "negative float", "-3.25", False, jsonparser.JsonFloat(-3.25)
        ),
        JsonTestCase("empty string", '""', False, jsonparser.JsonString("")),
        JsonTestCase(
            "simple string", '"hello"', False, jsonparser.JsonString("hello")
        ),
        JsonTestCase("empty array", "[]", False, jsonparser.JsonArray()),
        JsonTestCase("empty object", "{}", False, jsonparser.JsonObject()),
        JsonTestCase(
            "simple array",
            "[1, 2, 3]",
            False,
            jsonparser.JsonArray(
                (
                    jsonparser.JsonInteger(1),
                    jsonparser.JsonInteger(2),
                    jsonparser.JsonInteger(3),
                )
            ),
        ),
        JsonTestCase(
            "simple object",
            '{"key": "value"}',
            False,
            jsonparser.JsonObject({"key": jsonparser.JsonString("value")}),
        ),
    ]
