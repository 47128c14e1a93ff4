"""
Pytest configuration and shared fixtures for jsonkit tests.

Provides immutable test data fixtures and small writer doubles used across
the escaping, formatting and container tests.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

import pytest


@dataclass(frozen=True)
class EscapeCase:
    """
    Immutable container for one escaping expectation.

    Holds the raw text and the exact escaped text the escaper must produce.
    """

    description: str
    raw: str
    escaped: str


@dataclass(frozen=True)
class FormatCase:
    """
    Immutable container for one formatting expectation.
    """

    description: str
    value: Any
    expected: str


class FailingWriter:
    """
    Text stream double that fails after a number of successful writes.

    Records what was written before the failure so tests can inspect the
    partial output.
    """

    def __init__(self, fail_after: int = 0) -> None:
        self.fail_after = fail_after
        self.chunks: list[str] = []
        self.closed = False

    def write(self, s: str) -> int:
        if len(self.chunks) >= self.fail_after:
            raise OSError("disk full")
        self.chunks.append(s)
        return len(s)

    def close(self) -> None:
        self.closed = True

    def getvalue(self) -> str:
        return "".join(self.chunks)


@pytest.fixture
def escape_cases() -> list[EscapeCase]:
    """
    Provides escaping expectations for the full escape policy.

    Covers the pass-through ranges, the two shorthand escapes and the
    \\uXXXX fallback, including the shorthands that are deliberately absent.
    """
    return [
        EscapeCase("empty string", "", ""),
        EscapeCase("space", " ", " "),
        EscapeCase("exclamation mark", "!", "!"),
        EscapeCase("hash, start of middle range", "#", "#"),
        EscapeCase("open bracket, end of middle range", "[", "["),
        EscapeCase("close bracket, start of upper range", "]", "]"),
        EscapeCase("plain ascii", "Hello, World", "Hello, World"),
        EscapeCase("line feed", "\n", "\\n"),
        EscapeCase("carriage return", "\r", "\\r"),
        EscapeCase("double quote", '"', "\\u0022"),
        EscapeCase("backslash", "\\", "\\u005c"),
        EscapeCase("tab has no shorthand", "\t", "\\u0009"),
        EscapeCase("backspace has no shorthand", "\b", "\\u0008"),
        EscapeCase("form feed has no shorthand", "\f", "\\u000c"),
        EscapeCase("nul", "\x00", "\\u0000"),
        EscapeCase("unit separator", "\x1f", "\\u001f"),
        EscapeCase("delete passes through", "\x7f", "\x7f"),
        EscapeCase("latin-1", "caf\u00e9", "caf\u00e9"),
        EscapeCase("bmp", "\u4e2d\u6587", "\u4e2d\u6587"),
        EscapeCase("astral", "\U0001f600", "\U0001f600"),
        EscapeCase(
            "mixed",
            'say "hi"\r\n\tC:\\temp',
            "say \\u0022hi\\u0022\\r\\n\\u0009C:\\u005ctemp",
        ),
    ]


@pytest.fixture
def scalar_cases() -> list[FormatCase]:
    """
    Provides scalar formatting expectations.
    """
    return [
        FormatCase("null", None, "null"),
        FormatCase("true", True, "true"),
        FormatCase("false", False, "false"),
        FormatCase("zero", 0, "0"),
        FormatCase("integer", 42, "42"),
        FormatCase("negative integer", -17, "-17"),
        FormatCase("big integer", 2**64, "18446744073709551616"),
        FormatCase("float", 3.14, "3.14"),
        FormatCase("integral float", 1.0, "1.0"),
        FormatCase("decimal", Decimal("1.50"), "1.50"),
        FormatCase("empty string", "", '""'),
        FormatCase("string", "hello", '"hello"'),
        FormatCase("string with quote", 'a"b', '"a\\u0022b"'),
    ]
