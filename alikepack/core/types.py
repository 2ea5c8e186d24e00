"""Type definitions for AlikeKit core models."""

from typing import Literal

HighlightKind = Literal[
    "ARRAY",
    "BOOLNUM",
    "DOM",
    "ERROR",
    "EXCEPTION",
    "FUNCTION",
    "NULLISH",
    "OBJECT",
    "REGEXP",
    "STRING",
    "SYMBOL",
]

HIGHLIGHT_KINDS: tuple[str, ...] = (
    "ARRAY",
    "BOOLNUM",
    "DOM",
    "ERROR",
    "EXCEPTION",
    "FUNCTION",
    "NULLISH",
    "OBJECT",
    "REGEXP",
    "STRING",
    "SYMBOL",
)

ValueKind = Literal[
    "null",
    "undefined",
    "symbol",
    "boolean",
    "number",
    "bigint",
    "string",
    "bytes",
    "function",
    "array",
    "set",
    "regexp",
    "error",
    "object",
]

SCALAR_VALUE_KINDS: tuple[str, ...] = (
    "undefined",
    "boolean",
    "number",
    "bigint",
    "string",
    "bytes",
)

MAX_SAFE_INTEGER = 2**53 - 1
MAX_TEXT_LENGTH = 65535
DEFAULT_MAX_DEPTH = 99

ResultStatus = Literal["FAIL", "PASS", "PENDING", "UNEXPECTED_EXCEPTION"]

RESULT_STATUSES: tuple[str, ...] = ("FAIL", "PASS", "PENDING", "UNEXPECTED_EXCEPTION")

Formatting = Literal["PLAIN", "ANSI", "HTML", "JSON"]

FORMATTINGS: tuple[str, ...] = ("PLAIN", "ANSI", "HTML", "JSON")

Verbosity = Literal["QUIET", "VERBOSE", "VERY", "VERYVERY"]

VERBOSITIES: tuple[str, ...] = ("QUIET", "VERBOSE", "VERY", "VERYVERY")
