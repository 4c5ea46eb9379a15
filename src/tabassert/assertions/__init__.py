"""Assertion functions reporting aligned failure tables."""

from tabassert.assertions.base import fail, parse_msg_and_args
from tabassert.assertions.checks import (
    equal,
    implements,
    is_false,
    is_none,
    is_not_none,
    is_true,
    not_equal,
)

__all__ = [
    "equal",
    "fail",
    "implements",
    "is_false",
    "is_none",
    "is_not_none",
    "is_true",
    "not_equal",
    "parse_msg_and_args",
]
