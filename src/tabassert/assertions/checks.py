"""Value assertions: equality, truthiness, None-ness and interface checks."""

from __future__ import annotations

import pprint
from collections.abc import Mapping
from typing import Any

from tabassert.assertions.base import fail, parse_msg_and_args
from tabassert.config import Format, get_config
from tabassert.errors import InvalidOperationError
from tabassert.helpers import (
    implements_interface,
    is_nil,
    object_equal,
    qualified_name,
    structural_diff,
    type_name,
    validate_equal_args,
)
from tabassert.reporting.base import Reporter
from tabassert.tablewriter import Table


def _pretty(value: Any, width: int) -> str:
    # Continuation lines start with a tab so they stay in the value column.
    return pprint.pformat(value, width=width).replace("\n", "\n\t")


def _write_diff(table: Table, expected: Any, actual: Any) -> None:
    if not isinstance(expected, (Mapping, list, tuple)) or type(expected) is not type(actual):
        return

    for i, change in enumerate(structural_diff(expected, actual)):
        table.write_row(
            "Diff:" if i == 0 else "",
            change.path,
            repr(change.expected),
            repr(change.actual),
        )


def equal(t: Reporter, expected: Any, actual: Any, *msg_and_args: Any) -> bool:
    """Assert that two objects are equal.

        equal(t, 123, 123)

    Values must have the same type to be equal, so ``equal(t, 10, 10.0)``
    fails. Function equality cannot be determined and always fails.
    """
    msg_and_args, fmt = parse_msg_and_args(*msg_and_args)

    try:
        validate_equal_args(expected, actual)
    except InvalidOperationError as e:
        return fail(t, f"Invalid operation: {expected!r} == {actual!r} ({e})", None, *msg_and_args)

    if object_equal(expected, actual):
        return True

    if expected is None:
        return fail(t, f"Expected None, but got: {actual!r}", None, *msg_and_args)

    config = get_config()
    fmt = fmt or config.format

    def write_values(table: Table) -> None:
        if fmt is Format.REPR:
            table.writef("\nExpect:\t%r", expected)
            table.writef("\nActual:\t%r", actual)
        elif fmt is Format.PRETTY:
            table.writef("\nExpect:\t%s", _pretty(expected, config.pretty_width))
            table.writef("\nActual:\t%s", _pretty(actual, config.pretty_width))
        else:
            table.writef("\nExpect:\t%s\t(%s)", expected, type_name(expected))
            table.writef("\nActual:\t%s\t(%s)", actual, type_name(actual))

        if config.show_diff:
            _write_diff(table, expected, actual)

    return fail(t, "Not equal", write_values, *msg_and_args)


def not_equal(t: Reporter, expected: Any, actual: Any, *msg_and_args: Any) -> bool:
    """Assert that the specified values are NOT equal.

        not_equal(t, obj1, obj2)

    Function equality cannot be determined and always fails.
    """
    try:
        validate_equal_args(expected, actual)
    except InvalidOperationError as e:
        return fail(t, f"Invalid operation: {expected!r} == {actual!r} ({e})", None, *msg_and_args)

    if not object_equal(expected, actual):
        return True

    if expected is None:
        return fail(t, "Expected value not to be None.", None, *msg_and_args)

    return fail(t, f"Should not be: {actual!r}", None, *msg_and_args)


def is_true(t: Reporter, value: Any, *msg_and_args: Any) -> bool:
    """Assert that the specified value is truthy.

        is_true(t, my_bool)
    """
    if not value:
        return fail(t, "Should be true", None, *msg_and_args)

    return True


def is_false(t: Reporter, value: Any, *msg_and_args: Any) -> bool:
    """Assert that the specified value is falsy.

        is_false(t, my_bool)
    """
    if value:
        return fail(t, "Should be false", None, *msg_and_args)

    return True


def is_none(t: Reporter, obj: Any, *msg_and_args: Any) -> bool:
    """Assert that the specified object is None.

        is_none(t, err)
    """
    if is_nil(obj):
        return True

    return fail(t, f"Expected None, but got: {obj!r}", None, *msg_and_args)


def is_not_none(t: Reporter, obj: Any, *msg_and_args: Any) -> bool:
    """Assert that the specified object is not None.

        is_not_none(t, err)
    """
    if not is_nil(obj):
        return True

    return fail(t, "Expected value not to be None.", None, *msg_and_args)


def implements(t: Reporter, interface: type, obj: Any, *msg_and_args: Any) -> bool:
    """Assert that an object implements the specified interface.

        implements(t, MyProtocol, MyObject())

    ``interface`` may be an ABC, a plain class or a ``typing.Protocol``;
    protocols without ``@runtime_checkable`` are checked by member names.

    Raises:
        TypeError: ``interface`` is not a class.
    """
    if not isinstance(interface, type):
        raise TypeError(f"interface must be a class, got {type_name(interface)}")

    interface_name = qualified_name(interface)

    if obj is None:
        return fail(t, f"Cannot check if None implements {interface_name}", None, *msg_and_args)

    if not implements_interface(obj, interface):
        return fail(t, f"{type_name(obj)} must implement {interface_name}", None, *msg_and_args)

    return True
