"""Assertion helpers that report failures as aligned tables.

    from tabassert import RecordingReporter, equal

    t = RecordingReporter("answer")
    equal(t, 42, compute())

Under pytest, enable ``tabassert.pytest_plugin`` and use the ``tassert``
fixture instead.
"""

from tabassert.asserter import Asserter
from tabassert.assertions import (
    equal,
    fail,
    implements,
    is_false,
    is_none,
    is_not_none,
    is_true,
    not_equal,
    parse_msg_and_args,
)
from tabassert.config import AssertConfig, Format, configure, get_config, load_config, set_config
from tabassert.errors import InvalidOperationError, TabassertError
from tabassert.reporting.base import RecordingReporter, Reporter
from tabassert.tablewriter import Table

__all__ = [
    "AssertConfig",
    "Asserter",
    "Format",
    "InvalidOperationError",
    "RecordingReporter",
    "Reporter",
    "TabassertError",
    "Table",
    "configure",
    "equal",
    "fail",
    "get_config",
    "implements",
    "is_false",
    "is_none",
    "is_not_none",
    "is_true",
    "load_config",
    "not_equal",
    "parse_msg_and_args",
    "set_config",
]
