from __future__ import annotations

from collections.abc import Callable
from typing import Any

from tabassert import assertions
from tabassert.config import Format
from tabassert.reporting.base import Reporter
from tabassert.tablewriter import Table


class Asserter:
    """Assertions bound to one reporter.

        a = Asserter(t)
        a.equal(123, 123)

    When ``format`` is set it applies to every call that does not pass its
    own ``Format``.
    """

    def __init__(self, t: Reporter, format: Format | None = None) -> None:
        self.t = t
        self.format = format

    def _args(self, msg_and_args: tuple[Any, ...]) -> tuple[Any, ...]:
        if self.format is None or any(isinstance(arg, Format) for arg in msg_and_args):
            return msg_and_args
        return (*msg_and_args, self.format)

    def equal(self, expected: Any, actual: Any, *msg_and_args: Any) -> bool:
        return assertions.equal(self.t, expected, actual, *self._args(msg_and_args))

    def not_equal(self, expected: Any, actual: Any, *msg_and_args: Any) -> bool:
        return assertions.not_equal(self.t, expected, actual, *msg_and_args)

    def is_true(self, value: Any, *msg_and_args: Any) -> bool:
        return assertions.is_true(self.t, value, *msg_and_args)

    def is_false(self, value: Any, *msg_and_args: Any) -> bool:
        return assertions.is_false(self.t, value, *msg_and_args)

    def is_none(self, obj: Any, *msg_and_args: Any) -> bool:
        return assertions.is_none(self.t, obj, *msg_and_args)

    def is_not_none(self, obj: Any, *msg_and_args: Any) -> bool:
        return assertions.is_not_none(self.t, obj, *msg_and_args)

    def implements(self, interface: type, obj: Any, *msg_and_args: Any) -> bool:
        return assertions.implements(self.t, interface, obj, *msg_and_args)

    def fail(
        self,
        failure_message: str,
        callback: Callable[[Table], None] | None = None,
        *msg_and_args: Any,
    ) -> bool:
        return assertions.fail(self.t, failure_message, callback, *msg_and_args)
