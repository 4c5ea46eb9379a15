"""Failure reporting shared by every assertion."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from tabassert.config import Format, get_config
from tabassert.helpers import message_from_msg_and_args, stack_trace
from tabassert.reporting.base import Reporter
from tabassert.tablewriter import Table

logger = logging.getLogger(__name__)


def parse_msg_and_args(*args: Any) -> tuple[list[Any], Format | None]:
    """Split ``Format`` members out of an assertion's trailing arguments.

    Returns the remaining message args and the selected format (the last
    ``Format`` given wins, ``None`` when there is none).
    """
    msg_and_args: list[Any] = []
    fmt: Format | None = None

    for arg in args:
        if isinstance(arg, Format):
            fmt = arg
        else:
            msg_and_args.append(arg)

    return msg_and_args, fmt


def fail(
    t: Reporter,
    failure_message: str,
    callback: Callable[[Table], None] | None = None,
    *msg_and_args: Any,
) -> bool:
    """Report a failure to ``t`` as an aligned table and return False.

    The table carries the test name, the test-file frames of the current
    stack, ``failure_message`` and the caller's message; ``callback`` may
    append more rows before the table is handed to ``t.error``.
    """
    config = get_config()

    table = Table(padding=config.padding, min_width=config.min_width)
    table.write_row("Test:", t.name)
    table.writef("\nTrace:\t%s", "\n\t".join(stack_trace(pattern=config.trace_pattern)))

    if failure_message:
        table.write_row("Error:", failure_message)

    args, _ = parse_msg_and_args(*msg_and_args)

    message = message_from_msg_and_args(*args)
    if message:
        table.write_row("Message:", message)

    if callback is not None:
        callback(table)

    logger.debug(f"Assertion failed in {t.name}: {failure_message}")
    t.error(str(table))

    return False
