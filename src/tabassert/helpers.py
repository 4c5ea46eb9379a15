"""Comparison and message helpers shared by the assertion functions."""

from __future__ import annotations

import dataclasses
import inspect
import re
import traceback
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import ModuleType
from typing import Any

from tabassert.errors import InvalidOperationError

TEST_FILE_PATTERN = r"^(test_.*|.*_test)\.py$"


def is_nil(obj: Any) -> bool:
    """Check if a specified object is None, without failing."""
    return obj is None


def is_function(obj: Any) -> bool:
    if obj is None:
        return False
    return inspect.isroutine(obj)


def validate_equal_args(expected: Any, actual: Any) -> None:
    """Check that the arguments can be safely used in equal()/not_equal().

    Raises:
        InvalidOperationError: either side is a function.
    """
    if expected is None and actual is None:
        return

    if is_function(expected) or is_function(actual):
        raise InvalidOperationError("cannot take func type as argument")


def _compares_by_fields(obj: Any) -> bool:
    if isinstance(obj, (type, ModuleType)) or is_function(obj):
        return False
    return type(obj).__eq__ is object.__eq__ and hasattr(obj, "__dict__")


def _has_generated_eq(obj: Any) -> bool:
    # A dataclass whose __eq__ is the one @dataclass wrote (exec'd source)
    # or object's identity check; a hand-written __eq__ takes precedence.
    eq = type(obj).__eq__
    if eq is object.__eq__:
        return True
    code = getattr(eq, "__code__", None)
    return code is not None and code.co_filename == "<string>"


def _compares_dataclass_fields(obj: Any) -> bool:
    return (
        dataclasses.is_dataclass(obj)
        and not isinstance(obj, type)
        and _has_generated_eq(obj)
    )


def _same_key_types(expected: Mapping, actual: Mapping) -> bool:
    # 1, 1.0 and True hash alike, so matching key sets can still hide
    # keys of different types.
    actual_keys = {k: k for k in actual}
    return all(type(k) is type(actual_keys[k]) for k in expected)


def _dataclass_fields(obj: Any) -> dict[str, Any]:
    return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj) if f.compare}


def object_equal(expected: Any, actual: Any) -> bool:
    """Deep structural equality.

    Values of different exact types are never equal, so ``10`` and ``10.0``
    or ``[1]`` and ``(1,)`` differ. Containers are compared item by item,
    dataclasses field by field and plain objects without ``__eq__`` by their
    instance attributes. Everything else falls back to ``==``.
    """
    return _deep_equal(expected, actual, set())


def _deep_equal(expected: Any, actual: Any, visited: set[tuple[int, int]]) -> bool:
    if expected is None or actual is None:
        return expected is actual

    if type(expected) is not type(actual):
        return False

    container = isinstance(expected, (Mapping, list, tuple)) or _compares_dataclass_fields(expected)
    if container or _compares_by_fields(expected):
        # Self-referencing structures: a pair already under comparison is
        # assumed equal until proven otherwise.
        key = (id(expected), id(actual))
        if key in visited:
            return True
        visited.add(key)

    if isinstance(expected, Mapping):
        if expected.keys() != actual.keys() or not _same_key_types(expected, actual):
            return False
        return all(_deep_equal(expected[k], actual[k], visited) for k in expected)

    if isinstance(expected, (list, tuple)):
        if len(expected) != len(actual):
            return False
        return all(_deep_equal(e, a, visited) for e, a in zip(expected, actual))

    if _compares_dataclass_fields(expected):
        return _deep_equal(_dataclass_fields(expected), _dataclass_fields(actual), visited)

    if _compares_by_fields(expected):
        return _deep_equal(vars(expected), vars(actual), visited)

    return bool(expected == actual)


@dataclass(slots=True)
class Change:
    path: str
    expected: Any
    actual: Any


def structural_diff(expected: Any, actual: Any, path: str = "$") -> list[Change]:
    """List the paths at which two values differ, in document order.

    A pair of containers that is reached again through a reference cycle is
    not descended into a second time.
    """
    return _diff(expected, actual, path, set())


def _diff(expected: Any, actual: Any, path: str, visited: set[tuple[int, int]]) -> list[Change]:
    changes: list[Change] = []

    if type(expected) is not type(actual):
        changes.append(Change(path=path, expected=expected, actual=actual))
        return changes

    if isinstance(expected, (Mapping, list, tuple)):
        key = (id(expected), id(actual))
        if key in visited:
            return changes
        visited.add(key)

    if isinstance(expected, Mapping):
        keys = list(expected.keys()) + [k for k in actual.keys() if k not in expected]
        for key in keys:
            key_path = f"{path}.{key}"
            if key not in expected or key not in actual:
                changes.append(
                    Change(path=key_path, expected=expected.get(key), actual=actual.get(key))
                )
                continue
            changes.extend(_diff(expected[key], actual[key], key_path, visited))
        return changes

    if isinstance(expected, (list, tuple)):
        for idx in range(max(len(expected), len(actual))):
            idx_path = f"{path}[{idx}]"
            if idx >= len(expected) or idx >= len(actual):
                left = expected[idx] if idx < len(expected) else None
                right = actual[idx] if idx < len(actual) else None
                changes.append(Change(path=idx_path, expected=left, actual=right))
                continue
            changes.extend(_diff(expected[idx], actual[idx], idx_path, visited))
        return changes

    if not object_equal(expected, actual):
        changes.append(Change(path=path, expected=expected, actual=actual))

    return changes


def qualified_name(cls: type) -> str:
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def type_name(value: Any) -> str:
    return qualified_name(type(value))


def _protocol_members(interface: type) -> set[str]:
    members: set[str] = set()
    for base in interface.__mro__:
        if base is object or base.__module__ == "typing":
            continue
        names = set(vars(base)) | set(getattr(base, "__annotations__", {}))
        members |= {name for name in names if not name.startswith("_")}
    return members


def implements_interface(obj: Any, interface: type) -> bool:
    """isinstance() that also accepts protocols not marked runtime_checkable.

    Such protocols are checked structurally: every public member declared on
    the protocol (or its protocol bases) must be present on ``obj``.
    """
    try:
        return isinstance(obj, interface)
    except TypeError:
        return all(hasattr(obj, name) for name in _protocol_members(interface))


def message_from_msg_and_args(*msg_and_args: Any) -> str:
    if not msg_and_args:
        return ""

    if len(msg_and_args) == 1:
        msg = msg_and_args[0]
        if isinstance(msg, str):
            return msg
        return str(msg)

    template, *args = msg_and_args
    try:
        return str(template) % tuple(args)
    except (TypeError, ValueError, KeyError, OverflowError):
        # Template and arguments do not match: keep everything readable.
        return " ".join(str(part) for part in msg_and_args)


def stack_trace(skip: int = 0, pattern: str | None = None) -> list[str]:
    """Return ``file:line`` for each caller frame that lives in a test file.

    Frames are listed from the innermost caller outward. ``skip`` drops that
    many frames above this function before filtering.
    """
    regex = re.compile(pattern or TEST_FILE_PATTERN)
    frames = traceback.extract_stack()[:-1]
    frames.reverse()

    callers: list[str] = []
    for frame in frames[skip:]:
        name = Path(frame.filename).name
        if not regex.search(name):
            continue
        callers.append(f"{name}:{frame.lineno}")

    return callers
