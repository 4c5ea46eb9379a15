from __future__ import annotations


class TabassertError(Exception):
    """Base class for errors raised by tabassert itself (never for failed assertions)."""


class InvalidOperationError(TabassertError):
    """The operands cannot be compared, e.g. functions passed to equal()."""


__all__ = ["InvalidOperationError", "TabassertError"]
