"""Small generic helpers: type-based overload sets and struct arity."""

from __future__ import annotations

import dataclasses
import types
from collections.abc import Callable

__all__ = ["Overload", "struct_arity"]

_VARARGS = 0x04
_VARKEYWORDS = 0x08


def _accepts(func: Callable, args: tuple) -> bool:
    target = getattr(func, "__func__", func)
    code = getattr(target, "__code__", None)
    if code is None:
        return True

    offset = 1 if target is not func else 0
    names = code.co_varnames[offset:code.co_argcount]
    defaults = getattr(target, "__defaults__", None) or ()
    required = max(len(names) - len(defaults), 0)

    if len(args) < required:
        return False
    if len(args) > len(names) and not code.co_flags & _VARARGS:
        return False

    kwonly = code.co_varnames[code.co_argcount:code.co_argcount + code.co_kwonlyargcount]
    kwdefaults = getattr(target, "__kwdefaults__", None) or {}
    if any(name not in kwdefaults for name in kwonly):
        return False

    hints = getattr(target, "__annotations__", None) or {}
    for name, value in zip(names, args):
        hint = hints.get(name)
        if isinstance(hint, (type, types.UnionType)) and not isinstance(value, hint):
            return False
    return True


class Overload:
    """Calls the first of several functions whose parameters accept the arguments.

    Parameter annotations that are classes are checked with ``isinstance``.
    """

    def __init__(self, *funcs: Callable):
        if not funcs:
            raise ValueError("an overload set needs at least one function")
        self._funcs = funcs

    def __call__(self, *args):
        for func in self._funcs:
            if _accepts(func, args):
                return func(*args)
        kinds = ", ".join(type(a).__name__ for a in args)
        raise TypeError(f"no overload accepts ({kinds})")


def struct_arity(cls) -> int:
    """Return the number of fields a record type is built from."""
    if dataclasses.is_dataclass(cls):
        return sum(1 for f in dataclasses.fields(cls) if f.init)
    fields = getattr(cls, "_fields", None)
    if isinstance(cls, type) and issubclass(cls, tuple) and fields is not None:
        return len(fields)

    if isinstance(cls, type):
        code = getattr(cls.__init__, "__code__", None)
        offset = 1
    else:
        code = getattr(cls, "__code__", None)
        offset = 0
    if code is None:
        return 0
    if code.co_flags & (_VARARGS | _VARKEYWORDS):
        raise TypeError(f"{cls!r} takes a variable number of fields")
    return code.co_argcount - offset + code.co_kwonlyargcount