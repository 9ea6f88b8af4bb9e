"""
Internal building blocks shared by the classifier, the store and the accessors.

Overview
- UnsetType / Unset
  • Singleton sentinel for “not provided”, distinct from None and from "" (an empty
    parameter value is a legitimate classification result).
  • Falsey, printable as "Unset", rendered dimmed by Rich, non-subclassable.

- coalesce(value, default=None)
  • Replace Unset with a concrete default; every other value passes through.

- StorageGuard / view(name)
  • Write-once storage: backing fields live under non-identifier names prefixed
    with '-' and can only be written while the instance is being built.
  • view() publishes a backing field as a read-only property (tuple,
    MappingProxyType, frozenset).

Stability
- Names not in __all__ are private. Unset is exported for API defaults only.
"""
import functools
from collections.abc import Sequence, Mapping, Set
from contextlib import contextmanager
from types import MappingProxyType
from typing import final

from rich.text import Text


@final
class UnsetType:
    """
    internal singleton sentinel representing an "unset" value.

    behavior
    - truthiness: bool(Unset) is False.
    - identity: Unset is a process‑wide singleton (see __new__).
    - display: repr(Unset) -> "Unset", and a dim "Unset" under Rich.
    - final: subclassing is forbidden (see __init_subclass__).
    """

    def __or__(self, other, /):
        try:
            return type(self) | other
        except TypeError:
            return NotImplemented

    def __ror__(self, other, /):
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __rich__(self):
        return Text(repr(self), style="dim")

    def __copy__(self):
        return self

    def __deepcopy__(self, memo, /):
        return self

    def __reduce__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


Unset = UnsetType()
"""
internal singleton instance of UnsetType.

note
- used as the default of every "default=" parameter of the public API, since None
  is a value callers may legitimately want back from a failed lookup.
"""


def coalesce(object, default=None, /):
    """
    return `default` when `object` is Unset; otherwise return `object` unchanged.

    examples
    - coalesce("name", "fallback") -> "name"
    - coalesce(Unset, "fallback")  -> "fallback"
    - coalesce(None, "fallback")   -> None
    """
    return default if object is Unset else object


def rename(x, /, name=None):
    """
    set a stable __name__/__qualname__ on a callable, or return a curried renamer.

    - callable → renamed in place and returned.
    - str      → returns a functools.partial that renames a future callable.
    """
    if isinstance(x, str):
        return functools.partial(rename, name=x)
    if not isinstance(name, str):
        raise TypeError("callable name must be a string")
    x.__qualname__ = name
    x.__name__ = name
    return x


class StorageGuard:
    """
    internal mixin that makes backing storage write-once.

    rules
    - any attribute whose name starts with '-' is considered internal backing and:
      • cannot be read through normal attribute access (AttributeError),
      • cannot be written unless the instance is still being built.

    build phase
    - __new__ is a context manager; backing fields are written inside the block
      and locked as soon as it exits:
        with super().__new__(cls) as self:
            setattr(self, "-flags", flags)
        # from here on, '-flags' is read-only
    """
    __slots__ = ("__building", "__dict__")

    @contextmanager
    def __new__(cls):
        self = super().__new__(cls)
        self.__building = True
        try:
            yield self
        finally:
            self.__building = False

    def __getattribute__(self, name, /):
        if isinstance(name, str) and name.startswith("-"):
            raise AttributeError("internal storage is not accessible")
        return object.__getattribute__(self, name)

    def __setattr__(self, name, value, /):
        if isinstance(name, str) and name.startswith("-"):
            if not self.__building:
                raise AttributeError("internal storage is read-only")
        elif not name.startswith("_StorageGuard__"):
            raise AttributeError("%s objects are read-only" % type(self).__name__)
        return object.__setattr__(self, name, value)

    def __delattr__(self, name, /):
        raise AttributeError("%s objects are read-only" % type(self).__name__)


def view(name):
    """
    internal: build a read-only property over the backing field '-{name}'.

    - Sequence (non-str) → tuple
    - Mapping           → MappingProxyType
    - Set               → frozenset
    - other types       → returned as-is
    """

    @rename(name)
    def getter(self):
        value = object.__getattribute__(self, "-" + name)
        if isinstance(value, Sequence) and not isinstance(value, str):
            return tuple(value)
        if isinstance(value, Mapping):
            return MappingProxyType(value)
        if isinstance(value, Set):
            return frozenset(value)
        return value

    return property(getter)


__all__ = (
    "UnsetType",
    "Unset",
    "coalesce",
    "rename",
    "StorageGuard",
    "view",
)
