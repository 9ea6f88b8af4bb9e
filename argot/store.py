"""
Write-once classification result.

A Store is produced by argot.classifier.classify() and never changes afterwards:
its backing fields are guarded by StorageGuard and every public attribute is a
read-only view, so one Store can be shared freely between readers.

Contents
- flags: tuple of dash-stripped flag names, one entry per occurrence (repeats kept).
- params: mapping name -> tuple of values; names in first-seen order, values in
  encounter order.
- positionals: tuple of positional strings in encounter order.
- trail: tuple of (token, Role) pairs, one per classified input token.
"""
from enum import IntEnum

from .internals import StorageGuard, view


class Role(IntEnum):
    """
    what a single input token became during classification.

    - FLAG: a bare flag (or a multi-flag bundle such as "-abc").
    - NAME: the name half of a parameter whose value is the next token (or empty).
    - VALUE: the value half of a parameter, consumed from the token after its name.
    - PARAM: an inline "--name=value" token, name and value at once.
    - POSITIONAL: a positional argument.
    """
    FLAG       = 1
    NAME       = 2
    VALUE      = 3
    PARAM      = 4
    POSITIONAL = 5


class Store(StorageGuard):
    flags = view("flags")
    params = view("params")
    positionals = view("positionals")
    trail = view("trail")

    def __new__(cls, flags=(), params=(), positionals=(), trail=()):
        # params may be a mapping name -> values or an iterable of (name, value) pairs
        grouped = {}
        for name, value in (params.items() if hasattr(params, "items") else params):
            if isinstance(value, str):
                grouped.setdefault(name, []).append(value)
            else:
                grouped.setdefault(name, []).extend(value)

        with super().__new__(cls) as self:
            setattr(self, "-flags", tuple(flags))
            setattr(self, "-params", {name: tuple(values) for name, values in grouped.items()})
            setattr(self, "-positionals", tuple(positionals))
            setattr(self, "-trail", tuple((token, Role(role)) for token, role in trail))
        return self

    def __eq__(self, other, /):
        if not isinstance(other, Store):
            return NotImplemented
        return (
            self.flags == other.flags and
            tuple(self.params.items()) == tuple(other.params.items()) and
            self.positionals == other.positionals
        )

    def __hash__(self):
        return hash((self.flags, tuple(self.params.items()), self.positionals))

    def __repr__(self):
        return "store(%s)" % ", ".join("%s=%r" % (name, value) for name, value in self.__rich_repr__())

    def __rich_repr__(self):
        yield "flags", self.flags
        yield "params", dict(self.params)
        yield "positionals", self.positionals


__all__ = (
    "Role",
    "Store",
)
