"""
Registry of parameter names known to take a value.

Scope
- Pre-registration is the only way to settle the central ambiguity of the
  classifier: in "--name value", is "value" the parameter's value or a separate
  positional? A registered name always takes the following non-option token.

Contract
- Names are stored dash-stripped: "--jobs", "-jobs" and "jobs" are the same entry.
- Registration is additive and idempotent; there is no removal.
- The classifier works on snapshot(), so registering after classification never
  changes a finished Store.

Quick example:
    >>> registry = Registry("-j", "--out").register(["level", "--tag"])
    >>> registry.isregistered("--jobs"), registry.isregistered("j")
    (False, True)
"""
from collections.abc import Iterable

from .tokens import dashless


def _flatten(names):
    for name in names:
        if isinstance(name, str):
            yield name
        elif isinstance(name, Iterable):
            for item in name:
                if not isinstance(item, str):
                    raise TypeError("parameter names must be strings, not %s" % type(item).__name__)
                yield item
        else:
            raise TypeError("parameter names must be strings, not %s" % type(name).__name__)


class Registry:
    """
    Set of dash-stripped parameter names.

    Accepts names one by one or in batches; every argument of the constructor and of
    register() may be a string or an iterable of strings.
    """
    __slots__ = ("_names",)

    def __init__(self, *names):
        self._names = set()
        self.register(*names)

    def register(self, *names):
        """
        Add one or more names (leading dashes removed).

        Returns the registry itself so registrations can be chained.
        """
        # validate the whole batch before touching the set
        self._names.update([dashless(name) for name in _flatten(names)])
        return self

    def isregistered(self, name, /):
        if not isinstance(name, str):
            raise TypeError("isregistered() argument must be a string")
        return dashless(name) in self._names

    def snapshot(self):
        return frozenset(self._names)

    def __contains__(self, name, /):
        return isinstance(name, str) and dashless(name) in self._names

    def __iter__(self):
        return iter(sorted(self._names))

    def __len__(self):
        return len(self._names)

    def __repr__(self):
        return "%s(%s)" % (type(self).__name__, ", ".join(map(repr, self)))

    def __rich_repr__(self):
        yield from self


__all__ = (
    "Registry",
)
