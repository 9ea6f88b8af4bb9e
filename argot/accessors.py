"""
Read-only query surface over a finished Store.

What this module provides
- Arguments: the façade a host program queries (flags, parameters, positionals).
- Reading: a conversion handle over one retrieved string, or over a miss.
- Outcome: the tagged result of a conversion, either a value or a fault.
- ParamGroup: every value recorded for one parameter name, in encounter order.

Failure policy
- Lookups never raise, except Arguments[index], which behaves like a sequence
  and raises PositionalIndexError (an IndexError).
- A miss or a failed conversion falls back to the caller's default when one is
  given; otherwise it yields a failed Outcome carrying the fault, which callers
  test (bool(outcome), outcome.ok) before use, or raise with outcome.unwrap().

Quick example:
    >>> args = Arguments(classify(["prog", "-j", "4", "--verbose", "in.txt"], ["j"]))
    >>> args.flag("v", "verbose"), args.param("j").convert(int).value, args[0]
    (True, 4, 'in.txt')
    >>> args.param("threads", default="1").convert(int).value
    1
"""
from collections.abc import Iterable, Sequence
from typing import final

from .converters import convert
from .faults import ConversionError, MissingParamError, PositionalIndexError
from .internals import Unset
from .store import Store
from .tokens import dashless


def _names(names):
    """flatten names given one by one or as lists, dash-stripped, in order."""
    for name in names:
        if isinstance(name, str):
            yield dashless(name)
        elif isinstance(name, Iterable):
            yield from _names(name)
        else:
            raise TypeError("names must be strings, not %s" % type(name).__name__)


def _typename(type):
    return getattr(type, "__name__", None) or repr(type)


@final
class Outcome:
    """
    Tagged conversion result.

    - success: ok is True, value holds the converted value (or the caller default,
      in which case defaulted is True) and fault is None.
    - failure: ok is False, value is Unset and fault holds the ArgotException.
    """
    __slots__ = ("_value", "_fault", "_defaulted")

    def __init__(self, value=Unset, fault=None, *, defaulted=False):
        if (value is Unset) == (fault is None):
            raise TypeError("an outcome holds either a value or a fault")
        self._value = value
        self._fault = fault
        self._defaulted = defaulted

    @classmethod
    def success(cls, value, /, *, defaulted=False):
        return cls(value, defaulted=defaulted)

    @classmethod
    def failure(cls, fault, /):
        if not isinstance(fault, BaseException):
            raise TypeError("an outcome fault must be an exception")
        return cls(fault=fault)

    @property
    def ok(self):
        return self._fault is None

    @property
    def value(self):
        return self._value

    @property
    def fault(self):
        return self._fault

    @property
    def defaulted(self):
        return self._defaulted

    def unwrap(self):
        """Return the value, or raise the fault of a failed outcome."""
        if self._fault is not None:
            raise self._fault
        return self._value

    def value_or(self, default, /):
        return self._value if self._fault is None else default

    def __bool__(self):
        return self._fault is None

    def __eq__(self, other, /):
        if not isinstance(other, Outcome):
            return NotImplemented
        return (self._value, self._fault, self._defaulted) == (other._value, other._fault, other._defaulted)

    def __hash__(self):
        return hash((type(self), self._fault is None))

    def __repr__(self):
        if self._fault is not None:
            return "outcome(fault=%r)" % self._fault
        return "outcome(value=%r%s)" % (self._value, ", defaulted=True" * self._defaulted)

    def __rich_repr__(self):
        yield "ok", self.ok
        if self._fault is None:
            yield "value", self._value
            yield "defaulted", self._defaulted, False
        else:
            yield "fault", self._fault


@final
class Reading:
    """
    Conversion handle over one retrieved string.

    A reading is either found (raw is the stored string), defaulted (raw is the
    string form of a lookup default) or failed (raw is Unset and the lookup fault is
    kept for convert()).
    """
    __slots__ = ("_raw", "_name", "_miss", "_defaulted")

    def __init__(self, raw=Unset, /, *, name=Unset, miss=None, defaulted=False):
        if raw is not Unset and not isinstance(raw, str):
            raise TypeError("a reading holds a string")
        self._raw = raw
        self._name = name
        self._miss = miss
        self._defaulted = defaulted

    @property
    def raw(self):
        return self._raw

    @property
    def name(self):
        return self._name

    @property
    def found(self):
        return self._raw is not Unset and not self._defaulted

    @property
    def defaulted(self):
        return self._defaulted

    def convert(self, type=str, default=Unset):
        """
        Convert the retrieved string into `type`.

        parameters
        - type: target type or converter (see argot.converters).
        - default: returned (as a successful, defaulted Outcome) when nothing was
          retrieved or when the conversion fails.

        returns
        - Outcome: never raises for a miss or a bad value.
        """
        if self._raw is Unset:
            if default is not Unset:
                return Outcome.success(default, defaulted=True)
            return Outcome.failure(self._miss)

        try:
            value = convert(self._raw, type)
        except ValueError as error:
            if default is not Unset:
                return Outcome.success(default, defaulted=True)
            return Outcome.failure(ConversionError(
                "cannot convert %r%s to %s" % (
                    self._raw,
                    "" if self._name is Unset else " (%s)" % self._name,
                    _typename(type),
                ),
                hint=str(error),
                name=self._name,
                raw=self._raw,
                type=type,
            ))
        return Outcome.success(value, defaulted=self._defaulted)

    def get(self, type=str, default=None):
        """Shortcut: the converted value, or `default` on any failure."""
        return self.convert(type, default).value

    def __bool__(self):
        return self._raw is not Unset

    def __str__(self):
        return "" if self._raw is Unset else self._raw

    def __repr__(self):
        if self._raw is Unset:
            return "reading(name=%r, miss=True)" % (self._name,)
        return "reading(name=%r, raw=%r%s)" % (self._name, self._raw, ", defaulted=True" * self._defaulted)

    def __rich_repr__(self):
        yield "name", self._name
        yield "raw", self._raw
        yield "defaulted", self._defaulted, False


class ParamGroup(Sequence):
    """Read-only view over all the values recorded for one parameter name."""
    __slots__ = ("_name", "_values")

    def __init__(self, name, values=()):
        self._name = name
        self._values = tuple(values)

    @property
    def name(self):
        return self._name

    @property
    def first(self):
        return self.reading(0)

    def reading(self, index, /):
        """A Reading over the index-th value (failed when out of range)."""
        if 0 <= index < len(self._values):
            return Reading(self._values[index], name=self._name)
        return Reading(name=self._name, miss=MissingParamError(
            "no value #%d for parameter %r (%d recorded)" % (index, self._name, len(self._values)),
            hint="pass it as --%s=<value>" % self._name,
            name=self._name,
            index=index,
        ))

    def readings(self):
        return tuple(Reading(value, name=self._name) for value in self._values)

    def __getitem__(self, index):
        return self._values[index]

    def __len__(self):
        return len(self._values)

    def __eq__(self, other, /):
        if isinstance(other, ParamGroup):
            return (self._name, self._values) == (other._name, other._values)
        if isinstance(other, Sequence) and not isinstance(other, str):
            return self._values == tuple(other)
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return "params(%r, %r)" % (self._name, self._values)

    def __rich_repr__(self):
        yield self._name
        yield from self._values


class Arguments:
    """
    Query surface over a Store.

    flags
    - flag(*names): any of the names (or lists of names) was given at least once.
    - count(*names): how many times, across the names.

    parameters
    - param(*names, default=Unset): Reading over the first value of the first given
      name that was recorded.
    - params(name): ParamGroup with every value of that name.
    - names(): recorded parameter names, first-seen order.

    positionals
    - args[index]: str, raising PositionalIndexError when out of range.
    - positional(index, default=Unset): Reading, never raising.
    - len(args), iter(args): count and in-order iteration.
    """
    __slots__ = ("_store",)

    def __init__(self, store):
        if not isinstance(store, Store):
            raise TypeError("Arguments() argument must be a Store")
        self._store = store

    @property
    def store(self):
        return self._store

    @property
    def flags(self):
        return self._store.flags

    @property
    def positionals(self):
        return self._store.positionals

    def flag(self, *names):
        wanted = set(_names(names))
        return any(flag in wanted for flag in self._store.flags)

    def count(self, *names):
        wanted = set(_names(names))
        return sum(flag in wanted for flag in self._store.flags)

    def names(self):
        return tuple(self._store.params)

    def param(self, *names, default=Unset):
        """
        Reading over the first value of the first recorded name, in the given order.

        A default is stringified and read like a stored value, so it goes through
        the same conversion: param("n", default=0.5).convert(int) fails. Pass the
        fallback to convert() instead to have it returned as-is.
        """
        names = tuple(_names(names))
        if not names:
            raise TypeError("param() expected at least one name")

        params = self._store.params
        for name in names:
            if values := params.get(name):
                return Reading(values[0], name=name)

        if default is not Unset:
            return Reading(str(default), name=names[0], defaulted=True)

        spelled = " or ".join("%r" % name for name in names)
        return Reading(name=names[0], miss=MissingParamError(
            "parameter %s was not given" % spelled,
            hint="pass it as --%s=<value>" % names[0],
            name=names[0],
            names=names,
        ))

    def params(self, name, /):
        name, = _names((name,))
        return ParamGroup(name, self._store.params.get(name, ()))

    def _miss(self, index):
        count = len(self._store.positionals)
        return PositionalIndexError(
            "no positional argument at index %d (%d given)" % (index, count),
            hint=(
                "positional indexes count from 0" if index < 0 else
                "expected at least %d positional argument%s" % (index + 1, "s" * (index != 0))
            ),
            index=index,
            count=count,
        )

    def _check(self, index):
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError("positional index must be an integer, not %s" % type(index).__name__)
        return 0 <= index < len(self._store.positionals)

    def positional(self, index, /, default=Unset):
        """Reading over the index-th positional; a default is stringified like in param()."""
        if self._check(index):
            return Reading(self._store.positionals[index], name=index)
        if default is not Unset:
            return Reading(str(default), name=index, defaulted=True)
        return Reading(name=index, miss=self._miss(index))

    def __getitem__(self, index):
        if not self._check(index):
            raise self._miss(index)
        return self._store.positionals[index]

    def __iter__(self):
        return iter(self._store.positionals)

    def __len__(self):
        return len(self._store.positionals)

    def __repr__(self):
        return "arguments(%r)" % self._store

    def __rich_repr__(self):
        yield from self._store.__rich_repr__()


__all__ = (
    "Outcome",
    "Reading",
    "ParamGroup",
    "Arguments",
)
