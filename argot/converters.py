"""
Generic string-to-value conversion used by Reading.convert().

Rules (first match wins)
- str: the text unchanged.
- bool: "true/t/1/yes/on" and "false/f/0/no/off", case-insensitive; nothing else.
- Literal[...]: the text must equal the string form of one of the literal values;
  the matching literal value is returned.
- X | Y, Optional[X]: the first member type that converts (NoneType is skipped).
- Enum subclasses: by member name, then by value coerced to the members' value type.
- other parameterized generics (list[int], ...) are rejected with TypeError.
- anything else callable: type(text).

Failures are always reported as ValueError, whatever the converter raised, so the
accessor layer only has one thing to catch.
"""
import builtins
import types
from enum import Enum
from typing import Literal, Union, get_args, get_origin

_TRUTHY = frozenset({"true", "t", "1", "yes", "on"})
_FALSY = frozenset({"false", "f", "0", "no", "off"})


def convert_bool(text, /):
    lowered = text.strip().lower()
    if lowered in _TRUTHY:
        return True
    if lowered in _FALSY:
        return False
    raise ValueError("%r is not a boolean (expected one of: %s)" % (text, ", ".join(sorted(_TRUTHY | _FALSY))))


def convert_enum(text, enum, /):
    """
    Resolve an Enum member by name first, then by value.

    The value lookup coerces the text to the type of the first member's value, so
    IntEnum members can be addressed by their number.
    """
    try:
        return enum[text]
    except KeyError:
        pass

    members = list(enum)
    if not members:
        raise ValueError("%s has no members" % enum.__name__)

    base = type(members[0].value)
    try:
        return enum(base(text))
    except (ValueError, TypeError):
        values = ", ".join(str(member.value) for member in members)
        raise ValueError("%r should be one of {%s}" % (text, values)) from None


def convert(text, type=str, /):
    """
    Convert a retrieved string into `type`.

    parameters
    - text: str
      the raw parameter value or positional.
    - type: type | callable
      the requested target (see module docstring for the supported shapes).

    returns
    - the converted value.

    raises
    - ValueError: conversion failed.
    - TypeError: text is not a string or type is not usable as a converter.
    """
    if not isinstance(text, str):
        raise TypeError("convert() first argument must be a string")

    if type is str:
        return text

    origin = get_origin(type)
    args = get_args(type)

    if origin is Literal:
        for literal in args:
            if text == str(literal):
                return literal
        raise ValueError("%r is not one of %s" % (text, ", ".join(map(repr, args))))

    if isinstance(type, types.UnionType) or origin is Union:
        for member in args:
            if member is types.NoneType:
                continue
            try:
                return convert(text, member)
            except ValueError:
                continue
        raise ValueError("%r could not be converted to any of %s" % (text, ", ".join(
            getattr(member, "__name__", repr(member)) for member in args
        )))

    if origin is not None:
        # list[int], dict[str, int], ...: calling them would not convert the items
        raise TypeError("convert() cannot convert to %r" % (type,))

    if type is bool:
        return convert_bool(text)

    if isinstance(type, builtins.type) and issubclass(type, Enum):
        return convert_enum(text, type)

    if not callable(type):
        raise TypeError("convert() second argument must be a type or a callable")

    try:
        return type(text)
    except (ValueError, TypeError, ArithmeticError) as error:
        raise ValueError("%r could not be converted to %s: %s" % (
            text, getattr(type, "__name__", repr(type)), error
        )) from error


__all__ = (
    "convert",
    "convert_bool",
    "convert_enum",
)
