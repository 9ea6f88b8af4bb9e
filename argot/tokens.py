"""
Token predicates used by the classifier.

Every decision the classifier makes about a single token goes through these
helpers, so the shape rules live in one place:

- isnumber(token): optional sign, ASCII digits, at most one decimal point.
- isoption(token): starts with '-' and is not a number ("-42" is a value, "-x" is not).
- dashless(token): the token without its leading dashes ("--out" -> "out", "--" -> "").
- dashes(token): how many leading dashes the token carries.
- split(token): (name, value) around the first '=', or None when there is none.
"""
import re

_NUMBER = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)", re.ASCII)


def isnumber(token, /):
    """
    Tell whether a token reads as a plain decimal number.

    Accepted: "42", "-42", "+7", "3.14", "-3.14", "-.5", "42."
    Rejected: "", "-", ".", "-.", "1e5", "0x10", "1.2.3", " 4"
    """
    if not isinstance(token, str):
        raise TypeError("isnumber() argument must be a string")
    return _NUMBER.fullmatch(token) is not None


def isoption(token, /):
    """
    Tell whether a token looks like an option name.

    A token is option-like when it starts with at least one dash and is not a
    number, which keeps negative numbers out of the option namespace.
    """
    if not isinstance(token, str):
        raise TypeError("isoption() argument must be a string")
    return token.startswith("-") and not isnumber(token)


def dashless(token, /):
    if not isinstance(token, str):
        raise TypeError("dashless() argument must be a string")
    return token.lstrip("-")


def dashes(token, /):
    return len(token) - len(dashless(token))


def split(token, /):
    """
    Split an inline assignment at the first '='.

    returns
    - (dashless name, value) when '=' is present; the value keeps any further '='.
    - None otherwise.
    """
    name, sign, value = token.partition("=")
    if not sign:
        return None
    return dashless(name), value


__all__ = (
    "isnumber",
    "isoption",
    "dashless",
    "dashes",
    "split",
)
