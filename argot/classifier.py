r"""
Argot classifier: one left-to-right pass from raw tokens to a Store.

Overview
- Mode: independent switches (enum.IntFlag) tuning the heuristics.
  • PREFER_FLAG_FOR_UNREG_OPTION (default): an unregistered "--name" is a bare flag.
  • PREFER_PARAM_FOR_UNREG_OPTION: an unregistered "--name" takes the following
    non-option token as its value (wins when both preferences are set).
  • NO_SPLIT_ON_EQUALSIGN: "--name=value" is not split and is handled verbatim.
  • SINGLE_DASH_IS_MULTIFLAG: "-abc" records the flags "a", "b" and "c".

- classify(tokens, registry=(), mode=Mode.DEFAULT, *, program=Unset) -> Store
  • Pure function of its arguments: no module state, the registry is snapshotted.
  • All or nothing: the token sequence is validated before the pass starts.

Rules, per token (one token of lookahead)
1. "option-like" means: starts with '-' and is not a number ("-42", "-3.14" are values).
2. option-like tokens:
   a. "--name=value" (split enabled) → param name=value, nothing else consumed.
   b. "-abc" (multi-flag mode, single dash, more than one letter, "abc" unregistered)
      → flags a, b, c; a registered last letter becomes a parameter name instead
      and continues with rule c ("-xvj 4" with j registered → flags x, v; j=4).
   c. name = the token without its dashes.
      • registered: the next token is its value unless missing or option-like, in
        which case the value is "".
      • unregistered: a bare flag, or with the param preference, a parameter taking
        the next token when that token exists and is not option-like.
3. anything else not consumed as a value is a positional, in encounter order.

There is no end-of-options marker: "--" is an option-like token with an empty name.
Ambiguous command lines are settled by registration and the preference switches
only; callers that need "--mode value" to mean a parameter must register "mode".

Quick example:
    >>> store = classify(["prog", "--verbose", "--out=result.txt", "42", "-q"])
    >>> store.flags, dict(store.params), store.positionals
    (('verbose', 'q'), {'out': ('result.txt',)}, ('42',))
"""
import shlex
from collections.abc import Iterable
from enum import IntFlag

from .internals import Unset, coalesce
from .registry import Registry
from .store import Role, Store
from .tokens import isoption, dashless, dashes, split


class Mode(IntFlag):
    PREFER_FLAG_FOR_UNREG_OPTION  = 1 << 0
    PREFER_PARAM_FOR_UNREG_OPTION = 1 << 1
    NO_SPLIT_ON_EQUALSIGN         = 1 << 2
    SINGLE_DASH_IS_MULTIFLAG      = 1 << 3

    DEFAULT = PREFER_FLAG_FOR_UNREG_OPTION


def _tokenize(tokens, program):
    """
    normalize the input into a list of strings, dropping the program name.

    - str      → shlex.split (program defaults to False: a prompt has no argv[0]).
    - Iterable → list of str (program defaults to True).
    """
    if isinstance(tokens, str):
        tokens = shlex.split(tokens)
        program = coalesce(program, False)
    elif isinstance(tokens, Iterable):
        tokens = list(tokens)
        program = coalesce(program, True)
    else:
        raise TypeError("classify() argument must be a string or an iterable of strings")

    for index, token in enumerate(tokens):
        if not isinstance(token, str):
            raise TypeError("token at index %d must be a string, not %s" % (index, type(token).__name__))

    return tokens[1:] if program else tokens


def _snapshot(registry):
    if isinstance(registry, Registry):
        return registry.snapshot()
    return Registry(registry).snapshot()


def classify(tokens, registry=(), mode=Mode.DEFAULT, *, program=Unset):
    """
    Classify a token sequence into flags, parameters and positionals.

    parameters
    - tokens: Sequence[str] | str
      argv-like tokens, or a shell-like prompt split with shlex.
    - registry: Registry | Iterable[str]
      names known to take a value (dashes optional).
    - mode: Mode
      heuristic switches; defaults to Mode.DEFAULT.
    - program: bool (keyword-only)
      whether the first token is the program name to skip; defaults to True for
      sequences and False for string prompts.

    returns
    - Store: the frozen result.

    raises
    - TypeError: a token is not a string, or mode is not an integer flag set.
    """
    if not isinstance(mode, int):
        raise TypeError("classify() mode must be a Mode")
    mode = Mode(mode)

    tokens = _tokenize(tokens, program)
    registered = _snapshot(registry)

    flags = []
    params = []
    positionals = []
    trail = []

    def takes(index):
        # whether a following token exists and can serve as a value
        return index + 1 < len(tokens) and not isoption(tokens[index + 1])

    index = 0
    while index < len(tokens):
        token = tokens[index]
        index += 1

        if not isoption(token):
            positionals.append(token)
            trail.append((token, Role.POSITIONAL))
            continue

        if not mode & Mode.NO_SPLIT_ON_EQUALSIGN and (pair := split(token)) is not None:
            params.append(pair)
            trail.append((token, Role.PARAM))
            continue

        name = dashless(token)

        if (
            mode & Mode.SINGLE_DASH_IS_MULTIFLAG and
            dashes(token) == 1 and
            len(token) > 2 and
            name not in registered
        ):
            if name[-1] not in registered:
                flags.extend(name)
                trail.append((token, Role.FLAG))
                continue
            # the last letter heads a parameter; the rest are flags
            flags.extend(name[:-1])
            name = name[-1]

        if name in registered:
            if takes(index - 1):
                params.append((name, tokens[index]))
                trail.append((token, Role.NAME))
                trail.append((tokens[index], Role.VALUE))
                index += 1
            else:
                params.append((name, ""))
                trail.append((token, Role.NAME))
            continue

        if mode & Mode.PREFER_PARAM_FOR_UNREG_OPTION and takes(index - 1):
            params.append((name, tokens[index]))
            trail.append((token, Role.NAME))
            trail.append((tokens[index], Role.VALUE))
            index += 1
            continue

        flags.append(name)
        trail.append((token, Role.FLAG))

    return Store(flags, params, positionals, trail)


__all__ = (
    "Mode",
    "classify",
)
