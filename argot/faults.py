"""
Argot faults and rendering.

Scope
- FaultCode: stable numeric identifiers for every fault the accessor layer can
  produce. Codes are grouped by domain (lookups 1110x, conversions 1111x).
- ArgotException and its subclasses: carry a message plus read-only options
  (title, code, hint and the lookup context) and know how to render themselves.
- trigger(): surface a fault, either raising it or printing it on stderr.

Policy
- Faults are values first. A failed lookup or conversion stores its fault in a
  failed Outcome; nothing is raised until the caller asks for it (Outcome.unwrap(),
  Arguments[index], trigger()).
- Nothing in this package exits the host process. In shell mode, trigger() prints
  and returns; deciding whether to stop is left to the caller.

Host customization (read from __main__ when present)
- __styles__: mapping of style names to Rich styles.
- __codes__: mapping of FaultCode to a label replacing the numeric id.
- __prog__: program name shown in rendered headers.
"""
import sys
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .internals import Unset

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    grouping
    - lookups (1110x)
      • MISSING_PARAM, MISSING_POSITIONAL
    - conversions (1111x)
      • UNCASTABLE_VALUE
    """
    # --- lookup misses (11xxx) ---
    MISSING_PARAM      = 11101
    MISSING_POSITIONAL = 11102

    # --- conversion failures (11xxx) ---
    UNCASTABLE_VALUE   = 11111

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__ to override
        numeric ids with friendlier labels; otherwise the numeric value is returned.
        """
        return str(getattr(sys.modules.get("__main__"), "__codes__", {}).get(self, self.value))


class ArgotException(Exception):
    code = Unset
    title = "fault"

    def __init__(self, message=Unset, /, **options):
        if not isinstance(message, str | Unset):
            raise TypeError("fault message must be a string")
        super().__init__(*(() if message is Unset else (message,)))
        self.message = message
        self.options = MappingProxyType({"code": self.code, "title": self.title} | options)

    def __str__(self):
        return "" if self.message is Unset else self.message

    def __eq__(self, other, /):
        if type(self) is not type(other):
            return NotImplemented
        return self.message == other.message and dict(self.options) == dict(other.options)

    __hash__ = Exception.__hash__

    def __rich__(self):
        main = sys.modules.get("__main__")

        styles = defaultdict(str, {
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # friendly pinky title

            # body
            "error-message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
        } | getattr(main, "__styles__", {}))

        colorful = self.options.get("colorful", False)
        fancy = self.options.get("fancy", False)

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            if not colorful:
                return Text(str(fragment))
            if isinstance(fragment, Text):
                return fragment
            return Text(str(fragment), styles[style])

        prog = getattr(main, "__prog__", None) or self.options.get("prog") or "argot"
        code = self.options["code"]

        header = Text.assemble(
            "[ ",
            text(prog, "prog-name"),
            " — ",
            text(code.normalize() if isinstance(code, FaultCode) else "?", "code"),
            " | ",
            text(self.options["title"].title(), "error-title"),
            " ]"
        )
        message = text(self, "error-message")
        renders = [message]
        if hint := self.options.get("hint"):
            renders.append(Text.assemble(text(" → ", "hint-arrow"), text(hint, "hint")))

        if fancy:
            return Panel(Group(*renders), title=header, title_align="left")
        return Group(header, *renders)

    def __trigger__(self):
        if not self.options.get("shell", False):
            raise self
        console.print(self)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class LookupMissError(ArgotException, LookupError):
    title = "lookup miss"


class MissingParamError(LookupMissError):
    code = FaultCode.MISSING_PARAM
    title = "missing parameter"


class PositionalIndexError(LookupMissError, IndexError):
    code = FaultCode.MISSING_POSITIONAL
    title = "missing positional"


class ConversionError(ArgotException, ValueError):
    code = FaultCode.UNCASTABLE_VALUE
    title = "uncastable value"


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see ArgotException).
    - options are merged into the fault via __replace__(**options) before triggering.
    - shell=True prints the fault on stderr through Rich (colorful/fancy honoured)
      and returns; otherwise the fault is raised.
    """
    if (
        not callable(getattr(fault, "__trigger__", None)) or
        not callable(getattr(fault, "__replace__", None))
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    fault.__replace__(**options).__trigger__()


__all__ = (
    "FaultCode",
    "ArgotException",
    "LookupMissError",
    "MissingParamError",
    "PositionalIndexError",
    "ConversionError",
    "trigger",
)
