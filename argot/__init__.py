__path__ = __import__("pkgutil").extend_path(__path__, __name__)  # NOQA: F-821
__title__ = 'argot'
__author__ = 'Eiko Reishin (影皇嶺臣)'
__license__ = 'MIT'
# Placeholder, modified by dynamic-versioning.
__version__ = "0.0.0"

from .accessors import *
from .classifier import *
from .faults import *
from .registry import *
from .store import *
from .internals import Unset

VersionInfo = __import__("collections").namedtuple("VersionInfo", (
    "major",
    "minor",
    "micro",
    "releaselevel",
    "serial",
    "metadata"
))

# Placeholder, modified by dynamic-versioning.
version_info = VersionInfo(0, 0, 0, "final", 0, "")


def parse(tokens=Unset, /, *, params=(), mode=Mode.DEFAULT, program=Unset):
    """
    Classify a command line and wrap the result for querying.

    Parameters
    - tokens:
      • Unset: read sys.argv (program name included, and skipped).
      • str: split with shlex.split (no program name by default).
      • Iterable[str]: used as-is (first token skipped by default).
    - params: names known to take a value (Registry or iterable of names).
    - mode: classifier switches (Mode).
    - program: override whether the first token is the program name.

    Returns
    - Arguments over the frozen Store.
    """
    if tokens is Unset:
        tokens = __import__("sys").argv
    return Arguments(classify(tokens, params, mode, program=program))


__all__ = (
    "__path__",
    "__title__",
    "__author__",
    "__license__",
    "__version__",
    "version_info",
    "parse",
    "Unset",
)

# Load the exposed API of the accessors
__all__ += accessors.__all__  # type: ignore[attr-defined]
# Load the exposed API of the classifier
__all__ += classifier.__all__  # type: ignore[attr-defined]
# Load the exposed API of the faults
__all__ += faults.__all__  # type: ignore[attr-defined]
# Load the exposed API of the registry
__all__ += registry.__all__  # type: ignore[attr-defined]
# Load the exposed API of the store
__all__ += store.__all__  # type: ignore[attr-defined]
