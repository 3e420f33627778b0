"""
cmdtree utilities (internal helpers, carefully exposed)

Overview
- UnsetType / Unset
  • Singleton sentinel for “keyword not provided” in constructor signatures,
    so None can stay a meaningful value (e.g. `extend=None`).
  • Falsey, printable as "Unset", non-subclassable.

- coalesce(value, default=None)
  • Replace Unset with a concrete default, preserving None/0/""/[].

- humanize(name)
  • Turn a parameter name (camelCase, snake_case, kebab-case) into the
    space separated lowercase label shown in help and messages.

- pad(text, width)
  • Right-pad a str or rich Text to a fixed column width.

Note
- Unset is for API defaults only. Unsupplied *positional values* use the
  `absent` sentinel from cmdtree.sentinel instead.
"""
import functools
import re
from typing import final

from rich.text import Text


@final
class UnsetType:
    """
    Internal sentinel type representing a keyword that was not provided.

    Characteristics
    - Boolean-false: bool(Unset) is False, but it is distinct from None and 0.
    - Printable: repr(Unset) -> "Unset".
    - Non-subclassable and a singleton per process.
    """

    def __or__(self, other, /):
        """
        Support PEP 604 unions (e.g., str | Unset in isinstance checks).
        """
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

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


def coalesce(object, default=None, /):
    """
    Resolve the Unset sentinel to a concrete default.

    Examples
    - coalesce("name", "fallback") -> "name"
    - coalesce(Unset, "fallback")  -> "fallback"
    - coalesce(None, "fallback")   -> None   # None is preserved, not replaced
    """
    return object if object is not Unset else default


@functools.cache
def humanize(name, /):
    """
    Convert a parameter name into a human-spaced, lowercase label.

    Rules
    - '_' and '-' runs become single spaces.
    - a lower/digit → upper transition starts a new word ("envName" → "env name").
    - an acronym followed by a word is split before the word's capital
      ("HTTPPort" → "http port").
    - surrounding separators are dropped.

    Examples
    - humanize("envName")    -> "env name"
    - humanize("env_name")   -> "env name"
    - humanize("--dry-run")  -> "dry run"
    - humanize("region")     -> "region"
    """
    if not isinstance(name, str):
        raise TypeError("humanize() argument must be a string")
    name = re.sub(r"[_\-\s]+", " ", name)
    name = re.sub(r"(?<=[a-z0-9])(?=[A-Z])", " ", name)
    name = re.sub(r"(?<=[A-Z])(?=[A-Z][a-z])", " ", name)
    return " ".join(name.lower().split())


def pad(text, width, /):
    """
    Right-pad `text` with spaces up to `width` cells (never truncates).

    Accepts a str or a rich Text; the return type follows the input.
    """
    if isinstance(text, Text):
        text = text.copy()
        text.pad_right(max(width - text.cell_len, 0))
        return text
    if not isinstance(text, str):
        raise TypeError("pad() first argument must be a string or a text")
    return text.ljust(width)


Unset = UnsetType()


__all__ = (
    # Functions
    "coalesce",
    "humanize",
    "pad",

    # Types
    "UnsetType",

    # Constants
    "Unset",
)
