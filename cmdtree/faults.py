"""
cmdtree faults (errors) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every user-facing fault.
  Codes are grouped by domain to keep copy consistent and searches predictable.
- DispatchException: base type that carries message + options and knows how to
  render itself (rich) in a short, lowercased, actionable way.
- trigger(): central entry point to surface a fault (respecting shell/fancy/colorful).

Taxonomy
- CongruenceError: the command tree and the help tree disagree on the set of
  available command paths. Raised while constructing a dispatcher; fatal.
- ArgumentValidationError (and subclasses): a bound argument is missing,
  undeclared, or fails a pattern/predicate check. Raised from a handler through
  its context; ends the invocation.
- CommandError: a handler reported a failure through `context.error(...)`.

Unknown and partial command paths are outcomes, not faults: the dispatcher
answers them with help output and a successful exit status.

Integration
- Handlers raise faults (usually through the context helpers).
- The dispatcher catches them and calls trigger(fault, **options): in shell mode
  the fault is rendered on the error console; otherwise it is raised.
- Host applications may define in __main__:
  • __prog__: program name shown in fault headers.
  • __styles__: palette overrides (prog-name, code, error-title, command-label,
    command, error-message, hint-arrow, hint).
  • __codes__: mapping FaultCode -> label, to replace numeric codes.
"""
import copy
import os.path
import sys
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    grouping (by high-level domain)
    - arguments (112xx)
      • MISSING_ARGUMENT, UNDECLARED_ARGUMENT, MISMATCHED_ARGUMENT, ILLEGAL_ARGUMENT
    - handlers (113xx)
      • COMMAND_ERROR
    - configuration (114xx)
      • INCONGRUENT_TREES

    spacing leaves room for future additions without reshuffling existing codes.
    """
    # --- argument errors (112xx) ---
    MISSING_ARGUMENT            = 11201
    UNDECLARED_ARGUMENT         = 11202
    MISMATCHED_ARGUMENT         = 11203
    ILLEGAL_ARGUMENT            = 11204

    # --- handler errors (113xx) ---
    COMMAND_ERROR               = 11301

    # --- configuration errors (114xx) ---
    INCONGRUENT_TREES           = 11401

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class DispatchException(Exception):
    """
    base fault: a message plus read-only rendering/context options.

    recognized options
    - code, title, hint: header and footer copy (class defaults apply).
    - command: the command path as typed (shown under the header).
    - prog: program name (falls back to __prog__ in __main__, then argv[0]).
    - shell, fancy, colorful: runtime flags of the reporting dispatcher.
    - console: rich Console used when triggered in shell mode.
    """
    code = FaultCode.COMMAND_ERROR
    title = "command error"

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(*(() if message is Unset else (message,)))
        self.message = message
        self.options = MappingProxyType(options)

    def __rich__(self):
        main = __import__("__main__")
        colorful = self.options.get("colorful", True)

        styles = defaultdict(str, {
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # friendly pinky title

            # body
            "command-label": "#00E5FF",  # cyan, like the help argument column
            "command": "bold #E6E6F0",
            "error-message": "bold #FF5555",  # red message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
        } | getattr(main, "__styles__", {}))

        def styler(style):
            return styles[style] if colorful else ""

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            if isinstance(fragment, Text):
                return fragment if colorful else Text(fragment.plain)
            return Text(str(fragment), style)

        prog = self.options.get("prog") or getattr(main, "__prog__", os.path.basename(sys.argv[0]))

        header = Text.assemble(
            "[ ",
            text(prog, styler("prog-name")),
            " — ",
            text(self.options.get("code", self.code).normalize(), styler("code")),
            " | ",
            text(self.options.get("title", self.title).title(), styler("error-title")),
            " ]"
        )
        body = []
        if command := self.options.get("command"):
            body.append(Text.assemble(text("command:".ljust(10), styler("command-label")), text(command, styler("command"))))
        body.append(text(self.message if self.message is not Unset else "", styler("error-message")))
        if hint := self.options.get("hint"):
            body.append(Text.assemble(text(" → ", styler("hint-arrow")), text(hint, styler("hint"))))

        if self.options.get("fancy", False):
            return Panel(Group(*body), title=header, title_align="left")

        return Group(header, *body)

    def __trigger__(self) -> None:
        if not self.options.get("shell", False):
            raise self from None
        self.options.get("console", console).print(self)

    def __replace__(self, *unused, **overrides):
        assert not unused, "unused arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class CongruenceError(DispatchException):
    code = FaultCode.INCONGRUENT_TREES
    title = "incongruent trees"


class ArgumentValidationError(DispatchException):
    code = FaultCode.ILLEGAL_ARGUMENT
    title = "invalid argument"


class MissingArgumentError(ArgumentValidationError):
    code = FaultCode.MISSING_ARGUMENT
    title = "missing argument"


class UndeclaredArgumentError(ArgumentValidationError):
    code = FaultCode.UNDECLARED_ARGUMENT
    title = "undeclared argument"


class MismatchedArgumentError(ArgumentValidationError):
    code = FaultCode.MISMATCHED_ARGUMENT
    title = "mismatched argument"


class IllegalArgumentError(ArgumentValidationError):
    code = FaultCode.ILLEGAL_ARGUMENT
    title = "illegal argument"


class CommandError(DispatchException):
    code = FaultCode.COMMAND_ERROR
    title = "command error"


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see DispatchException).
    - options are merged into the fault via copy.replace(fault, **options) before triggering.
    - in shell mode, rendering happens via the rich console; otherwise the fault is raised.
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    copy.replace(fault, **options).__trigger__()


__all__ = (
    "FaultCode",
    "DispatchException",
    "CongruenceError",
    "ArgumentValidationError",
    "MissingArgumentError",
    "UndeclaredArgumentError",
    "MismatchedArgumentError",
    "IllegalArgumentError",
    "CommandError",
    "trigger",
)
