"""
cmdtree dispatcher: resolve a colon-delimited command and run its handler.

What this module provides
- Dispatcher: verifies the command tree against the help tree once, then
  resolves invocations (`program <command-path> [positional-args...]`).
- ExitStatus: the process exit statuses a dispatch can end with.
- invoke(dispatcher, prompt): run a dispatcher, exiting the process in shell mode.
- dispatch(help=..., commands=..., extend=...): one-call entry point for scripts.

Quick start
    from cmdtree import dispatch

    def staging(context, env):
        context.require("env")
        context.success(f"deploying {env} to staging")

    def prod(context, env):
        if context.confirm(f"deploy {env} to production?"):
            context.success(f"deploying {env} to prod")

    if __name__ == "__main__":
        dispatch(
            help={"deploy": {"_": "deployment targets", "staging": "deploy to staging", "prod": "deploy to prod"}},
            commands={"deploy": {"staging": staging, "prod": prod}},
        )

Invocation outcomes
- no command: "no command given" notice + full help, SUCCESS.
- -h / --help: full help, SUCCESS.
- unknown path: "command not found" notice (+ did-you-mean hint) + full help, SUCCESS.
- partial path (interior node): partial notice + help of that subtree, SUCCESS.
- command path: the handler runs with a fresh Context and the bound arguments.
  A fault raised by the handler is reported (shell mode) and ends with FAILURE,
  or propagates to the caller (non-shell mode).
"""
import difflib
import os.path
import shlex
import sys
from collections import defaultdict
from collections.abc import Iterable
from enum import IntEnum

from rich.console import Console
from rich.text import Text

from .binding import bind, parameters, takes_context
from .context import Context
from .faults import CongruenceError, DispatchException, trigger
from .nodes import command_tree, help_tree
from .rendering import Renderer
from .trees import Outcome, paths, resolve, verify
from .utils import Unset, coalesce

HELPERS = ("-h", "--help")


def _progname(prog=Unset):
    return coalesce(prog, getattr(__import__("__main__"), "__prog__", os.path.basename(sys.argv[0])))


class ExitStatus(IntEnum):
    SUCCESS = 0  # command executed or help shown
    FAILURE = 1  # a handler fault (validation, context.error)
    MISCONFIGURED = 2  # command and help trees are not congruent


class Dispatcher:
    """
    Hierarchical command dispatcher.

    Parameters
    - help: Mapping | Branch
      Help tree; nested dicts of segment → help text, "_" keys describe sections.
    - commands: Mapping | Branch
      Command tree; nested dicts of segment → handler (or Leaf with params).
    - extend: object
      Caller-owned extension exposed as `context.extend` on every invocation.
    - prog: str | Unset
      Program name for fault headers (default: __prog__ in __main__, then argv[0]).
    - shell: bool
      When True, handler faults are rendered and reported as ExitStatus.FAILURE;
      when False they propagate as exceptions.
    - colorful, fancy: bool
      Styling of help/messages, and rich panels around faults.
    - console, errors: rich Consoles for regular output and faults.
    - stdin: text stream confirm() answers are read from (default: terminal).

    Raises
    - CongruenceError when the two trees do not describe the same command paths.
    """

    def __init__(
            self,
            help,
            commands,
            extend=None,
            *,
            prog=Unset,
            shell=False,
            colorful=True,
            fancy=False,
            console=Unset,
            errors=Unset,
            stdin=Unset,
    ):
        self._help = help_tree(help)
        self._commands = command_tree(commands)
        verify(self._commands, self._help)

        self._extend = extend
        self._prog = _progname(prog)
        self._shell = bool(shell)
        self._colorful = bool(colorful)
        self._fancy = bool(fancy)
        self._console = coalesce(console, Console())
        self._errors = coalesce(errors, Console(stderr=True))
        self._stdin = coalesce(stdin)
        self._renderer = Renderer(self._commands, self._help, console=self._console, colorful=self._colorful)

    @property
    def help(self):
        return self._help

    @property
    def commands(self):
        return self._commands

    @property
    def shell(self):
        return self._shell

    @property
    def renderer(self):
        return self._renderer

    def _notice(self, message):
        styles = defaultdict(str, {
            "notice": "bold #EF4444",  # red, like fault messages
        } | getattr(__import__("__main__"), "__styles__", {}))
        self._console.print()
        self._console.print(Text(message, styles["notice"] if self._colorful else ""))
        self._console.print()

    def _suggest(self, cmd):
        suggestions = difflib.get_close_matches(cmd, list(paths(self._commands)), 3)
        if suggestions:
            self._notice("did you mean %s?" % " or ".join(map(repr, suggestions)))

    def __invoke__(self, prompt=Unset):
        """
        Dispatch one invocation and return its ExitStatus.

        Parameters
        - prompt:
          • Unset: read tokens from sys.argv[1:].
          • str: shell-like string; split via shlex.split.
          • Iterable[str]: pre-tokenized sequence (kept as-is, empty strings
            included since they are valid argument values).

        The first token is the command path, the others are positional values.
        """
        if prompt is Unset:
            tokens = sys.argv[1:]
        elif isinstance(prompt, str):
            tokens = shlex.split(prompt)
        elif isinstance(prompt, Iterable):
            tokens = list(prompt)
            if not all(isinstance(token, str) for token in tokens):
                raise TypeError("__invoke__() argument must be a string or an iterable of strings")
        else:
            raise TypeError("__invoke__() argument must be a string or an iterable of strings")

        if not tokens or not tokens[0]:
            self._notice("no command given")
            self._renderer.show()
            return ExitStatus.SUCCESS

        cmd, *values = tokens

        if cmd in HELPERS:
            self._renderer.show()
            return ExitStatus.SUCCESS

        resolution = resolve(cmd, self._commands)

        if resolution.outcome is Outcome.NOT_FOUND:
            self._notice("command not found")
            self._suggest(cmd)
            self._renderer.show()
            return ExitStatus.SUCCESS

        if resolution.outcome is Outcome.PARTIAL:
            self._notice("%s is only a partial command" % cmd)
            self._renderer.scope(cmd)
            return ExitStatus.SUCCESS

        leaf = resolution.node
        context = Context(
            cmd,
            bind(parameters(leaf), values),
            self._extend,
            console=self._console,
            stdin=self._stdin,
            colorful=self._colorful,
        )
        try:
            if takes_context(leaf):
                leaf.value(context, *context.args.values())
            else:
                leaf.value(*context.args.values())
        except DispatchException as fault:
            if not self._shell:
                raise
            trigger(
                fault,
                shell=True,
                prog=self._prog,
                colorful=self._colorful,
                fancy=self._fancy,
                console=self._errors,
            )
            return ExitStatus.FAILURE
        return ExitStatus.SUCCESS


def invoke(dispatcher, prompt=Unset, /):
    """
    Run `dispatcher` once.

    In shell mode the process exits with the resulting ExitStatus; otherwise
    the status is returned.
    """
    if not hasattr(dispatcher, "__invoke__") or not callable(dispatcher.__invoke__):
        raise TypeError("invoke() first argument must implement __invoke__ method")
    status = dispatcher.__invoke__(prompt)
    if getattr(dispatcher, "shell", False):
        sys.exit(status)
    return status


def dispatch(*, help, commands, extend=None, prompt=Unset, **options):
    """
    Build a shell-mode Dispatcher and run it against the command line.

    A CongruenceError is rendered on the error console and exits with
    ExitStatus.MISCONFIGURED before any command is resolved.
    """
    options.setdefault("shell", True)
    try:
        dispatcher = Dispatcher(help, commands, extend, **options)
    except CongruenceError as fault:
        if not options["shell"]:
            raise
        trigger(
            fault,
            shell=True,
            prog=_progname(options.get("prog", Unset)),
            colorful=options.get("colorful", True),
            fancy=options.get("fancy", False),
            console=coalesce(options.get("errors", Unset), Console(stderr=True)),
        )
        sys.exit(ExitStatus.MISCONFIGURED)
    return invoke(dispatcher, prompt)


__all__ = (
    "Dispatcher",
    "ExitStatus",
    "invoke",
    "dispatch",
)
