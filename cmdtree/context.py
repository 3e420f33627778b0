"""
Invocation context handed to command handlers.

One Context is created per dispatch. It exposes the command path as typed
(`cmd`), the bound arguments (`args`, read-only) and the caller-supplied
extension object (`extend`), plus helpers to validate arguments, report
messages and ask yes/no questions.

Validation helpers raise faults (see cmdtree.faults) instead of exiting: the
dispatcher reports them and decides the exit status, so handlers stay testable
in isolation.

Example
    def deploy(context, env, region):
        context.require("env")
        context.assert_args(env=r"^(staging|prod)$")
        if context.confirm(f"deploy to {env}?"):
            context.extend.deployer.run(env, region)
            context.success("deployed")
"""
import re
from collections import defaultdict
from collections.abc import Mapping
from types import MappingProxyType

from rich.console import Console
from rich.prompt import Confirm, InvalidResponse
from rich.text import Text

from .faults import (
    CommandError,
    IllegalArgumentError,
    MismatchedArgumentError,
    MissingArgumentError,
    UndeclaredArgumentError,
)
from .sentinel import absent
from .utils import Unset, coalesce, humanize


class Confirmation(Confirm):
    """
    Yes/no prompt accepting y, yes, n and no (case-insensitive).

    Any other answer prints a notice and asks again; there is no timeout.
    When reading from an explicit stream, end of input raises EOFError since
    no answer can arrive any more.
    """
    validate_error_message = "[prompt.invalid]not a valid answer!"
    prompt_suffix = " "
    answers = MappingProxyType({"y": True, "yes": True, "n": False, "no": False})

    @classmethod
    def get_input(cls, console, prompt, password, stream=None):
        line = super().get_input(console, prompt, password, stream=stream)
        if stream is not None and not line:
            raise EOFError("input closed while waiting for an answer")
        return line

    def process_response(self, value):
        try:
            return self.answers[value.strip().lower()]
        except KeyError:
            raise InvalidResponse(self.validate_error_message) from None


class Context:
    """
    Per-invocation handler context.

    Parameters
    - cmd: str
      The command path as typed (e.g. "deploy:staging").
    - args: Mapping[str, str | absent]
      Bound arguments, in the handler's parameter order.
    - extend: object
      Caller-owned extension (shared services, settings...). None by default.
    - console: rich Console for success/info output and prompts.
    - stdin: text stream answers are read from (None reads the terminal).
    - colorful: bool, disable to print without styles.
    """

    def __init__(self, cmd, args, extend=None, *, console=Unset, stdin=None, colorful=True):
        if not isinstance(cmd, str):
            raise TypeError("context 'cmd' must be a string")
        if not isinstance(args, Mapping):
            raise TypeError("context 'args' must be a mapping")
        self._cmd = cmd
        self._args = MappingProxyType(dict(args))
        self._extend = extend
        self._console = coalesce(console, Console())
        self._stdin = stdin
        self._colorful = bool(colorful)

    @property
    def cmd(self):
        return self._cmd

    @property
    def args(self):
        return self._args

    @property
    def extend(self):
        return self._extend

    def __repr__(self):
        return f"context(cmd={self._cmd!r}, args={dict(self._args)!r})"

    def __rich_repr__(self):
        yield "cmd", self._cmd
        yield "args", dict(self._args)

    def _styler(self, style):
        styles = defaultdict(str, {
            "success": "bold #22C55E",  # green
            "info": "#FFD600",  # amber
            "question": "bold #00E6FF",  # cyan
        } | getattr(__import__("__main__"), "__styles__", {}))
        return styles[style] if self._colorful else ""

    def _usage(self):
        return " ".join([self._cmd, *("<%s>" % humanize(name) for name in self._args)])

    def require(self, name, /):
        """
        Fail unless argument `name` was declared and supplied non-empty.

        Raises
        - UndeclaredArgumentError: `name` is not one of the handler's arguments.
        - MissingArgumentError: the value is absent or an empty string.
        """
        if name not in self._args:
            raise UndeclaredArgumentError(
                "can only require arguments that the command can be given: %r" % name,
                command=self._cmd,
                argument=name,
                hint="declared arguments: %s" % (", ".join(map(repr, self._args)) or "none"),
            )
        if not self._args[name]:
            raise MissingArgumentError(
                "<%s> is a required argument" % humanize(name),
                command=self._cmd,
                argument=name,
                hint="usage: %s" % self._usage(),
            )

    def require_all(self):
        for name in self._args:
            self.require(name)

    def assert_matches(self, value, pattern, /):
        """
        Fail unless `pattern` is found in `value` (coerced to str; absent → "").

        `pattern` is a regular expression string or a compiled re.Pattern.
        """
        if isinstance(pattern, str):
            pattern = re.compile(pattern)
        elif not isinstance(pattern, re.Pattern):
            raise TypeError("assert_matches() second argument must be a pattern")
        if not pattern.search(string := str(absent.nullify(value, ""))):
            raise MismatchedArgumentError(
                '"%s" did not match /%s/' % (string, pattern.pattern),
                command=self._cmd,
                value=string,
                pattern=pattern.pattern,
            )

    def assert_args(self, specs=(), /, **more):
        """
        Check bound arguments against patterns or predicates.

        Each entry maps an argument name to
        - a pattern (str or re.Pattern): checked with assert_matches();
        - a predicate (callable): must return a truthy value for the bound value.

        Arguments the handler does not declare are checked as absent.
        """
        for name, spec in dict(specs, **more).items():
            value = self._args.get(name, absent)
            if isinstance(spec, str | re.Pattern):
                self.assert_matches(value, spec)
            elif callable(spec):
                if not spec(value):
                    raise IllegalArgumentError(
                        "illegal value %r for <%s>" % (value, humanize(name)),
                        command=self._cmd,
                        argument=name,
                        hint="usage: %s" % self._usage(),
                    )
            else:
                raise TypeError(f"assert_args() spec for {name!r} must be a pattern or a callable")

    def error(self, message, /):
        """
        Abandon the invocation with a user-facing error.

        Never returns: raises CommandError, which the dispatcher reports.
        """
        raise CommandError(str(message), command=self._cmd)

    def success(self, message, /):
        self._console.print(Text(str(message), self._styler("success")))

    def info(self, message, /):
        self._console.print(Text(str(message), self._styler("info")))

    def confirm(self, question, /):
        """
        Ask a yes/no question and block until a valid answer is typed.

        Writes `question (y[es]/n[o]) ` and reads one line at a time; y/yes
        returns True, n/no returns False, anything else asks again.
        """
        return Confirmation.ask(
            Text.assemble((f"{question} (y[es]/n[o])", self._styler("question"))),
            console=self._console,
            show_choices=False,
            stream=self._stdin,
        )


__all__ = (
    "Context",
    "Confirmation",
)
