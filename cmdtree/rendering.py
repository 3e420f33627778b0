"""
Help rendering: indented, column-aligned listings of the help tree.

Layout
- Branch (section) rows:   <indent><path> - <description>
- Leaf (command) rows:     <indent><path><pad to 30><help text><pad to 25> Arguments: <names>

Indentation grows by one level per tree depth. Command rows are always indented
by at least one level, so top-level commands line up under section headers.
Argument names come from the matching command handler (see
cmdtree.binding.parameters) and are shown human-spaced ("envName" → "env name").

Palette keys (override through __styles__ in __main__)
- section-label, section-description, command-label, command-help, arguments
"""
from collections import defaultdict

from rich.console import Console
from rich.text import Text

from .binding import parameters
from .nodes import SEPARATOR, Branch
from .trees import Outcome, resolve
from .utils import Unset, coalesce, humanize, pad

INDENT = "    "
LABEL_WIDTH = 30
HELP_WIDTH = 25


class Renderer:
    """
    Render the help tree, looking up argument names in the command tree.

    Parameters
    - commands: Branch (command tree)
    - help: Branch (help tree, congruent with `commands`)
    - console: rich Console the rows are printed on by show()/scope().
    - colorful: bool, disable to render plain text.
    """

    def __init__(self, commands, help, *, console=Unset, colorful=True):
        if not isinstance(commands, Branch) or not isinstance(help, Branch):
            raise TypeError("renderer trees must be branches")
        self._commands = commands
        self._help = help
        self._console = coalesce(console, Console())
        self._colorful = bool(colorful)

    def _styler(self, style):
        styles = defaultdict(str, {
            "section-label": "bold #FFD600",  # amber section paths
            "section-description": "#9CA3AF",  # muted gray
            "command-label": "bold #22C55E",  # green command paths
            "command-help": "",
            "arguments": "#00E6FF",  # cyan argument list
        } | getattr(__import__("__main__"), "__styles__", {}))
        return styles[style] if self._colorful else ""

    def _arguments(self, label):
        resolution = resolve(label, self._commands)
        if resolution.outcome is not Outcome.LEAF:
            return ""
        return ", ".join(map(humanize, parameters(resolution.node)))

    def render(self, target="all", node=Unset, indent=0, keys=()):
        """
        Return the rows for every entry of `node` named `target` (every entry
        when `target` is "all"), recursing into sections.

        Parameters
        - target: str, a segment name of `node` or "all".
        - node: Branch of the help tree; defaults to the root.
        - indent: int, current depth.
        - keys: tuple[str, ...], segments leading to `node`.

        A `target` that `node` does not contain renders no rows.
        """
        node = coalesce(node, self._help)
        lines = []

        for name, child in node.children.items():
            if target != "all" and name != target:
                continue
            label = SEPARATOR.join(stack := (*keys, name))

            if isinstance(child, Branch):
                line = Text(INDENT * indent).append(label, self._styler("section-label"))
                if child.descr:
                    line.append(" - ").append(child.descr, self._styler("section-description"))
                lines.append(line)
                lines.extend(self.render("all", child, indent + 1, stack))
            else:
                line = Text.assemble(
                    pad(Text(INDENT * max(indent, 1)).append(label, self._styler("command-label")), LABEL_WIDTH),
                    pad(Text(child.value, self._styler("command-help")), HELP_WIDTH),
                    Text(" Arguments: " + self._arguments(label), self._styler("arguments")),
                )
                line.rstrip()
                lines.append(line)

        return lines

    def show(self, target="all"):
        """
        Print the rows for `target` ("all" or a top-level segment name).
        """
        for line in self.render(target):
            self._console.print(line, soft_wrap=True)

    def scope(self, path):
        """
        Print the help of the subtree at `path` (a str like "deploy:cloud" or a
        sequence of segments). Paths that do not exist in the help tree print
        nothing.
        """
        segments = path.split(SEPARATOR) if isinstance(path, str) else list(path)
        if not segments:
            return self.show()
        parent = self._help
        for segment in segments[:-1]:
            parent = parent.get(segment)
            if not isinstance(parent, Branch):
                return
        for line in self.render(segments[-1], parent, 0, tuple(segments[:-1])):
            self._console.print(line, soft_wrap=True)


__all__ = (
    "Renderer",
    "INDENT",
    "LABEL_WIDTH",
    "HELP_WIDTH",
)
