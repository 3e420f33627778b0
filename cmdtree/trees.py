"""
Tree walking: congruence verification and command path resolution.

What this module provides
- paths(tree): every full leaf path of a tree, joined with ':'.
- verify(commands, help): prove both trees expose the same leaf paths, or raise
  CongruenceError. Branch descriptions never take part in the comparison.
- resolve(path, tree): walk a colon-delimited path segment by segment and tell
  whether it names a leaf, an interior node (partial command) or nothing.

Both trees use the Leaf/Branch variants from cmdtree.nodes, so the same walkers
serve the command tree and the help tree.
"""
from collections.abc import Sequence
from enum import Enum
from typing import NamedTuple

from .faults import CongruenceError
from .nodes import SEPARATOR, Branch, Leaf


class Outcome(Enum):
    """
    result kinds of resolve().

    - LEAF: the path names a terminal node (a handler or a help text).
    - PARTIAL: the path is a valid prefix that stops on an interior node.
    - NOT_FOUND: some segment is empty or absent at its level.
    """
    LEAF = "leaf"
    PARTIAL = "partial"
    NOT_FOUND = "not-found"


class Resolution(NamedTuple):
    outcome: Outcome
    node: Leaf | Branch | None = None


def paths(tree, /, *, separator=SEPARATOR):
    """
    Yield the full path of every leaf under `tree`, depth-first in insertion order.

    >>> list(paths(command_tree({"deploy": {"staging": f, "prod": g}, "ping": h})))
    ['deploy:staging', 'deploy:prod', 'ping']
    """
    if not isinstance(tree, Branch):
        raise TypeError("paths() argument must be a branch")

    def walk(node, stack):
        for name, child in node.children.items():
            if isinstance(child, Branch):
                yield from walk(child, stack + (name,))
            else:
                yield separator.join(stack + (name,))

    return walk(tree, ())


def verify(commands, help, /):
    """
    Assert that `commands` and `help` describe exactly the same command paths.

    Both leaf path lists are sorted and compared, so key order never matters.
    On mismatch raises CongruenceError; its options carry the paths missing from
    help (`undocumented`) and the paths missing from commands (`unimplemented`).
    """
    implemented = sorted(paths(commands))
    documented = sorted(paths(help))
    if implemented == documented:
        return

    undocumented = sorted(set(implemented) - set(documented))
    unimplemented = sorted(set(documented) - set(implemented))

    details = []
    if undocumented:
        details.append("undocumented: %s" % ", ".join(undocumented))
    if unimplemented:
        details.append("unimplemented: %s" % ", ".join(unimplemented))

    raise CongruenceError(
        "the help menu and the commands don't have the same entries (%s)" % "; ".join(details),
        undocumented=tuple(undocumented),
        unimplemented=tuple(unimplemented),
        hint="add the missing entries to the help tree or the command tree ('_' keys are descriptions and ignored)",
    )


def resolve(path, tree, /):
    """
    Resolve a command path against a tree.

    Parameters
    - path: str | Sequence[str]
      'deploy:staging' or ('deploy', 'staging'). Must not be empty.
    - tree: Branch

    Returns
    - Resolution(Outcome.LEAF, leaf) when the path ends on a leaf.
    - Resolution(Outcome.PARTIAL, branch) when it ends on an interior node.
    - Resolution(Outcome.NOT_FOUND) when a segment is empty, absent at its level,
      or the walk tries to descend below a leaf.
    """
    if isinstance(path, str):
        segments = path.split(SEPARATOR)
    elif isinstance(path, Sequence):
        segments = list(path)
    else:
        raise TypeError("resolve() first argument must be a string or a sequence of strings")
    if not path:
        raise ValueError("resolve() first argument cannot be empty")
    if not isinstance(tree, Branch):
        raise TypeError("resolve() second argument must be a branch")

    node = tree
    for segment in segments:
        if not isinstance(node, Branch) or not segment or segment not in node:
            return Resolution(Outcome.NOT_FOUND)
        node = node.get(segment)

    if isinstance(node, Branch):
        return Resolution(Outcome.PARTIAL, node)
    return Resolution(Outcome.LEAF, node)


__all__ = (
    "Outcome",
    "Resolution",
    "paths",
    "verify",
    "resolve",
)
