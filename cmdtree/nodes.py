"""
Tree nodes: the tagged variants shared by command trees and help trees.

Shapes
- Branch: an interior node. Maps segment names to child nodes and may carry a
  description (`descr`) used as a section header in help output.
- Leaf: a terminal node. In a command tree its value is the handler callable
  (optionally with explicitly declared parameter names); in a help tree its
  value is the help text.

Builders
- command_tree(mapping): nested dict → Branch with callable leaves.
- help_tree(mapping): nested dict → Branch with text leaves; the reserved key
  "_" of any nested dict becomes that branch's `descr` instead of a child.

Both builders accept pre-built nodes anywhere in the input, so callers may mix
`Leaf(handler, params=("env",))` declarations into plain dict trees.

Segment names must be non-empty strings without ':' (the path separator) and
must not be the reserved key. Nested sections must hold at least one entry;
pre-built branches are checked leaf by leaf like plain mappings.
"""
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from .utils import Unset, coalesce

SEPARATOR = ":"
RESERVED = "_"


class Leaf:
    """
    Terminal node holding a handler (command tree) or a help text (help tree).

    Parameters
    - value: callable | str (positional-only)
    - params: Iterable[str] | Unset
      Explicit argument names for a handler. When Unset, names are read from
      the handler's signature at resolution time (see cmdtree.binding).
    """
    __slots__ = ("_value", "_params")

    def __init__(self, value, /, params=Unset):
        if params is not Unset:
            if isinstance(params, str) or not isinstance(params, Iterable):
                raise TypeError("leaf 'params' must be an iterable of strings")
            params = tuple(params)
            if not all(isinstance(param, str) for param in params):
                raise TypeError("leaf 'params' must be an iterable of strings")
            if not all(params := tuple(param.strip() for param in params)):
                raise ValueError("leaf 'params' cannot contain empty names")
            if len(set(params)) != len(params):
                raise ValueError("leaf 'params' cannot contain duplicated names")
        self._value = value
        self._params = params

    @property
    def value(self):
        return self._value

    @property
    def params(self):
        return self._params

    def __repr__(self):
        if self._params is Unset:
            return f"leaf({self._value!r})"
        return f"leaf({self._value!r}, params={self._params!r})"

    def __rich_repr__(self):
        yield self._value
        if self._params is not Unset:
            yield "params", self._params


class Branch:
    """
    Interior node: read-only mapping of segment names to child nodes.

    Parameters
    - children: Mapping[str, Leaf | Branch] (positional-only)
    - descr: str | Unset
      Section description shown in help; None when not provided.
    """
    __slots__ = ("_children", "_descr")

    def __init__(self, children=(), /, descr=Unset):
        children = dict(children)
        for name, child in children.items():
            _check_segment(name, ())
            if not isinstance(child, Leaf | Branch):
                raise TypeError(f"branch child {name!r} must be a leaf or a branch")
        if not isinstance(descr, str | Unset):
            raise TypeError("branch 'descr' must be a string")
        self._children = MappingProxyType(children)
        self._descr = coalesce(descr)

    @property
    def children(self):
        return self._children

    @property
    def descr(self):
        return self._descr

    def get(self, name, default=None, /):
        return self._children.get(name, default)

    def __contains__(self, name):
        return name in self._children

    def __iter__(self):
        return iter(self._children)

    def __len__(self):
        return len(self._children)

    def __repr__(self):
        if self._descr is None:
            return f"branch({dict(self._children)!r})"
        return f"branch({dict(self._children)!r}, descr={self._descr!r})"

    def __rich_repr__(self):
        yield dict(self._children)
        if self._descr is not None:
            yield "descr", self._descr


def _check_segment(name, route):
    where = f" under {SEPARATOR.join(route)!r}" if route else ""
    if not isinstance(name, str):
        raise TypeError(f"segment name {name!r}{where} must be a string")
    elif not name:
        raise ValueError(f"segment name{where} cannot be empty")
    elif SEPARATOR in name:
        raise ValueError(f"segment name {name!r}{where} cannot contain {SEPARATOR!r}")
    elif name == RESERVED:
        raise ValueError(f"segment name {name!r}{where} is reserved for descriptions")


def _check(branch, leaf, kind, route):
    if route and not branch.children:
        raise ValueError(f"{kind} section {SEPARATOR.join(route)!r} has no entries")
    for name, child in branch.children.items():
        if isinstance(child, Branch):
            _check(child, leaf, kind, route + (name,))
        else:
            leaf(child, route + (name,))


def _build(source, leaf, kind, route, seen, *, described):
    if isinstance(source, Branch):
        _check(source, leaf, kind, route)
        return source
    if not isinstance(source, Mapping):
        raise TypeError(f"{kind} must be a mapping")
    if id(source) in seen:
        raise ValueError(f"{kind} contains a cycle at {SEPARATOR.join(route)!r}")
    seen = seen | {id(source)}

    descr = Unset
    children = {}
    for name, object in source.items():
        if described and name == RESERVED:
            if not isinstance(object, str):
                raise TypeError(f"{kind} description at {SEPARATOR.join(route) or 'root'!r} must be a string")
            descr = object
            continue
        _check_segment(name, route)
        if isinstance(object, Mapping | Branch):
            children[name] = _build(object, leaf, kind, route + (name,), seen, described=described)
        else:
            children[name] = leaf(object, route + (name,))
    if route and not children:
        raise ValueError(f"{kind} section {SEPARATOR.join(route)!r} has no entries")
    return Branch(children, descr=descr)


def _command_leaf(object, route):
    if isinstance(object, Leaf):
        if not callable(object.value):
            raise TypeError(f"command {SEPARATOR.join(route)!r} must be callable")
        return object
    if not callable(object):
        raise TypeError(f"command {SEPARATOR.join(route)!r} must be callable")
    return Leaf(object)


def _help_leaf(object, route):
    if isinstance(object, Leaf):
        object = object.value
    if not isinstance(object, str):
        raise TypeError(f"help entry {SEPARATOR.join(route)!r} must be a string")
    return Leaf(object)


def command_tree(source, /):
    """
    Build a command tree from a nested mapping of segment names to handlers.

    Example
        command_tree({"deploy": {"staging": staging, "prod": prod}})
    """
    return _build(source, _command_leaf, "command tree", (), frozenset(), described=False)


def help_tree(source, /):
    """
    Build a help tree from a nested mapping of segment names to help texts.

    The reserved "_" key of a nested mapping is the section description.

    Example
        help_tree({"deploy": {"_": "deployment", "staging": "to staging", "prod": "to prod"}})
    """
    return _build(source, _help_leaf, "help tree", (), frozenset(), described=True)


__all__ = (
    "Leaf",
    "Branch",
    "command_tree",
    "help_tree",
    "SEPARATOR",
    "RESERVED",
)
