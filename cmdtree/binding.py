"""
Argument names and positional binding.

- parameters(handler): the ordered argument names of a handler.
  A Leaf with explicitly declared `params` wins; otherwise the names are read
  from the callable's signature. The first positional parameter is the
  context slot and is never an argument name. Variadic and keyword-only
  parameters are not argument names either.

- takes_context(handler): whether the handler has a positional slot for the
  context. Handlers without one are called with no context.

- bind(names, values): zip argument names with positional values into the
  per-invocation args mapping. Missing values are `absent`, extra values are
  dropped.
"""
import inspect
from inspect import Parameter

from .sentinel import absent
from .nodes import Leaf
from .utils import Unset

_POSITIONAL = (Parameter.POSITIONAL_ONLY, Parameter.POSITIONAL_OR_KEYWORD)


def parameters(handler, /):
    """
    Return the argument names of `handler` in declaration order.

    Examples
        def deploy(context, env, region): ...
        parameters(deploy)                           -> ("env", "region")
        parameters(Leaf(deploy, params=("target",)))  -> ("target",)
        parameters(lambda context: None)             -> ()
    """
    if isinstance(handler, Leaf):
        if handler.params is not Unset:
            return handler.params
        handler = handler.value
    try:
        signature = inspect.signature(handler)
    except TypeError:
        raise TypeError("parameters() argument must be callable") from None
    except ValueError:
        raise TypeError("parameters() argument must be an inspectable callable") from None

    names = [
        parameter.name.strip()
        for parameter in signature.parameters.values()
        if parameter.kind in _POSITIONAL
    ]
    return tuple(names[1:])


def takes_context(handler, /):
    """
    Tell whether `handler` has a positional slot for the context.

    Handlers declaring no positional parameter at all (`lambda: ...`) are
    called without it. Callables without an inspectable signature are assumed
    to take it.
    """
    if isinstance(handler, Leaf):
        handler = handler.value
    try:
        signature = inspect.signature(handler)
    except (TypeError, ValueError):
        return True
    return any(
        parameter.kind in _POSITIONAL or parameter.kind is Parameter.VAR_POSITIONAL
        for parameter in signature.parameters.values()
    )


def bind(names, values, /):
    """
    Map names[i] to values[i]; names without a value map to `absent`.

    >>> bind(["a", "b"], ["x"])
    {'a': 'x', 'b': absent}
    >>> bind([], ["x", "y"])
    {}
    """
    values = list(values)
    return {
        name: values[index] if index < len(values) else absent
        for index, name in enumerate(names)
    }


__all__ = (
    "parameters",
    "bind",
    "takes_context",
)
