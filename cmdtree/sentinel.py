"""
Absent sentinel for unsupplied positional values.

This module defines a process-wide singleton `absent` and its type `absenttype`.
The argument binder stores it under every parameter name that did not receive a
positional value, so handlers and validators can tell “not supplied” apart from
“supplied as an empty string” (or any other falsy value).

Semantics
- Falsy: bool(absent) is False, exactly like "".
- Distinct: absent is not equal to None, "", or False.
- Stable string form: repr(absent) == "absent" (and Rich uses a dim style).
- Identity: absenttype() always returns the same instance per interpreter.

Typical usage
    def deploy(context, env, region):
        region = absent.nullify(region, "us-east-1")
"""
import functools

from rich.text import Text


class absenttype:
    """
    Singleton type marking a parameter that received no positional value.

    Notes
    - This type is final; subclassing is blocked to preserve semantics.
    - Instances are singletons per interpreter process.
    - The instance is falsy and has a stable string/console representation.
    """

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def nullify(self, object, default=None, /):
        """
        Replace the sentinel with a concrete default; pass through other objects.

        - default when `object is absent`, otherwise `object` unchanged ("" and
          None included).
        """
        if object is self:
            return default
        return object

    def __bool__(self):
        return False

    def __reduce__(self):
        # Unpickling must hand back the singleton, not a copy.
        return "absent"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __rich__(self):
        """
        Rich protocol hook: render a dim 'absent' token.
        """
        return Text(repr(self), style="dim")

    def __repr__(self):
        return "absent"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'absenttype' is not an acceptable base type")


absent = absenttype()


__all__ = (
    "absenttype",
    "absent",
)
