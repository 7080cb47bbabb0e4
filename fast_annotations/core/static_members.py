"""
Lookup of named static members on resource types.

Error message templates can live on any class as public class attributes:

    class Messages:
        REQUIRED = "The {0} field is required."

or, when the value must be computed, as a property declared on the class's
metaclass. Only members declared on the type itself are considered; a member
that the type merely inherits from a base class is not found.
"""

import inspect
from dataclasses import dataclass
from typing import Any, Callable, Optional

_MISSING = object()


@dataclass(frozen=True)
class StaticMember:
    name: str
    is_public: bool
    is_static: bool
    is_readable: bool
    value: Any = None


StaticMemberResolver = Callable[[type, str], Optional[StaticMember]]


def _metaclass_attribute(owner: type, name: str) -> Any:
    # Metaclasses shared with a base class only carry inherited members
    inherited = set()
    for base in owner.__bases__:
        inherited.update(type(base).__mro__)

    for klass in type(owner).__mro__:
        if klass in inherited:
            continue
        if name in vars(klass):
            return vars(klass)[name]
    return _MISSING


def resolve_static_member(owner: type, name: str) -> Optional[StaticMember]:
    """
    Describe the member `name` declared on `owner`, or return None if there is none.

    Nothing is evaluated except the getter of a metaclass property, which is
    how a class exposes a computed static value.
    """
    if not isinstance(owner, type) or not name:
        return None

    is_public = not name.startswith("_")

    meta_attr = _metaclass_attribute(owner, name)
    if isinstance(meta_attr, property):
        readable = meta_attr.fget is not None
        return StaticMember(
            name=name,
            is_public=is_public,
            is_static=True,
            is_readable=readable,
            value=meta_attr.fget(owner) if readable else None,
        )

    raw = vars(owner).get(name, _MISSING)
    if raw is _MISSING:
        return None

    if isinstance(raw, property):
        return StaticMember(name, is_public, is_static=False, is_readable=raw.fget is not None)

    # Callables are behaviour, not readable values
    if isinstance(raw, (staticmethod, classmethod)):
        return StaticMember(name, is_public, is_static=True, is_readable=False)
    if inspect.isfunction(raw):
        return StaticMember(name, is_public, is_static=False, is_readable=False)

    # Remaining data descriptors (slots, custom descriptors) bind to instances
    raw_type = type(raw)
    if hasattr(raw_type, "__set__") or hasattr(raw_type, "__delete__"):
        return StaticMember(name, is_public, is_static=False, is_readable=hasattr(raw_type, "__get__"))

    return StaticMember(name, is_public, is_static=True, is_readable=True, value=raw)


__all__ = [
    "StaticMember",
    "StaticMemberResolver",
    "resolve_static_member",
]
