from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from fast_annotations.core.static_members import (
    StaticMember,
    StaticMemberResolver,
    resolve_static_member,
)
from fast_annotations.exceptions import ArgumentNullException


class ValidationContext:
    """Describes the object and member a rule is validating.

    - `object_instance`: the object under validation.
    - `member_name`: the member being checked, if any.
    - `display_name`: the name used in error messages; defaults to
      `member_name`, then to the instance's type name.
    - `items`: free-form state for rules, copied from the caller's mapping.

    A context belongs to one validation call; rules must not keep it.
    """

    __slots__ = ("object_instance", "member_name", "items", "_display_name", "_resolver")

    def __init__(
        self,
        object_instance: Any,
        items: Optional[Mapping[str, Any]] = None,
        *,
        member_name: Optional[str] = None,
        display_name: Optional[str] = None,
        static_member_resolver: Optional[StaticMemberResolver] = None,
    ) -> None:
        if object_instance is None:
            raise ArgumentNullException("object_instance")
        self.object_instance = object_instance
        self.member_name = member_name
        self.items: Dict[str, Any] = dict(items) if items else {}
        self._display_name: Optional[str] = None
        self._resolver: StaticMemberResolver = static_member_resolver or resolve_static_member
        if display_name is not None:
            self.display_name = display_name

    @classmethod
    def for_display_name(
        cls,
        display_name: Optional[str],
        *,
        static_member_resolver: Optional[StaticMemberResolver] = None,
    ) -> "ValidationContext":
        """Minimal context for validating a standalone value under a display name."""
        ctx = cls.__new__(cls)
        ctx.object_instance = None
        ctx.member_name = None
        ctx.items = {}
        ctx._display_name = display_name or ""
        ctx._resolver = static_member_resolver or resolve_static_member
        return ctx

    @property
    def object_type(self) -> Optional[type]:
        if self.object_instance is None:
            return None
        return type(self.object_instance)

    @property
    def display_name(self) -> str:
        if self._display_name is not None:
            return self._display_name
        if self.member_name:
            return self.member_name
        object_type = self.object_type
        return object_type.__name__ if object_type is not None else ""

    @display_name.setter
    def display_name(self, value: str) -> None:
        if not value:
            raise ArgumentNullException("display_name")
        self._display_name = value

    def resolve_static_member(self, owner: type, name: str) -> Optional[StaticMember]:
        return self._resolver(owner, name)

    @property
    def static_member_resolver(self) -> StaticMemberResolver:
        return self._resolver

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return (
            f"ValidationContext(object_type={getattr(self.object_type, '__name__', None)!r}, "
            f"member_name={self.member_name!r}, display_name={self.display_name!r})"
        )


__all__ = [
    "ValidationContext",
]
