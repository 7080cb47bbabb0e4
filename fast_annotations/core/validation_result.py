from __future__ import annotations

from typing import Iterable, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator


class ValidationSuccess:
    """Outcome of a rule evaluation that passed.

    There is exactly one instance, `SUCCESS`; compare outcomes with `is`.
    """

    __slots__ = ()
    _instance: Optional["ValidationSuccess"] = None

    def __new__(cls) -> "ValidationSuccess":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def is_success(self) -> bool:
        return True

    def __repr__(self) -> str:
        return "SUCCESS"

    def __reduce__(self):
        return (ValidationSuccess, ())


SUCCESS = ValidationSuccess()


class ValidationResult(BaseModel):
    """
    Failed outcome of a rule evaluation.

    A result without an error message is still a failure; callers going through
    `ValidationRule.get_validation_result` always receive a non-empty message.
    """

    model_config = ConfigDict(frozen=True)

    error_message: Optional[str] = None
    member_names: tuple[str, ...] = ()

    def __init__(
        self,
        error_message: Optional[str] = None,
        member_names: Optional[Iterable[str]] = None,
        **data,
    ):
        super().__init__(
            error_message=error_message,
            member_names=tuple(member_names) if member_names is not None else (),
            **data,
        )

    @field_validator("member_names", mode="before")
    @classmethod
    def _drop_missing_names(cls, value):
        return tuple(name for name in value if name is not None)

    @classmethod
    def from_result(cls, other: "ValidationResult") -> "ValidationResult":
        if not isinstance(other, ValidationResult):
            raise TypeError(f"Cannot copy {other!r}: only failed results carry a message.")
        return cls(other.error_message, other.member_names)

    @property
    def is_success(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.error_message or super().__repr__()


ValidationOutcome = Union[ValidationSuccess, ValidationResult]


__all__ = [
    "SUCCESS",
    "ValidationSuccess",
    "ValidationResult",
    "ValidationOutcome",
]
