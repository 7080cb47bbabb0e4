from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from fast_annotations.utils.serialisation import get_exception_error_type

if TYPE_CHECKING:
    from fast_annotations.contracts.validation_rule import ValidationRule
    from fast_annotations.core.validation_result import ValidationResult


class ValidationException(ValueError):
    """
    Raised by `ValidationRule.validate` when a value fails its rule.

    Carries the failed `ValidationResult`, the rule that produced it and the
    original value, so callers can report or aggregate the failure.
    """

    def __init__(
        self,
        validation_result: ValidationResult | str | None = None,
        validation_rule: Optional[ValidationRule] = None,
        value: Any = None,
    ):
        from fast_annotations.core.validation_result import ValidationResult

        if validation_result is None or isinstance(validation_result, str):
            validation_result = ValidationResult(error_message=validation_result)
        elif not isinstance(validation_result, ValidationResult):
            raise TypeError(
                f"ValidationException requires a failed ValidationResult, got {validation_result!r}"
            )

        self.validation_result = validation_result
        self.validation_rule = validation_rule
        self.value = value
        self.message = validation_result.error_message or ""
        self.error_type = get_exception_error_type(self)
        super().__init__(self.message)

    @property
    def member_names(self) -> tuple[str, ...]:
        return self.validation_result.member_names


class ValidationConfigurationException(RuntimeError):
    """A rule's message configuration is ambiguous or cannot be resolved."""

    def __init__(self, message: str, *, rule: Optional[ValidationRule] = None):
        super().__init__(f"[RULE CONFIGURATION] {message}")
        self.message = message
        self.rule = rule
        self.error_type = get_exception_error_type(self)


class RuleNotImplementedException(NotImplementedError):
    def __init__(self, rule_type: type):
        super().__init__(
            f"[RULE NOT IMPLEMENTED] `{rule_type.__name__}` must override "
            "either `is_valid(value)` or `is_valid_in_context(value, context)`."
        )
        self.rule_type = rule_type


class ArgumentNullException(ValueError):
    def __init__(self, param_name: str):
        super().__init__(f"[ARGUMENT NULL] Argument `{param_name}` must not be None.")
        self.param_name = param_name
