from __future__ import annotations

from abc import ABC
from enum import Enum
import logging
from typing import Any, ClassVar, Optional

from fast_annotations import config
from fast_annotations.core.static_members import StaticMemberResolver, resolve_static_member
from fast_annotations.core.validation_context import ValidationContext
from fast_annotations.core.validation_result import (
    SUCCESS,
    ValidationOutcome,
    ValidationResult,
    ValidationSuccess,
)
from fast_annotations.exceptions import (
    ArgumentNullException,
    RuleNotImplementedException,
    ValidationConfigurationException,
    ValidationException,
)


class EvaluationForm(Enum):
    ONE_ARG = "one_arg"
    TWO_ARG = "two_arg"
    UNIMPLEMENTED = "unimplemented"


class ValidationRule(ABC):
    """
    Base class for validation rules.

    Subclasses implement one of two evaluation forms:

        class NotBlank(ValidationRule):
            def is_valid(self, value) -> bool:
                return bool(value and str(value).strip())

        class MatchesConfirmation(ValidationRule):
            requires_validation_context = True

            def is_valid_in_context(self, value, context):
                if value == getattr(context.object_instance, "confirmation", None):
                    return SUCCESS
                return ValidationResult("Values do not match.", [context.member_name])

    When a subclass implements both, `is_valid_in_context` is used whenever a
    `ValidationContext` is available.

    Error messages come from a literal template (`error_message`) or from a
    public class attribute of a resource type (`error_message_resource_type` +
    `error_message_resource_name`). `{0}` in the template is replaced with the
    display name of the validated member.
    """

    # Resolved per subclass in __init_subclass__
    evaluation_form: ClassVar[EvaluationForm] = EvaluationForm.UNIMPLEMENTED
    _implements_one_arg: ClassVar[bool] = False
    _implements_two_arg: ClassVar[bool] = False

    # Used by `format_error_message` when no context supplies its own resolver
    static_member_resolver: ClassVar[StaticMemberResolver] = staticmethod(resolve_static_member)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._implements_one_arg = cls.is_valid is not ValidationRule.is_valid
        cls._implements_two_arg = cls.is_valid_in_context is not ValidationRule.is_valid_in_context
        if cls._implements_two_arg:
            cls.evaluation_form = EvaluationForm.TWO_ARG
        elif cls._implements_one_arg:
            cls.evaluation_form = EvaluationForm.ONE_ARG
        else:
            cls.evaluation_form = EvaluationForm.UNIMPLEMENTED

    def __init__(
        self,
        error_message: Optional[str] = None,
        *,
        error_message_resource_name: Optional[str] = None,
        error_message_resource_type: Optional[type] = None,
    ) -> None:
        self._error_message: Optional[str] = None
        self._error_message_resource_name: Optional[str] = None
        self._error_message_resource_type: Optional[type] = None
        self._default_error_message: Optional[str] = config.DEFAULT_ERROR_MESSAGE

        if error_message is not None:
            self.error_message = error_message
        if error_message_resource_name is not None:
            self.error_message_resource_name = error_message_resource_name
        if error_message_resource_type is not None:
            self.error_message_resource_type = error_message_resource_type

    # --------------- configuration ---------------
    @property
    def error_message(self) -> Optional[str]:
        return self._error_message

    @error_message.setter
    def error_message(self, value: Optional[str]) -> None:
        self._error_message = value
        self._default_error_message = None

    @property
    def error_message_resource_name(self) -> Optional[str]:
        return self._error_message_resource_name

    @error_message_resource_name.setter
    def error_message_resource_name(self, value: Optional[str]) -> None:
        self._error_message_resource_name = value
        self._default_error_message = None

    @property
    def error_message_resource_type(self) -> Optional[type]:
        return self._error_message_resource_type

    @error_message_resource_type.setter
    def error_message_resource_type(self, value: Optional[type]) -> None:
        self._error_message_resource_type = value
        self._default_error_message = None

    @property
    def requires_validation_context(self) -> bool:
        """Whether `is_valid_in_context` needs a populated `ValidationContext`."""
        return False

    @property
    def error_message_string(self) -> str:
        """The resolved, unformatted message template."""
        return self._resolve_template(self.static_member_resolver)

    # --------------- evaluation forms ---------------
    def is_valid(self, value: Any) -> bool:
        """
        Context-free check. Override to implement a simple predicate.

        Rules that only implement `is_valid_in_context` are evaluated here with a
        minimal context.
        """
        if not type(self)._implements_two_arg:
            raise RuleNotImplementedException(type(self))
        return self._checked_in_context(value, ValidationContext.for_display_name(None)) is SUCCESS

    def is_valid_in_context(self, value: Any, context: ValidationContext) -> ValidationOutcome:
        """
        Context-aware check. Override to inspect the context or to supply a custom
        failure message and member names.
        """
        if not type(self)._implements_one_arg:
            raise RuleNotImplementedException(type(self))
        return self._evaluate_predicate(value, context)

    # --------------- public entry points ---------------
    def evaluate(self, value: Any, context: ValidationContext) -> ValidationOutcome:
        form = type(self).evaluation_form
        if form is EvaluationForm.ONE_ARG:
            return self._evaluate_predicate(value, context)
        if form is EvaluationForm.UNIMPLEMENTED:
            raise RuleNotImplementedException(type(self))

        return self._checked_in_context(value, context)

    def get_validation_result(self, value: Any, validation_context: ValidationContext) -> ValidationOutcome:
        """
        Evaluate `value` and return the outcome without raising on failure.

        Failures always carry a non-empty message: when a rule returns a result
        without one, the rule's formatted message is used instead.
        """
        if validation_context is None:
            raise ArgumentNullException("validation_context")

        result = self.evaluate(value, validation_context)
        if result is SUCCESS or result.error_message:
            return result

        logging.debug(
            f"[VALIDATION] {type(self).__name__} returned no message for "
            f"`{validation_context.display_name}`; using the rule's message"
        )
        message = self._format_error_message(validation_context.display_name, validation_context.static_member_resolver)
        return ValidationResult(self._non_empty(message), result.member_names)

    def validate(self, value: Any, validation_context: ValidationContext | str) -> None:
        """
        Raise `ValidationException` if `value` is invalid.

        `validation_context` is either a full `ValidationContext` or the display
        name to use in the error message.
        """
        if validation_context is None:
            raise ArgumentNullException("validation_context")

        if isinstance(validation_context, ValidationContext):
            result = self.get_validation_result(value, validation_context)
            if result is not SUCCESS:
                raise ValidationException(result, self, value)
            return

        # A bare display name prefers the context-free form
        name = validation_context
        if type(self)._implements_one_arg:
            valid = self.is_valid(value)
        else:
            valid = self._checked_in_context(value, ValidationContext.for_display_name(name)) is SUCCESS
        if not valid:
            message = self._non_empty(self.format_error_message(name))
            raise ValidationException(ValidationResult(message), self, value)

    # --------------- messages ---------------
    def format_error_message(self, name: Optional[str]) -> str:
        """Resolve the message template and substitute `{0}` with `name`."""
        return self._format_error_message(name, self.static_member_resolver)

    def _format_error_message(self, name: Optional[str], resolver: StaticMemberResolver) -> str:
        template = self._resolve_template(resolver)
        try:
            return template.format(name if name is not None else "")
        except (IndexError, KeyError, ValueError) as e:
            raise ValidationConfigurationException(
                f"Message template {template!r} of {type(self).__name__} accepts only the `{{0}}` placeholder.",
                rule=self,
            ) from e

    def _resolve_template(self, resolver: StaticMemberResolver) -> str:
        resource_name_set = bool(self._error_message_resource_name)
        error_message_set = bool(self._error_message)
        resource_type_set = self._error_message_resource_type is not None

        if resource_name_set and error_message_set:
            raise ValidationConfigurationException(
                f"{type(self).__name__} sets both `error_message` and `error_message_resource_name`; set only one.",
                rule=self,
            )
        if not (resource_name_set or error_message_set or resource_type_set or self._default_error_message):
            raise ValidationConfigurationException(
                f"{type(self).__name__} has no error message: set `error_message` or "
                "`error_message_resource_name` with `error_message_resource_type`.",
                rule=self,
            )
        if resource_name_set != resource_type_set:
            raise ValidationConfigurationException(
                f"{type(self).__name__} needs both `error_message_resource_type` and "
                "`error_message_resource_name` to look up its message.",
                rule=self,
            )

        if resource_name_set:
            return self._lookup_resource_template(resolver)
        return self._error_message or self._default_error_message

    def _lookup_resource_template(self, resolver: StaticMemberResolver) -> str:
        owner = self._error_message_resource_type
        name = self._error_message_resource_name
        try:
            member = resolver(owner, name)
        except Exception as e:
            raise ValidationConfigurationException(
                f"Reading member `{name}` of resource type `{getattr(owner, '__name__', owner)}` failed: {e}",
                rule=self,
            ) from e

        if (
            member is None
            or not (member.is_public and member.is_static and member.is_readable)
            or not isinstance(member.value, str)
            or not member.value
        ):
            raise ValidationConfigurationException(
                f"Resource type `{getattr(owner, '__name__', owner)}` has no public static string "
                f"member named `{name}`.",
                rule=self,
            )
        return member.value

    # --------------- helpers ---------------
    def _checked_in_context(self, value: Any, context: ValidationContext) -> ValidationOutcome:
        result = self.is_valid_in_context(value, context)
        if not isinstance(result, (ValidationSuccess, ValidationResult)):
            raise TypeError(
                f"{type(self).__name__}.is_valid_in_context must return SUCCESS or a ValidationResult, "
                f"got {result!r}"
            )
        return result

    @staticmethod
    def _non_empty(message: str) -> str:
        if message:
            return message
        logging.debug("[VALIDATION] Formatted message is empty; using the fallback message")
        return config.FALLBACK_ERROR_MESSAGE

    def _evaluate_predicate(self, value: Any, context: ValidationContext) -> ValidationOutcome:
        if self.is_valid(value):
            return SUCCESS
        message = self._format_error_message(context.display_name, context.static_member_resolver)
        member_names = [context.member_name] if context.member_name else None
        logging.debug(f"[VALIDATION] {type(self).__name__} failed for `{context.display_name}`")
        return ValidationResult(message, member_names)


__all__ = [
    "EvaluationForm",
    "ValidationRule",
]
