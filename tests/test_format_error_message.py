import pytest

from fast_annotations import (
    SUCCESS,
    StaticMember,
    ValidationConfigurationException,
    ValidationContext,
    ValidationRule,
    config,
)


class Messages:
    PUBLIC_MESSAGE = "Error Message from PUBLIC_MESSAGE"
    PUBLIC_MESSAGE_WITH_NAME = "Error Message from PUBLIC_MESSAGE With Name <{0}>"
    INT_VALUE = 42
    EMPTY_MESSAGE = ""
    _protected_message = "ErrorMessage"
    __private_message = "ErrorMessage"

    @property
    def instance_message(self):
        return "ErrorMessage"

    write_only = property(None, lambda self, value: None)

    @staticmethod
    def computed():
        return "ErrorMessage"

    def method(self):
        return "ErrorMessage"


class _MessagesMeta(type):
    @property
    def COMPUTED_MESSAGE(cls):
        return f"Computed for {cls.__name__}"

    STATIC_WRITE_ONLY = property(None, lambda cls, value: None)


class ComputedMessages(metaclass=_MessagesMeta):
    pass


class ChildComputedMessages(ComputedMessages):
    pass


class _BrokenMeta(type):
    @property
    def BROKEN_MESSAGE(cls):
        raise LookupError("catalog unavailable")


class BrokenMessages(metaclass=_BrokenMeta):
    pass


class InheritedMessages(Messages):
    pass


class AlwaysInvalidRule(ValidationRule):
    def is_valid(self, value) -> bool:
        return False


@pytest.mark.parametrize(
    "error_message, expected",
    [
        ("SomeErrorMessage", "SomeErrorMessage"),
        ("SomeErrorMessage with name <{0}>", "SomeErrorMessage with name <name>"),
        ("Braces {{0}} stay for {0}", "Braces {0} stay for name"),
    ],
)
def test_literal_message_is_formatted(error_message, expected):
    rule = AlwaysInvalidRule()
    rule.error_message = error_message
    rule.error_message_resource_name = None
    rule.error_message_resource_type = None
    assert rule.format_error_message("name") == expected


@pytest.mark.parametrize(
    "resource_name, resource_type, expected",
    [
        ("PUBLIC_MESSAGE", Messages, "Error Message from PUBLIC_MESSAGE"),
        ("PUBLIC_MESSAGE_WITH_NAME", Messages, "Error Message from PUBLIC_MESSAGE With Name <name>"),
        ("COMPUTED_MESSAGE", ComputedMessages, "Computed for ComputedMessages"),
    ],
)
def test_resource_message_is_formatted(resource_name, resource_type, expected):
    rule = AlwaysInvalidRule()
    rule.error_message = ""
    rule.error_message_resource_name = resource_name
    rule.error_message_resource_type = resource_type
    assert rule.format_error_message("name") == expected


def test_untouched_rule_uses_default_template():
    rule = AlwaysInvalidRule()
    assert rule.format_error_message("name") == config.DEFAULT_ERROR_MESSAGE.format("name")


def test_default_template_comes_from_config(monkeypatch):
    monkeypatch.setattr(config, "DEFAULT_ERROR_MESSAGE", "Default for {0}")
    assert AlwaysInvalidRule().format_error_message("Email") == "Default for Email"


def test_none_name_formats_as_empty():
    assert AlwaysInvalidRule(error_message="[{0}]").format_error_message(None) == "[]"


@pytest.mark.parametrize("value", [None, ""])
def test_no_message_and_no_resource_is_a_configuration_error(value):
    rule = AlwaysInvalidRule()
    rule.error_message = value
    rule.error_message_resource_name = value
    with pytest.raises(ValidationConfigurationException):
        rule.format_error_message("name")


def test_message_and_resource_name_together_are_ambiguous():
    rule = AlwaysInvalidRule()
    rule.error_message = "SomeErrorMessage"
    rule.error_message_resource_name = "SomeErrorMessageResourceName"
    with pytest.raises(ValidationConfigurationException):
        rule.format_error_message("Name does not matter")


def test_ambiguity_is_reported_even_when_resource_resolves():
    rule = AlwaysInvalidRule(
        "SomeErrorMessage",
        error_message_resource_name="PUBLIC_MESSAGE",
        error_message_resource_type=Messages,
    )
    with pytest.raises(ValidationConfigurationException) as exc:
        rule.format_error_message("name")
    assert "both" in exc.value.message


def test_message_and_resource_type_together_are_a_configuration_error():
    rule = AlwaysInvalidRule()
    rule.error_message = "SomeErrorMessage"
    rule.error_message_resource_type = int
    with pytest.raises(ValidationConfigurationException):
        rule.format_error_message("Name does not matter")


@pytest.mark.parametrize(
    "resource_name, resource_type",
    [
        ("ResourceName", None),
        (None, int),
        ("", int),
        ("NoSuchProperty", int),
        ("instance_message", Messages),
        ("write_only", Messages),
        ("INT_VALUE", Messages),
        ("EMPTY_MESSAGE", Messages),
        ("_protected_message", Messages),
        ("__private_message", Messages),
        ("_Messages__private_message", Messages),
        ("computed", Messages),
        ("method", Messages),
        ("STATIC_WRITE_ONLY", ComputedMessages),
        ("PUBLIC_MESSAGE", InheritedMessages),
        ("COMPUTED_MESSAGE", ChildComputedMessages),
    ],
)
def test_invalid_resource_reference_is_a_configuration_error(resource_name, resource_type):
    rule = AlwaysInvalidRule()
    rule.error_message_resource_name = resource_name
    rule.error_message_resource_type = resource_type
    with pytest.raises(ValidationConfigurationException):
        rule.format_error_message("Name does not matter")


@pytest.mark.parametrize("template", ["{1}", "{name}", "unbalanced {"])
def test_template_with_unsupported_placeholders_is_a_configuration_error(template):
    rule = AlwaysInvalidRule(error_message=template)
    with pytest.raises(ValidationConfigurationException):
        rule.format_error_message("name")


def test_error_message_string_is_the_unformatted_template():
    rule = AlwaysInvalidRule(
        error_message_resource_name="PUBLIC_MESSAGE_WITH_NAME",
        error_message_resource_type=Messages,
    )
    assert rule.error_message_string == Messages.PUBLIC_MESSAGE_WITH_NAME


def test_rule_class_can_supply_its_own_resolver():
    class CatalogRule(AlwaysInvalidRule):
        static_member_resolver = staticmethod(
            lambda owner, name: StaticMember(name, True, True, True, f"{name} from catalog for {{0}}")
        )

    rule = CatalogRule(error_message_resource_name="REQUIRED", error_message_resource_type=object)
    assert rule.format_error_message("Email") == "REQUIRED from catalog for Email"


def test_context_resolver_is_used_during_evaluation():
    calls = []

    def resolver(owner, name):
        calls.append((owner, name))
        return StaticMember(name, True, True, True, "Resolved for {0}")

    context = ValidationContext(object(), member_name="email", static_member_resolver=resolver)
    rule = AlwaysInvalidRule(error_message_resource_name="ANY", error_message_resource_type=Messages)
    result = rule.evaluate("value", context)

    assert result is not SUCCESS
    assert result.error_message == "Resolved for email"
    assert calls == [(Messages, "ANY")]


def test_resolver_result_must_be_public_static_and_readable():
    class HiddenRule(AlwaysInvalidRule):
        static_member_resolver = staticmethod(
            lambda owner, name: StaticMember(name, False, True, True, "hidden")
        )

    rule = HiddenRule(error_message_resource_name="X", error_message_resource_type=object)
    with pytest.raises(ValidationConfigurationException):
        rule.format_error_message("name")


def test_failing_resource_getter_is_a_configuration_error():
    rule = AlwaysInvalidRule(
        error_message_resource_name="BROKEN_MESSAGE",
        error_message_resource_type=BrokenMessages,
    )
    with pytest.raises(ValidationConfigurationException) as exc:
        rule.format_error_message("name")
    assert isinstance(exc.value.__cause__, LookupError)
