import pickle

import pytest
from pydantic import ValidationError

from fast_annotations import SUCCESS, ValidationResult, ValidationSuccess


def test_success_is_a_singleton():
    assert ValidationSuccess() is SUCCESS
    assert SUCCESS.is_success is True
    assert pickle.loads(pickle.dumps(SUCCESS)) is SUCCESS


def test_failure_without_message_is_not_success():
    result = ValidationResult(None)
    assert result.is_success is False
    assert result != SUCCESS
    assert result is not SUCCESS


def test_member_names_are_an_ordered_tuple_without_missing_names():
    result = ValidationResult("bad", ["b", None, "a"])
    assert result.member_names == ("b", "a")
    assert ValidationResult("bad").member_names == ()


def test_results_are_immutable_and_compare_by_value():
    result = ValidationResult("bad", ["field"])
    assert result == ValidationResult("bad", ("field",))
    with pytest.raises(ValidationError):
        result.error_message = "other"


def test_str_is_the_error_message():
    assert str(ValidationResult("The Name field is required.")) == "The Name field is required."
    assert "ValidationResult" in str(ValidationResult(None))


def test_from_result_copies_a_failure():
    original = ValidationResult("bad", ["field"])
    copy = ValidationResult.from_result(original)
    assert copy == original
    assert copy is not original

    with pytest.raises(TypeError):
        ValidationResult.from_result(SUCCESS)
