"""Custom exceptions for fast-annotations."""

from .common_exceptions import (
    ValidationException,
    ValidationConfigurationException,
    RuleNotImplementedException,
    ArgumentNullException,
)


__all__ = [
    "ValidationException",
    "ValidationConfigurationException",
    "RuleNotImplementedException",
    "ArgumentNullException",
]
