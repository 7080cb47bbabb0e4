"""Contract classes and abstract interfaces.

Exported so they can be imported directly from :mod:`fast_annotations`.
"""

from .validation_rule import EvaluationForm, ValidationRule

__all__ = [
    "EvaluationForm",
    "ValidationRule",
]
