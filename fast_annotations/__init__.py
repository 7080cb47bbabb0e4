"""
FastAnnotations - the validation rule primitive behind fast-app style schemas

This package provides:
- `ValidationRule`: base class for rules with context-free and context-aware forms
- `ValidationResult` / `SUCCESS`: outcomes of a rule evaluation
- `ValidationContext`: the object, member and display name being validated
- `ValidationException` and configuration errors
- Message templates from literals or public static members of resource classes
"""

__version__ = "0.1.0"
__author__ = "Patrik Mojzis"
__email__ = "patrikm53@gmail.com"
__license__ = "MIT"

from . import config  # noqa: F401

from .contracts import *  # noqa: F401,F403
from .core import *  # noqa: F401,F403
from .exceptions import *  # noqa: F401,F403
