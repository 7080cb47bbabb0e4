"""Core value types re-exported for convenient access."""

from .validation_result import *  # noqa: F401,F403
from .static_members import *  # noqa: F401,F403
from .validation_context import *  # noqa: F401,F403
