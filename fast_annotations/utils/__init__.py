from .logging import get_log_file_path, setup_logging
from .serialisation import get_exception_error_type, pascal_case_to_snake_case

__all__ = [
    "get_log_file_path",
    "setup_logging",
    "get_exception_error_type",
    "pascal_case_to_snake_case",
]
