import os

# Message template given to rules that configure no message of their own
DEFAULT_ERROR_MESSAGE = os.getenv("VALIDATION_DEFAULT_ERROR_MESSAGE", "The field {0} is invalid.")

# Used when a formatted failure message comes out empty
FALLBACK_ERROR_MESSAGE = os.getenv("VALIDATION_FALLBACK_ERROR_MESSAGE") or "Validation failed."

# Logging (see utils/logging.py)
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
LOG_DIR = os.getenv("LOG_DIR", os.path.join(os.getcwd(), "log"))
LOG_FILE_NAME = os.getenv("LOG_FILE_NAME")
