"""
Exit codes for tasg.

Each failure class maps to its own code so scripts wrapping the CLI can tell
a missing task apart from a broken tasks file.
"""

# Success
SUCCESS = 0

# General error (unspecified, or an I/O failure)
ERROR_GENERAL = 1

# Invalid arguments or validation error
ERROR_INVALID_ARGS = 2

# Task not found
ERROR_NOT_FOUND = 3

# Permission denied on the tasks file
ERROR_PERMISSION_DENIED = 4

# Tasks file is corrupt or could not be encoded
ERROR_DATA = 5


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_NOT_FOUND: "ERROR_NOT_FOUND",
        ERROR_PERMISSION_DENIED: "ERROR_PERMISSION_DENIED",
        ERROR_DATA: "ERROR_DATA",
    }
    return code_names.get(code, f"UNKNOWN({code})")


def get_exit_code_description(code: int) -> str:
    """Get a human-readable description of an exit code."""
    descriptions = {
        SUCCESS: "Command executed successfully",
        ERROR_GENERAL: "A general error occurred",
        ERROR_INVALID_ARGS: "Invalid arguments or validation error",
        ERROR_NOT_FOUND: "Task not found",
        ERROR_PERMISSION_DENIED: "Permission denied",
        ERROR_DATA: "Tasks file is corrupt - fix or remove it",
    }
    return descriptions.get(code, "Unknown error")
