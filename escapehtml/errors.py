"""Exceptions raised by escapehtml."""

from typing import Optional


def error_message(message: str) -> str:
    """Prefix a user-facing message the way the CLI reports errors."""
    return f"Error: {message}"


class EscapeHtmlError(Exception):
    """Base class; str() is the message shown to the user."""


class PathNotFoundError(EscapeHtmlError):
    """Nothing exists at the given path."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(error_message(f"{path} does not exist"))


class NotADirectoryArgumentError(EscapeHtmlError):
    """The destination argument names something that is not a directory."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(error_message(f"{path} must be a directory"))


class FileProcessingError(EscapeHtmlError):
    """A single file could not be read, or its output could not be written."""

    def __init__(self, path: str, stage: str, cause: Optional[BaseException] = None):
        self.path = path
        self.stage = stage
        self.cause = cause
        reason = f"{stage} failed for {path}"
        if cause is not None:
            reason += f": {cause}"
        super().__init__(error_message(reason))
