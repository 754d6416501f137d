"""
Custom exceptions for the application.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class FileStoreError(BaseAppError):
    """Exception raised for file store errors."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class PatchError(BaseAppError):
    """Base exception for document patch failures."""

    pass


class DocumentNotFoundError(PatchError):
    """Raised when the document cannot be opened."""

    pass


class DocumentCorruptError(PatchError):
    """Raised when the document cannot be parsed."""

    def __init__(self, path: str, diagnostic: str):
        super().__init__(f"Failed to parse JSON in {path}: {diagnostic}")
        self.path = path
        self.diagnostic = diagnostic


class DocumentTooLargeError(PatchError):
    """Raised when the document exceeds the configured size ceiling."""

    def __init__(self, path: str, size: int, max_bytes: int):
        super().__init__(
            f"Document {path} is too large ({size} bytes, maximum is {max_bytes})"
        )
        self.path = path
        self.size = size
        self.max_bytes = max_bytes


class DocumentWriteError(PatchError):
    """Raised when the document cannot be serialized or written back."""

    pass


class CommandError(BaseAppError):
    """Base exception for malformed or inapplicable shell commands."""

    pass


class InvalidArgumentError(CommandError):
    """Raised when a command receives the wrong number of arguments."""

    pass


class InvalidTargetError(CommandError):
    """Raised when navigating to a missing path or a path that is not a directory."""

    pass
