"""Error taxonomy for documentation retrieval."""

from collections.abc import Iterable


class DocumentationError(Exception):
    """Base class for recoverable documentation retrieval errors."""


class ValidationError(DocumentationError):
    """Raised when a caller supplies an unknown or malformed argument."""

    def __init__(self, message: str, valid_options: Iterable[str] = ()) -> None:
        """Initialise validation error.

        Args:
            message: Human readable description of the problem.
            valid_options: Values the caller may use instead.
        """
        self.valid_options = list(valid_options)
        if self.valid_options:
            message = f"{message}. Available options: {', '.join(self.valid_options)}"
        super().__init__(message)


class DocumentNotFoundError(DocumentationError):
    """Raised when a resource identifier is not in the current catalog."""

    def __init__(self, identifier: str) -> None:
        """Initialise not found error.

        Args:
            identifier: Resource identifier that could not be resolved.
        """
        self.identifier = identifier
        super().__init__(f"Could not read documentation file: {identifier}")
