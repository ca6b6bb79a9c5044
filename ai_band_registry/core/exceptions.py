"""
Error taxonomy for the AI Band Registry service.

Every error carries the HTTP status code it maps to so the API layer can
render it without a lookup table.
"""


class RegistryError(Exception):
    """Base class for all service errors."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(RegistryError):
    """Raised when client input is missing or malformed."""

    status_code = 400


class NotFoundError(RegistryError):
    """Raised when a submission id does not exist in the store."""

    status_code = 404


class UnauthorizedError(RegistryError):
    """Raised when the admin credential is missing or wrong."""

    status_code = 401


class StorageError(RegistryError):
    """Raised when a backing JSON file cannot be read, parsed or written."""

    status_code = 500
