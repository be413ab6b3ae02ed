"""Error types raised by the host framework and the addons installed on it.

Every error carries the HTTP status code the HTTP layer should answer with.
Nothing here decides how an error is rendered; that stays with the caller.
"""


class ResourceAuthError(Exception):
    """Base class for all resource-auth errors."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ConfigurationError(ResourceAuthError):
    """Malformed configuration.

    Not raised by the user management addon: its options are accepted as given
    and bad values surface later as schema or registration errors.
    """


class InvocationError(ResourceAuthError):
    """Raised when a processor operation has no implementation to run."""


class AuthenticationError(ResourceAuthError):
    """Raised when a login attempt is denied."""

    status_code = 401


class UnknownResourceTypeError(ResourceAuthError):
    """Raised when a resource type name is not registered on the application."""

    status_code = 404


class ResourceNotFoundError(ResourceAuthError):
    """Raised when a resource id does not exist in the store."""

    status_code = 404


class ResourceConflictError(ResourceAuthError):
    """Raised when a new record would replace an existing one."""

    status_code = 409
