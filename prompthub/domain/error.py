"""Domain errors.

The API maps each of these to a status code and an ``{"error", "code"}``
body, see ``interface/api/errors.py``.
"""


class DomainError(Exception):
    pass


class ValidationError(DomainError):
    """Input breaks a business rule (400). The message is shown to the user."""

    pass


class UnauthorizedError(DomainError):
    """No signed-in user, or bad credentials (401)."""

    def __init__(self, message: str = "Please log in first"):
        super().__init__(message)


class NotAuthorizedError(DomainError):
    """Signed in, but acting on someone else's content (403)."""

    def __init__(
        self, resource: str, resource_id: str, user_id: str | None, action: str = "edit"
    ):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(f"Not authorized to {action} this {resource}")


class NotFoundError(DomainError):
    """Missing, soft-deleted or hidden (404). Reported as ``"<resource> not found"``."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
