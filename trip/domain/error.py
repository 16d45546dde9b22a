"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error, e.g. a missing required field."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to change content they don't own."""

    def __init__(self, resource: str, resource_id: str, username: str):
        self.resource = resource
        self.resource_id = resource_id
        self.username = username
        super().__init__(
            f"User {username} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InvalidCredentialsError(DomainError):
    """Raised when a name/PIN pair does not match a user."""

    def __init__(self) -> None:
        super().__init__("Invalid credentials")
