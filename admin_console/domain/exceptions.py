"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist in the collection."""

    def __init__(self, entity_type: str, entity_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class RepositoryError(Exception):
    """Base class for failures reported by an entity repository.

    Carries a human-readable message that is safe to show in a notification.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class TransportError(RepositoryError):
    """Raised when the request never produced an HTTP response."""


class ServerError(RepositoryError):
    """Raised when the server answered with an error status or ``success: false``."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        super().__init__(message)

    def __str__(self) -> str:
        return f"{self.status_code}: {self.message}"


class UnauthorizedError(ServerError):
    """Raised on HTTP 401, after the session collaborator has been told."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(401, message)


class InvalidFormTransitionError(Exception):
    """Raised when a form operation is not allowed in the current form state."""

    def __init__(self, operation: str, state: str):
        self.operation = operation
        self.state = state
        super().__init__(f"Cannot {operation} in state '{state}'")


class UnknownFieldError(KeyError):
    """Raised when a draft is asked to set a field its entity does not declare."""

    def __init__(self, entity_type: str, field: str):
        self.entity_type = entity_type
        self.field = field
        super().__init__(f"{entity_type} has no field '{field}'")

    def __str__(self) -> str:
        return str(self.args[0])
