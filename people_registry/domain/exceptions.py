"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class InvalidInputError(Exception):
    """Raised when a required field is missing or a field has an unusable value."""

    def __init__(self, message: str, field: str | None = None):
        self.message = message
        self.field = field
        super().__init__(message)


class StorageError(Exception):
    """Raised when the persistence engine fails.

    Carries only the operation name; the underlying driver error is chained
    as ``__cause__`` and never shown to API callers.
    """

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Storage fault during '{operation}'")


class TransportError(Exception):
    """Raised by the API client when a call to the record store fails.

    Covers unreachable servers, non-JSON or malformed bodies and unexpected
    status codes. ``status_code`` is ``None`` when no response was received.
    """

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        prefix = f"{status_code}: " if status_code is not None else ""
        super().__init__(f"{prefix}{message}")
