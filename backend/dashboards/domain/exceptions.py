"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class InvalidEntityError(Exception):
    """Raised when input for an entity operation fails validation."""

    def __init__(self, entity_type: str, field: str, reason: str):
        self.entity_type = entity_type
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid {entity_type} {field}: {reason}")


class DashboardClientError(Exception):
    """Raised when the dashboard server answers with an unexpected status."""

    def __init__(self, operation: str, status_code: int, message: str):
        self.operation = operation
        self.status_code = status_code
        self.message = message
        super().__init__(f"dashboard {operation} failed, status: {status_code}: {message}")
