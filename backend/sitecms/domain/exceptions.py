"""Domain-specific exceptions: framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested item does not exist in its section."""

    def __init__(self, entity_type: str, entity_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class ItemValidationError(Exception):
    """Raised when item data fails a create-time or patch check."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class BackendUnavailableError(Exception):
    """Raised when no key-value backend is configured or reachable.

    This is an expected operating mode (local development), not a failure:
    reads fall back to the bundled document, writes are reported as
    accepted but not durable.
    """

    def __init__(self, message: str = "Storage backend not available, changes not persisted"):
        self.message = message
        super().__init__(message)


class DocumentWriteError(Exception):
    """Raised when the backend is configured but writing the document fails."""

    def __init__(self, key: str, cause: Exception | None = None):
        self.key = key
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(f"Failed to write document '{key}'{detail}")


class DocumentReadError(Exception):
    """Raised when the backend is configured but reading the document fails."""

    def __init__(self, key: str, cause: Exception | None = None):
        self.key = key
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(f"Failed to read document '{key}'{detail}")


class DocumentParseError(Exception):
    """Raised when the stored document is not a valid JSON object."""

    def __init__(self, key: str, message: str):
        self.key = key
        self.message = message
        super().__init__(f"Stored document '{key}' is malformed: {message}")


class InvalidTransitionError(Exception):
    """Raised when an item state machine receives an event its state does not accept."""

    def __init__(self, item_id: str, state: str, event: str):
        self.item_id = item_id
        self.state = state
        self.event = event
        super().__init__(f"Item '{item_id}' cannot handle '{event}' while {state}")
