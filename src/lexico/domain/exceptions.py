"""Domain exceptions."""


class LexicoError(Exception):
    """Base exception for Lexico."""

    pass


class NotFound(LexicoError):
    """Requested resource was not found."""

    pass


class ValidationError(LexicoError):
    """Validation failed for input data."""

    pass


class UnsupportedBackingStore(LexicoError):
    """Document store exposes no compatible create operation.

    Integration error: the configured store does not satisfy the persistence
    contract. Never transient, never retried.
    """

    def __init__(self, store_type: str, attempted: tuple[str, ...]) -> None:
        self.store_type = store_type
        self.attempted = attempted
        super().__init__(
            f"Document store {store_type} exposes no async create operation "
            f"(tried: {', '.join(attempted)})"
        )


class InvalidPersistenceResult(LexicoError):
    """Create operation completed but did not yield an integer identifier."""

    pass
