class NotFoundError(Exception):
    """Raised when a record id is missing from the store."""


class ConflictError(Exception):
    """Raised when a write breaks a unique or foreign-key constraint."""
