class DatabaseError(Exception):
    """Base for all database errors."""


class NotFoundError(DatabaseError):
    """Entity not found."""


class StoreUnavailableError(DatabaseError):
    """The backing store could not be reached (connection refused, pool closed, timeout)."""
