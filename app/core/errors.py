from typing import Optional


class BrowserError(Exception):
    """Base for every failure reported back to the HTTP caller."""

    status_code = 500

    def __init__(self, message: str, target: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.target = target


class InvalidIdentifier(BrowserError):
    """Schema/table/view name does not match the identifier grammar."""

    status_code = 400


class MissingInput(BrowserError):
    """A required request field is absent or empty."""

    status_code = 400


class DisallowedOperation(BrowserError):
    """Ad-hoc SQL is not a SELECT statement."""

    status_code = 400


class NoData(BrowserError):
    """The query succeeded but returned no rows where rows are required."""

    status_code = 404


class DatabaseError(BrowserError):
    """Failure on the database side of the executor."""


class QueryExecutionError(DatabaseError):
    """The database rejected the statement."""


class ConnectionFailure(DatabaseError):
    """The database could not be reached."""


class PoolTimeout(ConnectionFailure):
    """No pooled connection became available within the wait budget."""
