"""Errors raised by the service layer.

Each one carries the HTTP status it should turn into, so handlers
never have to guess. See error_handlers.py for the mapping.
"""


class ServiceError(Exception):
    """Base class for errors that end a single request (never the process)."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ServiceError):
    """Requested id has no matching row"""

    status_code = 404


class ConstraintViolationError(ServiceError):
    """Datastore rejected the write (foreign key, NOT NULL, bad value)"""

    status_code = 400


class DatastoreError(ServiceError):
    """Connectivity or other failure on the datastore side"""

    status_code = 500
