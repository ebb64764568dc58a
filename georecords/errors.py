"""
georecords.errors
~~~~~~~~~~~~~~~~~

This module contains the exceptions raised by georecords.

"""

from __future__ import annotations

from typing import Any


class GeoRecordsError(RuntimeError):
    """Base class for errors raised by georecords."""


class UnknownDatabaseTypeError(GeoRecordsError):
    """Raised when a database declares a type the reader has no mapping for.

    The offending name is available as ``database_type``.
    """

    def __init__(self, database_type: str) -> None:
        super().__init__(
            f"reader does not support the {database_type!r} database type"
        )
        self.database_type = database_type


class InvalidMethodError(GeoRecordsError):
    """Raised when a lookup method is called on a database that does not
    support it, e.g., calling ``isp`` on a City database.
    """

    def __init__(self, method: str, database_type: str) -> None:
        super().__init__(
            f"the {method} method does not support the {database_type} database"
        )
        self.method = method
        self.database_type = database_type


class DecodeError(GeoRecordsError):
    """Raised when a database record cannot be bound to a record type.

    ``path`` holds the keys leading to the offending value. ``record`` is
    the record as far as it was filled in before the failure; do not trust
    it beyond that.
    """

    record: Any = None

    def __init__(self, message: str, path: tuple = ()) -> None:
        if path:
            message = f"{message} (at {'/'.join(str(key) for key in path)})"
        super().__init__(message)
        self.path = path
