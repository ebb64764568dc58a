# pylint:disable=C0111
import logging
import os
from typing import IO, AnyStr, Union

from maxminddb.const import (
    MODE_AUTO,
    MODE_MMAP,
    MODE_MMAP_EXT,
    MODE_FILE,
    MODE_MEMORY,
    MODE_FD,
)

from georecords.capabilities import Capability
from georecords.engine import MaxMindEngine
from georecords.errors import (
    DecodeError,
    GeoRecordsError,
    InvalidMethodError,
    UnknownDatabaseTypeError,
)
from georecords.reader import Reader

logging.getLogger(__name__).addHandler(logging.NullHandler())


def open_database(
    database: Union[AnyStr, int, os.PathLike, IO], mode: int = MODE_AUTO
) -> Reader:
    """Open a GeoIP2, GeoLite2 or compatible DB-IP database

    Arguments:
        database -- A path to a MaxMind DB file such as a GeoIP2 City
                    database, or a file object in the case of MODE_FD.
        mode -- mode to open the database with. Valid mode are:
            * MODE_MMAP_EXT - use the C extension with memory map.
            * MODE_MMAP - read from memory map. Pure Python.
            * MODE_FILE - read database as standard file. Pure Python.
            * MODE_MEMORY - load database into memory. Pure Python.
            * MODE_FD - the param passed via database is a file object, not
                        a path. This mode implies MODE_MEMORY.
            * MODE_AUTO - tries MODE_MMAP_EXT, MODE_MMAP, MODE_FILE in that
                          order. Default mode.

    Raises UnknownDatabaseTypeError if the database type has no lookup
    methods in this package.
    """
    return Reader(MaxMindEngine(database, mode))


def open_database_from_bytes(data: bytes) -> Reader:
    """Open a database from the contents of a MaxMind DB file"""
    return Reader(MaxMindEngine.from_bytes(data))


__all__ = [
    "Capability",
    "DecodeError",
    "GeoRecordsError",
    "InvalidMethodError",
    "MODE_AUTO",
    "MODE_FD",
    "MODE_FILE",
    "MODE_MEMORY",
    "MODE_MMAP",
    "MODE_MMAP_EXT",
    "Reader",
    "UnknownDatabaseTypeError",
    "open_database",
    "open_database_from_bytes",
]

__title__ = "georecords"
__version__ = "1.0.0"
__license__ = "Apache License, Version 2.0"
