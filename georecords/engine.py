"""
georecords.engine
~~~~~~~~~~~~~~~~~

This module adapts the MaxMind DB reader from the ``maxminddb`` package to
the small interface :class:`georecords.Reader` needs. Anything implementing
:class:`LookupEngine` can be passed to the reader instead.

"""

from __future__ import annotations

import io
import ipaddress
import os
from typing import IO, AnyStr, Any, Protocol

import maxminddb
from maxminddb import MODE_AUTO, MODE_FD

from georecords.decoder import decode_into
from georecords.types import Address, Network, RawRecord


class LookupResult:
    """The outcome of looking up one address"""

    __slots__ = ("_ip_address", "_data", "_prefix_len")

    def __init__(
        self, ip_address: Address, data: RawRecord | None, prefix_len: int
    ) -> None:
        self._ip_address = ip_address
        self._data = data
        self._prefix_len = prefix_len

    def found(self) -> bool:
        """Whether the database has a record for the address"""
        return self._data is not None

    def prefix(self) -> Network:
        """The network in the database that contains the address"""
        return ipaddress.ip_network(
            f"{self._ip_address}/{self._prefix_len}", strict=False
        )

    def decode_into(self, target: Any) -> None:
        """Bind the record to target. Does nothing if nothing was found."""
        if self._data is not None:
            decode_into(self._data, target)


class LookupEngine(Protocol):
    """What the reader requires of a database engine"""

    def metadata(self) -> Any:
        ...

    def lookup(self, ip_address: Address) -> LookupResult:
        ...

    def close(self) -> None:
        ...


class MaxMindEngine:
    """A LookupEngine backed by a ``maxminddb`` reader"""

    def __init__(
        self, database: AnyStr | int | os.PathLike | IO, mode: int = MODE_AUTO
    ) -> None:
        """Open a MaxMind DB database

        Arguments:
            database -- a path to a MaxMind DB file, or a file object in the
                        case of MODE_FD.
            mode -- the maxminddb open mode, see maxminddb.open_database.
        """
        self._reader = maxminddb.open_database(database, mode)

    @classmethod
    def from_bytes(cls, data: bytes) -> "MaxMindEngine":
        """Open a database held in memory. The bytes are copied."""
        buffer = io.BytesIO(data)
        # The pure Python reader reports the file name in its errors.
        buffer.name = "<bytes>"
        return cls(buffer, MODE_FD)

    def metadata(self) -> maxminddb.reader.Metadata:
        return self._reader.metadata()

    def lookup(self, ip_address: Address) -> LookupResult:
        (data, prefix_len) = self._reader.get_with_prefix_len(ip_address)
        return LookupResult(ip_address, data, prefix_len)

    def close(self) -> None:
        self._reader.close()

    @property
    def closed(self) -> bool:
        return self._reader.closed
