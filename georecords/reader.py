"""
georecords.reader
~~~~~~~~~~~~~~~~~

This module contains the Reader, which turns lookups in a MaxMind DB into
the models in :mod:`georecords.models`.

"""

from __future__ import annotations

import ipaddress
import logging
from typing import Any, Type, TypeVar

from georecords import models
from georecords.capabilities import Capability, resolve
from georecords.engine import LookupEngine
from georecords.errors import InvalidMethodError
from georecords.types import IPAddress

logger = logging.getLogger(__name__)

Model = TypeVar("Model")


class Reader:
    """
    Instances of this class provide typed lookups in a GeoIP2, GeoLite2 or
    compatible DB-IP database. Each lookup method is only available on the
    database types that support it; see georecords.capabilities.

    Readers are safe to share between threads for lookups. Do not close a
    reader while lookups on it are in progress.
    """

    closed: bool = False

    def __init__(self, engine: LookupEngine) -> None:
        """Reader for an opened database engine

        The reader takes ownership of the engine and closes it when the
        reader is closed, or right away if its metadata cannot be read or
        the database type is unknown.
        """
        self._engine = engine
        try:
            self._database_type = engine.metadata().database_type
            self._capabilities = resolve(self._database_type)
        except Exception:
            engine.close()
            raise
        logger.debug(
            "opened %s database with capabilities %r",
            self._database_type,
            self._capabilities,
        )

    @property
    def database_type(self) -> str:
        return self._database_type

    @property
    def capabilities(self) -> Capability:
        return self._capabilities

    def supports(self, capability: Capability) -> bool:
        """Whether every lookup in capability is available"""
        return self._capabilities & capability == capability

    def metadata(self) -> Any:
        """Return the metadata of the database as reported by the engine"""
        return self._engine.metadata()

    def anonymous_ip(self, ip_address: IPAddress) -> models.AnonymousIP:
        """Get the AnonymousIP object for the IP address

        :param ip_address: IPv4 or IPv6 address as a string or ipaddress object.
        """
        return self._model_for(
            models.AnonymousIP, Capability.ANONYMOUS_IP, "anonymous_ip", ip_address
        )

    def asn(self, ip_address: IPAddress) -> models.ASN:
        """Get the ASN object for the IP address

        Available on ASN and ISP databases.
        """
        return self._model_for(models.ASN, Capability.ASN, "asn", ip_address)

    def city(self, ip_address: IPAddress) -> models.City:
        """Get the City object for the IP address

        Available on City, Country and Enterprise databases. On a Country
        database the city-level fields are empty.
        """
        return self._model_for(models.City, Capability.CITY, "city", ip_address)

    def connection_type(self, ip_address: IPAddress) -> models.ConnectionType:
        """Get the ConnectionType object for the IP address"""
        return self._model_for(
            models.ConnectionType,
            Capability.CONNECTION_TYPE,
            "connection_type",
            ip_address,
        )

    def country(self, ip_address: IPAddress) -> models.Country:
        """Get the Country object for the IP address"""
        return self._model_for(
            models.Country, Capability.COUNTRY, "country", ip_address
        )

    def domain(self, ip_address: IPAddress) -> models.Domain:
        """Get the Domain object for the IP address"""
        return self._model_for(models.Domain, Capability.DOMAIN, "domain", ip_address)

    def enterprise(self, ip_address: IPAddress) -> models.Enterprise:
        """Get the Enterprise object for the IP address"""
        return self._model_for(
            models.Enterprise, Capability.ENTERPRISE, "enterprise", ip_address
        )

    def isp(self, ip_address: IPAddress) -> models.ISP:
        """Get the ISP object for the IP address"""
        return self._model_for(models.ISP, Capability.ISP, "isp", ip_address)

    def _model_for(
        self,
        model_class: Type[Model],
        capability: Capability,
        method: str,
        ip_address: IPAddress,
    ) -> Model:
        if self.closed:
            raise ValueError("Attempt to read from a closed database.")
        if not self._capabilities & capability:
            raise InvalidMethodError(method, self._database_type)

        address = ipaddress.ip_address(ip_address)
        result = self._engine.lookup(address)
        record = model_class()
        result.decode_into(record)
        if result.found():
            record.enrich(address, result.prefix())  # type: ignore[attr-defined]
        return record

    def close(self) -> None:
        """Closes the database and returns its resources to the system.

        Closing an already closed reader does nothing.
        """
        if self.closed:
            return
        self._engine.close()
        self.closed = True
        logger.debug("closed %s database", self._database_type)

    def __enter__(self) -> "Reader":
        if self.closed:
            raise ValueError("Attempt to reopen a closed database.")
        return self

    def __exit__(self, *args) -> None:
        self.close()
