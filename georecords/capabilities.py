"""
georecords.capabilities
~~~~~~~~~~~~~~~~~~~~~~~

This module maps the database type declared in a MaxMind DB's metadata to
the lookup methods the database supports.

"""

from __future__ import annotations

import enum
from types import MappingProxyType

from georecords.errors import UnknownDatabaseTypeError


class Capability(enum.IntFlag):
    """The lookups a database supports"""

    ANONYMOUS_IP = enum.auto()
    ASN = enum.auto()
    CITY = enum.auto()
    CONNECTION_TYPE = enum.auto()
    COUNTRY = enum.auto()
    DOMAIN = enum.auto()
    ENTERPRISE = enum.auto()
    ISP = enum.auto()


# City lookups are allowed on Country databases for backwards compatibility.
_CITY_OR_COUNTRY = Capability.CITY | Capability.COUNTRY

DATABASE_CAPABILITIES = MappingProxyType(
    {
        "GeoIP2-Anonymous-IP": Capability.ANONYMOUS_IP,
        "DBIP-ASN-Lite (compat=GeoLite2-ASN)": Capability.ASN,
        "GeoLite2-ASN": Capability.ASN,
        "DBIP-City-Lite": _CITY_OR_COUNTRY,
        "DBIP-Country-Lite": _CITY_OR_COUNTRY,
        "DBIP-Country": _CITY_OR_COUNTRY,
        "DBIP-Location (compat=City)": _CITY_OR_COUNTRY,
        "GeoLite2-City": _CITY_OR_COUNTRY,
        "GeoIP2-City": _CITY_OR_COUNTRY,
        "GeoIP2-City-Africa": _CITY_OR_COUNTRY,
        "GeoIP2-City-Asia-Pacific": _CITY_OR_COUNTRY,
        "GeoIP2-City-Europe": _CITY_OR_COUNTRY,
        "GeoIP2-City-North-America": _CITY_OR_COUNTRY,
        "GeoIP2-City-South-America": _CITY_OR_COUNTRY,
        "GeoIP2-Precision-City": _CITY_OR_COUNTRY,
        "GeoLite2-Country": _CITY_OR_COUNTRY,
        "GeoIP2-Country": _CITY_OR_COUNTRY,
        "GeoIP2-Connection-Type": Capability.CONNECTION_TYPE,
        "GeoIP2-Domain": Capability.DOMAIN,
        "DBIP-ISP (compat=Enterprise)": Capability.ENTERPRISE | _CITY_OR_COUNTRY,
        "DBIP-Location-ISP (compat=Enterprise)": Capability.ENTERPRISE
        | _CITY_OR_COUNTRY,
        "GeoIP2-Enterprise": Capability.ENTERPRISE | _CITY_OR_COUNTRY,
        # ISP databases carry the ASN fields too.
        "GeoIP2-ISP": Capability.ISP | Capability.ASN,
        "GeoIP2-Precision-ISP": Capability.ISP | Capability.ASN,
    }
)


def resolve(database_type: str) -> Capability:
    """Return the capabilities of a database type

    Arguments:
        database_type -- the ``database_type`` from the database metadata,
                         e.g., "GeoIP2-City". It must match exactly.

    Raises UnknownDatabaseTypeError for any type not listed in
    DATABASE_CAPABILITIES.
    """
    try:
        return DATABASE_CAPABILITIES[database_type]
    except KeyError:
        raise UnknownDatabaseTypeError(database_type) from None
