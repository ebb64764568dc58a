"""
georecords.records
~~~~~~~~~~~~~~~~~~

This module contains the sub-records that the top-level models in
:mod:`georecords.models` are composed of.

Each class mirrors one map in the database record. Field metadata carries
the database key (``key``, defaulting to the attribute name), whether the
field is filled by the decoder at all (``decode``) and the largest value an
unsigned field accepts (``maximum``). ``ip_address`` and ``network`` are
set by the reader after a successful lookup and are never read from the
database.

"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from ipaddress import IPv4Address, IPv4Network, IPv6Address, IPv6Network
from typing import Any, Iterable


def _key(key: str, default: Any = "") -> Any:
    return field(default=default, metadata={"key": key})


def _enrichment() -> Any:
    return field(default=None, metadata={"decode": False})


def _confidence() -> Any:
    return field(default=0, metadata={"maximum": 100})


class Record:
    """Behaviour shared by every record and sub-record."""

    def has_data(self) -> bool:
        """Return True if any field decoded from the database is set.

        ``ip_address`` and ``network`` are not considered.
        """
        raise NotImplementedError

    def is_zero(self) -> bool:
        """Return True if no data was found for the record."""
        return not self.has_data()

    def to_dict(self) -> dict[str, Any]:
        """Return the record as a dict keyed by the database keys.

        Fields holding their zero value are left out.
        """
        result: dict[str, Any] = {}
        for attribute in fields(self):  # type: ignore[arg-type]
            value = getattr(self, attribute.name)
            key = attribute.metadata.get("key", attribute.name)
            if isinstance(value, Record):
                nested = value.to_dict()
                if nested:
                    result[key] = nested
            elif isinstance(value, list):
                items = [item.to_dict() for item in value]
                if any(items):
                    result[key] = items
            elif isinstance(value, (IPv4Address, IPv6Address, IPv4Network, IPv6Network)):
                result[key] = str(value)
            elif value or (attribute.metadata.get("always") and self.has_data()):
                result[key] = value
        return result


@dataclass
class Names(Record):
    """Localized names for a geographic entity.

    Only the languages MaxMind publishes are kept; any other language in
    the database is ignored.
    """

    german: str = _key("de")
    english: str = _key("en")
    spanish: str = _key("es")
    french: str = _key("fr")
    japanese: str = _key("ja")
    brazilian_portuguese: str = _key("pt-BR")
    russian: str = _key("ru")
    simplified_chinese: str = _key("zh-CN")

    def has_data(self) -> bool:
        return bool(
            self.german
            or self.english
            or self.spanish
            or self.french
            or self.japanese
            or self.brazilian_portuguese
            or self.russian
            or self.simplified_chinese
        )

    def get(self, code: str, default: str = "") -> str:
        """Return the name for a language code such as ``"pt-BR"``."""
        for attribute in fields(self):
            if attribute.metadata["key"] == code:
                return getattr(self, attribute.name) or default
        return default

    def localized(self, languages: Iterable[str] = ("en",)) -> str:
        """Return the first non-empty name in the preferred languages."""
        for code in languages:
            name = self.get(code)
            if name:
                return name
        return ""


@dataclass
class Continent(Record):
    names: Names = field(default_factory=Names)
    code: str = ""
    """A two character continent code like "NA" (North America) or "OC"
    (Oceania)."""
    geoname_id: int = 0

    def has_data(self) -> bool:
        return self.names.has_data() or self.code != "" or self.geoname_id != 0


@dataclass
class City(Record):
    names: Names = field(default_factory=Names)
    geoname_id: int = 0

    def has_data(self) -> bool:
        return self.names.has_data() or self.geoname_id != 0


@dataclass
class EnterpriseCity(City):
    confidence: int = _confidence()
    """MaxMind's confidence, from 0 to 100, that the city is correct."""

    def has_data(self) -> bool:
        return super().has_data() or self.confidence != 0


@dataclass
class Postal(Record):
    code: str = ""
    """The postal code of the location. Not available for all countries;
    in some countries it only contains part of the postal code."""

    def has_data(self) -> bool:
        return self.code != ""


@dataclass
class EnterprisePostal(Postal):
    confidence: int = _confidence()

    def has_data(self) -> bool:
        return super().has_data() or self.confidence != 0


@dataclass
class Subdivision(Record):
    names: Names = field(default_factory=Names)
    iso_code: str = ""
    """Up to three characters containing the subdivision portion of the
    ISO 3166-2 code."""
    geoname_id: int = 0

    def has_data(self) -> bool:
        return self.names.has_data() or self.iso_code != "" or self.geoname_id != 0


@dataclass
class EnterpriseSubdivision(Subdivision):
    confidence: int = _confidence()

    def has_data(self) -> bool:
        return super().has_data() or self.confidence != 0


@dataclass
class Country(Record):
    """A country, used for both the located and the registered country."""

    names: Names = field(default_factory=Names)
    iso_code: str = ""
    geoname_id: int = 0
    is_in_european_union: bool = False

    def has_data(self) -> bool:
        return (
            self.names.has_data()
            or self.iso_code != ""
            or self.geoname_id != 0
            or self.is_in_european_union
        )


@dataclass
class EnterpriseCountry(Country):
    confidence: int = _confidence()

    def has_data(self) -> bool:
        return super().has_data() or self.confidence != 0


@dataclass
class RepresentedCountry(Record):
    """The country represented by something like a military base or
    embassy."""

    names: Names = field(default_factory=Names)
    iso_code: str = ""
    type: str = ""
    """The type of entity representing the country. Currently only
    "military"."""
    geoname_id: int = 0
    is_in_european_union: bool = False

    def has_data(self) -> bool:
        return (
            self.names.has_data()
            or self.iso_code != ""
            or self.type != ""
            or self.geoname_id != 0
            or self.is_in_european_union
        )


@dataclass
class Location(Record):
    time_zone: str = ""
    """The IANA time zone associated with the location, e.g.,
    "America/New_York"."""

    latitude: float = field(default=0.0, metadata={"always": True})
    """The approximate latitude. Not precise enough to identify an address
    or household."""

    longitude: float = field(default=0.0, metadata={"always": True})
    """The approximate longitude. Not precise enough to identify an address
    or household."""

    accuracy_radius: int = 0
    """The radius in kilometers around the coordinates where MaxMind has
    67% confidence the device resides."""

    metro_code: int = 0
    """Deprecated. Metro codes are no longer maintained."""

    def has_data(self) -> bool:
        return (
            self.time_zone != ""
            or self.latitude != 0
            or self.longitude != 0
            or self.accuracy_radius != 0
            or self.metro_code != 0
        )


@dataclass
class Traits(Record):
    ip_address: IPv4Address | IPv6Address | None = _enrichment()
    """The address used for the lookup."""

    network: IPv4Network | IPv6Network | None = _enrichment()
    """The largest network where all fields besides ``ip_address`` have the
    same value."""

    is_anycast: bool = False
    is_anonymous_proxy: bool = False
    """Deprecated. Use the Anonymous IP database instead."""
    is_satellite_provider: bool = False
    """Deprecated. Use the Anonymous IP database instead."""

    def has_data(self) -> bool:
        return self.is_anycast or self.is_anonymous_proxy or self.is_satellite_provider


@dataclass
class EnterpriseTraits(Traits):
    autonomous_system_number: int = 0
    autonomous_system_organization: str = ""
    connection_type: str = ""
    """One of Dialup, Cable/DSL, Corporate, Cellular or Satellite. More
    values may be added."""
    domain: str = ""
    isp: str = ""
    mobile_country_code: str = ""
    mobile_network_code: str = ""
    organization: str = ""
    user_type: str = ""
    static_ip_score: float = 0.0
    """How static or dynamic the address is, from 0 to 99.99."""
    is_legitimate_proxy: bool = False

    def has_data(self) -> bool:
        return (
            super().has_data()
            or self.autonomous_system_number != 0
            or self.autonomous_system_organization != ""
            or self.connection_type != ""
            or self.domain != ""
            or self.isp != ""
            or self.mobile_country_code != ""
            or self.mobile_network_code != ""
            or self.organization != ""
            or self.user_type != ""
            or self.static_ip_score != 0
            or self.is_legitimate_proxy
        )
