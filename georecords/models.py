"""
georecords.models
~~~~~~~~~~~~~~~~~

This module contains the models returned by the :class:`georecords.Reader`
lookup methods, one per database type.

A model for an address that is not in the database is equal to a freshly
constructed one: every field holds its zero value and ``ip_address`` and
``network`` are ``None``. Use :meth:`has_data` to tell a miss apart from a
match.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from ipaddress import IPv4Address, IPv4Network, IPv6Address, IPv6Network

from georecords import records
from georecords.records import Record, _enrichment
from georecords.types import Address, Network


class _NestedTraits:
    """Models whose lookup fields live on ``traits``."""

    traits: records.Traits

    @property
    def ip_address(self) -> Address | None:
        return self.traits.ip_address

    @property
    def network(self) -> Network | None:
        return self.traits.network

    def enrich(self, ip_address: Address, network: Network) -> None:
        self.traits.ip_address = ip_address
        self.traits.network = network


class _FlatTraits:
    """Models that carry the lookup fields at the top level."""

    ip_address: Address | None
    network: Network | None

    def enrich(self, ip_address: Address, network: Network) -> None:
        self.ip_address = ip_address
        self.network = network


@dataclass
class Country(_NestedTraits, Record):
    """Model for the GeoIP2 and GeoLite2 Country databases."""

    continent: records.Continent = field(default_factory=records.Continent)
    country: records.Country = field(default_factory=records.Country)
    """The country where MaxMind believes the IP is located."""
    registered_country: records.Country = field(default_factory=records.Country)
    """The country where the ISP has registered the IP block. May differ from
    ``country``."""
    represented_country: records.RepresentedCountry = field(
        default_factory=records.RepresentedCountry
    )
    traits: records.Traits = field(default_factory=records.Traits)

    def has_data(self) -> bool:
        return (
            self.continent.has_data()
            or self.country.has_data()
            or self.registered_country.has_data()
            or self.represented_country.has_data()
            or self.traits.has_data()
        )


@dataclass
class City(_NestedTraits, Record):
    """Model for the GeoIP2 and GeoLite2 City databases.

    Country databases can be queried with this model too; the city,
    location, postal and subdivisions are then empty.
    """

    continent: records.Continent = field(default_factory=records.Continent)
    city: records.City = field(default_factory=records.City)
    postal: records.Postal = field(default_factory=records.Postal)
    subdivisions: list[records.Subdivision] = field(default_factory=list)
    """Ordered from largest to smallest, e.g., England before Oxfordshire."""
    country: records.Country = field(default_factory=records.Country)
    registered_country: records.Country = field(default_factory=records.Country)
    represented_country: records.RepresentedCountry = field(
        default_factory=records.RepresentedCountry
    )
    location: records.Location = field(default_factory=records.Location)
    traits: records.Traits = field(default_factory=records.Traits)

    def has_data(self) -> bool:
        return (
            self.continent.has_data()
            or self.city.has_data()
            or self.postal.has_data()
            or any(subdivision.has_data() for subdivision in self.subdivisions)
            or self.country.has_data()
            or self.registered_country.has_data()
            or self.represented_country.has_data()
            or self.location.has_data()
            or self.traits.has_data()
        )

    @property
    def most_specific_subdivision(self) -> records.Subdivision:
        """The smallest subdivision, or an empty one if there is none."""
        if self.subdivisions:
            return self.subdivisions[-1]
        return records.Subdivision()


@dataclass
class Enterprise(City):
    """Model for the GeoIP2 Enterprise database.

    Adds confidence scores and the ISP, domain and connection type traits
    to the City model.
    """

    city: records.EnterpriseCity = field(default_factory=records.EnterpriseCity)
    postal: records.EnterprisePostal = field(default_factory=records.EnterprisePostal)
    subdivisions: list[records.EnterpriseSubdivision] = field(default_factory=list)
    country: records.EnterpriseCountry = field(
        default_factory=records.EnterpriseCountry
    )
    registered_country: records.EnterpriseCountry = field(
        default_factory=records.EnterpriseCountry
    )
    traits: records.EnterpriseTraits = field(default_factory=records.EnterpriseTraits)


@dataclass
class AnonymousIP(_FlatTraits, Record):
    """Model for the GeoIP2 Anonymous IP database."""

    ip_address: IPv4Address | IPv6Address | None = _enrichment()
    network: IPv4Network | IPv6Network | None = _enrichment()
    is_anonymous: bool = False
    is_anonymous_vpn: bool = False
    is_hosting_provider: bool = False
    is_public_proxy: bool = False
    is_residential_proxy: bool = False
    is_tor_exit_node: bool = False

    def has_data(self) -> bool:
        return (
            self.is_anonymous
            or self.is_anonymous_vpn
            or self.is_hosting_provider
            or self.is_public_proxy
            or self.is_residential_proxy
            or self.is_tor_exit_node
        )


@dataclass
class ASN(_FlatTraits, Record):
    """Model for the GeoLite2 ASN database."""

    ip_address: IPv4Address | IPv6Address | None = _enrichment()
    network: IPv4Network | IPv6Network | None = _enrichment()
    autonomous_system_number: int = 0
    autonomous_system_organization: str = ""

    def has_data(self) -> bool:
        return (
            self.autonomous_system_number != 0
            or self.autonomous_system_organization != ""
        )


@dataclass
class ConnectionType(_FlatTraits, Record):
    """Model for the GeoIP2 Connection-Type database."""

    ip_address: IPv4Address | IPv6Address | None = _enrichment()
    network: IPv4Network | IPv6Network | None = _enrichment()
    connection_type: str = ""
    """One of Dialup, Cable/DSL, Corporate, Cellular or Satellite."""

    def has_data(self) -> bool:
        return self.connection_type != ""


@dataclass
class Domain(_FlatTraits, Record):
    """Model for the GeoIP2 Domain database."""

    ip_address: IPv4Address | IPv6Address | None = _enrichment()
    network: IPv4Network | IPv6Network | None = _enrichment()
    domain: str = ""
    """The second level domain, e.g., "example.com"."""

    def has_data(self) -> bool:
        return self.domain != ""


@dataclass
class ISP(_FlatTraits, Record):
    """Model for the GeoIP2 ISP database."""

    ip_address: IPv4Address | IPv6Address | None = _enrichment()
    network: IPv4Network | IPv6Network | None = _enrichment()
    autonomous_system_number: int = 0
    autonomous_system_organization: str = ""
    isp: str = ""
    mobile_country_code: str = ""
    mobile_network_code: str = ""
    organization: str = ""

    def has_data(self) -> bool:
        return (
            self.autonomous_system_number != 0
            or self.autonomous_system_organization != ""
            or self.isp != ""
            or self.mobile_country_code != ""
            or self.mobile_network_code != ""
            or self.organization != ""
        )
