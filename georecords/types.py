"""Types shared across the georecords package."""

from __future__ import annotations

from ipaddress import IPv4Address, IPv4Network, IPv6Address, IPv6Network
from typing import TypeAlias

from maxminddb.types import Record

IPAddress: TypeAlias = str | IPv4Address | IPv6Address
"""An address as accepted by the query methods."""

Address: TypeAlias = IPv4Address | IPv6Address

Network: TypeAlias = IPv4Network | IPv6Network

RawRecord: TypeAlias = Record
"""A record as returned by the MaxMind DB reader before binding."""
