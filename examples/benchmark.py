#!/usr/bin/python
"""Compare typed lookups with raw maxminddb lookups on the same addresses.

The difference between the two rates is the cost of binding records to the
models and filling in the address and network.
"""

import argparse
import ipaddress
import random
import time

import maxminddb

import georecords

METHODS = [
    "anonymous_ip",
    "asn",
    "city",
    "connection_type",
    "country",
    "domain",
    "enterprise",
    "isp",
]

parser = argparse.ArgumentParser(description="Benchmark georecords lookups.")
parser.add_argument("--count", default=250000, type=int, help="number of lookups")
parser.add_argument("--mode", default=0, type=int, help="reader mode to use")
parser.add_argument("--file", default="GeoIP2-City.mmdb", help="path to mmdb file")
parser.add_argument(
    "--method", default="city", choices=METHODS, help="lookup method to benchmark"
)
parser.add_argument(
    "--ipv6", action="store_true", help="look up random IPv6 addresses"
)

args = parser.parse_args()

random.seed(0)
if args.ipv6:
    addresses = [
        ipaddress.IPv6Address(random.getrandbits(128)) for _ in range(args.count)
    ]
else:
    addresses = [
        ipaddress.IPv4Address(random.getrandbits(32)) for _ in range(args.count)
    ]


def rate(elapsed: float) -> str:
    return f"{int(args.count / elapsed):,} lookups per second"


with maxminddb.open_database(args.file, args.mode) as raw_reader:
    start = time.perf_counter()
    for address in addresses:
        raw_reader.get(address)
    raw_elapsed = time.perf_counter() - start

with georecords.open_database(args.file, args.mode) as reader:
    lookup = getattr(reader, args.method)
    hits = 0
    start = time.perf_counter()
    for address in addresses:
        if lookup(address).has_data():
            hits += 1
    typed_elapsed = time.perf_counter() - start

print(f"{reader.database_type}, {args.method}")
print("maxminddb: ", rate(raw_elapsed))
print("georecords:", rate(typed_elapsed))
print(f"overhead:   {typed_elapsed / raw_elapsed:.2f}x")
print(f"hit rate:   {hits / args.count:.1%}")
