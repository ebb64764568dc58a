#!/usr/bin/env python

import unittest

from georecords.capabilities import DATABASE_CAPABILITIES, Capability, resolve
from georecords.errors import UnknownDatabaseTypeError


class TestCapabilities(unittest.TestCase):
    def test_city_and_country_databases(self) -> None:
        for database_type in [
            "DBIP-City-Lite",
            "DBIP-Country-Lite",
            "DBIP-Country",
            "DBIP-Location (compat=City)",
            "GeoLite2-City",
            "GeoIP2-City",
            "GeoIP2-City-Africa",
            "GeoIP2-City-Asia-Pacific",
            "GeoIP2-City-Europe",
            "GeoIP2-City-North-America",
            "GeoIP2-City-South-America",
            "GeoIP2-Precision-City",
            "GeoLite2-Country",
            "GeoIP2-Country",
        ]:
            with self.subTest(database_type=database_type):
                self.assertEqual(
                    resolve(database_type), Capability.CITY | Capability.COUNTRY
                )

    def test_enterprise_databases(self) -> None:
        for database_type in [
            "DBIP-ISP (compat=Enterprise)",
            "DBIP-Location-ISP (compat=Enterprise)",
            "GeoIP2-Enterprise",
        ]:
            with self.subTest(database_type=database_type):
                self.assertEqual(
                    resolve(database_type),
                    Capability.CITY | Capability.COUNTRY | Capability.ENTERPRISE,
                )

    def test_isp_databases(self) -> None:
        for database_type in ["GeoIP2-ISP", "GeoIP2-Precision-ISP"]:
            with self.subTest(database_type=database_type):
                capabilities = resolve(database_type)
                self.assertEqual(capabilities, Capability.ISP | Capability.ASN)
                self.assertNotIn(Capability.CITY, capabilities)

    def test_single_capability_databases(self) -> None:
        self.assertEqual(resolve("GeoIP2-Anonymous-IP"), Capability.ANONYMOUS_IP)
        self.assertEqual(resolve("GeoLite2-ASN"), Capability.ASN)
        self.assertEqual(
            resolve("DBIP-ASN-Lite (compat=GeoLite2-ASN)"), Capability.ASN
        )
        self.assertEqual(resolve("GeoIP2-Connection-Type"), Capability.CONNECTION_TYPE)
        self.assertEqual(resolve("GeoIP2-Domain"), Capability.DOMAIN)

    def test_every_type_has_a_capability(self) -> None:
        for database_type, capabilities in DATABASE_CAPABILITIES.items():
            with self.subTest(database_type=database_type):
                self.assertTrue(capabilities)

    def test_unknown_database_type(self) -> None:
        for database_type in ["Made-Up-Database", "", "geoip2-city", "GeoIP2-City "]:
            with self.subTest(database_type=database_type):
                with self.assertRaises(UnknownDatabaseTypeError) as cm:
                    resolve(database_type)
                self.assertEqual(cm.exception.database_type, database_type)

    def test_table_is_read_only(self) -> None:
        with self.assertRaises(TypeError):
            DATABASE_CAPABILITIES["Made-Up-Database"] = Capability.CITY  # type: ignore


if __name__ == "__main__":
    unittest.main()
