#!/usr/bin/env python

import unittest
from dataclasses import dataclass, field

from georecords import models, records
from georecords.decoder import decode_into
from georecords.errors import DecodeError


class TestDecoder(unittest.TestCase):
    def decode(self, model_class, raw):
        model = model_class()
        decode_into(raw, model)
        return model

    def test_strings(self) -> None:
        names = self.decode(
            records.Names,
            {"en": "Foo", "zh-CN": "人", "pt-BR": "Bar", "de": ""},
        )

        self.assertEqual(
            names,
            records.Names(english="Foo", simplified_chinese="人", brazilian_portuguese="Bar"),
        )

    def test_unknown_keys_are_ignored(self) -> None:
        names = self.decode(records.Names, {"en": "Foo", "it": "Pippo", "extra": [1, 2]})

        self.assertEqual(names, records.Names(english="Foo"))

    def test_booleans(self) -> None:
        country = self.decode(records.Country, {"is_in_european_union": True})
        self.assertTrue(country.is_in_european_union)

        country = self.decode(records.Country, {"is_in_european_union": False})
        self.assertFalse(country.is_in_european_union)

    def test_unsigned_integers(self) -> None:
        for value in [0, 1, 255, 65535, 2**32 - 1, 2**64 - 1]:
            with self.subTest(value=value):
                city = self.decode(records.City, {"geoname_id": value})
                self.assertEqual(city.geoname_id, value)

    def test_doubles(self) -> None:
        location = self.decode(
            records.Location, {"latitude": 51.5142, "longitude": -0.0931}
        )

        self.assertEqual(location.latitude, 51.5142)
        self.assertEqual(location.longitude, -0.0931)

    def test_integer_stored_as_double(self) -> None:
        location = self.decode(records.Location, {"latitude": 0, "longitude": 12})

        self.assertIsInstance(location.longitude, float)
        self.assertEqual(location.longitude, 12.0)

    def test_nested_maps(self) -> None:
        country = self.decode(
            models.Country,
            {
                "continent": {"code": "EU", "names": {"en": "Europe"}},
                "traits": {"is_anycast": True},
            },
        )

        self.assertEqual(country.continent.code, "EU")
        self.assertEqual(country.continent.names.english, "Europe")
        self.assertTrue(country.traits.is_anycast)
        self.assertFalse(country.country.has_data())

    def test_arrays(self) -> None:
        city = self.decode(
            models.City,
            {"subdivisions": [{"iso_code": "ENG"}, {"iso_code": "OXF", "geoname_id": 1}]},
        )

        self.assertEqual(
            city.subdivisions,
            [
                records.Subdivision(iso_code="ENG"),
                records.Subdivision(iso_code="OXF", geoname_id=1),
            ],
        )

    def test_empty_array(self) -> None:
        city = self.decode(models.City, {"subdivisions": []})

        self.assertEqual(city.subdivisions, [])

    def test_array_element_type(self) -> None:
        enterprise = self.decode(
            models.Enterprise, {"subdivisions": [{"iso_code": "NY", "confidence": 93}]}
        )

        self.assertEqual(
            enterprise.subdivisions,
            [records.EnterpriseSubdivision(iso_code="NY", confidence=93)],
        )

    def test_null_values_are_skipped(self) -> None:
        city = self.decode(models.City, {"city": None, "postal": {"code": None}})

        self.assertEqual(city, models.City())

    def test_lookup_fields_are_not_decoded(self) -> None:
        asn = self.decode(
            models.ASN,
            {"ip_address": "1.2.3.4", "network": "1.2.3.0/24", "autonomous_system_number": 1},
        )

        self.assertIsNone(asn.ip_address)
        self.assertIsNone(asn.network)
        self.assertEqual(asn.autonomous_system_number, 1)

    def test_type_mismatches(self) -> None:
        cases = [
            (records.City, {"geoname_id": "1"}, "expected unsigned integer, got str"),
            (records.City, {"geoname_id": True}, "expected unsigned integer, got bool"),
            (records.City, {"geoname_id": 1.5}, "expected unsigned integer, got float"),
            (records.Location, {"latitude": "51"}, "expected double, got str"),
            (records.Location, {"latitude": False}, "expected double, got bool"),
            (records.Country, {"is_in_european_union": 1}, "expected boolean, got int"),
            (records.Postal, {"code": 98354}, "expected string, got int"),
            (models.City, {"city": "London"}, "expected map, got str"),
            (models.City, {"subdivisions": {"iso_code": "ENG"}}, "expected array, got dict"),
        ]
        for model_class, raw, message in cases:
            with self.subTest(raw=raw):
                with self.assertRaisesRegex(DecodeError, message):
                    self.decode(model_class, raw)

    def test_negative_unsigned(self) -> None:
        with self.assertRaisesRegex(
            DecodeError, "cannot store negative value -1 in an unsigned field"
        ):
            self.decode(records.City, {"geoname_id": -1})

    def test_confidence_range(self) -> None:
        for value in [0, 40, 100]:
            with self.subTest(value=value):
                city = self.decode(records.EnterpriseCity, {"confidence": value})
                self.assertEqual(city.confidence, value)

        for record_class in [
            records.EnterpriseCity,
            records.EnterprisePostal,
            records.EnterpriseSubdivision,
            records.EnterpriseCountry,
        ]:
            with self.subTest(record=record_class.__name__):
                with self.assertRaisesRegex(
                    DecodeError, r"value 101 is out of range, the maximum is 100"
                ) as cm:
                    self.decode(record_class, {"confidence": 101})
                self.assertEqual(cm.exception.path, ("confidence",))

    def test_confidence_error_path(self) -> None:
        with self.assertRaises(DecodeError) as cm:
            self.decode(
                models.Enterprise,
                {"subdivisions": [{"iso_code": "NY", "confidence": 256}]},
            )

        self.assertEqual(cm.exception.path, ("subdivisions", 0, "confidence"))
        self.assertEqual(cm.exception.record.subdivisions[0].iso_code, "NY")

    def test_unbounded_unsigned(self) -> None:
        city = self.decode(records.City, {"geoname_id": 101})

        self.assertEqual(city.geoname_id, 101)

    def test_raw_record_not_a_map(self) -> None:
        with self.assertRaisesRegex(DecodeError, "expected map, got list") as cm:
            self.decode(models.City, ["81.2.69.160"])

        self.assertEqual(cm.exception.path, ())
        self.assertEqual(cm.exception.record, models.City())

    def test_error_path(self) -> None:
        with self.assertRaises(DecodeError) as cm:
            self.decode(
                models.City,
                {"subdivisions": [{"iso_code": "ENG"}, {"names": {"en": 7}}]},
            )

        self.assertEqual(cm.exception.path, ("subdivisions", 1, "names", "en"))
        self.assertIn("(at subdivisions/1/names/en)", str(cm.exception))

    def test_partial_record(self) -> None:
        with self.assertRaises(DecodeError) as cm:
            self.decode(
                models.City,
                {
                    "continent": {"code": "EU"},
                    "subdivisions": [{"iso_code": "ENG"}, {"geoname_id": "x"}],
                    "country": {"iso_code": "GB"},
                },
            )

        partial = cm.exception.record
        self.assertIsInstance(partial, models.City)
        self.assertEqual(partial.continent.code, "EU")
        self.assertEqual(partial.subdivisions[0].iso_code, "ENG")
        self.assertEqual(len(partial.subdivisions), 2)

    def test_unsupported_field_type(self) -> None:
        @dataclass
        class Unsupported:
            values: dict = field(default_factory=dict)

        with self.assertRaisesRegex(TypeError, "Unsupported.values has an unsupported type"):
            self.decode(Unsupported, {"values": {"a": 1}})


if __name__ == "__main__":
    unittest.main()
