"""
Tests for size units and date strings.
"""

import unittest
from datetime import date, datetime

from ocgui.errors import DateFormatError, SizeFormatError
from ocgui.units import Size, SizeUnit, Unit, coerce_size_unit, format_date, parse_date


class TestSizeUnit(unittest.TestCase):

    def test_parse_pixels_and_percent(self):
        self.assertEqual(SizeUnit.parse("100px"), SizeUnit(100, Unit.PIXELS))
        self.assertEqual(SizeUnit.parse("50%"), SizeUnit(50, Unit.PERCENT))
        self.assertEqual(SizeUnit.parse(" 7px "), SizeUnit.pixels(7))

    def test_string_form_parses_back(self):
        for unit in (SizeUnit.pixels(0), SizeUnit.pixels(640), SizeUnit.percent(100)):
            self.assertEqual(SizeUnit.parse(str(unit)), unit)

    def test_malformed_strings(self):
        for bad in ("", "px", "10", "10 px", "-5px", "1.5px", "10em", "%10", "abc"):
            with self.subTest(bad=bad):
                with self.assertRaises(SizeFormatError):
                    SizeUnit.parse(bad)

    def test_size_format_error_is_a_value_error(self):
        with self.assertRaises(ValueError):
            SizeUnit.parse("wide")

    def test_unit_predicates(self):
        self.assertTrue(SizeUnit.pixels(3).is_pixels)
        self.assertFalse(SizeUnit.pixels(3).is_percent)
        self.assertTrue(SizeUnit.percent(3).is_percent)

    def test_coerce(self):
        self.assertEqual(coerce_size_unit(12), SizeUnit.pixels(12))
        self.assertEqual(coerce_size_unit("12%"), SizeUnit.percent(12))
        unit = SizeUnit.pixels(1)
        self.assertIs(coerce_size_unit(unit), unit)
        with self.assertRaises(SizeFormatError):
            coerce_size_unit(True)

    def test_size_of(self):
        self.assertEqual(Size.of(100, "50%"), Size(SizeUnit.pixels(100), SizeUnit.percent(50)))
        self.assertEqual(str(Size.of("1px", "2px")), "1px x 2px")


class TestDates(unittest.TestCase):

    def test_round_trip(self):
        for day in (date(2015, 4, 13), date(1999, 12, 31), date(2024, 2, 29)):
            self.assertEqual(parse_date(format_date(day)), day)

    def test_format_pads_fields(self):
        self.assertEqual(format_date(date(7, 1, 2)), "0007-01-02")

    def test_format_datetime_uses_the_day(self):
        self.assertEqual(format_date(datetime(2020, 5, 6, 23, 59)), "2020-05-06")

    def test_malformed_dates(self):
        for bad in ("2015-4-13", "13-04-2015", "2015/04/13", "2015-02-30", "2015-04-13T00:00", "", None, 20150413):
            with self.subTest(bad=bad):
                with self.assertRaises(DateFormatError):
                    parse_date(bad)


if __name__ == "__main__":
    unittest.main()
