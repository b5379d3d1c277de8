"""Tests for the month arithmetic behind the calendar."""

from __future__ import annotations

from datetime import date

from django.test import SimpleTestCase

from apps.dashboard.month_calendar import days_between, last_of_month, parse_month, shift_month


class MonthArithmeticTests(SimpleTestCase):
    def test_shift_month_wraps_years(self) -> None:
        self.assertEqual(shift_month(date(2050, 12, 15), 1), date(2051, 1, 1))
        self.assertEqual(shift_month(date(2050, 1, 31), -1), date(2049, 12, 1))

    def test_last_of_month(self) -> None:
        self.assertEqual(last_of_month(2048, 2), date(2048, 2, 29))
        self.assertEqual(last_of_month(2050, 2), date(2050, 2, 28))
        self.assertEqual(last_of_month(2050, 12), date(2050, 12, 31))

    def test_days_between_is_inclusive(self) -> None:
        days = list(days_between(date(2050, 1, 30), date(2050, 2, 1)))
        self.assertEqual(days, [date(2050, 1, 30), date(2050, 1, 31), date(2050, 2, 1)])


class ParseMonthTests(SimpleTestCase):
    def test_valid(self) -> None:
        self.assertEqual(parse_month("2050", "3"), (2050, 3))

    def test_rejected(self) -> None:
        for year, month in (("0", "1"), ("1", "1"), ("9999", "12"), ("2050", "13"), ("2050", None), ("x", "1")):
            with self.subTest(year=year, month=month):
                with self.assertRaises(ValueError):
                    parse_month(year, month)
