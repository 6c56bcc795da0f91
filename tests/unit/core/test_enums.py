"""Unit tests for core.enums."""

import unittest
from datetime import date

from core.enums import DayOfWeek, WasteType


class TestDayOfWeek(unittest.TestCase):
    """Tests for DayOfWeek."""

    def test_from_date(self):
        """Test mapping calendar dates to days of week."""
        self.assertEqual(DayOfWeek.from_date(date(2026, 10, 18)), DayOfWeek.SUNDAY)
        self.assertEqual(DayOfWeek.from_date(date(2026, 10, 19)), DayOfWeek.MONDAY)
        self.assertEqual(DayOfWeek.from_date(date(2026, 10, 24)), DayOfWeek.SATURDAY)

    def test_values_match_names(self):
        """Test that stored values are the upper-case day names."""
        self.assertEqual(DayOfWeek.WEDNESDAY.value, "WEDNESDAY")
        self.assertEqual(DayOfWeek("FRIDAY"), DayOfWeek.FRIDAY)


class TestWasteType(unittest.TestCase):
    """Tests for WasteType."""

    def test_label_replaces_underscores(self):
        """Test the citizen-facing label."""
        self.assertEqual(WasteType.GENERAL_WASTE.label, "GENERAL WASTE")
        self.assertEqual(WasteType.BULKY_ITEMS.label, "BULKY ITEMS")
        self.assertEqual(WasteType.ORGANIC.label, "ORGANIC")


if __name__ == "__main__":
    unittest.main()
