"""Unit tests for free-text quantity parsing."""

import pytest

from recipecart.normalize.quantity import parse_quantity


class TestParseQuantity:
    """Tests for parse_quantity function."""

    def test_parse_empty(self):
        """Test that empty input yields zero."""
        assert parse_quantity("") == 0.0
        assert parse_quantity("   ") == 0.0
        assert parse_quantity(None) == 0.0

    def test_parse_integer(self):
        """Test parsing simple integers."""
        assert parse_quantity("2") == 2.0
        assert parse_quantity("10") == 10.0

    def test_parse_decimal(self):
        """Test parsing decimal numbers."""
        assert parse_quantity("1.5") == 1.5
        assert parse_quantity("0.25") == 0.25
        assert parse_quantity(".5") == 0.5

    def test_parse_fraction(self):
        """Test parsing simple fractions."""
        assert parse_quantity("1/2") == 0.5
        assert parse_quantity("3/4") == 0.75

    def test_parse_mixed_number(self):
        """Test parsing mixed numbers like '2 1/2'."""
        assert parse_quantity("2 1/2") == 2.5
        assert parse_quantity("1 1/4") == 1.25

    def test_parse_unicode_fraction(self):
        """Test parsing unicode vulgar fractions."""
        assert parse_quantity("½") == 0.5
        assert parse_quantity("¾") == 0.75
        assert parse_quantity("⅓") == pytest.approx(1 / 3)

    def test_parse_attached_unicode_fraction(self):
        """Test that a fraction glued to a digit reads as a mixed number."""
        assert parse_quantity("1½") == 1.5
        assert parse_quantity("10½") == 10.5
        assert parse_quantity("2⅛") == 2.125

    def test_parse_separated_unicode_fraction(self):
        """Test a unicode fraction after a space."""
        assert parse_quantity("1 ½") == 1.5

    def test_parse_adjacent_unicode_fractions(self):
        """Test that symbols expand one at a time in table order."""
        assert parse_quantity("¼½") == 0.75
        assert parse_quantity("½¼") == 1.0

    def test_parse_qualifiers(self):
        """Test that qualifier words and symbols are ignored."""
        assert parse_quantity("about 1/2") == 0.5
        assert parse_quantity("About 2") == 2.0
        assert parse_quantity("~2") == 2.0
        assert parse_quantity("≈ 3") == 3.0
        assert parse_quantity("approximately 4") == 4.0
        assert parse_quantity("approx. 2") == 2.0
        assert parse_quantity("around 1.5") == 1.5
        assert parse_quantity("roughly 6") == 6.0

    def test_parse_range_takes_first_bound(self):
        """Test that ranges collapse to their first value."""
        assert parse_quantity("1-2") == 1.0
        assert parse_quantity("2 - 3") == 2.0
        assert parse_quantity("1.5–2") == 1.5

    def test_parse_ignores_trailing_words(self):
        """Test that unit words mixed into the quantity are dropped."""
        assert parse_quantity("2 cups") == 2.0
        assert parse_quantity("3/4 cup") == 0.75

    def test_parse_non_numeric(self):
        """Test that text without numbers yields zero."""
        assert parse_quantity("to taste") == 0.0
        assert parse_quantity("a handful") == 0.0
        assert parse_quantity("pinch") == 0.0

    @pytest.mark.parametrize(
        "raw",
        ["🍋", "​", "1/", "/", "..", "½/½", "-", "1" * 500, "9" * 400 + "/" + "9" * 400],
    )
    def test_parse_never_raises(self, raw):
        """Test that adversarial input still returns a number."""
        assert isinstance(parse_quantity(raw), float)
