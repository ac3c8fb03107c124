"""
Unit tests for hexlens.core.classifier.

classify() maps every byte value to exactly one category, a two digit
uppercase hex code and the glyph shown in the printable column.
"""

import pytest

from hexlens.core.classifier import ByteCategory, ClassifiedByte, category_of, classify


# ---------------------------------------------------------------------------
# Categories
# ---------------------------------------------------------------------------

class TestCategories:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (0x00, ByteCategory.ZERO),
            (0x01, ByteCategory.NON_PRINTABLE_ASCII),
            (0x08, ByteCategory.NON_PRINTABLE_ASCII),
            (0x09, ByteCategory.OTHER_WHITESPACE),
            (0x0A, ByteCategory.OTHER_WHITESPACE),
            (0x0B, ByteCategory.NON_PRINTABLE_ASCII),
            (0x0C, ByteCategory.OTHER_WHITESPACE),
            (0x0D, ByteCategory.OTHER_WHITESPACE),
            (0x1F, ByteCategory.NON_PRINTABLE_ASCII),
            (0x20, ByteCategory.SPACE),
            (0x21, ByteCategory.PRINTABLE_ASCII),
            (0x7E, ByteCategory.PRINTABLE_ASCII),
            (0x7F, ByteCategory.PRINTABLE_ASCII),
            (0x80, ByteCategory.NON_ASCII),
            (0xFF, ByteCategory.NON_ASCII),
        ],
    )
    def test_boundaries(self, value, expected):
        """Values at the edges of every range land in the right category."""
        assert category_of(value) is expected

    def test_every_byte_has_one_category(self):
        """The categories cover 0..255 with no gaps."""
        seen = {category_of(value) for value in range(256)}
        assert seen == set(ByteCategory)

    def test_category_counts(self):
        """Partition sizes follow from the range definitions."""
        counts = {category: 0 for category in ByteCategory}
        for value in range(256):
            counts[category_of(value)] += 1

        assert counts[ByteCategory.ZERO] == 1
        assert counts[ByteCategory.SPACE] == 1
        assert counts[ByteCategory.OTHER_WHITESPACE] == 4
        assert counts[ByteCategory.NON_ASCII] == 128
        assert counts[ByteCategory.PRINTABLE_ASCII] == 95  # 0x21..0x7F
        assert counts[ByteCategory.NON_PRINTABLE_ASCII] == 27
        assert sum(counts.values()) == 256


# ---------------------------------------------------------------------------
# Hex codes and glyphs
# ---------------------------------------------------------------------------

class TestClassify:
    def test_printable_uses_the_character(self):
        """Printable ASCII shows itself in the printable column."""
        assert classify(ord("a")) == ClassifiedByte(0x61, ByteCategory.PRINTABLE_ASCII, "61", "a")

    def test_hex_is_uppercase_and_padded(self):
        """Hex codes are two uppercase digits."""
        assert classify(0x0A).hex == "0A"
        assert classify(0xFD).hex == "FD"

    @pytest.mark.parametrize(
        "value, glyph",
        [
            (0x00, "⋄"),
            (0x20, " "),
            (0x09, "_"),
            (0x0D, "_"),
            (0x80, "×"),
            (0x07, "•"),
        ],
    )
    def test_substitute_glyphs(self, value, glyph):
        """Every non printable category has its own substitute glyph."""
        assert classify(value).glyph == glyph

    def test_every_glyph_is_one_character(self):
        """The printable column gets exactly one character per byte."""
        assert all(len(classify(value).glyph) == 1 for value in range(256))
