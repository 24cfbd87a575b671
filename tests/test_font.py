import string

import pytest

from picosnake.font import FONT, GLYPH_SIZE, glyph, glyph_offset


def test_uppercase_a_matches_table():
    assert glyph("A") == bytes([0x78, 0x14, 0x12, 0x11, 0x12, 0x14, 0x78, 0x00])


def test_digit_zero_matches_table():
    assert glyph("0") == bytes([0x3E, 0x41, 0x41, 0x49, 0x41, 0x41, 0x3E, 0x00])


def test_colon_is_last_glyph():
    assert glyph(":") == bytes([0x00, 0x00, 0x42, 0x00, 0x00, 0x00, 0x00, 0x00])
    assert glyph_offset(":") + GLYPH_SIZE == len(FONT)


def test_unknown_character_uses_blank_glyph():
    assert glyph_offset("#") == 0
    assert glyph(" ") == bytes(GLYPH_SIZE)


def test_groups_are_contiguous():
    assert glyph_offset("A") == glyph_offset("9") + GLYPH_SIZE
    assert glyph_offset("a") == glyph_offset("Z") + GLYPH_SIZE
    assert glyph_offset("?") == glyph_offset("z") + GLYPH_SIZE


@pytest.mark.parametrize("char", string.ascii_letters + string.digits + "?!.():")
def test_every_known_character_has_distinct_nonblank_glyph(char):
    data = glyph(char)
    assert len(data) == GLYPH_SIZE
    assert any(data)
    assert glyph_offset(char) > 0


def test_lowercase_differs_from_uppercase():
    assert glyph("b") != glyph("B")


@pytest.mark.parametrize("bad", ["", "AB", None])
def test_rejects_non_single_characters(bad):
    with pytest.raises(ValueError):
        glyph_offset(bad)