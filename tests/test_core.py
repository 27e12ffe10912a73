"""Tests for core data structures."""

import pytest

from utcolor.core.buffer import ColorBuffer, sync
from utcolor.core.char import ColoredChar
from utcolor.core.color import FloatRgb, Rgb, luminance, parse_color, to_channel

from helpers import BLUE, RED, WHITE


class TestColoredChar:
    """Tests for ColoredChar dataclass."""

    def test_default_char(self) -> None:
        cc = ColoredChar('a')
        assert cc.char == 'a'
        assert cc.color == WHITE

    def test_char_copy(self) -> None:
        cc = ColoredChar('X', RED)
        copy = cc.copy()
        assert copy.char == 'X'
        assert copy.color == RED
        assert copy is not cc


class TestToChannel:
    """Tests for picker -> wire channel conversion."""

    def test_zero_clamps_to_one(self) -> None:
        assert to_channel(0.0) == 1

    def test_full(self) -> None:
        assert to_channel(1.0) == 255

    def test_truncates(self) -> None:
        assert to_channel(0.5) == 127
        assert to_channel(0.999) == 254

    def test_exact_fractions(self) -> None:
        assert to_channel(1 / 255) == 1
        assert to_channel(2 / 255) == 2
        assert to_channel(127 / 255) == 127

    def test_never_zero(self) -> None:
        assert all(to_channel(i / 1000) >= 1 for i in range(1001))

    def test_out_of_range_is_clamped(self) -> None:
        assert to_channel(-0.5) == 1
        assert to_channel(1.5) == 255


class TestColor:
    """Tests for Rgb and FloatRgb."""

    def test_from_ints(self) -> None:
        assert Rgb.from_ints(255, 128, 64) == Rgb(255, 128, 64)

    def test_from_ints_out_of_range(self) -> None:
        with pytest.raises(ValueError):
            Rgb.from_ints(256, 0, 0)
        with pytest.raises(ValueError):
            Rgb.from_ints(0, -1, 0)

    def test_from_float_never_zero(self) -> None:
        assert Rgb.from_float((0.0, 0.0, 0.0)) == Rgb(1, 1, 1)
        assert Rgb.from_float((1.0, 0.0, 0.0)) == RED

    def test_float_clamped(self) -> None:
        color = FloatRgb(2.0, -1.0, 0.5)
        assert tuple(color) == (1.0, 0.0, 0.5)

    def test_lerp(self) -> None:
        start = FloatRgb(1.0, 0.0, 0.0)
        end = FloatRgb(0.0, 0.0, 1.0)
        assert start.lerp(end, 0.0) == start
        assert start.lerp(end, 1.0) == end
        assert start.lerp(end, 0.5) == FloatRgb(0.5, 0.0, 0.5)

    def test_to_bytes_and_hex(self) -> None:
        assert Rgb(255, 1, 127).to_bytes() == b'\xff\x01\x7f'
        assert Rgb(255, 1, 127).to_hex() == "#FF017F"

    def test_luminance(self) -> None:
        assert luminance(WHITE) == pytest.approx(1.0)
        assert luminance(Rgb(1, 1, 1)) < 0.5


class TestParseColor:
    """Tests for color strings."""

    def test_named(self) -> None:
        assert parse_color("red") == FloatRgb(1.0, 0.0, 0.0)
        assert parse_color(" Blue ") == FloatRgb(0.0, 0.0, 1.0)

    def test_hex(self) -> None:
        assert parse_color("#FF0000").to_rgb() == RED
        assert parse_color("0000ff").to_rgb() == BLUE

    def test_triplet(self) -> None:
        assert parse_color("127,1,127").to_rgb() == Rgb(127, 1, 127)

    def test_invalid(self) -> None:
        for spec in ("", "nope", "#12345", "1,2", "a,b,c", "300,0,0"):
            with pytest.raises(ValueError):
                parse_color(spec)


class TestColorBuffer:
    """Tests for ColorBuffer."""

    def test_empty(self) -> None:
        buffer = ColorBuffer()
        assert len(buffer) == 0
        assert not buffer
        assert buffer.text == ""

    def test_from_text(self, red_abc: ColorBuffer) -> None:
        assert red_abc.text == "abc"
        assert red_abc.colors() == [RED, RED, RED]

    def test_set_color(self, red_abc: ColorBuffer) -> None:
        red_abc.set_color(1, BLUE)
        assert red_abc[1].color == BLUE
        assert len(red_abc) == 3

    def test_set_color_out_of_bounds(self, red_abc: ColorBuffer) -> None:
        with pytest.raises(IndexError):
            red_abc.set_color(3, BLUE)

    def test_runs(self) -> None:
        buffer = ColorBuffer.from_pairs(
            [('a', RED), ('b', RED), ('c', BLUE), ('d', RED)]
        )
        assert list(buffer.runs()) == [(RED, "ab"), (BLUE, "c"), (RED, "d")]

    def test_copy_is_independent(self, red_abc: ColorBuffer) -> None:
        copy = red_abc.copy()
        copy.set_color(0, BLUE)
        assert red_abc[0].color == RED


class TestSync:
    """Tests for positional edit synchronization."""

    def test_length_matches_new_text(self, red_abc: ColorBuffer) -> None:
        for text in ("", "a", "abc", "abcdef", "xyz"):
            assert len(sync(red_abc, text)) == len(text)

    def test_unchanged_text_keeps_colors(self, red_abc: ColorBuffer) -> None:
        assert sync(red_abc, "abc").pairs() == red_abc.pairs()

    def test_append_gets_default(self, red_abc: ColorBuffer) -> None:
        result = sync(red_abc, "abcd")
        assert result.colors() == [RED, RED, RED, WHITE]

    def test_changed_char_gets_default(self, red_abc: ColorBuffer) -> None:
        result = sync(red_abc, "abd")
        assert result.colors() == [RED, RED, WHITE]

    def test_insert_in_middle_resets_tail(self, red_abc: ColorBuffer) -> None:
        # Positional comparison: nothing after the insert lines up
        result = sync(red_abc, "aXbc")
        assert result.text == "aXbc"
        assert result.colors() == [RED, WHITE, WHITE, WHITE]

    def test_delete_in_middle_resets_tail(self, red_abc: ColorBuffer) -> None:
        result = sync(red_abc, "ac")
        assert result.colors() == [RED, WHITE]

    def test_truncate_keeps_prefix(self, red_abc: ColorBuffer) -> None:
        assert sync(red_abc, "ab").colors() == [RED, RED]

    def test_old_buffer_untouched(self, red_abc: ColorBuffer) -> None:
        result = red_abc.sync("abc")
        result.set_color(0, BLUE)
        assert red_abc[0].color == RED
