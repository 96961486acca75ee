import pytest

from pixel_proxy.errors import InvalidConfigError
from pixel_proxy.infrastructure.palettes import BUILTIN_PALETTES, hex_to_rgb, parse_palette, rgb_to_hex


@pytest.mark.parametrize(
    "value, expected",
    [
        ("#FF0000", (255, 0, 0)),
        ("00ff7f", (0, 255, 127)),
        ("#0f0", (0, 255, 0)),
        (" 1d2b53 ", (29, 43, 83)),
    ],
)
def test_hex_to_rgb(value, expected):
    assert hex_to_rgb(value) == expected


@pytest.mark.parametrize("value", ["", "#12345", "zzzzzz", "#1234567"])
def test_hex_to_rgb_rejects_malformed_values(value):
    with pytest.raises(InvalidConfigError):
        hex_to_rgb(value)


def test_rgb_to_hex_round_trips_builtin_entry():
    assert rgb_to_hex((29, 43, 83)) == "#1d2b53"


def test_parse_palette_resolves_builtin_names_case_insensitively():
    assert parse_palette("PICO-8") is BUILTIN_PALETTES["pico-8"]
    assert len(BUILTIN_PALETTES["pico-8"]) == 16
    assert parse_palette("1bit") == ((0, 0, 0), (255, 255, 255))


def test_parse_palette_accepts_comma_separated_hex():
    assert parse_palette("#000000, #ffffff,") == ((0, 0, 0), (255, 255, 255))
    assert parse_palette("#abc") == ((170, 187, 204),)


def test_parse_palette_accepts_mixed_sequences():
    palette = parse_palette(["#ff0000", (0, 255, 0), [0, 0, 255, 128]])

    assert palette == ((255, 0, 0), (0, 255, 0), (0, 0, 255))
    assert isinstance(palette, tuple)


@pytest.mark.parametrize("value", [None, "", "   "])
def test_parse_palette_treats_blank_as_absent(value):
    assert parse_palette(value) is None


def test_parse_palette_keeps_explicit_empty_sequence():
    assert parse_palette([]) == ()


@pytest.mark.parametrize("value", ["not-a-palette", [(0, 0)], [(0, 0, 300)]])
def test_parse_palette_rejects_bad_input(value):
    with pytest.raises(InvalidConfigError):
        parse_palette(value)
