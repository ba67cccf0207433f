import pytest

from qrcodegen.colors import parse_hex_color
from qrcodegen.exceptions import InvalidColorError


@pytest.mark.parametrize("value, expected", [
    ("#f54b37", (245, 75, 55, 255)),
    ("f54b37", (245, 75, 55, 255)),
    ("#F54B37", (245, 75, 55, 255)),
    ("#ffffff", (255, 255, 255, 255)),
    ("#000000", (0, 0, 0, 255)),
])
def test_six_digit_colors(value, expected):
    assert parse_hex_color(value) == expected


@pytest.mark.parametrize("value, expected", [
    ("#fff", (255, 255, 255, 255)),
    ("#000", (0, 0, 0, 255)),
    ("abc", (0xaa, 0xbb, 0xcc, 255)),
    ("#1aF", (17, 170, 255, 255)),
])
def test_three_digit_colors_expand_each_nibble(value, expected):
    assert parse_hex_color(value) == expected


def test_case_does_not_matter():
    assert parse_hex_color("#AbCdEf") == parse_hex_color("#abcdef")


@pytest.mark.parametrize("value", [
    "", "#", "#ff", "#ffff", "#12345", "#1234567", "##fff",
    "#ggg", "#zzzzzz", "#12 345", "0x123",
    " #fff", "#fff ", "\t#102030\n", " #102030 ",
])
def test_invalid_colors(value):
    with pytest.raises(InvalidColorError):
        parse_hex_color(value)


def test_non_string_is_invalid():
    with pytest.raises(InvalidColorError):
        parse_hex_color(None)


def test_invalid_color_is_a_value_error():
    with pytest.raises(ValueError):
        parse_hex_color("nope")
