import pytest

from rasterkit.colors import lookup_color, parse_color


@pytest.mark.parametrize(
    "name, expected",
    [
        ("red", 0xFF0000),
        ("navy", 0x80),
        ("white", 0xFFFFFF),
        ("black", 0x0),
        ("gray50", 0x7F7F7F),
        ("lightgoldenrodyellow", 0xFAFAD2),
    ],
)
def test_lookup_known_names(name, expected):
    assert lookup_color(name) == expected


def test_lookup_is_case_insensitive():
    assert lookup_color("RED") == lookup_color("red")
    assert lookup_color("Light Blue") == lookup_color("light blue")


def test_lookup_first_entry_wins_for_duplicates():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_lookup_none_is_transparent():
    assert lookup_color("none") == -1


def test_lookup_unknown_name():
    assert lookup_color("not-a-colour") is None


def test_gray_and_grey_spellings_agree():
    for level in (0, 25, 50, 99, 100):
        assert lookup_color(f"gray{level}") == lookup_color(f"grey{level}")


def test_parse_hex_specification():
    assert parse_color("#ff00ff") == 0xFF00FF
    assert parse_color("#FF00FF") == parse_color("#ff00ff")


def test_parse_hex_stops_at_non_digit():
    assert parse_color("#12zz") == 0x12


def test_parse_hex_without_digits_gives_zero():
    assert parse_color("#zz") == 0


def test_parse_hex_accepts_prefix():
    assert parse_color("#0x1a") == 0x1A


def test_parse_named_colour():
    assert parse_color("red") == lookup_color("red")


def test_parse_joins_two_words():
    assert parse_color("light", "blue") == lookup_color("light blue")
    assert parse_color("dark", "slate") == 0x2F4F4F


def test_parse_unknown_name_gives_zero():
    assert parse_color("unknown") == 0
    assert parse_color("no", "such") == 0


def test_parse_none_is_transparent():
    assert parse_color("None") == -1


def test_parse_hex_ignores_end():
    assert parse_color("#00ff00", "ignored") == 0x00FF00