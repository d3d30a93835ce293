import pytest

from cubraycaster.colors import handle_spaces, is_valid_color, parse_color


@pytest.mark.parametrize(
    "line",
    [
        "F 220,100,0\n",
        "C 0, 0 ,255\n",
        "F\t1,2,3\n",
        "   C 10,20,30  \n",
        "F 001,2,3\n",
    ],
)
def test_valid_colors(line):
    assert is_valid_color(line) is True


@pytest.mark.parametrize(
    "line",
    [
        "F 256,0,0\n",
        "F1,2,3\n",
        "F 1,2\n",
        "F 1,2,3,4\n",
        "F 1,2,3,\n",
        "F 1,a,3\n",
        "F 1 2,3,4\n",
        "F -1,2,3\n",
        "F\n",
        "F",
        "F 1,2,3",
    ],
)
def test_invalid_colors(line):
    assert is_valid_color(line) is False


def test_parse_color_values():
    assert parse_color("F 220,100,0\n") == (220, 100, 0)


def test_parse_color_ignores_blanks():
    assert parse_color("C  12 , 34 ,\t56\n") == (12, 34, 56)


def test_parse_color_leading_zeros():
    assert parse_color("F 007,8,9\n") == (7, 8, 9)


def test_parse_color_rejects_invalid():
    with pytest.raises(ValueError):
        parse_color("F 300,0,0\n")


def test_parsed_channels_are_in_byte_range():
    for line in ("F 0,0,0\n", "C 255,255,255\n", "F 128, 64 ,32\n"):
        assert all(0 <= channel <= 255 for channel in parse_color(line))


def test_handle_spaces_removes_blanks():
    assert handle_spaces(" 1 ,\t2\n") == "1,2"


def test_handle_spaces_keeps_other_characters():
    text = "a,b;c"
    assert handle_spaces(text) == text