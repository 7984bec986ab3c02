import pytest

from srcset_parser.parsers.scanning import (
    ASCII_WHITESPACE,
    SEPARATORS,
    collect_characters,
    collect_non_whitespace,
    is_ascii_whitespace,
)


@pytest.mark.parametrize(
    "char, expected",
    [
        (" ", True),
        ("\t", True),
        ("\n", True),
        ("\x0c", True),
        ("\r", True),
        ("\x0b", False),
        ("\xa0", False),
        ("\u3000", False),
        (",", False),
        ("a", False),
    ],
)
def test_is_ascii_whitespace(char: str, expected: bool) -> None:
    assert is_ascii_whitespace(char) is expected


@pytest.mark.parametrize(
    "text, position, charset, expected",
    [
        (" ,\ta", 0, SEPARATORS, (0, 3)),
        (" ,\ta", 0, ASCII_WHITESPACE, (0, 1)),
        ("a, b", 1, SEPARATORS, (1, 3)),
        ("abc", 0, SEPARATORS, (0, 0)),
        ("abc", 3, SEPARATORS, (3, 3)),
        ("abc", 7, SEPARATORS, (7, 7)),
        ("", 0, SEPARATORS, (0, 0)),
    ],
)
def test_collect_characters(text, position, charset, expected) -> None:
    assert collect_characters(text, position, charset) == expected


@pytest.mark.parametrize(
    "text, position, expected",
    [
        ("data:,a 1x", 0, (0, 7)),
        ("a,b,c d", 0, (0, 5)),
        ("\xa0a\x0bb c", 0, (0, 4)),
        ("a b", 1, (1, 1)),
        ("ab", 2, (2, 2)),
    ],
)
def test_collect_non_whitespace(text: str, position: int, expected) -> None:
    assert collect_non_whitespace(text, position) == expected
