import pytest

from dir2prompt.tokens import estimate_tokens, split_tokens


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Hello, world!", 3),
        ("This is a longer text with multiple tokens that should be counted.", 13),
        ("", 0),
    ],
)
def test_estimate_tokens_close_to_expected(text, expected):
    count = estimate_tokens(text)
    assert expected - 1 <= count <= expected + 1


def test_split_hello_world():
    assert split_tokens("Hello, world!") == ["Hello", ",", " world", "!"]


def test_split_numbers_in_groups_of_three():
    assert split_tokens("12345") == ["123", "45"]


def test_split_contraction():
    assert split_tokens("don't") == ["don", "'t"]


def test_split_double_space():
    assert split_tokens("a  b") == ["a", " ", " b"]


@pytest.mark.parametrize(
    "text",
    [
        "package main\n\nfunc main() {}\n",
        "x = 1234\r\n\ty := \"héllo\"  ",
        "日本語のテキスト, mixed with ASCII!!\n\n\n",
        "   leading and trailing   ",
    ],
)
def test_split_round_trip(text):
    assert "".join(split_tokens(text)) == text


def test_estimate_matches_split_length():
    text = "# Title\nSome words here.\n"
    assert estimate_tokens(text) == len(split_tokens(text))