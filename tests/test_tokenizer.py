import pytest

from letter_simhash.errors import InvalidArgumentError
from letter_simhash.fingerprints import DEFAULT_NGRAM_SIZE, tokenize


def test_default_window_is_three():
    assert DEFAULT_NGRAM_SIZE == 3
    assert tokenize("dear sir or madam") == ["dear sir or", "sir or madam"]


def test_token_count_is_words_minus_window_plus_one():
    words = "please close my account effective immediately".split()
    for n in range(1, len(words) + 1):
        assert len(tokenize(" ".join(words), n)) == len(words) - n + 1


def test_whitespace_runs_collapse_to_single_spaces():
    assert tokenize("  a\t\tb \n c  d ", 3) == ["a b c", "b c d"]


@pytest.mark.parametrize("text", ["", "   \n\t", "a b"])
def test_fewer_words_than_window_yields_nothing(text):
    assert tokenize(text, 3) == []


def test_window_of_one_is_plain_words():
    assert tokenize("x y z", 1) == ["x", "y", "z"]


@pytest.mark.parametrize("n", [0, -1, 2.5, True, "3"])
def test_bad_window_size(n):
    with pytest.raises(InvalidArgumentError):
        tokenize("a b c", n)


@pytest.mark.parametrize("text", [None, b"a b c", 42])
def test_text_must_be_str(text):
    with pytest.raises(InvalidArgumentError):
        tokenize(text, 3)
