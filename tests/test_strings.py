import string

import pytest

from dsakit.strings import (
    break_palindrome,
    count_anagram_occurrences,
    is_balanced,
    is_strong_password,
    longest_common_subsequence,
    longest_palindrome,
    longest_palindrome_dp,
    main,
    min_max_char,
    neo_sort,
    roman_to_decimal,
    roman_to_int,
    to_24_hour,
)

_ROMAN_TABLE = [
    (1000, "M"), (900, "CM"), (500, "D"), (400, "CD"),
    (100, "C"), (90, "XC"), (50, "L"), (40, "XL"),
    (10, "X"), (9, "IX"), (5, "V"), (4, "IV"), (1, "I"),
]


def _to_roman(number):
    parts = []
    for value, symbol in _ROMAN_TABLE:
        count, number = divmod(number, value)
        parts.append(symbol * count)
    return "".join(parts)


@pytest.mark.parametrize("sequence", ["{[()]}", "()[]{}", "a(b)c", ""])
def test_balanced_sequences(sequence):
    assert is_balanced(sequence)


@pytest.mark.parametrize("sequence", ["([)]", "((", ")", "{]"])
def test_unbalanced_sequences(sequence):
    assert not is_balanced(sequence)


def test_deep_nesting_is_balanced():
    assert is_balanced("(" * 500 + ")" * 500)
    assert not is_balanced("(" * 500 + ")" * 499)


@pytest.mark.parametrize("text", ["racecar", "abba", "x"])
def test_whole_palindrome_is_returned(text):
    assert longest_palindrome(text) == text
    assert longest_palindrome_dp(text) == text


@pytest.mark.parametrize(
    "text", ["babad", "cbbd", "abcracecarxyz", "forgeeksskeegfor", "abcd", "aaaa", "abacdfgdcaba"]
)
def test_palindrome_versions_agree(text):
    fast = longest_palindrome(text)
    dp = longest_palindrome_dp(text)
    assert fast == fast[::-1]
    assert dp == dp[::-1]
    assert fast in text and dp in text
    assert len(fast) == len(dp)


def test_palindrome_inside_text():
    assert longest_palindrome("abcracecarxyz") == "racecar"
    assert longest_palindrome_dp("abcracecarxyz") == "racecar"


def test_palindrome_of_empty_text():
    assert longest_palindrome("") == longest_palindrome_dp("")
    assert len(longest_palindrome("")) == 0


def test_lcs_known_value():
    assert longest_common_subsequence("abcde", "ace") == 3


@pytest.mark.parametrize("first,second", [("abcde", "ace"), ("kitten", "sitting"), ("xyz", "")])
def test_lcs_is_symmetric_and_bounded(first, second):
    result = longest_common_subsequence(first, second)
    assert result == longest_common_subsequence(second, first)
    assert result <= min(len(first), len(second))


def test_lcs_of_string_with_itself():
    word = "dynamic"
    assert longest_common_subsequence(word, word) == len(word)


def test_break_single_character():
    assert break_palindrome("a") == ""


@pytest.mark.parametrize("text", ["abccba", "aba", "aaaa", "zz"])
def test_break_palindrome_invariants(text):
    result = break_palindrome(text)
    assert len(result) == len(text)
    assert result != result[::-1]
    assert sum(a != b for a, b in zip(text, result)) == 1


def test_break_empty_raises():
    with pytest.raises(ValueError):
        break_palindrome("")


def test_anagram_count_every_window():
    text = "aaaaaa"
    pattern = "aa"
    assert count_anagram_occurrences(pattern, text) == len(text) - len(pattern) + 1


def test_anagram_count_is_order_free():
    text = "forxxorfxdofr"
    assert count_anagram_occurrences("for", text) == count_anagram_occurrences("rof", text)
    assert count_anagram_occurrences("for", text) <= len(text) - 2


def test_anagram_pattern_longer_than_text():
    assert count_anagram_occurrences("abcd", "abc") == 0


def test_neo_sort_plain_alphabet_matches_sorted():
    words = ["pear", "apple", "app", "banana", "cherry"]
    assert neo_sort(string.ascii_lowercase, words) == sorted(words)


def test_neo_sort_reversed_alphabet():
    words = ["alpha", "bravo", "charlie", "delta"]
    assert neo_sort(string.ascii_lowercase[::-1], words) == sorted(words, reverse=True)


def test_neo_sort_prefix_first():
    assert neo_sort(string.ascii_lowercase[::-1], ["zz", "z"]) == ["z", "zz"]


def test_min_max_char_example():
    assert min_max_char("sample string") == ("a", "t")


def test_min_max_char_blank_raises():
    with pytest.raises(ValueError):
        min_max_char("   ")


def test_strong_password_needs_every_class():
    parts = [
        string.ascii_uppercase[:1],
        string.ascii_lowercase[:1],
        string.digits[:1],
        string.punctuation[:1],
    ]
    assert is_strong_password("".join(parts))
    for skipped in range(len(parts)):
        candidate = "".join(part for i, part in enumerate(parts) if i != skipped)
        assert not is_strong_password(candidate)


def test_plain_word_is_not_strong():
    password = "password"
    assert not is_strong_password(password)


def test_pm_conversion():
    assert to_24_hour("07:05:45PM") == "19:05:45"


def test_midnight_and_noon():
    assert to_24_hour("12:00:00AM") == "00" + "12:00:00AM"[2:8]
    assert to_24_hour("12:45:54PM") == "12:45:54PM"[:8]
    assert to_24_hour("09:15:00AM") == "09:15:00AM"[:8]


@pytest.mark.parametrize("bad", ["7:05:45PM", "07:05:45", "07-05-45PM", "07:05:45XM"])
def test_bad_time_raises(bad):
    with pytest.raises(ValueError):
        to_24_hour(bad)


def test_roman_round_trip():
    for number in range(1, 4000):
        numeral = _to_roman(number)
        assert roman_to_int(numeral) == number
        assert roman_to_decimal(numeral) == number


@pytest.mark.parametrize("bad", ["", "ABC", "iv", "X1"])
def test_roman_invalid_raises(bad):
    with pytest.raises(ValueError):
        roman_to_int(bad)
    with pytest.raises(ValueError):
        roman_to_decimal(bad)


def test_main_prints_value(capsys):
    assert main(["MMXX"]) == 0
    assert capsys.readouterr().out == f"{roman_to_decimal('MMXX')}\n"


def test_main_without_argument(capsys):
    assert main([]) == 0
    assert "Usage" in capsys.readouterr().err


def test_main_invalid_numeral(capsys):
    assert main(["ABC"]) == 0
    captured = capsys.readouterr()
    assert "Error" in captured.err
    assert captured.out == ""