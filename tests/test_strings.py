import pytest

from algoshelf.leetcode.strings import (
    gcd_of_strings,
    is_subsequence,
    is_valid_brackets,
    largest_good_integer,
    length_of_longest_substring,
    longest_common_prefix,
    max_vowels,
    merge_alternately,
    remove_stars,
    reverse_vowels,
    reverse_words,
    roman_to_int,
    str_str,
)

_NUMERALS = [
    (1000, "M"), (900, "CM"), (500, "D"), (400, "CD"),
    (100, "C"), (90, "XC"), (50, "L"), (40, "XL"),
    (10, "X"), (9, "IX"), (5, "V"), (4, "IV"), (1, "I"),
]


def _to_roman(value):
    parts = []
    for amount, symbol in _NUMERALS:
        times, value = divmod(value, amount)
        parts.append(symbol * times)
    return "".join(parts)


def test_gcd_of_strings_common_unit():
    unit = "ab"
    assert gcd_of_strings(unit * 3, unit * 2) == unit


def test_gcd_of_strings_divides_both():
    a, b = "xyz" * 6, "xyz" * 4
    result = gcd_of_strings(a, b)
    assert result * (len(a) // len(result)) == a
    assert result * (len(b) // len(result)) == b


def test_gcd_of_strings_incompatible():
    assert not gcd_of_strings("ab", "ba")


@pytest.mark.parametrize(
    "symbol, value",
    [("I", 1), ("V", 5), ("X", 10), ("L", 50), ("C", 100), ("D", 500), ("M", 1000)],
)
def test_roman_symbols(symbol, value):
    assert roman_to_int(symbol) == value


def test_roman_subtractive_pair():
    assert roman_to_int("IV") == roman_to_int("V") - roman_to_int("I")
    assert roman_to_int("CM") == roman_to_int("M") - roman_to_int("C")


def test_roman_round_trip():
    for value in range(1, 4000):
        assert roman_to_int(_to_roman(value)) == value


@pytest.mark.parametrize("bad", ["", "XIZ", "abc"])
def test_roman_rejects_invalid(bad):
    with pytest.raises(ValueError):
        roman_to_int(bad)


def test_longest_common_prefix_shared():
    prefix = "fl"
    strs = [prefix + "ower", prefix + "ow", prefix + "ight"]
    assert longest_common_prefix(strs) == prefix


def test_longest_common_prefix_is_prefix_of_all():
    strs = ["interspecies", "interstellar", "interstate"]
    result = longest_common_prefix(strs)
    assert all(s.startswith(result) for s in strs)
    assert len({s[len(result)] for s in strs}) > 1


def test_longest_common_prefix_single_and_none():
    assert longest_common_prefix(["alone"]) == "alone"
    assert not longest_common_prefix(["dog", "racecar", "car"])
    assert not longest_common_prefix(["", "abc"])


def test_longest_common_prefix_empty_list():
    with pytest.raises(ValueError):
        longest_common_prefix([])


def test_max_vowels_all_vowels():
    s = "aeiou" * 2
    assert max_vowels(s, 3) == 3


def test_max_vowels_none():
    assert max_vowels("bcdfg", 2) == 0


def test_max_vowels_bounded_by_window():
    s = "abciiidef"
    for k in range(1, len(s) + 1):
        assert 0 <= max_vowels(s, k) <= k


def test_max_vowels_rejects_empty_window():
    with pytest.raises(ValueError):
        max_vowels("abc", 0)


def test_reverse_words_order():
    words = ["the", "sky", "is", "blue"]
    assert reverse_words("  ".join(words) + "  ") == " ".join(reversed(words))


def test_reverse_words_twice_normalises():
    s = "  a good   example "
    assert reverse_words(reverse_words(s)) == " ".join(s.split())


def test_merge_alternately_equal_lengths():
    w1, w2 = "abc", "xyz"
    result = merge_alternately(w1, w2)
    assert result[0::2] == w1
    assert result[1::2] == w2


def test_merge_alternately_tail():
    w1, w2 = "ab", "pqrs"
    result = merge_alternately(w1, w2)
    assert len(result) == len(w1) + len(w2)
    assert result.endswith(w2[len(w1):])
    assert sorted(result) == sorted(w1 + w2)


@pytest.mark.parametrize("s", ["()", "()[]{}", "{[]}", ""])
def test_valid_brackets(s):
    assert is_valid_brackets(s)


@pytest.mark.parametrize("s", ["(]", "([)]", "(", "a"])
def test_invalid_brackets(s):
    assert not is_valid_brackets(s)


def test_largest_good_integer_picks_largest():
    assert largest_good_integer("6777133339") == "777"


def test_largest_good_integer_result_in_input():
    num = "2300019"
    result = largest_good_integer(num)
    assert result in num
    assert len(set(result)) == 1


def test_largest_good_integer_none():
    assert not largest_good_integer("42352338")


def test_remove_stars():
    assert remove_stars("leet**cod*e") == "lecoe"


def test_remove_stars_without_stars():
    assert remove_stars("plain") == "plain"


def test_remove_stars_all_removed():
    assert not remove_stars("erase*****")


def test_remove_stars_leading_star():
    with pytest.raises(ValueError):
        remove_stars("*a")


@pytest.mark.parametrize(
    "haystack, needle",
    [("sadbutsad", "sad"), ("leetcode", "leeto"), ("mississippi", "issip"), ("aaa", "aaaa")],
)
def test_str_str_matches_find(haystack, needle):
    assert str_str(haystack, needle) == haystack.find(needle)


def test_str_str_missing():
    assert str_str("hello", "xyz") == -1


def test_longest_substring_distinct():
    s = "abcdef"
    assert length_of_longest_substring(s) == len(s)
    assert length_of_longest_substring(s * 3) == len(s)


def test_longest_substring_repeated_char():
    assert length_of_longest_substring("bbbbb") == len("b")


def test_longest_substring_empty():
    assert length_of_longest_substring("") == len("")


def test_reverse_vowels_involution():
    for s in ["hello", "leetcode", "AbEcIdOfU", "xyz"]:
        assert reverse_vowels(reverse_vowels(s)) == s


def test_reverse_vowels_keeps_consonants():
    s = "IceCreAm"
    result = reverse_vowels(s)
    vowels = set("aeiouAEIOU")
    for before, after in zip(s, result):
        if before not in vowels:
            assert after == before
    assert [c for c in result if c in vowels] == [c for c in reversed(s) if c in vowels]


def test_is_subsequence_true():
    t = "ahbgdc"
    assert is_subsequence(t[::2], t)
    assert is_subsequence("", t)


def test_is_subsequence_false():
    assert not is_subsequence("axc", "ahbgdc")
    assert not is_subsequence("ab", "ba")