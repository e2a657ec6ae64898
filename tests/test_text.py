import pytest

from judgekit.text import (
    ball_position,
    is_valid_parentheses,
    longest_runs,
    min_max_sum,
    most_common_letter,
    octopus_values,
    palindrome_verdicts,
    repeat_characters,
    time_until,
    vowel_counts,
    word_count,
)


@pytest.mark.parametrize("words", [["The", "Curious", "Case"], ["one"], ["a", "b", "c", "d"]])
def test_word_count(words):
    sentence = " ".join(words)
    assert word_count(sentence) == len(words)
    assert word_count(" " + sentence + " ") == len(words)


def test_word_count_blank():
    assert word_count(" ") == 0


def test_most_common_letter():
    assert most_common_letter("aAb") == "A"
    assert most_common_letter("zZa") == "Z"
    assert most_common_letter("ab") == "?"


def test_palindrome_verdicts():
    assert palindrome_verdicts(["121", "1231", "0", "11"]) == ["yes", "no"]


def test_vowel_counts():
    assert vowel_counts(["AEIOUaeiou", "bcd", "#", "aaa"]) == [len("AEIOUaeiou"), 0]


def test_time_until_round_trip():
    for now, start in [("13:52:30", "14:00:00"), ("23:00:00", "01:30:15"), ("00:00:01", "00:00:00")]:
        left = time_until(now, start)
        h, m, s = (int(p) for p in left.split(":"))
        nh, nm, ns = (int(p) for p in now.split(":"))
        sh, sm, ss = (int(p) for p in start.split(":"))
        total = nh * 3600 + nm * 60 + ns + h * 3600 + m * 60 + s
        assert total % 86400 == sh * 3600 + sm * 60 + ss
        assert len(left) == 8


def test_time_until_same_moment():
    assert time_until("12:00:00", "12:00:00") == "00:00:00"


def test_ball_position():
    assert ball_position([]) == 1
    assert ball_position([(2, 3)]) == 1
    assert ball_position([(1, 3)]) == 3
    assert ball_position([(1, 3), (3, 2)]) == 2


def test_octopus_single_digits():
    assert octopus_values(["-", "%", "/", "#", "@"]) == [0, 7, -1]


@pytest.mark.parametrize("numeral", ["\\", "(@", "?>&", "%/"])
def test_octopus_shift(numeral):
    (value,) = octopus_values([numeral])
    (shifted,) = octopus_values([numeral + "-"])
    assert shifted == value * 8


def test_octopus_unknown_digit():
    with pytest.raises(ValueError):
        octopus_values(["x"])


def test_longest_runs():
    assert longest_runs(["12345678", "11111111"]) == [1, len("11111111")]
    runs = longest_runs(["12222345", "11211133"])
    assert all(1 <= run <= 8 for run in runs)


def test_longest_runs_empty():
    with pytest.raises(ValueError):
        longest_runs([""])


@pytest.mark.parametrize("count,text", [(3, "ABC"), (5, "/HTP"), (1, "xyz")])
def test_repeat_characters(count, text):
    result = repeat_characters(count, text)
    assert len(result) == count * len(text)
    assert result[::count] == text


def test_min_max_sum():
    low, high = min_max_sum("11", "25")
    assert low <= high
    assert high - low == 1
    assert min_max_sum(12, 34) == (46, 46)


def test_parentheses():
    assert is_valid_parentheses("(())()") is True
    assert is_valid_parentheses(")(") is False
    assert is_valid_parentheses("(()") is False