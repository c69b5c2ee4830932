import pytest

from pipex.libft.text import (
    strchr,
    strcmp,
    strdup,
    strlcat,
    strlcpy,
    strlen,
    strncmp,
    strnstr,
    strrchr,
)


def test_strlen_counts_characters():
    assert strlen("hello") == len("hello")
    assert strlen("") == 0


def test_strlen_of_missing_string():
    assert strlen(None) == 0


@pytest.mark.parametrize("c", ["a", "b", "z"])
def test_strchr_first_occurrence(c):
    s = "abcabc"
    expected = s.find(c)
    assert strchr(s, c) == (None if expected < 0 else expected)


def test_strchr_accepts_integer_code():
    s = "path/to/file"
    assert strchr(s, ord("/")) == s.index("/")


def test_strchr_terminator_is_at_end():
    s = "hello"
    assert strchr(s, "\0") == len(s)
    assert strchr(s, 0) == len(s)


def test_strchr_rejects_multichar():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


@pytest.mark.parametrize("c", ["a", "c", "q"])
def test_strrchr_last_occurrence(c):
    s = "abcabc"
    expected = s.rfind(c)
    assert strrchr(s, c) == (None if expected < 0 else expected)


def test_strrchr_terminator_is_at_end():
    assert strrchr("abc", "\0") == len("abc")


def test_strncmp_within_prefix():
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_shorter_string_ends_first():
    assert strncmp("ab", "abc", 5) == -ord("c")


def test_strncmp_stops_at_common_end():
    assert strncmp("same", "same", 100) == 0


def test_strcmp_equal_and_antisymmetric():
    assert strcmp("here_doc", "here_doc") == 0
    assert strcmp("EOF", "EOG") < 0
    assert strcmp("EOG", "EOF") == -strcmp("EOF", "EOG")


def test_strcmp_prefix():
    assert strcmp("abc", "ab") == ord("c")


def test_strnstr_empty_needle():
    assert strnstr("anything", "", 0) == 0


def test_strnstr_found_within_length():
    big = "lorem ipsum dolor"
    assert strnstr(big, "ipsum", len(big)) == big.find("ipsum")


def test_strnstr_not_found_when_length_cuts_needle():
    big = "lorem ipsum dolor"
    assert strnstr(big, "ipsum", big.find("ipsum") + 3) is None


def test_strnstr_missing():
    assert strnstr("abc", "zz", 3) is None


def test_strdup_equal_copy():
    assert strdup("PATH=/bin") == "PATH=/bin"


def test_strlcpy_truncates_and_reports_source_length():
    src = "abcdef"
    result = strlcpy("", src, 4)
    assert result.text == src[:3]
    assert result.length == len(src)


def test_strlcpy_fits_whole_source():
    src = "abc"
    assert strlcpy("old", src, 10) == (src, len(src))


def test_strlcpy_zero_size_leaves_destination():
    assert strlcpy("keep", "abc", 0) == ("keep", len("abc"))


def test_strlcat_appends_within_size():
    dst, src = "ab", "cdef"
    result = strlcat(dst, src, 5)
    assert result.text == dst + src[:2]
    assert result.length == len(dst) + len(src)


def test_strlcat_full_append():
    dst, src = "ab", "cd"
    assert strlcat(dst, src, 100) == (dst + src, len(dst) + len(src))


def test_strlcat_size_not_larger_than_destination():
    dst, src = "abcd", "xyz"
    result = strlcat(dst, src, 3)
    assert result.text == dst
    assert result.length == 3 + len(src)