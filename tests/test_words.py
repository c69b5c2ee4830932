import pytest

from pipex.libft.words import split, striteri, strjoin, strmapi, strtrim, substr


def test_split_skips_runs_of_separators():
    assert split("  tripouille  42  ", " ") == ["tripouille", "42"]


def test_split_empty_and_only_separators():
    assert split("", " ") == []
    assert split("::::", ":") == []


def test_split_path_round_trip():
    parts = ["/usr/bin", "/bin", "/usr/local/bin"]
    assert split(":".join(parts), ":") == parts


def test_split_words_contain_no_separator():
    words = split("ls  -la   /tmp", " ")
    assert all(" " not in w and w for w in words)
    assert " ".join(words) == "ls -la /tmp"


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")


def test_split_rejects_none():
    with pytest.raises(TypeError):
        split(None, " ")


def test_substr_is_slice_of_input():
    text = "pipeline"
    part = substr(text, 2, 3)
    assert len(part) == 3
    assert text.startswith(part, 2)


def test_substr_clamps_length_to_end():
    text = "hello"
    assert substr(text, 1, 100) == text[1:]


def test_substr_empty_cases():
    assert substr("abc", 3, 2) == ""
    assert substr("abc", 10, 2) == ""
    assert substr("abc", 0, 0) == ""


def test_substr_negative_raises():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strjoin_concatenates():
    result = strjoin("/usr/bin", "/")
    assert result.startswith("/usr/bin")
    assert result.endswith("/")
    assert len(result) == len("/usr/bin") + 1


def test_strjoin_none_raises():
    with pytest.raises(TypeError):
        strjoin(None, "x")


def test_strtrim_both_ends():
    assert strtrim("xxhixx", "x") == "hi"


def test_strtrim_empty_set_returns_copy():
    assert strtrim("  keep  ", "") == "  keep  "


def test_strtrim_all_trimmed():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_keeps_inner_characters():
    assert strtrim(" a b ", " ") == "a b"


def test_strmapi_passes_index():
    seen = []

    def record(i, ch):
        seen.append(i)
        return ch

    text = "abcd"
    assert strmapi(text, record) == text
    assert seen == [0, 1, 2, 3]


def test_strmapi_transforms():
    assert strmapi("abc", lambda i, ch: ch.upper()) == "ABC"


def test_striteri_replaces_in_place():
    chars = list("abc")
    striteri(chars, lambda i, ch: ch.upper() if i % 2 == 0 else None)
    assert chars == ["A", "b", "C"]


def test_striteri_missing_arguments_do_nothing():
    chars = list("xy")
    striteri(chars, None)
    assert chars == ["x", "y"]
    striteri(None, lambda i, ch: ch)