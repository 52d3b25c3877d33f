from hypothesis import given, strategies as st

from algonote.strings import failure_function, kmp, lcs_length, z_function

SMALL_TEXT = st.text(alphabet="ab", max_size=30)


def test_failure_function_example():
    assert failure_function("aabaa") == [-1, 0, -1, 0, 1]


@given(st.text(alphabet="abc", min_size=1, max_size=25))
def test_failure_function_gives_longest_proper_border(pattern):
    pi = failure_function(pattern)
    assert len(pi) == len(pattern)
    for i, border in enumerate(pi):
        prefix = pattern[: i + 1]
        k = border + 1
        assert k <= i
        assert prefix[:k] == prefix[len(prefix) - k :]
        assert all(prefix[:m] != prefix[-m:] for m in range(k + 1, i + 1))


def test_kmp_overlapping_matches():
    assert kmp("aaaa", "aa") == [0, 1, 2]


def test_kmp_empty_pattern_has_no_matches():
    assert kmp("abc", "") == []


@given(SMALL_TEXT, st.text(alphabet="ab", min_size=1, max_size=4))
def test_kmp_finds_every_occurrence(text, pattern):
    expected = [
        i for i in range(len(text) - len(pattern) + 1) if text.startswith(pattern, i)
    ]
    assert kmp(text, pattern) == expected


@given(SMALL_TEXT)
def test_z_function_values_are_maximal_prefix_matches(s):
    z = z_function(s)
    assert len(z) == len(s)
    for i, length in enumerate(z):
        assert s[:length] == s[i : i + length]
        assert i + length == len(s) or s[length] != s[i + length]


def test_z_function_first_entry_is_length():
    s = "abacaba"
    assert z_function(s)[0] == len(s)
    assert z_function("") == []


def test_lcs_known_example():
    assert lcs_length("ACAYKP", "CAPCAK") == 4


@given(st.text(alphabet="ABC", max_size=30), st.text(alphabet="ABC", max_size=30))
def test_lcs_symmetric_and_bounded(a, b):
    length = lcs_length(a, b)
    assert length == lcs_length(b, a)
    assert 0 <= length <= min(len(a), len(b))


@given(st.text(alphabet="xyz", max_size=30), st.text(alphabet="xyz", max_size=10))
def test_lcs_with_prefix_extension(a, tail):
    assert lcs_length(a, a) == len(a)
    assert lcs_length(a, a + tail) == len(a)


@given(st.data())
def test_lcs_of_subsequence_is_its_length(data):
    a = data.draw(st.text(alphabet="ABCD", max_size=30))
    keep = data.draw(st.lists(st.booleans(), min_size=len(a), max_size=len(a)))
    b = "".join(ch for ch, k in zip(a, keep) if k)
    assert lcs_length(a, b) == len(b)


def test_lcs_with_disjoint_alphabets_is_zero():
    assert lcs_length("AAAA", "BBB") == 0
    assert lcs_length("", "ABC") == 0