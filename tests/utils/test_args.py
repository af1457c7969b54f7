# topmark:header:start
#
#   project      : MvnCheck
#   file         : test_args.py
#   file_relpath : tests/utils/test_args.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `mvncheck.utils.args.tokenize_arg_string`."""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from mvncheck.utils.args import tokenize_arg_string

from tests.conftest import mark_hypothesis_slow, parametrize

# Tokens without whitespace or quotes survive a join/split unchanged
plain_token = st.text(
    alphabet=st.characters(
        exclude_categories=("Cs", "Zs", "Zl", "Zp", "Cc"),
        exclude_characters="'\"",
    ),
    min_size=1,
    max_size=12,
)

# Any Unicode whitespace separates tokens
separator = st.text(
    alphabet=st.sampled_from([" ", "\t", "\n", "\r", "\u00a0", "\u3000"]),
    min_size=1,
    max_size=3,
)

quoted_token = st.builds(
    lambda quote, words, sep: quote + sep.join(words) + quote,
    st.sampled_from(["'", '"']),
    st.lists(plain_token, min_size=1, max_size=4),
    separator,
)


@parametrize(
    "raw, expected",
    [
        ("a b c", ["a", "b", "c"]),
        ("a 'b c' d", ["a", "'b c'", "d"]),
        ("", []),
        ("   ", []),
        ("  clean   install  ", ["clean", "install"]),
        ('-Dmsg="hello world" verify', ['-Dmsg="hello world"', "verify"]),
        ("\"it's\" done", ["\"it's\"", "done"]),
        ("a 'b c", ["a", "'b c"]),
        ("clean\tinstall\n-B", ["clean", "install", "-B"]),
    ],
)
def test_tokenize_examples(raw: str, expected: list[str]) -> None:
    """Quotes group words and stay in the token; whitespace runs split."""
    assert tokenize_arg_string(raw) == expected


def test_tokenize_sequence_is_stringified() -> None:
    """Sequence input is returned element by element as strings."""
    assert tokenize_arg_string(["clean", 1, True]) == ["clean", "1", "True"]


def test_tokenize_sequence_keeps_spaces_inside_elements() -> None:
    """Already tokenized input is never re-split."""
    assert tokenize_arg_string(["-Dx=a b", "verify"]) == ["-Dx=a b", "verify"]


@given(st.lists(st.text(max_size=10), max_size=8))
def test_tokenize_sequence_identity(items: list[str]) -> None:
    """A sequence of strings is returned unchanged."""
    assert tokenize_arg_string(items) == items


@given(st.lists(plain_token, max_size=8), st.sampled_from([" ", "  ", "\t"]))
def test_tokenize_join_roundtrip(tokens: list[str], sep: str) -> None:
    """Joining plain tokens with whitespace and tokenizing gives them back."""
    assert tokenize_arg_string(sep.join(tokens)) == tokens


@given(st.text(max_size=40))
def test_tokens_never_empty_and_unquoted_tokens_have_no_space(raw: str) -> None:
    """No empty tokens; whitespace only appears inside tokens that hold a quote."""
    for token in tokenize_arg_string(raw):
        assert token
        if not any(q in token for q in ("'", '"')):
            assert not any(c.isspace() for c in token)


@mark_hypothesis_slow
@settings(max_examples=300, deadline=None)
@given(
    st.lists(st.one_of(plain_token, quoted_token), max_size=10),
    st.data(),
)
def test_tokenize_mixed_quoting_roundtrip(tokens: list[str], data: st.DataObject) -> None:
    """Plain and quoted tokens joined by arbitrary whitespace runs come back unchanged."""
    seps: list[str] = [data.draw(separator) for _ in range(len(tokens) + 1)]
    raw: str = seps[0] + "".join(t + s for t, s in zip(tokens, seps[1:], strict=True))

    assert tokenize_arg_string(raw) == tokens
