# topmark:header:start
#
#   project      : MvnCheck
#   file         : args.py
#   file_relpath : src/mvncheck/utils/args.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tokenize user-supplied Maven argument strings.

The tokenizer is simpler than POSIX shell quoting: a quote only
suppresses splitting until the matching closing quote, and the quote
characters stay in the token. ``a 'b c' d`` therefore yields
``["a", "'b c'", "d"]``. Quotes must stay in the tokens; do not switch
to `shlex`.
"""

from __future__ import annotations

from collections.abc import Sequence

QUOTES: tuple[str, ...] = ("'", '"')


def tokenize_arg_string(arg_string: str | Sequence[object]) -> list[str]:
    """Split ``arg_string`` into argument tokens.

    Args:
        arg_string (str | Sequence[object]): Raw argument string, or an already
            tokenized sequence.

    Returns:
        list[str]: The tokens. A sequence input is returned element by element,
        with non-string elements converted via `str`. A string input is trimmed
        and split on runs of unquoted whitespace; an empty string yields ``[]``.
    """
    if not isinstance(arg_string, str):
        return [e if isinstance(e, str) else str(e) for e in arg_string]

    args: list[str] = []
    opening: str | None = None
    prev_c: str | None = None
    index: int = 0
    for c in arg_string.strip():
        if c.isspace() and opening is None:
            if prev_c is not None and not prev_c.isspace():
                index += 1
            prev_c = c
            continue
        prev_c = c
        if c == opening:
            opening = None
        elif c in QUOTES and opening is None:
            opening = c
        if index == len(args):
            args.append("")
        args[index] += c
    return args
