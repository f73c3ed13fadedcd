"""Whitespace tokenizing helpers for job lines."""

from __future__ import annotations

# str.isspace() also accepts the ASCII file/group/record/unit separators,
# which are not Unicode White_Space.
_NOT_WHITESPACE = frozenset("\x1c\x1d\x1e\x1f")


def is_space(char: str) -> bool:
    """Whether ``char`` has the Unicode White_Space property."""
    return char.isspace() and char not in _NOT_WHITESPACE


def trim_space(text: str) -> str:
    """Strip leading and trailing characters matched by :func:`is_space`."""
    start, end = 0, len(text)
    while start < end and is_space(text[start]):
        start += 1
    while end > start and is_space(text[end - 1]):
        end -= 1
    return text[start:end]


def fields_n(text: str, n: int) -> list[str]:
    """Split ``text`` on whitespace into at most ``n`` fields.

    The first ``n - 1`` fields are whitespace-delimited tokens. The last
    field is the rest of the string, stripped at both ends but with its
    internal whitespace kept verbatim.

    Example::

        fields_n("root  echo  hi", 2)  # ["root", "echo  hi"]
    """
    text = trim_space(text)
    fields: list[str] = []
    buf: list[str] = []
    for offset, char in enumerate(text):
        if n < 2:
            fields.append(trim_space(text[offset:]))
            break
        if is_space(char):
            if buf:
                fields.append("".join(buf))
                n -= 1
                buf = []
        else:
            buf.append(char)
    if buf:
        fields.append("".join(buf))
    return fields
