"""
Longest-match delimiter tokenizer.

Splits a body into raw string tokens. At every position the delimiters are
tried longest first, so "r9r" is consumed whole even when "r" is also a
delimiter. Adjacent delimiters produce empty tokens, which are kept.

Example:
    tokenizer = DelimiterTokenizer([",", "***"])
    tokenizer.tokenize("1***2,,3")   # ["1", "2", "", "3"]
"""

from typing import Iterable, Self


class DelimiterTokenizer:
    """Tokenizer over a fixed delimiter set.

    Attributes:
        delimiters: Distinct non-empty delimiters, longest first; equal
            lengths keep their declaration order.
    """

    def __init__(self: Self, delimiters: Iterable[str]) -> None:
        distinct: list[str] = []
        for delimiter in delimiters:
            if delimiter and delimiter not in distinct:
                distinct.append(delimiter)
        self.delimiters: list[str] = sorted(distinct, key=len, reverse=True)

    def match_at(self: Self, text: str, pos: int) -> str | None:
        """Return the delimiter that starts at `pos`, if any."""
        for delimiter in self.delimiters:
            if text.startswith(delimiter, pos):
                return delimiter
        return None

    def tokenize(self: Self, body: str) -> list[str]:
        """Split `body` into tokens.

        Args:
            body: Text to split

        Returns:
            list[str]: N+1 tokens for N delimiter occurrences; an empty body
            gives a single empty token
        """
        if not body:
            return [""]

        tokens: list[str] = []
        current: list[str] = []
        pos: int = 0
        while pos < len(body):
            delimiter: str | None = self.match_at(body, pos)
            if delimiter is None:
                current.append(body[pos])
                pos += 1
                continue
            tokens.append("".join(current))
            current = []
            pos += len(delimiter)

        tokens.append("".join(current))
        return tokens


def tokens_split(body: str, delimiters: Iterable[str]) -> list[str]:
    """Tokenize `body` against `delimiters` in one call."""
    return DelimiterTokenizer(delimiters).tokenize(body)
