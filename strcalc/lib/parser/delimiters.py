r"""
Delimiter header resolution.

An input may open with a header line declaring extra separators:

    //;\n1;2            single literal delimiter ";"
    //[***]\n1***2      bracketed delimiter of any length
    //[*][!!]\n1*2!!3   several bracketed delimiters

The header is recognised only when the input starts with "//" and contains a
newline. Anything else is treated as a plain body, so resolution never fails.
Console-typed escapes (the literal text "\r\n" or "\n") are turned into real
newlines before the header is looked for.
"""

from typing import Final, Iterable, Sequence
from strcalc.models.dataModel import DelimiterResolution

HEADER_MARKER: Final[str] = "//"
BRACKET_OPEN: Final[str] = "["
BRACKET_CLOSE: Final[str] = "]"


def escapes_normalize(text: str) -> str:
    r"""Replace literal "\r\n" and "\n" escape text with a real newline."""
    return text.replace("\\r\\n", "\n").replace("\\n", "\n")


def brackets_scan(header: str) -> list[str]:
    """
    Extract the contents of every [...] group in a header.

    Each group runs from a "[" to the next "]"; text between groups is
    skipped. An unterminated "[" ends the scan.

    :param header: Header text without the leading marker.
    :return: Group contents in order of appearance, empties included.
    """
    groups: list[str] = []
    pos: int = 0
    while True:
        start: int = header.find(BRACKET_OPEN, pos)
        if start < 0:
            break
        end: int = header.find(BRACKET_CLOSE, start + 1)
        if end < 0:
            break
        groups.append(header[start + 1 : end])
        pos = end + 1
    return groups


def header_parse(header: str) -> list[str]:
    """
    Interpret header text as a list of declared delimiters.

    :param header: Text between "//" and the first newline.
    :return: The declared delimiters (possibly empty strings).
    """
    if header.startswith(BRACKET_OPEN):
        return brackets_scan(header)
    return [header]


def delimiters_merge(*groups: Iterable[str]) -> list[str]:
    """Concatenate delimiter groups, dropping empties and repeats."""
    merged: list[str] = []
    for group in groups:
        for delimiter in group:
            if delimiter and delimiter not in merged:
                merged.append(delimiter)
    return merged


def delimiters_resolve(
    raw_input: str, base_delimiters: Sequence[str]
) -> DelimiterResolution:
    """Split a raw input into its body and the delimiters that apply to it.

    Args:
        raw_input: The text as typed or piped by the user
        base_delimiters: Configured separators that always apply

    Returns:
        DelimiterResolution with the residual body and merged delimiters
    """
    text: str = escapes_normalize(raw_input or "")

    if not text.startswith(HEADER_MARKER):
        return DelimiterResolution(
            body=text, delimiters=delimiters_merge(base_delimiters)
        )

    newline: int = text.find("\n")
    if newline < len(HEADER_MARKER):
        return DelimiterResolution(
            body=text, delimiters=delimiters_merge(base_delimiters)
        )

    header: str = text[len(HEADER_MARKER) : newline]
    return DelimiterResolution(
        body=text[newline + 1 :],
        delimiters=delimiters_merge(base_delimiters, header_parse(header)),
    )
