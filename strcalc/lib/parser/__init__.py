"""
Parser package for strcalc input.

Resolves the optional delimiter header and splits the remaining body into
raw tokens.
"""

from .delimiters import delimiters_resolve, escapes_normalize
from .tokenizer import DelimiterTokenizer, tokens_split

__all__ = [
    "delimiters_resolve",
    "escapes_normalize",
    "DelimiterTokenizer",
    "tokens_split",
]
