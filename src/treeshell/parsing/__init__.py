"""
treeshell line parsing.

This package provides redirection marker extraction and quote-aware
tokenization of command lines.
"""

from treeshell.parsing.redirection import (
    INPUT_FILE_KEY,
    MODIFIER_KEY,
    OUTPUT_FILE_KEY,
    Redirection,
    parse_redirection,
    split_marker,
)
from treeshell.parsing.tokenizer import tokenize

__all__ = [
    "INPUT_FILE_KEY",
    "MODIFIER_KEY",
    "OUTPUT_FILE_KEY",
    "Redirection",
    "parse_redirection",
    "split_marker",
    "tokenize",
]
