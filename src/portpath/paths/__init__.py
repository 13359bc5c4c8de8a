# Copyright (c) 2024 Portpath Contributors
# MIT License

"""
Path string handling: prefix grammar, normalization and file name helpers.

Nothing in this package touches the file system.
"""

from portpath.paths.case import CaseSensitivity
from portpath.paths.normalizer import concat, normalize, normalize_no_end_separator
from portpath.paths.prefix import NOT_FOUND, Prefix, PrefixKind, get_prefix, parse_prefix, prefix_length

__all__ = [
    "CaseSensitivity",
    "NOT_FOUND",
    "Prefix",
    "PrefixKind",
    "concat",
    "get_prefix",
    "normalize",
    "normalize_no_end_separator",
    "parse_prefix",
    "prefix_length",
]
