"""
Core modules for column alignment.
"""

from .models import AlignmentRule, Block, ConfigurationError, FormatOptions, Spacing
from .rules import (
    DEFAULT_RULE_SPEC,
    RULE_SEPARATOR,
    compile_rules,
    offset_of,
    parse_rule,
)
from .whitespace import normalize_whitespace, split_lines
from .segmenter import find_blocks, find_block_containing_line

__all__ = [
    "AlignmentRule",
    "Block",
    "ConfigurationError",
    "FormatOptions",
    "Spacing",
    "DEFAULT_RULE_SPEC",
    "RULE_SEPARATOR",
    "compile_rules",
    "offset_of",
    "parse_rule",
    "normalize_whitespace",
    "split_lines",
    "find_blocks",
    "find_block_containing_line",
]
