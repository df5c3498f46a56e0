"""
Column Aligner: align operators, colons and commas of neighbouring lines.
"""

import logging

from .api import ColumnAligner, format_text
from .core.models import AlignmentRule, Block, ConfigurationError, FormatOptions, Spacing
from .core.rules import DEFAULT_RULE_SPEC, RULE_SEPARATOR, compile_rules
from .core.whitespace import normalize_whitespace
from .core.segmenter import find_blocks
from . import core

# Alignment module
from . import alignment
from .alignment import BlockAligner, BlockResult, RuleScore

# Output module
from .output.formatter import OutputFormatter

__version__ = "0.1.0"
__all__ = [
    "ColumnAligner",
    "format_text",
    "AlignmentRule",
    "Block",
    "ConfigurationError",
    "FormatOptions",
    "Spacing",
    "DEFAULT_RULE_SPEC",
    "RULE_SEPARATOR",
    "compile_rules",
    "normalize_whitespace",
    "find_blocks",
    "BlockAligner",
    "BlockResult",
    "RuleScore",
    "OutputFormatter",
    "core",
    "alignment",
]

# Configure default logging format to be minimal
_handler = logging.StreamHandler()
_handler.setFormatter(logging.Formatter("%(message)s"))
_logger = logging.getLogger("column_aligner")
_logger.addHandler(_handler)
_logger.setLevel(logging.INFO)
