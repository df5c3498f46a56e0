"""Alignment module

Per-block rule scoring and column padding.
"""

from .base import AppliedRule, BlockResult, RuleScore
from .block_aligner import BlockAligner

__all__ = [
    "AppliedRule",
    "BlockResult",
    "RuleScore",
    "BlockAligner",
]
