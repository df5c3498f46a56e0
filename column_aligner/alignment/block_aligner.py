"""Block aligner

Chooses which rules apply to a block, in what order, and pads each rule's
match column to a common width.
"""

from typing import List, Sequence
import logging

import numpy as np

from ..core.models import AlignmentRule, Block, Spacing
from ..core.rules import offset_of
from ..core.whitespace import is_blank, normalize_whitespace, split_lines
from .base import AppliedRule, BlockResult, RuleScore


NO_MATCH = -1


class BlockAligner:
    """Aligns blocks independently with a fixed, ordered rule set.

    Responsibilities:
    - Score rules per block (uniform match, minimum offset)
    - Apply prioritized rules one after another to the block text

    Not responsible for:
    - Segmenting text into blocks (see core.segmenter)
    - Deciding which blocks get formatted (see api)
    """

    def __init__(self, rules: Sequence[AlignmentRule]):
        self.rules = tuple(rules)
        self.logger = logging.getLogger(self.__class__.__name__)

    def offset_matrix(self, lines: List[str]) -> np.ndarray:
        """Offsets of every rule on every line, shape (rules, lines).

        Cells where the rule does not match hold NO_MATCH.
        """
        offsets = np.full((len(self.rules), len(lines)), NO_MATCH, dtype=np.int64)
        for i, rule in enumerate(self.rules):
            for j, line in enumerate(lines):
                offset = offset_of(line, rule)
                if offset is not None:
                    offsets[i, j] = offset
        return offsets

    def prioritize_rules(self, text: str) -> List[RuleScore]:
        """Rules that match every content line, earliest column first.

        Rules whose minimum offset is 0 need no alignment and are dropped.
        Ties keep declaration order.
        """
        content_lines = [line for line in split_lines(text) if not is_blank(line)]
        if len(content_lines) < 2 or not self.rules:
            return []

        offsets = self.offset_matrix(content_lines)
        matches_all = (offsets != NO_MATCH).all(axis=1)
        min_offsets = offsets.min(axis=1)

        candidates = np.flatnonzero(matches_all & (min_offsets > 0))
        order = candidates[np.argsort(min_offsets[candidates], kind="stable")]

        scores = [RuleScore(self.rules[i], int(min_offsets[i])) for i in order]
        self.logger.debug(f"Candidate rules: {scores}")
        return scores

    def width(self, text: str, rule: AlignmentRule) -> int:
        """Largest offset of the rule over all lines of the text"""
        offsets = [offset_of(line, rule) for line in split_lines(text)]
        return max((o for o in offsets if o is not None), default=NO_MATCH)

    def align(self, text: str, rule: AlignmentRule, width: int) -> str:
        """Pad every content line so the rule's match lands on `width`"""
        aligned = []
        for line in split_lines(text):
            if is_blank(line):
                aligned.append(line)
                continue

            offset = offset_of(line, rule)
            if offset is None:
                # A surviving rule matches every content line; leave the line be
                self.logger.debug(f"{rule!r} no longer matches {line!r}")
                aligned.append(line)
                continue

            padding = " " * (width - offset)
            if rule.spacing is Spacing.AFTER:
                aligned.append(line[: offset + 1] + padding + line[offset + 1 :])
            else:
                aligned.append(line[:offset] + padding + line[offset:])

        return "".join(aligned)

    def format_block(self, block: Block) -> BlockResult:
        """Normalize a block's whitespace and apply its prioritized rules"""
        text = normalize_whitespace(block.text)
        applied = []

        for score in self.prioritize_rules(text):
            width = self.width(text, score.rule)
            text = self.align(text, score.rule, width)
            applied.append(AppliedRule(rule=score.rule, width=width))

        self.logger.debug(f"Formatted {block!r} with {len(applied)} rules")
        return BlockResult(block=block, text=text, applied=applied)
