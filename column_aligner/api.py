"""
API module for column alignment.
Provides high-level interface for easy integration.
"""

from typing import List, Optional, Tuple
import logging

from .alignment import BlockAligner, BlockResult
from .core.models import FormatOptions
from .core.rules import compile_rules
from .core.segmenter import find_block_containing_line, find_blocks


logger = logging.getLogger(__name__)


class ColumnAligner:
    """Formats text by aligning rule matches within indentation blocks.

    Rules are compiled once on construction, so a malformed specification
    raises ConfigurationError before any text is touched. Every call
    resegments its input from scratch; no state carries over between calls.
    """

    def __init__(self, rule_spec: Optional[str] = None):
        self.rules = compile_rules(rule_spec)
        self._aligner = BlockAligner(self.rules)

    def format_all(self, text: str) -> str:
        """Format every block of the text"""
        return self._join(self._format_blocks(text, None))

    def format_block_containing_line(self, text: str, line_index: int) -> str:
        """Format only the block holding the 0-based line index.

        All other blocks are returned byte-identical. If no block holds the
        line, the text is returned unchanged.
        """
        return self._join(self._format_blocks(text, line_index))

    def format(self, text: str, options: Optional[FormatOptions] = None) -> str:
        formatted, _ = self.format_with_report(text, options)
        return formatted

    def format_with_report(
        self, text: str, options: Optional[FormatOptions] = None
    ) -> Tuple[str, List[BlockResult]]:
        """Format according to options and return per-block results too.

        A rule_spec in the options takes precedence over the rules given on
        construction.

        Raises:
            ConfigurationError: options.rule_spec is malformed
        """
        options = options or FormatOptions(selected_text=True)
        aligner = self._aligner
        if options.rule_spec is not None:
            aligner = BlockAligner(compile_rules(options.rule_spec))

        if options.selected_text:
            results = self._format_blocks(text, None, aligner)
        elif options.line_number is None:
            logger.warning("No cursor line given; text left unchanged")
            results = [
                BlockResult(block=block, text=block.text, formatted=False)
                for block in find_blocks(text)
            ]
        else:
            results = self._format_blocks(text, options.line_number - 1, aligner)

        return self._join(results), results

    def _format_blocks(
        self,
        text: str,
        line_index: Optional[int],
        aligner: Optional[BlockAligner] = None,
    ) -> List[BlockResult]:
        aligner = aligner or self._aligner
        blocks = find_blocks(text)
        logger.debug(f"Found {len(blocks)} blocks")

        target = None
        if line_index is not None:
            target = find_block_containing_line(blocks, line_index)
            if target is None:
                logger.warning(
                    f"Line {line_index + 1} is outside the text; nothing to align"
                )

        results = []
        for block in blocks:
            if line_index is None or block is target:
                results.append(aligner.format_block(block))
            else:
                results.append(BlockResult(block=block, text=block.text, formatted=False))
        return results

    @staticmethod
    def _join(results: List[BlockResult]) -> str:
        return "".join(r.text for r in results)


def format_text(text: str, options: Optional[FormatOptions] = None) -> str:
    """
    Convenience helper: compile the options' rules and format the text.

    Raises:
        ConfigurationError: the rule specification is malformed
    """
    options = options or FormatOptions(selected_text=True)
    return ColumnAligner(options.rule_spec).format(text, options)
