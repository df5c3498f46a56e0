"""Alignment value records

Transient results produced while aligning a single block.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..core.models import AlignmentRule, Block


@dataclass
class RuleScore:
    """A candidate rule and the smallest column it matches at in a block"""

    rule: AlignmentRule
    min_offset: Optional[int] = None

    def __repr__(self):
        return f"RuleScore({self.rule!r}, min_offset={self.min_offset})"


@dataclass
class AppliedRule:
    """A rule applied to a block and the column it padded to"""

    rule: AlignmentRule
    width: int

    def to_dict(self) -> Dict[str, Any]:
        return {**self.rule.to_dict(), "width": self.width}


@dataclass
class BlockResult:
    """Outcome of formatting (or skipping) one block"""

    block: Block
    text: str
    formatted: bool = True
    applied: List[AppliedRule] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return self.text != self.block.text

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典"""
        return {
            "from": self.block.start,
            "to": self.block.end,
            "formatted": self.formatted,
            "changed": self.changed,
            "applied_rules": [a.to_dict() for a in self.applied],
        }
