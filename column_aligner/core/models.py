"""Core data models

Value records shared by the rule compiler, the segmenter and the aligner.
"""

from dataclasses import dataclass, field
from enum import Enum
import re
from typing import List, Optional


class Spacing(Enum):
    """Where padding goes relative to the matched token"""

    BEFORE = "b"  # 在匹配前插入空格
    AFTER = "a"  # 在匹配字符后插入空格

    @classmethod
    def from_flag(cls, flag: str) -> "Spacing":
        """'a' means after; any other flag (including empty) means before"""
        return cls.AFTER if flag == "a" else cls.BEFORE


class ConfigurationError(ValueError):
    """Raised when a rule specification or cursor setting cannot be used.

    The offending segment is kept on the exception so callers can report
    exactly which part of the configuration was rejected.
    """

    def __init__(self, message: str, segment: Optional[str] = None):
        super().__init__(message)
        self.segment = segment


@dataclass(frozen=True)
class AlignmentRule:
    """A compiled alignment rule: pattern plus spacing directive"""

    pattern: re.Pattern
    spacing: Spacing = Spacing.BEFORE

    @property
    def has_group(self) -> bool:
        """Whether the pattern declares at least one capturing group"""
        return self.pattern.groups > 0

    def __repr__(self):
        return f"AlignmentRule(/{self.pattern.pattern}/, {self.spacing.name})"

    def to_dict(self) -> dict:
        return {"pattern": self.pattern.pattern, "spacing": self.spacing.name}


@dataclass
class Block:
    """A contiguous run of lines aligned as one unit.

    `start` is inclusive and `end` exclusive, both 0-based line indices in
    the original text.
    """

    lines: List[str] = field(default_factory=list)
    start: int = 0
    end: int = 0

    def __len__(self) -> int:
        return self.end - self.start

    def contains(self, line_index: int) -> bool:
        return self.start <= line_index < self.end

    @property
    def text(self) -> str:
        return "".join(self.lines)

    def __repr__(self):
        return f"Block([{self.start}, {self.end}), lines={len(self.lines)})"


@dataclass
class FormatOptions:
    """Invocation settings for one formatting pass.

    Attributes:
        rule_spec: Serialized rule specification; None selects the defaults
        selected_text: When True every block is formatted
        line_number: 1-based cursor line used when selected_text is False
    """

    rule_spec: Optional[str] = None
    selected_text: bool = False
    line_number: Optional[int] = None
