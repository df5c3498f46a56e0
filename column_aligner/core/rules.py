import re
import logging

from typing import List, Optional, Tuple
from .models import AlignmentRule, ConfigurationError, Spacing


logger = logging.getLogger(__name__)

# Rules are serialized as /pattern/flag and joined with this character
RULE_SEPARATOR = "ø"

# Built-in rules, in priority-declaration order
DEFAULT_RULE_PATTERNS = (
    r"/(,)(?!$)/",  # comma not at end of line
    r"/\}/",  # closing brace
    r"/<-/",  # arrow
    r"/\s[-+\/*|]?(=)\s/",  # assignment, optionally compound (+=, |=, ...)
    r"/\s(=>)\s/",  # fat arrow
    r"/:/",  # colon
    r"/\/\//",  # line comment
)
DEFAULT_RULE_SPEC = RULE_SEPARATOR.join(DEFAULT_RULE_PATTERNS)

RULE_SHAPE = re.compile(r"/(.*)/(.*)", re.DOTALL)


def parse_rule(segment: str) -> AlignmentRule:
    """Compile a single `/pattern/flag` segment.

    Raises:
        ConfigurationError: the segment has the wrong shape or the pattern
            is not a valid regular expression
    """
    md = RULE_SHAPE.fullmatch(segment)
    if md is None:
        raise ConfigurationError(
            f"Malformed alignment rule {segment!r}: expected /pattern/flag",
            segment=segment,
        )

    source, flag = md.group(1), md.group(2)
    try:
        pattern = re.compile(source)
    except re.error as e:
        raise ConfigurationError(
            f"Invalid pattern in alignment rule {segment!r}: {e}", segment=segment
        ) from e

    return AlignmentRule(pattern=pattern, spacing=Spacing.from_flag(flag))


def compile_rules(rule_spec: Optional[str] = None) -> Tuple[AlignmentRule, ...]:
    """Compile a serialized rule specification into alignment rules.

    Falls back to DEFAULT_RULE_SPEC when `rule_spec` is None. Surrounding
    whitespace around segments is ignored and empty segments are skipped,
    so a trailing separator or newline from the environment is harmless.
    """
    if rule_spec is None:
        rule_spec = DEFAULT_RULE_SPEC

    rules: List[AlignmentRule] = []
    for segment in rule_spec.split(RULE_SEPARATOR):
        segment = segment.strip()
        if not segment:
            continue
        rules.append(parse_rule(segment))

    logger.debug(f"Compiled {len(rules)} alignment rules")
    return tuple(rules)


def offset_of(line: str, rule: AlignmentRule) -> Optional[int]:
    """Column where the rule's first group (or whole match) begins.

    Returns None when the line has no match, or when the first group did
    not take part in the match.
    """
    md = rule.pattern.search(line)
    if md is None:
        return None

    offset = md.start(1) if rule.has_group else md.start(0)
    return offset if offset >= 0 else None
