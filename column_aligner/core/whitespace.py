"""Line helpers and intra-line whitespace normalization"""

import re
from typing import List


LEFT_SPACING_PATTERN = re.compile(r"\s*")
SPACE_RUN_PATTERN = re.compile(r" {2,}")
TAB_RUN_PATTERN = re.compile(r"\t{2,}")


def split_lines(text: str) -> List[str]:
    """Split text into lines, keeping each line's trailing newline.

    Only "\\n" terminates a line; a final line without newline is kept as
    is and an empty text has no lines.
    """
    if not text:
        return []
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def is_blank(line: str) -> bool:
    """True if the line contains only whitespace"""
    return not line.strip()


def left_spacing(line: str) -> str:
    """Leading whitespace of a line.

    For a blank line this includes its newline, so a blank line never
    shares indentation with a content line.
    """
    return LEFT_SPACING_PATTERN.match(line).group(0)


def normalize_line(line: str) -> str:
    """Squeeze runs of spaces and runs of tabs, keeping the indentation"""
    indent = left_spacing(line)
    squeezed = TAB_RUN_PATTERN.sub("\t", SPACE_RUN_PATTERN.sub(" ", line))
    return indent + squeezed.lstrip()


def normalize_whitespace(text: str) -> str:
    """Normalize every line of `text`; line count and order are unchanged"""
    return "".join(normalize_line(line) for line in split_lines(text))
