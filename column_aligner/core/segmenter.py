from typing import List, Optional

from .models import Block
from .whitespace import is_blank, left_spacing, split_lines


def find_blocks(text: str) -> List[Block]:
    """Partition text into blocks of lines to align together.

    Heuristic: a content line belongs to the current block when its
    leading whitespace equals that of the last content line; otherwise it
    starts a new block. Blank lines always join the current block.

    The first block is seeded empty at [0, 0). Since the last content line
    starts out as the first line itself, a leading content line is absorbed
    into the seed, and a leading blank line fills it instead. Either way the
    returned blocks tile [0, len(lines)) with no gap or overlap; an empty
    text yields the single empty seed block.
    """
    lines = split_lines(text)
    blocks = [Block(lines=[], start=0, end=0)]
    last_content: Optional[str] = lines[0] if lines else None

    for line in lines:
        current = blocks[-1]

        if is_blank(line):
            current.lines.append(line)
            current.end += 1
        elif left_spacing(line) == left_spacing(last_content):
            current.lines.append(line)
            current.end += 1
            last_content = line
        else:
            blocks.append(Block(lines=[line], start=current.end, end=current.end + 1))
            last_content = line

    return blocks


def find_block_containing_line(
    blocks: List[Block], line_index: int
) -> Optional[Block]:
    """Block whose [start, end) range holds the 0-based line index"""
    for block in blocks:
        if block.contains(line_index):
            return block
    return None
