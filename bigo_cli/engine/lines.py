"""
Line-level helpers shared by the segmenter and the analyzers.
"""

import re
from typing import List

from bigo_cli.core.constants import TAB_WIDTH

DEF_RE = re.compile(r"^\s*(?:async\s+)?def\s+([A-Za-z_]\w*)\s*\(")
FOR_RE = re.compile(r"^\s*(?:async\s+)?for\s+(.+?)\s+in\s+(.+):\s*$")
WHILE_RE = re.compile(r"^\s*while\s+(.+):\s*$")
ANY_CALL_RE = re.compile(r"([A-Za-z_]\w*)\s*\(")
COMPREHENSION_RE = re.compile(r"[\[\({].*\bfor\b.+\bin\b.*[\]\)}]")


def indent_of(line: str) -> int:
    """Indentation width of ``line``, counting a tab as four columns."""
    indent = 0
    for char in line:
        if char == " ":
            indent += 1
        elif char == "\t":
            indent += TAB_WIDTH
        else:
            break
    return indent


def is_ignorable(line: str) -> bool:
    """True for blank lines and comment-only lines."""
    stripped = line.strip()
    return not stripped or stripped.startswith("#")


def strip_comment(line: str) -> str:
    """Remove a trailing ``#`` comment, leaving ``#`` inside strings alone."""
    quote = None
    escaped = False
    for index, char in enumerate(line):
        if escaped:
            escaped = False
            continue
        if char == "\\":
            escaped = True
        elif quote:
            if char == quote:
                quote = None
        elif char in ("'", '"'):
            quote = char
        elif char == "#":
            return line[:index].rstrip()
    return line.rstrip()


def is_loop(line: str) -> bool:
    """True when ``line`` opens a ``for ... in ...:`` or ``while ...:`` block."""
    return bool(FOR_RE.match(line) or WHILE_RE.match(line))


def loop_iterable(line: str) -> str:
    """The iterable of a ``for`` loop, or the condition of a ``while`` loop."""
    match = FOR_RE.match(line)
    if match:
        return match.group(2).strip()
    match = WHILE_RE.match(line)
    if match:
        return match.group(1).strip()
    return ""


def is_comprehension(line: str) -> bool:
    return bool(COMPREHENSION_RE.search(line))


def block_after(lines: List[str], index: int) -> List[str]:
    """Lines indented deeper than ``lines[index]`` that directly follow it."""
    header_indent = indent_of(lines[index])
    block = []
    for line in lines[index + 1:]:
        if indent_of(line) <= header_indent:
            break
        block.append(line)
    return block
