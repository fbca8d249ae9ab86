"""
Split Python source text into function units using indentation alone.
"""

from typing import List, Optional, Tuple

from bigo_cli.engine.lines import DEF_RE, indent_of, is_ignorable, strip_comment
from bigo_cli.engine.models import FunctionUnit

TRIPLE_QUOTES = ('"""', "'''")
OPENERS = "([{"
CLOSERS = ")]}"


def _triple_quote_toggles(line: str) -> Tuple[bool, Optional[str]]:
    """Return whether ``line`` leaves a triple-quoted string open, and its quote."""
    for quote in TRIPLE_QUOTES:
        if line.count(quote) % 2 == 1:
            return True, quote
    return False, None


def _signature_end(lines: List[str], start: int) -> Tuple[int, str]:
    """Find where a definition's signature ends.

    Returns the index of the last signature line and any code following the
    block-opening colon on that line (a one-line body). A signature missing
    its colon ends on the line where its brackets balance. One whose brackets
    never balance ends on the ``def`` line itself as soon as a later line
    starts another definition, dedents to the ``def`` or the file runs out,
    so the lines after it still count as its body.
    """
    def_indent = indent_of(lines[start])
    depth = 0
    quote = None
    started = False
    for index in range(start, len(lines)):
        raw = lines[index]
        if index > start and not is_ignorable(raw):
            stripped = raw.strip()
            dedented = indent_of(raw) <= def_indent and stripped[0] not in CLOSERS
            if DEF_RE.match(raw) or dedented:
                return start, ""

        line = strip_comment(raw)
        offset = line.index("(") if index == start else 0
        for position in range(offset, len(line)):
            char = line[position]
            if quote:
                if char == quote:
                    quote = None
                continue
            if char in ("'", '"'):
                quote = char
            elif char in OPENERS:
                depth += 1
                started = True
            elif char in CLOSERS:
                depth -= 1
            elif char == ":" and started and depth == 0:
                return index, line[position + 1:].strip()
        if started and depth <= 0:
            return index, ""
    return start, ""


def segment(source: str) -> List[FunctionUnit]:
    """Split ``source`` into function units in definition order.

    A unit closes at the first code line indented at or left of its ``def``,
    at a sibling definition, or at end-of-file. Blank and comment lines never
    close a unit. Definitions inside another unit's body record it as their
    ``parent``. Never raises.
    """
    lines = source.splitlines()
    units: List[FunctionUnit] = []
    open_units: List[int] = []
    string_quote: Optional[str] = None

    def _extend(line_no: int) -> None:
        for unit_index in open_units:
            units[unit_index].line_end = line_no

    index = 0
    while index < len(lines):
        line = lines[index]

        if string_quote:
            # Inside a multi-line string: part of the unit, never code
            if string_quote in line:
                string_quote = None
            if open_units:
                _extend(index)
            index += 1
            continue

        if is_ignorable(line):
            index += 1
            continue

        indent = indent_of(line)
        while open_units and units[open_units[-1]].indent >= indent:
            open_units.pop()

        match = DEF_RE.match(line)
        if match:
            parent = open_units[-1] if open_units else None
            end, inline_body = _signature_end(lines, index)
            unit = FunctionUnit(
                name=match.group(1),
                line_start=index,
                line_end=end,
                indent=indent,
                parent=parent,
            )
            if inline_body and not inline_body.startswith(TRIPLE_QUOTES):
                unit.body_lines.append(" " * (indent + 4) + inline_body)
            units.append(unit)
            _extend(end)
            open_units.append(len(units) - 1)
            index = end + 1
            continue

        opens_string, quote = _triple_quote_toggles(line)
        if opens_string:
            string_quote = quote
        if open_units:
            if not line.strip().startswith(TRIPLE_QUOTES):
                units[open_units[-1]].body_lines.append(strip_comment(line))
            _extend(index)
        index += 1

    return units
