"""Line tokenizer for Vevo LAB exports.

Vevo LAB writes every table into one flat CSV file. Lines are split on a plain
comma; quoted fields containing commas are NOT honoured.
"""

from __future__ import annotations

from typing import List, Optional


def _strip_quotes(field: str) -> str:
    # one layer on each side
    if field.startswith('"'):
        field = field[1:]
    if field.endswith('"'):
        field = field[:-1]
    return field


def is_blank_line(line: str) -> bool:
    """True if the line is empty after trimming or all its fields are empty."""
    s = line.strip()
    if not s:
        return True
    return all(not part.strip() for part in s.split(","))


def split_fields(line: str) -> List[str]:
    """
    Split a raw line into trimmed, quote-stripped fields.

    Examples
    --------
    >>> split_fields('"Series Name","10-a"')
    ['Series Name', '10-a']
    >>> split_fields(' "EF", ,"%", 61.2 ')
    ['EF', '', '%', '61.2']
    """
    return [_strip_quotes(part.strip()) for part in line.strip().split(",")]


def tokenize_line(line: str) -> Optional[List[str]]:
    """Fields of a line, or None for a blank line (blank lines carry no signal)."""
    if is_blank_line(line):
        return None
    return split_fields(line)
