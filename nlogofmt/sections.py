"""
Section splitting and joining for .nlogo documents.

    join_sections()   - model section map -> document text
    split_sections()  - document text -> model section map
    segment_blocks()  - blank-line delimited blocks inside one section

Round trip: split_sections(join_sections(s)) == s for every map built from
codec output, except that a section whose first line is blank loses that
line (it is indistinguishable from the separator's own leading blank line).
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, Mapping, Sequence

from nlogofmt.errors import SectionCountMismatch
from nlogofmt.spec import SEPARATOR, SECTION_NAMES, SECTION_CODE

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def text_lines(text: str) -> list[str]:
    """
    Split text into logical lines.

    A trailing line break does not produce a trailing empty line, so
    "a\\n" gives ["a"] and "\\n" gives [""]; the empty string gives [].
    """
    lines = _LINE_BREAK.split(text)
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def _render(name: str, lines: Sequence[str]) -> str:
    if not lines:
        return "\n"
    body = "\n".join(lines) + "\n"
    if lines[0] == "" or name == SECTION_CODE:
        return body
    return "\n" + body


def join_sections(sections: Mapping[str, Sequence[str]]) -> str:
    """Render every known section in on-disk order, missing ones as empty."""
    return SEPARATOR.join(
        _render(name, sections.get(name, ())) for name in SECTION_NAMES
    )


def split_sections(source: str) -> dict[str, list[str]]:
    """
    Split document text into its sections, keyed by section name.

    Raises SectionCountMismatch unless there is exactly one part per
    entry in SECTION_NAMES.
    """
    parts = source.split(SEPARATOR)
    if len(parts) != len(SECTION_NAMES):
        raise SectionCountMismatch(len(SECTION_NAMES), len(parts))

    sections: dict[str, list[str]] = {}
    for name, part in zip(SECTION_NAMES, parts):
        lines = text_lines(part)
        if lines and lines[0] == "":
            lines = lines[1:]
        sections[name] = lines
        logger.debug(f"Section {name}: {len(lines)} lines")
    return sections


def segment_blocks(lines: Iterable[str]) -> list[list[str]]:
    """
    Group lines into blocks separated by one or more blank lines.

    Runs of blank lines never produce an empty block.
    """
    blocks: list[list[str]] = []
    block: list[str] = []
    for line in lines:
        if line:
            block.append(line)
        else:
            if block:
                blocks.append(block)
            block = []
    if block:
        blocks.append(block)
    return blocks
