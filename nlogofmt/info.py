"""
Info tab text.

Models saved before 4.2pre2 used a plain-text layout for the info tab:

    WHAT IS IT?
    -----------
    A model of ...

    |ask turtles [ fd 1 ]        <- preformatted line

Newer models store markdown. convert_info() rewrites the old layout.
"""

from __future__ import annotations

import re
from functools import lru_cache

from nlogofmt.sections import text_lines
from nlogofmt.spec import EMPTY_INFO_PATH

_UNDERLINE = re.compile(r"^-{3,}\s*$")


@lru_cache(maxsize=None)
def empty_info() -> str:
    """Template info text for new models."""
    return EMPTY_INFO_PATH.read_text(encoding="utf-8")


def convert_info(text: str) -> str:
    """Convert plain-text info to markdown."""
    lines = text_lines(text)
    out: list[str] = []
    i = 0
    while i < len(lines):
        line = lines[i]
        following = lines[i + 1] if i + 1 < len(lines) else None
        if line.strip() and following is not None and _UNDERLINE.match(following):
            out.append(f"## {line.strip()}")
            i += 2
            continue
        if _UNDERLINE.match(line):
            # stray divider
            out.append("")
        elif line.startswith("|"):
            out.append("    " + line[1:])
        else:
            out.append(line)
        i += 1
    return "\n".join(out)
