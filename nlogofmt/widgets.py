"""
Interface widgets.

A widget is stored as a block of lines whose first line names its kind:

    BUTTON          <- kind
    15              <- left
    10              <- top
    82              <- right
    43              <- bottom
    NIL             <- display name
    setup           <- source (escaped: newlines are written as \\n)
    NIL
    ...

Widgets keep their lines verbatim so that formatting an unmodified widget
reproduces the block exactly. Readers record which lines hold embedded code
so the document's auto-convert hook can rewrite them.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Callable, Mapping, NamedTuple, Sequence

from nlogofmt.errors import NLogoFormatError
from nlogofmt.literals import LiteralParser

VIEW = "GRAPHICS-WINDOW"

# Empty source fields are written as NIL
NIL = "NIL"


@dataclass(frozen=True)
class Widget:
    kind: str
    lines: tuple[str, ...]
    source_fields: tuple[int, ...] = ()
    choices: tuple[Any, ...] = field(default=(), compare=False)

    @property
    def source(self) -> str | None:
        """Unescaped code of the first source field, or None."""
        if not self.source_fields:
            return None
        line = self.lines[self.source_fields[0]]
        return "" if line == NIL else unescape(line)

    def convert_source(self, convert: Callable[[str], str]) -> Widget:
        """Return a copy with every source field passed through convert."""
        lines = list(self.lines)
        for index in self.source_fields:
            if lines[index] == NIL:
                continue
            original = unescape(lines[index])
            converted = convert(original)
            if converted != original:
                lines[index] = escape(converted)
        return replace(self, lines=tuple(lines))


class WidgetReader(NamedTuple):
    parse: Callable[[Sequence[str], LiteralParser], Widget]
    format: Callable[[Widget], str]


def escape(source: str) -> str:
    return source.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")


def unescape(line: str) -> str:
    out = []
    chars = iter(line)
    for ch in chars:
        if ch == "\\":
            nxt = next(chars, "")
            out.append({"n": "\n", '"': '"', "\\": "\\"}.get(nxt, "\\" + nxt))
        else:
            out.append(ch)
    return "".join(out)


def _format_lines(widget: Widget) -> str:
    return "\n".join(widget.lines)


def _source_reader(kind: str, source_fields: tuple[int, ...]) -> WidgetReader:
    min_lines = max(source_fields, default=0) + 1

    def parse(lines: Sequence[str], literal_parser: LiteralParser) -> Widget:
        if len(lines) < min_lines:
            raise NLogoFormatError(
                f"{kind} widget needs at least {min_lines} lines, found {len(lines)}"
            )
        return Widget(kind=kind, lines=tuple(lines), source_fields=source_fields)

    return WidgetReader(parse, _format_lines)


def _parse_chooser(lines: Sequence[str], literal_parser: LiteralParser) -> Widget:
    if len(lines) < 9:
        raise NLogoFormatError(f"CHOOSER widget needs at least 9 lines, found {len(lines)}")
    choices = literal_parser(f"[{lines[7]}]")
    return Widget(kind="CHOOSER", lines=tuple(lines), choices=tuple(choices))


def _parse_plain(lines: Sequence[str], literal_parser: LiteralParser) -> Widget:
    return Widget(kind=lines[0], lines=tuple(lines))


PLAIN_READER = WidgetReader(_parse_plain, _format_lines)

DEFAULT_READERS: dict[str, WidgetReader] = {
    VIEW: PLAIN_READER,
    "BUTTON": _source_reader("BUTTON", (6,)),
    "MONITOR": _source_reader("MONITOR", (6,)),
    # minimum, maximum and increment are reporters
    "SLIDER": _source_reader("SLIDER", (7, 8, 10)),
    "CHOOSER": WidgetReader(_parse_chooser, _format_lines),
    "SWITCH": PLAIN_READER,
    "INPUTBOX": PLAIN_READER,
    "TEXTBOX": PLAIN_READER,
    "OUTPUT": PLAIN_READER,
    "PLOT": PLAIN_READER,
}


def resolve_readers(additional: Mapping[str, WidgetReader] | None = None) -> dict[str, WidgetReader]:
    """Built-in readers overlaid with additional ones (e.g. extension widgets)."""
    readers = dict(DEFAULT_READERS)
    if additional:
        readers.update(additional)
    return readers


def read_widget(
    lines: Sequence[str],
    literal_parser: LiteralParser,
    readers: Mapping[str, WidgetReader] = DEFAULT_READERS,
) -> Widget:
    if not lines:
        raise NLogoFormatError("Cannot read a widget from an empty block")
    reader = readers.get(lines[0], PLAIN_READER)
    return reader.parse(lines, literal_parser)


def format_widget(widget: Widget, readers: Mapping[str, WidgetReader] = DEFAULT_READERS) -> str:
    reader = readers.get(widget.kind, PLAIN_READER)
    return reader.format(widget)


_DEFAULT_VIEW_LINES = (
    VIEW,
    "210", "10", "647", "448",
    "-1", "-1",
    "13.0",
    "1",
    "10",
    "1", "1", "1",
    "0",
    "1", "1", "1",
    "-16", "16", "-16", "16",
    "0", "0",
    "1",
    "ticks",
    "30.0",
)


def default_view() -> Widget:
    """The view widget every new model starts with."""
    return Widget(kind=VIEW, lines=_DEFAULT_VIEW_LINES)
