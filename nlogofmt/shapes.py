"""
Turtle and link shape sections.

Both sections are a sequence of blank-line separated blocks, one per shape.

Turtle shape block:
    <name>
    <rotatable: true|false>
    <editable color index>
    <element>...                 <- Polygon/Circle/Line/Rectangle descriptions

Link shape block:
    <name>
    <curviness>
    <line spec> x3               <- left, middle, right lines
    <direction indicator>        <- a turtle shape block without trailing blank line
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Sequence

from nlogofmt.errors import NLogoFormatError
from nlogofmt.sections import segment_blocks, text_lines
from nlogofmt.spec import DEFAULT_SHAPES_PATH, DEFAULT_LINK_SHAPES_PATH


@dataclass(frozen=True)
class VectorShape:
    name: str
    rotatable: bool = True
    editable_color_index: int = 0
    elements: tuple[str, ...] = ()

    def to_lines(self) -> list[str]:
        return [
            self.name,
            "true" if self.rotatable else "false",
            str(self.editable_color_index),
            *self.elements,
        ]

    @classmethod
    def from_lines(cls, lines: Sequence[str]) -> VectorShape:
        if len(lines) < 3:
            raise NLogoFormatError(f"Shape block needs at least 3 lines, found {len(lines)}")
        try:
            color_index = int(lines[2])
        except ValueError:
            raise NLogoFormatError(f"Shape {lines[0]!r}: bad editable color index {lines[2]!r}") from None
        return cls(
            name=lines[0],
            rotatable=lines[1].strip().lower() == "true",
            editable_color_index=color_index,
            elements=tuple(lines[3:]),
        )


@dataclass(frozen=True)
class LinkShape:
    name: str
    curviness: str
    line_specs: tuple[str, str, str]
    direction_indicator: VectorShape

    def to_lines(self) -> list[str]:
        return [self.name, self.curviness, *self.line_specs, *self.direction_indicator.to_lines()]

    @classmethod
    def from_lines(cls, lines: Sequence[str]) -> LinkShape:
        if len(lines) < 8:
            raise NLogoFormatError(f"Link shape block needs at least 8 lines, found {len(lines)}")
        return cls(
            name=lines[0],
            curviness=lines[1],
            line_specs=(lines[2], lines[3], lines[4]),
            direction_indicator=VectorShape.from_lines(lines[5:]),
        )


def _format(shapes) -> str:
    return "".join("\n".join(shape.to_lines()) + "\n\n" for shape in shapes)


def format_vector_shapes(shapes: Sequence[VectorShape]) -> str:
    return _format(shapes)


def format_link_shapes(shapes: Sequence[LinkShape]) -> str:
    return _format(shapes)


def parse_vector_shapes(lines: Sequence[str]) -> tuple[VectorShape, ...]:
    return tuple(VectorShape.from_lines(block) for block in segment_blocks(lines))


def parse_link_shapes(lines: Sequence[str]) -> tuple[LinkShape, ...]:
    return tuple(LinkShape.from_lines(block) for block in segment_blocks(lines))


@lru_cache(maxsize=None)
def default_shapes() -> tuple[VectorShape, ...]:
    """Built-in turtle shapes given to models that don't define any."""
    return parse_vector_shapes(text_lines(DEFAULT_SHAPES_PATH.read_text(encoding="utf-8")))


@lru_cache(maxsize=None)
def default_link_shapes() -> tuple[LinkShape, ...]:
    """Built-in link shapes given to models that don't define any."""
    return parse_link_shapes(text_lines(DEFAULT_LINK_SHAPES_PATH.read_text(encoding="utf-8")))
