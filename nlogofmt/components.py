"""
Per-section codecs.

Each section with structured content has a Component: four plain functions
bundled in a record.

    serialize(model)          -> section lines
    deserialize(lines)        -> transformation (Model -> Model)
    add_default(model)        -> model with the section's default value,
                                 used when the section is absent
    validation_errors(model)  -> complaint or None (informational only)

Components hold no state. build_components() binds the injected
collaborators (auto-convert hook, widget readers, literal parser) once.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Mapping, Sequence

from nlogofmt.info import convert_info, empty_info
from nlogofmt.literals import LiteralParser, read_from_string
from nlogofmt.model import Model
from nlogofmt.sections import segment_blocks, text_lines
from nlogofmt.shapes import (
    default_link_shapes,
    default_shapes,
    format_link_shapes,
    format_vector_shapes,
    parse_link_shapes,
    parse_vector_shapes,
)
from nlogofmt.spec import (
    CURRENT_VERSION,
    SECTION_CODE,
    SECTION_INFO,
    SECTION_INTERFACE,
    SECTION_LINK_SHAPES,
    SECTION_TURTLE_SHAPES,
    SECTION_VERSION,
)
from nlogofmt.versions import AutoConvert, identity_auto_convert, older_than_42pre2
from nlogofmt.widgets import (
    WidgetReader,
    default_view,
    format_widget,
    read_widget,
    resolve_readers,
)

Transformation = Callable[[Model], Model]


def _no_errors(model: Model) -> str | None:
    return None


@dataclass(frozen=True)
class Component:
    name: str
    serialize: Callable[[Model], list[str]]
    deserialize: Callable[[Sequence[str]], Transformation]
    add_default: Transformation
    validation_errors: Callable[[Model], str | None] = _no_errors


# =============================================================================
# Code
# =============================================================================

def code_component(auto_convert: AutoConvert = identity_auto_convert) -> Component:
    def serialize(m: Model) -> list[str]:
        return [line.rstrip() for line in text_lines(m.code)]

    def deserialize(lines: Sequence[str]) -> Transformation:
        return lambda m: replace(m, code=auto_convert(m.version)("\n".join(lines)))

    return Component(
        name=SECTION_CODE,
        serialize=serialize,
        deserialize=deserialize,
        add_default=lambda m: replace(m, code=""),
    )


# =============================================================================
# Info
# =============================================================================

def info_component(info_converter: Callable[[str], str] = convert_info) -> Component:
    def deserialize(lines: Sequence[str]) -> Transformation:
        def apply(m: Model) -> Model:
            info = "\n".join(lines)
            if older_than_42pre2(m.version):
                info = info_converter(info)
            return replace(m, info=info)
        return apply

    return Component(
        name=SECTION_INFO,
        serialize=lambda m: text_lines(m.info),
        deserialize=deserialize,
        add_default=lambda m: replace(m, info=empty_info()),
    )


# =============================================================================
# Version
# =============================================================================

def _version_errors(m: Model) -> str | None:
    if not m.version.strip():
        return "Model has no version"
    return None


def version_component() -> Component:
    return Component(
        name=SECTION_VERSION,
        serialize=lambda m: [m.version],
        deserialize=lambda lines: (lambda m: replace(m, version="".join(lines).strip())),
        add_default=lambda m: replace(m, version=CURRENT_VERSION),
        validation_errors=_version_errors,
    )


# =============================================================================
# Interface
# =============================================================================

def _interface_errors(m: Model) -> str | None:
    if m.view is None:
        return "Model has no view widget"
    return None


def interface_component(
    auto_convert: AutoConvert = identity_auto_convert,
    widget_readers: Mapping[str, WidgetReader] | None = None,
    literal_parser: LiteralParser = read_from_string,
) -> Component:
    readers = resolve_readers(widget_readers)

    def serialize(m: Model) -> list[str]:
        lines: list[str] = []
        for widget in m.widgets:
            lines.extend(text_lines(format_widget(widget, readers)))
            lines.append("")
        return lines

    def deserialize(lines: Sequence[str]) -> Transformation:
        def apply(m: Model) -> Model:
            convert = auto_convert(m.version)
            widgets = tuple(
                read_widget(block, literal_parser, readers).convert_source(convert)
                for block in segment_blocks(lines)
            )
            return replace(m, widgets=widgets)
        return apply

    return Component(
        name=SECTION_INTERFACE,
        serialize=serialize,
        deserialize=deserialize,
        add_default=lambda m: replace(m, widgets=(default_view(),)),
        validation_errors=_interface_errors,
    )


# =============================================================================
# Shapes
# =============================================================================

def turtle_shapes_component() -> Component:
    def add_default(m: Model) -> Model:
        return replace(m, turtle_shapes=default_shapes())

    def deserialize(lines: Sequence[str]) -> Transformation:
        if not lines:
            return add_default
        return lambda m: replace(m, turtle_shapes=parse_vector_shapes(lines))

    return Component(
        name=SECTION_TURTLE_SHAPES,
        serialize=lambda m: text_lines(format_vector_shapes(m.turtle_shapes)),
        deserialize=deserialize,
        add_default=add_default,
    )


def link_shapes_component() -> Component:
    def add_default(m: Model) -> Model:
        return replace(m, link_shapes=default_link_shapes())

    def deserialize(lines: Sequence[str]) -> Transformation:
        if not lines:
            return add_default
        return lambda m: replace(m, link_shapes=parse_link_shapes(lines))

    return Component(
        name=SECTION_LINK_SHAPES,
        serialize=lambda m: text_lines(format_link_shapes(m.link_shapes)),
        deserialize=deserialize,
        add_default=add_default,
    )


# =============================================================================
# Registry
# =============================================================================

def build_components(
    auto_convert: AutoConvert = identity_auto_convert,
    widget_readers: Mapping[str, WidgetReader] | None = None,
    literal_parser: LiteralParser = read_from_string,
) -> dict[str, Component]:
    """
    All six codecs keyed by section name, in the order they are applied.

    Version comes first: code, info and interface conversion read it.
    """
    components = (
        version_component(),
        code_component(auto_convert),
        interface_component(auto_convert, widget_readers, literal_parser),
        info_component(),
        turtle_shapes_component(),
        link_shapes_component(),
    )
    return {c.name: c for c in components}
