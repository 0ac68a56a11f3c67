"""
NLogoFormat - the .nlogo document format with its collaborators bound.

    fmt = NLogoFormat(auto_convert=my_converter)
    model = fmt.load("Fire.nlogo")
    fmt.save(model, "Fire-copy.nlogo")
"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, Sequence

from nlogofmt.components import Component, build_components
from nlogofmt.io import Location
from nlogofmt.literals import LiteralParser, read_from_string
from nlogofmt.model import Model
from nlogofmt.reader import NLogoReader
from nlogofmt.spec import EXTENSION
from nlogofmt.versions import AutoConvert, identity_auto_convert
from nlogofmt.writer import NLogoWriter
from nlogofmt.widgets import WidgetReader


class NLogoFormat:
    name = "nlogo"
    extension = EXTENSION

    def __init__(
        self,
        auto_convert: AutoConvert = identity_auto_convert,
        widget_readers: Mapping[str, WidgetReader] | None = None,
        literal_parser: LiteralParser = read_from_string,
    ) -> None:
        self.components: dict[str, Component] = build_components(
            auto_convert, widget_readers, literal_parser
        )
        self.reader = NLogoReader(self.components)
        self.writer = NLogoWriter(self.components)

    def sections(self, location: Location) -> dict[str, list[str]]:
        return self.reader.sections(location)

    def model_from_sections(self, sections: Mapping[str, Sequence[str]]) -> Model:
        return self.reader.model_from_sections(sections)

    def model_from_source(self, source: str) -> Model:
        return self.reader.parse(source)

    def load(self, location: Location) -> Model:
        return self.reader.read(location)

    def sections_from_model(self, model: Model) -> dict[str, list[str]]:
        return self.writer.sections_from_model(model)

    def source_from_model(self, model: Model) -> str:
        return self.writer.serialize(model)

    def write_sections(self, sections: Mapping[str, Sequence[str]], location: Location) -> Path:
        return self.writer.write_sections(sections, location)

    def save(self, model: Model, location: Location) -> Path:
        return self.writer.write(model, location)

    def validation_errors(self, model: Model) -> list[str]:
        """Complaints from every codec. Informational: nothing is rejected."""
        errors = []
        for component in self.components.values():
            message = component.validation_errors(model)
            if message:
                errors.append(message)
        return errors
