"""
NLogo Reader - turns document text into a Model.

    raw text -> split_sections() -> {section name: lines}
             -> each Component's transformation, folded over an empty Model
             -> Model

A section present in the document is always handed to its codec, even when
it has no lines. A section missing from the map gets the codec's default.
"""

from __future__ import annotations

import logging
from typing import Mapping, Sequence

from nlogofmt.components import Component, build_components
from nlogofmt.errors import CodecError
from nlogofmt.io import Location, read_text
from nlogofmt.model import Model
from nlogofmt.sections import split_sections

logger = logging.getLogger(__name__)


class NLogoReader:
    """
    Reads .nlogo documents.

    Usage:
        reader = NLogoReader()
        model = reader.read("Fire.nlogo")
        model = reader.parse(text)

        # Just the raw sections
        sections = reader.sections("Fire.nlogo")
    """

    def __init__(self, components: Mapping[str, Component] | None = None) -> None:
        self.components = dict(components) if components is not None else build_components()

    def sections(self, location: Location) -> dict[str, list[str]]:
        """Read a location and split it into sections."""
        return split_sections(read_text(location))

    def model_from_sections(self, sections: Mapping[str, Sequence[str]]) -> Model:
        other = tuple(
            (name, tuple(lines))
            for name, lines in sections.items()
            if name not in self.components
        )
        model = Model(other_sections=other)
        for name, component in self.components.items():
            try:
                if name in sections:
                    transform = component.deserialize(sections[name])
                else:
                    logger.debug(f"Section {name} missing, using default")
                    transform = component.add_default
                model = transform(model)
            except CodecError:
                raise
            except Exception as e:
                raise CodecError(name, e) from e
        return model

    def parse(self, source: str) -> Model:
        """Parse document text into a Model."""
        return self.model_from_sections(split_sections(source))

    def read(self, location: Location) -> Model:
        """Fully read a document into a Model."""
        logger.info(f"Loading model from: {location}")
        model = self.model_from_sections(self.sections(location))
        logger.info(f"Loaded {model!r}")
        return model
