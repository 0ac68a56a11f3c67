"""
NLogo Writer - turns a Model back into document text.

    Model -> each Component's serialize() -> {section name: lines}
          -> join_sections() -> raw text -> atomic write
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping, Sequence

from nlogofmt.components import Component, build_components
from nlogofmt.io import Location, atomic_write, writable_path
from nlogofmt.model import Model
from nlogofmt.sections import join_sections

logger = logging.getLogger(__name__)


class NLogoWriter:
    """
    Writes .nlogo documents.

    Usage:
        writer = NLogoWriter()
        text = writer.serialize(model)
        writer.write(model, "Fire.nlogo")
    """

    def __init__(self, components: Mapping[str, Component] | None = None) -> None:
        self.components = dict(components) if components is not None else build_components()

    def sections_from_model(self, model: Model) -> dict[str, list[str]]:
        sections = {name: list(lines) for name, lines in model.other_sections}
        for name, component in self.components.items():
            sections[name] = component.serialize(model)
        return sections

    def serialize(self, model: Model) -> str:
        return join_sections(self.sections_from_model(model))

    def write_sections(self, sections: Mapping[str, Sequence[str]], location: Location) -> Path:
        """Join sections and write them to location. Returns the written path."""
        path = writable_path(location)
        atomic_write(path, join_sections(sections))
        logger.info(f"Model saved to: {path}")
        return path

    def write(self, model: Model, location: Location) -> Path:
        logger.info(f"Saving model to: {location}")
        return self.write_sections(self.sections_from_model(model), location)
