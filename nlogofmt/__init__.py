"""
nlogofmt - reader and writer for sectioned .nlogo model documents.

    from nlogofmt import NLogoFormat

    fmt = NLogoFormat()
    model = fmt.load("Fire.nlogo")
    fmt.save(model, "Fire-copy.nlogo")
"""

import logging

from nlogofmt.errors import CodecError, NLogoFormatError, SectionCountMismatch, UnsupportedLocation
from nlogofmt.format import NLogoFormat
from nlogofmt.model import Model
from nlogofmt.reader import NLogoReader
from nlogofmt.writer import NLogoWriter

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CodecError",
    "Model",
    "NLogoFormat",
    "NLogoFormatError",
    "NLogoReader",
    "NLogoWriter",
    "SectionCountMismatch",
    "UnsupportedLocation",
]
