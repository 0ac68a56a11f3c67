"""
In-memory model produced by reading a .nlogo document.

Models are immutable. Codecs transform them with dataclasses.replace().
"""

from __future__ import annotations

from dataclasses import dataclass

from nlogofmt.shapes import LinkShape, VectorShape
from nlogofmt.widgets import VIEW, Widget


@dataclass(frozen=True)
class Model:
    code: str = ""
    info: str = ""
    version: str = ""
    widgets: tuple[Widget, ...] = ()
    turtle_shapes: tuple[VectorShape, ...] = ()
    link_shapes: tuple[LinkShape, ...] = ()
    # (section name, raw lines) for sections this package has no codec for
    other_sections: tuple[tuple[str, tuple[str, ...]], ...] = ()

    def other_section(self, name: str) -> tuple[str, ...] | None:
        return dict(self.other_sections).get(name)

    @property
    def view(self) -> Widget | None:
        return next((w for w in self.widgets if w.kind == VIEW), None)

    def __repr__(self) -> str:
        return (
            f"Model(version={self.version!r}, code={len(self.code)} chars, "
            f"widgets={len(self.widgets)}, turtle_shapes={len(self.turtle_shapes)}, "
            f"link_shapes={len(self.link_shapes)})"
        )
