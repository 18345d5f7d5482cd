"""Glyph / footprint catalog.

Each resource kind is drawn as a small ASCII rectangle anchored at the node
position. The whole rectangle is impassable except for one *access point*,
the cell the player walks to in order to harvest.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from keycrafter.core.enums import ResourceKind
from keycrafter.core.models import Coordinate


@dataclass(frozen=True, slots=True)
class Footprint:
    """Rectangle size plus the access point offset from the anchor."""

    width: int
    height: int
    access_offset: tuple[int, int]

    def access_point(self, anchor: Coordinate) -> Coordinate:
        return Coordinate(anchor.x + self.access_offset[0], anchor.y + self.access_offset[1])

    def cells(self, anchor: Coordinate) -> Iterator[Coordinate]:
        for dy in range(self.height):
            for dx in range(self.width):
                yield Coordinate(anchor.x + dx, anchor.y + dy)


# Used for kinds without a glyph: the anchor cell is also the access point.
POINT_FOOTPRINT = Footprint(width=1, height=1, access_offset=(0, 0))


@dataclass(frozen=True, slots=True)
class Glyph:
    """An ASCII-art object. Lines are padded to a common width."""

    name: str
    art: tuple[str, ...]
    access_offset: tuple[int, int]

    @classmethod
    def from_lines(cls, name: str, lines: list[str], access_offset: tuple[int, int]) -> Glyph:
        width = max((len(line) for line in lines), default=0)
        return cls(name=name, art=tuple(line.ljust(width) for line in lines), access_offset=access_offset)

    @property
    def width(self) -> int:
        return len(self.art[0]) if self.art else 0

    @property
    def height(self) -> int:
        return len(self.art)

    @property
    def footprint(self) -> Footprint:
        return Footprint(self.width, self.height, self.access_offset)

    def render_at(self, anchor: Coordinate) -> list[tuple[int, int, str]]:
        """Return the visible ``(x, y, char)`` cells; blanks are skipped."""
        cells: list[tuple[int, int, str]] = []
        for dy, line in enumerate(self.art):
            for dx, ch in enumerate(line):
                if ch != " ":
                    cells.append((anchor.x + dx, anchor.y + dy, ch))
        return cells


# ---------------------------------------------------------------------------
# Built-in glyphs
# ---------------------------------------------------------------------------
# Access point (2, 3) is the bottom of the trunk / stand for every glyph.

DEFAULT_GLYPHS: dict[str, Glyph] = {
    g.name: g
    for g in (
        Glyph.from_lines("tree",   [" /\\ ", "/~~\\", " || ", " || "], (2, 3)),
        Glyph.from_lines("copper", [" /\\ ", "(Cu)", "\\__/", " || "], (2, 3)),
        Glyph.from_lines("iron",   [" /\\ ", "(Fe)", "\\__/", " || "], (2, 3)),
        Glyph.from_lines("gold",   [" /\\ ", "(Au)", "\\__/", " || "], (2, 3)),
        Glyph.from_lines("herb",   [" () ", "\\||/", " \\/ ", " || "], (2, 3)),
    )
}

KIND_GLYPHS: dict[ResourceKind, str] = {
    ResourceKind.WOOD: "tree",
    ResourceKind.COPPER: "copper",
}


class GlyphCatalog:
    """Resolves a resource kind to its glyph and footprint."""

    __slots__ = ("_glyphs", "_kind_glyphs")

    def __init__(
        self,
        glyphs: dict[str, Glyph] | None = None,
        kind_glyphs: dict[ResourceKind, str] | None = None,
    ) -> None:
        self._glyphs = dict(DEFAULT_GLYPHS if glyphs is None else glyphs)
        self._kind_glyphs = dict(KIND_GLYPHS if kind_glyphs is None else kind_glyphs)

    def get(self, name: str) -> Glyph | None:
        return self._glyphs.get(name)

    def add(self, name: str, lines: list[str], access_offset: tuple[int, int]) -> Glyph:
        glyph = Glyph.from_lines(name, lines, access_offset)
        self._glyphs[name] = glyph
        return glyph

    def glyph_for(self, kind: ResourceKind) -> Glyph | None:
        name = self._kind_glyphs.get(kind)
        return self._glyphs.get(name) if name is not None else None

    def footprint(self, kind: ResourceKind) -> Footprint:
        glyph = self.glyph_for(kind)
        return glyph.footprint if glyph is not None else POINT_FOOTPRINT

    def access_point(self, kind: ResourceKind, anchor: Coordinate) -> Coordinate:
        return self.footprint(kind).access_point(anchor)
