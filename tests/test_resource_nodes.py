"""Tests for the resource node typing state and the glyph catalog."""

from keycrafter.core.enums import ResourceKind, WordDifficulty
from keycrafter.core.glyphs import POINT_FOOTPRINT, Glyph, GlyphCatalog
from keycrafter.core.models import Coordinate, Player
from keycrafter.core.resource_nodes import ResourceNode, difficulty_for, display_name


def _node(word: str = "oak", **kw) -> ResourceNode:
    defaults = dict(
        node_id=1,
        kind=ResourceKind.WOOD,
        pos=Coordinate(10, 7),
        target_word=word,
        next_word="elm",
        remaining_yield=2,
        max_yield=2,
    )
    defaults.update(kw)
    return ResourceNode(**defaults)


class TestTypingState:
    def test_fresh_node(self):
        n = _node()
        assert not n.is_started
        assert not n.is_complete
        assert n.expected_char == "o"

    def test_accept_advances_and_stamps_start(self):
        n = _node()
        n.accept("o", now=5.0)
        n.accept("a", now=6.0)
        assert n.typed_prefix == "oa"
        assert n.expected_char == "k"
        assert n.word_started_at == 5.0

    def test_complete(self):
        n = _node()
        for ch in "oak":
            n.accept(ch)
        assert n.is_complete
        assert n.expected_char is None
        assert not n.matches("k")

    def test_reset_clears_progress_and_path(self):
        n = _node()
        n.accept("o", now=1.0)
        n.assign_path([Coordinate(1, 1), Coordinate(2, 1)])
        n.reset()
        assert n.typed_prefix == ""
        assert n.assigned_path == []
        assert n.word_started_at is None

    def test_path_is_consumed_in_order(self):
        n = _node()
        n.assign_path([Coordinate(1, 1), Coordinate(2, 1)])
        assert n.pop_step() == Coordinate(1, 1)
        assert n.pop_step() == Coordinate(2, 1)
        assert n.pop_step() is None

    def test_assign_none_path(self):
        n = _node()
        n.assign_path(None)
        assert n.assigned_path == []

    def test_assigned_path_is_a_copy(self):
        path = [Coordinate(1, 1)]
        n = _node()
        n.assign_path(path)
        n.pop_step()
        assert path == [Coordinate(1, 1)]


class TestYieldAndRotation:
    def test_consume_yield(self):
        n = _node()
        n.typed_prefix = "oak"
        assert n.consume_yield() == 1
        assert n.typed_prefix == ""
        assert n.consume_yield() == 0
        assert n.is_depleted
        assert n.consume_yield() == 0

    def test_rotate_word(self):
        n = _node()
        n.accept("o")
        n.rotate_word("fir")
        assert n.target_word == "elm"
        assert n.next_word == "fir"
        assert n.typed_prefix == ""

    def test_copy_is_independent(self):
        n = _node()
        n.assign_path([Coordinate(1, 1)])
        dup = n.copy()
        dup.pop_step()
        dup.accept("o")
        assert n.assigned_path == [Coordinate(1, 1)]
        assert n.typed_prefix == ""


class TestKindTables:
    def test_difficulty_mapping(self):
        assert difficulty_for(ResourceKind.WOOD) == WordDifficulty.EASY
        assert difficulty_for(ResourceKind.COPPER) == WordDifficulty.MEDIUM

    def test_display_names(self):
        assert display_name(ResourceKind.WOOD) == "Wood"
        assert display_name(ResourceKind.COPPER) == "Copper"


class TestPlayer:
    def test_add_and_spend(self):
        p = Player(pos=Coordinate(0, 0))
        p.add(ResourceKind.COPPER, 4)
        assert p.count(ResourceKind.COPPER) == 4
        assert not p.spend(ResourceKind.COPPER, 5)
        assert p.copper == 4
        assert p.spend(ResourceKind.COPPER, 4)
        assert p.copper == 0


class TestGlyphCatalog:
    def test_default_footprints(self):
        catalog = GlyphCatalog()
        for kind in ResourceKind:
            fp = catalog.footprint(kind)
            assert (fp.width, fp.height, fp.access_offset) == (4, 4, (2, 3))

    def test_access_point_inside_footprint(self):
        catalog = GlyphCatalog()
        anchor = Coordinate(10, 7)
        for kind in ResourceKind:
            access = catalog.access_point(kind, anchor)
            assert access == Coordinate(12, 10)
            assert access in set(catalog.footprint(kind).cells(anchor))

    def test_unmapped_kind_uses_point_footprint(self):
        catalog = GlyphCatalog(kind_glyphs={ResourceKind.WOOD: "tree"})
        assert catalog.footprint(ResourceKind.COPPER) == POINT_FOOTPRINT
        assert catalog.access_point(ResourceKind.COPPER, Coordinate(3, 4)) == Coordinate(3, 4)

    def test_custom_glyph(self):
        catalog = GlyphCatalog(kind_glyphs={ResourceKind.WOOD: "bush"})
        catalog.add("bush", ["**", "****"], (1, 1))
        fp = catalog.footprint(ResourceKind.WOOD)
        assert (fp.width, fp.height) == (4, 2)

    def test_glyph_lines_padded_and_blanks_skipped(self):
        glyph = Glyph.from_lines("x", ["a", "bcd"], (0, 0))
        assert glyph.art == ("a  ", "bcd")
        cells = glyph.render_at(Coordinate(5, 5))
        assert (5, 5, "a") in cells
        assert len(cells) == 4
