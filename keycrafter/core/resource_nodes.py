"""Resource nodes: harvestable objects, each with its own typing progress."""

from __future__ import annotations

from dataclasses import dataclass, field

from keycrafter.core.enums import ResourceKind, WordDifficulty
from keycrafter.core.models import Coordinate


@dataclass(slots=True)
class ResourceNode:
    """A harvestable resource on the island.

    ``typed_prefix`` is always a prefix of ``target_word``. It equals the
    whole word only inside the keystroke that completes it; word rotation
    clears it again before the keystroke returns.
    """

    node_id: int
    kind: ResourceKind
    pos: Coordinate                 # glyph anchor (top-left)
    target_word: str
    next_word: str
    remaining_yield: int = 1        # harvests left before depletion
    max_yield: int = 1
    typed_prefix: str = ""
    assigned_path: list[Coordinate] = field(default_factory=list)
    word_started_at: float | None = None

    @property
    def is_started(self) -> bool:
        return bool(self.typed_prefix)

    @property
    def is_complete(self) -> bool:
        return self.typed_prefix == self.target_word

    @property
    def is_depleted(self) -> bool:
        return self.remaining_yield <= 0

    @property
    def expected_char(self) -> str | None:
        """The next character this node accepts, or None once complete."""
        idx = len(self.typed_prefix)
        if idx >= len(self.target_word):
            return None
        return self.target_word[idx]

    def matches(self, ch: str) -> bool:
        return self.expected_char == ch

    def accept(self, ch: str, now: float | None = None) -> None:
        """Append a matched character; the first one stamps the start time."""
        if not self.typed_prefix:
            self.word_started_at = now
        self.typed_prefix += ch

    def reset(self) -> None:
        """Abandon the current attempt: no partial credit, no path."""
        self.typed_prefix = ""
        self.assigned_path.clear()
        self.word_started_at = None

    def assign_path(self, path: list[Coordinate] | None) -> None:
        self.assigned_path = list(path) if path else []

    def pop_step(self) -> Coordinate | None:
        if not self.assigned_path:
            return None
        return self.assigned_path.pop(0)

    def consume_yield(self) -> int:
        """Use one harvest charge; returns what is left."""
        if self.remaining_yield > 0:
            self.remaining_yield -= 1
        self.typed_prefix = ""
        return self.remaining_yield

    def rotate_word(self, new_next_word: str) -> None:
        """Promote the pre-generated next word and queue *new_next_word*."""
        self.target_word = self.next_word
        self.next_word = new_next_word
        self.reset()

    def copy(self) -> ResourceNode:
        return ResourceNode(
            node_id=self.node_id,
            kind=self.kind,
            pos=self.pos,
            target_word=self.target_word,
            next_word=self.next_word,
            remaining_yield=self.remaining_yield,
            max_yield=self.max_yield,
            typed_prefix=self.typed_prefix,
            assigned_path=list(self.assigned_path),
            word_started_at=self.word_started_at,
        )


# ---------------------------------------------------------------------------
# Resource kind definitions
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ResourceKindDef:
    """Static per-kind data: naming, yield range and word tier."""

    display_name: str
    min_yield: int
    max_yield: int
    difficulty: WordDifficulty


RESOURCE_KINDS: dict[ResourceKind, ResourceKindDef] = {
    ResourceKind.WOOD:   ResourceKindDef("Wood",   6, 10, WordDifficulty.EASY),    # trees last longer
    ResourceKind.COPPER: ResourceKindDef("Copper", 4, 7,  WordDifficulty.MEDIUM),
}


def difficulty_for(kind: ResourceKind) -> WordDifficulty:
    return RESOURCE_KINDS[kind].difficulty


def display_name(kind: ResourceKind) -> str:
    return RESOURCE_KINDS[kind].display_name
