from dataclasses import dataclass, replace
from enum import Enum


class CellKind(Enum):
    """What a cell hides until it is revealed."""
    REWARD = "diamond"
    PENALTY = "bomb"


@dataclass(frozen=True, slots=True)
class Cell:
    kind: CellKind
    revealed: bool = False

    @property
    def is_penalty(self) -> bool:
        return self.kind is CellKind.PENALTY

    def reveal(self) -> "Cell":
        return replace(self, revealed=True)
