"""Error types raised by the game core."""


class MineStakeError(Exception):
    """Base class for game contract violations."""


class InvalidBoardError(MineStakeError, ValueError):
    """Board dimensions or penalty count break the generation contract."""


class CellOutOfRangeError(MineStakeError, IndexError):
    """A reveal addressed a cell that does not exist on the board."""

    def __init__(self, row: int, col: int, rows: int, cols: int) -> None:
        super().__init__(f"cell ({row}, {col}) outside {rows}x{cols} board")
        self.row = row
        self.col = col


class NoActiveGameError(MineStakeError, RuntimeError):
    """A reveal arrived before any game was started."""
