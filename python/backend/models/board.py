"""Board model for the sliding puzzle."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class Direction(StrEnum):
    """Direction the *tile* slides into the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# The offset points from the blank to the tile that slides into it.
# UP   → tile at (br+1, bc) moves up   → blank shifts down
# DOWN → tile at (br-1, bc) moves down  → blank shifts up
# LEFT → tile at (br, bc+1) moves left  → blank shifts right
# RIGHT→ tile at (br, bc-1) moves right → blank shifts left
_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}


@dataclass(frozen=True)
class Board:
    """Immutable n×n sliding puzzle board.

    Tiles are stored as a tuple of row tuples. 0 represents the blank
    space. Equality and hashing only look at the tile layout.
    """

    size: int
    tiles: tuple[tuple[int, ...], ...]
    blank_pos: tuple[int, int] = field(compare=False)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: list[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if size < 2:
            raise ValueError(f"Board size must be at least 2, got {size}.")
        if len(flat) != size * size:
            raise ValueError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        if sorted(flat) != list(range(size * size)):
            raise ValueError(
                f"Tiles must be a permutation of 0..{size * size - 1}."
            )
        tiles: list[tuple[int, ...]] = []
        blank_pos: tuple[int, int] = (0, 0)
        for r in range(size):
            row = tuple(flat[r * size : (r + 1) * size])
            for c, v in enumerate(row):
                if v == 0:
                    blank_pos = (r, c)
            tiles.append(row)
        return cls(size=size, tiles=tuple(tiles), blank_pos=blank_pos)

    @classmethod
    def from_rows(cls, rows: list[list[int]]) -> Board:
        """Create a board from a list of rows."""
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise ValueError("Board rows must form a square grid.")
        return cls.from_flat(size, [v for row in rows for v in row])

    @classmethod
    def goal(cls, size: int) -> Board:
        """Return the solved board (tiles in order, blank bottom-right)."""
        return cls.from_flat(size, list(range(1, size * size)) + [0])

    # -- queries --------------------------------------------------------------

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row][col]

    def flat(self) -> list[int]:
        return [v for row in self.tiles for v in row]

    def is_goal(self) -> bool:
        """Check if all tiles are in their goal positions."""
        expected = 1
        for r in range(self.size):
            for c in range(self.size):
                if r == self.size - 1 and c == self.size - 1:
                    return self.tiles[r][c] == 0
                if self.tiles[r][c] != expected:
                    return False
                expected += 1
        return True

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.tiles[row][col]
        if val == 0:
            return row == self.size - 1 and col == self.size - 1
        expected_row = (val - 1) // self.size
        expected_col = (val - 1) % self.size
        return row == expected_row and col == expected_col

    # -- heuristics -----------------------------------------------------------

    def hamming(self) -> int:
        """Number of non-blank tiles out of place."""
        return sum(
            1
            for r in range(self.size)
            for c in range(self.size)
            if self.tiles[r][c] != 0 and not self.is_tile_correct(r, c)
        )

    def manhattan(self) -> int:
        """Sum of the distances of non-blank tiles to their goal cells."""
        total = 0
        for r, row in enumerate(self.tiles):
            for c, val in enumerate(row):
                if val == 0:
                    continue
                goal_r, goal_c = divmod(val - 1, self.size)
                total += abs(r - goal_r) + abs(c - goal_c)
        return total

    def heuristic(self) -> int:
        """Lower bound on the moves left to reach the goal."""
        return self.manhattan()

    # -- successors -----------------------------------------------------------

    def move(self, direction: Direction) -> Board | None:
        """Slide a tile in *direction* into the adjacent blank.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        Returns the resulting board, or None if no tile can move that way.
        """
        br, bc = self.blank_pos
        dr, dc = _OFFSETS[direction]
        tr, tc = br + dr, bc + dc

        if not (0 <= tr < self.size and 0 <= tc < self.size):
            return None

        return self._swap((br, bc), (tr, tc), blank_pos=(tr, tc))

    def neighbors(self) -> tuple[Board, ...]:
        """All boards reachable in exactly one move."""
        result: list[Board] = []
        for direction in Direction:
            moved = self.move(direction)
            if moved is not None:
                result.append(moved)
        return tuple(result)

    def direction_to(self, other: Board) -> Direction | None:
        """Return the move that turns this board into *other*, if any."""
        for direction in Direction:
            if self.move(direction) == other:
                return direction
        return None

    def twin(self) -> Board:
        """Swap the first two non-blank tiles in row-major order.

        The twin is solvable exactly when this board is not.
        """
        cells = [
            (r, c)
            for r in range(self.size)
            for c in range(self.size)
            if self.tiles[r][c] != 0
        ]
        return self._swap(cells[0], cells[1], blank_pos=self.blank_pos)

    # -- helpers --------------------------------------------------------------

    def _swap(
        self,
        a: tuple[int, int],
        b: tuple[int, int],
        blank_pos: tuple[int, int],
    ) -> Board:
        rows = [list(row) for row in self.tiles]
        (ar, ac), (br, bc) = a, b
        rows[ar][ac], rows[br][bc] = rows[br][bc], rows[ar][ac]
        return Board(
            size=self.size,
            tiles=tuple(tuple(row) for row in rows),
            blank_pos=blank_pos,
        )

    def __str__(self) -> str:
        width = len(str(self.size * self.size - 1))
        lines = [str(self.size)]
        for row in self.tiles:
            lines.append(" ".join(f"{v:>{width}}" for v in row))
        return "\n".join(lines)
