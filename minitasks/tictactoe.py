"""Tic-tac-toe rules: players, board, win detection and turn handling."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass, field
from typing import Optional, Sequence


class PlayerType(enum.Enum):
    """The mark a player puts on the board."""

    X = "X"
    O = "O"

    @property
    def mark(self) -> str:
        return self.value


@dataclass(eq=False)
class Player:
    """A participant; ``playable`` is False for a computer-controlled player.

    Two players are equal when they play the same mark.
    """

    type: PlayerType = PlayerType.X
    playable: bool = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Player):
            return NotImplemented
        return self.type is other.type

    def __hash__(self) -> int:
        return hash(self.type)

    @property
    def mark(self) -> str:
        return self.type.mark


class CheckType(enum.Enum):
    """State of the board after a move."""

    X = "X"
    O = "O"
    NONE = "None"
    DRAW = "Draw"


class GameMode(enum.IntEnum):
    """Menu choices for starting a game."""

    EXIT = 0
    PLAYER_VS_PLAYER = 1
    PLAYER_VS_COMPUTER = 2


WINNING_LINES: tuple[tuple[int, int, int], ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)

_MARKS = frozenset(p.mark for p in PlayerType)


def find_winning_line(cells: Sequence[str], mark: str) -> Optional[tuple[int, int, int]]:
    """Return the first line of three cells all holding ``mark``, or None."""
    for line in WINNING_LINES:
        if all(cells[i] == mark for i in line):
            return line
    return None


class Board:
    """Nine cells, numbered 1 to 9; empty cells show their own number."""

    SIZE = 9

    def __init__(self) -> None:
        self._cells: list[str] = []
        self.reset()

    def reset(self) -> None:
        """Empty every cell."""
        self._cells = [str(n) for n in range(1, self.SIZE + 1)]

    def set_cell(self, cell: int, player: Player) -> bool:
        """Put the player's mark in cell ``cell`` (1-based).

        Out-of-range or already taken cells are left alone; returns whether
        the mark was placed.
        """
        index = cell - 1
        if not 0 <= index < self.SIZE:
            return False
        if self._cells[index] in _MARKS:
            return False
        self._cells[index] = player.mark
        return True

    def empty_indices(self) -> list[int]:
        """Zero-based indices of the cells without a mark."""
        return [i for i, value in enumerate(self._cells) if value not in _MARKS]

    def random_cell(self, rng: Optional[random.Random] = None) -> int:
        """Return the zero-based index of a random empty cell.

        Raises ValueError when the board is full.
        """
        empty = self.empty_indices()
        if not empty:
            raise ValueError("no empty cell left on the board")
        return (rng or random).choice(empty)

    def is_full(self) -> bool:
        return not self.empty_indices()

    def cells(self) -> list[str]:
        """A copy of the nine cell labels."""
        return list(self._cells)


class Game:
    """One game: two players, whose turn it is, and the board's state."""

    def __init__(self, mode: GameMode = GameMode.PLAYER_VS_PLAYER):
        self.mode = mode
        self.player1 = Player(PlayerType.X, True)
        self.player2 = Player(PlayerType.O, mode is not GameMode.PLAYER_VS_COMPUTER)
        self.current_player = self.player1
        self.check_type = CheckType.NONE
        self.win_cells: list[int] = []
        self.board = Board()

    def set_cell(self, index: int) -> bool:
        """Place the current player's mark in zero-based cell ``index``."""
        return self.board.set_cell(index + 1, self.current_player)

    def check(self) -> CheckType:
        """Work out whether X or O has won, the game is drawn, or it goes on."""
        cells = self.board.cells()
        for player_type, result in ((PlayerType.X, CheckType.X), (PlayerType.O, CheckType.O)):
            line = find_winning_line(cells, player_type.mark)
            if line is not None:
                self.win_cells = list(line)
                self.check_type = result
                return result
        self.check_type = CheckType.DRAW if self.board.is_full() else CheckType.NONE
        return self.check_type

    def switch_turn(self) -> Player:
        """Hand the turn to the other player and return them."""
        if self.current_player.type is PlayerType.X:
            self.current_player = self.player2
        else:
            self.current_player = self.player1
        return self.current_player