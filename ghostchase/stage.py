"""Panel map of the stage: walls, gates and branch points."""

from __future__ import annotations

from enum import Enum, IntEnum
from pathlib import Path
from typing import ClassVar, Iterable, Optional, Union

from .config import GameError
from .objects import OBJECT_SIZE
from .vector import Vector2D

STAGE_ROWS = 31
STAGE_COLUMNS = 28
DEFAULT_STAGE_PATH = "Resource/Map/StageMap.csv"


class PanelID(Enum):
    WALL = 0
    BRANCH = 1
    GATE = 2
    NONE = 3


class AdjacentDirection(IntEnum):
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3


def _int_field(fields: list[str], index: int) -> int:
    try:
        return int(fields[index])
    except IndexError:
        raise ValueError(f"missing field {index} in stage line {','.join(fields)!r}") from None


class StageData:
    """A grid of panels, indexed as ``[row][column]``."""

    _instance: ClassVar[Optional["StageData"]] = None

    def __init__(self, data: list[list[PanelID]]) -> None:
        self._data = data

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "StageData":
        """Build the panel grid from stage map CSV lines.

        ``#`` and ``G`` lines (size x, size y, start x, start y) mark walls and
        gates along a row or column; ``B`` lines (x, y) mark a branch.
        Coordinates in the file start at 1. Other lines are ignored.
        """
        data = [[PanelID.NONE] * STAGE_COLUMNS for _ in range(STAGE_ROWS)]

        def mark(row: int, col: int, panel: PanelID) -> None:
            if not (0 <= row < STAGE_ROWS and 0 <= col < STAGE_COLUMNS):
                raise ValueError(f"panel ({col + 1}, {row + 1}) is outside the stage")
            data[row][col] = panel

        for line in lines:
            fields = line.rstrip("\r\n").split(",")
            mode = fields[0][:1]
            if mode in ("#", "G"):
                panel = PanelID.GATE if mode == "G" else PanelID.WALL
                x_size = _int_field(fields, 1)
                y_size = _int_field(fields, 2)
                x_start = _int_field(fields, 3) - 1
                y_start = _int_field(fields, 4) - 1
                if x_size == 1:
                    for row in range(y_start, y_start + y_size):
                        mark(row, x_start, panel)
                else:
                    for col in range(x_start, x_start + x_size):
                        mark(y_start, col, panel)
            elif mode == "B":
                x_start = _int_field(fields, 1) - 1
                y_start = _int_field(fields, 2) - 1
                mark(y_start, x_start, PanelID.BRANCH)
        return cls(data)

    @classmethod
    def load(cls, path: Union[str, Path] = DEFAULT_STAGE_PATH) -> "StageData":
        try:
            with open(path, encoding="utf-8") as handle:
                return cls.from_lines(handle)
        except OSError as exc:
            raise GameError(f"{path} cannot be opened") from exc

    @classmethod
    def get_instance(cls, path: Union[str, Path] = DEFAULT_STAGE_PATH) -> "StageData":
        """Return the shared stage, loading it from ``path`` on first use."""
        if cls._instance is None:
            cls._instance = cls.load(path)
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        cls._instance = None

    def all(self) -> list[list[PanelID]]:
        return [list(row) for row in self._data]

    def panel(self, i: int, j: int) -> PanelID:
        """Panel at row ``i`` and column ``j``; ``NONE`` outside the stage."""
        if 0 <= i < len(self._data) and 0 <= j < len(self._data[0]):
            return self._data[i][j]
        return PanelID.NONE

    def panel_at(self, location: Vector2D) -> PanelID:
        return self.panel(*self.to_index(location))

    def adjacent(self, i: int, j: int) -> dict[AdjacentDirection, PanelID]:
        """Panels next to row ``i``, column ``j``; ``NONE`` beyond the edges."""
        return {
            AdjacentDirection.UP: self.panel(i - 1, j),
            AdjacentDirection.DOWN: self.panel(i + 1, j),
            AdjacentDirection.LEFT: self.panel(i, j - 1),
            AdjacentDirection.RIGHT: self.panel(i, j + 1),
        }

    def adjacent_at(self, location: Vector2D) -> dict[AdjacentDirection, PanelID]:
        return self.adjacent(*self.to_index(location))

    @staticmethod
    def to_index(location: Vector2D) -> tuple[int, int]:
        """Return the (row, column) of the panel containing ``location``."""
        return int(location.y / OBJECT_SIZE), int(location.x / OBJECT_SIZE)