"""Connected-region extraction via flood fill."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

import numpy as np

from hollows.environment.cell_types import CellState
from hollows.types import WorldTilePos

# Fixed neighbour order keeps member order reproducible.
CARDINAL_OFFSETS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(frozen=True)
class Region:
    """A maximal 4-connected group of cells sharing one state.

    Attributes:
        cell_state: State shared by every member.
        cells: Members in flood-fill (BFS) discovery order.
    """

    cell_state: CellState
    cells: tuple[WorldTilePos, ...]

    @property
    def size(self) -> int:
        return len(self.cells)

    def touches_border(self, map_width: int, map_height: int) -> bool:
        return any(
            x in (0, map_width - 1) or y in (0, map_height - 1) for x, y in self.cells
        )


def extract_regions(cells: np.ndarray, state: CellState) -> list[Region]:
    """Partition every cell holding ``state`` into maximal 4-connected regions.

    Cells are scanned in row-major order (y outer, x inner); each unvisited
    match seeds a breadth-first traversal. Regions come back in the order
    their first cell is met by the scan.
    """
    width, height = cells.shape
    matches = cells == state
    visited = np.zeros((width, height), dtype=bool, order="F")
    regions: list[Region] = []

    for y in range(height):
        for x in range(width):
            if visited[x, y] or not matches[x, y]:
                continue

            queue = deque([(x, y)])
            visited[x, y] = True
            members: list[WorldTilePos] = []
            while queue:
                cx, cy = queue.popleft()
                members.append((cx, cy))
                for dx, dy in CARDINAL_OFFSETS:
                    nx, ny = cx + dx, cy + dy
                    if (
                        0 <= nx < width
                        and 0 <= ny < height
                        and not visited[nx, ny]
                        and matches[nx, ny]
                    ):
                        visited[nx, ny] = True
                        queue.append((nx, ny))

            regions.append(Region(cell_state=state, cells=tuple(members)))

    return regions
