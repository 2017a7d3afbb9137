"""Grid walks, island comparison and most-probable paths."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterator, Sequence
from itertools import cycle, islice

_SPIRAL_DIRECTIONS = ((0, 1), (1, 0), (0, -1), (-1, 0))


def _spiral(row: int, col: int) -> Iterator[tuple[int, int]]:
    yield row, col
    length = 0
    for turn, (d_row, d_col) in enumerate(cycle(_SPIRAL_DIRECTIONS)):
        if turn % 2 == 0:
            length += 1
        for _ in range(length):
            row += d_row
            col += d_col
            yield row, col


def spiral_matrix_iii(rows: int, cols: int, r_start: int, c_start: int) -> list[list[int]]:
    """Return the cells of a grid in the order a clockwise spiral from the start visits them."""
    if rows <= 0 or cols <= 0:
        raise ValueError("grid must have at least one row and one column")
    if not (0 <= r_start < rows and 0 <= c_start < cols):
        raise ValueError("start cell lies outside the grid")
    inside = ((r, c) for r, c in _spiral(r_start, c_start) if 0 <= r < rows and 0 <= c < cols)
    return [[r, c] for r, c in islice(inside, rows * cols)]


def count_sub_islands(grid1: Sequence[Sequence[int]], grid2: Sequence[Sequence[int]]) -> int:
    """Count islands of ``grid2`` whose every cell is land in ``grid1``."""
    if len(grid1) != len(grid2) or any(len(a) != len(b) for a, b in zip(grid1, grid2)):
        raise ValueError("grids must have the same shape")
    rows = len(grid2)
    seen: set[tuple[int, int]] = set()
    count = 0
    for r, line in enumerate(grid2):
        cols = len(line)
        for c, cell in enumerate(line):
            if cell != 1 or (r, c) in seen:
                continue
            seen.add((r, c))
            queue = deque([(r, c)])
            inside = True
            while queue:
                cr, cc = queue.popleft()
                if grid1[cr][cc] != 1:
                    inside = False
                for nr, nc in ((cr + 1, cc), (cr - 1, cc), (cr, cc + 1), (cr, cc - 1)):
                    if (
                        0 <= nr < rows
                        and 0 <= nc < cols
                        and grid2[nr][nc] == 1
                        and (nr, nc) not in seen
                    ):
                        seen.add((nr, nc))
                        queue.append((nr, nc))
            count += inside
    return count


def max_probability(
    n: int,
    edges: Sequence[Sequence[int]],
    succ_prob: Sequence[float],
    start_node: int,
    end_node: int,
) -> float:
    """Return the highest product of edge probabilities on a path from
    ``start_node`` to ``end_node``, or 0.0 when none is found."""
    graph: list[list[tuple[int, float]]] = [[] for _ in range(n)]
    for (a, b), probability in zip(edges, succ_prob, strict=True):
        graph[a].append((b, probability))
        graph[b].append((a, probability))

    best = [0.0] * n
    heap = [(-1.0, -start_node)]
    while heap:
        neg_prob, neg_node = heapq.heappop(heap)
        prob, node = -neg_prob, -neg_node
        if node == end_node:
            break
        if prob < best[node]:
            continue
        for neighbour, edge_prob in graph[node]:
            candidate = prob * edge_prob
            if candidate > best[neighbour]:
                best[neighbour] = candidate
                heapq.heappush(heap, (-candidate, -neighbour))
    return best[end_node]