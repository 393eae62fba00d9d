"""Maze walk -- the tile demo, in the terminal.

Demonstrates:
- Building a grid from strings and toggling tiles
- Searching with both neighbourhoods on the same grid
- Changing the heuristic multiplier between searches
- Reading g/f scores of the last search, as a HUD would

Run: python -m examples.maze
"""

import logging

from gridpath import Grid, GridPathfinder, Topology

MAZE = [
    "..........",
    ".########.",
    ".#......#.",
    ".#.####.#.",
    ".#.#..#.#.",
    ".#.#.##.#.",
    ".#.#....#.",
    ".#.######.",
    ".#........",
    ".#########",
]


def render(pf: GridPathfinder) -> str:
    grid = pf.grid
    on_path = set(pf.last_path or ())
    visited = pf.scores()
    lines = []
    for y in range(grid.height):
        row = []
        for x in range(grid.width):
            coord = (x, y)
            if coord == pf.start:
                row.append("S")
            elif coord == pf.goal:
                row.append("G")
            elif not grid.passable(coord):
                row.append("#")
            elif coord in on_path:
                row.append("*")
            elif coord in visited:
                row.append(":")
            else:
                row.append(".")
        lines.append("".join(row))
    return "\n".join(lines)


def run(pf: GridPathfinder, label: str) -> None:
    path = pf.find_path()
    print(f"--- {label} ---")
    if path is None:
        print("no path found")
    else:
        print(f"{len(path)} cells, cost {path.cost:.2f}, {len(pf.scores())} cells scored")
    print(render(pf))
    print()


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    grid = Grid.from_rows(MAZE)
    pf = GridPathfinder(grid)
    pf.start = (0, 9)
    pf.goal = (5, 4)

    run(pf, "von Neumann, multiplier 1")

    pf.heuristic_multiplier = 0.0
    run(pf, "von Neumann, multiplier 0 (uniform cost)")

    pf.heuristic_multiplier = 1.0
    pf.topology = Topology.MOORE
    run(pf, "Moore, multiplier 1")

    # Close the only way into the centre.
    pf.toggle((4, 5))
    run(pf, "Moore, entrance closed")

    info = pf.inspect((2, 2))
    print(f"HUD (2, 2): weight={info.weight} g={info.g} f={info.f}")


if __name__ == "__main__":
    main()
