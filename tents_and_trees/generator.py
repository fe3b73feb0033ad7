# random puzzles: place trees and tents at the same time, so every puzzle is
# known to have at least one solution (the one we generated).

import random

from .grid import Grid, TREE, TENT, GRASS, EMPTY, SQUARE_NEIGHBOR_OFFSETS


def can_place_tent(board, x, y):
  if board.peek(x, y) != EMPTY: return False
  # check neighbors for other tents
  for nx, ny in board.surrounding(x, y):
    if board.get(nx, ny) == TENT: return False
  return True

def generate_puzzle(dim, density=0.5, seed=None, debug=False):
  """Returns (puzzle, solution): the puzzle holds only the trees, the solution
  also holds the generated tents, and both carry the same required counts."""
  rng = random.Random(seed)
  board = Grid(dim, [EMPTY] * (dim * dim), [0] * dim, [0] * dim)
  offsets = [list(offset) for offset in SQUARE_NEIGHBOR_OFFSETS]
  for y in range(dim):
    for x in range(dim):
      if board.get(x, y) == EMPTY:
        if rng.random() < density:
          rng.shuffle(offsets)
          for dy,dx in offsets:
            if can_place_tent(board, x+dx, y+dy):
              board.set(x+dx, y+dy, TENT)
              board.set(x, y, TREE)
              if debug:
                print(f"added TREE to {y},{x} and associated tent to {y+dy},{x+dx}")
              break

  rowsums = [0] * dim
  colsums = [0] * dim
  for y in range(dim):
    for x in range(dim):
      if board.get(x, y) == TENT:
        rowsums[y] += 1
        colsums[x] += 1

  solution_cells = [GRASS if cell == EMPTY else cell for cell in board.cells]
  solution = Grid(dim, solution_cells, rowsums, colsums)
  puzzle = Grid(dim, [TREE if cell == TREE else EMPTY for cell in board.cells], rowsums, colsums)
  return puzzle, solution
