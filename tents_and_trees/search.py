# depth-first backtracking search over the undecided cells.
#
# one mutable board plus an undo log instead of copying the board at every
# guess. the trail records every cell taken out of the frontier (as grass or
# as a tentative tent); choice_points holds the trail offset of each tentative
# tent. undoing a choice point reverts everything recorded after the tent back
# to empty and turns the tent itself into grass (tried and rejected).

import time

from .errors import UnsolvableError, SearchTimeout
from .grid import TREE, TENT, GRASS, EMPTY
from .pairing import is_one_tree_per_tent


class SearchEngine:

  def __init__(self, grid, check_pairing=True, timeout=None, debug=False):
    self.grid = grid
    self.check_pairing = check_pairing
    self.timeout = timeout
    self.debug = debug

    # tents given in the input: their neighbours can never be tents, for good
    for i, cell in enumerate(grid.cells):
      if cell == TENT:
        x, y = grid.xy(i)
        for nx, ny in grid.surrounding(x, y):
          if grid.get(nx, ny) == TENT:
            raise UnsolvableError(f"given tents at {y},{x} and {ny},{nx} touch")
          if grid.get(nx, ny) == EMPTY:
            grid.set(nx, ny, GRASS)

    self.tree_count = grid.count(TREE)
    self.tent_count = grid.count(TENT)
    self.todo = set(grid.empties())
    self.trail = []
    self.choice_points = []

    self.placements = 0
    self.backtracks = 0
    self.elapsed = 0.0

  def frontier_matches_board(self):
    return self.todo == set(self.grid.empties())

  def mark_grass(self, x, y, msg=None):
    cord = self.grid.index(x, y)
    if cord in self.todo:
      self.todo.remove(cord)
      self.trail.append(cord)
      self.grid.cells[cord] = GRASS
      if self.debug: print(f"placed grass on {y:2},{x:2}{(': '+msg) if msg else ''}")

  def place_tent(self, cord):
    """Make cord a tentative tent and propagate; False on a count contradiction."""
    grid = self.grid
    self.todo.remove(cord)
    self.choice_points.append(len(self.trail))
    self.trail.append(cord)
    grid.cells[cord] = TENT
    self.tent_count += 1
    self.placements += 1

    x, y = grid.xy(cord)
    if self.debug: print(f"placed  tent on {y:2},{x:2}")
    grid.col_tents[x] -= 1
    grid.row_tents[y] -= 1
    if grid.col_tents[x] < 0 or grid.row_tents[y] < 0:
      if self.debug: print(f"contradiction: row {y} or col {x} over its count")
      return False

    if grid.col_tents[x] == 0:
      for ny in range(grid.dim):
        self.mark_grass(x, ny, f"col {x} is filled with tents")
    if grid.row_tents[y] == 0:
      for nx in range(grid.dim):
        self.mark_grass(nx, y, f"row {y} is filled with tents")
    for nx, ny in grid.surrounding(x, y):
      self.mark_grass(nx, ny, f"around tent at {y:2},{x:2}")
    return True

  def backtrack(self):
    """Undo the latest choice point; False if there is none left."""
    if not self.choice_points:
      return False
    grid = self.grid
    offset = self.choice_points.pop()
    for cord in self.trail[offset+1:]:
      grid.cells[cord] = EMPTY
      self.todo.add(cord)
    del self.trail[offset+1:]

    # the tent stays on the trail as grass so an older choice point reverts it too
    cord = self.trail[offset]
    x, y = grid.xy(cord)
    grid.cells[cord] = GRASS
    grid.col_tents[x] += 1
    grid.row_tents[y] += 1
    self.tent_count -= 1
    self.backtracks += 1
    if self.debug: print(f"backtrack: tent at {y:2},{x:2} ruled out, {len(self.choice_points)} choice points left")
    return True

  def is_solved(self):
    grid = self.grid
    if self.todo or self.tent_count != self.tree_count:
      return False
    if any(grid.row_tents) or any(grid.col_tents):
      return False
    if self.check_pairing and not is_one_tree_per_tent(grid, self.debug):
      return False
    return True

  def check_deadline(self, start_ts):
    if self.timeout is not None and time.monotonic() - start_ts > self.timeout:
      raise SearchTimeout(f"no solution found within {self.timeout} secs "
                          f"({self.placements} placements, {self.backtracks} backtracks)")

  def run(self):
    """Search until solved; returns the grid or raises UnsolvableError."""
    start_ts = time.monotonic()
    try:
      while True:
        self.check_deadline(start_ts)
        consistent = True
        while self.todo:
          self.check_deadline(start_ts)
          # lowest index first, so traces are reproducible
          if not self.place_tent(min(self.todo)):
            consistent = False
            break
        if consistent and self.is_solved():
          return self.grid
        if not self.backtrack():
          raise UnsolvableError(f"no solution after {self.placements} placements "
                                f"and {self.backtracks} backtracks")
    finally:
      self.elapsed = time.monotonic() - start_ts


def solve(grid, check_pairing=True, timeout=None, debug=False):
  """Deduce the forced grass, then search. The grid is solved in place and returned."""
  grid.deduce_forced_grass()
  engine = SearchEngine(grid, check_pairing=check_pairing, timeout=timeout, debug=debug)
  return engine.run()
