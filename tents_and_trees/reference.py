# enumerate every solution with python-constraint. much slower than the
# backtracking search, but written independently of it, so it serves as an
# oracle: tests compare against it and the command line uses it to say
# whether a puzzle's solution is unique.

from constraint import Problem, ExactSumConstraint, MaxSumConstraint, MinSumConstraint

from .grid import TREE, TENT, GRASS, EMPTY
from .pairing import is_one_tree_per_tent


def enumerate_solutions(grid, limit=None):
  """Return up to `limit` solved copies of grid (all of them when limit is None)."""
  board = grid.copy()
  board.deduce_forced_grass()
  variables = board.empties()

  # a tent already on the board pins its neighbours to grass
  for i, cell in enumerate(board.cells):
    if cell == TENT:
      x, y = board.xy(i)
      for nx, ny in board.surrounding(x, y):
        if board.get(nx, ny) == TENT:
          return []
        if board.get(nx, ny) == EMPTY:
          variables.remove(board.index(nx, ny))
          board.set(nx, ny, GRASS)

  if not variables:
    # nothing left to decide; python-constraint yields no solutions for an empty problem
    done = not any(board.row_tents) and not any(board.col_tents) and is_one_tree_per_tent(board)
    return [board] if done else []

  problem = Problem()
  names = {}
  for v in variables:
    x, y = board.xy(v)
    names[v] = f"y{y}x{x}"
    problem.addVariable(names[v], [0, 1])

  for y in range(board.dim):
    rowsum_vars = [names[board.index(x, y)] for x in range(board.dim) if board.index(x, y) in names]
    # more tents wanted than free cells
    if board.row_tents[y] > len(rowsum_vars):
      return []
    if rowsum_vars:
      problem.addConstraint(ExactSumConstraint(board.row_tents[y]), rowsum_vars)
  for x in range(board.dim):
    colsum_vars = [names[board.index(x, y)] for y in range(board.dim) if board.index(x, y) in names]
    if board.col_tents[x] > len(colsum_vars):
      return []
    if colsum_vars:
      problem.addConstraint(ExactSumConstraint(board.col_tents[x]), colsum_vars)

  # no two tents touch, diagonals included
  for v in variables:
    x, y = board.xy(v)
    for nx, ny in board.surrounding(x, y):
      w = board.index(nx, ny)
      if w > v and w in names:
        problem.addConstraint(MaxSumConstraint(1), [names[v], names[w]])

  # a tree without a tent next to it needs one
  for i, cell in enumerate(board.cells):
    if cell != TREE: continue
    x, y = board.xy(i)
    if board.adjacent(x, y, TENT): continue
    empty_neighbors = [names[board.index(nx, ny)] for nx, ny in board.orthogonal(x, y)
                       if board.index(nx, ny) in names]
    if not empty_neighbors:
      return []
    problem.addConstraint(MinSumConstraint(1), empty_neighbors)

  solutions = []
  for assignment in problem.getSolutionIter():
    soln_board = board.copy()
    for v, name in names.items():
      x, y = soln_board.xy(v)
      if assignment[name] == 1:
        soln_board.cells[v] = TENT
        soln_board.row_tents[y] -= 1
        soln_board.col_tents[x] -= 1
      else:
        soln_board.cells[v] = GRASS
    if not is_one_tree_per_tent(soln_board):
      continue
    solutions.append(soln_board)
    if limit is not None and len(solutions) >= limit:
      break
  return solutions
