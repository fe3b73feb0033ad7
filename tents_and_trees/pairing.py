# checks that a filled board is a real solution, in particular that trees and
# tents can be matched one-to-one (row/column counts alone don't prove that).

from ortools.sat.python import cp_model

from .grid import TREE, TENT, EMPTY


def tree_tent_pairing(grid, debug=False):
  """Match every tree to a distinct orthogonally adjacent tent.

  Returns {tree index: tent index}, or None if the tree and tent counts
  differ or no such matching exists.
  """
  trees = [i for i, cell in enumerate(grid.cells) if cell == TREE]
  numtents = grid.count(TENT)
  if len(trees) != numtents:
    if debug: print(f"tree_tent_pairing: {len(trees)} trees but {numtents} tents")
    return None
  if not trees:
    return {}

  model = cp_model.CpModel()
  tent_for_tree_vars = []
  for tree in trees:
    x, y = grid.xy(tree)
    adjacent_tent_idxs = [grid.index(nx, ny) for nx, ny in grid.adjacent(x, y, TENT)]
    if len(adjacent_tent_idxs) == 0:
      if debug: print(f"tree_tent_pairing: tree@{y},{x} is missing a tent !")
      return None
    tent_for_tree_vars.append(model.new_int_var_from_domain(
      cp_model.Domain.from_values(adjacent_tent_idxs),
      f"t4T{tree}"))
  model.add_all_different(tent_for_tree_vars)

  solver = cp_model.CpSolver()
  # tiny model, called from inside the single-threaded search
  solver.parameters.num_workers = 1
  status = solver.solve(model)
  if status == cp_model.INFEASIBLE:
    if debug: print("tree_tent_pairing: can't match trees and tents")
    return None
  if status == cp_model.MODEL_INVALID:
    raise RuntimeError(f"tree_tent_pairing: invalid model: {model.validate()}")
  if status not in (cp_model.OPTIMAL, cp_model.FEASIBLE):
    raise RuntimeError(f"tree_tent_pairing: solver returned {solver.status_name(status)}")
  return {tree: solver.value(var) for tree, var in zip(trees, tent_for_tree_vars)}

def is_one_tree_per_tent(grid, debug=False):
  return tree_tent_pairing(grid, debug) is not None

def check_solution(grid):
  """Independently verify a solved board; returns a list of errors (empty when valid)."""
  numtrees = numtents = 0
  rowsums = [0] * grid.dim
  colsums = [0] * grid.dim
  errors = []
  for y in range(grid.dim):
    for x in range(grid.dim):
      cell = grid.get(x, y)
      if cell == TREE:
        numtrees += 1
      elif cell == TENT:
        numtents += 1
        rowsums[y] += 1
        colsums[x] += 1
        for nx, ny in grid.surrounding(x, y):
          # report each touching pair once
          if grid.get(nx, ny) == TENT and (ny, nx) > (y, x):
            errors.append(f"error: tents at {y},{x} and {ny},{nx} touch.")
      elif cell == EMPTY:
        errors.append(f"error: cell {y},{x} is still empty.")

  if numtrees != numtents:
    errors.append(f"error: {numtrees} trees but {numtents} tents.")
  for y in range(grid.dim):
    if rowsums[y] != grid.row_required[y]:
      errors.append(f"error: row {y} has {rowsums[y]} tents but expected {grid.row_required[y]}.")
  for x in range(grid.dim):
    if colsums[x] != grid.col_required[x]:
      errors.append(f"error: col {x} has {colsums[x]} tents but expected {grid.col_required[x]}.")
  if numtrees == numtents and not is_one_tree_per_tent(grid):
    errors.append("error: can't match trees and tents one-to-one.")
  return errors
