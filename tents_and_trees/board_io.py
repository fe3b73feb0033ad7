# reading and writing puzzles in the text format:
#
#  1202031        <- leading space, then one digit per column
# 1              <- row count, then one char per cell: T tree, X tent, . grass, ' ' unknown
# 2  T  T
# ...

from .errors import PuzzleFormatError
from .grid import Grid, CELLS


def parse_ascii_digit(c, where):
  if not ('0' <= c <= '9'):
    raise PuzzleFormatError(f"invalid ASCII digit {c!r} in {where}")
  return ord(c) - ord('0')

def parse_puzzle(text):
  lines = text.splitlines()
  if not lines:
    raise PuzzleFormatError("empty input")
  first = lines[0]
  if not first.isascii():
    raise PuzzleFormatError("first line is not ASCII")
  if not first.startswith(' '):
    raise PuzzleFormatError("top left corner is not a space")
  col_required = [parse_ascii_digit(c, "the column header") for c in first[1:]]
  dim = len(col_required)
  if dim == 0:
    raise PuzzleFormatError("column header has no counts")

  row_required, cells = [], []
  for i, line in enumerate(lines[1:]):
    if not line:
      raise PuzzleFormatError(f"line {i} is empty")
    if not line.isascii():
      raise PuzzleFormatError(f"line {i} is not ASCII")
    if len(line) != dim + 1:
      raise PuzzleFormatError(f"width != height in row {i} ({len(line) - 1} != {dim})")
    row_required.append(parse_ascii_digit(line[0], f"row {i}"))
    for x, c in enumerate(line[1:]):
      if c not in CELLS:
        raise PuzzleFormatError(f"invalid cell character {c!r} at row {i} col {x}")
      cells.append(c)
  if len(row_required) != dim:
    raise PuzzleFormatError(f"expected {dim} rows, got {len(row_required)}")
  return Grid(dim, cells, row_required, col_required)

def format_puzzle(grid):
  """render the grid in the same format parse_puzzle reads, using the required counts."""
  out = [' ' + ''.join(str(n) for n in grid.col_required)]
  for n, row in zip(grid.row_required, grid.rows()):
    out.append(str(n) + ''.join(row))
  return '\n'.join(out)

def print_board(grid, rowsums=None, colsums=None):
  # wide rendering for debugging: handles counts >= 10 and numbers the rows/cols
  rowsums = grid.row_required if rowsums is None else rowsums
  colsums = grid.col_required if colsums is None else colsums
  colnums = ''.join([f"{x%10}" for x in range(grid.dim)])
  print(f"cols:   {colnums}")
  colsumvals = ''.join([f"{int(x/10)}".replace('0',' ') for x in colsums])
  print(f"sum*10: {colsumvals}")
  colsumvals = ''.join([f"{x%10}" for x in colsums])
  print(f"sum* 1: {colsumvals}")
  for y, row in enumerate(grid.rows()):
    print(f"{y:>4} {rowsums[y]:>2} {''.join(row)}")
  print("")
