# the mutable puzzle board: a flat list of cells addressed by x + y*dim,
# plus the tents still required per row and per column.

from .errors import PuzzleFormatError

EMPTY=' '
WALL='w'
TREE='T'
TENT='X'
GRASS='.'

CELLS = (TREE, TENT, GRASS, EMPTY)

SQUARE_NEIGHBOR_OFFSETS = [ [-1,0], [0,-1], [0,1], [1,0] ]
ALL_NEIGHBOR_OFFSETS = [ [-1,-1], [-1,0], [-1,1], [0,-1], [0,1], [1,-1], [1,0], [1,1] ]


class Grid:
  """Square tents-and-trees board.

  row_tents[y] and col_tents[x] are *remaining* counts: the required count
  minus the tents currently on the board in that row/column. The search keeps
  them up to date as it places and retracts tents. row_required and
  col_required never change and are what gets printed.
  """

  def __init__(self, dim, cells, row_required, col_required):
    cells = list(cells)
    if dim < 1:
      raise PuzzleFormatError(f"dim must be positive, not {dim}")
    if len(cells) != dim * dim:
      raise PuzzleFormatError(f"expected {dim*dim} cells for dim={dim}, got {len(cells)}")
    if len(row_required) != dim or len(col_required) != dim:
      raise PuzzleFormatError(f"expected {dim} row and column counts, got {len(row_required)} and {len(col_required)}")
    for i, cell in enumerate(cells):
      if cell not in CELLS:
        raise PuzzleFormatError(f"invalid cell {cell!r} at index {i}")
    for n in list(row_required) + list(col_required):
      if n < 0:
        raise PuzzleFormatError(f"tent counts must not be negative, got {n}")
    self.dim = dim
    self.cells = cells
    self.row_required = list(row_required)
    self.col_required = list(col_required)
    self.row_tents = list(row_required)
    self.col_tents = list(col_required)
    # pre-placed tents are already spent
    for i, cell in enumerate(cells):
      if cell == TENT:
        x, y = self.xy(i)
        self.row_tents[y] -= 1
        self.col_tents[x] -= 1
    for y in range(dim):
      if self.row_tents[y] < 0:
        raise PuzzleFormatError(f"row {y} has more tents than its count {self.row_required[y]}")
    for x in range(dim):
      if self.col_tents[x] < 0:
        raise PuzzleFormatError(f"col {x} has more tents than its count {self.col_required[x]}")

  def index(self, x, y):
    return x + y * self.dim

  def xy(self, index):
    return index % self.dim, index // self.dim

  def legal_cell(self, x, y):
    return 0 <= x < self.dim and 0 <= y < self.dim

  def get(self, x, y):
    return self.cells[x + y * self.dim]

  def set(self, x, y, cell):
    self.cells[x + y * self.dim] = cell

  def peek(self, x, y):
    if not self.legal_cell(x, y): return WALL
    return self.cells[x + y * self.dim]

  def orthogonal(self, x, y):
    for dy,dx in SQUARE_NEIGHBOR_OFFSETS:
      if self.legal_cell(x+dx, y+dy):
        yield x+dx, y+dy

  def surrounding(self, x, y):
    for dy,dx in ALL_NEIGHBOR_OFFSETS:
      if self.legal_cell(x+dx, y+dy):
        yield x+dx, y+dy

  def adjacent(self, x, y, celltype):
    return [(nx, ny) for nx, ny in self.orthogonal(x, y) if self.get(nx, ny) == celltype]

  def count(self, celltype):
    return self.cells.count(celltype)

  def empties(self):
    return [i for i, cell in enumerate(self.cells) if cell == EMPTY]

  def rows(self):
    return [self.cells[y*self.dim:(y+1)*self.dim] for y in range(self.dim)]

  def copy(self):
    grid = Grid.__new__(Grid)
    grid.dim = self.dim
    grid.cells = self.cells.copy()
    grid.row_required = self.row_required.copy()
    grid.col_required = self.col_required.copy()
    grid.row_tents = self.row_tents.copy()
    grid.col_tents = self.col_tents.copy()
    return grid

  def deduce_forced_grass(self):
    """Grass every empty cell that can never hold a tent.

    A tent must border a tree, so an empty cell with no orthogonal tree is
    grass. Independently, every empty cell in a row or column with no tents
    remaining is grass. Returns the number of cells changed; running it again
    changes nothing.
    """
    changed = 0
    for y in range(self.dim):
      for x in range(self.dim):
        if self.get(x, y) != EMPTY: continue
        if not self.adjacent(x, y, TREE):
          self.set(x, y, GRASS)
          changed += 1
    for x in range(self.dim):
      if self.col_tents[x] == 0:
        for y in range(self.dim):
          if self.get(x, y) == EMPTY:
            self.set(x, y, GRASS)
            changed += 1
    for y in range(self.dim):
      if self.row_tents[y] == 0:
        for x in range(self.dim):
          if self.get(x, y) == EMPTY:
            self.set(x, y, GRASS)
            changed += 1
    return changed

  def __eq__(self, other):
    if not isinstance(other, Grid):
      return NotImplemented
    return (self.dim == other.dim and self.cells == other.cells and
            self.row_required == other.row_required and self.col_required == other.col_required)

  def __repr__(self):
    return f"Grid(dim={self.dim}, trees={self.count(TREE)}, tents={self.count(TENT)}, empty={self.count(EMPTY)})"
