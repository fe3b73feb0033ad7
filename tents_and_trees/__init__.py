# solver for tents and trees: https://www.google.com/search?q=tents+and+trees+puzzle

from .errors import TentsError, PuzzleFormatError, ConfigError, UnsolvableError, SearchTimeout
from .grid import Grid, TREE, TENT, GRASS, EMPTY, WALL
from .board_io import parse_puzzle, format_puzzle, print_board
from .search import SearchEngine, solve
from .pairing import tree_tent_pairing, is_one_tree_per_tent, check_solution

__version__ = '0.2.0'
