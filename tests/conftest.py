import pytest

from tents_and_trees.board_io import parse_puzzle

# unique solution: D at 2,4 and C at 4,2 each have one free neighbour, which
# fills row 1, which leaves 1,0 for column 1 and 0,2 for the last tree.
FIVE = (
  " 12001\n"
  "1T    \n"
  "1     \n"
  "1 T  T\n"
  "0     \n"
  "1  T  \n"
)
FIVE_SOLVED = (
  " 12001\n"
  "1TX...\n"
  "1....X\n"
  "1XT..T\n"
  "0.....\n"
  "1.XT.."
)

SAMPLE = (
  " 1202031\n"
  "1       \n"
  "2  T  T \n"
  "1T      \n"
  "2T   T T\n"
  "1 T    T\n"
  "1       \n"
  "1    T  \n"
)
SAMPLE_SOLVED = (
  " 1202031\n"
  "1.....X.\n"
  "2X.TX.T.\n"
  "1T.....X\n"
  "2TX.XT.T\n"
  "1.T...XT\n"
  "1.X.....\n"
  "1....TX."
)

# column sums to 5, rows to 4
INCONSISTENT = (
  " 12002\n"
  "1T    \n"
  "1     \n"
  "1 T  T\n"
  "0     \n"
  "1  T  \n"
)

# both tents can only go next to the tree at 1,1; the tree at 3,3 can't get
# one. the counts all work out, the pairing doesn't.
SHARED_TREE = (
  " 0200\n"
  "1    \n"
  "0 T  \n"
  "1    \n"
  "0   T\n"
)
SHARED_TREE_COUNTS_ONLY = (
  " 0200\n"
  "1.X..\n"
  "0.T..\n"
  "1.X..\n"
  "0...T"
)


@pytest.fixture
def five():
  return parse_puzzle(FIVE)

@pytest.fixture
def sample():
  return parse_puzzle(SAMPLE)

@pytest.fixture
def inconsistent():
  return parse_puzzle(INCONSISTENT)

@pytest.fixture
def shared_tree():
  return parse_puzzle(SHARED_TREE)
