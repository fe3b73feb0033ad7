import pytest

from tents_and_trees.generator import generate_puzzle, can_place_tent
from tents_and_trees.grid import Grid, TREE, TENT, EMPTY
from tents_and_trees.pairing import check_solution
from tents_and_trees.search import solve


@pytest.mark.parametrize("seed", [0, 7, 42, 1234])
def test_generated_solution_is_valid(seed):
  puzzle, solution = generate_puzzle(7, 0.5, seed)
  assert check_solution(solution) == []
  assert puzzle.count(TREE) == solution.count(TREE) == solution.count(TENT)
  assert puzzle.count(TENT) == 0
  assert sum(puzzle.row_required) == sum(puzzle.col_required) == puzzle.count(TREE)
  assert puzzle.row_tents == puzzle.row_required

@pytest.mark.parametrize("seed", [0, 7, 42])
def test_generated_puzzle_solves(seed):
  puzzle, _ = generate_puzzle(6, 0.5, seed)
  assert check_solution(solve(puzzle)) == []

def test_same_seed_same_puzzle():
  a, _ = generate_puzzle(8, 0.4, 99)
  b, _ = generate_puzzle(8, 0.4, 99)
  assert a == b

def test_can_place_tent():
  board = Grid(3, [TENT, EMPTY, EMPTY,
                   EMPTY, EMPTY, EMPTY,
                   EMPTY, EMPTY, TREE], [1, 0, 0], [1, 0, 0])
  assert not can_place_tent(board, 1, 1)
  assert not can_place_tent(board, 2, 2)
  assert not can_place_tent(board, 3, 0)
  assert can_place_tent(board, 2, 0)
