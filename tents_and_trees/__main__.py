# command line: pick a puzzle (file, random or the built-in sample), solve it
# and verify the result. see config.py for the environment variables.
#
# test for errors (randomly)
# while [ 1 ]; do SIZE=8x8 python3 -m tents_and_trees > output.txt; status=$?; egrep 'SEED|success|oops' output.txt; if [ $status -ne 0 ]; then break; fi; done

import os, sys

from .board_io import parse_puzzle, format_puzzle, print_board
from .config import load_settings
from .errors import TentsError
from .generator import generate_puzzle
from .pairing import check_solution
from .reference import enumerate_solutions
from .search import SearchEngine

SAMPLE_PUZZLE = (
  " 1202031\n"
  "1       \n"
  "2  T  T \n"
  "1T      \n"
  "2T   T T\n"
  "1 T    T\n"
  "1       \n"
  "1    T  \n"
)

# the oracle enumerates every solution, only worth it on small boards
UNIQUENESS_MAX_DIM = 8


def load_puzzle(settings, stdin):
  expected = None
  if settings.puzzle == '-':
    puzzle = parse_puzzle(stdin.read())
  elif settings.puzzle:
    with open(settings.puzzle) as f:
      puzzle = parse_puzzle(f.read())
  elif settings.size:
    print(f"SEED={settings.seed}")
    puzzle, expected = generate_puzzle(settings.size, settings.density, settings.seed, settings.debug)
    print("solution:")
    print_board(expected)
  else:
    puzzle = parse_puzzle(SAMPLE_PUZZLE)
  return puzzle, expected

def main(environ=None, stdin=None):
  environ = os.environ if environ is None else environ
  stdin = sys.stdin if stdin is None else stdin
  try:
    settings = load_settings(environ)
    puzzle, expected = load_puzzle(settings, stdin)
  except (TentsError, OSError) as e:
    print(f"oops! {e}")
    return 1

  print(format_puzzle(puzzle))
  print("")
  board = puzzle.copy()
  board.deduce_forced_grass()
  if settings.debug:
    print("board after setup:")
    print_board(board)

  print("running the solver...")
  try:
    engine = SearchEngine(board, check_pairing=settings.pairing, timeout=settings.timeout, debug=settings.debug)
  except TentsError as e:
    print(f"oops! {e}")
    return 1
  try:
    engine.run()
  except TentsError as e:
    print(f"oops! {e} ({engine.elapsed:.2f} secs)")
    return 1
  print(format_puzzle(board))
  print("")
  print(f"{engine.placements} placements, {engine.backtracks} backtracks, {engine.elapsed:.2f} secs")

  errors = check_solution(board)
  if errors:
    print("\n".join(errors))
    print("oops! solver returned an invalid board")
    return 1

  if expected is not None:
    if board.cells == expected.cells:
      print("success! valid solution, and it matches.")
    else:
      print("success! valid solution, but it doesn't match (new solution)")
      print("expected:")
      print_board(expected)
  else:
    print("success! valid solution.")
  if puzzle.dim <= UNIQUENESS_MAX_DIM:
    n = len(enumerate_solutions(puzzle, limit=2))
    print("solution is unique." if n == 1 else "puzzle has more than one solution.")
  return 0


if __name__ == '__main__':
  sys.exit(main())
