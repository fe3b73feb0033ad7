import io

from conftest import FIVE, FIVE_SOLVED, SAMPLE_SOLVED, INCONSISTENT, SHARED_TREE
from tents_and_trees.__main__ import main


def test_sample(capsys):
  assert main({}) == 0
  out = capsys.readouterr().out
  assert SAMPLE_SOLVED in out
  assert "success! valid solution." in out
  assert "solution is unique." in out

def test_puzzle_file(tmp_path, capsys):
  path = tmp_path / "five.txt"
  path.write_text(FIVE)
  assert main({'PUZZLE': str(path)}) == 0
  assert FIVE_SOLVED in capsys.readouterr().out

def test_puzzle_from_stdin(capsys):
  assert main({'PUZZLE': '-'}, io.StringIO(FIVE)) == 0
  assert FIVE_SOLVED in capsys.readouterr().out

def test_random_puzzle(capsys):
  assert main({'SIZE': '6x6', 'SEED': '42'}) == 0
  out = capsys.readouterr().out
  assert out.startswith("SEED=42\n")
  assert "success! valid solution" in out

def test_unsolvable(capsys):
  assert main({'PUZZLE': '-'}, io.StringIO(INCONSISTENT)) == 1
  assert "oops! no solution" in capsys.readouterr().out

def test_counts_only_result_fails_verification(capsys):
  assert main({'PUZZLE': '-', 'PAIRING': '0'}, io.StringIO(SHARED_TREE)) == 1
  out = capsys.readouterr().out
  assert "error: can't match trees and tents one-to-one." in out
  assert "oops! solver returned an invalid board" in out

def test_bad_config(capsys):
  assert main({'SIZE': '200x200'}) == 1
  assert "oops! WIDTH must be between 3 and 100, not 200" in capsys.readouterr().out

def test_bad_puzzle(capsys):
  assert main({'PUZZLE': '-'}, io.StringIO("1200\n")) == 1
  assert "oops! top left corner is not a space" in capsys.readouterr().out

def test_missing_file(tmp_path, capsys):
  assert main({'PUZZLE': str(tmp_path / "nope.txt")}) == 1
  assert "oops!" in capsys.readouterr().out

def test_given_tents_that_touch(capsys):
  assert main({'PUZZLE': '-'}, io.StringIO(" 11\n2XX\n0TT\n")) == 1
  assert "oops! given tents at 0,0 and 0,1 touch" in capsys.readouterr().out
