# errors raised by the tents and trees solver; the command line turns these
# into a printed message and exit status 1.

class TentsError(Exception):
  pass

class PuzzleFormatError(TentsError, ValueError):
  """the puzzle text or board dimensions are malformed."""

class ConfigError(TentsError, ValueError):
  """an environment setting is out of range."""

class UnsolvableError(TentsError):
  """every choice point was exhausted without reaching a solution."""

class SearchTimeout(TentsError):
  pass
